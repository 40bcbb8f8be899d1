"""
Title matching for the ``/search`` endpoint.

A query is compared against the title of every book record after
lowercasing both sides. ``find_exact()`` looks for a title equal to the
query; ``search()`` returns the record whose title has the smallest
Levenshtein distance to it. The distance is computed by ``rapidfuzz``
over Unicode code points with unit cost for insertions, deletions and
substitutions (no transpositions).

Ties are broken by input order: the first record reaching the minimum
distance is kept and later records with the same distance never
replace it.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from rapidfuzz.distance import Levenshtein

from .schemas import BookRecord, MatchResult


logger = logging.getLogger(__name__)


def fold(text: str) -> str:
    return text.lower()


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance between ``a`` and ``b``."""
    return Levenshtein.distance(a, b)


def find_exact(
    query: str, candidates: Sequence[BookRecord], title_field: str = "Title"
) -> Optional[BookRecord]:
    """Return the first record whose title equals ``query`` ignoring case."""
    folded = fold(query)
    return next((b for b in candidates if fold(b[title_field]) == folded), None)


def search(
    query: str, candidates: Sequence[BookRecord], title_field: str = "Title"
) -> MatchResult:
    """Find the record whose title is closest to ``query``.

    Parameters
    ----------
    query : str
        Free-text title as typed by the user.
    candidates : Sequence[BookRecord]
        Records to scan, in priority order.
    title_field : str
        Key holding the title in each record.

    Returns
    -------
    MatchResult
        The closest record and its distance, or an empty result with an
        infinite distance when ``candidates`` is empty.
    """
    if not candidates:
        return MatchResult()

    folded = fold(query)
    best: Optional[BookRecord] = None
    best_distance = math.inf

    for book in candidates:
        if best is None:
            distance = edit_distance(folded, fold(book[title_field]))
        else:
            # Anything above the cutoff comes back as cutoff + 1, which can
            # never beat the current best, so the kept distance stays exact.
            distance = Levenshtein.distance(
                folded, fold(book[title_field]), score_cutoff=int(best_distance)
            )
        if distance < best_distance:
            best, best_distance = book, distance
            if best_distance == 0:
                break

    return MatchResult(record=best, distance=best_distance)


def match_title(
    query: str, candidates: Sequence[BookRecord], title_field: str = "Title"
) -> MatchResult:
    """Resolve a search query: exact title first, closest title otherwise."""
    if not query:
        raise ValueError("query must be a non-empty string")

    exact = find_exact(query, candidates, title_field)
    if exact is not None:
        return MatchResult(record=exact, distance=0, exact=True)

    result = search(query, candidates, title_field)
    if result.found:
        logger.debug(
            "Closest title to %r is %r (distance %s)",
            query, result.record[title_field], result.distance,
        )
    return result

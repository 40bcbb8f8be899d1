"""
Pydantic schema definitions for the catalog module.

``Group`` and ``Catalog`` describe the static shelf layout: which
groups exist, which titles each one holds and where the group is
located. Both are frozen so the catalogue cannot change once it has
been loaded. Book records coming from the flat book list are kept as
plain dictionaries; their fields are returned to clients verbatim and
only the title field is ever inspected.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

BookRecord = Dict[str, Any]


class Group(BaseModel):
    """A named group of books sharing a physical location.

    ``books`` keeps the display order of the source and may contain
    the same title more than once.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    location: str
    books: Tuple[str, ...] = ()


class Catalog(BaseModel):
    """The full set of groups, in catalogue order."""

    model_config = ConfigDict(frozen=True)

    groups: Tuple[Group, ...] = ()

    def list_group_names(self) -> List[str]:
        return [g.name for g in self.groups]

    def find_group_by_name(self, name: str) -> Optional[Group]:
        """Return the first group whose name equals ``name`` exactly."""
        return next((g for g in self.groups if g.name == name), None)

    def find_group_containing_book(self, title: str) -> Optional[Group]:
        """Return the first group listing ``title`` (case-sensitive)."""
        return next((g for g in self.groups if title in g.books), None)


class MatchResult(BaseModel):
    """Outcome of a title search.

    ``record`` is ``None`` only when there were no candidates at all,
    in which case ``distance`` is infinite. ``exact`` tells whether the
    record came from the case-insensitive equality check rather than
    from the edit-distance scan.
    """

    record: Optional[BookRecord] = None
    distance: Union[int, float] = math.inf
    exact: bool = False

    @property
    def found(self) -> bool:
        return self.record is not None


class GroupBooks(BaseModel):
    groupName: str
    bookTitles: List[str] = Field(default_factory=list)


class BookLocation(BaseModel):
    location: str


class ErrorMessage(BaseModel):
    error: str

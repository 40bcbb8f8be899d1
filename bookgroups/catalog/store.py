"""
Data access for the catalogue API.

Two independent data sets back the service:

* the group catalogue (``groups.json``), loaded once when the
  application starts. A catalogue that cannot be read is fatal, so
  ``load_catalog()`` raises ``CatalogLoadError`` instead of returning
  an empty value.

* the flat book list (``books.json``), re-read on every search via
  ``BookRecordSource.load()``. Failures here only degrade searches to
  "no results" and are logged rather than raised.

The two files are not kept in sync: a title listed in a group may have
no book record and vice versa.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from pydantic import ValidationError

from .schemas import BookRecord, Catalog


logger = logging.getLogger(__name__)


class CatalogLoadError(RuntimeError):
    """Raised when the group catalogue cannot be loaded at startup."""


def load_catalog(path: Union[str, Path]) -> Catalog:
    """Load and validate the group catalogue.

    Parameters
    ----------
    path : Union[str, Path]
        JSON document of the form ``{"groups": [{"name", "location",
        "books"}, ...]}``.

    Returns
    -------
    Catalog
        The immutable catalogue, groups in file order.

    Raises
    ------
    CatalogLoadError
        If the file is missing, is not valid JSON or does not match the
        expected schema.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as exc:
        raise CatalogLoadError(f"Cannot read catalogue {path}: {exc}") from exc

    try:
        catalog = Catalog.model_validate(raw)
    except ValidationError as exc:
        raise CatalogLoadError(f"Invalid catalogue {path}: {exc}") from exc

    logger.info("Loaded %d groups from %s", len(catalog.groups), path)
    return catalog


class BookRecordSource:
    """The external flat list of book records.

    Every call to ``load()`` reads the file again, so edits to the file
    are visible to the next search without restarting the service.
    """

    def __init__(self, path: Union[str, Path], title_field: str = "Title") -> None:
        self.path = Path(path)
        self.title_field = title_field

    def load(self) -> List[BookRecord]:
        """Return the usable book records, or ``[]`` if the file is unusable."""
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw: Any = json.load(f)
        except (OSError, ValueError):
            logger.exception("Error reading books data from %s", self.path)
            return []

        if not isinstance(raw, list):
            logger.warning(
                "Books data in %s is a %s, expected a list", self.path, type(raw).__name__
            )
            return []

        records: List[BookRecord] = []
        for index, entry in enumerate(raw):
            if isinstance(entry, dict) and isinstance(entry.get(self.title_field), str):
                records.append(entry)
            else:
                logger.warning(
                    "Skipping book entry %d in %s: no %r string field",
                    index, self.path, self.title_field,
                )
        return records

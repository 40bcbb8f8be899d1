"""
Route definitions for the book group API.

Endpoints:
- GET  /                      : names of all groups, in catalogue order
- GET  /books/{groupName}     : titles held by one group
- GET  /book-location/{title} : location of the group holding a title
- GET  /search?title=         : exact (200) or closest (201) book record

The catalogue and the book list are taken from ``app.state`` through
dependencies, so tests can build an app around their own data.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from .matcher import match_title
from .schemas import BookLocation, Catalog, ErrorMessage, GroupBooks
from .store import BookRecordSource


logger = logging.getLogger(__name__)

router = APIRouter(tags=["catalog"])


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_book_source(request: Request) -> BookRecordSource:
    return request.app.state.book_source


@router.get("/", response_model=List[str])
def list_groups(catalog: Catalog = Depends(get_catalog)) -> List[str]:
    return catalog.list_group_names()


@router.get(
    "/books/{groupName}",
    response_model=GroupBooks,
    responses={404: {"model": ErrorMessage}},
)
def get_group_books(groupName: str, catalog: Catalog = Depends(get_catalog)):
    group = catalog.find_group_by_name(groupName)
    if group is None:
        return JSONResponse(status_code=404, content={"error": "Group not found"})
    return GroupBooks(groupName=group.name, bookTitles=list(group.books))


@router.get("/book-location/", response_class=PlainTextResponse, include_in_schema=False)
def get_book_location_missing_title():
    return PlainTextResponse("Bad request: Missing book title", status_code=400)


@router.get("/book-location/{title}", response_model=BookLocation)
def get_book_location(title: str, catalog: Catalog = Depends(get_catalog)):
    group = catalog.find_group_containing_book(title)
    if group is None:
        return PlainTextResponse("Book not found.", status_code=404)
    return BookLocation(location=group.location)


@router.get("/search")
def search_books(
    title: Optional[str] = Query(default=None, description="Book title, typos allowed"),
    source: BookRecordSource = Depends(get_book_source),
):
    """Look a book record up by title.

    An exact, case-insensitive title match is returned with status 200.
    Otherwise the record with the closest title is returned with status
    201, which tells the client the result is a suggestion.
    """
    logger.debug("Search term: %r", title)
    if not title:
        return PlainTextResponse("Bad request: Missing search term", status_code=400)

    books = source.load()
    result = match_title(title, books, source.title_field)
    if not result.found:
        return PlainTextResponse("No books found.", status_code=404)

    status_code = 200 if result.exact else 201
    return JSONResponse(status_code=status_code, content=result.record)

import json

import pytest
from fastapi.testclient import TestClient

from bookgroups.catalog.schemas import Catalog, Group
from bookgroups.catalog.store import BookRecordSource
from bookgroups.main import create_app


@pytest.fixture
def catalog():
    return Catalog(
        groups=(
            Group(
                name="Winnie the Pooh",
                location="Clock Tower",
                books=("Winnie-The-Pooh", "Winnie-The-Pooh", "When We Were Very Young"),
            ),
            Group(
                name="Brothers Grimm",
                location="Clock Tower",
                books=("The Sleeping Beauty", "Snow White"),
            ),
            Group(
                name="Adventure Stories",
                location="Wooden Crates",
                books=("Peter Pan", "Heidi", "Pinocchio"),
            ),
            Group(
                name="Nursery Rhymes",
                location="Book Cart",
                books=("Snow White",),
            ),
        )
    )


@pytest.fixture
def write_books(tmp_path):
    """Write a books file and return its path."""
    def _write(data, name="books.json"):
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_client(catalog, write_books):
    def _make(books):
        source = BookRecordSource(write_books(books))
        return TestClient(create_app(catalog=catalog, book_source=source))
    return _make


@pytest.fixture
def client(make_client):
    return make_client([
        {"Title": "The Little Prince", "Author": "Antoine de Saint-Exupéry"},
        {"Title": "Pinocchio", "Author": "Carlo Collodi"},
    ])

"""
Shared fixtures: every test gets its own data file under tmp_path.
"""
from __future__ import annotations

import pytest

from app import create_app
from catalog import Catalog
from stores.book_store import BookStore


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "data" / "books.json"


@pytest.fixture()
def store(data_file):
    return BookStore(data_file)


@pytest.fixture()
def catalog(store):
    return Catalog(store)


@pytest.fixture()
def client(store):
    app = create_app(store)
    app.config.update(TESTING=True)
    return app.test_client()


@pytest.fixture()
def book():
    return {
        "book_id": "b1",
        "title": "T",
        "author": "A",
        "genre": "G",
        "year": 2020,
        "copies": 3,
    }

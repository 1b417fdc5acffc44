# catalog.py
from __future__ import annotations
import logging
from typing import Any

from models.book import validate_book
from stores.book_store import BookStore

logger = logging.getLogger(__name__)

DELETED_MSG = "Book deleted successfully."


# ========== Errors ==========

class CatalogError(Exception):
    """A request the catalog refuses; the message is safe to show clients."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(CatalogError):
    pass


class DuplicateId(CatalogError):
    def __init__(self, message: str = "Book with the same ID already exists."):
        super().__init__(message)


class NotFound(CatalogError):
    def __init__(self, message: str = "Book not found."):
        super().__init__(message)


# ========== Catalog ==========

def _find_index(books: list[dict[str, Any]], book_id: str) -> int:
    for i, book in enumerate(books):
        if book.get("book_id") == book_id:
            return i
    raise NotFound()


class Catalog:
    """
    CRUD over the whole collection. Each call reloads the data file,
    applies one change and writes the file back.
    """

    def __init__(self, store: BookStore):
        self.store = store

    def create(self, payload: dict[str, Any]) -> dict[str, Any]:
        error = validate_book(payload)
        if error:
            logger.debug("Rejected new book: %s", error)
            raise InvalidInput(error)

        with self.store.transaction():
            books = self.store.load()
            if any(b.get("book_id") == payload["book_id"] for b in books):
                raise DuplicateId()

            book = dict(payload)
            books.append(book)
            self.store.save(books)

        logger.info("Created book %s", book["book_id"])
        return book

    def list_all(self) -> list[dict[str, Any]]:
        with self.store.transaction():
            return self.store.load()

    def get(self, book_id: str) -> dict[str, Any]:
        with self.store.transaction():
            books = self.store.load()
        return books[_find_index(books, book_id)]

    def update(self, book_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        """
        Shallow merge: supplied keys overwrite, the rest is kept.
        The merged book is validated before anything is written.
        """
        with self.store.transaction():
            books = self.store.load()
            i = _find_index(books, book_id)

            merged = {**books[i], **changes}
            error = validate_book(merged)
            if error:
                logger.debug("Rejected update of book %s: %s", book_id, error)
                raise InvalidInput(error)
            if merged["book_id"] != book_id:
                raise InvalidInput("book_id cannot be changed.")

            books[i] = merged
            self.store.save(books)

        logger.info("Updated book %s (%s)", book_id, ", ".join(sorted(changes)) or "no changes")
        return merged

    def delete(self, book_id: str) -> dict[str, str]:
        with self.store.transaction():
            books = self.store.load()
            del books[_find_index(books, book_id)]
            self.store.save(books)

        logger.info("Deleted book %s", book_id)
        return {"message": DELETED_MSG}

# stores/book_store.py
from __future__ import annotations
import os
import json
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator

from config import DATA_FILE

logger = logging.getLogger(__name__)


class BookStoreError(Exception):
    """Base class for persistence failures."""


class BookStoreCorrupted(BookStoreError):
    """The data file exists but does not hold a JSON list of books."""


class BookStoreWriteError(BookStoreError):
    """The collection could not be written back to disk."""


@dataclass(frozen=True)
class BookStore:
    path: Path  # e.g. Path(".../data.json")
    lock: threading.Lock = field(default_factory=threading.Lock, compare=False, repr=False)

    @classmethod
    def from_config(cls) -> "BookStore":
        return cls(DATA_FILE)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        # One load/mutate/save cycle at a time within this process
        with self.lock:
            yield

    def load(self) -> list[dict[str, Any]]:
        """
        Returns every stored book, in insertion order.
        A missing file is an empty collection; anything unreadable raises.
        """
        if not self.path.exists():
            return []

        try:
            raw = self.path.read_text(encoding="utf-8")
            books = json.loads(raw)
        except (OSError, ValueError) as e:
            logger.error("Error reading data file %s: %s", self.path, e)
            raise BookStoreCorrupted(f"Could not read data file {self.path.name}.") from e

        if not isinstance(books, list) or not all(isinstance(b, dict) for b in books):
            logger.error("Data file %s does not hold a list of books", self.path)
            raise BookStoreCorrupted(f"Data file {self.path.name} is not a list of books.")
        return books

    def save(self, books: list[dict[str, Any]]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(books, indent=2, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            if tmp.exists():
                tmp.unlink()
            logger.error("Error writing to data file %s: %s", self.path, e)
            raise BookStoreWriteError(f"Could not write data file {self.path.name}.") from e

# models/book.py
from __future__ import annotations
import math
from typing import Any

REQUIRED_FIELDS = ("book_id", "title", "author", "genre", "year", "copies")
NUMERIC_FIELDS = ("year", "copies")

MISSING_FIELDS_MSG = (
    f"All fields ({', '.join(REQUIRED_FIELDS)}) are required."
)
NOT_NUMBERS_MSG = "Year and copies must be numbers."


def is_number(value: Any) -> bool:
    # bool is an int subclass, but JSON true/false are not numbers
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    # NaN and Infinity parse, but can't be written back as valid JSON
    return math.isfinite(value)


def validate_book(candidate: dict[str, Any]) -> str | None:
    """
    Returns an error message if the book can't be stored, else None.
    Zero and empty values count as missing.
    """
    if any(not candidate.get(name) for name in REQUIRED_FIELDS):
        return MISSING_FIELDS_MSG
    if not all(is_number(candidate[name]) for name in NUMERIC_FIELDS):
        return NOT_NUMBERS_MSG
    return None

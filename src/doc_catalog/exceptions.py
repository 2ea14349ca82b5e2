from __future__ import annotations


class CatalogError(Exception):
    """Base class for doc-catalog errors."""


class OutOfRangeError(CatalogError, IndexError):
    def __init__(self, index: int, count: int):
        super().__init__(f"document index {index} out of range (catalog holds {count} documents)")
        self.index = index
        self.count = count


class InputFormatError(CatalogError, ValueError):
    """Raised by the console front-end for non-numeric input."""

    def __init__(self, raw: str):
        super().__init__(f"expected a number, got {raw!r}")
        self.raw = raw


__all__ = ["CatalogError", "OutOfRangeError", "InputFormatError"]

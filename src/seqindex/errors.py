from __future__ import annotations

from dataclasses import dataclass

from .index import Index


class SeqIndexError(Exception):
    """Base error."""


class MissingSourceError(SeqIndexError, TypeError):
    """Raised when the source sequence is None."""

    def __init__(self, name: str = "source") -> None:
        super().__init__(f"{name} must not be None")
        self.name = name


@dataclass(slots=True)
class IndexOutOfRangeError(SeqIndexError, IndexError):
    index: Index
    length: int | None = None
    message: str = "index has no corresponding element"

    def __str__(self) -> str:
        base = f"{self.index}: {self.message}"
        if self.length is not None:
            return f"{base} (length {self.length})"
        return base

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class Cursor(Generic[T]):
    """One-shot forward cursor over an iterator.

    ``index`` is the 0-based offset of ``current``; it is -1 before the first
    successful ``advance()``.
    """

    it: Iterator[T]
    index: int = -1
    current: T | None = None
    exhausted: bool = False

    def advance(self) -> bool:
        if self.exhausted:
            return False
        try:
            self.current = next(self.it)
        except StopIteration:
            self.exhausted = True
            self.current = None
            return False
        self.index += 1
        return True

    def skip_to(self, offset: int) -> bool:
        """Advance until ``current`` is the element at *offset*."""
        while self.index < offset:
            if not self.advance():
                return False
        return self.index == offset


@contextmanager
def acquire(source: Iterable[T]) -> Iterator[Cursor[T]]:
    """Open a cursor on *source* and close the underlying iterator on exit."""
    it = iter(source)
    try:
        yield Cursor(it)
    finally:
        close = getattr(it, "close", None)
        if close is not None:
            close()

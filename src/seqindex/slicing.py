from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar

from .cursor import Cursor, acquire
from .errors import MissingSourceError
from .index import Index, Range
from .window import TrailingWindow

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SliceView(Generic[T]):
    """Lazy view of the elements of *source* within *rng*.

    Nothing is read from the source until the view is iterated. Each call to
    ``iter()`` starts a fresh walk of the source; buffered state is never
    replayed.
    """

    __slots__ = ("source", "range")

    def __init__(self, source: Iterable[T], rng: Range) -> None:
        self.source = source
        self.range = rng

    def __iter__(self) -> Iterator[T]:
        if isinstance(self.source, Sequence):
            return _iter_direct(self.source, self.range)
        return _iter_single_pass(self.source, self.range)

    def __repr__(self) -> str:
        return f"SliceView({type(self.source).__name__}, {self.range})"


def slice_range(source: Iterable[T], rng: Range) -> SliceView[T]:
    """Return a lazy view of the elements of *source* in the half-open *rng*.

    A range with no elements, or one that falls outside the source, produces an
    empty view rather than an error.

    Raises:
        MissingSourceError: *source* is None.
    """
    if source is None:
        raise MissingSourceError("source")
    return SliceView(source, rng)


def _iter_direct(source: Sequence[T], rng: Range) -> Iterator[T]:
    n = len(source)
    first = rng.start.offset(n)
    last = rng.end.offset(n) - 1
    logger.debug("slicing %s by direct access: [%d, %d] of %d", rng, first, last, n)
    if first < 0 or last >= n:
        return
    for i in range(first, last + 1):
        yield source[i]


def _iter_single_pass(source: Iterable[T], rng: Range) -> Iterator[T]:
    start = rng.start
    if start.is_from_end and start.value == 0:
        # ^0 starts past the last element.
        return
    with acquire(source) as cur:
        if start.is_from_end:
            yield from _take_trailing(cur, start.value, rng.end)
        else:
            yield from _take_from(cur, start.value, rng.end)


def _take_trailing(cur: Cursor[T], s: int, end: Index) -> Iterator[T]:
    # Where the range begins is only known once the source is exhausted.
    window: TrailingWindow[T] = TrailingWindow(s)
    while cur.advance():
        window.push(cur.current)
    count = cur.index + 1
    if count < s:
        logger.debug("source had %d elements, fewer than %d", count, s)
        return

    first = count - s
    if end.is_from_end:
        last = count - end.value - 1
    else:
        last = end.value - 1
    if last >= count:
        logger.debug("range end %s is past the %d elements seen", end, count)
        return
    for _ in range(max(0, last - first + 1)):
        yield window.pop()


def _take_from(cur: Cursor[T], f: int, end: Index) -> Iterator[T]:
    if not cur.skip_to(f):
        return

    if not end.is_from_end:
        last = end.value - 1
        if last < f:
            return
        yield cur.current  # type: ignore[misc]
        while cur.index < last and cur.advance():
            yield cur.current  # type: ignore[misc]
        return

    t = end.value
    if t == 0:
        yield cur.current  # type: ignore[misc]
        while cur.advance():
            yield cur.current  # type: ignore[misc]
        return

    # Output lags input by t; whatever is still buffered at the end is trimmed.
    window: TrailingWindow[T] = TrailingWindow(t)
    while True:
        if window.full:
            yield window.pop()
        window.push(cur.current)  # type: ignore[arg-type]
        if not cur.advance():
            return

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TypeVar

from .cursor import acquire
from .errors import IndexOutOfRangeError, MissingSourceError
from .index import Index
from .window import TrailingWindow

logger = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D")

_MISSING = object()


def _resolve(source: Iterable[T], index: Index) -> object:
    """Return the element at *index*, or ``_MISSING`` when there is none."""
    if isinstance(source, Sequence):
        n = len(source)
        offset = index.offset(n)
        logger.debug("resolving %s by direct access (length %d)", index, n)
        if index.is_from_end and index.value == 0:
            return _MISSING
        if 0 <= offset < n:
            return source[offset]
        return _MISSING

    if not index.is_from_end:
        with acquire(source) as cur:
            if cur.skip_to(index.value):
                return cur.current
        logger.debug("source ended before offset %d", index.value)
        return _MISSING

    k = index.value
    if k == 0:
        return _MISSING

    logger.debug("resolving %s with a trailing window of %d", index, k)
    window: TrailingWindow[T] = TrailingWindow(k)
    with acquire(source) as cur:
        while cur.advance():
            window.push(cur.current)
    if window.full:
        return window.pop()
    logger.debug("source had %d elements, fewer than %d", len(window), k)
    return _MISSING


def element_at(source: Iterable[T], index: Index) -> T:
    """Return the element of *source* at *index*.

    Raises:
        MissingSourceError: *source* is None.
        IndexOutOfRangeError: *index* has no corresponding element.
    """
    if source is None:
        raise MissingSourceError("source")
    out = _resolve(source, index)
    if out is _MISSING:
        length = len(source) if isinstance(source, Sequence) else None
        raise IndexOutOfRangeError(index=index, length=length)
    return out  # type: ignore[return-value]


def element_at_or_default(source: Iterable[T], index: Index, default: D | None = None) -> T | D | None:
    """Like :func:`element_at`, but return *default* when *index* is out of range."""
    if source is None:
        raise MissingSourceError("source")
    out = _resolve(source, index)
    if out is _MISSING:
        return default
    return out  # type: ignore[return-value]

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from ..index import Index, Range

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Case:
    data: tuple[int, ...]
    index: Index
    rng: Range


def generate_cases(*, seed: int, count: int, max_len: int = 12) -> list[Case]:
    """Generate a deterministic list of (data, index, range) cases.

    Offsets are drawn a little past ``max_len`` so out-of-range lookups are
    covered as well. Range ends never resolve past the end of the data.
    """
    r = random.Random(seed)
    return [_gen_one(r, max_len) for _ in range(count)]


def _gen_index(r: random.Random, limit: int) -> Index:
    return Index(r.randint(0, limit), is_from_end=r.random() < 0.5)


def _gen_one(r: random.Random, max_len: int) -> Case:
    n = r.randint(0, max_len)
    data = tuple(r.randint(-99, 99) for _ in range(n))
    index = _gen_index(r, max_len + 2)
    start = _gen_index(r, max_len + 2)
    if r.random() < 0.5:
        end = Index.from_end(r.randint(0, max_len + 2))
    else:
        end = Index.from_start(r.randint(0, n))
    return Case(data=data, index=index, rng=Range(start, end))


def reference_element(data: Sequence[T], index: Index) -> tuple[bool, T | None]:
    """Oracle for element lookup built on plain list indexing."""
    if index.is_from_end and index.value == 0:
        return False, None
    offset = index.offset(len(data))
    if 0 <= offset < len(data):
        return True, data[offset]
    return False, None


def reference_slice(data: Sequence[T], rng: Range) -> list[T]:
    """Oracle for slicing, valid for ranges whose end resolves within the data."""
    n = len(data)
    first = rng.start.offset(n)
    stop = rng.end.offset(n)
    if first < 0 or stop > n or first >= stop:
        return []
    return list(data[first:stop])

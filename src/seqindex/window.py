from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class TrailingWindow(Generic[T]):
    """Fixed-capacity FIFO holding the most recent ``capacity`` elements pushed.

    Pushing into a full window silently drops the oldest element.
    """

    capacity: int
    _items: deque[T] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"window capacity must be positive, got {self.capacity}")
        self._items = deque(maxlen=self.capacity)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def full(self) -> bool:
        return len(self._items) == self.capacity

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the oldest element."""
        return self._items.popleft()

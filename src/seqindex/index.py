from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Index:
    """A position counted from the start or from the end of a sequence.

    From-start values are 0-based. From-end values are 1-based distances from
    one past the last element, so ``^1`` is the last element and ``^0`` never
    denotes an element.
    """

    value: int
    is_from_end: bool = False

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"index value must be non-negative, got {self.value}")

    @classmethod
    def from_start(cls, value: int) -> Index:
        return cls(value, is_from_end=False)

    @classmethod
    def from_end(cls, value: int) -> Index:
        return cls(value, is_from_end=True)

    @classmethod
    def start(cls) -> Index:
        return cls(0, is_from_end=False)

    @classmethod
    def end(cls) -> Index:
        return cls(0, is_from_end=True)

    @classmethod
    def parse(cls, text: str) -> Index:
        """Parse ``"3"`` or ``"^3"``."""
        s = text.strip()
        from_end = s.startswith("^")
        digits = s[1:] if from_end else s
        if not digits.isdigit():
            raise ValueError(f"invalid index: {text!r}")
        return cls(int(digits), is_from_end=from_end)

    def offset(self, length: int) -> int:
        """Absolute offset of this index in a sequence of *length* elements.

        The result is not bounds-checked and may be negative or past the end.
        """
        if self.is_from_end:
            return length - self.value
        return self.value

    def __str__(self) -> str:
        return f"^{self.value}" if self.is_from_end else str(self.value)


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open range [start, end) whose bounds are independent indexes."""

    start: Index = Index.start()
    end: Index = Index.end()

    @classmethod
    def all(cls) -> Range:
        return cls(Index.start(), Index.end())

    @classmethod
    def starting_at(cls, start: Index) -> Range:
        return cls(start, Index.end())

    @classmethod
    def ending_at(cls, end: Index) -> Range:
        return cls(Index.start(), end)

    @classmethod
    def parse(cls, text: str) -> Range:
        """Parse ``"a..b"`` where either side may be omitted (``"2.."``, ``"..^1"``)."""
        head, sep, tail = text.strip().partition("..")
        if not sep:
            raise ValueError(f"invalid range (missing '..'): {text!r}")
        start = Index.parse(head) if head.strip() else Index.start()
        end = Index.parse(tail) if tail.strip() else Index.end()
        return cls(start, end)

    def offset_and_length(self, length: int) -> tuple[int, int]:
        first = self.start.offset(length)
        stop = self.end.offset(length)
        if first < 0 or stop > length or first > stop:
            raise ValueError(f"range {self} is out of bounds for length {length}")
        return first, stop - first

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"

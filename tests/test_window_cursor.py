from __future__ import annotations

import pytest

from seqindex.cursor import acquire
from seqindex.testing import SinglePass
from seqindex.window import TrailingWindow


def test_window_keeps_most_recent_elements() -> None:
    w: TrailingWindow[int] = TrailingWindow(3)
    for x in range(5):
        w.push(x)
    assert w.full
    assert len(w) == 3
    assert [w.pop(), w.pop(), w.pop()] == [2, 3, 4]
    assert not w.full


def test_window_requires_positive_capacity() -> None:
    with pytest.raises(ValueError, match="positive"):
        TrailingWindow(0)


def test_cursor_tracks_offsets() -> None:
    with acquire([7, 8, 9]) as cur:
        assert cur.index == -1
        assert cur.advance() and cur.current == 7 and cur.index == 0
        assert cur.skip_to(2) and cur.current == 9
        assert not cur.advance()
        assert not cur.advance()
        assert cur.index == 2


def test_cursor_skip_past_end() -> None:
    with acquire(iter([1, 2])) as cur:
        assert not cur.skip_to(5)
        assert cur.exhausted


def test_acquire_releases_on_error() -> None:
    src = SinglePass(range(3))
    with pytest.raises(KeyError):
        with acquire(src) as cur:
            cur.advance()
            raise KeyError("stop")
    assert src.released == 1

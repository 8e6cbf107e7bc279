from __future__ import annotations

from .element import element_at, element_at_or_default
from .errors import IndexOutOfRangeError, MissingSourceError, SeqIndexError
from .index import Index, Range
from .slicing import SliceView, slice_range

__all__ = [
    "Index",
    "IndexOutOfRangeError",
    "MissingSourceError",
    "Range",
    "SeqIndexError",
    "SliceView",
    "element_at",
    "element_at_or_default",
    "slice_range",
]

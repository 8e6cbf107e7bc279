from __future__ import annotations

from .cases import Case, generate_cases, reference_element, reference_slice
from .sources import SinglePass

__all__ = [
    "Case",
    "SinglePass",
    "generate_cases",
    "reference_element",
    "reference_slice",
]

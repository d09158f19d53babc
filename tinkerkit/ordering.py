"""Ordering of optional values, where a missing value sorts first."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, TypeVar

T = TypeVar("T")


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare_ordered_option(a: Optional[T], b: Optional[T]) -> Ordering:
    """Compare two optional values; ``None`` is less than any present value.

    Raises ValueError when two present values cannot be ordered (such as NaN).
    """
    if a is None and b is None:
        return Ordering.EQUAL
    if b is None:
        return Ordering.GREATER
    if a is None:
        return Ordering.LESS
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    if a == b:
        return Ordering.EQUAL
    raise ValueError(f"values {a!r} and {b!r} cannot be ordered")
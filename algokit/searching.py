"""Searching in sequences: binary search with bounds, and linear search."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Any, Sequence


def binary_search(values: Sequence[Any], key: Any) -> bool:
    """Whether ``key`` occurs in the sorted sequence ``values``."""
    index = bisect_left(values, key)
    return index < len(values) and values[index] == key


def lower_bound(values: Sequence[Any], key: Any) -> int:
    """Index of the first element not less than ``key``."""
    return bisect_left(values, key)


def upper_bound(values: Sequence[Any], key: Any) -> int:
    """Index of the first element strictly greater than ``key``."""
    return bisect_right(values, key)


def frequency(values: Sequence[Any], key: Any) -> int:
    """Number of occurrences of ``key`` in the sorted sequence ``values``."""
    return upper_bound(values, key) - lower_bound(values, key)


def linear_search(values: Sequence[Any], key: Any) -> int | None:
    """Index of the first occurrence of ``key``, or None when absent."""
    return next((i for i, value in enumerate(values) if value == key), None)
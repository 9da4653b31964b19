"""Searching a sequence for a value, its maximum or its extremes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Optional, TypeVar

T = TypeVar("T")

__all__ = ["binary_search", "linear_search", "index_of_max", "min_max"]


def binary_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of target in the ascending sequence items, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = low + (high - low) // 2
        value = items[middle]
        if value == target:
            return middle
        if value > target:
            high = middle - 1
        else:
            low = middle + 1
    return None


def linear_search(items: Iterable[Any], target: Any) -> Optional[int]:
    """Return the index of the first item equal to target, or None."""
    for index, value in enumerate(items):
        if value == target:
            return index
    return None


def index_of_max(items: Iterable[Any]) -> int:
    """Return the index of the first occurrence of the largest item.

    Raises ValueError if items is empty.
    """
    best_index: Optional[int] = None
    best: Any = None
    for index, value in enumerate(items):
        if best_index is None or value > best:
            best_index, best = index, value
    if best_index is None:
        raise ValueError("index_of_max() of an empty sequence")
    return best_index


def min_max(items: Iterable[T]) -> tuple[T, T]:
    """Return (lowest, highest) of items in one pass.

    Raises ValueError if items is empty.
    """
    iterator = iter(items)
    try:
        low = high = next(iterator)
    except StopIteration:
        raise ValueError("min_max() of an empty sequence") from None
    for value in iterator:
        if value < low:
            low = value
        if value > high:
            high = value
    return low, high
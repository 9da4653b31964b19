"""Classic comparison and counting sorts.

Every function takes any iterable of comparable items and returns a new
sorted list in ascending order. The input is never modified.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "bubble_sort",
    "counting_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "selection_sort",
    "selection_sort_recursive",
]


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        # The last `done` elements are already in place.
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def counting_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value.

    Raises ValueError if any value is negative.
    """
    values = list(items)
    if any(value < 0 for value in values):
        raise ValueError("counting sort needs non-negative integers")
    counts = Counter(values)
    largest = max(values, default=0)
    return [value for value in range(largest + 1) for _ in range(counts[value])]


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly extracting its root."""
    result = list(items)
    n = len(result)
    for root in reversed(range(n // 2)):
        _sift_down(result, n, root)
    for end in reversed(range(n)):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    result: list[T] = []
    for key in items:
        position = len(result)
        while position > 0 and result[position - 1] > key:
            position -= 1
        result.insert(position, key)
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Sort by splitting in halves, sorting each and merging them."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:middle]), merge_sort(result[middle:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    """Lomuto partition around the last element; returns the pivot's index."""
    pivot = values[high]
    boundary = low - 1
    for i in range(low, high):
        if values[i] <= pivot:
            boundary += 1
            values[boundary], values[i] = values[i], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[T]) -> list[T]:
    """Sort by partitioning around the last element of each range."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(result, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return result


def selection_sort(items: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(items)
    n = len(result)
    for start in range(n - 1):
        smallest = min(range(start, n), key=result.__getitem__)
        if smallest != start:
            result[start], result[smallest] = result[smallest], result[start]
    return result


def selection_sort_recursive(items: Iterable[T]) -> list[T]:
    """Selection sort expressed recursively: place the minimum, then recurse."""

    def place_from(values: list[T], start: int) -> None:
        if start >= len(values):
            return
        smallest = start
        for j in range(start + 1, len(values)):
            if values[j] < values[smallest]:
                smallest = j
        values[start], values[smallest] = values[smallest], values[start]
        place_from(values, start + 1)

    result = list(items)
    place_from(result, 0)
    return result
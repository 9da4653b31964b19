"""Exhaustive searches: job assignment, 0/1 knapsack, equal partition, Hanoi."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "Assignment",
    "KnapsackResult",
    "Move",
    "assign",
    "knapsack",
    "partition_equal",
    "hanoi_moves",
]


@dataclass(frozen=True)
class Assignment:
    """Best assignment found: ``jobs[person]`` is the job given to person."""

    jobs: tuple[int, ...]
    cost: float


@dataclass(frozen=True)
class KnapsackResult:
    """Chosen item indices, their total value and weight, and subsets tried."""

    items: tuple[int, ...]
    value: float
    weight: float
    operations: int


@dataclass(frozen=True)
class Move:
    """Move one disk from one peg to another."""

    disk: int
    source: str
    target: str


def _swap_permutations(values: list[int], start: int) -> Iterator[tuple[int, ...]]:
    """Yield permutations in the order produced by swapping each position in turn."""
    if start == len(values) - 1:
        yield tuple(values)
        return
    for i in range(start, len(values)):
        values[start], values[i] = values[i], values[start]
        yield from _swap_permutations(values, start + 1)
        values[start], values[i] = values[i], values[start]


def assign(cost_matrix: Sequence[Sequence[float]]) -> Assignment:
    """Find the cheapest one-to-one assignment of people (rows) to jobs (columns).

    Every permutation is tried; of equally cheap ones the first found wins.
    Raises ValueError if the matrix is empty or not square.
    """
    size = len(cost_matrix)
    if size == 0:
        raise ValueError("cost matrix is empty")
    if any(len(row) != size for row in cost_matrix):
        raise ValueError("cost matrix must be square")

    best: Optional[Assignment] = None
    for jobs in _swap_permutations(list(range(size)), 0):
        cost = sum(row[job] for row, job in zip(cost_matrix, jobs))
        if best is None or cost < best.cost:
            best = Assignment(jobs, cost)
    assert best is not None
    return best


def knapsack(
    weights: Sequence[float], values: Sequence[float], capacity: float
) -> KnapsackResult:
    """Solve the 0/1 knapsack by trying every non-empty subset of items.

    A subset replaces the best so far only if it fits and is worth strictly
    more, so the first best subset in bit-mask order wins.
    Raises ValueError if weights and values differ in length.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")

    best = KnapsackResult((), 0, 0, 0)
    operations = 0
    for mask in range(1, 1 << len(weights)):
        operations += 1
        chosen = tuple(i for i in range(len(weights)) if mask >> i & 1)
        total_weight = sum(weights[i] for i in chosen)
        total_value = sum(values[i] for i in chosen)
        if total_weight <= capacity and total_value > best.value:
            best = KnapsackResult(chosen, total_value, total_weight, 0)
    return KnapsackResult(best.items, best.value, best.weight, operations)


def partition_equal(items: Sequence[int]) -> Optional[tuple[list[int], list[int]]]:
    """Split items into two lists of equal sum, or return None if impossible.

    Each list keeps the items' original order; subsets are tried in
    bit-mask order and the first match is returned.
    """
    total = sum(items)
    if total % 2 != 0 or not items:
        return None
    half = total // 2
    for mask in range(1, 1 << len(items)):
        first = [value for j, value in enumerate(items) if mask >> j & 1]
        second = [value for j, value in enumerate(items) if not mask >> j & 1]
        if sum(first) == sum(second) == half:
            return first, second
    return None


def hanoi_moves(
    disks: int, source: str = "A", target: str = "C", spare: str = "B"
) -> Iterator[Move]:
    """Yield the moves that carry a tower of disks from source to target."""
    if disks > 0:
        yield from hanoi_moves(disks - 1, source, spare, target)
        yield Move(disks, source, target)
        yield from hanoi_moves(disks - 1, spare, target, source)
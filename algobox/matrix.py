"""Matrix product, diagonal sum and a concentric rectangle pattern."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["multiply", "diagonal_sum", "concentric_rectangles"]


def multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the matrix product a x b.

    Raises ValueError if a's rows differ in length or a's column count
    does not match b's row count.
    """
    if not a:
        return []
    inner = len(a[0])
    if any(len(row) != inner for row in a):
        raise ValueError("rows of the first matrix differ in length")
    if len(b) != inner:
        raise ValueError("columns of the first matrix must match rows of the second")
    width = len(b[0]) if b else 0
    if any(len(row) != width for row in b):
        raise ValueError("rows of the second matrix differ in length")
    columns = list(zip(*b)) if b else []
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def diagonal_sum(matrix: Sequence[Sequence[float]]) -> float:
    """Sum the elements whose row and column indices are equal."""
    return sum(row[i] for i, row in enumerate(matrix) if i < len(row))


def concentric_rectangles(n: int) -> list[list[int]]:
    """Return the (2n-1)-square grid of nested rings counting down from n to 1."""
    if n <= 0:
        return []
    size = 2 * n - 1
    return [
        [n - min(i, size - 1 - i, j, size - 1 - j) for j in range(size)]
        for i in range(size)
    ]
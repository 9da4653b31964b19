"""Assorted small routines: clock addition, areas, swapping, hashing, a file write."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Union

__all__ = [
    "add_times",
    "square_or_circle_area",
    "swap",
    "polynomial_hash",
    "write_name",
]

Time = tuple[int, int, int]

HASH_BASE = 107
HASH_MODULUS = 10**9 + 7


def add_times(first: Time, second: Time) -> Time:
    """Add two (hours, minutes, seconds) clock times on a 24-hour clock.

    Seconds and minutes carry at most one unit into the next field.
    """
    h1, m1, s1 = first
    h2, m2, s2 = second
    minutes = hours = 0
    seconds = s1 + s2
    if seconds > 59:
        seconds %= 60
        minutes += 1
    minutes += m1 + m2
    if minutes > 59:
        minutes %= 60
        hours += 1
    hours += h1 + h2
    if hours > 23:
        hours %= 24
    return hours, minutes, seconds


def square_or_circle_area(n: int) -> tuple[str, Union[int, float]]:
    """Area of a square of side n if n is a multiple of 5, else of a circle of radius n.

    Returns the shape's name and its area; the circle uses pi as 3.14.
    """
    if n % 5 == 0:
        return "square", n * n
    return "circle", 3.14 * n * n


def swap(a, b):
    """Return the two values in exchanged order."""
    return b, a


def polynomial_hash(
    values: Iterable[int], base: int = HASH_BASE, modulus: int = HASH_MODULUS
) -> int:
    """Sum each value times base to the power of its position, modulo modulus."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    total = 0
    power = 1
    for value in values:
        total = (total + value * power) % modulus
        power = power * base % modulus
    return total


def write_name(path: Union[str, os.PathLike], name: str = "chris") -> int:
    """Write name at the start of path, creating it if needed.

    An existing file is not truncated, so any longer content after the
    written bytes stays. Returns the number of bytes written.
    """
    data = name.encode("utf-8")
    fd = os.open(path, os.O_CREAT | os.O_WRONLY, 0o777)
    try:
        return os.write(fd, data)
    finally:
        os.close(fd)
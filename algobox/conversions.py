"""Conversions between decimal integers and their binary digit forms."""

from __future__ import annotations

__all__ = ["binary_to_decimal", "decimal_to_binary"]


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of n as binary digits and return their value.

    Each digit is weighted by a power of two according to its position;
    the sign of n is kept.
    """
    sign = -1 if n < 0 else 1
    value = 0
    for position, digit in enumerate(reversed(str(abs(n)))):
        value += int(digit) << position
    return sign * value


def decimal_to_binary(n: int) -> str:
    """Return the binary digits of a positive n; empty for n of zero or below."""
    if n <= 0:
        return ""
    return format(n, "b")
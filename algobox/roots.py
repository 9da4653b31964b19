"""Square roots, n-th roots and the hypotenuse, with a command for the latter."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Sequence
from typing import Optional

__all__ = ["babylonian_sqrt", "nth_root", "integer_sqrt", "hypotenuse", "main"]

_LEADING_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def babylonian_sqrt(k: float, iterations: int = 100) -> float:
    """Approximate the square root of k by the Babylonian method, from k / 2."""
    if k < 0:
        raise ValueError("square root of a negative number")
    if k == 0:
        return 0.0
    estimate = k / 2
    for _ in range(iterations):
        estimate = estimate / 2 + k / (2 * estimate)
    return estimate


def _initial_guess(k: float, n: int) -> float:
    """Half below the smallest whole number whose n-th power reaches k."""
    whole = 0
    while whole**n < k:
        whole += 1
    return whole - 0.5


def nth_root(k: float, n: int = 2, tolerance: float = 1e-4) -> float:
    """Approximate the n-th root of k by Newton-Raphson.

    Iterates until x**n is within tolerance of k, or until the estimate
    stops changing. Raises ValueError for negative k or n below 1.
    """
    if n < 1:
        raise ValueError("root degree must be at least 1")
    if k < 0:
        raise ValueError("root of a negative number")
    if k == 0:
        return 0.0
    estimate = _initial_guess(k, n)
    while abs(k - estimate**n) >= tolerance:
        following = estimate - (estimate**n - k) / (n * estimate ** (n - 1))
        if following == estimate:
            break
        estimate = following
    return estimate


def integer_sqrt(n: int) -> int:
    """Return the square root of n rounded down."""
    if n < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(n)


def hypotenuse(a: float, b: float) -> float:
    """Return the hypotenuse of a right triangle with legs a and b."""
    return math.hypot(a, b)


def _leading_float(text: str) -> float:
    """Parse the longest numeric prefix of text, or 0.0 if there is none."""
    match = _LEADING_FLOAT.match(text)
    return float(match.group()) if match else 0.0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the hypotenuse of the two legs given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Not enough arguments!")
        return 0
    a, b = (_leading_float(arg) for arg in args[:2])
    print(f"The hypotenuse is: {hypotenuse(a, b):f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
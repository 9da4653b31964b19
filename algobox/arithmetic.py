"""Integer arithmetic: primes, factorials, Fibonacci numbers and digit tricks."""

from __future__ import annotations

import math
import random
from typing import Optional

__all__ = [
    "primes_up_to",
    "factorial",
    "factorial_recursive",
    "fibonacci",
    "even_fibonacci_sum",
    "is_armstrong",
    "factors",
    "gcd",
    "is_perfect",
    "digit_sum",
    "reverse_number",
    "alternating_square_sum",
    "is_leap_year",
    "is_prime",
    "is_prime_by_root",
    "random_grid",
]

EVEN_FIBONACCI_LIMIT = 40_000_000


def primes_up_to(n: int) -> list[int]:
    """Return every prime less than or equal to n, using the Sieve of Eratosthenes."""
    if n < 2:
        return []
    marked = [False] * (n + 1)
    candidate = 2
    while candidate * candidate <= n:
        if not marked[candidate]:
            for multiple in range(2 * candidate, n + 1, candidate):
                marked[multiple] = True
        candidate += 1
    return [value for value in range(2, n + 1) if not marked[value]]


def factorial(n: int) -> int:
    """Return n! exactly; raises ValueError for negative n."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    return math.prod(range(2, n + 1))


def factorial_recursive(n: int) -> int:
    """Return n! computed recursively; any n of zero or below gives 1."""
    if n <= 0:
        return 1
    return n * factorial_recursive(n - 1)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    if n < 0:
        raise ValueError("Fibonacci numbers need a non-negative index")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def even_fibonacci_sum(limit: int = EVEN_FIBONACCI_LIMIT) -> int:
    """Sum the even Fibonacci terms, stopping at the first term above limit.

    That first term beyond the limit is itself counted when it is even.
    """
    previous, current = 0, 1
    total = 0
    while True:
        previous, current = current, previous + current
        if current % 2 == 0:
            total += current
        if current > limit:
            return total


def is_armstrong(n: int) -> bool:
    """True if n equals the sum of its digits each raised to the digit count."""
    if n < 0:
        return False
    if n == 0:
        return True
    digits = str(n)
    power = len(digits)
    return n == sum(int(digit) ** power for digit in digits)


def factors(n: int) -> list[int]:
    """Return the positive divisors of n in ascending order; empty for n < 1."""
    return [i for i in range(1, n + 1) if n % i == 0]


def _truncated_remainder(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm with truncating remainder."""
    while b != 0:
        a, b = b, _truncated_remainder(a, b)
    return a


def is_perfect(n: int) -> bool:
    """True if n equals the sum of its divisors from 1 up to n // 2."""
    return n == sum(i for i in range(1, n // 2 + 1) if n % i == 0)


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of a positive n.

    Raises ValueError when n is not positive.
    """
    if n <= 0:
        raise ValueError("digit sum needs a positive number")
    return sum(int(digit) for digit in str(n))


def reverse_number(n: int) -> int:
    """Return n with its decimal digits reversed, keeping its sign."""
    reversed_abs = int(str(abs(n))[::-1])
    return -reversed_abs if n < 0 else reversed_abs


def alternating_square_sum(n: int) -> int:
    """Return 1 - 2*2 + 3*3 - 4*4 + ... up to the n-th term."""
    return sum(i * i if i % 2 else -i * i for i in range(1, n + 1))


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    return year % 400 == 0


def is_prime(n: int) -> bool:
    """Trial division by every number from 2 to n - 1.

    Numbers below 2 have no divisor in that range and so count as prime.
    """
    return all(n % i != 0 for i in range(2, n))


def is_prime_by_root(n: int) -> bool:
    """Trial division by every number from 2 up to the integer square root of n."""
    if n < 2:
        return False
    return all(n % i != 0 for i in range(2, math.isqrt(n) + 1))


def random_grid(
    rows: int, cols: int, rng: Optional[random.Random] = None
) -> list[list[int]]:
    """Return a rows x cols grid of random integers from 1 to 100."""
    if rows < 0 or cols < 0:
        raise ValueError("grid dimensions must not be negative")
    rng = rng or random.Random()
    return [[rng.randint(1, 100) for _ in range(cols)] for _ in range(rows)]
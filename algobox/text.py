"""Small text utilities: character classes, counting, palindromes, reversal."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "CharClass",
    "classify_char",
    "count_char",
    "is_palindrome",
    "reverse_line",
]


class CharClass(Enum):
    """The class an ASCII character falls into."""

    DIGIT = "digit"
    LOWER = "Alphabet small case"
    UPPER = "Alphabet capital case"
    SPECIAL = "Special Character"


def _require_single(ch: str) -> None:
    if len(ch) != 1:
        raise ValueError("expected exactly one character")


def classify_char(ch: str) -> CharClass:
    """Classify one character as an ASCII digit, lower or upper letter, or other."""
    _require_single(ch)
    if "0" <= ch <= "9":
        return CharClass.DIGIT
    if "a" <= ch <= "z":
        return CharClass.LOWER
    if "A" <= ch <= "Z":
        return CharClass.UPPER
    return CharClass.SPECIAL


def count_char(text: str, ch: str) -> int:
    """Count case-sensitive occurrences of the single character ch in text."""
    _require_single(ch)
    return text.count(ch)


def is_palindrome(text: str) -> bool:
    """True if text reads the same forwards and backwards."""
    return text == text[::-1]


def reverse_line(line: str) -> str:
    """Reverse a line of input, leaving out its trailing newline.

    Raises ValueError for an empty line.
    """
    content = line[:-1] if line.endswith("\n") else line
    if not content:
        raise ValueError("empty line")
    return content[::-1]
"""Chance games: die rolls, random numbers and a three-colour code breaker."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

__all__ = ["Score", "roll_die", "random_secret", "score_guess", "random_numbers"]

COLOURS = "rgb"
CODE_LENGTH = 3


@dataclass(frozen=True)
class Score:
    """Pegs in the right place, and right colours in the wrong place."""

    correct: int
    misplaced: int


def roll_die(sides: int, rng: Optional[random.Random] = None) -> int:
    """Roll a die with the given number of sides, returning 1 to sides."""
    if sides < 1:
        raise ValueError("a die needs at least one side")
    rng = rng or random.Random()
    return rng.randint(1, sides)


def random_secret(rng: Optional[random.Random] = None) -> str:
    """Return a random three-letter code over the colours r, g and b."""
    rng = rng or random.Random()
    return "".join(rng.choice(COLOURS) for _ in range(CODE_LENGTH))


def score_guess(guess: str, secret: str) -> Score:
    """Score a guess against the secret code.

    Exact matches are counted first; each remaining guess letter then
    pairs with at most one unused secret letter elsewhere.
    """
    if len(guess) != len(secret):
        raise ValueError("guess and secret must have the same length")
    used_guess = [g == s for g, s in zip(guess, secret)]
    used_secret = list(used_guess)
    correct = sum(used_guess)
    misplaced = 0
    for i, g in enumerate(guess):
        for j, s in enumerate(secret):
            if g == s and not used_guess[i] and not used_secret[j] and i != j:
                used_guess[i] = used_secret[j] = True
                misplaced += 1
    return Score(correct, misplaced)


def random_numbers(count: int = 10, rng: Optional[random.Random] = None) -> list[int]:
    """Return count random integers from 1 to 100."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng or random.Random()
    return [rng.randint(1, 100) for _ in range(count)]
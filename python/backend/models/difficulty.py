"""Difficulty levels and their scramble budgets."""

from __future__ import annotations

from enum import StrEnum


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def steps(self) -> int:
        """Number of random-walk moves used to scramble a new board."""
        return SCRAMBLE_STEPS[self]


SCRAMBLE_STEPS: dict[Difficulty, int] = {
    Difficulty.EASY: 20,
    Difficulty.MEDIUM: 50,
    Difficulty.HARD: 100,
}

from __future__ import annotations

import random
import typing as t
from dataclasses import dataclass

HIGHERLOWER_MIN = 1
HIGHERLOWER_MAX = 15

# Board sizes the Minehunter client offers for the day's seed
MINEHUNTER_DIFFICULTIES = {
    "easy": {"size": 10, "mines": 10},
    "medium": {"size": 15, "mines": 40},
    "hard": {"size": 25, "mines": 99},
}


@dataclass(frozen=True)
class RoundResult:
    next_number: int
    correct: bool

    def to_dict(self) -> dict:
        return {"nextNumber": self.next_number, "correct": self.correct}


def draw_number() -> int:
    return random.randint(HIGHERLOWER_MIN, HIGHERLOWER_MAX)


def next_round(current_number: float, guess: str, draw: t.Optional[int] = None) -> RoundResult:
    """
    Resolve one Higher/Lower guess against a fresh draw.
    A draw equal to the current number loses for both guesses.
    """
    next_number = draw_number() if draw is None else draw
    correct = (
        (guess == "higher" and next_number > current_number)
        or (guess == "lower" and next_number < current_number)
    )
    return RoundResult(next_number=next_number, correct=correct)

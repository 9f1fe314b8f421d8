"""Difficulty levels for the automated opponent."""

from __future__ import annotations

from enum import Enum
from typing import Union

from ..config import MEDIUM_RANDOM_CHANCE


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def level(self) -> int:
        return _LEVELS[self]

    @property
    def random_move_chance(self) -> float:
        """Probability that a turn is played by random selection."""

        return _RANDOM_CHANCES[self]

    @property
    def label(self) -> str:
        return self.value.upper()

    @classmethod
    def parse(cls, identifier: Union[str, int, "Difficulty"]) -> "Difficulty":
        """Look a difficulty up by name (any case) or level (1 to 3)."""

        if isinstance(identifier, Difficulty):
            return identifier
        if isinstance(identifier, int):
            for difficulty in cls:
                if difficulty.level == identifier:
                    return difficulty
        else:
            cleaned = identifier.strip().lower()
            if cleaned.isdigit():
                return cls.parse(int(cleaned))
            for difficulty in cls:
                if difficulty.value == cleaned:
                    return difficulty
        raise KeyError(f"unknown difficulty: {identifier!r}")


_LEVELS = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 2,
    Difficulty.HARD: 3,
}

_RANDOM_CHANCES = {
    Difficulty.EASY: 1.0,
    Difficulty.MEDIUM: MEDIUM_RANDOM_CHANCE,
    Difficulty.HARD: 0.0,
}

"""Automated opponent orchestration for tic-tac-toe."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..board import Mark
from .difficulty import Difficulty
from .search import select_move

if TYPE_CHECKING:  # pragma: no cover
    from ..game import Game


@dataclass
class AIOpponent:
    """Automates turns for a given mark and difficulty."""

    mark: Mark
    difficulty: Difficulty
    rng: random.Random

    def take_turn(self, game: "Game") -> bool:
        """Play one move if the game is live and it is this mark's turn."""

        if game.is_finished or game.current_player is not self.mark:
            return False

        index = select_move(game.board.snapshot(), self.mark, self.difficulty, rng=self.rng)
        game.place_mark(index)
        return True


def create_ai_opponent(
    difficulty: Difficulty, mark: Mark, rng: Optional[random.Random] = None
) -> AIOpponent:
    """Factory helper that seeds the opponent's RNG consistently."""

    return AIOpponent(mark=mark, difficulty=difficulty, rng=rng or random.Random())

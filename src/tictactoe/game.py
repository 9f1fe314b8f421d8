"""Game session: turn management, scoring and mode selection."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .ai.difficulty import Difficulty
from .board import (
    Board,
    IllegalMoveError,
    Line,
    Mark,
    Move,
    NoResult,
    Win,
    coord_to_index,
    index_to_coord,
)
from .config import ACTION_LOG_CAPACITY, BOARD_SIZE

LOGGER = logging.getLogger(__name__)


class GameMode(Enum):
    PVP = "pvp"
    PVC = "pvc"


@dataclass
class MoveResult:
    index: Move
    player: Mark
    produced_win: bool
    produced_draw: bool


@dataclass
class Scoreboard:
    """Wins per mark and draws for the current session."""

    wins: Dict[Mark, int] = field(default_factory=lambda: {mark: 0 for mark in Mark})
    draws: int = 0

    def record_win(self, mark: Mark) -> None:
        self.wins[mark] += 1

    def record_draw(self) -> None:
        self.draws += 1

    def summary(self) -> str:
        return f"X : {self.wins[Mark.X]}   O : {self.wins[Mark.O]}   Draw : {self.draws}"


@dataclass
class Game:
    """State manager for a tic-tac-toe session."""

    board: Board = field(default_factory=Board)
    mode: GameMode = GameMode.PVP
    difficulty: Difficulty = Difficulty.HARD
    human_mark: Mark = Mark.X
    current_player: Mark = Mark.X
    cursor: Move = BOARD_SIZE * BOARD_SIZE // 2
    last_move: Optional[MoveResult] = None
    info_message: Optional[str] = None
    winner: Optional[Mark] = None
    winning_line: Optional[Line] = None
    draw: bool = False
    score: Scoreboard = field(default_factory=Scoreboard)
    rng: random.Random = field(default_factory=random.Random)
    action_log: List[str] = field(default_factory=list)
    _log_capacity: int = ACTION_LOG_CAPACITY

    @classmethod
    def new(
        cls,
        mode: GameMode = GameMode.PVP,
        difficulty: Difficulty = Difficulty.HARD,
        *,
        human_mark: Mark = Mark.X,
        rng: Optional[random.Random] = None,
    ) -> "Game":
        return cls(mode=mode, difficulty=difficulty, human_mark=human_mark, rng=rng or random.Random())

    # ------------------------------------------------------------------
    # Move application
    # ------------------------------------------------------------------
    def place_at_cursor(self) -> MoveResult:
        """Attempt to place the current player's mark at the cursor."""

        return self.place_mark(self.cursor)

    def place_mark(self, index: Move) -> MoveResult:
        if self.is_finished:
            raise IllegalMoveError("the game is over, press R to play again")

        player = self.current_player
        outcome = self.board.place(index, player)
        produced_win = isinstance(outcome, Win)
        produced_draw = not produced_win and not isinstance(outcome, NoResult)

        result = MoveResult(
            index=index,
            player=player,
            produced_win=produced_win,
            produced_draw=produced_draw,
        )
        self.last_move = result
        self.info_message = None
        self._log_action(f"{self.player_label(player)} took {self.cell_label(index)}")

        if isinstance(outcome, Win):
            self.winner = outcome.mark
            self.winning_line = outcome.line
            self.score.record_win(outcome.mark)
            self._log_action(f"{self.player_label(outcome.mark)} wins")
            LOGGER.info("%s wins along %s", outcome.mark.value, outcome.line)
        elif produced_draw:
            self.draw = True
            self.score.record_draw()
            self._log_action("Draw")
            LOGGER.info("game drawn")
        else:
            self.current_player = player.opponent

        return result

    # ------------------------------------------------------------------
    # Cursor management
    # ------------------------------------------------------------------
    def move_cursor(self, delta_row: int, delta_col: int) -> Move:
        row, col = index_to_coord(self.cursor)
        new_row = (row + delta_row) % BOARD_SIZE
        new_col = (col + delta_col) % BOARD_SIZE
        self.cursor = coord_to_index(new_row, new_col)
        return self.cursor

    def set_cursor(self, index: Move) -> None:
        if not self.board.is_within_bounds(index):
            raise ValueError(f"cursor cell {index} is outside the board")
        self.cursor = index

    # ------------------------------------------------------------------
    # Mode and session helpers
    # ------------------------------------------------------------------
    @property
    def is_finished(self) -> bool:
        return self.winner is not None or self.draw

    @property
    def vs_computer(self) -> bool:
        return self.mode is GameMode.PVC

    @property
    def ai_mark(self) -> Optional[Mark]:
        """The mark played by the automated opponent, or ``None`` in PvP."""

        return self.human_mark.opponent if self.vs_computer else None

    @property
    def is_ai_turn(self) -> bool:
        return not self.is_finished and self.current_player is self.ai_mark

    def select_mode(self, mode: GameMode, difficulty: Optional[Difficulty] = None) -> None:
        """Switch between PvP and PvC and start a fresh game; the score is kept."""

        self.mode = mode
        if difficulty is not None:
            self.difficulty = difficulty
        self.reset()
        self._log_action(f"Mode: {self.mode_label()}")

    def mode_label(self) -> str:
        if not self.vs_computer:
            return "Player vs Player"
        return f"Player vs Computer ({self.difficulty.label})"

    def status_message(self) -> str:
        if self.winner:
            return f"Winner: {self.winner.value}"
        if self.draw:
            return "Draw!"
        return f"Turn: {self.current_player.value}"

    def player_label(self, player: Mark) -> str:
        if self.vs_computer:
            role = "You" if player is self.human_mark else "Computer"
            return f"{role} ({player.value})"
        return player.value

    @staticmethod
    def cell_label(index: Move) -> str:
        row, col = index_to_coord(index)
        return f"{chr(ord('A') + col)}{row + 1}"

    def reset(self) -> None:
        self.board.clear()
        self.current_player = Mark.X
        self.cursor = BOARD_SIZE * BOARD_SIZE // 2
        self.last_move = None
        self.info_message = None
        self.winner = None
        self.winning_line = None
        self.draw = False
        self.action_log.clear()
        self._log_action("New game")

    def _log_action(self, message: str) -> None:
        self.action_log.append(message)
        if len(self.action_log) > self._log_capacity:
            del self.action_log[0 : len(self.action_log) - self._log_capacity]

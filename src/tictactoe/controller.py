"""Controller responsible for interpreting user commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from .ai.difficulty import Difficulty
from .config import CELL_COUNT
from .game import Game, GameMode


class Command:
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    PLACE = "place"
    RESET = "reset"
    CELL_PREFIX = "cell:"
    MODE_PVP = "mode:pvp"
    MODE_EASY = "mode:easy"
    MODE_MEDIUM = "mode:medium"
    MODE_HARD = "mode:hard"


# Commands still accepted once the game is over.
_AFTER_GAME_COMMANDS = frozenset(
    {
        Command.RESET,
        Command.MODE_PVP,
        Command.MODE_EASY,
        Command.MODE_MEDIUM,
        Command.MODE_HARD,
    }
)


@dataclass
class Controller:
    """Translate symbolic commands into game actions."""

    game: Game

    def __post_init__(self) -> None:
        self._handlers: Dict[str, Callable[[], None]] = {
            Command.MOVE_UP: lambda: self.game.move_cursor(-1, 0),
            Command.MOVE_DOWN: lambda: self.game.move_cursor(1, 0),
            Command.MOVE_LEFT: lambda: self.game.move_cursor(0, -1),
            Command.MOVE_RIGHT: lambda: self.game.move_cursor(0, 1),
            Command.PLACE: self.game.place_at_cursor,
            Command.RESET: self.game.reset,
            Command.MODE_PVP: lambda: self.game.select_mode(GameMode.PVP),
            Command.MODE_EASY: lambda: self.game.select_mode(GameMode.PVC, Difficulty.EASY),
            Command.MODE_MEDIUM: lambda: self.game.select_mode(GameMode.PVC, Difficulty.MEDIUM),
            Command.MODE_HARD: lambda: self.game.select_mode(GameMode.PVC, Difficulty.HARD),
        }
        for index in range(CELL_COUNT):
            self._handlers[f"{Command.CELL_PREFIX}{index}"] = (
                lambda index=index: self._place_at(index)
            )

    def handle_input(self, command: str) -> None:
        if self.game.is_finished and command not in _AFTER_GAME_COMMANDS:
            return
        # The human may not act while the computer is thinking.
        if self.game.is_ai_turn and command not in _AFTER_GAME_COMMANDS:
            return

        handler = self._handlers.get(command)
        if handler is None:
            raise ValueError(f"unknown command: {command}")
        handler()

    def _place_at(self, index: int) -> None:
        self.game.place_mark(index)
        self.game.set_cursor(index)

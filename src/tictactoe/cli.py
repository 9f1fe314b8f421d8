"""Command-line entry point for the tic-tac-toe terminal game."""

from __future__ import annotations

import argparse
import logging
import random
import time
from typing import List, Optional

from . import config
from .ai import Difficulty, create_ai_opponent
from .board import Mark
from .controller import Command, Controller
from .game import Game, GameMode
from .ui import input as input_mod
from .ui.renderer import render

LOGGER = logging.getLogger("tictactoe.cli")

_KEY_COMMANDS = {
    "w": Command.MOVE_UP,
    "s": Command.MOVE_DOWN,
    "a": Command.MOVE_LEFT,
    "d": Command.MOVE_RIGHT,
    " ": Command.PLACE,
    "\r": Command.PLACE,
    "\n": Command.PLACE,
    "r": Command.RESET,
    "p": Command.MODE_PVP,
    "e": Command.MODE_EASY,
    "m": Command.MODE_MEDIUM,
    "h": Command.MODE_HARD,
    "q": "quit",
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe in the terminal.")
    parser.add_argument(
        "--mode",
        type=str.lower,
        default="pvp",
        choices=["pvp", "easy", "medium", "hard"],
        help="Play another human (pvp) or the computer at the given difficulty",
    )
    parser.add_argument(
        "--human",
        type=str.upper,
        default="X",
        choices=["X", "O"],
        help="Mark played by the human against the computer (X moves first)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer's random moves")
    parser.add_argument(
        "--ai-delay",
        type=float,
        default=config.AI_MOVE_DELAY,
        help="Seconds to wait before the computer moves",
    )
    parser.add_argument("--log-level", type=str, default="WARNING", help="Python logging level")
    return parser.parse_args(argv)


def build_game(args: argparse.Namespace) -> Game:
    rng = random.Random(args.seed)
    if args.mode == "pvp":
        return Game.new(GameMode.PVP, human_mark=Mark(args.human), rng=rng)
    return Game.new(
        GameMode.PVC,
        Difficulty.parse(args.mode),
        human_mark=Mark(args.human),
        rng=rng,
    )


def main(argv: Optional[List[str]] = None) -> None:  # pragma: no cover - interactive loop
    """Launch the interactive tic-tac-toe game."""

    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    game = build_game(args)
    controller = Controller(game)
    LOGGER.info("Starting tic-tac-toe: %s", game.mode_label())

    while True:
        _redraw(game)
        if game.is_ai_turn:
            time.sleep(max(args.ai_delay, 0.0))
            run_ai_turn(game)
            continue

        try:
            key = input_mod.get_key()
        except KeyboardInterrupt:
            return

        command = map_key_to_command(key)
        if command == "quit":
            return
        if command:
            try:
                controller.handle_input(command)
            except ValueError as exc:
                game.info_message = str(exc)


def map_key_to_command(key: Optional[str]) -> Optional[str]:
    if not key:
        return None
    if len(key) == 1 and "1" <= key <= "9":
        return f"{Command.CELL_PREFIX}{int(key) - 1}"
    return _KEY_COMMANDS.get(key.lower())


def run_ai_turn(game: Game) -> bool:
    """Let the computer move if it is due; return whether it moved."""

    ai_mark = game.ai_mark
    if ai_mark is None:
        return False
    opponent = create_ai_opponent(game.difficulty, ai_mark, rng=game.rng)
    return opponent.take_turn(game)


def _redraw(game: Game) -> None:  # pragma: no cover - terminal output
    print("\033[H\033[J", end="")  # Clear terminal
    print(render(game))


if __name__ == "__main__":  # pragma: no cover
    main()

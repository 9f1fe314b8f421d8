"""Tic-tac-toe engine with a minimax opponent and a terminal front end."""

from .ai import Difficulty, select_move
from .board import Board, Draw, Mark, NoResult, Win, evaluate

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Difficulty",
    "Draw",
    "Mark",
    "NoResult",
    "Win",
    "evaluate",
    "select_move",
]

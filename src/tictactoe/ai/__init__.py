"""Automated opponent utilities for tic-tac-toe."""

from .difficulty import Difficulty
from .opponent import AIOpponent, create_ai_opponent
from .search import (
    NoMovesError,
    ScoredMove,
    TerminalBoardError,
    clear_cache,
    minimax,
    pick_random,
    select_move,
)

__all__ = [
    "Difficulty",
    "AIOpponent",
    "create_ai_opponent",
    "NoMovesError",
    "ScoredMove",
    "TerminalBoardError",
    "clear_cache",
    "minimax",
    "pick_random",
    "select_move",
]

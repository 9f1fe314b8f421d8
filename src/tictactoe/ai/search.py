"""Move selection for the automated player: exhaustive minimax and random play."""

from __future__ import annotations

import functools
import logging
import random
from dataclasses import dataclass
from typing import Optional, Sequence

from ..board import (
    Cell,
    Cells,
    Mark,
    Move,
    NoResult,
    Win,
    apply_move,
    empty_cells,
    evaluate,
)
from ..config import DRAW_SCORE, LOSS_SCORE, WIN_SCORE
from .difficulty import Difficulty

LOGGER = logging.getLogger(__name__)

_MODULE_RNG = random.Random()


class TerminalBoardError(ValueError):
    """Raised when a move is requested for a board that is already decided."""


class NoMovesError(ValueError):
    """Raised when random selection is asked to pick from a full board."""


@dataclass(frozen=True)
class ScoredMove:
    """Best move for the side to move and its minimax score.

    ``index`` is ``None`` only for terminal boards, where nothing can be
    played.
    """

    index: Optional[Move]
    score: int


def select_move(
    cells: Sequence[Cell],
    ai_mark: Mark,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
) -> Move:
    """Return the cell the automated player should occupy next.

    Raises :class:`TerminalBoardError` when ``cells`` is already won or
    drawn. Medium flips a fresh coin on every call.
    """

    snapshot = tuple(cells)
    outcome = evaluate(snapshot)
    if not isinstance(outcome, NoResult):
        raise TerminalBoardError(f"cannot select a move on a finished board ({outcome})")

    rng = rng or _MODULE_RNG
    difficulty = Difficulty.parse(difficulty)
    chance = difficulty.random_move_chance
    if chance > 0.0 and rng.random() < chance:
        move = pick_random(snapshot, rng=rng)
        LOGGER.debug("%s (%s) picked random cell %d", ai_mark.value, difficulty.value, move)
        return move

    result = minimax(snapshot, ai_mark, ai_mark)
    assert result.index is not None  # non-terminal boards always yield a move
    LOGGER.debug(
        "%s (%s) searched cell %d with score %d",
        ai_mark.value,
        difficulty.value,
        result.index,
        result.score,
    )
    return result.index


def pick_random(cells: Sequence[Cell], rng: Optional[random.Random] = None) -> Move:
    """Choose uniformly among the empty cells."""

    candidates = empty_cells(cells)
    if not candidates:
        raise NoMovesError("no empty cells left to choose from")
    return (rng or _MODULE_RNG).choice(candidates)


def minimax(cells: Sequence[Cell], to_move: Mark, ai_mark: Mark) -> ScoredMove:
    """Score every reply down to the end of the game.

    ``ai_mark`` maximises and its opponent minimises. Terminal boards score
    ``WIN_SCORE``, ``LOSS_SCORE`` or ``DRAW_SCORE`` regardless of depth, so a
    quick win is not preferred over a slow one. Ties keep the lowest index.
    """

    return _minimax(tuple(cells), to_move, ai_mark)


@functools.lru_cache(maxsize=None)
def _minimax(cells: Cells, to_move: Mark, ai_mark: Mark) -> ScoredMove:
    outcome = evaluate(cells)
    if isinstance(outcome, Win):
        return ScoredMove(None, WIN_SCORE if outcome.mark is ai_mark else LOSS_SCORE)
    if not isinstance(outcome, NoResult):
        return ScoredMove(None, DRAW_SCORE)

    maximizing = to_move is ai_mark
    best: Optional[ScoredMove] = None
    for index in empty_cells(cells):
        child = _minimax(apply_move(cells, index, to_move), to_move.opponent, ai_mark)
        if best is None:
            best = ScoredMove(index, child.score)
        elif maximizing and child.score > best.score:
            best = ScoredMove(index, child.score)
        elif not maximizing and child.score < best.score:
            best = ScoredMove(index, child.score)

    assert best is not None
    return best


def clear_cache() -> None:
    """Drop memoised search results."""

    _minimax.cache_clear()


def cache_size() -> int:
    return _minimax.cache_info().currsize

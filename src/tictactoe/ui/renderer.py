"""Rendering helpers for the terminal UI."""

from __future__ import annotations

from typing import List

from ..board import Cell, Mark, coord_to_index
from ..config import BOARD_SIZE, EMPTY_CELL
from ..game import Game
from .status_box import StatusBox

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"
FG_CYAN = "\033[36m"
FG_YELLOW = "\033[33m"
FG_GREEN = "\033[32m"
FG_RED = "\033[31m"
FG_MAGENTA = "\033[35m"
FG_BLUE = "\033[34m"

STATUS_BOX = StatusBox()

TITLE = "TIC TAC TOE"
COL_LABELS = [chr(ord("A") + i) for i in range(BOARD_SIZE)]
ROW_SEPARATOR = "   ---+---+---"
CONTROLS = "Keys: W/A/S/D move | Space place | 1-9 cell | R restart | P PvP | E/M/H vs computer | Q quit"

_MARK_COLORS = {
    Mark.X: FG_RED,
    Mark.O: FG_BLUE,
}


def render(game: Game) -> str:
    lines: List[str] = []
    lines.extend(_render_hud(game))
    lines.append("")
    lines.extend(_render_board(game))
    lines.append("")
    lines.append(_render_controls_line())
    lines.extend(_render_status_box(game))
    return "\n".join(lines)


def _render_hud(game: Game) -> List[str]:
    info = game.info_message or "-"
    return [
        _color(TITLE, BOLD, FG_MAGENTA),
        _color(game.score.summary(), FG_YELLOW),
        _color(game.mode_label(), FG_CYAN),
        _color(game.status_message(), BOLD, FG_GREEN if game.is_finished else FG_CYAN),
        _color(f"Info: {info}", DIM),
    ]


def _render_board(game: Game) -> List[str]:
    rows: List[str] = ["    " + "   ".join(COL_LABELS)]
    winning = set(game.winning_line or ())
    for row in range(BOARD_SIZE):
        cells: List[str] = []
        for col in range(BOARD_SIZE):
            index = coord_to_index(row, col)
            text = _render_cell(game.board.cells[index])
            if index in winning:
                text = _color(_strip_cell(game.board.cells[index]), BOLD, REVERSE, FG_GREEN)
            if index == game.cursor and not game.is_finished:
                text = f"[{text}]"
            else:
                text = f" {text} "
            cells.append(text)
        rows.append(f"{row + 1:2d} " + "|".join(cells))
        if row < BOARD_SIZE - 1:
            rows.append(ROW_SEPARATOR)
    return rows


def _render_controls_line() -> str:
    return _color(CONTROLS, FG_CYAN)


def _render_status_box(game: Game) -> List[str]:
    box_lines = STATUS_BOX.render(game.action_log, len(CONTROLS) - 2)
    colored: List[str] = []
    for idx, line in enumerate(box_lines):
        if idx == 0 or idx == len(box_lines) - 1:
            colored.append(_color(line, BOLD))
        else:
            colored.append(_color(line, FG_YELLOW))
    return colored


def _render_cell(cell: Cell) -> str:
    if cell is None:
        return EMPTY_CELL
    return _color(cell.value, BOLD, _MARK_COLORS[cell])


def _strip_cell(cell: Cell) -> str:
    return EMPTY_CELL if cell is None else cell.value


def _color(text: str, *codes: str) -> str:
    if not codes:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{RESET}"

"""Board model and outcome evaluation for tic-tac-toe."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from .config import BOARD_SIZE, CELL_COUNT

Move = int
Line = Tuple[int, int, int]


class Mark(Enum):
    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


Cell = Optional[Mark]
Cells = Tuple[Cell, ...]

# Rows top-to-bottom, columns left-to-right, then the two diagonals. The
# order decides which line is reported when more than one is complete.
LINES: Tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class IllegalMoveError(ValueError):
    """Raised when a mark cannot be placed on the requested cell."""


@dataclass(frozen=True)
class NoResult:
    """The game continues."""


@dataclass(frozen=True)
class Draw:
    """Every cell is marked and no line is complete."""


@dataclass(frozen=True)
class Win:
    mark: Mark
    line: Line


Outcome = Union[NoResult, Win, Draw]

NO_RESULT = NoResult()
DRAW = Draw()


# ---------------------------------------------------------------------------
# Pure helpers over a cells snapshot
# ---------------------------------------------------------------------------
def evaluate(cells: Sequence[Cell]) -> Outcome:
    """Return the outcome of ``cells``.

    The first complete line in :data:`LINES` order wins. A board with no
    complete line and no empty cell is a :class:`Draw`; anything else is
    :class:`NoResult`.
    """

    for line in LINES:
        a, b, c = line
        mark = cells[a]
        if mark is not None and mark == cells[b] == cells[c]:
            return Win(mark=mark, line=line)
    if all(cell is not None for cell in cells):
        return DRAW
    return NO_RESULT


def empty_cells(cells: Sequence[Cell]) -> List[Move]:
    """Return the indices of empty cells in ascending order."""

    return [index for index, cell in enumerate(cells) if cell is None]


def is_terminal(cells: Sequence[Cell]) -> bool:
    return not isinstance(evaluate(cells), NoResult)


def apply_move(cells: Cells, index: Move, mark: Mark) -> Cells:
    """Return a new snapshot with ``mark`` placed at ``index``."""

    return cells[:index] + (mark,) + cells[index + 1 :]


def index_to_coord(index: Move) -> Tuple[int, int]:
    return divmod(index, BOARD_SIZE)


def coord_to_index(row: int, col: int) -> Move:
    return row * BOARD_SIZE + col


def parse_cells(text: str) -> Cells:
    """Build a snapshot from a 9-character string such as ``"XO_X__O__"``.

    ``X`` and ``O`` (any case) are marks; any other character is empty.
    """

    if len(text) != CELL_COUNT:
        raise ValueError(f"expected {CELL_COUNT} cells, got {len(text)}")
    lookup = {"X": Mark.X, "O": Mark.O}
    return tuple(lookup.get(ch.upper()) for ch in text)


# ---------------------------------------------------------------------------
# Mutable board owned by the game session
# ---------------------------------------------------------------------------
@dataclass
class Board:
    """The authoritative 3x3 grid held by a game session."""

    cells: List[Cell] = field(default_factory=lambda: [None] * CELL_COUNT)

    def __post_init__(self) -> None:
        if len(self.cells) != CELL_COUNT:
            raise ValueError(f"a board holds exactly {CELL_COUNT} cells")
        self.cells = list(self.cells)

    @staticmethod
    def is_within_bounds(index: Move) -> bool:
        return 0 <= index < CELL_COUNT

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def empty_cells(self) -> List[Move]:
        return empty_cells(self.cells)

    def snapshot(self) -> Cells:
        """Return an immutable copy of the cells for the core to read."""

        return tuple(self.cells)

    def outcome(self) -> Outcome:
        return evaluate(self.cells)

    def place(self, index: Move, mark: Mark) -> Outcome:
        """Place ``mark`` at ``index`` and return the resulting outcome.

        Raises :class:`IllegalMoveError` for out-of-range or occupied cells.
        """

        if not self.is_within_bounds(index):
            raise IllegalMoveError(f"cell {index} is outside the board")
        if self.cells[index] is not None:
            raise IllegalMoveError(f"cell {index + 1} is already taken")
        self.cells[index] = mark
        return self.outcome()

    def clear(self) -> None:
        for index in range(CELL_COUNT):
            self.cells[index] = None

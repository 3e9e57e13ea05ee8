"""
Game basics: cell encoding, serialization, winning lines, state classification.
Notes:
- The grid is a 3x3 int8 array: 0=empty, 1=X, 2=O. X always starts.
- Coordinates are 0-indexed here; the 1-indexed form lives at the Board API.
- A state is derived from the grid alone, never stored.
"""
from __future__ import annotations

from enum import Enum, IntEnum
from typing import List, NamedTuple, Tuple

import numpy as np

GRID_SIZE = 3
NB_CELLS = GRID_SIZE * GRID_SIZE
EMPTY = 0

Coord = Tuple[int, int]


class Mark(IntEnum):
    X = 1
    O = 2

    @property
    def other(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X

    def __str__(self) -> str:
        return self.name


class GameState(Enum):
    ONGOING = "Game not finished"
    DRAW = "Draw"
    X_WINS = "X wins"
    O_WINS = "O wins"
    IMPOSSIBLE = "Impossible"

    @property
    def meaning(self) -> str:
        return self.value

    @property
    def is_terminal(self) -> bool:
        return self is not GameState.ONGOING


class WinningLine(NamedTuple):
    mark: Mark
    cells: Tuple[Coord, Coord, Coord]


# rows, columns, then both diagonals
DIAGONALS: List[Tuple[Coord, Coord, Coord]] = [
    tuple((i, i) for i in range(GRID_SIZE)),
    tuple((i, GRID_SIZE - 1 - i) for i in range(GRID_SIZE)),
]
WIN_PATTERNS: List[Tuple[Coord, Coord, Coord]] = (
    [tuple((r, c) for c in range(GRID_SIZE)) for r in range(GRID_SIZE)]
    + [tuple((r, c) for r in range(GRID_SIZE)) for c in range(GRID_SIZE)]
    + DIAGONALS
)

SYMBOLS = {EMPTY: "_", Mark.X: "X", Mark.O: "O"}
_FROM_SYMBOL = {s: v for v, s in SYMBOLS.items()}


def empty_grid() -> np.ndarray:
    return np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)


def serialize_grid(grid: np.ndarray) -> str:
    return "".join(SYMBOLS[int(v)] for v in grid.flat)


def deserialize_grid(cells: str) -> np.ndarray:
    """Parse a row-major string of 9 X/O/_ characters into a grid.

    Raises KeyError on an unknown character and ValueError on a wrong length;
    callers wanting a friendlier error go through Board.from_cells.
    """
    if len(cells) != NB_CELLS:
        raise ValueError(f"expected {NB_CELLS} cells, got {len(cells)}")
    flat = [_FROM_SYMBOL[ch] for ch in cells]
    return np.array(flat, dtype=np.int8).reshape(GRID_SIZE, GRID_SIZE)


def get_piece_counts(grid: np.ndarray) -> Tuple[int, int]:
    return int(np.count_nonzero(grid == Mark.X)), int(np.count_nonzero(grid == Mark.O))


def find_winning_lines(grid: np.ndarray) -> List[WinningLine]:
    lines: List[WinningLine] = []
    for pattern in WIN_PATTERNS:
        values = {int(grid[r, c]) for r, c in pattern}
        if len(values) == 1:
            v = values.pop()
            if v != EMPTY:
                lines.append(WinningLine(Mark(v), pattern))
    return lines


def count_wins(lines: List[WinningLine]) -> int:
    """Number of winning lines, rows and columns each counted separately.

    Diagonals count at most once per mark, so X on both diagonals is a
    single win while X on a row and a column is two.
    """
    straight = sum(1 for line in lines if line.cells not in DIAGONALS)
    diagonal_marks = {line.mark for line in lines if line.cells in DIAGONALS}
    return straight + len(diagonal_marks)


def classify(grid: np.ndarray) -> GameState:
    x_count, o_count = get_piece_counts(grid)
    lines = find_winning_lines(grid)
    if count_wins(lines) > 1 or abs(x_count - o_count) > 1:
        return GameState.IMPOSSIBLE
    winners = {line.mark for line in lines}
    if Mark.O in winners:
        return GameState.O_WINS
    if Mark.X in winners:
        return GameState.X_WINS
    if x_count + o_count == NB_CELLS:
        return GameState.DRAW
    return GameState.ONGOING

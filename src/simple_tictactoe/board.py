"""
Board engine: owns the grid and the mark to move.

place_move is the only mutator. It either applies a placement fully or raises
a MoveError and leaves the board as it was. evaluate() recomputes the game
state from the grid on every call.
"""
from __future__ import annotations

import logging
import re
from typing import Tuple

import numpy as np

from .errors import (
    CellOccupiedError,
    GameOverError,
    InvalidBoardError,
    NotNumbersError,
    OutOfRangeError,
)
from .game_basics import (
    EMPTY,
    GRID_SIZE,
    NB_CELLS,
    SYMBOLS,
    GameState,
    Mark,
    classify,
    deserialize_grid,
    empty_grid,
    get_piece_counts,
    serialize_grid,
)

logger = logging.getLogger(__name__)

# optional sign, ASCII digits only
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_coordinates(raw: str) -> Tuple[int, int]:
    """Parse "row col" free text into two integers.

    Range is not checked here; that belongs to Board.place_move.
    """
    parts = raw.split()
    if len(parts) != 2 or not all(_INT_RE.fullmatch(p) for p in parts):
        raise NotNumbersError()
    return int(parts[0]), int(parts[1])


def _is_int(v: object) -> bool:
    return isinstance(v, (int, np.integer)) and not isinstance(v, bool)


class Board:
    def __init__(self) -> None:
        self._grid = empty_grid()
        self._to_move = Mark.X

    @classmethod
    def from_cells(cls, cells: str) -> "Board":
        """Load an arbitrary board from 9 row-major X/O/_ characters.

        The mark to move is X unless X already has more marks than O.
        No legality check is made; evaluate() reports corrupt boards as
        IMPOSSIBLE.
        """
        raw = cells.strip().upper()
        if len(raw) != NB_CELLS or any(ch not in "XO_" for ch in raw):
            raise InvalidBoardError(f"Invalid board string {cells!r}. Must be {NB_CELLS} chars of X/O/_.")
        board = cls()
        board._grid = deserialize_grid(raw)
        x_count, o_count = get_piece_counts(board._grid)
        board._to_move = Mark.X if x_count <= o_count else Mark.O
        return board

    @property
    def grid(self) -> np.ndarray:
        view = self._grid.view()
        view.flags.writeable = False
        return view

    @property
    def to_move(self) -> Mark:
        return self._to_move

    @property
    def cells(self) -> str:
        return serialize_grid(self._grid)

    def cell(self, row: int, col: int) -> str:
        self._check_coordinates(row, col)
        return SYMBOLS[int(self._grid[row - 1, col - 1])]

    def copy(self) -> "Board":
        other = Board()
        other._grid = self._grid.copy()
        other._to_move = self._to_move
        return other

    def is_empty(self, row: int, col: int) -> bool:
        self._check_coordinates(row, col)
        return bool(self._grid[row - 1, col - 1] == EMPTY)

    @staticmethod
    def _check_coordinates(row: object, col: object) -> None:
        if not (_is_int(row) and _is_int(col)):
            raise NotNumbersError()
        if not (1 <= row <= GRID_SIZE and 1 <= col <= GRID_SIZE):  # type: ignore[operator]
            raise OutOfRangeError()

    def place_move(self, row: int, col: int) -> GameState:
        """Put the mark to move at (row, col), 1-indexed, and flip the turn.

        Checks run in order: integers, range, empty cell, game not over.
        Returns the state after the placement.
        """
        self._check_coordinates(row, col)
        if not self.is_empty(row, col):
            raise CellOccupiedError()
        if self.evaluate().is_terminal:
            raise GameOverError()

        mark = self._to_move
        self._grid[row - 1, col - 1] = mark
        self._to_move = mark.other
        state = self.evaluate()
        logger.debug("placed %s at (%d, %d) -> %s", mark, row, col, state.meaning)
        return state

    def evaluate(self) -> GameState:
        return classify(self._grid)

    def __str__(self) -> str:
        return self.cells

    def __repr__(self) -> str:
        return f"Board(cells={self.cells!r}, to_move={self._to_move.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells and self._to_move == other._to_move

    __hash__ = None  # type: ignore[assignment]

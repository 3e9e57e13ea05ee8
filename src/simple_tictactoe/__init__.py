"""simple_tictactoe package.

Board engine, text rendering, a driver loop, and a small CLI.

Convenience imports are exposed for common workflows.
"""

from .board import Board, parse_coordinates
from .errors import (
    CellOccupiedError,
    GameOverError,
    InvalidBoardError,
    MoveError,
    NotNumbersError,
    OutOfRangeError,
)
from .game import run_game
from .game_basics import GameState, Mark
from .render import render

__all__ = [
    "Board",
    "GameState",
    "Mark",
    "parse_coordinates",
    "render",
    "run_game",
    "MoveError",
    "NotNumbersError",
    "OutOfRangeError",
    "CellOccupiedError",
    "GameOverError",
    "InvalidBoardError",
]

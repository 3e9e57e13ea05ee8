"""Exceptions raised when a move or a board is rejected."""
from __future__ import annotations


class MoveError(ValueError):
    """A placement was rejected; the board is left untouched."""

    message = "Invalid move!"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class NotNumbersError(MoveError):
    message = "You should enter numbers!"


class OutOfRangeError(MoveError):
    message = "Coordinates should be from 1 to 3!"


class CellOccupiedError(MoveError):
    message = "This cell is occupied! Choose another one!"


class GameOverError(MoveError):
    message = "Game is already over!"


class InvalidBoardError(ValueError):
    pass

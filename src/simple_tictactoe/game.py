"""
Driver loop: read a move, let the board validate it, print, repeat.

Invalid input is reported and the next line is read; the loop never recurses,
so a long run of bad input does not grow the stack.
"""
from __future__ import annotations

import logging
from typing import Optional, TextIO

from .board import Board, parse_coordinates
from .errors import MoveError
from .game_basics import GameState
from .render import render

logger = logging.getLogger(__name__)


def _write(stdout: TextIO, text: str) -> None:
    stdout.write(text + "\n")
    stdout.flush()


def play_move(board: Board, raw: str) -> GameState:
    row, col = parse_coordinates(raw)
    return board.place_move(row, col)


def run_game(stdin: TextIO, stdout: TextIO, board: Optional[Board] = None) -> GameState:
    """Play one game reading "row col" lines from stdin.

    Returns the terminal state, or ONGOING if stdin ran out first.
    """
    if board is None:
        board = Board()
    _write(stdout, render(board))

    state = board.evaluate()
    if state.is_terminal:
        _write(stdout, state.meaning)
        return state

    for line in stdin:
        try:
            state = play_move(board, line)
        except MoveError as e:
            logger.debug("rejected %r: %s", line.strip(), e)
            _write(stdout, str(e))
            continue
        _write(stdout, render(board))
        if state.is_terminal:
            logger.debug("game over: %s", state.meaning)
            _write(stdout, state.meaning)
            return state

    logger.warning("input ended before the game finished")
    return state

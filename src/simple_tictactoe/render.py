from __future__ import annotations

from typing import List

from .board import Board
from .game_basics import GRID_SIZE

BORDER = "-" * (2 * GRID_SIZE + 3)


def render_lines(board: Board) -> List[str]:
    cells = board.cells
    rows = [cells[i:i + GRID_SIZE] for i in range(0, len(cells), GRID_SIZE)]
    return [BORDER] + ["| " + " ".join(row) + " |" for row in rows] + [BORDER]


def render(board: Board) -> str:
    """Bordered text grid, empty cells shown as `_`."""
    return "\n".join(render_lines(board))

"""Read-only checks on finished grids."""

from __future__ import annotations

import numpy as np

from .backtracking import BOX_SIZE, GRID_SIZE

_DIGITS = np.arange(1, GRID_SIZE + 1)


def is_solved_grid(grid) -> bool:
    """Return True when every row, column and box is a permutation of 1-9."""
    try:
        board = np.asarray(grid, dtype=int)
    except (TypeError, ValueError):
        return False
    if board.shape != (GRID_SIZE, GRID_SIZE):
        return False

    boxes = (
        board.reshape(BOX_SIZE, BOX_SIZE, BOX_SIZE, BOX_SIZE)
        .swapaxes(1, 2)
        .reshape(GRID_SIZE, GRID_SIZE)
    )
    for units in (board, board.T, boxes):
        if not np.array_equal(np.sort(units, axis=1), np.tile(_DIGITS, (GRID_SIZE, 1))):
            return False
    return True

"""Sudoku solver using backtracking algorithm."""

from typing import List, Optional, Tuple
import copy
import logging

from ..errors import InitialConsistencyError, UnsolvableError


Grid = List[List[int]]

EMPTY = 0
GRID_SIZE = 9
BOX_SIZE = 3

logger = logging.getLogger(__name__)


def is_valid_placement(grid: Grid, row: int, col: int, num: int) -> bool:
    """
    Check if placing num at (row, col) is valid.

    The target cell itself is not compared, so the check also works for a
    cell that already holds ``num``.

    Args:
        grid: Current grid state
        row: Row index
        col: Column index
        num: Number to place (1-9)

    Returns:
        True if placement is valid, False otherwise
    """
    # Check row
    for c in range(GRID_SIZE):
        if c != col and grid[row][c] == num:
            return False

    # Check column
    for r in range(GRID_SIZE):
        if r != row and grid[r][col] == num:
            return False

    # Check 3x3 box
    box_row = row - row % BOX_SIZE
    box_col = col - col % BOX_SIZE

    for r in range(box_row, box_row + BOX_SIZE):
        for c in range(box_col, box_col + BOX_SIZE):
            if (r, c) != (row, col) and grid[r][c] == num:
                return False

    return True


def is_initially_valid(grid: Grid) -> bool:
    """Check existing givens are mutually consistent.

    Each given is emptied, re-checked against the rest of the board and put
    back before the result is looked at, so the grid is unchanged on return.
    """
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            num = grid[r][c]
            if num == EMPTY:
                continue
            grid[r][c] = EMPTY
            valid = is_valid_placement(grid, r, c, num)
            grid[r][c] = num
            if not valid:
                logger.debug("given %d at row %d col %d conflicts", num, r + 1, c + 1)
                return False
    return True


class SudokuSolver:
    """Solves Sudoku puzzles in place using backtracking."""

    def __init__(self):
        self.placements = 0

    def solve(self, grid: Grid) -> bool:
        """
        Fill every empty cell of grid.

        Args:
            grid: 9x9 list of lists with 0 for empty cells, mutated in place

        Returns:
            True if the grid is now solved. False if no completion exists, in
            which case every cell that was empty on entry is empty again.
        """
        self.placements = 0
        solved = self._solve_recursive(grid, 0)
        logger.debug("search %s after %d placements",
                     "succeeded" if solved else "exhausted", self.placements)
        return solved

    def _solve_recursive(self, grid: Grid, start: int) -> bool:
        """Recursively solve the puzzle, scanning from cell index start."""
        empty = self._find_empty_cell(grid, start)
        if not empty:
            return True

        row, col = empty

        for num in range(1, GRID_SIZE + 1):
            if is_valid_placement(grid, row, col, num):
                grid[row][col] = num
                self.placements += 1

                if self._solve_recursive(grid, row * GRID_SIZE + col + 1):
                    return True

                grid[row][col] = EMPTY

        return False

    def _find_empty_cell(self, grid: Grid, start: int = 0) -> Optional[Tuple[int, int]]:
        """
        Find the next empty cell in row-major order.

        Args:
            grid: Current grid state
            start: Flat cell index (row * 9 + col) to start scanning from

        Returns:
            Tuple of (row, col) if empty cell found, None otherwise
        """
        for idx in range(start, GRID_SIZE * GRID_SIZE):
            r, c = divmod(idx, GRID_SIZE)
            if grid[r][c] == EMPTY:
                return (r, c)
        return None


def solve(grid: Grid) -> bool:
    """Convenience function to solve a Sudoku grid in place."""
    solver = SudokuSolver()
    return solver.solve(grid)


def solve_puzzle(grid: Grid) -> Grid:
    """Validate and solve a copy of grid, leaving the parsed grid untouched.

    Raises:
        InitialConsistencyError: two givens already clash.
        UnsolvableError: the search found no completion.
    """
    work = copy.deepcopy(grid)
    if not is_initially_valid(work):
        raise InitialConsistencyError()
    if not solve(work):
        raise UnsolvableError()
    return work

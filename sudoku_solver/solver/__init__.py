"""Solver module exports."""

from .backtracking import (
    EMPTY,
    GRID_SIZE,
    Grid,
    SudokuSolver,
    is_initially_valid,
    is_valid_placement,
    solve,
    solve_puzzle,
)
from .verify import is_solved_grid

__all__ = [
    "EMPTY",
    "GRID_SIZE",
    "Grid",
    "SudokuSolver",
    "is_initially_valid",
    "is_solved_grid",
    "is_valid_placement",
    "solve",
    "solve_puzzle",
]

"""Render grids for the terminal and for JSON responses."""

from __future__ import annotations

from ..solver.backtracking import EMPTY, Grid
from .parser import EMPTY_CHAR


def format_cell(value: int) -> str:
    return EMPTY_CHAR if value == EMPTY else str(value)


def grid_to_rows(grid: Grid) -> list[list[str]]:
    return [[format_cell(value) for value in row] for row in grid]


def format_grid(grid: Grid) -> str:
    """Nine lines of space-separated cells, each ending with a newline."""
    return "".join(" ".join(row) + "\n" for row in grid_to_rows(grid))

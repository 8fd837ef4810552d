"""Board text parsing and formatting."""

from .formatter import format_cell, format_grid, grid_to_rows
from .parser import EMPTY_CHAR, parse_cell, parse_rows, row_from_cells

__all__ = [
    "EMPTY_CHAR",
    "format_cell",
    "format_grid",
    "grid_to_rows",
    "parse_cell",
    "parse_rows",
    "row_from_cells",
]

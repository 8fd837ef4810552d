"""Turn puzzle rows such as ``53..7....`` into a grid."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from ..errors import ArgumentCountError, InvalidCharacterError, RowLengthError
from ..solver.backtracking import EMPTY, GRID_SIZE, Grid

EMPTY_CHAR = "."
_DIGIT_CHARS = "123456789"


def parse_cell(char: str) -> int:
    """Map ``.`` to EMPTY and ``1``-``9`` to ints; anything else is a ValueError."""
    if char == EMPTY_CHAR:
        return EMPTY
    if len(char) == 1 and char in _DIGIT_CHARS:
        return int(char)
    raise ValueError(f"not a cell character: {char!r}")


def parse_rows(rows: Sequence[str]) -> Grid:
    """
    Parse nine row strings into a 9x9 grid.

    Args:
        rows: Row strings, top to bottom, each nine characters of ``.`` or 1-9

    Returns:
        9x9 list of lists with 0 for empty cells

    Raises:
        ArgumentCountError: not exactly nine rows
        RowLengthError: a row is not nine characters long
        InvalidCharacterError: a character is neither ``.`` nor a digit 1-9
    """
    if len(rows) != GRID_SIZE:
        raise ArgumentCountError(len(rows))

    grid: Grid = []
    for r, text in enumerate(rows):
        if len(text) != GRID_SIZE:
            raise RowLengthError(r + 1, len(text))

        row: list[int] = []
        for c, char in enumerate(text):
            try:
                row.append(parse_cell(char))
            except ValueError:
                raise InvalidCharacterError(char, r + 1, c + 1) from None
        grid.append(row)

    return grid


def row_from_cells(cells: Iterable[Any]) -> str:
    """Build a row string from JSON cell values; blanks become ``.``."""
    return "".join(
        EMPTY_CHAR if cell is None or cell == "" else str(cell) for cell in cells
    )

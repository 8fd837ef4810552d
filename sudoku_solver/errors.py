"""Errors raised while reading and solving a Sudoku board."""

from __future__ import annotations


class SudokuError(Exception):
    """Base class for every failure the solver reports to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(SudokuError):
    """The puzzle text could not be turned into a 9x9 grid."""


class ArgumentCountError(InputError):
    def __init__(self, count: int):
        super().__init__("You must provide exactly 9 rows as arguments.")
        self.count = count


class RowLengthError(InputError):
    def __init__(self, row: int, length: int):
        super().__init__(f"Row {row} must have exactly 9 characters.")
        self.row = row
        self.length = length


class InvalidCharacterError(InputError):
    """A cell holds something other than ``.`` or a digit 1-9.

    ``row`` and ``column`` are 1-based, as shown to the user.
    """

    def __init__(self, char: str, row: int, column: int):
        super().__init__(
            f"Invalid character '{char}' detected in row {row}, column {column}. "
            "Only digits 1-9 and '.' are allowed."
        )
        self.char = char
        self.row = row
        self.column = column


class InitialConsistencyError(SudokuError):
    def __init__(self):
        super().__init__(
            "Initial board configuration is invalid (violates Sudoku rules)."
        )


class UnsolvableError(SudokuError):
    def __init__(self):
        super().__init__("No solution found for the given Sudoku puzzle.")

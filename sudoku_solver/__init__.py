"""Backtracking Sudoku solver with a command line and an HTTP front door."""

__version__ = "1.0.0"

"""
Entry point for running the solver as a module.

Usage:
    python -m sudoku_solver 53..7.... 6..195... .98....6. ...
"""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())

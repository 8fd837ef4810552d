"""Command-line entry point: solve a puzzle given as nine row arguments."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .board import format_grid, parse_rows
from .config import env
from .errors import SudokuError
from .solver import solve_puzzle

LOGGER = logging.getLogger("sudoku_solver")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        force=True,
    )


_OPTION_TOKENS = {"-h", "--help", "--debug"}


def _split_options(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split leading option flags from the rows; everything after is a row."""
    argv = list(argv)
    split = 0
    while split < len(argv) and argv[split] in _OPTION_TOKENS:
        split += 1
    rows = argv[split:]
    if rows[:1] == ["--"]:
        rows = rows[1:]
    return argv[:split], rows


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    options, rows = _split_options(sys.argv[1:] if argv is None else argv)
    parser = argparse.ArgumentParser(
        prog="sudoku-solve",
        description="Solve a 9x9 Sudoku given as nine rows of '.' and digits 1-9",
    )
    parser.add_argument(
        "rows",
        nargs="*",
        metavar="ROW",
        help="Puzzle row, e.g. 53..7....",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=env("SUDOKU_DEBUG", False),
        help="Log solver progress to stderr (fallback to SUDOKU_DEBUG env)",
    )
    args = parser.parse_args(options)
    # Rows may start with "-"; parse_rows reports them as bad input.
    args.rows = rows
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.debug)

    try:
        grid = parse_rows(args.rows)
        solved = solve_puzzle(grid)
    except SudokuError as exc:
        LOGGER.debug("run failed: %s", type(exc).__name__)
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    sys.stdout.write(format_grid(solved))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Benchmark backtracking solve time on sample puzzles."""

from __future__ import annotations

import argparse
import copy
import sys
import time
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sudoku_solver.board import parse_rows
from sudoku_solver.solver import SudokuSolver, is_initially_valid

SAMPLE_PUZZLES = {
    "classic": [
        "53..7....", "6..195...", ".98....6.", "8...6...3", "4..8.3..1",
        "7...2...6", ".6....28.", "...419..5", "....8..79",
    ],
    "empty": ["." * 9] * 9,
    "givens_38": [
        "6.8..3.24", "43.......", "....5..8.", "86.47..3.", ".74162895",
        "1..5....7", "2.6.4.1..", ".438..6..", ".8.7269..",
    ],
}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark Sudoku solver runtime")
    parser.add_argument(
        "--puzzles",
        nargs="+",
        choices=sorted(SAMPLE_PUZZLES),
        default=sorted(SAMPLE_PUZZLES),
        help="Sample puzzles to benchmark",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=3,
        help="Number of rounds for each puzzle",
    )
    return parser.parse_args()


def run_benchmark(rows: list[str], rounds: int) -> tuple[float, int, bool]:
    grid = parse_rows(rows)
    if not is_initially_valid(grid):
        raise ValueError("Sample puzzle has conflicting givens")

    solver = SudokuSolver()
    solved = False
    start = time.perf_counter()
    for _ in range(rounds):
        solved = solver.solve(copy.deepcopy(grid))
    elapsed = time.perf_counter() - start
    return elapsed / rounds, solver.placements, solved


def main() -> int:
    args = parse_args()

    print("Solver benchmark results")
    print(f"puzzles={len(args.puzzles)} rounds={args.rounds}")
    for name in args.puzzles:
        avg, placements, solved = run_benchmark(SAMPLE_PUZZLES[name], args.rounds)
        print(
            f"{name}: solved={solved} avg={avg * 1000.0:.2f}ms "
            f"placements={placements}"
        )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Tests for solved-grid verification."""

from sudoku_solver.solver import is_solved_grid

SOLVED = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def test_accepts_complete_solution():
    assert is_solved_grid(SOLVED) is True


def test_rejects_empty_cell():
    grid = [row[:] for row in SOLVED]
    grid[4][4] = 0

    assert is_solved_grid(grid) is False


def test_rejects_latin_square_with_bad_boxes():
    # Every row and column is a permutation, but boxes repeat digits.
    grid = [[(r + c) % 9 + 1 for c in range(9)] for r in range(9)]

    assert is_solved_grid(grid) is False


def test_rejects_wrong_shape():
    assert is_solved_grid(SOLVED[:8]) is False
    assert is_solved_grid([row[:8] for row in SOLVED]) is False
    assert is_solved_grid([[1, 2], [3]]) is False

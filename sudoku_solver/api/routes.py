"""API routes for the Sudoku solver application."""

from __future__ import annotations

import logging
import re

from fastapi import APIRouter, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..board import grid_to_rows, parse_rows, row_from_cells
from ..errors import SudokuError
from ..models.schemas import (
    ErrorResponse,
    HealthResponse,
    SolveRequest,
    SolveResponse,
)
from ..solver import is_solved_grid, solve_puzzle

router = APIRouter()
_LOGGER = logging.getLogger(__name__)

SOLVE_PATH = "/api/solve"
_ROW_PATTERN = re.compile(r"[1-9.]{9}")


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


async def board_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report a malformed solve body as a 400 with the board-format message."""
    if request.url.path != SOLVE_PATH:
        return await request_validation_exception_handler(request, exc)
    _LOGGER.info("rejected board: %s", exc.errors())
    return _error("Invalid board format. Expected 9x9 array.", 400)


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy")


@router.post(
    SOLVE_PATH,
    response_model=SolveResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    tags=["Sudoku"],
)
async def solve_board(request: SolveRequest):
    """
    Solve a Sudoku board.

    Expected JSON format:
    {
        "board": [[row1], [row2], ...]
    }
    Where each row is a list of 9 cells ("." or "" or null for empty).
    """
    rows = [row_from_cells(row) for row in request.board]
    for row in rows:
        if not _ROW_PATTERN.fullmatch(row):
            _LOGGER.info("rejected row %r", row)
            return _error(
                f"Invalid characters in input row: {row}. "
                "Only 1-9 and . (or empty) allowed.",
                400,
            )

    try:
        solved = solve_puzzle(parse_rows(rows))
    except SudokuError as e:
        _LOGGER.info("solve failed: %s", e.message)
        return _error(f"Error: {e.message}", 400)
    except Exception:
        _LOGGER.exception("unexpected solver failure")
        return _error("Failed to solve the puzzle.", 500)

    if not is_solved_grid(solved):
        _LOGGER.error("solver returned an incomplete grid: %s", solved)
        return _error("Solver returned invalid output format.", 500)

    return SolveResponse(solvedBoard=grid_to_rows(solved))

"""Tests for the HTTP solve endpoint."""

import httpx
import pytest
from pydantic import ValidationError

from sudoku_solver import main
from sudoku_solver.api import routes
from sudoku_solver.models.schemas import SolveRequest

CLASSIC_BOARD = [
    ["5", "3", "", "", "7", "", "", "", ""],
    ["6", "", "", "1", "9", "5", "", "", ""],
    ["", "9", "8", "", "", "", "", "6", ""],
    ["8", "", "", "", "6", "", "", "", "3"],
    ["4", "", "", "8", "", "3", "", "", "1"],
    ["7", "", "", "", "2", "", "", "", "6"],
    ["", "6", "", "", "", "", "2", "8", ""],
    ["", "", "", "4", "1", "9", "", "", "5"],
    ["", "", "", "", "8", "", "", "7", "9"],
]


async def _post(payload):
    transport = httpx.ASGITransport(app=main.app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.post("/api/solve", json=payload)


@pytest.mark.asyncio
async def test_solves_board():
    response = await _post({"board": CLASSIC_BOARD})

    assert response.status_code == 200
    solved = response.json()["solvedBoard"]
    assert solved[0] == ["5", "3", "4", "6", "7", "8", "9", "1", "2"]
    assert solved[8] == ["3", "4", "5", "2", "8", "6", "1", "7", "9"]


@pytest.mark.asyncio
async def test_accepts_integer_and_null_cells():
    board = [[int(c) if c else None for c in row] for row in CLASSIC_BOARD]

    response = await _post({"board": board})

    assert response.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "board",
    [None, [], [["1"] * 9] * 8, [["."] * 8] * 9, "53..7...."],
)
async def test_rejects_malformed_board(board):
    response = await _post({"board": board})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid board format. Expected 9x9 array."}


@pytest.mark.asyncio
async def test_rejects_invalid_characters():
    board = [row[:] for row in CLASSIC_BOARD]
    board[0][8] = "X"

    response = await _post({"board": board})

    assert response.status_code == 400
    assert response.json()["error"].startswith(
        "Invalid characters in input row: 53..7...X."
    )


@pytest.mark.asyncio
async def test_rejects_conflicting_givens():
    board = [[""] * 9 for _ in range(9)]
    board[0][0] = board[0][1] = "1"

    response = await _post({"board": board})

    assert response.status_code == 400
    assert response.json() == {
        "error": "Error: Initial board configuration is invalid (violates Sudoku rules)."
    }


@pytest.mark.asyncio
async def test_reports_unsolvable_board():
    board = [[""] * 9 for _ in range(9)]
    board[0][:8] = list("12345678")
    board[1][8] = "9"

    response = await _post({"board": board})

    assert response.status_code == 400
    assert "No solution found" in response.json()["error"]


@pytest.mark.asyncio
async def test_rejects_incomplete_solver_output(monkeypatch):
    monkeypatch.setattr(routes, "solve_puzzle", lambda grid: grid)

    response = await _post({"board": CLASSIC_BOARD})

    assert response.status_code == 500
    assert response.json() == {"error": "Solver returned invalid output format."}


@pytest.mark.asyncio
async def test_health_and_root():
    transport = httpx.ASGITransport(app=main.app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        health = await client.get("/health")
        root = await client.get("/")

    assert health.json() == {"status": "healthy"}
    assert root.json()["docs"] == "/docs"


@pytest.mark.asyncio
async def test_missing_board_or_bad_json_is_a_board_format_error():
    transport = httpx.ASGITransport(app=main.app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        missing = await client.post("/api/solve", json={})
        not_json = await client.post(
            "/api/solve",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )

    for response in (missing, not_json):
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid board format. Expected 9x9 array."}


def test_request_model_enforces_nine_by_nine():
    with pytest.raises(ValidationError):
        SolveRequest(board=[["."] * 9] * 8)
    with pytest.raises(ValidationError):
        SolveRequest(board=[["."] * 10] * 9)
    assert len(SolveRequest(board=[["."] * 9] * 9).board) == 9

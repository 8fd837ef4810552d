"""Pydantic models for API requests and responses."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field


class SolveRequest(BaseModel):
    """Request to solve a Sudoku board."""

    board: Annotated[
        list[Annotated[list[Any], Field(min_length=9, max_length=9)]],
        Field(
            min_length=9,
            max_length=9,
            description="9x9 array; cells are '1'-'9', 1-9, '.', '' or null for empty",
        ),
    ]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "board": [
                    ["5", "3", ".", ".", "7", ".", ".", ".", "."],
                    ["6", ".", ".", "1", "9", "5", ".", ".", "."],
                    [".", "9", "8", ".", ".", ".", ".", "6", "."],
                    ["8", ".", ".", ".", "6", ".", ".", ".", "3"],
                    ["4", ".", ".", "8", ".", "3", ".", ".", "1"],
                    ["7", ".", ".", ".", "2", ".", ".", ".", "6"],
                    [".", "6", ".", ".", ".", ".", "2", "8", "."],
                    [".", ".", ".", "4", "1", "9", ".", ".", "5"],
                    [".", ".", ".", ".", "8", ".", ".", "7", "9"],
                ]
            }
        }
    )


class SolveResponse(BaseModel):
    """Solved board, one string per cell."""

    solvedBoard: list[list[str]] = Field(description="Solved 9x9 grid")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(description="Error message")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")

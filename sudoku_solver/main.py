"""Main FastAPI application for Sudoku Solver."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.routes import board_validation_error_handler, router
from .config import env

app = FastAPI(
    title="Sudoku Solver API",
    description="API for solving Sudoku puzzles by backtracking search",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, board_validation_error_handler)
app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Sudoku Solver API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sudoku_solver.main:app",
        host=env("SUDOKU_API_HOST", "0.0.0.0"),
        port=env("SUDOKU_API_PORT", 8000),
    )

"""Validation utilities for Sudoku boards."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at the empty cell (row, col) is valid.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1 to board.size).

    Returns:
        True if the placement is valid.
    """
    return board.is_valid_move(row, col, value)


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The clue board.
        solution: The proposed solution.

    Returns:
        True if solution is complete, legal and matches every clue.
    """
    if puzzle.size != solution.size:
        return False

    clues = puzzle.grid != 0
    if (puzzle.grid[clues] != solution.grid[clues]).any():
        return False

    return solution.is_solved()

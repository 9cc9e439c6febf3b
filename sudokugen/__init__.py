"""Sudoku puzzle generation with guaranteed unique solutions."""

from .api import generate_puzzle, check_unique
from .core import SudokuBoard, BLANK, Filled, RandomSource
from .errors import (
    SudokuError,
    InvalidSizeError,
    InvalidPuzzleError,
    GenerationError,
    NoHintsLeftError,
)
from .generator import GeneratorConfig, SudokuGenerator
from .session import PuzzleSession, Hint

__version__ = "1.0.0"

__all__ = [
    "generate_puzzle",
    "check_unique",
    "SudokuBoard",
    "BLANK",
    "Filled",
    "RandomSource",
    "SudokuError",
    "InvalidSizeError",
    "InvalidPuzzleError",
    "GenerationError",
    "NoHintsLeftError",
    "GeneratorConfig",
    "SudokuGenerator",
    "PuzzleSession",
    "Hint",
]

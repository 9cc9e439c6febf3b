"""Core module for board representation, cell values and placement rules."""

from .board import SudokuBoard
from .cell import BLANK, Blank, Cell, Filled
from .constraints import (
    SUPPORTED_SIZES,
    BoxDimensions,
    box_dimensions,
    is_legal,
    legal_values,
)
from .rng import RandomSource
from .validator import is_valid_placement, validate_solution

__all__ = [
    "SudokuBoard",
    "BLANK",
    "Blank",
    "Cell",
    "Filled",
    "SUPPORTED_SIZES",
    "BoxDimensions",
    "box_dimensions",
    "is_legal",
    "legal_values",
    "RandomSource",
    "is_valid_placement",
    "validate_solution",
]

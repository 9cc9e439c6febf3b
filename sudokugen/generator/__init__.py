"""Generator module for creating uniquely solvable puzzles."""

from .config import GeneratorConfig
from .carver import PuzzleCarver, CarveReport
from .generator import SudokuGenerator

__all__ = ["GeneratorConfig", "PuzzleCarver", "CarveReport", "SudokuGenerator"]

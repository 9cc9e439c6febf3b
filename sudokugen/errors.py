"""Exception types raised by the puzzle engine."""


class SudokuError(Exception):
    """Base class for all sudokugen errors."""


class InvalidSizeError(SudokuError, ValueError):
    """Raised when a grid size has no rectangular box decomposition."""

    def __init__(self, size):
        self.size = size
        super().__init__(f"Size must be one of 4, 6 or 9, got {size}")


class InvalidPuzzleError(SudokuError, ValueError):
    """Raised when clue or session data is malformed."""


class GenerationError(SudokuError, RuntimeError):
    """Raised when no complete solution could be built."""


class NoHintsLeftError(SudokuError):
    """Raised when a session has used up its hints."""

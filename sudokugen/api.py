"""Entry points for applications embedding the engine."""

from __future__ import annotations
from typing import Any, Optional, Sequence, Union

from .core.board import SudokuBoard
from .core.cell import Blank, Filled, from_cell
from .core.constraints import box_dimensions
from .errors import InvalidPuzzleError
from .generator.config import GeneratorConfig
from .generator.generator import SudokuGenerator
from .session import PuzzleSession
from .solvers.counter import has_unique_solution

ClueGrid = Union[SudokuBoard, Sequence[Sequence[Any]]]


def generate_puzzle(
    size: int,
    seed: Optional[int] = None,
    config: Optional[GeneratorConfig] = None,
) -> PuzzleSession:
    """
    Generate a uniquely solvable puzzle.

    Args:
        size: Grid size, one of 4, 6 or 9.
        seed: Optional random seed.
        config: Optional generation settings.

    Returns:
        A PuzzleSession; ``session.clues`` is the playable grid and
        ``session.solution`` its only completion.

    Raises:
        InvalidSizeError: If size is not supported.
    """
    return SudokuGenerator(size, seed=seed, config=config).generate()


def check_unique(puzzle_clues: ClueGrid, size: int) -> bool:
    """
    Check that a clue grid has exactly one solution.

    Args:
        puzzle_clues: A SudokuBoard, or rows of ints (0 or None blank) or
                      of BLANK / Filled cells.
        size: Expected grid size.

    Raises:
        InvalidSizeError: If size is not supported.
        InvalidPuzzleError: If the grid shape or values do not fit size.
    """
    box_dimensions(size)
    board = _to_board(puzzle_clues, size)
    return has_unique_solution(board)


def _to_board(puzzle_clues: ClueGrid, size: int) -> SudokuBoard:
    if isinstance(puzzle_clues, SudokuBoard):
        board = puzzle_clues
    else:
        try:
            rows = [
                [from_cell(v) if isinstance(v, (Blank, Filled)) else v for v in row]
                for row in puzzle_clues
            ]
            board = SudokuBoard.from_2d_list(rows)
        except (TypeError, ValueError) as e:
            raise InvalidPuzzleError(f"Malformed clue grid: {e}") from e

    if board.size != size:
        raise InvalidPuzzleError(f"Expected a {size}x{size} grid, got {board.size}x{board.size}")
    return board

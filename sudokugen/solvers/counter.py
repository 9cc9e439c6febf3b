"""Bounded solution counting with the most-constrained-cell heuristic."""

from __future__ import annotations
from typing import List, Optional, Sequence, Union

from .base_solver import BaseSearch
from ..core.board import SudokuBoard
from ..core.constraints import (
    EMPTY,
    BoxDimensions,
    box_dimensions,
    copy_grid,
    is_consistent,
    legal_values,
)
from ..core.rng import RandomSource

GridLike = Union[SudokuBoard, Sequence[Sequence[int]]]


class SolutionCounter(BaseSearch):
    """
    Counts the completions of a grid, stopping once ``limit`` are found.

    A result equal to the limit means "at least limit", never an exact
    count. Each step branches on the blank cell with the fewest legal
    candidates (ties go to the first one in row-major order) and abandons
    the branch as soon as any blank cell has none.
    """

    name = "MRV-Counter"

    def __init__(self, rng: Optional[RandomSource] = None):
        super().__init__(rng)
        self._found = 0
        self._limit = 0

    def count(self, grid: GridLike, limit: int = 2) -> int:
        """
        Count solutions of grid up to limit.

        The caller's grid is not modified. A grid whose filled cells
        already conflict has no solutions.

        Args:
            grid: A SudokuBoard or a square list of rows, 0 for blank.
            limit: Maximum solutions to count before stopping.

        Returns:
            Number of solutions found, in [0, limit].
        """
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        work = grid.to_rows() if isinstance(grid, SudokuBoard) else copy_grid(grid)
        dims = box_dimensions(len(work))
        self._found = 0
        self._limit = limit

        with self._tracking() as stats:
            if is_consistent(work, dims):
                self._search(work, dims)
            stats.extra["solutions"] = self._found
        return self._found

    def _search(self, grid: List[List[int]], dims: BoxDimensions) -> None:
        if self._found >= self._limit:
            return
        self.stats.nodes_explored += 1

        best_cell = None
        best_candidates: List[int] = []
        size = dims.size
        for row in range(size):
            for col in range(size):
                if grid[row][col] != EMPTY:
                    continue
                candidates = legal_values(grid, row, col, dims)
                if not candidates:
                    self.stats.backtracks += 1
                    return
                if best_cell is None or len(candidates) < len(best_candidates):
                    best_cell = (row, col)
                    best_candidates = candidates

        if best_cell is None:
            self._found += 1
            return

        row, col = best_cell
        for value in self.rng.shuffled(best_candidates):
            grid[row][col] = value
            self._search(grid, dims)
            grid[row][col] = EMPTY
            if self._found >= self._limit:
                break


def count_solutions(grid: GridLike, limit: int = 2, rng: Optional[RandomSource] = None) -> int:
    """
    Count the number of solutions for a puzzle (up to limit).

    Args:
        grid: The puzzle, as a SudokuBoard or a list of rows.
        limit: Maximum solutions to count before stopping.
        rng: Random source for candidate ordering.

    Returns:
        Number of solutions found (up to limit).
    """
    return SolutionCounter(rng).count(grid, limit)


def has_unique_solution(grid: GridLike, rng: Optional[RandomSource] = None) -> bool:
    """Check if a puzzle has exactly one solution."""
    return count_solutions(grid, limit=2, rng=rng) == 1

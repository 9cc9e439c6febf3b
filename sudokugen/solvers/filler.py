"""Randomized backtracking that completes a grid into one full solution."""

from __future__ import annotations
from typing import List, Optional

from .base_solver import BaseSearch
from ..core.constraints import EMPTY, BoxDimensions, box_dimensions, is_consistent, is_legal
from ..core.rng import RandomSource


class GridFiller(BaseSearch):
    """
    Fills the blank cells of a grid with a legal complete assignment.

    Cells are visited in row-major order; the candidate values of each
    cell are tried in a freshly shuffled order, which is what makes
    different runs produce different solutions.
    """

    name = "RowMajorFiller"

    def __init__(self, rng: Optional[RandomSource] = None, max_nodes: Optional[int] = None):
        """
        Initialize the filler.

        Args:
            rng: Random source for candidate ordering.
            max_nodes: Optional cap on explored cells. When exceeded the
                       fill gives up and reports failure.
        """
        super().__init__(rng)
        self.max_nodes = max_nodes
        self._exhausted = False

    def fill(self, grid: List[List[int]]) -> bool:
        """
        Complete grid in place.

        Returns:
            True if every cell is now filled legally. On False the grid
            holds its original values again and should be discarded.
        """
        dims = box_dimensions(len(grid))
        self._exhausted = False

        with self._tracking() as stats:
            if not is_consistent(grid, dims):
                stats.extra["inconsistent_seed"] = True
                return False
            filled = self._fill_from(grid, dims, 0)
            if self._exhausted:
                stats.extra["budget_exhausted"] = True
        return filled

    def _fill_from(self, grid: List[List[int]], dims: BoxDimensions, index: int) -> bool:
        size = dims.size
        total = size * size
        while index < total and grid[index // size][index % size] != EMPTY:
            index += 1
        if index == total:
            return True

        self.stats.nodes_explored += 1
        if self.max_nodes is not None and self.stats.nodes_explored > self.max_nodes:
            self._exhausted = True
            return False

        row, col = divmod(index, size)
        for value in self.rng.shuffled(range(1, size + 1)):
            if not is_legal(grid, row, col, value, dims):
                continue
            grid[row][col] = value
            if self._fill_from(grid, dims, index + 1):
                return True
            grid[row][col] = EMPTY
            self.stats.backtracks += 1
            if self._exhausted:
                return False

        return False

"""Sudoku puzzle generator for 4x4, 6x6 and 9x9 grids."""

from __future__ import annotations
from typing import List, Optional

from .carver import CarveReport, PuzzleCarver
from .config import GeneratorConfig
from ..core.board import SudokuBoard
from ..core.constraints import box_dimensions, empty_grid, is_legal, EMPTY
from ..core.rng import RandomSource
from ..errors import GenerationError
from ..session import PuzzleSession
from ..solvers.base_solver import SearchStats
from ..solvers.filler import GridFiller
from ..utils.logger import get_logger

logger = get_logger(__name__)


class SudokuGenerator:
    """
    Generator for uniquely solvable Sudoku puzzles.

    Algorithm:
    1. Place a few random legal values on an empty grid
    2. Complete it with randomized backtracking; if the seeded grid
       cannot be completed, start again from an empty grid
    3. Carve clues away while the puzzle keeps exactly one solution
    """

    def __init__(
        self,
        size: int = 9,
        seed: Optional[int] = None,
        config: Optional[GeneratorConfig] = None,
    ):
        """
        Initialize the generator.

        Args:
            size: Board size (4, 6 or 9).
            seed: Random seed for reproducibility.
            config: Generation settings (defaults to GeneratorConfig()).

        Raises:
            InvalidSizeError: If size is not supported.
        """
        self.dims = box_dimensions(size)
        self.size = size
        self.config = config or GeneratorConfig()
        self.rng = RandomSource(seed)
        self.last_report: Optional[CarveReport] = None
        self.last_fill_stats: Optional[SearchStats] = None

    def generate(self) -> PuzzleSession:
        """
        Generate a puzzle along with its solution.

        Returns:
            A new PuzzleSession holding clues, solution and hint budget.
        """
        solution = self.generate_solution()
        carver = PuzzleCarver(self.rng, symmetric=self.config.symmetric)
        clues = carver.carve(solution, self.config.target_blank_fraction)

        report = carver.report
        self.last_report = report
        logger.info(
            "Generated %dx%d puzzle: %d clues, %d blanks (target %d), %d uniqueness checks",
            self.size, self.size, clues.count_filled(), report.blanked,
            report.target_blanks, report.uniqueness_checks,
        )
        return PuzzleSession(
            size=self.size,
            clues=clues,
            solution=solution,
            hint_count=self.config.hint_count,
        )

    def generate_batch(self, count: int) -> List[PuzzleSession]:
        """
        Generate multiple puzzles of the same size.

        Args:
            count: Number of puzzles to generate.
        """
        return [self.generate() for _ in range(count)]

    def generate_solution(self) -> SudokuBoard:
        """
        Build one complete, legal grid.

        Raises:
            GenerationError: If even empty-grid fills keep failing.
        """
        grid = empty_grid(self.size)
        self._preseed(grid)
        filler = GridFiller(self.rng, max_nodes=self.config.seeded_fill_node_budget)
        if filler.fill(grid):
            self.last_fill_stats = filler.stats
            return SudokuBoard(self.size, grid)

        logger.debug(
            "Seeded %dx%d grid could not be completed (%s); retrying from empty grid",
            self.size, self.size, filler.stats.to_dict(),
        )

        filler = GridFiller(self.rng)
        for attempt in range(1, self.config.max_fill_attempts + 1):
            grid = empty_grid(self.size)
            if filler.fill(grid):
                filler.stats.extra["fallback_attempts"] = attempt
                self.last_fill_stats = filler.stats
                return SudokuBoard(self.size, grid)
            logger.warning("Empty-grid fill attempt %d failed", attempt)

        raise GenerationError(
            f"Could not complete an empty {self.size}x{self.size} grid "
            f"after {self.config.max_fill_attempts} attempts"
        )

    def _preseed(self, grid: List[List[int]]) -> int:
        """Try a few random legal placements. Returns how many were placed."""
        attempts = self.config.preseed_attempts
        if attempts is None:
            attempts = self.size

        placed = 0
        for _ in range(attempts):
            row = self.rng.randrange(self.size)
            col = self.rng.randrange(self.size)
            value = self.rng.randrange(self.size) + 1
            if grid[row][col] == EMPTY and is_legal(grid, row, col, value, self.dims):
                grid[row][col] = value
                placed += 1
        return placed

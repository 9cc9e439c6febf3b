"""Clue removal that keeps a puzzle uniquely solvable."""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from ..core.board import SudokuBoard
from ..core.constraints import EMPTY
from ..core.rng import RandomSource, ensure_rng
from ..solvers.counter import SolutionCounter
from ..utils.logger import get_logger

logger = get_logger(__name__)

Coord = Tuple[int, int]


@dataclass
class CarveReport:
    """What happened during one carve run."""
    target_blanks: int = 0
    blanked: int = 0
    uniqueness_checks: int = 0
    kept_clues: Set[Coord] = field(default_factory=set)
    blanked_cells: Set[Coord] = field(default_factory=set)
    # Coordinates in the order they were settled, with the decision.
    decisions: List[Tuple[Coord, bool]] = field(default_factory=list)

    @property
    def reached_target(self) -> bool:
        return self.blanked >= self.target_blanks


class PuzzleCarver:
    """
    Removes clues from a complete solution while the puzzle stays unique.

    Algorithm:
    1. Start from a copy of the solution
    2. Visit cells in random order, optionally paired with their
       point-symmetric partner (N-1-r, N-1-c)
    3. Blank each cell (or pair) and re-count solutions up to 2
    4. Keep the removal if the count is 1, otherwise restore and keep the
       clue for good
    5. Stop at the target number of blanks or when every cell is settled
    """

    def __init__(self, rng: Optional[RandomSource] = None, symmetric: bool = True):
        """
        Initialize the carver.

        Args:
            rng: Random source for the traversal order and the counter.
            symmetric: Remove cells in point-symmetric pairs.
        """
        self.rng = ensure_rng(rng)
        self.symmetric = symmetric
        self.counter = SolutionCounter(self.rng)
        self.report = CarveReport()

    def carve(self, solution: SudokuBoard, target_blank_fraction: float = 0.6) -> SudokuBoard:
        """
        Create a puzzle from a complete solution.

        Args:
            solution: A complete, legal board. It is not modified.
            target_blank_fraction: Share of cells to blank, in [0, 1].

        Returns:
            The clue board. It may keep more clues than requested when no
            further removal preserves uniqueness.
        """
        if not 0.0 <= target_blank_fraction <= 1.0:
            raise ValueError(
                f"target_blank_fraction must be in [0, 1], got {target_blank_fraction}"
            )
        if not solution.is_solved():
            raise ValueError("Carving needs a complete, legal solution")

        size = solution.size
        puzzle = solution.to_rows()
        target = math.floor(size * size * target_blank_fraction)
        report = CarveReport(target_blanks=target)
        self.report = report

        settled: Set[Coord] = set()
        order = self.rng.shuffled([(r, c) for r in range(size) for c in range(size)])

        for coord in order:
            if report.blanked >= target:
                break
            if coord in settled:
                continue

            group = self._group(coord, size)
            saved = [puzzle[r][c] for r, c in group]
            for r, c in group:
                puzzle[r][c] = EMPTY

            report.uniqueness_checks += 1
            unique = self.counter.count(puzzle, limit=2) < 2

            if unique:
                report.blanked += len(group)
                report.blanked_cells.update(group)
            else:
                for (r, c), value in zip(group, saved):
                    puzzle[r][c] = value
                report.kept_clues.update(group)

            settled.update(group)
            report.decisions.extend((cell, unique) for cell in group)

        if not report.reached_target:
            logger.debug(
                "Carve stopped at %d/%d blanks for size %d; every cell settled",
                report.blanked, target, size,
            )

        return SudokuBoard(size, puzzle)

    def _group(self, coord: Coord, size: int) -> List[Coord]:
        """The cell, plus its point-symmetric partner when pairing."""
        if not self.symmetric:
            return [coord]
        row, col = coord
        partner = (size - 1 - row, size - 1 - col)
        return [coord] if partner == coord else [coord, partner]

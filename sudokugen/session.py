"""Per-puzzle state: clues, solution and remaining hints."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .core.board import SudokuBoard
from .core.cell import Blank, Filled, from_cell
from .core.constraints import EMPTY
from .core.rng import RandomSource, ensure_rng
from .core.validator import validate_solution
from .errors import InvalidPuzzleError, NoHintsLeftError
from .solvers.counter import has_unique_solution

# Player entries: rows of ints (0 or None blank) or rows of cells.
Entries = Sequence[Sequence[Any]]


@dataclass(frozen=True)
class Hint:
    """A revealed cell."""
    row: int
    col: int
    value: int


@dataclass
class PuzzleSession:
    """
    One playable puzzle.

    ``clues`` and ``solution`` are fixed once the session is created; only
    ``hint_count`` changes as hints are spent.
    """
    size: int
    clues: SudokuBoard
    solution: SudokuBoard
    hint_count: int = 3

    def __post_init__(self):
        if self.clues.size != self.size or self.solution.size != self.size:
            raise InvalidPuzzleError(f"Clues and solution must both be {self.size}x{self.size}")
        self.clues.grid.setflags(write=False)
        self.solution.grid.setflags(write=False)

    def is_clue(self, row: int, col: int) -> bool:
        return not self.clues.is_empty(row, col)

    def give_hint(
        self,
        entries: Optional[Entries] = None,
        rng: Optional[RandomSource] = None,
    ) -> Optional[Hint]:
        """
        Reveal the solution value of one random unfilled cell.

        Args:
            entries: The player's current grid. Cells filled there are not
                     picked. Defaults to the clue grid.
            rng: Random source for picking the cell.

        Returns:
            The revealed Hint, or None if no unfilled cell remains (no
            hint is spent in that case).

        Raises:
            NoHintsLeftError: If the hint budget is used up.
        """
        if self.hint_count <= 0:
            raise NoHintsLeftError("No hints left")

        current = self._entries_array(entries) if entries is not None else self.clues.grid
        rows, cols = np.nonzero(current == EMPTY)
        blanks = [(int(r), int(c)) for r, c in zip(rows, cols)]
        if not blanks:
            return None

        row, col = ensure_rng(rng).choice(blanks)
        self.hint_count -= 1
        return Hint(row, col, self.solution.get(row, col))

    def check_entries(self, entries: Entries) -> Dict[Tuple[int, int], bool]:
        """
        Compare the player's entries with the solution.

        Returns:
            For every non-clue cell, whether its entry is correct. Blank
            entries count as incorrect.
        """
        current = self._entries_array(entries)
        results = {}
        for row in range(self.size):
            for col in range(self.size):
                if self.is_clue(row, col):
                    continue
                results[(row, col)] = int(current[row, col]) == self.solution.get(row, col)
        return results

    def is_solved_by(self, entries: Entries) -> bool:
        """True if every non-clue entry matches the solution."""
        return all(self.check_entries(entries).values())

    def to_dict(self) -> Dict[str, Any]:
        """Plain data for an external persistence layer."""
        return {
            "size": self.size,
            "puzzle": self.clues.grid.tolist(),
            "solution": self.solution.grid.tolist(),
            "hint_count": self.hint_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], verify: bool = True) -> PuzzleSession:
        """
        Rebuild a session from to_dict() data.

        Args:
            data: Mapping with size, puzzle, solution and hint_count.
            verify: Also check that the clues have exactly one solution.

        Raises:
            InvalidPuzzleError: If the data is malformed, the solution
                                does not fit the clues, or (with verify)
                                the clues are not uniquely solvable.
        """
        try:
            size = int(data["size"])
            clues = SudokuBoard(size, np.array(data["puzzle"], dtype=np.int32))
            solution = SudokuBoard(size, np.array(data["solution"], dtype=np.int32))
            hint_count = int(data.get("hint_count", 3))
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidPuzzleError(f"Malformed session data: {e}") from e

        if hint_count < 0:
            raise InvalidPuzzleError("hint_count cannot be negative")
        if not validate_solution(clues, solution):
            raise InvalidPuzzleError("Solution does not complete the clues")
        if verify and not has_unique_solution(clues):
            raise InvalidPuzzleError("Clues do not have a unique solution")

        return cls(size=size, clues=clues, solution=solution, hint_count=hint_count)

    def _entries_array(self, entries: Entries) -> np.ndarray:
        if isinstance(entries, SudokuBoard):
            entries = entries.to_rows()
        rows: List[List[int]] = []
        for row in entries:
            rows.append([_entry_value(v) for v in row])
        try:
            arr = np.array(rows, dtype=np.int32)
        except ValueError as e:
            raise InvalidPuzzleError(f"Entries must be {self.size}x{self.size}") from e
        if arr.shape != (self.size, self.size):
            raise InvalidPuzzleError(f"Entries must be {self.size}x{self.size}")
        return arr


def _entry_value(value: Any) -> int:
    if isinstance(value, (Blank, Filled)):
        return from_cell(value)
    if value is None or value == "":
        return EMPTY
    return int(value)

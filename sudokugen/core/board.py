"""Sudoku board representation for 4x4, 6x6 and 9x9 grids."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional, Sequence

from .cell import Cell, to_cell, from_cell
from .constraints import (
    EMPTY,
    box_dimensions,
    box_origin,
    is_consistent,
    is_legal,
    legal_values,
)


class SudokuBoard:
    """
    Represents a Sudoku board with rectangular boxes.

    Supported sizes: 4x4 (2x2 boxes), 6x6 (2x3 boxes), 9x9 (3x3 boxes).
    Values are stored as ints with 0 for a blank cell; ``cell()`` exposes
    them as ``BLANK`` / ``Filled(v)``.
    """

    def __init__(self, size: int = 9, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            size: Board size (4, 6 or 9).
            grid: Optional initial grid. If None, creates empty board.

        Raises:
            InvalidSizeError: If size has no box decomposition.
        """
        self.dims = box_dimensions(size)
        self.size = size
        self.box_rows, self.box_cols = self.dims

        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (size, size):
                raise ValueError(f"Grid shape must be ({size}, {size})")
            if grid.min() < 0 or grid.max() > size:
                raise ValueError(f"Grid values must be 0-{size}")
            self.grid = grid.astype(np.int32)
        else:
            self.grid = np.zeros((size, size), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard(self.size)
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def cell(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col) as BLANK or Filled(value)."""
        return to_cell(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > self.size:
            raise ValueError(f"Value must be 0-{self.size}, got {value}")
        self.grid[row, col] = value

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        self.set(row, col, from_cell(cell))

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = EMPTY

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty."""
        return self.grid[row, col] == EMPTY

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row, box_col = box_origin(row, col, self.dims)
        return self.grid[box_row:box_row + self.box_rows,
                        box_col:box_col + self.box_cols].flatten()

    def get_box_index(self, row: int, col: int) -> int:
        """Get the box index (0 to size-1) for a cell, row-major over boxes."""
        boxes_per_row = self.size // self.box_cols
        return (row // self.box_rows) * boxes_per_row + (col // self.box_cols)

    def get_candidates(self, row: int, col: int) -> List[int]:
        """
        Get all legal values for an empty cell.

        Returns:
            Ascending list of values that can be placed at (row, col).
            Returns an empty list if the cell is not empty.
        """
        if not self.is_empty(row, col):
            return []
        return legal_values(self.grid, row, col, self.dims)

    def is_valid_move(self, row: int, col: int, value: int) -> bool:
        """Check if placing value at the empty cell (row, col) is legal."""
        if value < 1 or value > self.size:
            return False
        return is_legal(self.grid, row, col, value, self.dims)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions in row-major order."""
        rows, cols = np.nonzero(self.grid == EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == EMPTY))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != EMPTY))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        return is_consistent(self.to_rows(), self.dims)

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_rows(self) -> List[List[int]]:
        """Copy the grid into a list of row lists (a search working copy)."""
        return self.grid.tolist()

    def to_cells(self) -> List[List[Cell]]:
        """Copy the grid into rows of BLANK / Filled cells."""
        return [[to_cell(v) for v in row] for row in self.grid.tolist()]

    def to_string(self) -> str:
        """
        Convert board to a compact string representation.
        Uses 0 for empty cells and 1-9 for values.
        """
        return ''.join(str(v) for v in self.grid.flatten().tolist())

    @classmethod
    def from_string(cls, s: str, size: int = 9) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of length size*size, 0 or . for empty, 1-9 for values.
            size: Board size.
        """
        if len(s) != size * size:
            raise ValueError(f"String length must be {size*size}, got {len(s)}")

        values = []
        for c in s:
            if c in '0.':
                values.append(EMPTY)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Unexpected character {c!r} in puzzle string")

        grid = np.array(values, dtype=np.int32).reshape(size, size)
        return cls(size, grid)

    @classmethod
    def from_2d_list(cls, data: Sequence[Sequence[Optional[int]]]) -> SudokuBoard:
        """Create a board from a 2D list. None and 0 mean empty."""
        rows = [[EMPTY if v is None else v for v in row] for row in data]
        arr = np.array(rows, dtype=np.int32)
        if arr.ndim != 2:
            raise ValueError("Rows must all have the same length")
        return cls(arr.shape[0], arr)

    @classmethod
    def from_cells(cls, cells: Sequence[Sequence[Cell]]) -> SudokuBoard:
        """Create a board from rows of BLANK / Filled cells."""
        return cls.from_2d_list([[from_cell(c) for c in row] for row in cells])

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.box_cols * 2 + 1)) + '+') * (self.size // self.box_cols)

        for i in range(self.size):
            if i % self.box_rows == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(self.size):
                val = self.grid[i, j]
                row_str += ' .' if val == EMPTY else f' {val}'

                if (j + 1) % self.box_cols == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(size={self.size}, filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())

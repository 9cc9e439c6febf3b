"""Grid geometry and placement rules shared by every search."""

from __future__ import annotations
from typing import List, NamedTuple, Sequence

from ..errors import InvalidSizeError

# Blank cells are stored as 0 in working grids.
EMPTY = 0

SUPPORTED_SIZES = (4, 6, 9)

Grid = Sequence[Sequence[int]]


class BoxDimensions(NamedTuple):
    """Shape of one box tile: ``rows * cols == size``."""
    rows: int
    cols: int

    @property
    def size(self) -> int:
        return self.rows * self.cols


_BOX_DIMENSIONS = {
    4: BoxDimensions(2, 2),
    6: BoxDimensions(2, 3),
    9: BoxDimensions(3, 3),
}


def box_dimensions(size: int) -> BoxDimensions:
    """
    Get the box shape for a grid size.

    Raises:
        InvalidSizeError: If size is not 4, 6 or 9.
    """
    try:
        return _BOX_DIMENSIONS[size]
    except (KeyError, TypeError):
        raise InvalidSizeError(size) from None


def box_origin(row: int, col: int, dims: BoxDimensions) -> tuple:
    """Top-left cell of the box containing (row, col)."""
    return row - row % dims.rows, col - col % dims.cols


def is_legal(grid: Grid, row: int, col: int, value: int, dims: BoxDimensions) -> bool:
    """
    Check whether value may be placed at (row, col).

    The target cell is expected to be blank. Returns False if value
    already occurs in the row, the column or the box of the cell.

    Args:
        grid: Square grid indexable as grid[row][col], 0 for blank.
        row: Row index.
        col: Column index.
        value: Candidate value (1 to size).
        dims: Box dimensions of the grid.
    """
    size = dims.size
    for i in range(size):
        if grid[row][i] == value or grid[i][col] == value:
            return False

    start_row, start_col = box_origin(row, col, dims)
    for r in range(start_row, start_row + dims.rows):
        for c in range(start_col, start_col + dims.cols):
            if grid[r][c] == value:
                return False

    return True


def legal_values(grid: Grid, row: int, col: int, dims: BoxDimensions) -> List[int]:
    """All values that is_legal accepts at (row, col), ascending."""
    return [v for v in range(1, dims.size + 1) if is_legal(grid, row, col, v, dims)]


def is_consistent(grid: List[List[int]], dims: BoxDimensions) -> bool:
    """
    Check that no filled cell conflicts with another one.

    Each filled cell is lifted out and re-tested with is_legal, then put
    back. The grid is left unchanged.
    """
    size = dims.size
    for row in range(size):
        for col in range(size):
            value = grid[row][col]
            if value == EMPTY:
                continue
            grid[row][col] = EMPTY
            legal = is_legal(grid, row, col, value, dims)
            grid[row][col] = value
            if not legal:
                return False
    return True


def empty_grid(size: int) -> List[List[int]]:
    """Create a blank working grid."""
    return [[EMPTY] * size for _ in range(size)]


def copy_grid(grid: Grid) -> List[List[int]]:
    """Copy a grid into a fresh list-of-lists working copy."""
    return [[int(v) for v in row] for row in grid]

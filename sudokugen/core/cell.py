"""Explicit cell values: a cell is either blank or holds a number."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union


class Blank:
    """The empty cell. Use the ``BLANK`` singleton."""

    _instance: Optional["Blank"] = None

    def __new__(cls) -> "Blank":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "BLANK"

    def __reduce__(self):
        return (Blank, ())


BLANK = Blank()


@dataclass(frozen=True)
class Filled:
    """A cell holding a value in [1, size]."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value < 1:
            raise ValueError(f"Filled cell needs a positive int, got {self.value!r}")


Cell = Union[Blank, Filled]


def to_cell(value: int) -> Cell:
    """Convert a stored int (0 for blank) into a Cell."""
    return BLANK if value == 0 else Filled(int(value))


def from_cell(cell: Cell) -> int:
    """Convert a Cell into its stored int (0 for blank)."""
    if isinstance(cell, Filled):
        return cell.value
    if isinstance(cell, Blank):
        return 0
    raise TypeError(f"Expected a Cell, got {type(cell).__name__}")

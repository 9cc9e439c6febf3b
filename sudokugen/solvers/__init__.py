"""Backtracking searches used to build and verify puzzles."""

from .base_solver import BaseSearch, SearchStats
from .filler import GridFiller
from .counter import SolutionCounter, count_solutions, has_unique_solution

__all__ = [
    "BaseSearch",
    "SearchStats",
    "GridFiller",
    "SolutionCounter",
    "count_solutions",
    "has_unique_solution",
]

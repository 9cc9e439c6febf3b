"""Tunable settings for puzzle generation."""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Settings for SudokuGenerator.

    Attributes:
        target_blank_fraction: Share of cells the carver tries to blank.
        symmetric: Remove clues in point-symmetric pairs.
        preseed_attempts: Random placements tried before the full fill.
                          None means one attempt per row (the grid size).
        seeded_fill_node_budget: Node cap for filling a pre-seeded grid.
                                 Hitting it counts as an unsatisfiable seed.
        max_fill_attempts: Empty-grid fills tried before giving up.
        hint_count: Hints granted to each new session.
    """
    target_blank_fraction: float = 0.6
    symmetric: bool = True
    preseed_attempts: Optional[int] = None
    seeded_fill_node_budget: Optional[int] = 200_000
    max_fill_attempts: int = 10
    hint_count: int = 3

    def __post_init__(self):
        if not 0.0 <= self.target_blank_fraction <= 1.0:
            raise ValueError(
                f"target_blank_fraction must be in [0, 1], got {self.target_blank_fraction}"
            )
        if self.preseed_attempts is not None and self.preseed_attempts < 0:
            raise ValueError("preseed_attempts cannot be negative")
        if self.max_fill_attempts < 1:
            raise ValueError("max_fill_attempts must be at least 1")
        if self.hint_count < 0:
            raise ValueError("hint_count cannot be negative")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

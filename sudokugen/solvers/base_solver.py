"""Base search interface and common statistics."""

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import time

from ..core.rng import RandomSource, ensure_rng


@dataclass
class SearchStats:
    """Statistics from a single search run."""
    algorithm: str = ""
    time_seconds: float = 0.0

    # Search tree metrics
    nodes_explored: int = 0
    backtracks: int = 0

    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "algorithm": self.algorithm,
            "time_seconds": self.time_seconds,
            "nodes_explored": self.nodes_explored,
            "backtracks": self.backtracks,
            **self.extra
        }


class BaseSearch:
    """Shared plumbing for the backtracking searches: randomness and stats."""

    name: str = "BaseSearch"

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = ensure_rng(rng)
        self.stats = SearchStats(algorithm=self.name)

    @contextmanager
    def _tracking(self):
        """Reset stats and time the enclosed search."""
        self.stats = SearchStats(algorithm=self.name)
        start_time = time.perf_counter()
        try:
            yield self.stats
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time

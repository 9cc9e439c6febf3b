"""Benchmarking framework for puzzle generation across grid sizes."""

from __future__ import annotations
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json
import os

from tqdm import tqdm

from ..core.constraints import SUPPORTED_SIZES, box_dimensions
from ..generator import GeneratorConfig, SudokuGenerator
from ..session import PuzzleSession
from ..solvers.counter import count_solutions


@dataclass
class BenchmarkResult:
    """Results from generating a single puzzle."""
    puzzle_id: int
    size: int
    time_seconds: float
    memory_bytes: int
    clues: int
    blanks: int
    target_blanks: int
    uniqueness_checks: int
    fill_nodes: int
    unique: bool
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def reached_target(self) -> bool:
        return self.blanks >= self.target_blanks

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "size": self.size,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "clues": self.clues,
            "blanks": self.blanks,
            "target_blanks": self.target_blanks,
            "reached_target": self.reached_target,
            "uniqueness_checks": self.uniqueness_checks,
            "fill_nodes": self.fill_nodes,
            "unique": self.unique,
            **self.extra
        }


class Benchmark:
    """
    Benchmark for the puzzle generator.

    Generates puzzles for each requested size, timing every generation
    and re-verifying that each result is uniquely solvable.
    """

    def __init__(
        self,
        puzzles_per_size: int = 5,
        sizes: Optional[List[int]] = None,
        config: Optional[GeneratorConfig] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles_per_size: Number of puzzles to generate per size.
            sizes: Grid sizes to test (default: 4, 6 and 9).
            config: Generation settings shared by every run.
            seed: Random seed for reproducibility.
        """
        self.sizes = list(sizes) if sizes else list(SUPPORTED_SIZES)
        for size in self.sizes:
            box_dimensions(size)
        self.puzzles_per_size = puzzles_per_size
        self.config = config or GeneratorConfig()
        self.seed = seed

        self.results: List[BenchmarkResult] = []
        self.sessions: Dict[int, List[PuzzleSession]] = {}

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        self.sessions = {size: [] for size in self.sizes}

        total = len(self.sizes) * self.puzzles_per_size
        pbar = tqdm(total=total, desc="Generating", disable=not show_progress)

        for offset, size in enumerate(self.sizes):
            seed = None if self.seed is None else self.seed + offset
            generator = SudokuGenerator(size, seed=seed, config=self.config)
            for puzzle_id in range(self.puzzles_per_size):
                self.results.append(self._run_single(generator, puzzle_id))
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(self, generator: SudokuGenerator, puzzle_id: int) -> BenchmarkResult:
        """Generate and verify one puzzle."""
        tracemalloc.start()
        start_time = time.perf_counter()
        try:
            session = generator.generate()
            elapsed = time.perf_counter() - start_time
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        self.sessions[generator.size].append(session)
        report = generator.last_report
        fill_stats = generator.last_fill_stats

        return BenchmarkResult(
            puzzle_id=puzzle_id,
            size=generator.size,
            time_seconds=elapsed,
            memory_bytes=peak,
            clues=session.clues.count_filled(),
            blanks=session.clues.count_empty(),
            target_blanks=report.target_blanks,
            uniqueness_checks=report.uniqueness_checks,
            fill_nodes=fill_stats.nodes_explored,
            unique=count_solutions(session.clues, limit=2) == 1,
            extra={"fallback_fill": "fallback_attempts" in fill_stats.extra},
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics per grid size."""
        summary = {
            "total_puzzles": len(self.results),
            "sizes": self.sizes,
            "config": self.config.to_dict(),
            "results_by_size": {}
        }

        for size in self.sizes:
            size_results = [r for r in self.results if r.size == size]
            if not size_results:
                continue
            times = [r.time_seconds for r in size_results]
            clues = [r.clues for r in size_results]

            summary["results_by_size"][str(size)] = {
                "puzzles": len(size_results),
                "all_unique": all(r.unique for r in size_results),
                "avg_time_seconds": sum(times) / len(times),
                "max_time_seconds": max(times),
                "min_time_seconds": min(times),
                "avg_clues": sum(clues) / len(clues),
                "min_clues": min(clues),
                "reached_target": sum(1 for r in size_results if r.reached_target),
                "avg_uniqueness_checks": (
                    sum(r.uniqueness_checks for r in size_results) / len(size_results)
                ),
            }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and generated puzzles to files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        puzzles_file = os.path.join(output_dir, "puzzles.json")
        with open(puzzles_file, "w") as f:
            json.dump(
                {str(size): [s.to_dict() for s in sessions]
                 for size, sessions in self.sessions.items()},
                f, indent=2
            )

        print(f"Results and puzzles saved to {output_dir}")

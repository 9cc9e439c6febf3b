"""Visualization utilities for generation benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for puzzle generation benchmark results.

    Creates charts comparing grid sizes by generation time, clue count
    and carving effort.
    """

    COLORS = {
        4: "#2ecc71",   # Green
        6: "#3498db",   # Blue
        9: "#9b59b6",   # Purple
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def _sizes(self) -> List[int]:
        return sorted(set(r.size for r in self.results))

    def _labels(self, sizes: List[int]) -> List[str]:
        return [f"{s}x{s}" for s in sizes]

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_by_size(),
            self.plot_clue_distribution(),
            self.plot_checks_vs_time(),
        ]

    def plot_time_by_size(self) -> str:
        """Create bar chart comparing average generation times."""
        fig, ax = plt.subplots(figsize=(10, 6))

        sizes = self._sizes()
        avg_times = [np.mean([r.time_seconds for r in self.results if r.size == s]) for s in sizes]
        colors = [self.COLORS.get(s, "#95a5a6") for s in sizes]

        bars = ax.bar(self._labels(sizes), avg_times, color=colors, edgecolor='black', linewidth=0.5)

        for bar, t in zip(bars, avg_times):
            height = bar.get_height()
            ax.annotate(f'{t:.3f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, height),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Grid Size', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Generation Time by Grid Size', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_by_size.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_clue_distribution(self) -> str:
        """Box plot of clue counts, with the carving target marked."""
        fig, ax = plt.subplots(figsize=(10, 6))

        sizes = self._sizes()
        data = [[r.clues for r in self.results if r.size == s] for s in sizes]

        bp = ax.boxplot(data, patch_artist=True)
        ax.set_xticks(range(1, len(sizes) + 1))
        ax.set_xticklabels(self._labels(sizes))
        for patch, size in zip(bp['boxes'], sizes):
            patch.set_facecolor(self.COLORS.get(size, "#95a5a6"))
            patch.set_alpha(0.7)

        for i, size in enumerate(sizes, 1):
            targets = [r.target_blanks for r in self.results if r.size == size]
            target_clues = size * size - max(targets)
            ax.hlines(target_clues, i - 0.3, i + 0.3, colors='red', linestyles='--')

        ax.set_xlabel('Grid Size', fontsize=12)
        ax.set_ylabel('Clues', fontsize=12)
        ax.set_title('Clues Kept per Puzzle (dashed: target)', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "clue_distribution.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_checks_vs_time(self) -> str:
        """Scatter plot of uniqueness checks against generation time."""
        fig, ax = plt.subplots(figsize=(10, 6))

        sns.scatterplot(
            x=[r.uniqueness_checks for r in self.results],
            y=[r.time_seconds for r in self.results],
            hue=[f"{r.size}x{r.size}" for r in self.results],
            ax=ax,
        )

        ax.set_xlabel('Uniqueness Checks', fontsize=12)
        ax.set_ylabel('Time (seconds)', fontsize=12)
        ax.set_title('Carving Effort vs Generation Time', fontsize=14, fontweight='bold')
        ax.legend(title='Grid Size')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "checks_vs_time.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Generation Benchmark Summary\n",
            "| Size | Puzzles | Unique | Avg Time | Avg Clues | Target Reached | Avg Checks |",
            "|------|---------|--------|----------|-----------|----------------|------------|"
        ]

        for size in self._sizes():
            size_results = [r for r in self.results if r.size == size]
            unique = sum(1 for r in size_results if r.unique)
            reached = sum(1 for r in size_results if r.reached_target)
            avg_time = np.mean([r.time_seconds for r in size_results])
            avg_clues = np.mean([r.clues for r in size_results])
            avg_checks = np.mean([r.uniqueness_checks for r in size_results])

            lines.append(
                f"| {size}x{size} | {len(size_results)} | {unique}/{len(size_results)} | "
                f"{avg_time:.4f}s | {avg_clues:.1f} | {reached}/{len(size_results)} | {avg_checks:.1f} |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path

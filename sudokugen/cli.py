"""Command-line interface for the puzzle generator."""

import argparse
import logging
import sys
import json
from typing import List, Optional

from .api import check_unique
from .core.board import SudokuBoard
from .core.constraints import SUPPORTED_SIZES
from .errors import SudokuError
from .generator import GeneratorConfig, SudokuGenerator
from .solvers.counter import count_solutions
from .utils.logger import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudokugen",
        description="Uniquely solvable Sudoku puzzle generator (4x4, 6x6, 9x9)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 3 symmetric 9x9 puzzles
  sudokugen generate --size 9 --count 3

  # Check that a 4x4 clue string has exactly one solution
  sudokugen check --size 4 --puzzle "1000000000000000"

  # Time generation for every size
  sudokugen benchmark --puzzles 5 --output results/
        """
    )
    parser.add_argument(
        "--log-level", default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity (default: warning)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate puzzles")
    gen_parser.add_argument(
        "--size", type=int, choices=SUPPORTED_SIZES, default=9,
        help="Grid size (default: 9)"
    )
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    gen_parser.add_argument(
        "--blank-fraction", "-b", type=float, default=0.6,
        help="Target share of blank cells (default: 0.6)"
    )
    gen_parser.add_argument(
        "--no-symmetry", action="store_true",
        help="Remove clues one cell at a time instead of in symmetric pairs"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Check that a puzzle is uniquely solvable")
    check_parser.add_argument(
        "--size", type=int, choices=SUPPORTED_SIZES, default=9,
        help="Grid size (default: 9)"
    )
    check_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (size*size chars, 0 or . for empty cells)"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Time puzzle generation")
    bench_parser.add_argument(
        "--sizes", type=int, nargs="+", choices=SUPPORTED_SIZES, default=list(SUPPORTED_SIZES),
        help="Grid sizes to benchmark (default: 4 6 9)"
    )
    bench_parser.add_argument(
        "--puzzles", "-n", type=int, default=5,
        help="Puzzles per size (default: 5)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    configure_logging(getattr(logging, args.log_level.upper()))

    try:
        if args.command == "generate":
            return cmd_generate(args)
        if args.command == "check":
            return cmd_check(args)
        return cmd_benchmark(args)
    except (SudokuError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


def cmd_generate(args) -> int:
    """Handle the generate command."""
    config = GeneratorConfig(
        target_blank_fraction=args.blank_fraction,
        symmetric=not args.no_symmetry,
    )
    generator = SudokuGenerator(args.size, seed=args.seed, config=config)

    all_puzzles = []
    for i, session in enumerate(generator.generate_batch(args.count), 1):
        clues = session.clues
        all_puzzles.append({
            "index": i,
            "size": args.size,
            "puzzle": clues.to_string(),
            "solution": session.solution.to_string(),
            "clues": clues.count_filled(),
        })

        print(f"\n--- {args.size}x{args.size} Puzzle {i} ({clues.count_filled()} clues) ---")
        print(clues)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")
    return 0


def cmd_check(args) -> int:
    """Handle the check command."""
    try:
        board = SudokuBoard.from_string(args.puzzle, size=args.size)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}", file=sys.stderr)
        return 2

    print("Input puzzle:")
    print(board)

    if check_unique(board, args.size):
        print("✓ Exactly one solution")
        return 0

    solutions = count_solutions(board, limit=2)
    if solutions == 0:
        print("✗ No solution")
    else:
        print("✗ More than one solution")
    return 1


def cmd_benchmark(args) -> int:
    """Handle the benchmark command."""
    from .benchmark import Benchmark

    print("=" * 60)
    print("PUZZLE GENERATION BENCHMARK")
    print("=" * 60)
    print(f"Puzzles per size: {args.puzzles}")
    print(f"Sizes: {args.sizes}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = Benchmark(puzzles_per_size=args.puzzles, sizes=args.sizes, seed=args.seed)
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    for size, stats in summary["results_by_size"].items():
        print(f"\n{size}x{size}:")
        print(f"  All unique: {stats['all_unique']}")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Clues: {stats['avg_clues']:.1f}")
        print(f"  Reached target: {stats['reached_target']}/{stats['puzzles']}")

    benchmark.save_results(args.output)

    if not args.no_charts:
        from .benchmark.visualizer import Visualizer

        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

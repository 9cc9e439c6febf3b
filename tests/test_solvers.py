"""Unit tests for the grid filler and the bounded solution counter."""

import pytest
from sudokugen.core.board import SudokuBoard
from sudokugen.core.constraints import empty_grid
from sudokugen.core.rng import RandomSource
from sudokugen.solvers import GridFiller, SolutionCounter, count_solutions, has_unique_solution

from fixtures import SOLUTION_4, SOLUTION_6, PUZZLE_9, SOLUTION_9, copy_rows


# Consistent seed that leaves cell (0, 3) without a legal value
UNSATISFIABLE_4 = [
    [1, 2, 0, 0],
    [0, 0, 0, 3],
    [0, 0, 0, 4],
    [0, 0, 0, 0],
]


class TestGridFiller:
    """Tests for GridFiller."""

    @pytest.mark.parametrize("size", [4, 6, 9])
    def test_fills_empty_grid(self, size):
        """Empty grids always complete into a legal solution."""
        grid = empty_grid(size)
        filler = GridFiller(RandomSource(seed=1))

        assert filler.fill(grid)
        assert SudokuBoard(size, grid).is_solved()

    @pytest.mark.parametrize("seed", range(5))
    def test_keeps_seeded_values(self, seed):
        grid = empty_grid(9)
        grid[0][0] = 7
        grid[4][4] = 2
        grid[8][1] = 9

        assert GridFiller(RandomSource(seed)).fill(grid)
        assert (grid[0][0], grid[4][4], grid[8][1]) == (7, 2, 9)
        assert SudokuBoard(9, grid).is_solved()

    def test_different_seeds_give_different_solutions(self):
        grids = []
        for seed in (1, 2, 3):
            grid = empty_grid(9)
            GridFiller(RandomSource(seed)).fill(grid)
            grids.append(grid)
        assert grids[0] != grids[1] or grids[1] != grids[2]

    def test_same_seed_is_reproducible(self):
        first, second = empty_grid(6), empty_grid(6)
        GridFiller(RandomSource(99)).fill(first)
        GridFiller(RandomSource(99)).fill(second)
        assert first == second

    def test_unsatisfiable_seed_fails_and_restores(self):
        grid = copy_rows(UNSATISFIABLE_4)
        filler = GridFiller(RandomSource(seed=0))

        assert not filler.fill(grid)
        assert grid == UNSATISFIABLE_4

    def test_conflicting_seed_fails(self):
        grid = empty_grid(4)
        grid[0][0] = grid[1][1] = 3
        filler = GridFiller(RandomSource(seed=0))

        assert not filler.fill(grid)
        assert filler.stats.extra["inconsistent_seed"]

    def test_node_budget(self):
        grid = empty_grid(9)
        filler = GridFiller(RandomSource(seed=0), max_nodes=0)

        assert not filler.fill(grid)
        assert filler.stats.extra["budget_exhausted"]
        assert grid == empty_grid(9)

    def test_full_grid_needs_no_search(self):
        grid = copy_rows(SOLUTION_4)
        filler = GridFiller()
        assert filler.fill(grid)
        assert grid == SOLUTION_4
        assert filler.stats.nodes_explored == 0

    def test_stats_collected(self):
        filler = GridFiller(RandomSource(seed=3))
        filler.fill(empty_grid(9))

        assert filler.stats.nodes_explored >= 81
        assert filler.stats.time_seconds > 0
        assert filler.stats.to_dict()["algorithm"] == GridFiller.name


class TestSolutionCounter:
    """Tests for the bounded solution counter."""

    def test_unique_9x9_puzzle(self):
        board = SudokuBoard.from_string(PUZZLE_9)
        assert count_solutions(board, limit=2) == 1
        assert has_unique_solution(board)

    def test_does_not_modify_input(self):
        board = SudokuBoard.from_string(PUZZLE_9)
        count_solutions(board)
        assert board.to_string() == PUZZLE_9

        rows = copy_rows(UNSATISFIABLE_4)
        count_solutions(rows)
        assert rows == UNSATISFIABLE_4

    def test_two_clue_4x4_stops_at_cap(self):
        """An under-constrained grid reports the cap, not the full count."""
        grid = empty_grid(4)
        grid[0][0] = 1
        grid[0][1] = 2
        counter = SolutionCounter(RandomSource(seed=5))

        assert counter.count(grid, limit=2) == 2
        assert counter.stats.extra["solutions"] == 2

    def test_cap_bounds_work(self):
        """Counting to a higher cap explores more of the tree."""
        grid = empty_grid(4)
        low, high = SolutionCounter(RandomSource(1)), SolutionCounter(RandomSource(1))

        assert low.count(grid, limit=2) == 2
        assert high.count(grid, limit=50) == 50
        assert high.stats.nodes_explored > low.stats.nodes_explored

    def test_all_4x4_grids(self):
        """There are 288 4x4 grids; a larger cap returns the exact count."""
        assert count_solutions(empty_grid(4), limit=1000) == 288

    @pytest.mark.parametrize("rows", [SOLUTION_4, SOLUTION_6])
    def test_full_legal_grid_counts_one(self, rows):
        assert count_solutions(copy_rows(rows), limit=2) == 1

    def test_full_illegal_grid_counts_zero(self):
        grid = copy_rows(SOLUTION_4)
        grid[0][0], grid[0][1] = grid[0][1], grid[0][0]
        assert count_solutions(grid, limit=2) == 0

    def test_conflicting_clues_count_zero(self):
        grid = empty_grid(9)
        grid[0][0] = grid[0][8] = 4
        assert count_solutions(grid, limit=2) == 0

    def test_dead_end_counts_zero(self):
        assert count_solutions(copy_rows(UNSATISFIABLE_4), limit=2) == 0

    def test_single_blank_cell(self):
        grid = SudokuBoard.from_string(SOLUTION_9)
        grid.clear(4, 4)
        assert count_solutions(grid, limit=2) == 1

    def test_limit_one(self):
        assert count_solutions(empty_grid(6), limit=1) == 1

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            count_solutions(empty_grid(4), limit=0)

    def test_mrv_handles_sparse_9x9(self):
        """Fewer than 17 clues can never be unique; the early exit keeps this cheap."""
        board = SudokuBoard.from_string(PUZZLE_9[:27] + "0" * 54)
        assert board.count_filled() == 10
        counter = SolutionCounter(RandomSource(seed=11))

        assert counter.count(board, limit=2) == 2
        assert counter.stats.nodes_explored < 20000


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

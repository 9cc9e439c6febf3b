"""Unit tests for the board, cells and placement rules."""

import pytest
import numpy as np
from sudokugen.core.board import SudokuBoard
from sudokugen.core.cell import BLANK, Blank, Filled, to_cell, from_cell
from sudokugen.core.validator import is_valid_placement, validate_solution
from sudokugen.errors import InvalidSizeError

from fixtures import SOLUTION_4, SOLUTION_6, PUZZLE_9, SOLUTION_9


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert (board.box_rows, board.box_cols) == (3, 3)
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_create_6x6_board(self):
        """6x6 boards use 2-row by 3-column boxes."""
        board = SudokuBoard(size=6)
        assert (board.box_rows, board.box_cols) == (2, 3)

    @pytest.mark.parametrize("size", [0, 5, 8, 16])
    def test_unsupported_size_rejected(self, size):
        with pytest.raises(InvalidSizeError):
            SudokuBoard(size=size)

    def test_grid_values_out_of_range(self):
        with pytest.raises(ValueError):
            SudokuBoard(4, np.full((4, 4), 5))

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard(4)
        board.set(0, 0, 3)
        assert board.get(0, 0) == 3
        assert not board.is_empty(0, 0)

        board.clear(0, 0)
        assert board.is_empty(0, 0)

    def test_empty_cells_row_major(self):
        board = SudokuBoard.from_2d_list(SOLUTION_4)
        board.clear(2, 1)
        board.clear(0, 3)
        assert board.get_empty_cells() == [(0, 3), (2, 1)]
        assert board.get_row(2).tolist() == [2, 0, 4, 3]

    def test_from_cells_round_trip(self):
        board = SudokuBoard.from_2d_list(SOLUTION_6)
        board.clear(3, 3)
        assert SudokuBoard.from_cells(board.to_cells()) == board

    def test_set_rejects_value_above_size(self):
        board = SudokuBoard(4)
        with pytest.raises(ValueError):
            board.set(0, 0, 5)

    def test_cells_are_explicit(self):
        """Blank and filled cells come back as BLANK and Filled."""
        board = SudokuBoard(4)
        board.set_cell(1, 2, Filled(4))
        assert board.cell(1, 2) == Filled(4)
        assert board.cell(0, 0) is BLANK
        assert board.to_cells()[1][2] == Filled(4)

    def test_get_candidates(self):
        """Test getting legal values for a cell."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        board.set(0, 1, 3)

        candidates = board.get_candidates(0, 2)
        assert 5 not in candidates
        assert 3 not in candidates
        assert len(candidates) == 7

    def test_candidates_of_filled_cell(self):
        board = SudokuBoard.from_2d_list(SOLUTION_4)
        assert board.get_candidates(0, 0) == []

    def test_box_of_6x6(self):
        board = SudokuBoard.from_2d_list(SOLUTION_6)
        assert sorted(board.get_box(1, 4).tolist()) == [1, 2, 3, 4, 5, 6]
        assert board.get_box_index(0, 3) == 1
        assert board.get_box_index(2, 0) == 2
        assert board.get_box_index(5, 5) == 5

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()

        board.set(0, 0, 5)
        board.set(0, 1, 5)
        assert not board.is_valid()

    def test_is_solved(self):
        assert SudokuBoard.from_2d_list(SOLUTION_4).is_solved()
        assert SudokuBoard.from_2d_list(SOLUTION_6).is_solved()
        assert SudokuBoard.from_string(SOLUTION_9).is_solved()
        assert not SudokuBoard.from_string(PUZZLE_9).is_solved()

    def test_from_string(self):
        """Test creating board from string."""
        board = SudokuBoard.from_string("." * 15 + "4", size=4)
        assert board.get(3, 3) == 4
        assert board.count_filled() == 1

    def test_from_string_bad_character(self):
        with pytest.raises(ValueError):
            SudokuBoard.from_string("x" * 16, size=4)

    def test_to_string(self):
        """Test converting board to string."""
        board = SudokuBoard.from_string(PUZZLE_9)
        assert board.to_string() == PUZZLE_9

    def test_from_2d_list_none_is_blank(self):
        board = SudokuBoard.from_2d_list([[None, 2, 3, 4]] + [[0] * 4] * 3)
        assert board.is_empty(0, 0)
        assert board.get(0, 1) == 2

    def test_str_draws_box_borders(self):
        text = str(SudokuBoard.from_2d_list(SOLUTION_6))
        lines = text.splitlines()
        assert lines[0] == "+-------+-------+"
        assert lines[1] == "| 1 2 3 | 4 5 6 |"
        assert lines.count(lines[0]) == 4

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7

        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7
        assert copy != board


class TestCell:
    """Tests for the tagged cell values."""

    def test_blank_is_singleton(self):
        assert Blank() is BLANK

    def test_conversions(self):
        assert to_cell(0) is BLANK
        assert to_cell(np.int32(3)) == Filled(3)
        assert from_cell(Filled(7)) == 7
        assert from_cell(BLANK) == 0

    @pytest.mark.parametrize("value", [0, -1, True, "3"])
    def test_filled_rejects_non_values(self, value):
        with pytest.raises(ValueError):
            Filled(value)


class TestValidator:
    """Tests for validation utilities."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        board = SudokuBoard()
        board.set(0, 0, 5)

        assert not is_valid_placement(board, 0, 5, 5)
        assert not is_valid_placement(board, 5, 0, 5)
        assert not is_valid_placement(board, 1, 1, 5)
        assert is_valid_placement(board, 0, 5, 7)
        assert not is_valid_placement(board, 0, 5, 10)

    def test_validate_solution(self):
        puzzle = SudokuBoard.from_string(PUZZLE_9)
        solution = SudokuBoard.from_string(SOLUTION_9)
        assert validate_solution(puzzle, solution)

    def test_validate_solution_clue_mismatch(self):
        puzzle = SudokuBoard.from_string(PUZZLE_9)
        puzzle.set(0, 2, 1)
        solution = SudokuBoard.from_string(SOLUTION_9)
        assert not validate_solution(puzzle, solution)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

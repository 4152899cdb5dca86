"""Tests for tictactoe_engine/board.py and the Board model."""

import pytest
from pydantic import ValidationError

from tictactoe_engine.board import (
    center_cell,
    corner_cells,
    get_available_moves,
    initialize_board,
    is_full,
    scan_lines,
    validate_win_length,
)
from tictactoe_engine.errors import InvalidBoardError
from tictactoe_engine.models import Board, Player


class TestInitializeBoard:
    """Test initialize_board."""

    @pytest.mark.parametrize("size", [3, 4, 5, 7])
    def test_empty_square(self, size):
        board = initialize_board(size)
        assert board.size == size
        assert all(cell is None for row in board.cells for cell in row)

    def test_default_is_3x3(self):
        assert initialize_board().size == 3

    @pytest.mark.parametrize("size", [0, 1, 2, -3])
    def test_rejects_small_boards(self, size):
        with pytest.raises(InvalidBoardError) as exc_info:
            initialize_board(size)
        assert exc_info.value.board_size == size
        assert exc_info.value.code == "INVALID_BOARD"


class TestBoardModel:
    """Test Board value semantics."""

    def test_place_returns_new_board(self):
        board = initialize_board(3)
        placed = board.place(1, 2, Player.X)
        assert placed.get(1, 2) is Player.X
        assert board.get(1, 2) is None
        assert placed is not board

    def test_place_shares_no_mutable_state(self):
        board = initialize_board(3).place(0, 0, Player.O)
        first = board.place(1, 1, Player.X)
        second = board.place(1, 1, Player.O)
        assert first.get(1, 1) is Player.X
        assert second.get(1, 1) is Player.O
        assert board.get(1, 1) is None

    def test_board_is_frozen(self):
        board = initialize_board(3)
        with pytest.raises(ValidationError):
            board.cells = ()

    def test_rejects_non_square(self):
        with pytest.raises(ValidationError):
            Board(cells=((None, None, None), (None, None, None)))

    def test_rejects_ragged_rows(self):
        with pytest.raises(ValidationError):
            Board(cells=((None,) * 3, (None,) * 2, (None,) * 3))

    def test_in_bounds(self):
        board = initialize_board(4)
        assert board.in_bounds(0, 0)
        assert board.in_bounds(3, 3)
        assert not board.in_bounds(4, 0)
        assert not board.in_bounds(0, -1)


class TestAvailableMoves:
    """Test get_available_moves and is_full."""

    def test_row_major_order(self, board_from_rows):
        board = board_from_rows(["X.O", ".X.", "O.."])
        assert get_available_moves(board) == [
            (0, 1), (1, 0), (1, 2), (2, 1), (2, 2),
        ]

    def test_full_board(self, board_from_rows):
        board = board_from_rows(["XOX", "XOO", "OXX"])
        assert get_available_moves(board) == []
        assert is_full(board)

    def test_empty_board_not_full(self):
        assert not is_full(initialize_board(3))


class TestGeometry:
    """Test center, corners and scan lines."""

    def test_center_odd(self):
        assert center_cell(3) == (1, 1)
        assert center_cell(5) == (2, 2)

    def test_center_even_uses_floor_half(self):
        assert center_cell(4) == (2, 2)

    def test_corners(self):
        assert corner_cells(4) == ((0, 0), (0, 3), (3, 0), (3, 3))

    def test_scan_lines_3x3(self):
        lines = scan_lines(3, 3)
        # 3 rows, 3 columns, 2 diagonals
        assert len(lines) == 8
        assert lines[0] == ((0, 0), (0, 1), (0, 2))
        assert lines[6] == ((0, 0), (1, 1), (2, 2))
        assert lines[7] == ((0, 2), (1, 1), (2, 0))

    def test_scan_lines_include_offset_diagonals(self):
        lines = scan_lines(5, 4)
        assert ((1, 0), (2, 1), (3, 2), (4, 3)) in lines
        assert ((0, 1), (1, 2), (2, 3), (3, 4)) in lines
        assert ((1, 4), (2, 3), (3, 2), (4, 1)) in lines
        assert ((0, 3), (1, 2), (2, 1), (3, 0)) in lines
        # 5 rows + 5 columns + 2 main diagonals + 4 offset diagonals
        assert len(lines) == 16

    def test_scan_lines_cached(self):
        assert scan_lines(4, 3) is scan_lines(4, 3)


class TestValidateWinLength:
    """Test validate_win_length."""

    @pytest.mark.parametrize("size,win_length", [(3, 3), (5, 3), (5, 5)])
    def test_accepts_valid(self, size, win_length):
        validate_win_length(size, win_length)

    @pytest.mark.parametrize("size,win_length", [(3, 2), (3, 4), (5, 6)])
    def test_rejects_invalid(self, size, win_length):
        with pytest.raises(InvalidBoardError) as exc_info:
            validate_win_length(size, win_length)
        assert exc_info.value.context["win_length"] == win_length

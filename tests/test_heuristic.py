"""Tests for tictactoe_engine/ai/heuristic.py."""

import pytest
from hypothesis import given, settings, strategies as st

from tictactoe_engine.ai.heuristic import (
    THREAT_BONUS,
    count_potential_lines,
    evaluate,
    iter_windows,
    score_window,
)
from tictactoe_engine.board import initialize_board
from tictactoe_engine.models import Player

from tests.helpers import parse_rows


class TestWindows:
    """Window geometry."""

    def test_3x3_has_eight_windows(self):
        assert len(iter_windows(3, 3)) == 8

    def test_5x5_win_4(self):
        # 10 row windows, 10 column windows, 4 per diagonal direction
        assert len(iter_windows(5, 4)) == 28

    def test_windows_unique_and_sized(self):
        windows = iter_windows(6, 4)
        assert len(set(windows)) == len(windows)
        assert all(len(w) == 4 for w in windows)

    def test_down_left_diagonal_present(self):
        assert ((0, 3), (1, 2), (2, 1), (3, 0)) in iter_windows(5, 4)


class TestScoreWindow:
    """Scoring of a single window."""

    def test_mixed_window_is_dead(self):
        assert score_window(2, 1, 3) == 0

    def test_empty_window(self):
        assert score_window(0, 0, 3) == 0

    def test_single_mark(self):
        assert score_window(1, 0, 3) == 10
        assert score_window(0, 1, 3) == -10

    def test_threat_bonus_is_added(self):
        assert score_window(2, 0, 3) == 100 + THREAT_BONUS
        assert score_window(0, 3, 4) == -(1000 + THREAT_BONUS)

    def test_no_bonus_without_threat(self):
        assert score_window(2, 0, 4) == 100


class TestEvaluate:
    """Whole-board evaluation."""

    def test_empty_board_scores_zero(self):
        assert evaluate(initialize_board(3), Player.X, Player.O, 3) == 0

    def test_center_mark(self, board_from_rows):
        board = board_from_rows(["...", ".X.", "..."])
        # Row, column and both diagonals
        assert evaluate(board, Player.X, Player.O, 3) == 40
        assert evaluate(board, Player.O, Player.X, 3) == -40

    def test_two_in_a_row(self, board_from_rows):
        board = board_from_rows(["XX.", "...", "..."])
        # Top row threat, two columns and the main diagonal
        assert evaluate(board, Player.X, Player.O, 3) == 200 + 10 + 10 + 10

    def test_blocked_row_scores_nothing(self, board_from_rows):
        board = board_from_rows(["XO.", "...", "..."])
        # Column 0 and the diagonal for X, column 1 for O
        assert evaluate(board, Player.X, Player.O, 3) == 10

    def test_larger_board(self, board_from_rows):
        board = board_from_rows([
            "....",
            ".XX.",
            "....",
            "....",
        ])
        score = evaluate(board, Player.X, Player.O, 3)
        assert score > 0
        assert evaluate(board, Player.O, Player.X, 3) == -score


board_rows = st.lists(
    st.text(alphabet="XO.", min_size=4, max_size=4),
    min_size=4,
    max_size=4,
)


class TestEvaluateProperties:
    """Purity of the evaluator."""

    @settings(max_examples=150, deadline=None)
    @given(rows=board_rows, win_length=st.integers(3, 4))
    def test_idempotent(self, rows, win_length):
        board = parse_rows(rows)
        first = evaluate(board, Player.X, Player.O, win_length)
        second = evaluate(board, Player.X, Player.O, win_length)
        assert first == second

    @settings(max_examples=150, deadline=None)
    @given(rows=board_rows, win_length=st.integers(3, 4))
    def test_antisymmetric(self, rows, win_length):
        board = parse_rows(rows)
        assert evaluate(board, Player.X, Player.O, win_length) == -evaluate(
            board, Player.O, Player.X, win_length
        )


class TestCountPotentialLines:
    """Open lines through a cell."""

    def test_open_pair_counts_both_directions(self, board_from_rows):
        board = board_from_rows(["XX.", "...", "..."])
        assert count_potential_lines(board, 0, 0, Player.X, 3) == 2

    def test_blocked_pair(self, board_from_rows):
        board = board_from_rows(["XXO", "...", "..."])
        assert count_potential_lines(board, 0, 0, Player.X, 3) == 0

    def test_lone_mark(self, board_from_rows):
        board = board_from_rows(["...", ".X.", "..."])
        assert count_potential_lines(board, 1, 1, Player.X, 3) == 0

    @pytest.mark.parametrize("player", [Player.X, Player.O])
    def test_center_of_open_cross(self, board_from_rows, player):
        mark = player.value
        rows = [
            f".{mark}.",
            f"{mark}{mark}{mark}",
            f".{mark}.",
        ]
        board = board_from_rows(rows)
        # Horizontal and vertical are full with no open cell
        assert count_potential_lines(board, 1, 1, player, 3) == 0

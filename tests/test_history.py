"""Tests for tictactoe_engine/history.py."""

import pytest

from tictactoe_engine.game_engine import initialize_game_state, make_move
from tictactoe_engine.history import GameHistory
from tictactoe_engine.models import Player


@pytest.fixture
def history():
    return GameHistory.start(initialize_game_state())


class TestStart:
    """A fresh history has nothing to undo or redo."""

    def test_single_state(self, history):
        assert len(history.states) == 1
        assert history.index == 0
        assert not history.can_undo
        assert not history.can_redo

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            GameHistory(states=())

    def test_cursor_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            GameHistory(states=(initialize_game_state(),), index=1)


class TestUndoRedo:
    """Walking back and forth over recorded states."""

    def test_undo_restores_previous_state(self, history):
        first = history.current
        history = history.push(make_move(first, 1, 1))
        assert history.can_undo

        history = history.undo()
        assert history.current is first
        assert history.can_redo

    def test_redo_after_undo(self, history):
        played = make_move(history.current, 0, 0)
        history = history.push(played).undo().redo()
        assert history.current is played
        assert not history.can_redo

    def test_undo_at_start_is_noop(self, history):
        assert history.undo() is history

    def test_redo_at_end_is_noop(self, history):
        assert history.redo() is history

    def test_push_drops_redo_branch(self, history):
        start = history.current
        history = history.push(make_move(start, 0, 0))
        history = history.push(make_move(history.current, 1, 1))
        history = history.undo().undo()

        branch = make_move(start, 2, 2)
        history = history.push(branch)
        assert len(history.states) == 2
        assert history.current is branch
        assert not history.can_redo

    def test_rejected_move_not_recorded(self, history):
        state = make_move(history.current, 1, 1)
        history = history.push(state)
        # Occupied cell: make_move hands back the same state
        again = make_move(state, 1, 1)
        assert history.push(again) is history

    def test_states_are_frozen(self, history):
        history = history.push(make_move(history.current, 1, 1))
        history = history.undo()
        assert history.states[1].board.get(1, 1) is Player.X
        with pytest.raises(Exception):
            history.index = 1

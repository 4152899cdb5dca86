"""Undo/redo for callers that keep a game on screen.

The engine itself never stores history beyond ``GameState.move_history``;
an application that wants undo and redo keeps a :class:`GameHistory` next to
its current state and replaces it on every change:

    history = GameHistory.start(initialize_game_state())
    history = history.push(make_move(history.current, 1, 1))
    history = history.undo()
    state = history.current
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field, model_validator

from .models import GameState

__all__ = ["GameHistory"]


class GameHistory(BaseModel):
    """Immutable list of snapshots with a cursor on the current one"""
    states: Tuple[GameState, ...]
    index: int = Field(0, ge=0)

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _check_cursor(self) -> "GameHistory":
        if not self.states:
            raise ValueError("history needs at least one state")
        if self.index >= len(self.states):
            raise ValueError(
                f"index {self.index} out of range for {len(self.states)} states"
            )
        return self

    @classmethod
    def start(cls, state: GameState) -> "GameHistory":
        return cls(states=(state,), index=0)

    @property
    def current(self) -> GameState:
        return self.states[self.index]

    @property
    def can_undo(self) -> bool:
        return self.index > 0

    @property
    def can_redo(self) -> bool:
        return self.index < len(self.states) - 1

    def push(self, state: GameState) -> "GameHistory":
        """Record ``state`` after the current one, dropping any redo branch.

        Pushing the current state itself (a rejected move) is a no-op.
        """
        if state is self.current:
            return self
        kept = self.states[: self.index + 1]
        return GameHistory(states=kept + (state,), index=self.index + 1)

    def undo(self) -> "GameHistory":
        if not self.can_undo:
            return self
        return GameHistory(states=self.states, index=self.index - 1)

    def redo(self) -> "GameHistory":
        if not self.can_redo:
            return self
        return GameHistory(states=self.states, index=self.index + 1)

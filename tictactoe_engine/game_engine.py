"""Game state transitions for classic and misère games.

Every function here takes a :class:`GameState` and returns a new one. A move
that cannot be applied (game over, out of range, occupied cell, wrong player)
is a routine event driven by stale UI input, so it returns the unchanged
state instead of raising; use :func:`validate_move` to find out why.
"""

from __future__ import annotations

import logging
import random

from .board import initialize_board, is_full
from .models import (
    DRAW,
    FirstPlayer,
    GameSettings,
    GameState,
    Move,
    MoveValidation,
    Player,
)
from .win_detector import check_winner

logger = logging.getLogger(__name__)

__all__ = [
    "initialize_game_state",
    "is_legal_move",
    "make_move",
    "reset_game",
    "validate_move",
]


def _resolve_first_player(
    first_player: FirstPlayer,
    rng: random.Random | None,
) -> Player:
    if first_player == FirstPlayer.RANDOM:
        chooser = rng if rng is not None else random.Random()
        return Player.X if chooser.random() < 0.5 else Player.O
    return Player(first_player.value)


def initialize_game_state(
    settings: GameSettings | None = None,
    rng: random.Random | None = None,
) -> GameState:
    """Create an empty game for ``settings`` (defaults: 3x3, 3 in a row).

    Args:
        settings: Game settings; validated at construction.
        rng: Generator used to draw the opener when ``first_player`` is
            ``random``.
    """
    if settings is None:
        settings = GameSettings()
    return GameState(
        board=initialize_board(settings.board_size),
        current_player=_resolve_first_player(settings.first_player, rng),
        settings=settings,
    )


def validate_move(
    state: GameState,
    row: int,
    col: int,
    player: Player | None = None,
) -> MoveValidation:
    """Check whether ``(row, col)`` can be played now.

    Args:
        state: Current game state.
        row: Row index.
        col: Column index.
        player: Who is trying to move; ``None`` means the current player.

    Returns:
        MoveValidation with ``is_valid`` and an ``error_message`` on failure.
    """
    if state.is_over:
        return MoveValidation(is_valid=False, error_message="Game is already over")

    if not state.board.in_bounds(row, col):
        size = state.board.size
        return MoveValidation(
            is_valid=False,
            error_message=(
                f"Invalid position ({row}, {col}). Must be 0-{size - 1}."
            ),
        )

    occupant = state.board.get(row, col)
    if occupant is not None:
        return MoveValidation(
            is_valid=False,
            error_message=(
                f"Cell ({row}, {col}) is already occupied by {occupant.value}"
            ),
        )

    if player is not None and player != state.current_player:
        return MoveValidation(
            is_valid=False,
            error_message=f"It is not {player.value}'s turn",
        )

    return MoveValidation(is_valid=True)


def is_legal_move(
    state: GameState,
    row: int,
    col: int,
    player: Player | None = None,
) -> bool:
    return validate_move(state, row, col, player).is_valid


def make_move(
    state: GameState,
    row: int,
    col: int,
    player: Player | None = None,
) -> GameState:
    """Place the current player's mark and return the resulting state.

    Illegal input returns ``state`` itself, unchanged.
    """
    validation = validate_move(state, row, col, player)
    if not validation.is_valid:
        logger.debug(f"Rejected move ({row}, {col}): {validation.error_message}")
        return state

    mover = state.current_player
    settings = state.settings
    board = state.board.place(row, col, mover)
    move = Move(
        row=row,
        col=col,
        player=mover,
        sequence_number=len(state.move_history),
    )

    result = check_winner(board, settings.win_length, settings.mode)
    winner = result.winner
    if winner is None and is_full(board):
        winner = DRAW

    is_over = winner is not None
    return GameState(
        board=board,
        current_player=mover if is_over else mover.opponent,
        winner=winner,
        winning_run=result.winning_run,
        is_over=is_over,
        settings=settings,
        move_history=state.move_history + (move,),
    )


def reset_game(state: GameState, rng: random.Random | None = None) -> GameState:
    """Start a new game with the same settings."""
    return initialize_game_state(state.settings, rng)

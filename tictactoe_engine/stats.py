"""Aggregate statistics over finished games."""

from __future__ import annotations

from typing import Iterable, Optional

from .models import DRAW, GameState, GameStats, Player

__all__ = ["compute_stats"]


def compute_stats(states: Iterable[GameState]) -> GameStats:
    """Summarize the finished games in ``states``.

    Games still in progress are skipped. ``fastest_win`` is the fewest moves
    in any game that had a winner; ``longest_game`` the most moves in any
    finished game.
    """
    x_wins = o_wins = draws = 0
    total_moves = 0
    fastest_win: Optional[int] = None
    longest_game: Optional[int] = None

    for state in states:
        if not state.is_over:
            continue

        moves = len(state.move_history)
        total_moves += moves
        if longest_game is None or moves > longest_game:
            longest_game = moves

        if state.winner == DRAW:
            draws += 1
            continue

        if state.winner is Player.X:
            x_wins += 1
        else:
            o_wins += 1
        if fastest_win is None or moves < fastest_win:
            fastest_win = moves

    total = x_wins + o_wins + draws
    return GameStats(
        x_wins=x_wins,
        o_wins=o_wins,
        draws=draws,
        total_games=total,
        average_moves_per_game=total_moves / total if total else 0.0,
        fastest_win=fastest_win,
        longest_game=longest_game,
    )

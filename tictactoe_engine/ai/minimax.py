"""Exhaustive minimax search with alpha-beta pruning for 3x3 boards.

Scores are from ``player``'s point of view: a win found at ``depth`` plies is
worth ``10 - depth`` (faster wins score higher), a loss ``depth - 10``, and a
full board or the depth backstop ``0``. Candidates are visited in row-major
order without pre-sorting, and the first move reaching the best score is
kept, so the search is fully deterministic.

Every branch places its mark on a new :class:`Board` value, so there is no
make/unmake bookkeeping and no grid is ever shared between branches.
"""

from __future__ import annotations

import logging
import math

from ..board import get_available_moves, is_full
from ..config import MAX_SEARCH_DEPTH
from ..models import Board, Coord, GameMode, Player, SearchResult
from ..win_detector import check_winner

logger = logging.getLogger(__name__)

__all__ = ["SearchStats", "find_best_move", "search_best_move"]


class SearchStats:
    """Mutable node counter threaded through one root search."""

    __slots__ = ("nodes_visited", "cutoffs")

    def __init__(self) -> None:
        self.nodes_visited = 0
        self.cutoffs = 0


def search_best_move(
    board: Board,
    depth: int,
    maximizing: bool,
    alpha: float,
    beta: float,
    player: Player,
    opponent: Player,
    win_length: int = 3,
    mode: GameMode = GameMode.CLASSIC,
    stats: SearchStats | None = None,
) -> SearchResult:
    """Return the minimax score of ``board`` and the move that achieves it.

    Args:
        board: Position to search.
        depth: Plies already played below the root.
        maximizing: True when ``player`` is to move.
        alpha: Best score the maximizer can already guarantee.
        beta: Best score the minimizer can already guarantee.
        player: The side the score is reported for.
        opponent: The other side.
        win_length: Run length that wins.
        mode: Classic or misère win polarity.
        stats: Optional counter updated in place.

    Returns:
        SearchResult whose ``move`` is ``None`` only at terminal positions.
    """
    if stats is not None:
        stats.nodes_visited += 1

    winner = check_winner(board, win_length, mode).winner
    if winner is player:
        return SearchResult(score=10 - depth)
    if winner is opponent:
        return SearchResult(score=depth - 10)
    if is_full(board) or depth >= MAX_SEARCH_DEPTH:
        return SearchResult(score=0)

    mover = player if maximizing else opponent
    best_score = -math.inf if maximizing else math.inf
    best_move: Coord | None = None

    for row, col in get_available_moves(board):
        child = search_best_move(
            board.place(row, col, mover),
            depth + 1,
            not maximizing,
            alpha,
            beta,
            player,
            opponent,
            win_length,
            mode,
            stats,
        )
        if maximizing:
            if child.score > best_score:
                best_score = child.score
                best_move = (row, col)
            alpha = max(alpha, best_score)
        else:
            if child.score < best_score:
                best_score = child.score
                best_move = (row, col)
            beta = min(beta, best_score)

        if beta <= alpha:
            if stats is not None:
                stats.cutoffs += 1
            break

    return SearchResult(score=int(best_score), move=best_move)


def find_best_move(
    board: Board,
    player: Player,
    win_length: int = 3,
    mode: GameMode = GameMode.CLASSIC,
) -> SearchResult:
    """Run a full root search for ``player`` to move on ``board``."""
    stats = SearchStats()
    result = search_best_move(
        board,
        0,
        True,
        -math.inf,
        math.inf,
        player,
        player.opponent,
        win_length,
        mode,
        stats,
    )
    logger.debug(
        f"Minimax for {player.value}: move={result.move} score={result.score} "
        f"nodes={stats.nodes_visited} cutoffs={stats.cutoffs}"
    )
    return result

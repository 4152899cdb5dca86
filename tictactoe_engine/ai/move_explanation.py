"""Move recommendations with human-readable explanations.

Produces the hint shown to a human player: a move, a confidence between 0
and 100, a one-sentence reasoning and the :class:`MoveCategory` behind it.

On the 3x3 board the hint comes straight from exhaustive search. On larger
boards each legal move is scored on its own: an immediate win first, then a
block of the opponent's immediate win on that same cell, then the heuristic
value of the position after the move.

Usage:
    from tictactoe_engine.ai.move_explanation import get_recommended_move

    hint = get_recommended_move(state, Player.X)
    print(f"{hint.move}: {hint.reasoning} ({hint.confidence}%)")
"""

from __future__ import annotations

import logging
import random
from typing import NamedTuple, Optional

from ..board import center_cell, corner_cells, get_available_moves
from ..config import EXHAUSTIVE_SEARCH_SIZE
from ..errors import NoLegalMovesError
from ..models import (
    AIConfig,
    Board,
    GameMode,
    GameState,
    MoveCategory,
    MoveRecommendation,
    Player,
)
from ..win_detector import check_winner
from .base import resolve_rng
from .heuristic import evaluate
from .minimax import find_best_move

logger = logging.getLogger(__name__)

__all__ = ["get_recommended_move", "explain_heuristic_score"]

WIN_SCORE = 1000
BLOCK_SCORE = 900

REASONS = {
    MoveCategory.WINNING: "This move leads to a winning position.",
    MoveCategory.DEFENDING: "This is a defensive move to prevent a loss.",
    MoveCategory.BALANCED: "This move keeps the game balanced.",
    MoveCategory.FALLBACK: "Choosing a random move as a fallback strategy.",
}


class _ScoredMove(NamedTuple):
    row: int
    col: int
    score: int
    confidence: int
    reasoning: str
    category: MoveCategory


def explain_heuristic_score(
    score: int,
    row: int,
    col: int,
    size: int,
) -> tuple[MoveCategory, str, int]:
    """Map a heuristic score to ``(category, reasoning, confidence)``."""
    # Halves round up
    confidence = int(min(90, 50 + abs(score) / 10) + 0.5)

    if score > 50:
        return (
            MoveCategory.ATTACKING,
            "This move creates good attacking opportunities.",
            confidence,
        )
    if score > 20:
        return (
            MoveCategory.DEVELOPING,
            "This move develops a potential threat.",
            confidence,
        )
    if score < -50:
        return (
            MoveCategory.DEFENDING,
            "This move prevents opponent's threats.",
            confidence,
        )
    if score < -20:
        return (
            MoveCategory.CONTROLLING,
            "This move controls an important position.",
            confidence,
        )

    # Center and corners are generally good
    if (row, col) == center_cell(size) or (row, col) in corner_cells(size):
        return (
            MoveCategory.STRATEGIC,
            "This move controls a strategically important position.",
            max(confidence, 65),
        )
    return (
        MoveCategory.FLEXIBLE,
        "This move maintains flexibility for future plays.",
        min(confidence, 60),
    )


def _recommend_exhaustive(
    state: GameState,
    player: Player,
    rng: random.Random,
) -> MoveRecommendation:
    settings = state.settings
    result = find_best_move(
        state.board, player, settings.win_length, settings.mode
    )

    if result.move is None:
        # Only reachable when the position is already decided
        row, col = rng.choice(get_available_moves(state.board))
        return MoveRecommendation(
            row=row,
            col=col,
            confidence=50,
            reasoning=REASONS[MoveCategory.FALLBACK],
            category=MoveCategory.FALLBACK,
        )

    if result.score > 5:
        category, confidence = MoveCategory.WINNING, 100
    elif result.score < -5:
        category, confidence = MoveCategory.DEFENDING, 85
    else:
        category, confidence = MoveCategory.BALANCED, 75

    row, col = result.move
    return MoveRecommendation(
        row=row,
        col=col,
        confidence=confidence,
        reasoning=REASONS[category],
        category=category,
    )


def _score_move(
    board: Board,
    row: int,
    col: int,
    player: Player,
    win_length: int,
    mode: GameMode,
) -> _ScoredMove:
    opponent = player.opponent
    after = board.place(row, col, player)

    if check_winner(after, win_length, mode).winner is player:
        return _ScoredMove(
            row, col, WIN_SCORE, 100,
            "This move creates a winning line!", MoveCategory.WINNING,
        )

    blocked = board.place(row, col, opponent)
    if check_winner(blocked, win_length, mode).winner is opponent:
        return _ScoredMove(
            row, col, BLOCK_SCORE, 95,
            "This move blocks opponent's winning line!", MoveCategory.BLOCKING,
        )

    score = evaluate(after, player, opponent, win_length)
    category, reasoning, confidence = explain_heuristic_score(
        score, row, col, board.size
    )
    return _ScoredMove(row, col, score, confidence, reasoning, category)


def get_recommended_move(
    state: GameState,
    player: Player,
    rng: Optional[random.Random] = None,
) -> MoveRecommendation:
    """Recommend a move for ``player`` and explain it.

    Args:
        state: Current game state.
        player: The side asking for a hint.
        rng: Generator for the fallback pick on an already-decided 3x3
            position; never consulted otherwise.

    Returns:
        MoveRecommendation for the best-scoring move (first on ties).

    Raises:
        NoLegalMovesError: if the board has no empty cell.
    """
    board = state.board
    moves = get_available_moves(board)
    if not moves:
        raise NoLegalMovesError(
            "No available moves",
            context={"player": player.value},
        )

    if board.size == EXHAUSTIVE_SEARCH_SIZE:
        return _recommend_exhaustive(state, player, resolve_rng(rng, AIConfig()))

    settings = state.settings
    best: Optional[_ScoredMove] = None
    for row, col in moves:
        scored = _score_move(
            board, row, col, player, settings.win_length, settings.mode
        )
        if best is None or scored.score > best.score:
            best = scored

    logger.debug(
        f"Recommended ({best.row}, {best.col}) for {player.value}: "
        f"score={best.score} category={best.category.value}"
    )
    return MoveRecommendation(
        row=best.row,
        col=best.col,
        confidence=best.confidence,
        reasoning=best.reasoning,
        category=best.category,
    )

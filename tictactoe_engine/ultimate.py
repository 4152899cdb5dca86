"""Ultimate tic-tac-toe: a 3x3 grid of 3x3 boards.

Winning a sub-board claims the matching super-board cell; a full sub-board
without a winner claims it as ``"draw"``. The sub-cell a player picks sends
the opponent to the sub-board at the same position, unless that super-cell
is already decided, in which case the opponent may play anywhere.

Decided sub-boards are inert: no further move is accepted on them. Like the
classic engine, :func:`make_ultimate_move` returns the unchanged state for an
illegal move instead of raising.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .board import initialize_board, is_full
from .config import ULTIMATE_GRID_SIZE
from .models import (
    DRAW,
    Board,
    GameMode,
    Outcome,
    Player,
    UltimateGameState,
    UltimateMove,
)
from .win_detector import check_winner, find_winning_run

logger = logging.getLogger(__name__)

__all__ = [
    "UltimateCoords",
    "get_ultimate_available_moves",
    "initialize_ultimate_game",
    "is_legal_ultimate_move",
    "make_ultimate_move",
    "super_board_winner",
]

# (main_row, main_col, sub_row, sub_col)
UltimateCoords = Tuple[int, int, int, int]

_GRID = range(ULTIMATE_GRID_SIZE)


def initialize_ultimate_game(first_player: Player = Player.X) -> UltimateGameState:
    """Return an empty meta-board; the first move may go anywhere."""
    empty = initialize_board(ULTIMATE_GRID_SIZE)
    return UltimateGameState(
        super_board=tuple((None,) * ULTIMATE_GRID_SIZE for _ in _GRID),
        sub_boards=tuple((empty,) * ULTIMATE_GRID_SIZE for _ in _GRID),
        constraint=None,
        current_player=first_player,
    )


def _open_boards(game: UltimateGameState) -> list[tuple[int, int]]:
    if game.constraint is not None:
        row, col = game.constraint
        return [(row, col)] if game.super_board[row][col] is None else []
    return [
        (row, col)
        for row in _GRID
        for col in _GRID
        if game.super_board[row][col] is None
    ]


def get_ultimate_available_moves(game: UltimateGameState) -> list[UltimateCoords]:
    """Every legal move, ordered by sub-board then cell (both row-major)."""
    if game.is_over:
        return []

    moves: list[UltimateCoords] = []
    for main_row, main_col in _open_boards(game):
        cells = game.sub_boards[main_row][main_col].cells
        for sub_row in _GRID:
            for sub_col in _GRID:
                if cells[sub_row][sub_col] is None:
                    moves.append((main_row, main_col, sub_row, sub_col))
    return moves


def is_legal_ultimate_move(
    game: UltimateGameState,
    main_row: int,
    main_col: int,
    sub_row: int,
    sub_col: int,
    player: Optional[Player] = None,
) -> bool:
    if game.is_over:
        return False
    coords = (main_row, main_col, sub_row, sub_col)
    if not all(0 <= v < ULTIMATE_GRID_SIZE for v in coords):
        return False
    if player is not None and player != game.current_player:
        return False
    if game.super_board[main_row][main_col] is not None:
        return False
    if game.constraint is not None and game.constraint != (main_row, main_col):
        return False
    return game.sub_boards[main_row][main_col].get(sub_row, sub_col) is None


def super_board_winner(
    super_board: Tuple[Tuple[Optional[Outcome], ...], ...],
) -> Optional[Player]:
    """Winner of the super-board; ``"draw"`` cells never count for anyone."""
    found = find_winning_run(super_board, ULTIMATE_GRID_SIZE)
    return found[0] if found is not None else None


def _sub_board_outcome(board: Board) -> Optional[Outcome]:
    # Sub-boards are always classic: misere never applies to Ultimate.
    winner = check_winner(board, ULTIMATE_GRID_SIZE, GameMode.CLASSIC).winner
    if winner is not None:
        return winner
    if is_full(board):
        return DRAW
    return None


def _replace(grid: tuple, row: int, col: int, value) -> tuple:
    target = grid[row]
    new_row = target[:col] + (value,) + target[col + 1:]
    return grid[:row] + (new_row,) + grid[row + 1:]


def make_ultimate_move(
    game: UltimateGameState,
    main_row: int,
    main_col: int,
    sub_row: int,
    sub_col: int,
    player: Optional[Player] = None,
) -> UltimateGameState:
    """Play the current player's mark and return the resulting state.

    Illegal moves return ``game`` itself, unchanged.
    """
    if not is_legal_ultimate_move(
        game, main_row, main_col, sub_row, sub_col, player
    ):
        logger.debug(
            f"Rejected ultimate move ({main_row}, {main_col}, {sub_row}, "
            f"{sub_col}) with constraint {game.constraint}"
        )
        return game

    mover = game.current_player
    sub_board = game.sub_boards[main_row][main_col].place(
        sub_row, sub_col, mover
    )
    sub_boards = _replace(game.sub_boards, main_row, main_col, sub_board)

    super_board = game.super_board
    outcome = _sub_board_outcome(sub_board)
    if outcome is not None:
        super_board = _replace(super_board, main_row, main_col, outcome)
        logger.debug(f"Sub-board ({main_row}, {main_col}) decided: {outcome}")

    winner: Optional[Outcome] = super_board_winner(super_board)
    if winner is None and all(
        cell is not None for row in super_board for cell in row
    ):
        winner = DRAW

    move = UltimateMove(
        main_row=main_row,
        main_col=main_col,
        sub_row=sub_row,
        sub_col=sub_col,
        player=mover,
    )

    is_over = winner is not None
    if is_over:
        constraint = None
        next_player = mover
    else:
        target_open = super_board[sub_row][sub_col] is None
        constraint = (sub_row, sub_col) if target_open else None
        next_player = mover.opponent

    return UltimateGameState(
        super_board=super_board,
        sub_boards=sub_boards,
        constraint=constraint,
        current_player=next_player,
        winner=winner,
        is_over=is_over,
        move_history=game.move_history + (move,),
    )

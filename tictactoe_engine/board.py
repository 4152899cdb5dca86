"""Board-level helpers for the tic-tac-toe engine.

Everything here is side-effect-free: callers pass in :class:`Board` values
and receive derived views or new boards. Line geometry (which cells make up
each row, column and diagonal) depends only on the board size and win
length, so it is computed once per combination and cached.
"""
from __future__ import annotations

from functools import lru_cache

from .config import MIN_BOARD_SIZE, MIN_WIN_LENGTH
from .errors import InvalidBoardError
from .models import Board, Coord

__all__ = [
    "initialize_board",
    "get_available_moves",
    "is_full",
    "center_cell",
    "corner_cells",
    "scan_lines",
    "validate_win_length",
]


def initialize_board(size: int = 3) -> Board:
    """Return an empty ``size`` x ``size`` board."""
    if size < MIN_BOARD_SIZE:
        raise InvalidBoardError(
            f"Board size must be at least {MIN_BOARD_SIZE}",
            board_size=size,
        )
    return Board.model_construct(
        cells=tuple((None,) * size for _ in range(size))
    )


def get_available_moves(board: Board) -> list[Coord]:
    """Return every empty cell in row-major order."""
    return [
        (row, col)
        for row, cells in enumerate(board.cells)
        for col, cell in enumerate(cells)
        if cell is None
    ]


def is_full(board: Board) -> bool:
    return all(cell is not None for row in board.cells for cell in row)


def center_cell(size: int) -> Coord:
    center = size // 2
    return (center, center)


def corner_cells(size: int) -> tuple[Coord, ...]:
    last = size - 1
    return ((0, 0), (0, last), (last, 0), (last, last))


def validate_win_length(size: int, win_length: int) -> None:
    """Raise :class:`InvalidBoardError` unless 3 <= win_length <= size."""
    if not MIN_WIN_LENGTH <= win_length <= size:
        raise InvalidBoardError(
            f"Win length must be between {MIN_WIN_LENGTH} and the board size",
            board_size=size,
            win_length=win_length,
        )


@lru_cache(maxsize=None)
def scan_lines(size: int, win_length: int) -> tuple[tuple[Coord, ...], ...]:
    """Return the full lines the win detector scans, in scan order.

    Order: every row, every column, the main diagonal, the anti-diagonal,
    then (boards larger than the minimum only) each off-corner diagonal in
    both directions that is long enough to hold ``win_length`` cells.
    """
    lines: list[tuple[Coord, ...]] = []

    for row in range(size):
        lines.append(tuple((row, col) for col in range(size)))
    for col in range(size):
        lines.append(tuple((row, col) for row in range(size)))

    lines.append(tuple((i, i) for i in range(size)))
    lines.append(tuple((i, size - 1 - i) for i in range(size)))

    if size > MIN_BOARD_SIZE:
        # Diagonals starting on the left/right edges below the corners
        for start_row in range(1, size - win_length + 1):
            length = size - start_row
            lines.append(tuple((start_row + i, i) for i in range(length)))
            lines.append(
                tuple((start_row + i, size - 1 - i) for i in range(length))
            )
        # Diagonals starting on the top edge right/left of the corners
        for start_col in range(1, size - win_length + 1):
            length = size - start_col
            lines.append(tuple((i, start_col + i) for i in range(length)))
            lines.append(
                tuple((i, size - 1 - start_col - i) for i in range(length))
            )

    return tuple(lines)

"""Positional evaluation for boards too large to search exhaustively.

The evaluator scores every window of exactly ``win_length`` consecutive cells
(rows, columns, and both diagonal directions, at every valid starting
offset). A window holding marks of both players is dead and scores nothing;
a window holding only one player's marks is worth ``10 ** count`` to that
player, plus :data:`THREAT_BONUS` when it is one mark short of completion.
Scores are summed from ``player``'s point of view, so the opponent's windows
count negatively.

Window geometry depends only on ``(size, win_length)`` and is cached.
"""

from __future__ import annotations

from functools import lru_cache

from ..models import Board, Coord, Player

__all__ = [
    "DIRECTIONS",
    "THREAT_BONUS",
    "count_potential_lines",
    "evaluate",
    "iter_windows",
    "score_window",
]

# Extra weight for a window with win_length - 1 marks and one empty cell.
THREAT_BONUS = 100

# All 8 compass directions as (d_row, d_col).
DIRECTIONS: tuple[Coord, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


@lru_cache(maxsize=None)
def iter_windows(size: int, win_length: int) -> tuple[tuple[Coord, ...], ...]:
    """Return every scoring window on a ``size`` board, once each."""
    span = size - win_length + 1
    windows: list[tuple[Coord, ...]] = []

    # Rows
    for row in range(size):
        for col in range(span):
            windows.append(tuple((row, col + i) for i in range(win_length)))

    # Columns
    for col in range(size):
        for row in range(span):
            windows.append(tuple((row + i, col) for i in range(win_length)))

    # Diagonals (top-left to bottom-right)
    for row in range(span):
        for col in range(span):
            windows.append(
                tuple((row + i, col + i) for i in range(win_length))
            )

    # Diagonals (top-right to bottom-left)
    for row in range(span):
        for col in range(win_length - 1, size):
            windows.append(
                tuple((row + i, col - i) for i in range(win_length))
            )

    return tuple(windows)


def score_window(
    player_count: int,
    opponent_count: int,
    win_length: int,
) -> int:
    """Score one window from the first player's perspective."""
    if player_count and opponent_count:
        return 0

    empty_count = win_length - player_count - opponent_count
    if player_count:
        score = 10 ** player_count
        if player_count == win_length - 1 and empty_count == 1:
            score += THREAT_BONUS
        return score
    if opponent_count:
        score = 10 ** opponent_count
        if opponent_count == win_length - 1 and empty_count == 1:
            score += THREAT_BONUS
        return -score
    return 0


def evaluate(
    board: Board,
    player: Player,
    opponent: Player,
    win_length: int,
) -> int:
    """Return the positional score of ``board`` for ``player``.

    Pure and deterministic: the same board always yields the same score.
    """
    cells = board.cells
    total = 0
    for window in iter_windows(board.size, win_length):
        player_count = 0
        opponent_count = 0
        for row, col in window:
            cell = cells[row][col]
            if cell is player:
                player_count += 1
            elif cell is opponent:
                opponent_count += 1
        total += score_window(player_count, opponent_count, win_length)
    return total


def count_potential_lines(
    board: Board,
    row: int,
    col: int,
    player: Player,
    win_length: int,
) -> int:
    """Count directions from ``(row, col)`` that form an open line.

    For each of the 8 directions the walk goes up to ``win_length - 1`` cells
    forward and then backward, counting ``player``'s marks and stopping at
    the edge, an opponent mark, or the first empty cell (which makes the
    line open). A direction counts when it holds at least two of
    ``player``'s marks, the origin included, and is open.
    """
    size = board.size
    cells = board.cells
    count = 0

    for d_row, d_col in DIRECTIONS:
        line_length = 1
        has_space = False

        for sign in (1, -1):
            for step in range(1, win_length):
                r = row + sign * d_row * step
                c = col + sign * d_col * step
                if not (0 <= r < size and 0 <= c < size):
                    break
                cell = cells[r][c]
                if cell is player:
                    line_length += 1
                elif cell is None:
                    has_space = True
                    break
                else:
                    break

        if line_length >= 2 and has_space:
            count += 1

    return count

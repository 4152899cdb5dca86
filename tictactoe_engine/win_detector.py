"""Win detection for square boards of any size and run length.

:func:`check_winner` is the single source of truth for "has somebody
completed a run" across the engine: the game state transitions, the
exhaustive search, the move selector and the Ultimate super-board all go
through it (or through :func:`find_winning_run` for grids that may hold the
``"draw"`` marker).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .board import scan_lines, validate_win_length
from .models import Board, GameMode, Player, Run, WinResult

_NO_WINNER = WinResult()


def _scan_line(
    grid: Sequence[Sequence[Any]],
    line: tuple[tuple[int, int], ...],
    win_length: int,
) -> tuple[Player, Run] | None:
    """Find the first run of ``win_length`` identical marks along ``line``.

    Only :class:`Player` values form runs; ``None`` and any other marker
    (such as ``"draw"``) break them.
    """
    if len(line) < win_length:
        return None

    count = 0
    current: Any = None
    start = 0
    for index, (row, col) in enumerate(line):
        cell = grid[row][col]
        if isinstance(cell, Player) and cell == current:
            count += 1
        else:
            current = cell if isinstance(cell, Player) else None
            count = 1 if current is not None else 0
            start = index
        if count == win_length:
            return current, line[start:start + win_length]
    return None


def find_winning_run(
    grid: Sequence[Sequence[Any]],
    win_length: int,
) -> tuple[Player, Run] | None:
    """Return ``(player, run)`` for the first completed run, else ``None``.

    Works on any square grid; the caller's board type does not matter.
    """
    size = len(grid)
    for line in scan_lines(size, win_length):
        found = _scan_line(grid, line, win_length)
        if found is not None:
            return found
    return None


def check_winner(
    board: Board,
    win_length: int = 3,
    mode: GameMode = GameMode.CLASSIC,
) -> WinResult:
    """Report the winner of ``board`` and the run that decided it.

    In misère mode the player who completes a run loses, so the reported
    winner is the other player; ``winning_run`` still names the completed
    cells.

    Raises:
        InvalidBoardError: if ``win_length`` does not fit the board.
    """
    validate_win_length(board.size, win_length)

    found = find_winning_run(board.cells, win_length)
    if found is None:
        return _NO_WINNER

    completer, run = found
    winner = completer.opponent if mode == GameMode.MISERE else completer
    return WinResult(winner=winner, winning_run=run)

"""Engine-wide constants and environment-driven settings.

Environment variables are read once at import time:

- ``TICTACTOE_RNG_SEED``: default seed for the per-call random generators
  created when a caller does not inject one. Unset means OS entropy.
- ``TICTACTOE_LOG_LEVEL``: level used by :func:`setup_logging` when none is
  passed explicitly (default ``INFO``).
- ``TICTACTOE_LOG_FORMAT``: ``default``, ``compact``, ``detailed`` or
  ``structured``.
"""

from __future__ import annotations

import os

# Exhaustive minimax is only applied on boards of this size; the 3x3 state
# space (at most 9! move orders) is small enough to enumerate per turn.
EXHAUSTIVE_SEARCH_SIZE = 3

# Board capacity of the exhaustively searched board.
MAX_SEARCH_DEPTH = EXHAUSTIVE_SEARCH_SIZE * EXHAUSTIVE_SEARCH_SIZE

MIN_BOARD_SIZE = 3
MIN_WIN_LENGTH = 3

# Ultimate sub-boards and the super-board are always classic 3x3.
ULTIMATE_GRID_SIZE = 3


def _env_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


DEFAULT_RNG_SEED: int | None = _env_int("TICTACTOE_RNG_SEED")

LOG_LEVEL = os.getenv("TICTACTOE_LOG_LEVEL", "INFO").upper()

LOG_FORMAT = os.getenv("TICTACTOE_LOG_FORMAT", "default").lower()

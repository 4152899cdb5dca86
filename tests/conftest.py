"""
Shared pytest fixtures for tictactoe_engine tests.

The builders themselves live in ``tests/helpers.py`` so hypothesis tests can
call them at module level; the fixtures here expose them to ordinary tests.
Game state fixtures are function-scoped; every value they build is frozen
anyway, so tests cannot leak state into each other.
"""

import logging
import random
from typing import Callable, Sequence

import pytest

from tictactoe_engine.board import scan_lines
from tictactoe_engine.ai.heuristic import iter_windows
from tictactoe_engine.models import Board, GameSettings, GameState

from tests.helpers import make_state, parse_rows


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def board_from_rows() -> Callable[[Sequence[str]], Board]:
    """Factory turning row strings into a Board."""
    return parse_rows


@pytest.fixture
def state_from_rows() -> Callable[..., GameState]:
    """Factory for GameState instances built from row strings."""
    return make_state


@pytest.fixture
def settings_3x3() -> GameSettings:
    return GameSettings()


@pytest.fixture
def settings_5x5() -> GameSettings:
    return GameSettings(board_size=5, win_length=4)


# =============================================================================
# RNG FIXTURES
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator so stochastic branches are reproducible."""
    return random.Random(12345)


@pytest.fixture
def rng_factory() -> Callable[[int], random.Random]:
    return random.Random


# =============================================================================
# CACHE / LOGGING HYGIENE
# =============================================================================


@pytest.fixture(autouse=True)
def clear_caches():
    """Clear geometry caches so cached-vs-fresh bugs surface."""
    yield
    scan_lines.cache_clear()
    iter_windows.cache_clear()


@pytest.fixture
def engine_debug_logs(caplog):
    """Capture DEBUG records from the engine loggers."""
    caplog.set_level(logging.DEBUG, logger="tictactoe_engine")
    return caplog

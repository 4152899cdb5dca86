"""AI implementations for the tic-tac-toe engine.

Most callers only need the two entry points:

    from tictactoe_engine.ai import get_ai_move, get_ultimate_ai_move

    row, col = get_ai_move(state, Player.O, personality=AIPersonality.DEFENSIVE)

For direct access to the AI classes:

    from tictactoe_engine.ai import ClassicAI, UltimateAI

Layout:
- base.py: BaseAI abstract base class and RNG resolution
- minimax.py: exhaustive alpha-beta search (3x3 only)
- heuristic.py: window-based positional evaluation
- move_explanation.py: human-facing move recommendations
- classic_ai.py: personality decision table for square boards
- ultimate_ai.py: meta-board AI
"""

from tictactoe_engine.ai.base import BaseAI, resolve_rng
from tictactoe_engine.ai.classic_ai import ClassicAI, get_ai_move
from tictactoe_engine.ai.heuristic import count_potential_lines, evaluate
from tictactoe_engine.ai.minimax import find_best_move, search_best_move
from tictactoe_engine.ai.move_explanation import get_recommended_move
from tictactoe_engine.ai.ultimate_ai import UltimateAI, get_ultimate_ai_move

__all__ = [
    "BaseAI",
    "ClassicAI",
    "UltimateAI",
    "count_potential_lines",
    "evaluate",
    "find_best_move",
    "get_ai_move",
    "get_recommended_move",
    "get_ultimate_ai_move",
    "resolve_rng",
    "search_best_move",
]

"""Tic-tac-toe game decision engine.

Pure, stateless game logic: boards of any size with configurable run length,
classic and misère win detection, Ultimate (meta-board) play, and AI move
selection with difficulty levels and personalities. Every function takes
plain immutable values and returns new ones; the engine performs no I/O.

    from tictactoe_engine import (
        GameSettings, Player, get_ai_move, initialize_game_state, make_move,
    )

    state = initialize_game_state(GameSettings(board_size=3))
    state = make_move(state, 1, 1)
    row, col = get_ai_move(state, Player.O)
"""

from tictactoe_engine.ai.classic_ai import get_ai_move
from tictactoe_engine.ai.move_explanation import get_recommended_move
from tictactoe_engine.ai.ultimate_ai import get_ultimate_ai_move
from tictactoe_engine.board import get_available_moves, initialize_board
from tictactoe_engine.errors import (
    AIError,
    ConfigurationError,
    InvalidBoardError,
    InvalidMoveError,
    NoLegalMovesError,
    TicTacToeError,
)
from tictactoe_engine.game_engine import (
    initialize_game_state,
    is_legal_move,
    make_move,
    reset_game,
    validate_move,
)
from tictactoe_engine.history import GameHistory
from tictactoe_engine.models import (
    DRAW,
    AIConfig,
    AIDifficulty,
    AIPersonality,
    Board,
    FirstPlayer,
    GameMode,
    GameSettings,
    GameState,
    GameStats,
    Move,
    MoveCategory,
    MoveRecommendation,
    MoveValidation,
    Player,
    SearchResult,
    UltimateGameState,
    UltimateMove,
    WinResult,
)
from tictactoe_engine.stats import compute_stats
from tictactoe_engine.ultimate import (
    get_ultimate_available_moves,
    initialize_ultimate_game,
    is_legal_ultimate_move,
    make_ultimate_move,
)
from tictactoe_engine.win_detector import check_winner

__version__ = "1.0.0"

__all__ = [
    # Models
    "AIConfig",
    "AIDifficulty",
    "AIPersonality",
    "Board",
    "DRAW",
    "FirstPlayer",
    "GameHistory",
    "GameMode",
    "GameSettings",
    "GameState",
    "GameStats",
    "Move",
    "MoveCategory",
    "MoveRecommendation",
    "MoveValidation",
    "Player",
    "SearchResult",
    "UltimateGameState",
    "UltimateMove",
    "WinResult",
    # Errors
    "AIError",
    "ConfigurationError",
    "InvalidBoardError",
    "InvalidMoveError",
    "NoLegalMovesError",
    "TicTacToeError",
    # Classic game
    "check_winner",
    "get_available_moves",
    "initialize_board",
    "initialize_game_state",
    "is_legal_move",
    "make_move",
    "reset_game",
    "validate_move",
    "compute_stats",
    # AI
    "get_ai_move",
    "get_recommended_move",
    # Ultimate
    "get_ultimate_ai_move",
    "get_ultimate_available_moves",
    "initialize_ultimate_game",
    "is_legal_ultimate_move",
    "make_ultimate_move",
]

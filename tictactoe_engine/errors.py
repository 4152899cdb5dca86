"""
Tic-tac-toe engine error hierarchy

All custom exceptions inherit from TicTacToeError so callers can catch the
whole family in one place.

Usage:
    from tictactoe_engine.errors import NoLegalMovesError

    try:
        move = get_ai_move(state, Player.O)
    except NoLegalMovesError as e:
        logger.error(f"AI asked to move on a finished game: {e.message}")

Illegal moves are *not* reported through exceptions by the engine's own
mutators: ``make_move`` and ``make_ultimate_move`` return the unchanged state
instead. ``InvalidMoveError`` exists for callers that want to turn a
``MoveValidation`` into an exception at their own boundary.
"""

from typing import Any

__all__ = [
    # AI errors
    "AIError",
    "NoLegalMovesError",
    # Configuration errors
    "ConfigurationError",
    "InvalidBoardError",
    # Game rules errors
    "InvalidMoveError",
    # Base error
    "TicTacToeError",
]


class TicTacToeError(Exception):
    """Base exception for all engine errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "TICTACTOE_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(TicTacToeError):
    """Invalid engine configuration."""
    code: str = "CONFIGURATION_ERROR"


class InvalidBoardError(ConfigurationError):
    """Board or win-length arguments outside the supported range.

    Raised when a caller passes a board size below 3 or a win length that
    does not fit the board. These are caller errors, not game events.
    """
    code: str = "INVALID_BOARD"

    def __init__(
        self,
        message: str,
        board_size: int | None = None,
        win_length: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.board_size = board_size
        self.win_length = win_length
        if board_size is not None:
            self.context["board_size"] = board_size
        if win_length is not None:
            self.context["win_length"] = win_length


# =============================================================================
# Game Rules Errors
# =============================================================================


class InvalidMoveError(TicTacToeError):
    """Move that cannot be applied to the current state.

    Attributes:
        reason: The validation message explaining the rejection
    """
    code: str = "INVALID_MOVE"

    def __init__(
        self,
        message: str,
        reason: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.reason = reason
        if reason:
            self.context["reason"] = reason


# =============================================================================
# AI Errors
# =============================================================================


class AIError(TicTacToeError):
    """Base class for AI-related errors."""
    code: str = "AI_ERROR"


class NoLegalMovesError(AIError):
    """Move selection was requested on a full or finished position.

    This is a programming error on the caller's side: the engine is never
    asked to move once the game is over.
    """
    code: str = "NO_LEGAL_MOVES"

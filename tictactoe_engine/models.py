"""
Pydantic Models for the tic-tac-toe decision engine
Plain, immutable value objects passed in and out of every engine function
"""

from enum import Enum
from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field, model_validator


class Player(str, Enum):
    """The two marks that can occupy a cell"""
    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Player":
        """Return the other player."""
        return Player.O if self is Player.X else Player.X


# The super-board of the Ultimate variant and the game result share this
# third value; it occupies a cell but never takes part in a winning run.
DRAW = "draw"

Cell = Optional[Player]
Outcome = Union[Player, Literal["draw"]]
Coord = Tuple[int, int]
Run = Tuple[Coord, ...]


class GameMode(str, Enum):
    """Win polarity"""
    CLASSIC = "classic"
    MISERE = "misere"


class FirstPlayer(str, Enum):
    """Who opens the game"""
    X = "X"
    O = "O"
    RANDOM = "random"


class AIDifficulty(str, Enum):
    """Difficulty levels for the AI opponent"""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    IMPOSSIBLE = "impossible"


class AIPersonality(str, Enum):
    """Behavioral profiles that perturb move selection"""
    RANDOM = "random"
    AGGRESSIVE = "aggressive"
    DEFENSIVE = "defensive"
    BALANCED = "balanced"
    LEARNING = "learning"
    STRATEGIC = "strategic"
    MIMICKING = "mimicking"


class MoveCategory(str, Enum):
    """Rationale behind a recommended move"""
    WINNING = "winning"
    BLOCKING = "blocking"
    ATTACKING = "attacking"
    DEVELOPING = "developing"
    DEFENDING = "defending"
    CONTROLLING = "controlling"
    STRATEGIC = "strategic"
    FLEXIBLE = "flexible"
    BALANCED = "balanced"
    FALLBACK = "fallback"


class Board(BaseModel):
    """Square grid of cells.

    A board never changes after construction; :meth:`place` returns a new
    board so that search branches never share a grid.
    """
    cells: Tuple[Tuple[Cell, ...], ...]

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _check_square(self) -> "Board":
        size = len(self.cells)
        if size < 3:
            raise ValueError(f"board size must be at least 3, got {size}")
        for row in self.cells:
            if len(row) != size:
                raise ValueError("board rows must all have the board's size")
        return self

    @property
    def size(self) -> int:
        return len(self.cells)

    def get(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def place(self, row: int, col: int, player: Player) -> "Board":
        """Return a copy of this board with ``player`` at ``(row, col)``."""
        target = self.cells[row]
        new_row = target[:col] + (player,) + target[col + 1:]
        new_cells = self.cells[:row] + (new_row,) + self.cells[row + 1:]
        # Rows keep their length, so the square invariant still holds.
        return Board.model_construct(cells=new_cells)


class GameSettings(BaseModel):
    """Game settings"""
    board_size: int = Field(3, ge=3, alias="boardSize")
    win_length: int = Field(3, ge=3, alias="winLength")
    mode: GameMode = GameMode.CLASSIC
    first_player: FirstPlayer = Field(FirstPlayer.X, alias="firstPlayer")
    ai_difficulty: AIDifficulty = Field(
        AIDifficulty.MEDIUM, alias="aiDifficulty"
    )

    class Config:
        populate_by_name = True
        frozen = True

    @model_validator(mode="after")
    def _check_win_length(self) -> "GameSettings":
        if self.win_length > self.board_size:
            raise ValueError(
                f"win_length ({self.win_length}) cannot exceed "
                f"board_size ({self.board_size})"
            )
        return self


class Move(BaseModel):
    """A recorded move, kept for history and display"""
    row: int
    col: int
    player: Player
    sequence_number: int = Field(alias="sequenceNumber")

    class Config:
        populate_by_name = True
        frozen = True


class GameState(BaseModel):
    """Complete state of a classic (or misère) game"""
    board: Board
    current_player: Player = Field(alias="currentPlayer")
    winner: Optional[Outcome] = None
    winning_run: Optional[Run] = Field(None, alias="winningRun")
    is_over: bool = Field(False, alias="isOver")
    settings: GameSettings
    move_history: Tuple[Move, ...] = Field(default=(), alias="moveHistory")

    class Config:
        populate_by_name = True
        frozen = True

    @model_validator(mode="after")
    def _check_consistency(self) -> "GameState":
        if self.is_over != (self.winner is not None):
            raise ValueError("is_over must be True exactly when a winner is set")
        if self.board.size != self.settings.board_size:
            raise ValueError(
                f"board size {self.board.size} does not match settings "
                f"board_size {self.settings.board_size}"
            )
        return self


class WinResult(BaseModel):
    """Outcome of a single win scan"""
    winner: Optional[Player] = None
    winning_run: Optional[Run] = Field(None, alias="winningRun")

    class Config:
        populate_by_name = True
        frozen = True


class SearchResult(BaseModel):
    """Score and move returned by the exhaustive search"""
    score: int
    move: Optional[Coord] = None

    class Config:
        frozen = True


class MoveRecommendation(BaseModel):
    """Human-facing move hint"""
    row: int
    col: int
    confidence: int = Field(ge=0, le=100)
    reasoning: str
    category: MoveCategory

    class Config:
        frozen = True

    @property
    def move(self) -> Coord:
        return (self.row, self.col)


class AIConfig(BaseModel):
    """AI configuration"""
    difficulty: AIDifficulty = AIDifficulty.MEDIUM
    personality: AIPersonality = AIPersonality.BALANCED
    rng_seed: Optional[int] = Field(None, alias="rngSeed")

    class Config:
        populate_by_name = True
        frozen = True


class UltimateMove(BaseModel):
    """A move on the meta-board: which sub-board, then which cell in it"""
    main_row: int = Field(ge=0, le=2, alias="mainRow")
    main_col: int = Field(ge=0, le=2, alias="mainCol")
    sub_row: int = Field(ge=0, le=2, alias="subRow")
    sub_col: int = Field(ge=0, le=2, alias="subCol")
    player: Player

    class Config:
        populate_by_name = True
        frozen = True

    @property
    def coords(self) -> Tuple[int, int, int, int]:
        return (self.main_row, self.main_col, self.sub_row, self.sub_col)


class UltimateGameState(BaseModel):
    """3x3 grid of 3x3 boards plus the sub-board constraint"""
    super_board: Tuple[Tuple[Optional[Outcome], ...], ...] = Field(
        alias="superBoard"
    )
    sub_boards: Tuple[Tuple[Board, ...], ...] = Field(alias="subBoards")
    constraint: Optional[Coord] = None
    current_player: Player = Field(Player.X, alias="currentPlayer")
    winner: Optional[Outcome] = None
    is_over: bool = Field(False, alias="isOver")
    move_history: Tuple[UltimateMove, ...] = Field(
        default=(), alias="moveHistory"
    )

    class Config:
        populate_by_name = True
        frozen = True

    @model_validator(mode="after")
    def _check_shape(self) -> "UltimateGameState":
        if len(self.super_board) != 3 or any(
            len(row) != 3 for row in self.super_board
        ):
            raise ValueError("super_board must be 3x3")
        if len(self.sub_boards) != 3 or any(
            len(row) != 3 for row in self.sub_boards
        ):
            raise ValueError("sub_boards must be 3x3")
        for row in self.sub_boards:
            for sub_board in row:
                if sub_board.size != 3:
                    raise ValueError("every sub-board must be 3x3")
        if self.is_over != (self.winner is not None):
            raise ValueError("is_over must be True exactly when a winner is set")
        return self


class MoveValidation(BaseModel):
    """Result of a legality check"""
    is_valid: bool
    error_message: Optional[str] = None

    class Config:
        frozen = True


class GameStats(BaseModel):
    """Aggregate results across finished games"""
    x_wins: int = Field(0, alias="xWins")
    o_wins: int = Field(0, alias="oWins")
    draws: int = 0
    total_games: int = Field(0, alias="totalGames")
    average_moves_per_game: float = Field(0.0, alias="averageMovesPerGame")
    fastest_win: Optional[int] = Field(None, alias="fastestWin")
    longest_game: Optional[int] = Field(None, alias="longestGame")

    class Config:
        populate_by_name = True
        frozen = True


__all__ = [
    "AIConfig",
    "AIDifficulty",
    "AIPersonality",
    "Board",
    "Cell",
    "Coord",
    "DRAW",
    "FirstPlayer",
    "GameMode",
    "GameSettings",
    "GameState",
    "GameStats",
    "Move",
    "MoveCategory",
    "MoveRecommendation",
    "MoveValidation",
    "Outcome",
    "Player",
    "Run",
    "SearchResult",
    "UltimateGameState",
    "UltimateMove",
    "WinResult",
]

"""Board and state builders shared by the test modules.

Boards are written as row strings using ``X``, ``O`` and ``.``:

    board = parse_rows(["XX.", ".O.", "..O"])
"""

from typing import Optional, Sequence

from tictactoe_engine.models import (
    DRAW,
    Board,
    GameMode,
    GameSettings,
    GameState,
    Move,
    Player,
    UltimateGameState,
)
from tictactoe_engine.board import initialize_board, is_full
from tictactoe_engine.win_detector import check_winner

_MARKS = {"X": Player.X, "O": Player.O, ".": None}


def parse_rows(rows: Sequence[str]) -> Board:
    return Board(cells=tuple(tuple(_MARKS[ch] for ch in row) for row in rows))


def marks_of(board: Board, player: Player) -> list:
    return [
        (r, c)
        for r, row in enumerate(board.cells)
        for c, cell in enumerate(row)
        if cell is player
    ]


def make_state(
    rows: Sequence[str],
    current_player: Player = Player.X,
    win_length: int = 3,
    mode: GameMode = GameMode.CLASSIC,
    history: Optional[Sequence[tuple]] = None,
) -> GameState:
    """Build a GameState from row strings.

    Without an explicit ``history`` the move list interleaves X's and O's
    marks in row-major order, X first.
    """
    board = parse_rows(rows)
    settings = GameSettings(
        board_size=board.size, win_length=win_length, mode=mode
    )

    if history is None:
        xs = marks_of(board, Player.X)
        os_ = marks_of(board, Player.O)
        history = []
        for i in range(max(len(xs), len(os_))):
            if i < len(xs):
                history.append((*xs[i], Player.X))
            if i < len(os_):
                history.append((*os_[i], Player.O))

    moves = tuple(
        Move(row=r, col=c, player=p, sequence_number=i)
        for i, (r, c, p) in enumerate(history)
    )
    result = check_winner(board, win_length, mode)
    winner = result.winner
    if winner is None and is_full(board):
        winner = DRAW
    return GameState(
        board=board,
        current_player=current_player,
        winner=winner,
        winning_run=result.winning_run,
        is_over=winner is not None,
        settings=settings,
        move_history=moves,
    )


def make_ultimate(
    sub_boards: dict,
    super_board=None,
    constraint=None,
    current: Player = Player.X,
) -> UltimateGameState:
    """Build a meta-board from a ``{(main_row, main_col): rows}`` mapping."""
    grid = [[initialize_board(3) for _ in range(3)] for _ in range(3)]
    for (r, c), rows in sub_boards.items():
        grid[r][c] = parse_rows(rows)
    if super_board is None:
        super_board = ((None,) * 3,) * 3
    return UltimateGameState(
        super_board=super_board,
        sub_boards=tuple(tuple(row) for row in grid),
        constraint=constraint,
        current_player=current,
    )

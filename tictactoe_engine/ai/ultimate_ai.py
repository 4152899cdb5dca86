"""
AI for Ultimate tic-tac-toe

Looks one move ahead on the meta-board: it clinches the game when a sub-board
win completes a super-board line, blocks the same threat from the opponent,
and otherwise steers by positional preferences scaled by difficulty.
"""

import logging
import random
from typing import List, Optional

from ..board import corner_cells
from ..config import ULTIMATE_GRID_SIZE
from ..errors import NoLegalMovesError
from ..models import (
    AIConfig,
    AIDifficulty,
    GameMode,
    Player,
    UltimateGameState,
)
from ..ultimate import (
    UltimateCoords,
    get_ultimate_available_moves,
    make_ultimate_move,
    super_board_winner,
)
from ..win_detector import check_winner
from .base import BaseAI
from .heuristic import evaluate

logger = logging.getLogger(__name__)

# Chance of playing a uniformly random move before any analysis
RANDOM_MOVE_PROBABILITY = {
    AIDifficulty.EASY: 1.0,
    AIDifficulty.MEDIUM: 0.3,
    AIDifficulty.HARD: 0.1,
    AIDifficulty.IMPOSSIBLE: 0.0,
}

CENTER_BOARD_PROBABILITY = 0.8
CENTER_CELL_PROBABILITY = 0.7
CORNER_CELL_PROBABILITY = 0.6

_CENTER = (1, 1)
_CORNERS = corner_cells(ULTIMATE_GRID_SIZE)


class UltimateAI(BaseAI):
    """One-ply tactical AI for the meta-board"""

    @property
    def _strong(self) -> bool:
        return self.difficulty in (AIDifficulty.HARD, AIDifficulty.IMPOSSIBLE)

    def select_move(self, game_state: UltimateGameState) -> UltimateCoords:
        """
        Select a move for ``self.player``

        Raises:
            NoLegalMovesError: if the game is over or no sub-board is open
        """
        moves = get_ultimate_available_moves(game_state)
        if not moves:
            raise NoLegalMovesError(
                "No available moves",
                context={
                    "player": self.player.value,
                    "is_over": game_state.is_over,
                },
            )

        if self.chance(RANDOM_MOVE_PROBABILITY[self.difficulty]):
            return self.get_random_element(moves)

        winning = self._find_sub_board_win(game_state, moves)
        if winning is not None:
            return winning

        if self.difficulty != AIDifficulty.EASY:
            block = self._find_game_block(game_state, moves)
            if block is not None:
                return block

        if self._strong:
            return self._strategic_move(game_state, moves)

        return self.get_random_element(moves)

    def _wins_sub_board(
        self,
        game_state: UltimateGameState,
        move: UltimateCoords,
        player: Player,
    ) -> bool:
        main_row, main_col, sub_row, sub_col = move
        board = game_state.sub_boards[main_row][main_col].place(
            sub_row, sub_col, player
        )
        result = check_winner(board, ULTIMATE_GRID_SIZE, GameMode.CLASSIC)
        return result.winner is player

    def _wins_game(
        self,
        game_state: UltimateGameState,
        move: UltimateCoords,
        player: Player,
    ) -> bool:
        main_row, main_col = move[0], move[1]
        row = game_state.super_board[main_row]
        claimed = row[:main_col] + (player,) + row[main_col + 1:]
        super_board = (
            game_state.super_board[:main_row]
            + (claimed,)
            + game_state.super_board[main_row + 1:]
        )
        return super_board_winner(super_board) is player

    def _find_sub_board_win(
        self,
        game_state: UltimateGameState,
        moves: List[UltimateCoords],
    ) -> Optional[UltimateCoords]:
        """Clinch the game; at hard and above, take any sub-board win"""
        first_sub_win: Optional[UltimateCoords] = None
        for move in moves:
            if not self._wins_sub_board(game_state, move, self.player):
                continue
            if self._wins_game(game_state, move, self.player):
                return move
            if first_sub_win is None:
                first_sub_win = move
        if self._strong:
            return first_sub_win
        return None

    def _find_game_block(
        self,
        game_state: UltimateGameState,
        moves: List[UltimateCoords],
    ) -> Optional[UltimateCoords]:
        for move in moves:
            if self._wins_sub_board(
                game_state, move, self.opponent
            ) and self._wins_game(game_state, move, self.opponent):
                logger.debug(f"Ultimate AI blocking game-winning cell {move}")
                return move
        return None

    def _strategic_move(
        self,
        game_state: UltimateGameState,
        moves: List[UltimateCoords],
    ) -> UltimateCoords:
        # Forward the opponent into a decided super-cell
        if game_state.current_player is self.player:
            for move in moves:
                after = make_ultimate_move(
                    game_state, *move, player=self.player
                )
                if not after.is_over and after.constraint is None:
                    return move

        center_board = [m for m in moves if (m[0], m[1]) == _CENTER]
        if center_board and self.chance(CENTER_BOARD_PROBABILITY):
            return center_board[0]

        center_cell = [m for m in moves if (m[2], m[3]) == _CENTER]
        if center_cell and self.chance(CENTER_CELL_PROBABILITY):
            return center_cell[0]

        corners = [m for m in moves if (m[2], m[3]) in _CORNERS]
        if corners and self.chance(CORNER_CELL_PROBABILITY):
            return self.get_random_element(corners)

        return self._best_evaluated(game_state, moves)

    def _best_evaluated(
        self,
        game_state: UltimateGameState,
        moves: List[UltimateCoords],
    ) -> UltimateCoords:
        best_move = moves[0]
        best_score: Optional[int] = None
        for main_row, main_col, sub_row, sub_col in moves:
            board = game_state.sub_boards[main_row][main_col].place(
                sub_row, sub_col, self.player
            )
            score = evaluate(
                board, self.player, self.opponent, ULTIMATE_GRID_SIZE
            )
            if best_score is None or score > best_score:
                best_score = score
                best_move = (main_row, main_col, sub_row, sub_col)
        return best_move


def get_ultimate_ai_move(
    game: UltimateGameState,
    ai_player: Player,
    difficulty: AIDifficulty = AIDifficulty.MEDIUM,
    rng: Optional[random.Random] = None,
) -> UltimateCoords:
    """Choose a meta-board move for ``ai_player``; see :class:`UltimateAI`."""
    ai = UltimateAI(ai_player, AIConfig(difficulty=difficulty), rng=rng)
    return ai.select_move(game)

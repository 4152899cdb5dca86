"""
Classic AI for square tic-tac-toe boards

Move selection is one decision table shared by every personality. Each
personality only switches branches of that table on or off; nothing is
remembered between calls, so the same state, configuration and RNG seed
always produce the same move.

Usage:
    from tictactoe_engine.ai.classic_ai import get_ai_move

    row, col = get_ai_move(
        state,
        Player.O,
        difficulty=AIDifficulty.HARD,
        personality=AIPersonality.DEFENSIVE,
        rng=random.Random(42),
    )
"""

import logging
import random
from typing import List, Optional

from ..board import center_cell, corner_cells, get_available_moves
from ..config import EXHAUSTIVE_SEARCH_SIZE
from ..errors import NoLegalMovesError
from ..models import (
    AIConfig,
    AIDifficulty,
    AIPersonality,
    Coord,
    GameState,
    Player,
)
from ..win_detector import check_winner
from .base import BaseAI
from .heuristic import count_potential_lines, evaluate
from .minimax import find_best_move
from .move_explanation import get_recommended_move

logger = logging.getLogger(__name__)

# Probabilities used by the decision table
MIMIC_PROBABILITY = 0.7
AGGRESSIVE_SKIP_BLOCK_PROBABILITY = 0.3
BLOCK_PROBABILITY = 0.8
HARD_RANDOM_PROBABILITY = 0.2
CENTER_PROBABILITY = 0.7
CORNER_PROBABILITY = 0.6

# Weight of each open line through the new mark for the aggressive ranking
POTENTIAL_LINE_WEIGHT = 10
# Weight of the AI's own position in the defensive ranking
DEFENSIVE_OWN_WEIGHT = 0.3

LEARNING_IMPOSSIBLE_PROGRESS = 0.6
LEARNING_HARD_PROGRESS = 0.3


def learning_difficulty(
    state: GameState,
    nominal: AIDifficulty,
) -> AIDifficulty:
    """
    Difficulty the learning personality plays at for this turn.

    Progress is the fraction of the board's cells already played. Past 60%
    the AI plays at impossible, past 30% at hard, and before that at the
    nominal difficulty.
    """
    size = state.settings.board_size
    progress = len(state.move_history) / (size * size)
    if progress > LEARNING_IMPOSSIBLE_PROGRESS:
        return AIDifficulty.IMPOSSIBLE
    if progress > LEARNING_HARD_PROGRESS:
        return AIDifficulty.HARD
    return nominal


class ClassicAI(BaseAI):
    """AI for classic and misère games on any square board"""

    def select_move(self, game_state: GameState) -> Coord:
        """
        Select a move for ``self.player``

        Args:
            game_state: Current game state

        Returns:
            ``(row, col)`` of an empty cell

        Raises:
            NoLegalMovesError: if the game is over or the board is full
        """
        moves = get_available_moves(game_state.board)
        if game_state.is_over or not moves:
            raise NoLegalMovesError(
                "No available moves",
                context={
                    "player": self.player.value,
                    "is_over": game_state.is_over,
                },
            )

        personality = self.config.personality
        difficulty = self.config.difficulty

        if personality == AIPersonality.RANDOM:
            return self.get_random_element(moves)

        winning_move = self._find_winning_move(game_state, moves)

        if personality == AIPersonality.MIMICKING and winning_move is None:
            mimic = self._mimic_move(game_state, moves)
            if mimic is not None:
                return mimic

        if personality == AIPersonality.LEARNING:
            difficulty = learning_difficulty(game_state, difficulty)
            logger.debug(
                f"Learning AI at {len(game_state.move_history)} moves plays "
                f"as {difficulty.value}"
            )

        if (
            personality == AIPersonality.STRATEGIC
            and game_state.settings.board_size == EXHAUSTIVE_SEARCH_SIZE
        ):
            result = self._search(game_state)
            if result is not None:
                return result

        if winning_move is not None:
            return winning_move

        block = self._find_block(game_state, moves, difficulty, personality)
        if block is not None:
            return block

        if personality == AIPersonality.AGGRESSIVE:
            return self._rank_aggressive(game_state, moves)

        if personality == AIPersonality.DEFENSIVE:
            return self._rank_defensive(game_state, moves)

        if difficulty in (AIDifficulty.HARD, AIDifficulty.IMPOSSIBLE):
            return self._advanced_move(game_state, moves, difficulty)

        return self._positional_move(game_state, moves)

    def _search(self, game_state: GameState) -> Optional[Coord]:
        settings = game_state.settings
        return find_best_move(
            game_state.board,
            self.player,
            settings.win_length,
            settings.mode,
        ).move

    def _find_winning_move(
        self,
        game_state: GameState,
        moves: List[Coord],
    ) -> Optional[Coord]:
        """First move (row-major) that wins outright for this AI"""
        board = game_state.board
        settings = game_state.settings
        for row, col in moves:
            result = check_winner(
                board.place(row, col, self.player),
                settings.win_length,
                settings.mode,
            )
            if result.winner is self.player:
                return (row, col)
        return None

    def _mimic_move(
        self,
        game_state: GameState,
        moves: List[Coord],
    ) -> Optional[Coord]:
        """Play next to the opponent's most recent mark, some of the time"""
        last = next(
            (
                move
                for move in reversed(game_state.move_history)
                if move.player is self.opponent
            ),
            None,
        )
        if last is None:
            return None

        adjacent = [
            (row, col)
            for row, col in moves
            if abs(row - last.row) <= 1
            and abs(col - last.col) <= 1
            and (row, col) != (last.row, last.col)
        ]
        if adjacent and self.chance(MIMIC_PROBABILITY):
            return self.get_random_element(adjacent)
        return None

    def _find_block(
        self,
        game_state: GameState,
        moves: List[Coord],
        difficulty: AIDifficulty,
        personality: AIPersonality,
    ) -> Optional[Coord]:
        """Take a cell where the opponent would win, subject to personality"""
        if difficulty == AIDifficulty.EASY:
            return None
        if personality == AIPersonality.AGGRESSIVE and self.chance(
            AGGRESSIVE_SKIP_BLOCK_PROBABILITY
        ):
            logger.debug("Aggressive AI skipped blocking this turn")
            return None

        board = game_state.board
        settings = game_state.settings
        for row, col in moves:
            result = check_winner(
                board.place(row, col, self.opponent),
                settings.win_length,
                settings.mode,
            )
            if result.winner is not self.opponent:
                continue
            if personality == AIPersonality.DEFENSIVE or self.chance(
                BLOCK_PROBABILITY
            ):
                return (row, col)
        return None

    def _rank_aggressive(
        self,
        game_state: GameState,
        moves: List[Coord],
    ) -> Coord:
        board = game_state.board
        win_length = game_state.settings.win_length
        best_move = moves[0]
        best_value: Optional[float] = None
        for row, col in moves:
            after = board.place(row, col, self.player)
            value = evaluate(after, self.player, self.opponent, win_length)
            value += POTENTIAL_LINE_WEIGHT * count_potential_lines(
                after, row, col, self.player, win_length
            )
            if best_value is None or value > best_value:
                best_value = value
                best_move = (row, col)
        return best_move

    def _rank_defensive(
        self,
        game_state: GameState,
        moves: List[Coord],
    ) -> Coord:
        board = game_state.board
        win_length = game_state.settings.win_length
        best_move = moves[0]
        best_value: Optional[float] = None
        for row, col in moves:
            # How good the cell would be for the opponent
            value = -evaluate(
                board.place(row, col, self.opponent),
                self.opponent,
                self.player,
                win_length,
            )
            value += DEFENSIVE_OWN_WEIGHT * evaluate(
                board.place(row, col, self.player),
                self.player,
                self.opponent,
                win_length,
            )
            if best_value is None or value > best_value:
                best_value = value
                best_move = (row, col)
        return best_move

    def _advanced_move(
        self,
        game_state: GameState,
        moves: List[Coord],
        difficulty: AIDifficulty,
    ) -> Coord:
        if (
            difficulty == AIDifficulty.IMPOSSIBLE
            and game_state.settings.board_size == EXHAUSTIVE_SEARCH_SIZE
        ):
            result = self._search(game_state)
            if result is not None:
                return result

        recommendation = get_recommended_move(game_state, self.player, self.rng)
        if difficulty == AIDifficulty.HARD and self.chance(
            HARD_RANDOM_PROBABILITY
        ):
            return self.get_random_element(moves)
        return recommendation.move

    def _positional_move(
        self,
        game_state: GameState,
        moves: List[Coord],
    ) -> Coord:
        """Center, then corners, then anything"""
        size = game_state.settings.board_size
        center = center_cell(size)
        if center in moves and self.chance(CENTER_PROBABILITY):
            return center

        corners = [cell for cell in corner_cells(size) if cell in moves]
        if corners and self.chance(CORNER_PROBABILITY):
            return self.get_random_element(corners)

        return self.get_random_element(moves)


def get_ai_move(
    state: GameState,
    ai_player: Player,
    difficulty: AIDifficulty = AIDifficulty.MEDIUM,
    personality: AIPersonality = AIPersonality.BALANCED,
    rng: Optional[random.Random] = None,
) -> Coord:
    """Choose a move for ``ai_player``; see :class:`ClassicAI`."""
    ai = ClassicAI(
        ai_player,
        AIConfig(difficulty=difficulty, personality=personality),
        rng=rng,
    )
    return ai.select_move(state)

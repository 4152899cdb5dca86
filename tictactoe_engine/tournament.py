"""Self-play between AI profiles.

Plays complete games between two :class:`AIConfig` profiles through the same
public functions an application uses (``get_ai_move`` and ``make_move``) and
aggregates round-robin standings. Everything is driven by one seed, so a
tournament can be replayed exactly.

Usage:
    from tictactoe_engine.tournament import run_round_robin

    result = run_round_robin(
        [AIPersonality.BALANCED, AIPersonality.DEFENSIVE],
        GameSettings(board_size=3),
        games_per_pair=10,
        seed=7,
    )
    for standing in result.ranking():
        print(standing.name, standing.points)
"""

from __future__ import annotations

import itertools
import logging
import random
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from .ai.classic_ai import get_ai_move
from .game_engine import initialize_game_state, make_move
from .models import (
    AIConfig,
    AIPersonality,
    DRAW,
    GameSettings,
    GameState,
    Outcome,
    Player,
)

logger = logging.getLogger(__name__)

__all__ = [
    "GameRecord",
    "ProfileStanding",
    "TournamentResult",
    "play_game",
    "run_round_robin",
]


class GameRecord(BaseModel):
    """One finished self-play game"""
    x_profile: AIConfig = Field(alias="xProfile")
    o_profile: AIConfig = Field(alias="oProfile")
    winner: Outcome
    final_state: GameState = Field(alias="finalState")

    class Config:
        populate_by_name = True
        frozen = True

    @property
    def move_count(self) -> int:
        return len(self.final_state.move_history)


class ProfileStanding(BaseModel):
    """Results of one profile across a tournament"""
    name: str
    wins: int = 0
    losses: int = 0
    draws: int = 0

    class Config:
        frozen = True

    @property
    def games(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def points(self) -> float:
        return self.wins + 0.5 * self.draws


class TournamentResult(BaseModel):
    """Standings and game records of a round-robin"""
    settings: GameSettings
    games_per_pair: int = Field(alias="gamesPerPair")
    seed: int
    standings: Tuple[ProfileStanding, ...]
    games: Tuple[GameRecord, ...] = ()

    class Config:
        populate_by_name = True
        frozen = True

    def ranking(self) -> List[ProfileStanding]:
        """Standings by points, then wins; ties keep entry order."""
        return sorted(
            self.standings,
            key=lambda s: (-s.points, -s.wins),
        )


def play_game(
    settings: GameSettings,
    x_profile: AIConfig,
    o_profile: AIConfig,
    rng: random.Random,
) -> GameRecord:
    """Play one complete game and return its record.

    Both sides draw from ``rng``; a game always ends because every turn fills
    one cell.
    """
    profiles = {Player.X: x_profile, Player.O: o_profile}
    state = initialize_game_state(settings, rng)

    while not state.is_over:
        mover = state.current_player
        profile = profiles[mover]
        row, col = get_ai_move(
            state,
            mover,
            difficulty=profile.difficulty,
            personality=profile.personality,
            rng=rng,
        )
        state = make_move(state, row, col)

    return GameRecord(
        x_profile=x_profile,
        o_profile=o_profile,
        winner=state.winner,
        final_state=state,
    )


def run_round_robin(
    personalities: Sequence[AIPersonality],
    settings: Optional[GameSettings] = None,
    games_per_pair: int = 10,
    seed: int = 0,
    keep_games: bool = False,
) -> TournamentResult:
    """Play every pair of personalities against each other.

    Each pair plays ``games_per_pair`` games, swapping X and O every game.
    All profiles play at ``settings.ai_difficulty``.

    Args:
        personalities: Profiles to enter; duplicates are ignored.
        settings: Game settings shared by every game.
        games_per_pair: Games per pairing.
        seed: Master seed; each game gets its own derived generator.
        keep_games: Also return every :class:`GameRecord`.

    Returns:
        TournamentResult with one standing per personality.
    """
    if settings is None:
        settings = GameSettings()
    entrants = list(dict.fromkeys(personalities))

    wins: Dict[str, int] = {p.value: 0 for p in entrants}
    losses: Dict[str, int] = {p.value: 0 for p in entrants}
    draws: Dict[str, int] = {p.value: 0 for p in entrants}
    records: List[GameRecord] = []

    master = random.Random(seed)
    pairs = list(itertools.combinations(entrants, 2))
    logger.info(
        f"Running {len(pairs) * games_per_pair} games "
        f"({len(pairs)} pairs x {games_per_pair} games, seed={seed})"
    )

    for first, second in pairs:
        for game_idx in range(games_per_pair):
            if game_idx % 2 == 0:
                x_side, o_side = first, second
            else:
                x_side, o_side = second, first
            record = play_game(
                settings,
                AIConfig(difficulty=settings.ai_difficulty, personality=x_side),
                AIConfig(difficulty=settings.ai_difficulty, personality=o_side),
                random.Random(master.getrandbits(32)),
            )
            if keep_games:
                records.append(record)

            if record.winner == DRAW:
                draws[x_side.value] += 1
                draws[o_side.value] += 1
            elif record.winner is Player.X:
                wins[x_side.value] += 1
                losses[o_side.value] += 1
            else:
                wins[o_side.value] += 1
                losses[x_side.value] += 1

        logger.debug(f"Finished {first.value} vs {second.value}")

    standings = tuple(
        ProfileStanding(
            name=p.value,
            wins=wins[p.value],
            losses=losses[p.value],
            draws=draws[p.value],
        )
        for p in entrants
    )
    return TournamentResult(
        settings=settings,
        games_per_pair=games_per_pair,
        seed=seed,
        standings=standings,
        games=tuple(records),
    )

#!/usr/bin/env python3
"""Run round-robin tournaments between AI personalities.

Every pair of personalities plays the same number of games, alternating who
opens as X. Results are deterministic for a given seed.

Usage:
    # All personalities on the classic 3x3 board
    python scripts/run_personality_tournament.py

    # A subset on a 5x5 board needing 4 in a row, at hard
    python scripts/run_personality_tournament.py --size 5 --win-length 4 \
        --difficulty hard --personalities aggressive defensive balanced

    # Misere, more games, JSON results
    python scripts/run_personality_tournament.py --mode misere --games 50 \
        --output results.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path

# Setup path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tictactoe_engine.models import (
    AIDifficulty,
    AIPersonality,
    GameMode,
    GameSettings,
)
from tictactoe_engine.tournament import TournamentResult, run_round_robin

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


def print_results(result: TournamentResult, duration: float) -> None:
    """Print formatted standings."""
    settings = result.settings
    logger.info(f"\n{'='*60}")
    logger.info(
        f"TOURNAMENT RESULTS: {settings.board_size}x{settings.board_size}, "
        f"{settings.win_length} in a row, {settings.mode.value}, "
        f"{settings.ai_difficulty.value}"
    )
    logger.info(f"{'='*60}")
    logger.info(f"Games per pair: {result.games_per_pair}  seed: {result.seed}")
    logger.info(f"Duration: {duration:.1f}s")

    logger.info(f"\n{'STANDINGS':-^60}")
    logger.info(
        f"  {'#':>2}  {'personality':<12} "
        f"{'W':>4} {'L':>4} {'D':>4} {'pts':>6}"
    )
    for rank, standing in enumerate(result.ranking(), 1):
        logger.info(
            f"  {rank:>2}. {standing.name:<12} {standing.wins:>4} "
            f"{standing.losses:>4} {standing.draws:>4} {standing.points:>6.1f}"
        )


def main() -> int:
    parser = argparse.ArgumentParser(description="Run personality tournament")
    parser.add_argument("--size", type=int, default=3, help="Board size")
    parser.add_argument("--win-length", type=int, default=None,
                        help="Marks in a row needed to win (default: board size)")
    parser.add_argument("--mode", choices=[m.value for m in GameMode],
                        default=GameMode.CLASSIC.value, help="Win polarity")
    parser.add_argument("--difficulty", choices=[d.value for d in AIDifficulty],
                        default=AIDifficulty.MEDIUM.value,
                        help="Difficulty every profile plays at")
    parser.add_argument("--personalities", nargs="+",
                        choices=[p.value for p in AIPersonality],
                        default=[p.value for p in AIPersonality],
                        help="Personalities to enter")
    parser.add_argument("--games", type=int, default=20, help="Games per pair")
    parser.add_argument("--seed", type=int, default=0, help="Master seed")
    parser.add_argument("--output", type=str, help="Output JSON file for results")

    args = parser.parse_args()

    win_length = args.win_length if args.win_length is not None else args.size
    try:
        settings = GameSettings(
            board_size=args.size,
            win_length=win_length,
            mode=GameMode(args.mode),
            ai_difficulty=AIDifficulty(args.difficulty),
        )
    except ValueError as e:
        logger.error(f"Invalid settings: {e}")
        return 2

    start_time = time.time()
    result = run_round_robin(
        [AIPersonality(p) for p in args.personalities],
        settings,
        games_per_pair=args.games,
        seed=args.seed,
    )
    print_results(result, time.time() - start_time)

    if args.output:
        output_path = Path(args.output)
        with open(output_path, "w") as f:
            json.dump(result.model_dump(mode="json", by_alias=True), f, indent=2)
        logger.info(f"\nResults saved to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

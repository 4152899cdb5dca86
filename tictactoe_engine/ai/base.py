"""
Base AI Player class for the tic-tac-toe engine
Abstract base class that the classic and Ultimate AIs inherit from
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence
import random

from .. import config as engine_config
from ..models import AIConfig, AIDifficulty, Player


def resolve_rng(
    rng: Optional[random.Random],
    ai_config: AIConfig,
) -> random.Random:
    """
    Return the generator an AI call should draw from.

    An injected generator always wins. Otherwise a fresh generator is built
    for this call, seeded from ``AIConfig.rng_seed``, then the
    ``TICTACTOE_RNG_SEED`` environment default, else OS entropy.
    """
    if rng is not None:
        return rng
    if ai_config.rng_seed is not None:
        return random.Random(int(ai_config.rng_seed))
    if engine_config.DEFAULT_RNG_SEED is not None:
        return random.Random(engine_config.DEFAULT_RNG_SEED)
    return random.Random()


class BaseAI(ABC):
    """Abstract base class for all AI implementations"""

    def __init__(
        self,
        player: Player,
        config: Optional[AIConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize AI player

        Args:
            player: The mark this AI plays
            config: AI configuration settings
            rng: Generator for every stochastic decision; built from the
                config seed when omitted
        """
        self.player = player
        self.config = config if config is not None else AIConfig()
        self.rng: random.Random = resolve_rng(rng, self.config)

    @property
    def opponent(self) -> Player:
        return self.player.opponent

    @property
    def difficulty(self) -> AIDifficulty:
        return self.config.difficulty

    @abstractmethod
    def select_move(self, game_state: Any) -> Any:
        """
        Select the move to play in ``game_state``

        Raises:
            NoLegalMovesError: if the position has no legal move
        """

    def chance(self, probability: float) -> bool:
        """Return True with the given probability, using the instance RNG."""
        if probability <= 0:
            return False
        if probability >= 1:
            return True
        return self.rng.random() < probability

    def get_random_element(self, items: Sequence[Any]) -> Optional[Any]:
        """
        Get random element from a sequence using the per-instance RNG.

        Args:
            items: Candidates

        Returns:
            Random item or None if the sequence is empty
        """
        if not items:
            return None
        return self.rng.choice(list(items))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(player={self.player.value}, "
            f"difficulty={self.config.difficulty.value}, "
            f"personality={self.config.personality.value})"
        )

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Game scorer registry.

This module provides:
- ScorerRegistry: Central registry for mini-game scorers
- get_scorer_registry: Factory function for the default registry

Usage:
    from cogniscreen.core.screening.scorers import get_scorer_registry

    registry = get_scorer_registry()
    result = registry.get(GameType.MEMORY).score(telemetry)
"""

import logging
from typing import Iterator

from cogniscreen.core.screening.models import GameType
from cogniscreen.core.screening.scorers.base import GameScorer

logger = logging.getLogger(__name__)


class ScorerNotRegisteredError(Exception):
    """Raised when attempting to get an unregistered scorer.

    Attributes:
        game_type: The game type that was not found.
        available: List of available game types.
    """

    def __init__(self, game_type: GameType, available: list[GameType]) -> None:
        self.game_type = game_type
        self.available = available
        available_str = ", ".join(t.value for t in available)
        message = (
            f"Scorer for '{game_type.value}' not registered. "
            f"Available: {available_str or 'none'}"
        )
        super().__init__(message)


class ScorerRegistry:
    """Registry of scorer instances keyed by game type.

    Example:
        registry = ScorerRegistry()
        registry.register(MemoryScorer())
        result = registry.get(GameType.MEMORY).score(data)
    """

    def __init__(self) -> None:
        self._scorers: dict[GameType, GameScorer] = {}

    def register(self, scorer: GameScorer) -> None:
        """Register a scorer.

        Args:
            scorer: Scorer instance to register.

        Raises:
            ValueError: If a scorer for this game type already exists.
        """
        game_type = scorer.game_type

        if game_type in self._scorers:
            raise ValueError(
                f"Scorer for '{game_type.value}' is already registered. "
                f"Use replace() to override."
            )

        self._scorers[game_type] = scorer
        logger.debug("Registered game scorer: %s (%s)", scorer.name, game_type.value)

    def replace(self, scorer: GameScorer) -> None:
        """Register or replace the scorer for a game type."""
        if scorer.game_type in self._scorers:
            logger.info(
                "Replacing game scorer for %s: %s",
                scorer.game_type.value,
                scorer.name,
            )
        self._scorers[scorer.game_type] = scorer

    def get(self, game_type: GameType) -> GameScorer:
        """Get a scorer by game type.

        Raises:
            ScorerNotRegisteredError: If no scorer is registered.
        """
        if game_type not in self._scorers:
            raise ScorerNotRegisteredError(
                game_type=game_type,
                available=list(self._scorers.keys()),
            )

        return self._scorers[game_type]

    def get_optional(self, game_type: GameType) -> GameScorer | None:
        return self._scorers.get(game_type)

    def has(self, game_type: GameType) -> bool:
        return game_type in self._scorers

    def list_types(self) -> list[GameType]:
        return list(self._scorers.keys())

    def __len__(self) -> int:
        return len(self._scorers)

    def __contains__(self, game_type: GameType) -> bool:
        return game_type in self._scorers

    def __iter__(self) -> Iterator[GameType]:
        return iter(self._scorers)

    def __repr__(self) -> str:
        types = ", ".join(t.value for t in self._scorers.keys())
        return f"ScorerRegistry([{types}])"


# Global default registry instance (lazy-loaded)
_default_registry: ScorerRegistry | None = None


def get_scorer_registry() -> ScorerRegistry:
    """Get or create the default registry with every built-in scorer."""
    global _default_registry

    if _default_registry is None:
        _default_registry = _create_default_registry()

    return _default_registry


def reset_scorer_registry() -> None:
    """Reset the default registry (for testing)."""
    global _default_registry
    _default_registry = None


def _create_default_registry() -> ScorerRegistry:
    from cogniscreen.core.screening.scorers.attention import AttentionScorer
    from cogniscreen.core.screening.scorers.executive import ExecutiveScorer
    from cogniscreen.core.screening.scorers.memory import MemoryScorer
    from cogniscreen.core.screening.scorers.processing import ProcessingScorer
    from cogniscreen.core.screening.scorers.visuospatial import VisuospatialScorer

    registry = ScorerRegistry()
    for scorer in (
        MemoryScorer(),
        AttentionScorer(),
        ProcessingScorer(),
        ExecutiveScorer(),
        VisuospatialScorer(),
    ):
        registry.register(scorer)

    logger.info("Scorer registry initialized with %d scorers", len(registry))
    return registry

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Abstract base class for mini-game scorers.

This module defines the GameScorer ABC that every mini-game scorer
implements. A scorer turns the raw telemetry of one finished game into
an immutable GameTrialResult.

Scorers are stateless; one instance is shared by every session.
"""

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel

from cogniscreen.core.screening.models import CognitiveDomain, GameTrialResult, GameType

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's round() uses banker's rounding; scores must not. Binary
    noise below 1e-9 is discarded first.

    Example:
        >>> round_half_up(82.5)
        83
    """
    value = round(value, 9)
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp a value into [low, high]."""
    return max(low, min(high, value))


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, returning 0 when the denominator is not positive."""
    if denominator <= 0:
        return 0.0
    return numerator / denominator


def mean(values: list[float]) -> float:
    """Arithmetic mean, 0 for an empty list."""
    if not values:
        return 0.0
    return sum(values) / len(values)


class GameScorer(ABC):
    """Abstract base class for all mini-game scorers.

    Subclasses declare the pydantic model of their telemetry in
    `data_model` and implement `score_data`.

    Attributes:
        data_model: Pydantic model the raw telemetry is validated against.

    Example:
        class MemoryScorer(GameScorer):
            data_model = MemoryTrialData

            @property
            def game_type(self) -> GameType:
                return GameType.MEMORY

            def score_data(self, data: MemoryTrialData) -> GameTrialResult:
                ...
    """

    data_model: ClassVar[type[BaseModel]]

    @property
    @abstractmethod
    def game_type(self) -> GameType:
        """Get the game type this scorer handles."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the human-readable scorer name."""
        pass

    @property
    @abstractmethod
    def domain(self) -> CognitiveDomain:
        """Get the cognitive domain this game measures."""
        pass

    @abstractmethod
    def score_data(self, data: Any) -> GameTrialResult:
        """Score validated telemetry.

        Args:
            data: Instance of `data_model`.

        Returns:
            The game result.
        """
        pass

    def score(self, data: BaseModel | Mapping[str, Any]) -> GameTrialResult:
        """Validate raw telemetry and score it.

        Args:
            data: A `data_model` instance or a mapping of its fields.

        Returns:
            The game result.

        Raises:
            pydantic.ValidationError: If the telemetry is malformed.
        """
        if not isinstance(data, self.data_model):
            data = self.data_model.model_validate(data)

        result = self.score_data(data)
        logger.debug(
            "Scored %s game: score=%.0f accuracy=%.1f",
            self.game_type.value,
            result.score,
            result.accuracy,
        )
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.game_type.value})"

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Continuous performance (target letter) attention game scorer."""

from pydantic import BaseModel, Field

from cogniscreen.core.screening.models import CognitiveDomain, GameTrialResult, GameType
from cogniscreen.core.screening.scorers.base import (
    GameScorer,
    clamp,
    mean,
    round_half_up,
    safe_ratio,
)


class AttentionTrialData(BaseModel):
    """Telemetry of one continuous performance run.

    Attributes:
        hits: Target letters responded to.
        misses: Target letters not responded to.
        false_alarms: Responses to non-target letters.
        reaction_times_ms: Reaction time of every response.
    """

    hits: int = Field(default=0, ge=0)
    misses: int = Field(default=0, ge=0)
    false_alarms: int = Field(default=0, ge=0)
    reaction_times_ms: list[float] = Field(default_factory=list)


class AttentionScorer(GameScorer):
    """Scores sustained attention from hits, misses and false alarms.

    Final score weights: accuracy 40%, sensitivity 40%, speed 20%.
    """

    ACCURACY_WEIGHT = 0.4
    SENSITIVITY_WEIGHT = 0.4
    SPEED_WEIGHT = 0.2
    # Speed loses one point per this many ms of mean reaction time
    SPEED_RT_DIVISOR = 20.0

    data_model = AttentionTrialData

    @property
    def game_type(self) -> GameType:
        return GameType.ATTENTION

    @property
    def name(self) -> str:
        return "Letter Detection"

    @property
    def domain(self) -> CognitiveDomain:
        return CognitiveDomain.ATTENTION

    def score_data(self, data: AttentionTrialData) -> GameTrialResult:
        accuracy = safe_ratio(data.hits, data.hits + data.false_alarms)
        sensitivity = safe_ratio(data.hits, data.hits + data.misses)
        avg_rt = mean(data.reaction_times_ms)
        speed = max(0.0, 100.0 - avg_rt / self.SPEED_RT_DIVISOR)

        raw = (
            accuracy * 100.0 * self.ACCURACY_WEIGHT
            + sensitivity * 100.0 * self.SENSITIVITY_WEIGHT
            + speed * self.SPEED_WEIGHT
        )

        return GameTrialResult(
            game_type=self.game_type,
            score=clamp(round_half_up(raw)),
            accuracy=accuracy * 100.0,
            reaction_time_ms=avg_rt,
            domain=self.domain,
            metrics={
                "hits": data.hits,
                "misses": data.misses,
                "false_alarms": data.false_alarms,
                "accuracy": accuracy,
                "sensitivity": sensitivity,
                "speed": speed,
            },
        )

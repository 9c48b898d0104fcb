# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Word recall memory game scorer."""

from pydantic import BaseModel, Field

from cogniscreen.core.screening.models import CognitiveDomain, GameTrialResult, GameType
from cogniscreen.core.screening.scorers.base import GameScorer, round_half_up, safe_ratio


class MemoryTrialData(BaseModel):
    """Telemetry of one word recall round.

    Attributes:
        presented_words: Words shown during the study phase.
        recalled_words: Words the user typed back, any order.
        duration_ms: Time spent on the recall phase.
    """

    presented_words: list[str] = Field(default_factory=list)
    recalled_words: list[str] = Field(default_factory=list)
    duration_ms: float = Field(default=0.0, ge=0.0)


def _normalize(word: str) -> str:
    return word.strip().lower()


class MemoryScorer(GameScorer):
    """Scores immediate word recall.

    Accuracy is the share of presented words that were recalled. Recall
    order does not matter and a word recalled twice counts once.
    """

    data_model = MemoryTrialData

    @property
    def game_type(self) -> GameType:
        return GameType.MEMORY

    @property
    def name(self) -> str:
        return "Word Recall"

    @property
    def domain(self) -> CognitiveDomain:
        return CognitiveDomain.MEMORY

    def score_data(self, data: MemoryTrialData) -> GameTrialResult:
        presented = {_normalize(w) for w in data.presented_words if _normalize(w)}
        recalled = {_normalize(w) for w in data.recalled_words if _normalize(w)}
        correct = presented & recalled

        accuracy = safe_ratio(len(correct), len(presented)) * 100.0

        return GameTrialResult(
            game_type=self.game_type,
            score=round_half_up(accuracy),
            accuracy=accuracy,
            reaction_time_ms=data.duration_ms,
            domain=self.domain,
            metrics={
                "correct_words": sorted(correct),
                "missed_words": sorted(presented - recalled),
                "intrusions": sorted(recalled - presented),
                "presented_count": len(presented),
            },
        )

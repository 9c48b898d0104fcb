# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Summary of a completed set of mini-games."""

from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, Field

from cogniscreen.core.screening.models import CognitiveDomain, GameTrialResult
from cogniscreen.core.screening.scorers.base import mean, round_half_up

STRENGTH_MIN_SCORE = 80
IMPROVEMENT_BELOW_SCORE = 70


class PerformanceLevel(str, Enum):
    """Qualitative band of the overall game score."""

    EXCELLENT = "excellent"
    VERY_GOOD = "very_good"
    GOOD = "good"
    FAIR = "fair"
    NEEDS_IMPROVEMENT = "needs_improvement"


# Lower bound of each band, highest first
_LEVEL_BANDS = (
    (90, PerformanceLevel.EXCELLENT),
    (80, PerformanceLevel.VERY_GOOD),
    (70, PerformanceLevel.GOOD),
    (60, PerformanceLevel.FAIR),
)


class GameSessionSummary(BaseModel):
    """Aggregate view of the games played in one session."""

    overall_score: int = 0
    performance_level: PerformanceLevel = PerformanceLevel.NEEDS_IMPROVEMENT
    games_played: int = 0
    average_accuracy: float = 0.0
    average_reaction_time_ms: float = 0.0
    strength_domains: list[CognitiveDomain] = Field(default_factory=list)
    improvement_domains: list[CognitiveDomain] = Field(default_factory=list)


def performance_level(score: float) -> PerformanceLevel:
    for lower_bound, level in _LEVEL_BANDS:
        if score >= lower_bound:
            return level
    return PerformanceLevel.NEEDS_IMPROVEMENT


def summarize_session(results: Sequence[GameTrialResult]) -> GameSessionSummary:
    """Summarize game results for display after the test phase.

    Args:
        results: Completed game results, any order.

    Returns:
        Summary with an overall score of 0 when no game was played.
    """
    if not results:
        return GameSessionSummary()

    overall = round_half_up(mean([r.score for r in results]))

    strengths: list[CognitiveDomain] = []
    improvements: list[CognitiveDomain] = []
    for result in results:
        if result.score >= STRENGTH_MIN_SCORE and result.domain not in strengths:
            strengths.append(result.domain)
        elif result.score < IMPROVEMENT_BELOW_SCORE and result.domain not in improvements:
            improvements.append(result.domain)

    return GameSessionSummary(
        overall_score=overall,
        performance_level=performance_level(overall),
        games_played=len(results),
        average_accuracy=mean([r.accuracy for r in results]),
        average_reaction_time_ms=mean([r.reaction_time_ms for r in results]),
        strength_domains=strengths,
        improvement_domains=improvements,
    )

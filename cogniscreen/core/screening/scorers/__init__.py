# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Mini-game scorers.

This module provides:
- GameScorer: Abstract base class for all scorers
- MemoryScorer, AttentionScorer, ProcessingScorer, ExecutiveScorer,
  VisuospatialScorer
- ScorerRegistry: Registry for scorer instances
- summarize_session: Overall view of a set of game results
- TaskGenerator: Seedable stimulus generation

Usage:
    from cogniscreen.core.screening.scorers import get_scorer_registry

    registry = get_scorer_registry()
    result = registry.get(GameType.ATTENTION).score(
        {"hits": 20, "misses": 5, "false_alarms": 5, "reaction_times_ms": [400]}
    )
"""

from cogniscreen.core.screening.scorers.attention import AttentionScorer, AttentionTrialData
from cogniscreen.core.screening.scorers.base import GameScorer, round_half_up
from cogniscreen.core.screening.scorers.executive import (
    ExecutiveScorer,
    ExecutiveTrialData,
    StroopTrial,
)
from cogniscreen.core.screening.scorers.memory import MemoryScorer, MemoryTrialData
from cogniscreen.core.screening.scorers.processing import (
    ProcessingScorer,
    ProcessingTaskType,
    ProcessingTrial,
    ProcessingTrialData,
)
from cogniscreen.core.screening.scorers.registry import (
    ScorerNotRegisteredError,
    ScorerRegistry,
    get_scorer_registry,
    reset_scorer_registry,
)
from cogniscreen.core.screening.scorers.session import (
    GameSessionSummary,
    PerformanceLevel,
    summarize_session,
)
from cogniscreen.core.screening.scorers.tasks import RotationTask, ScheduledTask, TaskGenerator
from cogniscreen.core.screening.scorers.visuospatial import (
    RotationTrial,
    VisuospatialScorer,
    VisuospatialTrialData,
)

__all__ = [
    # Base
    "GameScorer",
    "round_half_up",
    # Scorers
    "MemoryScorer",
    "MemoryTrialData",
    "AttentionScorer",
    "AttentionTrialData",
    "ProcessingScorer",
    "ProcessingTaskType",
    "ProcessingTrial",
    "ProcessingTrialData",
    "ExecutiveScorer",
    "ExecutiveTrialData",
    "StroopTrial",
    "VisuospatialScorer",
    "VisuospatialTrialData",
    "RotationTrial",
    # Registry
    "ScorerRegistry",
    "ScorerNotRegisteredError",
    "get_scorer_registry",
    "reset_scorer_registry",
    # Session
    "GameSessionSummary",
    "PerformanceLevel",
    "summarize_session",
    # Tasks
    "TaskGenerator",
    "ScheduledTask",
    "RotationTask",
]

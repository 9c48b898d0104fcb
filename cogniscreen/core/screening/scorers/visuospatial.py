# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Mental rotation game scorer.

Each task shows a shape and four candidates; one is the shape rotated,
and on mirror tasks one distractor is its mirror image. The final score
blends six components:

- accuracy (25%): correct answers over the scheduled tasks
- mirror discrimination (20%): mirror-image confusions per mirror task
- rotation speed (20%): response time against a complexity-scaled target
- working memory (15%): accuracy weighted by task complexity
- consistency (10%): spread of the response times
- sustained (10%): accuracy over the answered tasks
"""

import statistics

from pydantic import BaseModel, Field

from cogniscreen.core.screening.models import CognitiveDomain, GameTrialResult, GameType
from cogniscreen.core.screening.scorers.base import (
    GameScorer,
    clamp,
    mean,
    round_half_up,
    safe_ratio,
)


class RotationTrial(BaseModel):
    """One answered rotation task.

    Attributes:
        rotation_deg: Rotation applied to the shape.
        complexity: Shape complexity plus one for an off-grid angle and
            one for a mirror distractor.
        mirror_task: Whether a mirror image was among the candidates.
        mirror_error: Whether the mirror image was chosen.
    """

    rotation_deg: int = Field(ge=0, lt=360)
    complexity: int = Field(default=1, ge=1, le=5)
    mirror_task: bool = False
    mirror_error: bool = False
    reaction_time_ms: float = Field(ge=0.0)
    correct: bool


class VisuospatialTrialData(BaseModel):
    """Telemetry of one mental rotation run."""

    trials: list[RotationTrial] = Field(default_factory=list)
    target_trial_count: int = Field(default=20, ge=0)


class VisuospatialScorer(GameScorer):
    """Scores mental rotation and mirror discrimination."""

    WEIGHTS = {
        "accuracy": 0.25,
        "mirror_discrimination": 0.20,
        "rotation_speed": 0.20,
        "working_memory": 0.15,
        "consistency": 0.10,
        "sustained": 0.10,
    }

    BASE_POINTS = 100
    COMPLEXITY_POINTS = 25
    OFF_GRID_BONUS = 30
    MIRROR_BONUS = 20
    MIRROR_ERROR_PENALTY = 50

    data_model = VisuospatialTrialData

    @property
    def game_type(self) -> GameType:
        return GameType.VISUOSPATIAL

    @property
    def name(self) -> str:
        return "Mental Rotation"

    @property
    def domain(self) -> CognitiveDomain:
        return CognitiveDomain.VISUOSPATIAL

    @staticmethod
    def optimal_time_ms(trial: RotationTrial) -> float:
        return 2000.0 + trial.complexity * 1000.0

    def trial_points(self, trial: RotationTrial) -> float:
        """In-game points awarded for one trial (0 when incorrect)."""
        if not trial.correct:
            return 0.0

        overrun = max(0.0, trial.reaction_time_ms - self.optimal_time_ms(trial))
        return (
            self.BASE_POINTS
            + trial.complexity * self.COMPLEXITY_POINTS
            + max(0.0, 150.0 - overrun / 50.0)
            + (self.OFF_GRID_BONUS if trial.rotation_deg % 90 else 0)
            + (self.MIRROR_BONUS if trial.mirror_task else 0)
        )

    def score_data(self, data: VisuospatialTrialData) -> GameTrialResult:
        trials = data.trials
        if not trials:
            return GameTrialResult(
                game_type=self.game_type,
                score=0,
                accuracy=0.0,
                reaction_time_ms=0.0,
                domain=self.domain,
                metrics={"attempted": 0, "points": 0.0},
            )

        correct = [t for t in trials if t.correct]
        mirror_tasks = sum(1 for t in trials if t.mirror_task)
        mirror_errors = sum(1 for t in trials if t.mirror_error)
        reaction_times = [t.reaction_time_ms for t in trials]

        scheduled = max(data.target_trial_count, len(trials))
        accuracy = safe_ratio(len(correct), scheduled) * 100.0

        if mirror_tasks:
            mirror = clamp(100.0 - mirror_errors / mirror_tasks * self.MIRROR_ERROR_PENALTY)
        else:
            mirror = 100.0

        components = {
            "accuracy": accuracy,
            "mirror_discrimination": mirror,
            "rotation_speed": mean([self._speed(t) for t in correct]),
            "working_memory": self._working_memory(trials),
            "consistency": max(0.0, 100.0 - statistics.pstdev(reaction_times) / 100.0),
            "sustained": safe_ratio(len(correct), len(trials)) * 100.0,
        }

        raw = sum(components[key] * weight for key, weight in self.WEIGHTS.items())

        return GameTrialResult(
            game_type=self.game_type,
            score=clamp(round_half_up(raw)),
            accuracy=accuracy,
            reaction_time_ms=mean(reaction_times),
            domain=self.domain,
            metrics={
                "attempted": len(trials),
                "points": sum(self.trial_points(t) for t in trials),
                "mirror_tasks": mirror_tasks,
                "mirror_errors": mirror_errors,
                **components,
            },
        )

    def _speed(self, trial: RotationTrial) -> float:
        overrun = max(0.0, trial.reaction_time_ms - self.optimal_time_ms(trial))
        return max(0.0, 100.0 - overrun / 50.0)

    @staticmethod
    def _working_memory(trials: list[RotationTrial]) -> float:
        levels: dict[int, list[bool]] = {}
        for trial in trials:
            levels.setdefault(trial.complexity, []).append(trial.correct)

        weighted = sum(
            level * safe_ratio(sum(results), len(results)) * 100.0
            for level, results in levels.items()
        )
        return safe_ratio(weighted, sum(levels))

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Multi-task processing speed game scorer.

The game presents a mixed stream of short tasks (match, math, comparison,
stroop, spatial) at three complexity levels. The final score blends six
components:

- speed (25%): mean reaction time
- accuracy (20%): share of correct answers
- switching efficiency (20%): extra time spent on task-switch trials
- sustained performance (15%): accuracy drift between first and last trials
- working memory (10%): accuracy weighted by complexity level
- completion (10%): attempted share of the scheduled tasks
"""

from enum import Enum

from pydantic import BaseModel, Field

from cogniscreen.core.screening.models import CognitiveDomain, GameTrialResult, GameType
from cogniscreen.core.screening.scorers.base import (
    GameScorer,
    clamp,
    mean,
    round_half_up,
    safe_ratio,
)


class ProcessingTaskType(str, Enum):
    """Task kinds of the processing speed game."""

    MATCH = "match"
    MATH = "math"
    COMPARISON = "comparison"
    STROOP = "stroop"
    SPATIAL = "spatial"


class ProcessingTrial(BaseModel):
    """One answered task."""

    task_type: ProcessingTaskType
    complexity: int = Field(default=1, ge=1, le=3)
    reaction_time_ms: float = Field(ge=0.0)
    correct: bool


class ProcessingTrialData(BaseModel):
    """Telemetry of one processing speed run.

    Attributes:
        trials: Answered tasks in presentation order.
        target_trial_count: Number of tasks scheduled for the run.
    """

    trials: list[ProcessingTrial] = Field(default_factory=list)
    target_trial_count: int = Field(default=75, ge=0)


class ProcessingScorer(GameScorer):
    """Scores processing speed and cognitive flexibility."""

    WEIGHTS = {
        "speed": 0.25,
        "accuracy": 0.20,
        "switching": 0.20,
        "sustained": 0.15,
        "working_memory": 0.10,
        "completion": 0.10,
    }

    TYPE_BONUS = {
        ProcessingTaskType.MATH: 10,
        ProcessingTaskType.STROOP: 20,
        ProcessingTaskType.SPATIAL: 15,
        ProcessingTaskType.MATCH: 5,
        ProcessingTaskType.COMPARISON: 8,
    }

    BASE_POINTS = 50
    COMPLEXITY_POINTS = 20
    SWITCH_PENALTY = 10
    # Trials compared at the start and end of the run
    SUSTAINED_WINDOW = 10

    data_model = ProcessingTrialData

    @property
    def game_type(self) -> GameType:
        return GameType.PROCESSING

    @property
    def name(self) -> str:
        return "Processing Speed"

    @property
    def domain(self) -> CognitiveDomain:
        return CognitiveDomain.EXECUTIVE

    def trial_points(self, trial: ProcessingTrial, is_switch: bool) -> float:
        """In-game points awarded for one trial (0 when incorrect)."""
        if not trial.correct:
            return 0.0

        optimal_ms = 800 + trial.complexity * 400
        time_bonus = max(0.0, 100.0 - max(0.0, (trial.reaction_time_ms - optimal_ms) / 20.0))
        switch_penalty = self.SWITCH_PENALTY if is_switch else 0

        return (
            self.BASE_POINTS
            + trial.complexity * self.COMPLEXITY_POINTS
            + time_bonus
            + self.TYPE_BONUS.get(trial.task_type, 0)
            - switch_penalty
        )

    def score_data(self, data: ProcessingTrialData) -> GameTrialResult:
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

        switch_flags = [
            i > 0 and trial.task_type != trials[i - 1].task_type
            for i, trial in enumerate(trials)
        ]

        points = sum(
            self.trial_points(trial, is_switch)
            for trial, is_switch in zip(trials, switch_flags)
        )

        accuracy = self._accuracy(trials)
        avg_rt = mean([t.reaction_time_ms for t in trials])
        switch_rts = [t.reaction_time_ms for t, s in zip(trials, switch_flags) if s]
        avg_switch_rt = mean(switch_rts) if switch_rts else avg_rt

        components = {
            "speed": max(0.0, 100.0 - avg_rt / 30.0),
            "accuracy": accuracy,
            "switching": clamp(100.0 - (avg_switch_rt - avg_rt) / 10.0),
            "sustained": self._sustained_performance(trials, accuracy),
            "working_memory": self._working_memory(trials),
            "completion": min(
                100.0, safe_ratio(len(trials), data.target_trial_count) * 100.0
            ),
        }

        raw = sum(components[key] * weight for key, weight in self.WEIGHTS.items())

        return GameTrialResult(
            game_type=self.game_type,
            score=clamp(round_half_up(raw)),
            accuracy=accuracy,
            reaction_time_ms=avg_rt,
            domain=self.domain,
            metrics={
                "attempted": len(trials),
                "points": points,
                "switch_trials": len(switch_rts),
                "switch_cost_ms": avg_switch_rt - avg_rt,
                **components,
            },
        )

    @staticmethod
    def _accuracy(trials: list[ProcessingTrial]) -> float:
        return safe_ratio(sum(1 for t in trials if t.correct), len(trials)) * 100.0

    def _sustained_performance(self, trials: list[ProcessingTrial], accuracy: float) -> float:
        window = self.SUSTAINED_WINDOW
        if len(trials) > window:
            early = self._accuracy(trials[:window])
            late = self._accuracy(trials[-window:])
        else:
            early = late = accuracy
        return max(0.0, 100.0 - abs(early - late))

    @staticmethod
    def _working_memory(trials: list[ProcessingTrial]) -> float:
        levels: dict[int, list[bool]] = {}
        for trial in trials:
            levels.setdefault(trial.complexity, []).append(trial.correct)

        weighted = sum(
            level * safe_ratio(sum(results), len(results)) * 100.0
            for level, results in levels.items()
        )
        return safe_ratio(weighted, sum(levels))

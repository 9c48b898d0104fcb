# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Executive function game scorer (Stroop block plus Tower of Hanoi)."""

from pydantic import BaseModel, Field

from cogniscreen.core.screening.models import CognitiveDomain, GameTrialResult, GameType
from cogniscreen.core.screening.scorers.base import (
    GameScorer,
    clamp,
    mean,
    round_half_up,
    safe_ratio,
)

# Optimal solution length of the three-disk tower
TOWER_MIN_MOVES = 7


class StroopTrial(BaseModel):
    """One colour-word Stroop response."""

    correct: bool
    reaction_time_ms: float = Field(ge=0.0)
    congruent: bool = False


class ExecutiveTrialData(BaseModel):
    """Telemetry of one executive function run.

    Attributes:
        stroop_trials: Stroop responses in order.
        tower_solved: Whether the tower puzzle was completed.
        tower_moves: Moves used on the tower puzzle.
        tower_time_ms: Time spent on the tower puzzle.
    """

    stroop_trials: list[StroopTrial] = Field(default_factory=list)
    tower_solved: bool = False
    tower_moves: int = Field(default=0, ge=0)
    tower_time_ms: float = Field(default=0.0, ge=0.0)


class ExecutiveScorer(GameScorer):
    """Scores inhibition and planning.

    The tower puzzle counts as one extra task next to the Stroop trials.
    """

    ACCURACY_WEIGHT = 0.6
    SPEED_WEIGHT = 0.4
    SPEED_RT_DIVISOR = 40.0

    data_model = ExecutiveTrialData

    @property
    def game_type(self) -> GameType:
        return GameType.EXECUTIVE

    @property
    def name(self) -> str:
        return "Executive Function"

    @property
    def domain(self) -> CognitiveDomain:
        return CognitiveDomain.EXECUTIVE

    def score_data(self, data: ExecutiveTrialData) -> GameTrialResult:
        stroop = data.stroop_trials
        if not stroop and not data.tower_solved:
            return GameTrialResult(
                game_type=self.game_type,
                score=0,
                accuracy=0.0,
                reaction_time_ms=0.0,
                domain=self.domain,
                metrics={"stroop_trials": 0, "tower_solved": False, "speed": 0.0},
            )

        correct = sum(1 for t in stroop if t.correct) + (1 if data.tower_solved else 0)
        accuracy = safe_ratio(correct, len(stroop) + 1) * 100.0

        reaction_times = [t.reaction_time_ms for t in stroop]
        if data.tower_solved:
            reaction_times.append(data.tower_time_ms)
        avg_rt = mean(reaction_times)
        speed = max(0.0, 100.0 - avg_rt / self.SPEED_RT_DIVISOR)

        raw = accuracy * self.ACCURACY_WEIGHT + speed * self.SPEED_WEIGHT

        congruent = [t.reaction_time_ms for t in stroop if t.congruent]
        incongruent = [t.reaction_time_ms for t in stroop if not t.congruent]
        if congruent and incongruent:
            interference_cost = mean(incongruent) - mean(congruent)
        else:
            interference_cost = 0.0

        if data.tower_solved:
            tower_efficiency = max(0.0, 100.0 - (data.tower_moves - TOWER_MIN_MOVES) * 10.0)
        else:
            tower_efficiency = 0.0

        return GameTrialResult(
            game_type=self.game_type,
            score=clamp(round_half_up(raw)),
            accuracy=accuracy,
            reaction_time_ms=avg_rt,
            domain=self.domain,
            metrics={
                "stroop_trials": len(stroop),
                "stroop_correct": sum(1 for t in stroop if t.correct),
                "interference_cost_ms": interference_cost,
                "tower_solved": data.tower_solved,
                "tower_moves": data.tower_moves,
                "tower_efficiency": min(100.0, tower_efficiency),
                "speed": speed,
            },
        )

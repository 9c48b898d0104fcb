# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Data models for the screening engine.

This module defines Pydantic models and enums for:
- Questionnaire items, options and answers
- Demographic intake
- Mini-game results
- The derived cognitive profile

These models are the contract between the engine and the presentation
layer. Display strings are resolved from message ids before they reach
a profile; nothing here depends on the active language.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cogniscreen.utils.datetime import ensure_utc, utc_now

# Question id -> selected option value, in answer order
AnswerMap = dict[int, str]


class QuestionCategory(str, Enum):
    """Symptom questionnaire categories."""

    MEMORY = "memory"
    LANGUAGE = "language"
    ORIENTATION = "orientation"
    EXECUTIVE_FUNCTION = "executive_function"
    DAILY_FUNCTION = "daily_function"
    BEHAVIORAL = "behavioral"
    SOCIAL = "social"
    VISUOSPATIAL = "visuospatial"


class CognitiveDomain(str, Enum):
    """Cognitive domains of the profile, in display order."""

    MEMORY = "memory"
    ATTENTION = "attention"
    LANGUAGE = "language"
    VISUOSPATIAL = "visuospatial"
    EXECUTIVE = "executive"
    ORIENTATION = "orientation"


class GameType(str, Enum):
    """Interactive mini-games."""

    MEMORY = "memory"
    ATTENTION = "attention"
    PROCESSING = "processing"
    EXECUTIVE = "executive"
    VISUOSPATIAL = "visuospatial"


class Education(str, Enum):
    """Highest completed education level."""

    HIGH_SCHOOL = "high_school"
    SOME_COLLEGE = "some_college"
    BACHELORS = "bachelors"
    GRADUATE = "graduate"


class RiskLevel(str, Enum):
    """Risk tier derived from the composite score."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class AssessmentPhase(str, Enum):
    """Phases of one screening session."""

    DEMOGRAPHICS = "demographics"
    QUESTIONNAIRE = "questionnaire"
    COGNITIVE_TESTS = "cognitive_tests"
    ANALYSIS = "analysis"


class QuestionOption(BaseModel):
    """A selectable answer with its severity score (0 = no symptom)."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    score: int = Field(ge=0, le=3)


class QuestionItem(BaseModel):
    """An immutable questionnaire item.

    Attributes:
        id: Unique item id.
        category: Category whose sub-score this item contributes to.
        text: Canonical English wording.
        options: Options ordered from least to most severe.
        is_adaptive: True for supplemental follow-up items.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    category: QuestionCategory
    text: str
    options: tuple[QuestionOption, ...]
    is_adaptive: bool = False

    def option_for(self, value: str | None) -> QuestionOption | None:
        """Find the option with the given value."""
        for option in self.options:
            if option.value == value:
                return option
        return None

    def score_for(self, value: str | None) -> int:
        """Score of an answer; missing or unknown answers score 0."""
        option = self.option_for(value)
        return option.score if option else 0

    @property
    def max_score(self) -> int:
        """Highest score any option of this item can contribute."""
        return max((o.score for o in self.options), default=0)

    def severity_rank(self, value: str | None) -> int | None:
        """Position of an answer when options are ordered by score.

        Returns:
            0 for the least severe option, len(options) - 1 for the most
            severe, or None for an unknown answer.
        """
        ranked = sorted(self.options, key=lambda o: o.score)
        for rank, option in enumerate(ranked):
            if option.value == value:
                return rank
        return None


class PersonalInfo(BaseModel):
    """Demographic intake collected before the questionnaire."""

    age: int = Field(default=0, ge=0, le=130)
    education: Education | None = None
    health_conditions: list[str] = Field(default_factory=list)
    sleep_hours: float | None = Field(default=None, ge=0, le=24)
    exercise_frequency: str | None = None

    @field_validator("health_conditions")
    @classmethod
    def normalize_conditions(cls, v: list[str]) -> list[str]:
        """Normalize condition names to trimmed lower case."""
        return [c.strip().lower() for c in v if c and c.strip()]

    @property
    def is_complete(self) -> bool:
        """Demographics are complete once age and education are known."""
        return self.age > 0 and self.education is not None


class GameTrialResult(BaseModel):
    """Outcome of one completed mini-game.

    Attributes:
        game_type: Which game produced the result.
        score: Final 0-100 score.
        accuracy: Accuracy percentage (0-100).
        reaction_time_ms: Mean reaction time in milliseconds.
        domain: Cognitive domain the score counts towards.
        timestamp: When the game ended.
        metrics: Game-specific intermediate metrics.
    """

    model_config = ConfigDict(frozen=True)

    game_type: GameType
    score: float = Field(ge=0.0, le=100.0)
    accuracy: float = Field(ge=0.0, le=100.0)
    reaction_time_ms: float = Field(default=0.0, ge=0.0)
    domain: CognitiveDomain
    timestamp: datetime = Field(default_factory=utc_now)
    metrics: dict[str, Any] = Field(default_factory=dict)

    @field_validator("timestamp")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        """Store timestamps as timezone-aware UTC."""
        return ensure_utc(v)


class CognitiveProfile(BaseModel):
    """Final screening report handed to the presentation layer.

    Recomputed from the answers, game results and demographics on every
    analysis; it has no lifecycle of its own.
    """

    domain_scores: dict[CognitiveDomain, float]
    measured_domains: list[CognitiveDomain] = Field(default_factory=list)
    overall_score: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    strengths: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list, max_length=6)
    questionnaire_score: int = 0
    questionnaire_percent: float = 100.0
    category_percents: dict[QuestionCategory, float] = Field(default_factory=dict)
    average_game_score: float = 0.0
    age_adjustment: int = 0
    generated_at: datetime = Field(default_factory=utc_now)

    def fingerprint(self) -> dict[str, Any]:
        """All scoring outputs, excluding the generation timestamp.

        Two analyses of identical inputs have equal fingerprints.
        """
        return self.model_dump(mode="json", exclude={"generated_at"})

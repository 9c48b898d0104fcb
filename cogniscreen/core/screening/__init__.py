# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Cognitive screening engine.

This package provides:
- Adaptive symptom questionnaire
- Mini-game scorers
- Domain aggregation and composite scoring
- Risk classification with strengths, concerns and recommendations
- Session flow and profile storage

IMPORTANT: This engine produces educational INDICATORS only, not
diagnoses. Professional evaluation is required for diagnosis.

Usage:
    from cogniscreen.core.screening import get_screening_service

    service = get_screening_service()
    profile = service.analyze(personal_info, answers, game_results)
"""

from cogniscreen.core.screening.aggregator import DomainAggregator, DomainProfile
from cogniscreen.core.screening.classifier import RiskClassifier
from cogniscreen.core.screening.config import (
    ScreeningConfig,
    get_screening_config,
    load_screening_config,
    reload_screening_config,
)
from cogniscreen.core.screening.flow import AssessmentFlow, InvalidTransitionError, PhaseEvent
from cogniscreen.core.screening.models import (
    AnswerMap,
    AssessmentPhase,
    CognitiveDomain,
    CognitiveProfile,
    Education,
    GameTrialResult,
    GameType,
    PersonalInfo,
    QuestionCategory,
    QuestionItem,
    QuestionOption,
    RiskLevel,
)
from cogniscreen.core.screening.question_bank import (
    ADAPTIVE_QUESTIONS,
    BASE_QUESTIONS,
    get_question,
)
from cogniscreen.core.screening.questionnaire import (
    AdaptiveQuestionnaire,
    CategoryScore,
    QuestionnaireSession,
    category_breakdown,
    questionnaire_percent,
)
from cogniscreen.core.screening.repository import (
    InMemoryProfileRepository,
    ProfileRepository,
)
from cogniscreen.core.screening.service import (
    ScreeningService,
    get_screening_service,
    reset_screening_service,
)

__all__ = [
    # Models
    "AnswerMap",
    "AssessmentPhase",
    "CognitiveDomain",
    "CognitiveProfile",
    "Education",
    "GameTrialResult",
    "GameType",
    "PersonalInfo",
    "QuestionCategory",
    "QuestionItem",
    "QuestionOption",
    "RiskLevel",
    # Questionnaire
    "BASE_QUESTIONS",
    "ADAPTIVE_QUESTIONS",
    "get_question",
    "AdaptiveQuestionnaire",
    "QuestionnaireSession",
    "CategoryScore",
    "category_breakdown",
    "questionnaire_percent",
    # Scoring
    "DomainAggregator",
    "DomainProfile",
    "RiskClassifier",
    # Config
    "ScreeningConfig",
    "get_screening_config",
    "load_screening_config",
    "reload_screening_config",
    # Orchestration
    "ScreeningService",
    "get_screening_service",
    "reset_screening_service",
    "AssessmentFlow",
    "PhaseEvent",
    "InvalidTransitionError",
    "ProfileRepository",
    "InMemoryProfileRepository",
]

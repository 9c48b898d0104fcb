# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Screening service orchestrating questionnaire, games and analysis.

This is the single entry point a presentation layer needs: it scores
games, decides adaptive follow-up items and produces the final
CognitiveProfile.

IMPORTANT: Results are educational indicators only, not a diagnosis.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from cogniscreen.core.screening.aggregator import DomainAggregator
from cogniscreen.core.screening.classifier import RiskClassifier
from cogniscreen.core.screening.config import ScreeningConfig, get_screening_config
from cogniscreen.core.screening.models import (
    CognitiveProfile,
    GameTrialResult,
    GameType,
    PersonalInfo,
    QuestionItem,
)
from cogniscreen.core.screening.question_bank import BASE_QUESTIONS
from cogniscreen.core.screening.questionnaire import AdaptiveQuestionnaire
from cogniscreen.core.screening.repository import (
    InMemoryProfileRepository,
    ProfileRepository,
)
from cogniscreen.core.screening.scorers.registry import ScorerRegistry, get_scorer_registry
from cogniscreen.core.screening.scorers.session import GameSessionSummary, summarize_session
from cogniscreen.utils.logging import get_logger

logger = get_logger(__name__)

DISCLAIMER_MESSAGE_ID = "disclaimer"

# Used when the message catalog has no disclaimer
SCREENING_DISCLAIMER = (
    "This screening is for educational purposes only and is not a medical "
    "diagnosis. Please consult a qualified healthcare professional for a "
    "proper cognitive evaluation."
)


class ScreeningService:
    """Service for running cognitive screenings.

    Usage:
        service = ScreeningService()

        result = service.score_game(GameType.MEMORY, {
            "presented_words": ["apple", "chair"],
            "recalled_words": ["apple"],
        })
        profile = service.analyze(info, answers, [result])
        service.save_profile("user-1", profile)
    """

    def __init__(
        self,
        config: ScreeningConfig | None = None,
        registry: ScorerRegistry | None = None,
        repository: ProfileRepository | None = None,
    ) -> None:
        self._config = config if config is not None else get_screening_config()
        self._registry = registry if registry is not None else get_scorer_registry()
        self._repository = (
            repository if repository is not None else InMemoryProfileRepository()
        )
        self._questionnaire = AdaptiveQuestionnaire(self._config.adaptive)
        self._aggregator = DomainAggregator(self._config)
        self._classifier = RiskClassifier(self._config)

        logger.info(
            "screening_service_initialized",
            scorers=[t.value for t in self._registry.list_types()],
        )

    @property
    def config(self) -> ScreeningConfig:
        return self._config

    @property
    def questionnaire(self) -> AdaptiveQuestionnaire:
        return self._questionnaire

    def next_questions(
        self,
        answers: Mapping[int, str],
        active: Sequence[QuestionItem] | None = None,
    ) -> list[QuestionItem]:
        """Adaptive items to append after the given answers."""
        return self._questionnaire.get_next_items(answers, active)

    def active_questions(self, answers: Mapping[int, str]) -> list[QuestionItem]:
        """Rebuild the full question sequence a session would have shown."""
        return list(BASE_QUESTIONS) + self.next_questions(answers, BASE_QUESTIONS)

    def score_game(
        self, game_type: GameType, data: BaseModel | Mapping[str, Any]
    ) -> GameTrialResult:
        """Score the telemetry of one finished game.

        Raises:
            ScorerNotRegisteredError: If no scorer handles the game type.
            pydantic.ValidationError: If the telemetry is malformed.
        """
        result = self._registry.get(game_type).score(data)
        logger.info(
            "game_scored",
            game_type=game_type.value,
            score=result.score,
            accuracy=round(result.accuracy, 1),
        )
        return result

    def summarize_games(self, results: Sequence[GameTrialResult]) -> GameSessionSummary:
        return summarize_session(results)

    def analyze(
        self,
        personal_info: PersonalInfo,
        answers: Mapping[int, str],
        game_results: Iterable[GameTrialResult | Mapping[str, Any]],
        questions: Sequence[QuestionItem] | None = None,
    ) -> CognitiveProfile:
        """Produce the cognitive profile of one session.

        Args:
            personal_info: Demographics.
            answers: Question id -> selected option value.
            game_results: Completed games; invalid records are skipped.
            questions: Active question sequence. Rebuilt from the answers
                when omitted.

        Returns:
            The CognitiveProfile. Identical inputs give identical scores.
        """
        active = list(questions) if questions is not None else self.active_questions(answers)

        domain_profile = self._aggregator.aggregate(
            active, answers, game_results, personal_info.age
        )
        profile = self._classifier.build_profile(domain_profile, personal_info)

        logger.info(
            "screening_analyzed",
            overall_score=profile.overall_score,
            risk_level=profile.risk_level.value,
            games=len(domain_profile.game_results),
            questions=len(active),
        )
        return profile

    def save_profile(self, user_id: str, profile: CognitiveProfile) -> None:
        self._repository.set(user_id, profile)
        logger.info("profile_saved", user_id=user_id)

    def get_profile(self, user_id: str) -> CognitiveProfile | None:
        return self._repository.get(user_id)

    def get_disclaimer(self) -> str:
        """Get the non-diagnostic disclaimer text."""
        return self._config.messages.get(DISCLAIMER_MESSAGE_ID, SCREENING_DISCLAIMER)


# Singleton instance
_service_instance: ScreeningService | None = None


def get_screening_service() -> ScreeningService:
    """Get the screening service singleton.

    Returns:
        ScreeningService instance.
    """
    global _service_instance
    if _service_instance is None:
        _service_instance = ScreeningService()
    return _service_instance


def reset_screening_service() -> None:
    """Drop the singleton (for testing)."""
    global _service_instance
    _service_instance = None

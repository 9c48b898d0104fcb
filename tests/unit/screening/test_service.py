# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the screening service and profile repository."""

import pytest

from cogniscreen.core.screening.models import (
    CognitiveProfile,
    Education,
    GameType,
    PersonalInfo,
    RiskLevel,
)
from cogniscreen.core.screening.question_bank import ADAPTIVE_QUESTIONS
from cogniscreen.core.screening.repository import InMemoryProfileRepository
from cogniscreen.core.screening.scorers import ScorerNotRegisteredError, ScorerRegistry
from cogniscreen.core.screening.service import ScreeningService, get_screening_service

MEMORY_TELEMETRY = {
    "presented_words": ["apple", "chair", "phone", "book", "water"],
    "recalled_words": ["apple", "chair", "phone", "book"],
}

ATTENTION_TELEMETRY = {
    "hits": 20,
    "misses": 5,
    "false_alarms": 5,
    "reaction_times_ms": [400.0],
}


@pytest.fixture
def service(screening_config) -> ScreeningService:
    """Service with the packaged policy and a fresh repository."""
    return ScreeningService(config=screening_config, repository=InMemoryProfileRepository())


@pytest.fixture
def graduate_info() -> PersonalInfo:
    """A 67 year old graduate."""
    return PersonalInfo(age=67, education=Education.GRADUATE)


class TestScoreGame:
    """Tests for ScreeningService.score_game."""

    def test_scores_with_registered_scorer(self, service) -> None:
        """Test telemetry mappings are scored by game type."""
        assert service.score_game(GameType.MEMORY, MEMORY_TELEMETRY).score == 80
        assert service.score_game(GameType.ATTENTION, ATTENTION_TELEMETRY).score == 80

    def test_unregistered_game_raises(self, screening_config) -> None:
        """Test an empty registry raises a typed error."""
        service = ScreeningService(config=screening_config, registry=ScorerRegistry())

        with pytest.raises(ScorerNotRegisteredError):
            service.score_game(GameType.MEMORY, MEMORY_TELEMETRY)


class TestAnalyze:
    """Tests for ScreeningService.analyze."""

    def test_full_analysis(self, service, graduate_info, no_symptom_answers) -> None:
        """Test games, questionnaire and age combine into the profile."""
        games = [
            service.score_game(GameType.MEMORY, MEMORY_TELEMETRY),
            service.score_game(GameType.ATTENTION, ATTENTION_TELEMETRY),
        ]

        profile = service.analyze(graduate_info, no_symptom_answers, games)

        # round(80 * 0.7 + 100 * 0.3) + 10
        assert profile.overall_score == 96
        assert profile.risk_level == RiskLevel.LOW
        assert profile.age_adjustment == 10
        assert "Few self-reported cognitive concerns" in profile.strengths
        assert len(profile.recommendations) <= 6

    def test_identical_inputs_identical_fingerprint(
        self, service, graduate_info, severe_answers
    ) -> None:
        """Test repeated analyses differ only in their timestamp."""
        games = [service.score_game(GameType.MEMORY, MEMORY_TELEMETRY)]

        first = service.analyze(graduate_info, severe_answers, games)
        second = service.analyze(graduate_info, severe_answers, games)

        assert first.fingerprint() == second.fingerprint()

    def test_adaptive_items_are_rebuilt(self, service, graduate_info, severe_answers) -> None:
        """Test answers to adaptive items count when questions are omitted."""
        answers = dict(severe_answers)
        answers.update({q.id: q.options[-1].value for q in ADAPTIVE_QUESTIONS})

        profile = service.analyze(graduate_info, answers, [])

        assert profile.questionnaire_score == 45

    def test_next_questions(self, service, severe_answers) -> None:
        """Test the service exposes the adaptive engine."""
        assert [q.id for q in service.next_questions(severe_answers)] == [13, 14, 15]

    def test_summarize_games(self, service) -> None:
        """Test the game summary helper."""
        games = [service.score_game(GameType.MEMORY, MEMORY_TELEMETRY)]

        assert service.summarize_games(games).overall_score == 80


class TestProfileStorage:
    """Tests for saving and loading profiles."""

    def test_save_and_get(self, service, graduate_info, no_symptom_answers, sample_user_id) -> None:
        """Test a stored profile comes back unchanged."""
        profile = service.analyze(graduate_info, no_symptom_answers, [])

        service.save_profile(sample_user_id, profile)
        loaded = service.get_profile(sample_user_id)

        assert isinstance(loaded, CognitiveProfile)
        assert loaded.fingerprint() == profile.fingerprint()
        assert loaded.generated_at == profile.generated_at

    def test_injected_repository_receives_profiles(
        self, screening_config, graduate_info, no_symptom_answers, sample_user_id
    ) -> None:
        """Test an empty repository passed in is the one written to."""
        repository = InMemoryProfileRepository()
        service = ScreeningService(config=screening_config, repository=repository)

        profile = service.analyze(graduate_info, no_symptom_answers, [])
        service.save_profile(sample_user_id, profile)

        assert len(repository) == 1
        assert repository.get(sample_user_id).fingerprint() == profile.fingerprint()

    def test_unknown_user(self, service) -> None:
        """Test a user without a profile gets None."""
        assert service.get_profile("nobody") is None

    def test_repository_delete(self, graduate_info, no_symptom_answers, service) -> None:
        """Test profiles can be removed from the in-memory repository."""
        repository = InMemoryProfileRepository()
        repository.set("user-1", service.analyze(graduate_info, no_symptom_answers, []))

        assert len(repository) == 1
        assert repository.delete("user-1") is True
        assert repository.delete("user-1") is False
        assert repository.get("user-1") is None


class TestServiceHelpers:
    """Tests for disclaimer and singleton access."""

    def test_disclaimer(self, service) -> None:
        """Test the disclaimer states results are not a diagnosis."""
        assert "not a medical diagnosis" in service.get_disclaimer()

    def test_singleton(self) -> None:
        """Test get_screening_service returns one instance."""
        assert get_screening_service() is get_screening_service()

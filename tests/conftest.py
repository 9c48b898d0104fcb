# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures."""

from collections.abc import Generator

import pytest

from cogniscreen.core.config.settings import clear_settings_cache
from cogniscreen.core.screening.config import ScreeningConfig, load_screening_config
from cogniscreen.core.screening.models import Education, PersonalInfo
from cogniscreen.core.screening.question_bank import BASE_QUESTIONS
from cogniscreen.core.screening.service import reset_screening_service


# =============================================================================
# Cache Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clear_caches() -> Generator[None, None, None]:
    """Reset cached settings, config and singletons around every test."""
    clear_settings_cache()
    load_screening_config.cache_clear()
    reset_screening_service()
    yield
    clear_settings_cache()
    load_screening_config.cache_clear()
    reset_screening_service()


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")


# =============================================================================
# Helper Fixtures
# =============================================================================


@pytest.fixture
def screening_config() -> ScreeningConfig:
    """Screening config loaded from the packaged policy files."""
    return load_screening_config()


@pytest.fixture
def sample_user_id() -> str:
    """Provide a sample user ID for testing."""
    return "550e8400-e29b-41d4-a716-446655440001"


@pytest.fixture
def sample_personal_info() -> PersonalInfo:
    """Provide a complete demographic intake."""
    return PersonalInfo(
        age=67,
        education=Education.BACHELORS,
        health_conditions=["Hypertension"],
        sleep_hours=7,
        exercise_frequency="weekly",
    )


@pytest.fixture
def no_symptom_answers() -> dict[int, str]:
    """Answer every base item with its least severe option."""
    return {q.id: q.options[0].value for q in BASE_QUESTIONS}


@pytest.fixture
def severe_answers() -> dict[int, str]:
    """Answer every base item with its most severe option."""
    return {q.id: q.options[-1].value for q in BASE_QUESTIONS}

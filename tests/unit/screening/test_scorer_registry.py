# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the scorer registry, session summary and task generation."""

import pytest

from cogniscreen.core.screening.models import CognitiveDomain, GameTrialResult, GameType
from cogniscreen.core.screening.scorers import (
    AttentionScorer,
    MemoryScorer,
    PerformanceLevel,
    ScorerNotRegisteredError,
    ScorerRegistry,
    TaskGenerator,
    get_scorer_registry,
    reset_scorer_registry,
    summarize_session,
)
from cogniscreen.core.screening.scorers.tasks import ROTATION_ANGLES, TARGET_LETTER, WORD_LISTS


def _result(game_type: GameType, domain: CognitiveDomain, score: float) -> GameTrialResult:
    return GameTrialResult(
        game_type=game_type,
        score=score,
        accuracy=score,
        reaction_time_ms=500.0,
        domain=domain,
    )


class TestScorerRegistry:
    """Tests for ScorerRegistry."""

    def test_register_and_get(self) -> None:
        """Test a registered scorer is returned by game type."""
        registry = ScorerRegistry()
        scorer = MemoryScorer()
        registry.register(scorer)

        assert registry.get(GameType.MEMORY) is scorer
        assert registry.has(GameType.MEMORY)
        assert GameType.MEMORY in registry
        assert len(registry) == 1

    def test_duplicate_registration_raises(self) -> None:
        """Test registering the same game type twice is rejected."""
        registry = ScorerRegistry()
        registry.register(MemoryScorer())

        with pytest.raises(ValueError, match="already registered"):
            registry.register(MemoryScorer())

    def test_replace_overrides(self) -> None:
        """Test replace swaps an existing scorer."""
        registry = ScorerRegistry()
        registry.register(MemoryScorer())
        replacement = MemoryScorer()

        registry.replace(replacement)

        assert registry.get(GameType.MEMORY) is replacement

    def test_missing_scorer_raises(self) -> None:
        """Test the error lists what is available."""
        registry = ScorerRegistry()
        registry.register(AttentionScorer())

        with pytest.raises(ScorerNotRegisteredError) as exc_info:
            registry.get(GameType.EXECUTIVE)

        assert exc_info.value.game_type == GameType.EXECUTIVE
        assert exc_info.value.available == [GameType.ATTENTION]
        assert registry.get_optional(GameType.EXECUTIVE) is None

    def test_default_registry_has_all_games(self) -> None:
        """Test the default registry covers every game type."""
        reset_scorer_registry()
        registry = get_scorer_registry()

        assert set(registry.list_types()) == set(GameType)
        assert registry.get(GameType.VISUOSPATIAL).domain == CognitiveDomain.VISUOSPATIAL
        assert get_scorer_registry() is registry


class TestSummarizeSession:
    """Tests for summarize_session."""

    def test_empty_session(self) -> None:
        """Test no games yields a zero summary."""
        summary = summarize_session([])

        assert summary.overall_score == 0
        assert summary.games_played == 0
        assert summary.performance_level == PerformanceLevel.NEEDS_IMPROVEMENT

    def test_summary_levels_and_domains(self) -> None:
        """Test overall score, level and domain lists."""
        results = [
            _result(GameType.MEMORY, CognitiveDomain.MEMORY, 90),
            _result(GameType.ATTENTION, CognitiveDomain.ATTENTION, 65),
            _result(GameType.PROCESSING, CognitiveDomain.EXECUTIVE, 80),
        ]

        summary = summarize_session(results)

        # mean 78.33 -> 78
        assert summary.overall_score == 78
        assert summary.performance_level == PerformanceLevel.GOOD
        assert summary.strength_domains == [CognitiveDomain.MEMORY, CognitiveDomain.EXECUTIVE]
        assert summary.improvement_domains == [CognitiveDomain.ATTENTION]
        assert summary.average_reaction_time_ms == 500.0

    @pytest.mark.parametrize(
        ("score", "level"),
        [
            (90, PerformanceLevel.EXCELLENT),
            (80, PerformanceLevel.VERY_GOOD),
            (70, PerformanceLevel.GOOD),
            (60, PerformanceLevel.FAIR),
            (59, PerformanceLevel.NEEDS_IMPROVEMENT),
        ],
    )
    def test_level_bands(self, score: float, level: PerformanceLevel) -> None:
        """Test the lower bound of every band."""
        results = [_result(GameType.MEMORY, CognitiveDomain.MEMORY, score)]

        assert summarize_session(results).performance_level == level


class TestTaskGenerator:
    """Tests for TaskGenerator."""

    def test_same_seed_same_output(self) -> None:
        """Test identical seeds reproduce identical stimuli."""
        first = TaskGenerator(seed=7)
        second = TaskGenerator(seed=7)

        assert first.memory_words() == second.memory_words()
        assert first.attention_letters(50) == second.attention_letters(50)
        assert first.processing_schedule(20) == second.processing_schedule(20)

    def test_memory_words_from_fixed_lists(self) -> None:
        """Test the study list is one of the fixed lists."""
        words = TaskGenerator(seed=1).memory_words()

        assert tuple(words) in WORD_LISTS

    def test_attention_letters_contain_targets(self) -> None:
        """Test roughly 30% of a long stream is the target letter."""
        letters = TaskGenerator(seed=3).attention_letters(1000)
        share = letters.count(TARGET_LETTER) / len(letters)

        assert 0.2 < share < 0.4
        assert all(letter.isupper() for letter in letters)

    def test_processing_schedule(self) -> None:
        """Test schedule length, complexity range and switch flags."""
        schedule = TaskGenerator(seed=5).processing_schedule()

        assert len(schedule) == 75
        assert schedule[0].is_switch is False
        assert all(1 <= task.complexity <= 3 for task in schedule)
        for previous, task in zip(schedule, schedule[1:]):
            assert task.is_switch == (task.task_type != previous.task_type)

    def test_rotation_schedule(self) -> None:
        """Test rotation tasks use the fixed angles and flag mirror tasks."""
        tasks = TaskGenerator(seed=11).rotation_schedule()

        assert len(tasks) == 20
        assert all(task.rotation_deg in ROTATION_ANGLES for task in tasks)
        assert all(1 <= task.complexity <= 5 for task in tasks)
        assert not any(task.mirror_task for i, task in enumerate(tasks) if i % 4)
        assert TaskGenerator(seed=11).rotation_schedule() == tasks

    def test_symmetric_shape_never_mirror_task(self) -> None:
        """Test a shape equal to its mirror image gets no mirror distractor."""
        symmetric = ((0, 1, 0), (1, 1, 1), (0, 1, 0))

        for task in TaskGenerator(seed=2).rotation_schedule(200):
            if task.shape == symmetric:
                assert task.mirror_task is False

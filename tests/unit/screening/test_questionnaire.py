# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the adaptive questionnaire."""

import pytest

from cogniscreen.core.screening.config import AdaptiveConfig
from cogniscreen.core.screening.models import QuestionCategory
from cogniscreen.core.screening.question_bank import (
    ADAPTIVE_QUESTIONS,
    BASE_QUESTIONS,
    BEHAVIORAL_ADAPTIVE_ID,
    MEMORY_ADAPTIVE_ID,
    ORIENTATION_ADAPTIVE_ID,
    get_question,
)
from cogniscreen.core.screening.questionnaire import (
    AdaptiveQuestionnaire,
    QuestionnaireSession,
    category_breakdown,
    questionnaire_percent,
    total_score,
)


@pytest.fixture
def engine() -> AdaptiveQuestionnaire:
    """Engine with the default adaptive rules."""
    return AdaptiveQuestionnaire(AdaptiveConfig())


def _ids(items) -> list[int]:
    return [q.id for q in items]


class TestQuestionBank:
    """Tests for the fixed item banks."""

    def test_base_bank_has_twelve_items(self) -> None:
        """Test the base bank ids run from 1 to 12."""
        assert _ids(BASE_QUESTIONS) == list(range(1, 13))
        assert not any(q.is_adaptive for q in BASE_QUESTIONS)

    def test_adaptive_bank(self) -> None:
        """Test the adaptive bank holds items 13-15 in order."""
        assert _ids(ADAPTIVE_QUESTIONS) == [13, 14, 15]
        assert all(q.is_adaptive for q in ADAPTIVE_QUESTIONS)

    def test_first_item_uses_forgetfulness_options(self) -> None:
        """Test item 1 scores never/sometimes/often/always as 0-3."""
        item = get_question(1)

        assert [(o.value, o.score) for o in item.options] == [
            ("never", 0),
            ("sometimes", 1),
            ("often", 2),
            ("always", 3),
        ]

    def test_unknown_question_returns_none(self) -> None:
        """Test lookup of an unknown id."""
        assert get_question(99) is None

    def test_unknown_answer_scores_zero(self) -> None:
        """Test an unknown option value contributes nothing."""
        assert get_question(2).score_for("constantly") == 0
        assert get_question(2).score_for(None) == 0


class TestScoring:
    """Tests for questionnaire scoring helpers."""

    def test_total_ignores_answers_outside_active_set(self) -> None:
        """Test answers to inactive ids are not counted."""
        answers = {2: "often", 13: "often"}

        assert total_score(BASE_QUESTIONS, answers) == 3

    def test_percent_without_symptoms_is_100(self, no_symptom_answers) -> None:
        """Test no reported symptoms yields 100 percent."""
        assert questionnaire_percent(BASE_QUESTIONS, no_symptom_answers) == 100.0

    def test_percent_with_all_severe_is_0(self, severe_answers) -> None:
        """Test the most severe answers yield 0 percent."""
        assert questionnaire_percent(BASE_QUESTIONS, severe_answers) == 0.0

    def test_percent_with_empty_set_is_100(self) -> None:
        """Test a zero maximum yields 100 percent."""
        assert questionnaire_percent([], {}) == 100.0

    def test_category_breakdown(self) -> None:
        """Test category sub-scores and inverted percentages."""
        answers = {1: "always", 3: "often", 9: "never"}

        breakdown = category_breakdown(BASE_QUESTIONS, answers)
        memory = breakdown[QuestionCategory.MEMORY]

        assert memory.score == 6
        assert memory.max_score == 9
        assert memory.percent == pytest.approx(100 - 6 / 9 * 100)
        assert breakdown[QuestionCategory.LANGUAGE].percent == 100.0

    def test_breakdown_counts_unanswered_items_in_max(self) -> None:
        """Test the maximum includes items that were not answered."""
        breakdown = category_breakdown(BASE_QUESTIONS, {})

        assert breakdown[QuestionCategory.EXECUTIVE_FUNCTION].max_score == 6
        assert breakdown[QuestionCategory.EXECUTIVE_FUNCTION].score == 0


class TestAdaptiveQuestionnaire:
    """Tests for AdaptiveQuestionnaire.get_next_items."""

    def test_score_at_threshold_returns_nothing(self, engine) -> None:
        """Test a total of exactly 8 does not trigger follow-up items."""
        answers = {1: "always", 2: "often", 3: "rarely", 4: "rarely"}
        assert total_score(BASE_QUESTIONS, answers) == 8

        assert engine.get_next_items(answers) == []

    def test_low_score_returns_nothing(self, engine, no_symptom_answers) -> None:
        """Test no symptoms never triggers follow-up items."""
        assert engine.get_next_items(no_symptom_answers) == []

    def test_memory_concern_adds_memory_item(self, engine) -> None:
        """Test a concerning memory answer adds item 13 exactly once."""
        answers = {3: "often", 2: "often", 6: "often"}

        items = engine.get_next_items(answers)

        assert _ids(items) == [MEMORY_ADAPTIVE_ID, BEHAVIORAL_ADAPTIVE_ID]

    def test_orientation_sometimes_adds_orientation_item(self, engine) -> None:
        """Test an orientation answer of "sometimes" adds item 14."""
        answers = {4: "sometimes", 2: "often", 6: "often", 8: "rarely"}

        items = engine.get_next_items(answers)

        assert _ids(items) == [ORIENTATION_ADAPTIVE_ID, BEHAVIORAL_ADAPTIVE_ID]

    def test_all_conditions_keep_order(self, engine, severe_answers) -> None:
        """Test items come in memory, orientation, behavioral order."""
        items = engine.get_next_items(severe_answers)

        assert _ids(items) == [13, 14, 15]

    def test_mild_memory_answers_do_not_add_memory_item(self, engine) -> None:
        """Test memory answers below the top two options are not concerning."""
        answers = {1: "sometimes", 3: "rarely", 2: "often", 6: "often", 8: "often"}

        items = engine.get_next_items(answers)

        assert MEMORY_ADAPTIVE_ID not in _ids(items)
        assert BEHAVIORAL_ADAPTIVE_ID in _ids(items)

    def test_items_already_active_are_not_repeated(self, engine, severe_answers) -> None:
        """Test no item already in the active set is returned."""
        active = list(BASE_QUESTIONS) + [get_question(MEMORY_ADAPTIVE_ID)]

        items = engine.get_next_items(severe_answers, active)

        assert _ids(items) == [14, 15]

    def test_inputs_are_not_mutated(self, engine, severe_answers) -> None:
        """Test the engine is pure."""
        answers = dict(severe_answers)
        active = list(BASE_QUESTIONS)

        engine.get_next_items(answers, active)

        assert answers == severe_answers
        assert _ids(active) == list(range(1, 13))

    def test_custom_threshold(self, severe_answers) -> None:
        """Test the threshold is configurable."""
        engine = AdaptiveQuestionnaire(AdaptiveConfig(threshold=100))

        assert engine.get_next_items(severe_answers) == []


class TestQuestionnaireSession:
    """Tests for QuestionnaireSession."""

    def _answer_all(self, session: QuestionnaireSession, value_index: int) -> None:
        while True:
            item = session.current_item
            session.answer(item.options[value_index].value)
            if not session.advance():
                break

    def test_initial_state(self) -> None:
        """Test a new session starts at the first base item."""
        session = QuestionnaireSession()

        assert session.current_item.id == 1
        assert session.progress == 0.0
        assert session.is_complete is False

    def test_invalid_option_raises(self) -> None:
        """Test an answer outside the item's options is rejected."""
        session = QuestionnaireSession()

        with pytest.raises(ValueError):
            session.answer("constantly")

    def test_severe_answers_append_adaptive_items(self) -> None:
        """Test finishing the base items with concerns appends 13-15."""
        session = QuestionnaireSession()

        self._answer_all(session, -1)

        assert _ids(session.questions) == list(range(1, 16))
        assert session.is_complete is True
        assert session.adaptive_evaluated is True

    def test_no_symptoms_keep_base_items_only(self) -> None:
        """Test a symptom-free run appends nothing."""
        session = QuestionnaireSession()

        self._answer_all(session, 0)

        assert _ids(session.questions) == list(range(1, 13))
        assert session.progress == 100.0

    def test_evaluation_happens_once(self) -> None:
        """Test re-answering the last base item does not evaluate again."""
        session = QuestionnaireSession()
        for _ in range(11):
            session.answer(session.current_item.options[0].value)
            session.advance()
        appended = session.answer("often")
        assert appended == []

        for index in range(12):
            session.index = index
            item = session.current_item
            session.answer(item.options[-1].value)

        assert _ids(session.questions) == list(range(1, 13))

    def test_reanswer_overwrites_in_place(self) -> None:
        """Test changing an answer keeps the answer order."""
        session = QuestionnaireSession()
        session.answer("never")
        session.advance()
        session.answer("never")
        session.go_back()

        session.answer("always")

        assert list(session.answers) == [1, 2]
        assert session.answers[1] == "always"

    def test_go_back_at_start(self) -> None:
        """Test going back from the first item is a no-op."""
        session = QuestionnaireSession()

        assert session.go_back() is False
        assert session.index == 0

    def test_scores(self) -> None:
        """Test total and maximum of the active sequence."""
        session = QuestionnaireSession()
        session.answer("always")

        assert session.total_score == 3
        assert session.max_score == 36
        assert session.category_breakdown()[QuestionCategory.MEMORY].score == 3

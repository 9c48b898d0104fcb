# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Adaptive symptom questionnaire.

The questionnaire starts with the base item bank. Once the last base item
is answered, AdaptiveQuestionnaire decides which supplemental items (if
any) are appended to the end of the sequence. Adaptive items never
trigger a second evaluation.

Scores follow the option severity: 0 means no symptom. Percentages are
inverted so that 100 means "no reported symptoms".
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from cogniscreen.core.screening.config import AdaptiveConfig, get_screening_config
from cogniscreen.core.screening.models import AnswerMap, QuestionCategory, QuestionItem
from cogniscreen.core.screening.question_bank import (
    ADAPTIVE_QUESTIONS,
    BASE_QUESTIONS,
    BEHAVIORAL_ADAPTIVE_ID,
    MEMORY_ADAPTIVE_ID,
    ORIENTATION_ADAPTIVE_ID,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryScore:
    """Raw and inverted score of one questionnaire category."""

    score: int
    max_score: int
    percent: float


def _inverted_percent(score: int, max_score: int) -> float:
    if max_score <= 0:
        return 100.0
    percent = 100.0 - score / max_score * 100.0
    return min(100.0, max(0.0, percent))


def total_score(questions: Sequence[QuestionItem], answers: Mapping[int, str]) -> int:
    """Sum the scores of answered items in the active set.

    Answers for ids outside the active set are ignored; unknown option
    values score 0.
    """
    return sum(q.score_for(answers.get(q.id)) for q in questions)


def max_total_score(questions: Sequence[QuestionItem]) -> int:
    """Highest total the active set can reach."""
    return sum(q.max_score for q in questions)


def questionnaire_percent(
    questions: Sequence[QuestionItem], answers: Mapping[int, str]
) -> float:
    """Inverted percent over the whole active set (100 = no symptoms)."""
    return _inverted_percent(total_score(questions, answers), max_total_score(questions))


def category_breakdown(
    questions: Sequence[QuestionItem], answers: Mapping[int, str]
) -> dict[QuestionCategory, CategoryScore]:
    """Per-category sub-scores.

    The maximum of a category sums the maximum option score of each of
    its items, answered or not.

    Args:
        questions: Active question sequence.
        answers: Question id -> selected option value.

    Returns:
        Mapping of each category present in the sequence to its score.
    """
    scores: dict[QuestionCategory, int] = {}
    maxima: dict[QuestionCategory, int] = {}

    for question in questions:
        scores[question.category] = scores.get(question.category, 0) + question.score_for(
            answers.get(question.id)
        )
        maxima[question.category] = maxima.get(question.category, 0) + question.max_score

    return {
        category: CategoryScore(
            score=scores[category],
            max_score=maxima[category],
            percent=_inverted_percent(scores[category], maxima[category]),
        )
        for category in scores
    }


class AdaptiveQuestionnaire:
    """Decides which supplemental items follow the base questionnaire.

    Example:
        >>> engine = AdaptiveQuestionnaire()
        >>> engine.get_next_items({1: "never"})
        []
    """

    def __init__(
        self,
        config: AdaptiveConfig | None = None,
        adaptive_questions: Sequence[QuestionItem] = ADAPTIVE_QUESTIONS,
    ) -> None:
        self._config = config or get_screening_config().adaptive
        self._adaptive = {q.id: q for q in adaptive_questions}

    @property
    def threshold(self) -> int:
        return self._config.threshold

    def get_next_items(
        self,
        current_answers: Mapping[int, str],
        active_questions: Sequence[QuestionItem] | None = None,
    ) -> list[QuestionItem]:
        """Determine the adaptive items to append.

        Args:
            current_answers: Answers given so far.
            active_questions: Current question sequence; the base bank
                when omitted.

        Returns:
            Items to append in memory, orientation, behavioral order.
            Empty when the total does not exceed the threshold.
        """
        active = list(active_questions) if active_questions is not None else list(BASE_QUESTIONS)
        score = total_score(active, current_answers)

        if score <= self._config.threshold:
            logger.debug("Adaptive items not triggered: score=%d", score)
            return []

        active_ids = {q.id for q in active}
        answered = [q for q in active if q.id in current_answers]
        candidates: list[int] = []

        if any(
            q.category == QuestionCategory.MEMORY and self._is_memory_concern(q, current_answers[q.id])
            for q in answered
        ):
            candidates.append(MEMORY_ADAPTIVE_ID)

        if any(
            q.category == QuestionCategory.ORIENTATION
            and q.score_for(current_answers[q.id]) >= self._config.orientation_min_score
            for q in answered
        ):
            candidates.append(ORIENTATION_ADAPTIVE_ID)

        candidates.append(BEHAVIORAL_ADAPTIVE_ID)

        items = [
            self._adaptive[item_id]
            for item_id in candidates
            if item_id in self._adaptive and item_id not in active_ids
        ]

        logger.info(
            "Adaptive items triggered: score=%d, items=%s",
            score,
            [q.id for q in items],
        )
        return items

    def _is_memory_concern(self, question: QuestionItem, value: str) -> bool:
        rank = question.severity_rank(value)
        if rank is None:
            return False
        return rank >= len(question.options) - self._config.memory_top_options


class QuestionnaireSession:
    """Mutable questionnaire state for one screening session.

    Tracks the active sequence, the answers and a cursor. The adaptive
    engine is consulted exactly once, when the last base item is first
    answered.
    """

    def __init__(
        self,
        engine: AdaptiveQuestionnaire | None = None,
        base_questions: Sequence[QuestionItem] = BASE_QUESTIONS,
    ) -> None:
        self._engine = engine or AdaptiveQuestionnaire()
        self._base_ids = {q.id for q in base_questions}
        self._last_base_id = base_questions[-1].id if base_questions else None
        self.questions: list[QuestionItem] = list(base_questions)
        self.answers: AnswerMap = {}
        self.index = 0
        self._evaluated = False

    @property
    def current_item(self) -> QuestionItem | None:
        if 0 <= self.index < len(self.questions):
            return self.questions[self.index]
        return None

    @property
    def is_complete(self) -> bool:
        """All items in the active sequence have an answer."""
        return all(q.id in self.answers for q in self.questions)

    @property
    def progress(self) -> float:
        """Answered share of the active sequence, 0-100."""
        if not self.questions:
            return 100.0
        answered = sum(1 for q in self.questions if q.id in self.answers)
        return answered / len(self.questions) * 100.0

    @property
    def total_score(self) -> int:
        return total_score(self.questions, self.answers)

    @property
    def max_score(self) -> int:
        return max_total_score(self.questions)

    @property
    def adaptive_evaluated(self) -> bool:
        return self._evaluated

    def answer(self, value: str) -> list[QuestionItem]:
        """Record an answer for the current item.

        Args:
            value: Selected option value.

        Returns:
            Adaptive items appended as a result of this answer.

        Raises:
            ValueError: If there is no current item or the value is not
                one of its options.
        """
        item = self.current_item
        if item is None:
            raise ValueError("No current question to answer")
        if item.option_for(value) is None:
            raise ValueError(f"Invalid option '{value}' for question {item.id}")

        first_answer = item.id not in self.answers
        self.answers[item.id] = value

        if first_answer and item.id == self._last_base_id and not self._evaluated:
            return self._evaluate_adaptive()
        return []

    def advance(self) -> bool:
        """Move to the next item. Returns False at the end of the sequence."""
        if self.index + 1 < len(self.questions):
            self.index += 1
            return True
        return False

    def go_back(self) -> bool:
        """Move to the previous item. Returns False at the start."""
        if self.index > 0:
            self.index -= 1
            return True
        return False

    def category_breakdown(self) -> dict[QuestionCategory, CategoryScore]:
        return category_breakdown(self.questions, self.answers)

    def _evaluate_adaptive(self) -> list[QuestionItem]:
        self._evaluated = True
        base = [q for q in self.questions if q.id in self._base_ids]
        items = self._engine.get_next_items(self.answers, base)
        existing = {q.id for q in self.questions}
        appended = [q for q in items if q.id not in existing]
        self.questions.extend(appended)
        return appended

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Fixed questionnaire item banks.

BASE_QUESTIONS are asked in every session. ADAPTIVE_QUESTIONS are only
appended when the base answers cross the concern threshold; see
cogniscreen.core.screening.questionnaire.
"""

from cogniscreen.core.screening.models import QuestionCategory, QuestionItem, QuestionOption

MEMORY_ADAPTIVE_ID = 13
ORIENTATION_ADAPTIVE_ID = 14
BEHAVIORAL_ADAPTIVE_ID = 15


def _options(*pairs: tuple[str, str]) -> tuple[QuestionOption, ...]:
    return tuple(
        QuestionOption(value=value, label=label, score=score)
        for score, (value, label) in enumerate(pairs)
    )


FREQUENCY_OPTIONS = _options(
    ("never", "Never"),
    ("rarely", "Rarely"),
    ("sometimes", "Sometimes"),
    ("often", "Often"),
)

FORGETFULNESS_OPTIONS = _options(
    ("never", "Never or rarely"),
    ("sometimes", "Sometimes"),
    ("often", "Often"),
    ("always", "Very often"),
)

CHANGE_OPTIONS = _options(
    ("none", "No changes"),
    ("minor", "Minor changes"),
    ("moderate", "Moderate changes"),
    ("significant", "Significant changes"),
)

INCREASE_OPTIONS = _options(
    ("none", "No change"),
    ("mild", "Mild increase"),
    ("moderate", "Moderate increase"),
    ("severe", "Severe increase"),
)


BASE_QUESTIONS: tuple[QuestionItem, ...] = (
    QuestionItem(
        id=1,
        category=QuestionCategory.MEMORY,
        text="How often do you forget recent conversations or events?",
        options=FORGETFULNESS_OPTIONS,
    ),
    QuestionItem(
        id=2,
        category=QuestionCategory.LANGUAGE,
        text="Do you have difficulty finding the right words when speaking?",
        options=FREQUENCY_OPTIONS,
    ),
    QuestionItem(
        id=3,
        category=QuestionCategory.MEMORY,
        text="How often do you misplace items and have trouble retracing steps?",
        options=FREQUENCY_OPTIONS,
    ),
    QuestionItem(
        id=4,
        category=QuestionCategory.ORIENTATION,
        text="Do you experience confusion about time or place?",
        options=FREQUENCY_OPTIONS,
    ),
    QuestionItem(
        id=5,
        category=QuestionCategory.EXECUTIVE_FUNCTION,
        text="Have you noticed changes in judgment or decision-making abilities?",
        options=CHANGE_OPTIONS,
    ),
    QuestionItem(
        id=6,
        category=QuestionCategory.DAILY_FUNCTION,
        text="Do you have trouble completing familiar tasks at home or work?",
        options=FREQUENCY_OPTIONS,
    ),
    QuestionItem(
        id=7,
        category=QuestionCategory.BEHAVIORAL,
        text="Have others noticed changes in your mood or personality?",
        options=CHANGE_OPTIONS,
    ),
    QuestionItem(
        id=8,
        category=QuestionCategory.SOCIAL,
        text="Do you withdraw from social activities or hobbies?",
        options=FREQUENCY_OPTIONS,
    ),
    QuestionItem(
        id=9,
        category=QuestionCategory.MEMORY,
        text="How often do you repeat the same question or story?",
        options=FREQUENCY_OPTIONS,
    ),
    QuestionItem(
        id=10,
        category=QuestionCategory.LANGUAGE,
        text="Do you have trouble following or joining conversations?",
        options=FREQUENCY_OPTIONS,
    ),
    QuestionItem(
        id=11,
        category=QuestionCategory.VISUOSPATIAL,
        text="Do you have difficulty with visual tasks like reading or recognizing faces?",
        options=FREQUENCY_OPTIONS,
    ),
    QuestionItem(
        id=12,
        category=QuestionCategory.EXECUTIVE_FUNCTION,
        text="How often do you have trouble managing finances or paying bills?",
        options=FREQUENCY_OPTIONS,
    ),
)

ADAPTIVE_QUESTIONS: tuple[QuestionItem, ...] = (
    QuestionItem(
        id=MEMORY_ADAPTIVE_ID,
        category=QuestionCategory.MEMORY,
        text="How often do you forget names of familiar people?",
        options=FREQUENCY_OPTIONS,
        is_adaptive=True,
    ),
    QuestionItem(
        id=ORIENTATION_ADAPTIVE_ID,
        category=QuestionCategory.ORIENTATION,
        text="Do you get lost in familiar places?",
        options=FREQUENCY_OPTIONS,
        is_adaptive=True,
    ),
    QuestionItem(
        id=BEHAVIORAL_ADAPTIVE_ID,
        category=QuestionCategory.BEHAVIORAL,
        text="Have you experienced increased anxiety or depression recently?",
        options=INCREASE_OPTIONS,
        is_adaptive=True,
    ),
)

_ALL_QUESTIONS = {q.id: q for q in BASE_QUESTIONS + ADAPTIVE_QUESTIONS}


def get_question(question_id: int) -> QuestionItem | None:
    """Look an item up across the base and adaptive banks."""
    return _ALL_QUESTIONS.get(question_id)

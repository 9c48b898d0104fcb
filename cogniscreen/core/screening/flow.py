# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Assessment flow state machine.

One screening session moves through four phases:

    demographics -> questionnaire -> cognitive_tests -> analysis

Transitions are driven by PhaseEvents and guarded; RESET returns to the
start from any phase. Entering the analysis phase computes the profile.

Usage:
    flow = AssessmentFlow()
    flow.set_personal_info(PersonalInfo(age=67, education="graduate"))
    flow.handle(PhaseEvent.DEMOGRAPHICS_COMPLETE)
    ...
    flow.handle(PhaseEvent.COGNITIVE_TESTS_COMPLETE)
    print(flow.profile.risk_level)
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel

from cogniscreen.core.screening.models import (
    AssessmentPhase,
    CognitiveProfile,
    GameTrialResult,
    GameType,
    PersonalInfo,
    QuestionItem,
)
from cogniscreen.core.screening.questionnaire import QuestionnaireSession
from cogniscreen.core.screening.service import ScreeningService, get_screening_service
from cogniscreen.utils.logging import get_logger, session_context

logger = get_logger(__name__)


class PhaseEvent(str, Enum):
    """Events that move a session between phases."""

    DEMOGRAPHICS_COMPLETE = "demographics_complete"
    QUESTIONNAIRE_COMPLETE = "questionnaire_complete"
    COGNITIVE_TESTS_COMPLETE = "cognitive_tests_complete"
    RESET = "reset"


class InvalidTransitionError(Exception):
    """Raised when an event is not allowed in the current phase.

    Attributes:
        phase: Phase the flow was in.
        event: Event that was rejected.
        reason: Why the event was rejected.
    """

    def __init__(self, phase: AssessmentPhase, event: PhaseEvent, reason: str) -> None:
        self.phase = phase
        self.event = event
        self.reason = reason
        super().__init__(f"Cannot apply '{event.value}' in phase '{phase.value}': {reason}")


# (current phase, event) -> next phase; RESET is handled separately
TRANSITIONS: dict[tuple[AssessmentPhase, PhaseEvent], AssessmentPhase] = {
    (AssessmentPhase.DEMOGRAPHICS, PhaseEvent.DEMOGRAPHICS_COMPLETE): AssessmentPhase.QUESTIONNAIRE,
    (AssessmentPhase.QUESTIONNAIRE, PhaseEvent.QUESTIONNAIRE_COMPLETE): AssessmentPhase.COGNITIVE_TESTS,
    (AssessmentPhase.COGNITIVE_TESTS, PhaseEvent.COGNITIVE_TESTS_COMPLETE): AssessmentPhase.ANALYSIS,
}


class AssessmentFlow:
    """Mutable state of one screening session."""

    def __init__(
        self,
        service: ScreeningService | None = None,
        session_id: str | None = None,
    ) -> None:
        self._service = service if service is not None else get_screening_service()
        self.session_id = session_id or str(uuid4())
        self._start()

    def _start(self) -> None:
        self.phase = AssessmentPhase.DEMOGRAPHICS
        self.personal_info = PersonalInfo()
        self.questionnaire = QuestionnaireSession(self._service.questionnaire)
        self.game_results: list[GameTrialResult] = []
        self.profile: CognitiveProfile | None = None

    def set_personal_info(self, info: PersonalInfo) -> None:
        self._require_phase(AssessmentPhase.DEMOGRAPHICS, "set_personal_info")
        self.personal_info = info

    def answer(self, value: str) -> list[QuestionItem]:
        """Answer the current questionnaire item and advance.

        Returns:
            Adaptive items appended by this answer.
        """
        self._require_phase(AssessmentPhase.QUESTIONNAIRE, "answer")
        appended = self.questionnaire.answer(value)
        self.questionnaire.advance()
        return appended

    def record_game(
        self, game_type: GameType, data: BaseModel | Mapping[str, Any]
    ) -> GameTrialResult:
        """Score and keep the result of a finished game."""
        self._require_phase(AssessmentPhase.COGNITIVE_TESTS, "record_game")
        with session_context(session_id=self.session_id):
            result = self._service.score_game(game_type, data)
        self.game_results.append(result)
        return result

    def handle(self, event: PhaseEvent) -> AssessmentPhase:
        """Apply an event and return the new phase.

        Raises:
            InvalidTransitionError: If the event is not allowed now or its
                guard fails.
        """
        with session_context(session_id=self.session_id):
            return self._apply(event)

    def _apply(self, event: PhaseEvent) -> AssessmentPhase:
        if event == PhaseEvent.RESET:
            logger.info("assessment_reset", from_phase=self.phase.value)
            self._start()
            return self.phase

        target = TRANSITIONS.get((self.phase, event))
        if target is None:
            raise InvalidTransitionError(self.phase, event, "event not allowed in this phase")

        self._check_guard(event)

        logger.info(
            "assessment_phase_changed",
            from_phase=self.phase.value,
            to_phase=target.value,
        )
        self.phase = target

        if target == AssessmentPhase.ANALYSIS:
            self.profile = self._service.analyze(
                self.personal_info,
                self.questionnaire.answers,
                self.game_results,
                self.questionnaire.questions,
            )

        return self.phase

    def _check_guard(self, event: PhaseEvent) -> None:
        if event == PhaseEvent.DEMOGRAPHICS_COMPLETE and not self.personal_info.is_complete:
            raise InvalidTransitionError(self.phase, event, "age and education are required")
        if event == PhaseEvent.QUESTIONNAIRE_COMPLETE and not self.questionnaire.is_complete:
            raise InvalidTransitionError(self.phase, event, "questionnaire is not complete")

    def _require_phase(self, phase: AssessmentPhase, action: str) -> None:
        if self.phase != phase:
            raise RuntimeError(
                f"'{action}' is only available in phase '{phase.value}', "
                f"current phase is '{self.phase.value}'"
            )

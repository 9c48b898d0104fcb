# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Risk classification and recommendation generation.

Turns a DomainProfile plus demographics into the final CognitiveProfile:
risk tier, strengths, concerns and an ordered recommendation list.

Rules emit canonical message ids (e.g. "concern.memory"); the display
text is looked up in the message catalog at the very end, so the rules
themselves are language independent.

IMPORTANT: The risk tier is an educational indicator, not a diagnosis.
"""

import logging
from collections.abc import Mapping

from cogniscreen.core.screening.aggregator import DomainProfile
from cogniscreen.core.screening.config import ScreeningConfig, get_screening_config
from cogniscreen.core.screening.models import (
    CognitiveProfile,
    PersonalInfo,
    RiskLevel,
)

logger = logging.getLogger(__name__)

UNIVERSAL_RECOMMENDATIONS = (
    "recommendation.exercise",
    "recommendation.diet",
    "recommendation.social_engagement",
)

TIER_RECOMMENDATIONS: dict[RiskLevel, tuple[str, ...]] = {
    RiskLevel.HIGH: (
        "recommendation.neurological_evaluation",
        "recommendation.cognitive_rehabilitation",
    ),
    RiskLevel.MODERATE: (
        "recommendation.discuss_with_physician",
        "recommendation.self_monitoring",
    ),
    RiskLevel.LOW: (),
}

AGE_RECOMMENDATIONS = (
    "recommendation.annual_screening",
    "recommendation.sleep_and_stress",
)


class RiskClassifier:
    """Stateless rule engine producing the cognitive profile.

    Example:
        >>> classifier = RiskClassifier()
        >>> classifier.classify_risk(80)
        <RiskLevel.LOW: 'low'>
    """

    def __init__(
        self,
        config: ScreeningConfig | None = None,
        messages: Mapping[str, str] | None = None,
    ) -> None:
        self._config = config or get_screening_config()
        self._messages = messages if messages is not None else self._config.messages

    def message(self, message_id: str) -> str:
        """Display text of a message id; unknown ids are returned as-is."""
        return self._messages.get(message_id, message_id)

    def classify_risk(self, score: float) -> RiskLevel:
        risk = self._config.risk
        if score >= risk.low_min_score:
            return RiskLevel.LOW
        if score >= risk.moderate_min_score:
            return RiskLevel.MODERATE
        return RiskLevel.HIGH

    def strength_ids(self, profile: DomainProfile, info: PersonalInfo) -> list[str]:
        rules = self._config.insights
        ids = [
            f"strength.{domain.value}"
            for domain in profile.measured_domains
            if profile.domain_scores[domain] >= rules.strength_min_score
        ]

        if profile.symptom_score <= rules.few_symptoms_max:
            ids.append("strength.few_symptoms")

        if info.education is not None and info.education.value in rules.higher_education:
            ids.append("strength.education")

        if not ids:
            ids.append("strength.fallback")
        return ids

    def concern_ids(self, profile: DomainProfile, info: PersonalInfo) -> list[str]:
        rules = self._config.insights
        ids = [
            f"concern.{domain.value}"
            for domain in profile.measured_domains
            if profile.domain_scores[domain] < rules.concern_below_score
        ]

        if profile.symptom_score > rules.many_symptoms_above:
            ids.append("concern.many_symptoms")

        if any(
            term in condition
            for condition in info.health_conditions
            for term in rules.cardiovascular_terms
        ):
            ids.append("concern.cardiovascular")
        return ids

    def recommendation_ids(
        self, profile: DomainProfile, info: PersonalInfo, risk_level: RiskLevel
    ) -> list[str]:
        """Recommendations in generation order, truncated.

        Order: universal, tier-specific, weak-domain, age-specific.
        """
        rules = self._config.insights
        ids = list(UNIVERSAL_RECOMMENDATIONS)
        ids.extend(TIER_RECOMMENDATIONS.get(risk_level, ()))

        weak_domains = [
            domain
            for domain in profile.measured_domains
            if profile.domain_scores[domain] < rules.recommendation_below_score
        ]
        ids.extend(
            f"recommendation.domain.{domain.value}"
            for domain in weak_domains[: rules.max_domain_recommendations]
        )

        if info.age > rules.senior_age_above:
            ids.extend(AGE_RECOMMENDATIONS)

        return ids[: rules.max_recommendations]

    def build_profile(self, profile: DomainProfile, info: PersonalInfo) -> CognitiveProfile:
        """Classify a domain profile and resolve all display text.

        Args:
            profile: Aggregated scores.
            info: Demographics of the respondent.

        Returns:
            Complete CognitiveProfile.
        """
        risk_level = self.classify_risk(profile.overall_score)
        strengths = self.strength_ids(profile, info)
        concerns = self.concern_ids(profile, info)
        recommendations = self.recommendation_ids(profile, info, risk_level)

        logger.info(
            "Classified profile: overall=%d risk=%s strengths=%d concerns=%d",
            profile.overall_score,
            risk_level.value,
            len(strengths),
            len(concerns),
        )

        return CognitiveProfile(
            domain_scores=profile.domain_scores,
            measured_domains=profile.measured_domains,
            overall_score=profile.overall_score,
            risk_level=risk_level,
            strengths=[self.message(i) for i in strengths],
            concerns=[self.message(i) for i in concerns],
            recommendations=[self.message(i) for i in recommendations],
            questionnaire_score=profile.symptom_score,
            questionnaire_percent=profile.questionnaire_percent,
            category_percents=profile.category_percents,
            average_game_score=profile.average_game_score,
            age_adjustment=profile.age_adjustment,
        )

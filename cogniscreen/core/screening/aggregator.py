# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain aggregation of questionnaire and game results.

Combines the inverted questionnaire percentages and the mini-game scores
into six domain scores and one age-adjusted composite score.

Composite:
    base = round(avg_game * game_weight + questionnaire_percent * questionnaire_weight)
    overall = clamp(base + age_bonus, 0, 100)

Domain scores prefer game evidence; a domain without a game falls back
to its questionnaire category and finally to a neutral default.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from cogniscreen.core.screening.config import CompositeConfig, ScreeningConfig, get_screening_config
from cogniscreen.core.screening.models import (
    CognitiveDomain,
    GameTrialResult,
    QuestionCategory,
    QuestionItem,
)
from cogniscreen.core.screening.questionnaire import (
    category_breakdown,
    questionnaire_percent,
    total_score,
)
from cogniscreen.core.screening.scorers.base import clamp, mean, round_half_up

logger = logging.getLogger(__name__)


@dataclass
class DomainProfile:
    """Intermediate scoring result handed to the risk classifier.

    Attributes:
        domain_scores: Score of every cognitive domain, display order.
        measured_domains: Domains backed by a game or questionnaire item.
        symptom_score: Raw questionnaire total.
        questionnaire_percent: Inverted questionnaire percent.
        category_percents: Inverted percent per questionnaire category.
        average_game_score: Mean score of the valid games (0 when none).
        base_score: Rounded blend before the age adjustment.
        age_adjustment: Bonus added for the respondent's age.
        overall_score: Final composite, 0-100.
        game_results: Games that passed validation.
    """

    domain_scores: dict[CognitiveDomain, float]
    measured_domains: list[CognitiveDomain]
    symptom_score: int
    questionnaire_percent: float
    category_percents: dict[QuestionCategory, float]
    average_game_score: float
    base_score: int
    age_adjustment: int
    overall_score: int
    game_results: list[GameTrialResult] = field(default_factory=list)


def coerce_game_results(
    records: Iterable[GameTrialResult | Mapping[str, Any]],
) -> list[GameTrialResult]:
    """Validate game records, skipping the ones that fail.

    Args:
        records: Results or raw mappings of their fields.

    Returns:
        Valid results in input order.
    """
    valid: list[GameTrialResult] = []
    for record in records:
        if isinstance(record, GameTrialResult):
            valid.append(record)
            continue
        try:
            valid.append(GameTrialResult.model_validate(record))
        except ValidationError as e:
            logger.warning(
                "Skipping invalid game record: %d validation errors",
                e.error_count(),
                extra={"record": dict(record) if isinstance(record, Mapping) else repr(record)},
            )
    return valid


class DomainAggregator:
    """Builds the domain profile from questionnaire answers and games."""

    def __init__(self, config: ScreeningConfig | None = None) -> None:
        self._config = config or get_screening_config()

    @property
    def composite(self) -> CompositeConfig:
        return self._config.composite

    def composite_score(
        self, average_game_score: float, percent: float, age: int
    ) -> tuple[int, int, int]:
        """Blend game and questionnaire performance and apply the age bonus.

        Returns:
            Tuple of (base score, age adjustment, overall score).
        """
        base = round_half_up(
            average_game_score * self.composite.game_weight
            + percent * self.composite.questionnaire_weight
        )
        bonus = self.composite.age_bonus(age)
        overall = int(clamp(base + bonus))
        return base, bonus, overall

    def aggregate(
        self,
        questions: Sequence[QuestionItem],
        answers: Mapping[int, str],
        game_results: Iterable[GameTrialResult | Mapping[str, Any]],
        age: int,
    ) -> DomainProfile:
        """Aggregate all session inputs into a domain profile.

        Args:
            questions: Active question sequence (base plus appended items).
            answers: Question id -> selected option value.
            game_results: Completed games; invalid records are skipped.
            age: Respondent age in years.

        Returns:
            DomainProfile with every domain scored.
        """
        games = coerce_game_results(game_results)
        breakdown = category_breakdown(questions, answers)
        category_percents = {c: s.percent for c, s in breakdown.items()}
        percent = questionnaire_percent(questions, answers)
        average_game = mean([g.score for g in games])

        base, bonus, overall = self.composite_score(average_game, percent, age)
        domain_scores, measured = self._domain_scores(games, category_percents)

        logger.debug(
            "Aggregated profile: games=%d avg_game=%.1f questionnaire=%.1f overall=%d",
            len(games),
            average_game,
            percent,
            overall,
        )

        return DomainProfile(
            domain_scores=domain_scores,
            measured_domains=measured,
            symptom_score=total_score(questions, answers),
            questionnaire_percent=percent,
            category_percents=category_percents,
            average_game_score=average_game,
            base_score=base,
            age_adjustment=bonus,
            overall_score=overall,
            game_results=games,
        )

    def _domain_scores(
        self,
        games: list[GameTrialResult],
        category_percents: dict[QuestionCategory, float],
    ) -> tuple[dict[CognitiveDomain, float], list[CognitiveDomain]]:
        game_scores: dict[CognitiveDomain, list[float]] = {}
        for game in games:
            domain = self._config.game_domains.get(game.game_type, game.domain)
            game_scores.setdefault(domain, []).append(game.score)

        category_scores: dict[CognitiveDomain, list[float]] = {}
        for category, percent in category_percents.items():
            domain = self._config.category_domains.get(category)
            if domain is not None:
                category_scores.setdefault(domain, []).append(percent)

        scores: dict[CognitiveDomain, float] = {}
        measured: list[CognitiveDomain] = []
        for domain in CognitiveDomain:
            if domain in game_scores:
                scores[domain] = mean(game_scores[domain])
                measured.append(domain)
            elif domain in category_scores:
                scores[domain] = mean(category_scores[domain])
                measured.append(domain)
            else:
                scores[domain] = self.composite.neutral_domain_score

        return scores, measured

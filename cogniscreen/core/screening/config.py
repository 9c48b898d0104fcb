# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Screening policy configuration.

Loads thresholds, blending weights, age bands, domain mappings and the
message catalog from YAML files. Every value has a built-in default so
the engine behaves identically when a file is missing.

Usage:
    from cogniscreen.core.screening.config import get_screening_config

    config = get_screening_config()
    print(config.adaptive.threshold)
    print(config.get_message("strength.memory"))
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

from cogniscreen.core.config.settings import get_settings
from cogniscreen.core.config.yaml_loader import YAMLLoadError, load_policy_section
from cogniscreen.core.screening.models import CognitiveDomain, GameType, QuestionCategory

logger = logging.getLogger(__name__)

# Policy files packaged with cogniscreen
DEFAULT_CONFIG_DIR = Path(__file__).parents[2] / "config" / "screening"

# Catalog that fills ids missing from a translation
FALLBACK_LANGUAGE = "en"


@dataclass
class AdaptiveConfig:
    """When supplemental questionnaire items are appended.

    Attributes:
        threshold: Base total score that must be exceeded.
        memory_top_options: A memory answer is concerning when it is one of
            this many highest-severity options of its item.
        orientation_min_score: Minimum option score of a concerning
            orientation answer (2 = "sometimes").
    """

    threshold: int = 8
    memory_top_options: int = 2
    orientation_min_score: int = 2


@dataclass
class AgeBand:
    """Flat bonus applied to the composite from min_age upwards."""

    min_age: int
    bonus: int


def _default_age_bands() -> list[AgeBand]:
    return [
        AgeBand(min_age=50, bonus=5),
        AgeBand(min_age=65, bonus=10),
        AgeBand(min_age=75, bonus=15),
    ]


@dataclass
class CompositeConfig:
    """Composite score blending.

    Attributes:
        game_weight: Weight of the mean mini-game score.
        questionnaire_weight: Weight of the questionnaire percent.
        neutral_domain_score: Score reported for unmeasured domains.
        age_bands: Age bonus bands, any order.
    """

    game_weight: float = 0.7
    questionnaire_weight: float = 0.3
    neutral_domain_score: float = 50.0
    age_bands: list[AgeBand] = field(default_factory=_default_age_bands)

    def age_bonus(self, age: int) -> int:
        """Bonus of the highest band the age falls into."""
        bonus = 0
        for band in sorted(self.age_bands, key=lambda b: b.min_age):
            if age >= band.min_age:
                bonus = band.bonus
        return bonus


@dataclass
class RiskConfig:
    """Composite score cut-offs for the risk tiers."""

    low_min_score: int = 75
    moderate_min_score: int = 50


@dataclass
class InsightConfig:
    """Rules for strengths, concerns and recommendations."""

    strength_min_score: float = 80.0
    concern_below_score: float = 60.0
    recommendation_below_score: float = 70.0
    few_symptoms_max: int = 3
    many_symptoms_above: int = 12
    higher_education: list[str] = field(default_factory=lambda: ["graduate"])
    cardiovascular_terms: list[str] = field(default_factory=lambda: ["cardiovascular"])
    senior_age_above: int = 65
    max_domain_recommendations: int = 3
    max_recommendations: int = 6


def _default_game_domains() -> dict[GameType, CognitiveDomain]:
    return {
        GameType.MEMORY: CognitiveDomain.MEMORY,
        GameType.ATTENTION: CognitiveDomain.ATTENTION,
        GameType.PROCESSING: CognitiveDomain.EXECUTIVE,
        GameType.EXECUTIVE: CognitiveDomain.EXECUTIVE,
        GameType.VISUOSPATIAL: CognitiveDomain.VISUOSPATIAL,
    }


def _default_category_domains() -> dict[QuestionCategory, CognitiveDomain]:
    return {
        QuestionCategory.MEMORY: CognitiveDomain.MEMORY,
        QuestionCategory.LANGUAGE: CognitiveDomain.LANGUAGE,
        QuestionCategory.ORIENTATION: CognitiveDomain.ORIENTATION,
        QuestionCategory.VISUOSPATIAL: CognitiveDomain.VISUOSPATIAL,
        QuestionCategory.EXECUTIVE_FUNCTION: CognitiveDomain.EXECUTIVE,
    }


@dataclass
class ScreeningConfig:
    """Complete screening policy.

    Attributes:
        adaptive: Adaptive questioning rules.
        composite: Composite blending and age adjustment.
        risk: Risk tier cut-offs.
        insights: Strength/concern/recommendation rules.
        game_domains: Domain each game type scores towards.
        category_domains: Domain each questionnaire category stands in for.
        messages: Message id -> display text for the active language.
    """

    adaptive: AdaptiveConfig = field(default_factory=AdaptiveConfig)
    composite: CompositeConfig = field(default_factory=CompositeConfig)
    risk: RiskConfig = field(default_factory=RiskConfig)
    insights: InsightConfig = field(default_factory=InsightConfig)
    game_domains: dict[GameType, CognitiveDomain] = field(
        default_factory=_default_game_domains
    )
    category_domains: dict[QuestionCategory, CognitiveDomain] = field(
        default_factory=_default_category_domains
    )
    messages: dict[str, str] = field(default_factory=dict)

    def get_message(self, message_id: str) -> str:
        """Resolve a message id, falling back to the id itself."""
        return self.messages.get(message_id, message_id)


def _parse_adaptive(data: dict[str, Any]) -> AdaptiveConfig:
    return AdaptiveConfig(
        threshold=int(data.get("threshold", 8)),
        memory_top_options=int(data.get("memory_top_options", 2)),
        orientation_min_score=int(data.get("orientation_min_score", 2)),
    )


def _parse_composite(data: dict[str, Any]) -> CompositeConfig:
    bands_data = data.get("age_bands")
    if bands_data is None:
        age_bands = _default_age_bands()
    else:
        age_bands = [
            AgeBand(min_age=int(b["min_age"]), bonus=int(b["bonus"]))
            for b in bands_data
            if isinstance(b, dict) and "min_age" in b and "bonus" in b
        ]

    return CompositeConfig(
        game_weight=float(data.get("game_weight", 0.7)),
        questionnaire_weight=float(data.get("questionnaire_weight", 0.3)),
        neutral_domain_score=float(data.get("neutral_domain_score", 50.0)),
        age_bands=age_bands,
    )


def _parse_risk(data: dict[str, Any]) -> RiskConfig:
    return RiskConfig(
        low_min_score=int(data.get("low_min_score", 75)),
        moderate_min_score=int(data.get("moderate_min_score", 50)),
    )


def _lowered(values: list[Any] | None, default: list[str]) -> list[str]:
    if values is None:
        return list(default)
    return [str(v).lower() for v in values]


def _parse_insights(data: dict[str, Any]) -> InsightConfig:
    defaults = InsightConfig()
    return InsightConfig(
        strength_min_score=float(data.get("strength_min_score", defaults.strength_min_score)),
        concern_below_score=float(data.get("concern_below_score", defaults.concern_below_score)),
        recommendation_below_score=float(
            data.get("recommendation_below_score", defaults.recommendation_below_score)
        ),
        few_symptoms_max=int(data.get("few_symptoms_max", defaults.few_symptoms_max)),
        many_symptoms_above=int(data.get("many_symptoms_above", defaults.many_symptoms_above)),
        higher_education=_lowered(data.get("higher_education"), defaults.higher_education),
        cardiovascular_terms=_lowered(
            data.get("cardiovascular_terms"), defaults.cardiovascular_terms
        ),
        senior_age_above=int(data.get("senior_age_above", defaults.senior_age_above)),
        max_domain_recommendations=int(
            data.get("max_domain_recommendations", defaults.max_domain_recommendations)
        ),
        max_recommendations=int(data.get("max_recommendations", defaults.max_recommendations)),
    )


def _parse_enum_mapping(data: dict[str, Any], key_enum: type, defaults: dict) -> dict:
    """Parse a {key: domain} mapping, skipping unknown values."""
    if not data:
        return defaults

    mapping = {}
    for key, value in data.items():
        try:
            mapping[key_enum(key)] = CognitiveDomain(value)
        except ValueError:
            logger.warning("Ignoring unknown domain mapping %s -> %s", key, value)
    return mapping


def _flatten_messages(data: dict[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten nested message groups into dotted ids, skipping empty entries."""
    flat: dict[str, str] = {}
    for key, value in data.items():
        message_id = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            flat.update(_flatten_messages(value, message_id))
        elif value is not None:
            flat[message_id] = str(value)
    return flat


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    """Sub-mapping under key; {} when absent, empty or not a mapping."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.warning("Ignoring screening section '%s': expected a mapping", key)
        return {}
    return value


def _build_catalog(catalogs: dict[str, Any], lang: str) -> dict[str, str]:
    """Message catalog of a language; ids it lacks use the English text."""
    messages = _flatten_messages(_section(catalogs, FALLBACK_LANGUAGE))
    if lang != FALLBACK_LANGUAGE:
        translated = _flatten_messages(_section(catalogs, lang))
        if not translated:
            logger.warning("No '%s' message catalog, using %s", lang, FALLBACK_LANGUAGE)
        messages.update(translated)
    return messages


def _read_section(path: Path, section: str) -> dict[str, Any]:
    try:
        return load_policy_section(path, section)
    except YAMLLoadError as e:
        logger.warning("Failed to load %s config: %s", path.stem, e)
        return {}


def _resolve_config_dir(config_dir: str | None) -> Path:
    if config_dir is not None:
        return Path(config_dir)
    configured = get_settings().screening.config_dir
    return configured if configured is not None else DEFAULT_CONFIG_DIR


@lru_cache(maxsize=1)
def load_screening_config(
    config_dir: str | None = None,
    lang: str | None = None,
) -> ScreeningConfig:
    """Load screening configuration from YAML files.

    Call `load_screening_config.cache_clear()` to reload.

    Args:
        config_dir: Optional config directory override (as string for caching).
        lang: Message catalog language; defaults to the configured language.

    Returns:
        ScreeningConfig instance.
    """
    dir_path = _resolve_config_dir(config_dir)
    lang = lang or get_settings().screening.default_language

    logger.debug("Loading screening config from: %s", dir_path)

    screening = _read_section(dir_path / "thresholds.yaml", "screening")
    catalogs = _read_section(dir_path / "messages.yaml", "messages")

    config = ScreeningConfig(
        adaptive=_parse_adaptive(_section(screening, "adaptive")),
        composite=_parse_composite(_section(screening, "composite")),
        risk=_parse_risk(_section(screening, "risk")),
        insights=_parse_insights(_section(screening, "insights")),
        game_domains=_parse_enum_mapping(
            _section(screening, "game_domains"), GameType, _default_game_domains()
        ),
        category_domains=_parse_enum_mapping(
            _section(screening, "category_domains"),
            QuestionCategory,
            _default_category_domains(),
        ),
        messages=_build_catalog(catalogs, lang),
    )

    logger.info(
        "Loaded screening config: %d messages, adaptive threshold %d",
        len(config.messages),
        config.adaptive.threshold,
    )

    return config


def get_screening_config() -> ScreeningConfig:
    """Get the cached screening configuration."""
    return load_screening_config()


def reload_screening_config() -> ScreeningConfig:
    """Clear the cache and load fresh configuration."""
    load_screening_config.cache_clear()
    return load_screening_config()

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

Settings are loaded from environment variables with sensible defaults.
The Settings class aggregates all subsettings; a cached singleton is
provided via get_settings().

Example:
    >>> from cogniscreen.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> print(settings.screening.default_language)
    en
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScreeningSettings(BaseSettings):
    """Screening engine configuration.

    Attributes:
        config_dir: Directory holding thresholds.yaml and messages.yaml.
            None means the policy files packaged with cogniscreen.
        default_language: Language of the packaged message catalog.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCREENING_",
        extra="ignore",
    )

    config_dir: Path | None = None
    default_language: str = "en"


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Attributes:
        screening: Screening engine settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    screening: ScreeningSettings = Field(default_factory=ScreeningSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Call clear_settings_cache() if you need to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Useful for testing or dynamic configuration updates.
    """
    get_settings.cache_clear()

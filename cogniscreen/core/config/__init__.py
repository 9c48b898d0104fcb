# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for CogniScreen.

- Settings: Pydantic-based settings loaded from environment variables
- YAML loader: Reading sections of the screening policy files

Example:
    >>> from cogniscreen.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.screening.config_dir is None
    True
"""

from cogniscreen.core.config.settings import (
    ScreeningSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from cogniscreen.core.config.yaml_loader import (
    YAMLLoadError,
    load_policy_section,
    load_yaml,
)

__all__ = [
    # Settings
    "Settings",
    "ScreeningSettings",
    "get_settings",
    "clear_settings_cache",
    # YAML utilities
    "load_yaml",
    "load_policy_section",
    "YAMLLoadError",
]

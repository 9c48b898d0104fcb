# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers for CogniScreen.

This package contains cross-cutting utilities:
- logging: Structured loggers and per-session log context
- datetime: UTC timestamps for results and profiles
"""

from cogniscreen.utils.datetime import ensure_utc, format_iso, utc_now
from cogniscreen.utils.logging import get_logger, session_context

__all__ = [
    # Logging
    "get_logger",
    "session_context",
    # Datetime
    "utc_now",
    "ensure_utc",
    "format_iso",
]

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Timestamps of game results and screening profiles.

Game results may arrive from a client with naive or offset timestamps.
The engine stores every timestamp as aware UTC so results recorded in
different time zones order correctly within one session.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Aware UTC now; the default for GameTrialResult and CognitiveProfile."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Normalize a client timestamp to aware UTC.

    A naive value is taken to be UTC already; an aware value is converted.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_iso(dt: datetime | None) -> str | None:
    """ISO 8601 text of a timestamp in UTC, as written to logs."""
    return None if dt is None else ensure_utc(dt).isoformat()

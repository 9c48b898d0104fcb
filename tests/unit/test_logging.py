# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for logging and timestamp utilities."""

from datetime import datetime, timedelta, timezone

import structlog

from cogniscreen.utils.datetime import ensure_utc, format_iso, utc_now
from cogniscreen.utils.logging import get_logger, session_context


class TestSessionContext:
    """Tests for session_context."""

    def test_binds_inside_block_only(self) -> None:
        """Test the session id is visible inside the block and gone after."""
        with session_context(session_id="session-1"):
            assert structlog.contextvars.get_contextvars() == {"session_id": "session-1"}

        assert structlog.contextvars.get_contextvars() == {}

    def test_restores_outer_binding(self) -> None:
        """Test a nested session restores the enclosing value."""
        with session_context(session_id="outer"):
            with session_context(session_id="inner"):
                assert structlog.contextvars.get_contextvars()["session_id"] == "inner"

            assert structlog.contextvars.get_contextvars()["session_id"] == "outer"

    def test_logger_usable_inside_block(self) -> None:
        """Test a structured logger emits with bound context."""
        logger = get_logger("cogniscreen.tests")

        with session_context(session_id="session-2"):
            logger.info("screening_analyzed", overall_score=82)


class TestTimestamps:
    """Tests for result and profile timestamps."""

    def test_utc_now_is_aware(self) -> None:
        """Test utc_now returns an aware UTC datetime."""
        assert utc_now().tzinfo == timezone.utc

    def test_offset_timestamp_converted(self) -> None:
        """Test a client timestamp with an offset is shifted to UTC."""
        local = datetime(2025, 3, 1, 9, 0, tzinfo=timezone(timedelta(hours=3)))

        assert ensure_utc(local) == datetime(2025, 3, 1, 6, 0, tzinfo=timezone.utc)
        assert ensure_utc(None) is None

    def test_format_iso(self) -> None:
        """Test naive datetimes are formatted as UTC."""
        assert format_iso(datetime(2025, 1, 1, 8, 30)) == "2025-01-01T08:30:00+00:00"
        assert format_iso(None) is None

# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Structured logging for the service and flow layers.

The screening service and the assessment flow log events through
structlog; scoring modules use the standard library logger. Output
configuration belongs to the host application, so this module only
hands out loggers and scopes per-session context.

Example:
    >>> from cogniscreen.utils.logging import get_logger, session_context
    >>> logger = get_logger(__name__)
    >>> with session_context(session_id="s-1"):
    ...     logger.info("screening_analyzed", overall_score=82)
"""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given module name."""
    return structlog.get_logger(name)


@contextmanager
def session_context(**kwargs: object) -> Iterator[None]:
    """Bind values to every log event emitted inside the block.

    Values bound before entering are restored on exit, so a session id
    never shows up on events logged outside the session.

    Args:
        **kwargs: Key-value pairs to bind, usually session_id.
    """
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield

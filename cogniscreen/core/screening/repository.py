# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Profile storage interface.

The engine only needs a narrow key-value contract to keep the latest
profile of a user. Durable backends implement ProfileRepository; the
in-memory implementation stores the serialized JSON form so that what
comes back is exactly what a real backend would return.
"""

import logging
from abc import ABC, abstractmethod

from cogniscreen.core.screening.models import CognitiveProfile
from cogniscreen.utils.datetime import format_iso

logger = logging.getLogger(__name__)


class ProfileRepository(ABC):
    """Key-value store of the latest profile per user."""

    @abstractmethod
    def get(self, user_id: str) -> CognitiveProfile | None:
        """Load the stored profile, or None if the user has none."""
        pass

    @abstractmethod
    def set(self, user_id: str, profile: CognitiveProfile) -> None:
        """Store a profile, replacing any previous one."""
        pass


class InMemoryProfileRepository(ProfileRepository):
    """Process-local repository backed by a dict of JSON documents."""

    def __init__(self) -> None:
        self._documents: dict[str, str] = {}

    def get(self, user_id: str) -> CognitiveProfile | None:
        document = self._documents.get(user_id)
        if document is None:
            return None
        return CognitiveProfile.model_validate_json(document)

    def set(self, user_id: str, profile: CognitiveProfile) -> None:
        self._documents[user_id] = profile.model_dump_json()
        logger.debug(
            "Stored profile for %s generated at %s",
            user_id,
            format_iso(profile.generated_at),
        )

    def delete(self, user_id: str) -> bool:
        """Remove a stored profile. Returns False if there was none."""
        return self._documents.pop(user_id, None) is not None

    def __len__(self) -> int:
        return len(self._documents)

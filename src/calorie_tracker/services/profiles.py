"""Profile service."""

import logging
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.errors import ValidationFailed
from calorie_tracker.domain.models import (
    DEFAULT_PROFILE,
    Profile,
    ProfileDefaults,
    ProfileUpdate,
)

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the user's profile, if present."""

    def upsert_profile(
        self, user_id: UUID, changes: dict[str, int], defaults: ProfileDefaults
    ) -> Profile:
        """Insert the profile or update the changed fields in one backend call."""


@dataclass
class ProfileService:
    """Service for reading and updating user profiles."""

    repository: ProfileRepository
    defaults: ProfileDefaults = field(default_factory=lambda: DEFAULT_PROFILE)

    def get(self, user_id: UUID) -> Profile | None:
        """Return the stored profile, if any."""
        return self.repository.get_profile(user_id)

    def get_or_default(self, user_id: UUID) -> Profile:
        """Return the stored profile or the documented defaults."""
        return self.repository.get_profile(user_id) or self.defaults.for_user(user_id)

    def upsert(self, user_id: UUID, update: ProfileUpdate) -> Profile:
        """Apply a partial update, creating the profile on first write."""
        changes = update.changes()
        for name, value in changes.items():
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValidationFailed(f"{name} must be a positive integer")
        profile = self.repository.upsert_profile(user_id, changes, self.defaults)
        _logger.info(
            "Profile upserted",
            extra={"user_id": str(user_id), "fields": sorted(changes)},
        )
        return profile

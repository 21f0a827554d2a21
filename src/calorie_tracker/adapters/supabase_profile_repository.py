"""Supabase repository for user profiles."""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.supabase_errors import execute
from calorie_tracker.domain.errors import BackendUnavailable
from calorie_tracker.domain.models import Profile, ProfileDefaults
from calorie_tracker.services.profiles import ProfileRepository

_PROFILE_COLUMNS = (
    "user_id, age, height_cm, current_weight_deci, target_weight_deci, "
    "daily_goal, updated_at"
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profiles, unique on user_id."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the stored profile for a user."""
        response = execute(
            self.client.table("user_profiles")
            .select(_PROFILE_COLUMNS)
            .eq("user_id", str(user_id))
            .limit(1),
            action="get profile",
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0], ProfileDefaults())

    def upsert_profile(
        self, user_id: UUID, changes: dict[str, int], defaults: ProfileDefaults
    ) -> Profile:
        """Create the row if missing, then write only the changed fields.

        The insert ignores an existing row, so neither step reads before it
        writes and concurrent first writes cannot create two profiles.
        """
        now = datetime.now(tz=UTC).isoformat()
        execute(
            self.client.table("user_profiles").upsert(
                {"user_id": str(user_id), **asdict(defaults), **changes},
                on_conflict="user_id",
                ignore_duplicates=True,
            ),
            action="create profile",
        )
        if changes:
            response = execute(
                self.client.table("user_profiles")
                .update({**changes, "updated_at": now})
                .eq("user_id", str(user_id)),
                action="update profile",
            )
        else:
            response = execute(
                self.client.table("user_profiles")
                .select(_PROFILE_COLUMNS)
                .eq("user_id", str(user_id))
                .limit(1),
                action="get profile",
            )
        if not response.data:
            raise BackendUnavailable("Failed to upsert profile")
        return _parse_profile(response.data[0], defaults)


def _parse_profile(row: dict[str, object], defaults: ProfileDefaults) -> Profile:
    def _int(name: str) -> int:
        value = row.get(name)
        return int(value) if value is not None else getattr(defaults, name)

    updated_raw = row.get("updated_at")
    return Profile(
        user_id=UUID(str(row["user_id"])),
        age=_int("age"),
        height_cm=_int("height_cm"),
        current_weight_deci=_int("current_weight_deci"),
        target_weight_deci=_int("target_weight_deci"),
        daily_goal=_int("daily_goal"),
        updated_at=(
            datetime.fromisoformat(updated_raw)
            if isinstance(updated_raw, str) and updated_raw
            else None
        ),
    )

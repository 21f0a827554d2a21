"""Domain models for user profiles."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Profile:
    """Personal data and calorie goal for a user."""

    user_id: UUID
    age: int
    height_cm: int
    current_weight_deci: int
    target_weight_deci: int
    daily_goal: int
    updated_at: datetime | None = None


@dataclass(frozen=True)
class ProfileDefaults:
    """Values applied when a user has no stored profile field."""

    age: int = 30
    height_cm: int = 170
    current_weight_deci: int = 700
    target_weight_deci: int = 650
    daily_goal: int = 2000

    def for_user(self, user_id: UUID) -> Profile:
        """Return a default profile for the user."""
        return Profile(
            user_id=user_id,
            age=self.age,
            height_cm=self.height_cm,
            current_weight_deci=self.current_weight_deci,
            target_weight_deci=self.target_weight_deci,
            daily_goal=self.daily_goal,
        )


DEFAULT_PROFILE = ProfileDefaults()


@dataclass(frozen=True)
class ProfileUpdate:
    """Partial profile write; None leaves the stored value untouched."""

    age: int | None = None
    height_cm: int | None = None
    current_weight_deci: int | None = None
    target_weight_deci: int | None = None
    daily_goal: int | None = None

    def changes(self) -> dict[str, int]:
        """Return the fields set on this update keyed by attribute name."""
        fields = {
            "age": self.age,
            "height_cm": self.height_cm,
            "current_weight_deci": self.current_weight_deci,
            "target_weight_deci": self.target_weight_deci,
            "daily_goal": self.daily_goal,
        }
        return {name: value for name, value in fields.items() if value is not None}

    def apply(self, profile: Profile) -> Profile:
        """Return the profile with this update's fields applied."""
        return Profile(
            user_id=profile.user_id,
            age=self.age if self.age is not None else profile.age,
            height_cm=(
                self.height_cm if self.height_cm is not None else profile.height_cm
            ),
            current_weight_deci=(
                self.current_weight_deci
                if self.current_weight_deci is not None
                else profile.current_weight_deci
            ),
            target_weight_deci=(
                self.target_weight_deci
                if self.target_weight_deci is not None
                else profile.target_weight_deci
            ),
            daily_goal=(
                self.daily_goal if self.daily_goal is not None else profile.daily_goal
            ),
            updated_at=profile.updated_at,
        )

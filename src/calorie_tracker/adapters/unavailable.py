"""Backend used when no persistence store is configured.

Writes always fail with BackendUnavailable. Reads fail the same way unless the
backend was built with ``tolerate_reads=True`` (offline/local tooling mode), in
which case list reads return empty results and log a warning. Food lookups
by id guard writes, so they always fail.
"""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from calorie_tracker.domain.consumption import DailyConsumption, FoodConsumptionEntry
from calorie_tracker.domain.errors import BackendUnavailable
from calorie_tracker.domain.foods import Food
from calorie_tracker.domain.meals import MealEntryDraft
from calorie_tracker.domain.models import Profile, ProfileDefaults
from calorie_tracker.services.consumption import ConsumptionRepository
from calorie_tracker.services.foods import FoodRepository
from calorie_tracker.services.profiles import ProfileRepository

_logger = logging.getLogger(__name__)


@dataclass
class UnavailableBackend(ConsumptionRepository, FoodRepository, ProfileRepository):
    """Single stand-in for every repository when the store is absent."""

    tolerate_reads: bool = False
    reason: str = "Persistence backend is not configured"

    def _fail(self, action: str) -> BackendUnavailable:
        return BackendUnavailable(f"Cannot {action}: {self.reason}")

    def _degraded_read(self, action: str) -> None:
        if not self.tolerate_reads:
            raise self._fail(action)
        _logger.warning(
            "Degraded read, returning empty result", extra={"action": action}
        )

    def upsert_daily_total(
        self, user_id: UUID, day: date, consumed: int
    ) -> DailyConsumption:
        raise self._fail("upsert daily total")

    def list_daily_totals(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailyConsumption]:
        self._degraded_read("list daily totals")
        return []

    def add_food_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        day: date,
        quantity: float,
        calories: int,
    ) -> FoodConsumptionEntry:
        raise self._fail("add food entry")

    def list_food_entries(
        self, user_id: UUID, start: date, end: date
    ) -> list[FoodConsumptionEntry]:
        self._degraded_read("list food entries")
        return []

    def record_meal(
        self, user_id: UUID, day: date, drafts: list[MealEntryDraft]
    ) -> tuple[list[FoodConsumptionEntry], DailyConsumption]:
        raise self._fail("log meal")

    def list_foods(self) -> list[Food]:
        self._degraded_read("list foods")
        return []

    def get_food(self, food_id: UUID) -> Food | None:
        raise self._fail("look up food")

    def create_food(
        self, name: str, icon: str, calories_per_100g: int | None
    ) -> Food:
        raise self._fail("create food")

    def get_profile(self, user_id: UUID) -> Profile | None:
        self._degraded_read("get profile")
        return None

    def upsert_profile(
        self, user_id: UUID, changes: dict[str, int], defaults: ProfileDefaults
    ) -> Profile:
        raise self._fail("upsert profile")

"""Consumption store: daily totals and the food consumption log."""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.consumption import DailyConsumption, FoodConsumptionEntry
from calorie_tracker.domain.errors import NotFound, ValidationFailed
from calorie_tracker.domain.meals import MealEntryDraft
from calorie_tracker.domain.numbers import is_positive_quantity
from calorie_tracker.services.foods import FoodRepository

_logger = logging.getLogger(__name__)

_QUANTITY_MESSAGE = "quantity must be a finite number greater than zero"


class ConsumptionRepository(Protocol):
    """Persistence interface for consumption data."""

    def upsert_daily_total(
        self, user_id: UUID, day: date, consumed: int
    ) -> DailyConsumption:
        """Insert or overwrite the total for (user, day) in one backend call."""

    def list_daily_totals(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailyConsumption]:
        """Return daily totals within the inclusive range."""

    def add_food_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        day: date,
        quantity: float,
        calories: int,
    ) -> FoodConsumptionEntry:
        """Append a food consumption entry and return it."""

    def list_food_entries(
        self, user_id: UUID, start: date, end: date
    ) -> list[FoodConsumptionEntry]:
        """Return entries within the inclusive range joined with food fields."""

    def record_meal(
        self, user_id: UUID, day: date, drafts: list[MealEntryDraft]
    ) -> tuple[list[FoodConsumptionEntry], DailyConsumption]:
        """Append the entries and set the day's total to the sum of its entries.

        Both steps form one atomic backend operation: either everything is
        written or nothing is, and the total never misses a concurrent meal.
        """


@dataclass
class ConsumptionService:
    """Application service for daily totals and food entries."""

    repository: ConsumptionRepository
    food_repository: FoodRepository

    def upsert_daily_total(
        self, user_id: UUID, day: date, consumed: int
    ) -> DailyConsumption:
        """Set the day's total, creating the row when it does not exist."""
        _require_non_negative_int("consumed", consumed)
        row = self.repository.upsert_daily_total(user_id, day, consumed)
        _logger.info(
            "Daily total upserted",
            extra={"user_id": str(user_id), "day": day.isoformat()},
        )
        return row

    def add_food_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        day: date,
        quantity: float,
        calories: int,
    ) -> FoodConsumptionEntry:
        """Append an entry; calories are stored as given."""
        if not is_positive_quantity(quantity):
            raise ValidationFailed(_QUANTITY_MESSAGE)
        _require_non_negative_int("calories", calories)
        food = self.food_repository.get_food(food_id)
        if food is None:
            raise NotFound(f"Food {food_id} does not exist")
        entry = replace(
            self.repository.add_food_entry(user_id, food_id, day, quantity, calories),
            food_name=food.name,
            food_icon=food.icon,
        )
        _logger.info(
            "Food entry added",
            extra={"user_id": str(user_id), "food_id": str(food_id)},
        )
        return entry

    def record_meal(
        self, user_id: UUID, day: date, drafts: list[MealEntryDraft]
    ) -> tuple[list[FoodConsumptionEntry], DailyConsumption]:
        """Append meal entries and refresh the day's total in one backend call."""
        if not drafts:
            raise ValidationFailed("A meal needs at least one item")
        for draft in drafts:
            if not is_positive_quantity(draft.quantity):
                raise ValidationFailed(_QUANTITY_MESSAGE)
            _require_non_negative_int("calories", draft.calories)
        entries, daily_total = self.repository.record_meal(user_id, day, drafts)
        _logger.info(
            "Meal recorded",
            extra={"user_id": str(user_id), "day": day.isoformat()},
        )
        return entries, daily_total

    def get_daily_totals(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailyConsumption]:
        """Return totals ascending by date; a reversed range is empty."""
        if start > end:
            return []
        rows = self.repository.list_daily_totals(user_id, start, end)
        return sorted(rows, key=lambda row: row.date)

    def get_food_entries(
        self, user_id: UUID, start: date, end: date
    ) -> list[FoodConsumptionEntry]:
        """Return entries newest first; a reversed range is empty."""
        if start > end:
            return []
        entries = self.repository.list_food_entries(user_id, start, end)
        return sorted(entries, key=_newest_first_key, reverse=True)


def _newest_first_key(entry: FoodConsumptionEntry) -> tuple[date, str]:
    created = entry.created_at.isoformat() if entry.created_at else ""
    return entry.date, created


def _require_non_negative_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationFailed(f"{name} must be a non-negative integer")

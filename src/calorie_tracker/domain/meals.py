"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from calorie_tracker.domain.consumption import DailyConsumption, FoodConsumptionEntry


@dataclass(frozen=True)
class MealItemRequest:
    """A food and the grams eaten, as submitted by the caller."""

    food_id: UUID
    grams: float


@dataclass(frozen=True)
class MealLogSummary:
    """Result of logging a meal."""

    date: date
    entries: list[FoodConsumptionEntry]
    meal_calories: int
    daily_total: DailyConsumption


@dataclass(frozen=True)
class MealEntryDraft:
    """An entry to append, with calories already computed from the catalog."""

    food_id: UUID
    quantity: float
    calories: int

"""Domain models for daily totals and food consumption."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class DailyConsumption:
    """Authoritative calorie total for one user and calendar date."""

    id: UUID
    user_id: UUID
    date: date
    consumed: int
    updated_at: datetime | None = None


@dataclass(frozen=True)
class FoodConsumptionEntry:
    """Logged food with its calories snapshotted at write time."""

    id: UUID
    user_id: UUID
    food_id: UUID
    date: date
    quantity: float
    calories: int
    created_at: datetime | None = None
    food_name: str | None = None
    food_icon: str | None = None


@dataclass(frozen=True)
class TopFood:
    """A food ranked by how many entries reference it in a window."""

    food_id: UUID
    food_name: str | None
    food_icon: str | None
    count: int

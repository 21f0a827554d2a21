"""Range queries over the consumption store."""

from collections import Counter
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from calorie_tracker.domain.consumption import (
    DailyConsumption,
    FoodConsumptionEntry,
    TopFood,
)
from calorie_tracker.domain.errors import ValidationFailed
from calorie_tracker.services.consumption import ConsumptionService

DEFAULT_TOP_FOODS_LIMIT = 5


@dataclass
class RangeAggregator:
    """Answers window queries for totals and most-consumed foods."""

    consumption_service: ConsumptionService

    def daily_totals(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailyConsumption]:
        """Return daily totals in the inclusive window, ascending by date."""
        return self.consumption_service.get_daily_totals(user_id, start, end)

    def top_foods(
        self,
        user_id: UUID,
        start: date,
        end: date,
        limit: int = DEFAULT_TOP_FOODS_LIMIT,
    ) -> list[TopFood]:
        """Rank foods by entry count in the window.

        Each entry counts once, so two entries of the same food on the same day
        count twice. Ties are broken by food name (case-insensitive), then by
        food id, so the ranking is stable across calls.
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValidationFailed("limit must be an integer of at least 1")
        entries = self.consumption_service.get_food_entries(user_id, start, end)
        return rank_foods(entries, limit)


def rank_foods(entries: list[FoodConsumptionEntry], limit: int) -> list[TopFood]:
    """Count entries per food and return the top `limit` foods."""
    counts: Counter[UUID] = Counter(entry.food_id for entry in entries)
    display: dict[UUID, FoodConsumptionEntry] = {}
    for entry in entries:
        display.setdefault(entry.food_id, entry)

    ranked = sorted(
        counts.items(),
        key=lambda item: (
            -item[1],
            (display[item[0]].food_name or "").casefold(),
            str(item[0]),
        ),
    )
    return [
        TopFood(
            food_id=food_id,
            food_name=display[food_id].food_name,
            food_icon=display[food_id].food_icon,
            count=count,
        )
        for food_id, count in ranked[:limit]
    ]

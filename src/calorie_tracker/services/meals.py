"""Meal logging service."""

import logging
from dataclasses import dataclass, replace
from datetime import date
from uuid import UUID

from calorie_tracker.domain.errors import ValidationFailed
from calorie_tracker.domain.meals import MealEntryDraft, MealItemRequest, MealLogSummary
from calorie_tracker.domain.numbers import is_positive_quantity
from calorie_tracker.services.consumption import ConsumptionService
from calorie_tracker.services.foods import FoodCatalogService

_logger = logging.getLogger(__name__)


@dataclass
class MealLogService:
    """Logs meals as food entries and refreshes the day's total."""

    catalog: FoodCatalogService
    consumption_service: ConsumptionService

    def log_meal(
        self, user_id: UUID, day: date, items: list[MealItemRequest]
    ) -> MealLogSummary:
        """Snapshot calories for each item, append entries, update the total.

        All foods are resolved and quantities checked before anything is
        written. The entries and the day's total are then stored by a single
        backend operation that sums every entry of that day.
        """
        if not items:
            raise ValidationFailed("A meal needs at least one item")
        foods = {}
        drafts = []
        for item in items:
            if not is_positive_quantity(item.grams):
                raise ValidationFailed("grams must be a finite number above zero")
            food = self.catalog.require_food(item.food_id)
            foods[food.id] = food
            drafts.append(
                MealEntryDraft(
                    food_id=food.id,
                    quantity=item.grams,
                    calories=self.catalog.calories_for(food, item.grams),
                )
            )

        stored, daily_total = self.consumption_service.record_meal(
            user_id, day, drafts
        )
        entries = [
            replace(
                entry,
                food_name=foods[entry.food_id].name,
                food_icon=foods[entry.food_id].icon,
            )
            for entry in stored
        ]
        _logger.info(
            "Meal logged",
            extra={
                "user_id": str(user_id),
                "day": day.isoformat(),
                "items": len(entries),
            },
        )
        return MealLogSummary(
            date=day,
            entries=entries,
            meal_calories=sum(entry.calories for entry in entries),
            daily_total=daily_total,
        )

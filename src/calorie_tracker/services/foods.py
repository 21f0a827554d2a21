"""Food catalog service."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.errors import NotFound, ValidationFailed
from calorie_tracker.domain.foods import (
    DEFAULT_FOOD_ICON,
    DEFAULT_FOODS,
    Food,
    FoodSeed,
)
from calorie_tracker.domain.numbers import round_half_up

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for the shared food catalog."""

    def list_foods(self) -> list[Food]:
        """Return all foods ordered by name."""

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""

    def create_food(
        self, name: str, icon: str, calories_per_100g: int | None
    ) -> Food:
        """Create a food and return it."""


def calories_for(food: Food, quantity_grams: float) -> int:
    """Return the calories in the given grams of a food, 0 when unknown."""
    if food.calories_per_100g is None:
        return 0
    return round_half_up(food.calories_per_100g * quantity_grams / 100)


@dataclass
class FoodCatalogService:
    """Application service for reference foods."""

    repository: FoodRepository

    def list_foods(self) -> list[Food]:
        """Return the catalog ordered by name."""
        return sorted(self.repository.list_foods(), key=lambda food: food.name)

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""
        return self.repository.get_food(food_id)

    def require_food(self, food_id: UUID) -> Food:
        """Return a food by id or raise NotFound."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise NotFound(f"Food {food_id} does not exist")
        return food

    def create_food(
        self,
        name: str,
        icon: str | None = None,
        calories_per_100g: int | None = None,
    ) -> Food:
        """Create a catalog food, defaulting the icon to a placeholder."""
        cleaned = name.strip() if isinstance(name, str) else ""
        if not cleaned:
            raise ValidationFailed("Food name must not be blank")
        if calories_per_100g is not None and (
            isinstance(calories_per_100g, bool)
            or not isinstance(calories_per_100g, int)
            or calories_per_100g < 0
        ):
            raise ValidationFailed("calories_per_100g must be a non-negative integer")
        food = self.repository.create_food(
            cleaned, icon or DEFAULT_FOOD_ICON, calories_per_100g
        )
        _logger.info("Food created", extra={"food_id": str(food.id)})
        return food

    def calories_for(self, food: Food, quantity_grams: float) -> int:
        """Return the calories for a logged quantity."""
        return calories_for(food, quantity_grams)

    def seed_defaults(self, foods: Iterable[FoodSeed] = DEFAULT_FOODS) -> list[Food]:
        """Insert seed foods whose names are not in the catalog yet."""
        existing = {food.name for food in self.repository.list_foods()}
        created = []
        for seed in foods:
            if seed.name in existing:
                continue
            created.append(
                self.repository.create_food(
                    seed.name, seed.icon, seed.calories_per_100g
                )
            )
            existing.add(seed.name)
        _logger.info(
            "Seeded %s foods (%s already present)",
            len(created),
            len(existing) - len(created),
        )
        return created

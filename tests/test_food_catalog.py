"""Tests for the food catalog service."""

from uuid import uuid4

import pytest

from calorie_tracker.domain.errors import NotFound, ValidationFailed
from calorie_tracker.domain.foods import (
    DEFAULT_FOOD_ICON,
    DEFAULT_FOODS,
    Food,
    FoodSeed,
)
from calorie_tracker.services.foods import FoodCatalogService, calories_for
from tests.conftest import InMemoryFoodRepository


def test_calories_for_100g_equals_density() -> None:
    food = Food(id=uuid4(), name="Rice", icon="🍚", calories_per_100g=130)

    assert calories_for(food, 100) == 130


def test_calories_for_unknown_density_is_zero() -> None:
    food = Food(id=uuid4(), name="Mystery", icon="🍽️", calories_per_100g=None)

    assert calories_for(food, 250) == 0


def test_calories_for_rounds_half_up() -> None:
    food = Food(id=uuid4(), name="Banana", icon="🍌", calories_per_100g=89)

    # 89 * 150 / 100 = 133.5
    assert calories_for(food, 150) == 134


def test_create_food_defaults_icon() -> None:
    service = FoodCatalogService(InMemoryFoodRepository())

    food = service.create_food("  Oats  ", calories_per_100g=389)

    assert food.name == "Oats"
    assert food.icon == DEFAULT_FOOD_ICON
    assert food.calories_per_100g == 389


def test_create_food_allows_unknown_calories() -> None:
    service = FoodCatalogService(InMemoryFoodRepository())

    food = service.create_food("Homemade Soup", icon="🍲")

    assert food.calories_per_100g is None


@pytest.mark.parametrize(
    ("name", "calories"), [("", 100), ("   ", 100), ("Bread", -1)]
)
def test_create_food_validates_input(name: str, calories: int) -> None:
    service = FoodCatalogService(InMemoryFoodRepository())

    with pytest.raises(ValidationFailed):
        service.create_food(name, calories_per_100g=calories)


def test_list_foods_is_ordered_by_name() -> None:
    service = FoodCatalogService(InMemoryFoodRepository())
    for name in ("Tomato", "Apple", "Pasta"):
        service.create_food(name)

    assert [food.name for food in service.list_foods()] == ["Apple", "Pasta", "Tomato"]


def test_require_food_raises_not_found() -> None:
    service = FoodCatalogService(InMemoryFoodRepository())

    with pytest.raises(NotFound):
        service.require_food(uuid4())


def test_seed_defaults_is_idempotent() -> None:
    repository = InMemoryFoodRepository()
    service = FoodCatalogService(repository)
    service.create_food("Banana", "🍌", 89)

    created = service.seed_defaults()
    again = service.seed_defaults()

    assert len(created) == len(DEFAULT_FOODS) - 1
    assert again == []
    assert len(repository.foods) == len(DEFAULT_FOODS)


def test_seed_defaults_accepts_custom_seeds() -> None:
    service = FoodCatalogService(InMemoryFoodRepository())

    created = service.seed_defaults([FoodSeed("Kefir", "🥛", 41)])

    assert [food.name for food in created] == ["Kefir"]

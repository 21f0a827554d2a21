"""Pydantic models for API request bodies."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    """Base model accepting camelCase aliases or field names."""

    model_config = ConfigDict(populate_by_name=True)


class ProfileUpsertRequest(ApiModel):
    """Partial profile update."""

    age: int | None = None
    height_cm: int | None = Field(default=None, alias="heightCm")
    current_weight_deci: int | None = Field(default=None, alias="currentWeightDeci")
    target_weight_deci: int | None = Field(default=None, alias="targetWeightDeci")
    daily_goal: int | None = Field(default=None, alias="dailyGoal")


class DailyTotalRequest(ApiModel):
    """Daily total overwrite."""

    date: str
    consumed: int


class FoodCreateRequest(ApiModel):
    """New catalog food."""

    name: str
    icon: str | None = None
    calories_per_100g: int | None = Field(default=None, alias="caloriesPer100g")


class FoodEntryRequest(ApiModel):
    """Food consumption entry with pre-computed calories."""

    food_id: UUID = Field(alias="foodId")
    date: str
    quantity: float = 1
    calories: int


class MealItemPayload(ApiModel):
    """One food in a meal."""

    food_id: UUID = Field(alias="foodId")
    grams: float


class MealLogRequest(ApiModel):
    """Meal to log for a date."""

    date: str
    items: list[MealItemPayload]

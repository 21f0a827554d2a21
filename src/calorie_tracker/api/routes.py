"""Tracker API endpoints for an authenticated caller."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request

from calorie_tracker.api.identity import require_user
from calorie_tracker.api.models import (  # noqa: TC001
    DailyTotalRequest,
    FoodCreateRequest,
    FoodEntryRequest,
    MealLogRequest,
    ProfileUpsertRequest,
)
from calorie_tracker.domain.dates import parse_calendar_date, parse_window
from calorie_tracker.domain.meals import MealItemRequest
from calorie_tracker.domain.models import ProfileUpdate

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer
    from calorie_tracker.domain.consumption import (
        DailyConsumption,
        FoodConsumptionEntry,
        TopFood,
    )
    from calorie_tracker.domain.foods import Food
    from calorie_tracker.domain.models import Profile

router = APIRouter(tags=["tracker"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/profile")
def get_profile(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return the caller's profile, or null when none is stored."""
    profile = _container(request).profile_service.get(user_id)
    return {"profile": _profile_payload(profile) if profile else None}


@router.put("/profile")
def upsert_profile(
    body: ProfileUpsertRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Create or partially update the caller's profile."""
    update = ProfileUpdate(
        age=body.age,
        height_cm=body.height_cm,
        current_weight_deci=body.current_weight_deci,
        target_weight_deci=body.target_weight_deci,
        daily_goal=body.daily_goal,
    )
    profile = _container(request).profile_service.upsert(user_id, update)
    return _profile_payload(profile)


@router.get("/consumption")
def get_consumption_range(
    request: Request,
    start_date: str = Query(alias="startDate"),
    end_date: str = Query(alias="endDate"),
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Return daily totals in the window, ascending by date."""
    window = parse_window(start_date, end_date)
    days = _container(request).aggregator.daily_totals(
        user_id, window.start, window.end
    )
    return {"days": [_daily_payload(day) for day in days]}


@router.put("/consumption")
def upsert_consumption(
    body: DailyTotalRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Overwrite the total for a date."""
    day = parse_calendar_date(body.date)
    row = _container(request).consumption_service.upsert_daily_total(
        user_id, day, body.consumed
    )
    return _daily_payload(row)


@router.get("/foods")
def list_foods(
    request: Request, _user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return the food catalog ordered by name."""
    foods = _container(request).food_catalog.list_foods()
    return {"foods": [_food_payload(food) for food in foods]}


@router.post("/foods")
def create_food(
    body: FoodCreateRequest,
    request: Request,
    _user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Add a food to the catalog."""
    food = _container(request).food_catalog.create_food(
        body.name, body.icon, body.calories_per_100g
    )
    return _food_payload(food)


@router.get("/foods/top")
def top_consumed_foods(
    request: Request,
    start_date: str = Query(alias="startDate"),
    end_date: str = Query(alias="endDate"),
    limit: int | None = None,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Return the most frequently logged foods in the window."""
    container = _container(request)
    window = parse_window(start_date, end_date)
    resolved_limit = (
        limit if limit is not None else container.settings.top_foods_default_limit
    )
    foods = container.aggregator.top_foods(
        user_id, window.start, window.end, resolved_limit
    )
    return {"foods": [_top_food_payload(food) for food in foods]}


@router.get("/food-consumption")
def list_food_consumption(
    request: Request,
    start_date: str = Query(alias="startDate"),
    end_date: str = Query(alias="endDate"),
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Return logged foods in the window, newest first."""
    window = parse_window(start_date, end_date)
    entries = _container(request).consumption_service.get_food_entries(
        user_id, window.start, window.end
    )
    return {"entries": [_entry_payload(entry) for entry in entries]}


@router.post("/food-consumption")
def add_food_consumption(
    body: FoodEntryRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Append a food entry with caller-computed calories."""
    day = parse_calendar_date(body.date)
    entry = _container(request).consumption_service.add_food_entry(
        user_id=user_id,
        food_id=body.food_id,
        day=day,
        quantity=body.quantity,
        calories=body.calories,
    )
    return _entry_payload(entry)


@router.post("/meals")
def log_meal(
    body: MealLogRequest,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Log a meal and refresh the day's total."""
    day = parse_calendar_date(body.date)
    items = [
        MealItemRequest(food_id=item.food_id, grams=item.grams) for item in body.items
    ]
    summary = _container(request).meal_log_service.log_meal(user_id, day, items)
    return {
        "date": summary.date.isoformat(),
        "mealCalories": summary.meal_calories,
        "dailyTotal": _daily_payload(summary.daily_total),
        "entries": [_entry_payload(entry) for entry in summary.entries],
    }


@router.get("/progress")
def progress_dashboard(
    request: Request,
    start_date: str = Query(alias="startDate"),
    end_date: str = Query(alias="endDate"),
    limit: int | None = None,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Return window totals, top foods and the progress category."""
    container = _container(request)
    window = parse_window(start_date, end_date)
    resolved_limit = (
        limit if limit is not None else container.settings.top_foods_default_limit
    )
    dashboard = container.progress_service.dashboard(
        user_id, window.start, window.end, resolved_limit
    )
    return {
        "startDate": dashboard.start.isoformat(),
        "endDate": dashboard.end.isoformat(),
        "goal": dashboard.goal,
        "days": [_daily_payload(day) for day in dashboard.daily],
        "topFoods": [_top_food_payload(food) for food in dashboard.top_foods],
        "progress": dashboard.progress.as_dict(),
    }


def _profile_payload(profile: Profile) -> dict[str, object]:
    return {
        "userId": str(profile.user_id),
        "age": profile.age,
        "heightCm": profile.height_cm,
        "currentWeightDeci": profile.current_weight_deci,
        "targetWeightDeci": profile.target_weight_deci,
        "dailyGoal": profile.daily_goal,
    }


def _daily_payload(row: DailyConsumption) -> dict[str, object]:
    return {
        "id": str(row.id),
        "date": row.date.isoformat(),
        "consumed": row.consumed,
    }


def _food_payload(food: Food) -> dict[str, object]:
    return {
        "id": str(food.id),
        "name": food.name,
        "icon": food.icon,
        "caloriesPer100g": food.calories_per_100g,
    }


def _top_food_payload(food: TopFood) -> dict[str, object]:
    return {
        "foodId": str(food.food_id),
        "foodName": food.food_name,
        "foodIcon": food.food_icon,
        "count": food.count,
    }


def _entry_payload(entry: FoodConsumptionEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "foodId": str(entry.food_id),
        "date": entry.date.isoformat(),
        "quantity": entry.quantity,
        "calories": entry.calories,
        "foodName": entry.food_name,
        "foodIcon": entry.food_icon,
    }

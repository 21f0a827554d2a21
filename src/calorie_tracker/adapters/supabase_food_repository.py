"""Supabase implementation for the food catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.supabase_errors import execute
from calorie_tracker.domain.errors import BackendUnavailable
from calorie_tracker.domain.foods import DEFAULT_FOOD_ICON, Food
from calorie_tracker.services.foods import FoodRepository

_FOOD_COLUMNS = "id, name, icon, calories_per_100g"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for reference foods."""

    client: Client

    def list_foods(self) -> list[Food]:
        """Return all foods ordered by name."""
        response = execute(
            self.client.table("foods").select(_FOOD_COLUMNS).order("name", desc=False),
            action="list foods",
        )
        return [_parse_food(row) for row in response.data or []]

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""
        response = execute(
            self.client.table("foods")
            .select(_FOOD_COLUMNS)
            .eq("id", str(food_id))
            .limit(1),
            action="get food",
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def create_food(
        self, name: str, icon: str, calories_per_100g: int | None
    ) -> Food:
        """Create a food and return it."""
        response = execute(
            self.client.table("foods").insert(
                {
                    "name": name,
                    "icon": icon,
                    "calories_per_100g": calories_per_100g,
                }
            ),
            action="create food",
        )
        if not response.data:
            raise BackendUnavailable("Failed to create food")
        return _parse_food(response.data[0])


def _parse_food(row: dict[str, object]) -> Food:
    """Parse a food row into a domain model."""
    calories = row.get("calories_per_100g")
    return Food(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        icon=str(row.get("icon") or DEFAULT_FOOD_ICON),
        calories_per_100g=int(calories) if calories is not None else None,
    )

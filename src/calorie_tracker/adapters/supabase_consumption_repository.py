"""Supabase repository for daily totals and food consumption entries."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.supabase_errors import execute
from calorie_tracker.domain.consumption import DailyConsumption, FoodConsumptionEntry
from calorie_tracker.domain.errors import BackendUnavailable
from calorie_tracker.domain.meals import MealEntryDraft
from calorie_tracker.services.consumption import ConsumptionRepository

_DAILY_COLUMNS = "id, user_id, date, consumed, updated_at"
_ENTRY_COLUMNS = (
    "id, user_id, food_id, date, quantity, calories, created_at, foods(name, icon)"
)


@dataclass
class SupabaseConsumptionRepository(ConsumptionRepository):
    """Supabase implementation for consumption persistence.

    `daily_consumption` carries a unique constraint on (user_id, date); the
    upsert below relies on it to resolve concurrent writers in the database.
    """

    client: Client

    def upsert_daily_total(
        self, user_id: UUID, day: date, consumed: int
    ) -> DailyConsumption:
        """Insert or overwrite the day's total in a single statement."""
        response = execute(
            self.client.table("daily_consumption").upsert(
                {
                    "user_id": str(user_id),
                    "date": day.isoformat(),
                    "consumed": consumed,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id,date",
            ),
            action="upsert daily total",
        )
        if not response.data:
            raise BackendUnavailable("Failed to upsert daily total")
        return _parse_daily(response.data[0])

    def list_daily_totals(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailyConsumption]:
        """Return daily totals in the inclusive range ordered by date."""
        response = execute(
            self.client.table("daily_consumption")
            .select(_DAILY_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False),
            action="list daily totals",
        )
        return [_parse_daily(row) for row in response.data or []]

    def add_food_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        day: date,
        quantity: float,
        calories: int,
    ) -> FoodConsumptionEntry:
        """Append a food consumption row."""
        response = execute(
            self.client.table("food_consumption").insert(
                {
                    "user_id": str(user_id),
                    "food_id": str(food_id),
                    "date": day.isoformat(),
                    "quantity": quantity,
                    "calories": calories,
                }
            ),
            action="add food entry",
        )
        if not response.data:
            raise BackendUnavailable("Failed to add food entry")
        return _parse_entry(response.data[0])

    def list_food_entries(
        self, user_id: UUID, start: date, end: date
    ) -> list[FoodConsumptionEntry]:
        """Return entries in the inclusive range, newest first."""
        response = execute(
            self.client.table("food_consumption")
            .select(_ENTRY_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=True)
            .order("created_at", desc=True),
            action="list food entries",
        )
        return [_parse_entry(row) for row in response.data or []]

    def record_meal(
        self, user_id: UUID, day: date, drafts: list[MealEntryDraft]
    ) -> tuple[list[FoodConsumptionEntry], DailyConsumption]:
        """Insert the entries and re-sum the day's total inside one transaction.

        `log_meal` is a SQL function; the insert and the
        `insert ... on conflict (user_id, date) do update` of the total run in
        the same statement, so concurrent meals serialize on the daily row.
        """
        response = execute(
            self.client.rpc(
                "log_meal",
                {
                    "p_user_id": str(user_id),
                    "p_date": day.isoformat(),
                    "p_entries": [
                        {
                            "food_id": str(draft.food_id),
                            "quantity": draft.quantity,
                            "calories": draft.calories,
                        }
                        for draft in drafts
                    ],
                },
            ),
            action="log meal",
        )
        data = response.data
        if not isinstance(data, dict) or not data.get("daily_total"):
            raise BackendUnavailable("Failed to log meal")
        entries = [_parse_entry(row) for row in data.get("entries") or []]
        return entries, _parse_daily(data["daily_total"])


def _parse_timestamp(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def _parse_daily(row: dict[str, object]) -> DailyConsumption:
    return DailyConsumption(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])),
        consumed=int(row.get("consumed", 0)),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )


def _parse_entry(row: dict[str, object]) -> FoodConsumptionEntry:
    food = row.get("foods")
    food_fields = food if isinstance(food, dict) else {}
    return FoodConsumptionEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        food_id=UUID(str(row["food_id"])),
        date=date.fromisoformat(str(row["date"])),
        quantity=float(row.get("quantity", 0.0)),
        calories=int(row.get("calories", 0)),
        created_at=_parse_timestamp(row.get("created_at")),
        food_name=food_fields.get("name"),
        food_icon=food_fields.get("icon"),
    )

"""Shared test fixtures."""

import threading
from dataclasses import asdict, dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer, Repositories, build_container
from calorie_tracker.domain.consumption import DailyConsumption, FoodConsumptionEntry
from calorie_tracker.domain.foods import Food
from calorie_tracker.domain.meals import MealEntryDraft
from calorie_tracker.domain.models import Profile, ProfileDefaults
from calorie_tracker.services.consumption import ConsumptionRepository
from calorie_tracker.services.foods import FoodRepository
from calorie_tracker.services.profiles import ProfileRepository


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food catalog for tests."""

    foods: dict[UUID, Food] = field(default_factory=dict)

    def list_foods(self) -> list[Food]:
        return sorted(self.foods.values(), key=lambda food: food.name)

    def get_food(self, food_id: UUID) -> Food | None:
        return self.foods.get(food_id)

    def create_food(
        self, name: str, icon: str, calories_per_100g: int | None
    ) -> Food:
        food = Food(
            id=uuid4(), name=name, icon=icon, calories_per_100g=calories_per_100g
        )
        self.foods[food.id] = food
        return food


@dataclass
class InMemoryConsumptionRepository(ConsumptionRepository):
    """In-memory consumption store keyed like the unique (user_id, date) index."""

    foods: InMemoryFoodRepository
    daily: dict[tuple[UUID, date], DailyConsumption] = field(default_factory=dict)
    entries: list[FoodConsumptionEntry] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def upsert_daily_total(
        self, user_id: UUID, day: date, consumed: int
    ) -> DailyConsumption:
        with self._lock:
            existing = self.daily.get((user_id, day))
            row = DailyConsumption(
                id=existing.id if existing else uuid4(),
                user_id=user_id,
                date=day,
                consumed=consumed,
                updated_at=datetime.now(tz=UTC),
            )
            self.daily[(user_id, day)] = row
            return row

    def list_daily_totals(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailyConsumption]:
        return [
            row
            for (owner, day), row in self.daily.items()
            if owner == user_id and start <= day <= end
        ]

    def add_food_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        day: date,
        quantity: float,
        calories: int,
    ) -> FoodConsumptionEntry:
        entry = FoodConsumptionEntry(
            id=uuid4(),
            user_id=user_id,
            food_id=food_id,
            date=day,
            quantity=quantity,
            calories=calories,
            created_at=datetime.now(tz=UTC),
        )
        with self._lock:
            self.entries.append(entry)
        return entry

    def list_food_entries(
        self, user_id: UUID, start: date, end: date
    ) -> list[FoodConsumptionEntry]:
        results = []
        for entry in self.entries:
            if entry.user_id != user_id or not start <= entry.date <= end:
                continue
            food = self.foods.get_food(entry.food_id)
            results.append(
                FoodConsumptionEntry(
                    id=entry.id,
                    user_id=entry.user_id,
                    food_id=entry.food_id,
                    date=entry.date,
                    quantity=entry.quantity,
                    calories=entry.calories,
                    created_at=entry.created_at,
                    food_name=food.name if food else None,
                    food_icon=food.icon if food else None,
                )
            )
        return results

    def record_meal(
        self, user_id: UUID, day: date, drafts: list[MealEntryDraft]
    ) -> tuple[list[FoodConsumptionEntry], DailyConsumption]:
        with self._lock:
            created = [
                FoodConsumptionEntry(
                    id=uuid4(),
                    user_id=user_id,
                    food_id=draft.food_id,
                    date=day,
                    quantity=draft.quantity,
                    calories=draft.calories,
                    created_at=datetime.now(tz=UTC),
                )
                for draft in drafts
            ]
            self.entries.extend(created)
            consumed = sum(
                entry.calories
                for entry in self.entries
                if entry.user_id == user_id and entry.date == day
            )
            existing = self.daily.get((user_id, day))
            total = DailyConsumption(
                id=existing.id if existing else uuid4(),
                user_id=user_id,
                date=day,
                consumed=consumed,
                updated_at=datetime.now(tz=UTC),
            )
            self.daily[(user_id, day)] = total
        return created, total


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, Profile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> Profile | None:
        return self.profiles.get(user_id)

    def upsert_profile(
        self, user_id: UUID, changes: dict[str, int], defaults: ProfileDefaults
    ) -> Profile:
        current = self.profiles.get(user_id) or defaults.for_user(user_id)
        values = {**asdict(current), **changes, "updated_at": datetime.now(tz=UTC)}
        profile = Profile(**values)
        self.profiles[user_id] = profile
        return profile


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def consumption_repository(
    food_repository: InMemoryFoodRepository,
) -> InMemoryConsumptionRepository:
    return InMemoryConsumptionRepository(foods=food_repository)


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def container(
    settings: Settings,
    food_repository: InMemoryFoodRepository,
    consumption_repository: InMemoryConsumptionRepository,
    profile_repository: InMemoryProfileRepository,
) -> AppContainer:
    return build_container(
        settings,
        Repositories(
            consumption=consumption_repository,
            foods=food_repository,
            profiles=profile_repository,
        ),
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()

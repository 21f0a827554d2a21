"""Tests for the backend used when no store is configured."""

from datetime import date
from uuid import uuid4

import pytest

from calorie_tracker.adapters.unavailable import UnavailableBackend
from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer, Repositories, build_container
from calorie_tracker.domain.errors import BackendUnavailable
from calorie_tracker.domain.meals import MealEntryDraft
from calorie_tracker.domain.models import DEFAULT_PROFILE, ProfileUpdate
from calorie_tracker.domain.progress import ProgressCategory

DAY = date(2025, 10, 1)


def _container(settings: Settings, *, tolerate_reads: bool) -> AppContainer:
    backend = UnavailableBackend(tolerate_reads=tolerate_reads)
    return build_container(
        settings,
        Repositories(consumption=backend, foods=backend, profiles=backend),
    )


@pytest.mark.parametrize("tolerate_reads", [False, True])
def test_writes_always_fail(settings: Settings, tolerate_reads: bool) -> None:
    container = _container(settings, tolerate_reads=tolerate_reads)
    user_id = uuid4()

    with pytest.raises(BackendUnavailable):
        container.consumption_service.upsert_daily_total(user_id, DAY, 100)
    with pytest.raises(BackendUnavailable):
        container.consumption_service.add_food_entry(user_id, uuid4(), DAY, 1, 10)
    with pytest.raises(BackendUnavailable):
        container.consumption_service.record_meal(
            user_id, DAY, [MealEntryDraft(uuid4(), 100, 155)]
        )
    with pytest.raises(BackendUnavailable):
        container.food_catalog.create_food("Rice", "🍚", 130)
    with pytest.raises(BackendUnavailable):
        container.profile_service.upsert(user_id, ProfileUpdate(daily_goal=1800))


def test_reads_fail_without_offline_mode(settings: Settings) -> None:
    container = _container(settings, tolerate_reads=False)

    with pytest.raises(BackendUnavailable):
        container.consumption_service.get_daily_totals(uuid4(), DAY, DAY)
    with pytest.raises(BackendUnavailable):
        container.food_catalog.list_foods()


def test_offline_reads_return_empty_results(settings: Settings) -> None:
    container = _container(settings, tolerate_reads=True)
    user_id = uuid4()

    assert container.consumption_service.get_daily_totals(user_id, DAY, DAY) == []
    assert container.consumption_service.get_food_entries(user_id, DAY, DAY) == []
    assert container.food_catalog.list_foods() == []
    assert container.profile_service.get(user_id) is None

    dashboard = container.progress_service.dashboard(user_id, DAY, DAY)
    assert dashboard.goal == DEFAULT_PROFILE.daily_goal
    assert dashboard.progress.category is ProgressCategory.INSUFFICIENT_DATA

"""Tests for profile service."""

from uuid import uuid4

import pytest

from calorie_tracker.domain.errors import ValidationFailed
from calorie_tracker.domain.models import DEFAULT_PROFILE, ProfileUpdate
from calorie_tracker.services.profiles import ProfileService
from tests.conftest import InMemoryProfileRepository


def test_get_returns_none_without_profile() -> None:
    service = ProfileService(InMemoryProfileRepository())

    assert service.get(uuid4()) is None


def test_get_or_default_applies_documented_defaults() -> None:
    service = ProfileService(InMemoryProfileRepository())
    user_id = uuid4()

    profile = service.get_or_default(user_id)

    assert profile.user_id == user_id
    assert profile.age == 30
    assert profile.daily_goal == 2000
    assert profile.daily_goal == DEFAULT_PROFILE.daily_goal


def test_first_upsert_fills_missing_fields_with_defaults() -> None:
    service = ProfileService(InMemoryProfileRepository())
    user_id = uuid4()

    profile = service.upsert(user_id, ProfileUpdate(daily_goal=1800))

    assert profile.daily_goal == 1800
    assert profile.age == DEFAULT_PROFILE.age
    assert service.get(user_id) == profile


def test_upsert_only_changes_set_fields() -> None:
    repository = InMemoryProfileRepository()
    service = ProfileService(repository)
    user_id = uuid4()
    service.upsert(user_id, ProfileUpdate(age=41, height_cm=165))

    profile = service.upsert(user_id, ProfileUpdate(current_weight_deci=720))

    assert profile.age == 41
    assert profile.height_cm == 165
    assert profile.current_weight_deci == 720
    assert len(repository.profiles) == 1


@pytest.mark.parametrize(
    "update",
    [
        ProfileUpdate(age=0),
        ProfileUpdate(height_cm=-170),
        ProfileUpdate(daily_goal=0),
    ],
)
def test_upsert_rejects_non_positive_fields(update: ProfileUpdate) -> None:
    repository = InMemoryProfileRepository()
    service = ProfileService(repository)

    with pytest.raises(ValidationFailed):
        service.upsert(uuid4(), update)

    assert repository.profiles == {}


def test_profile_update_changes_lists_only_set_fields() -> None:
    update = ProfileUpdate(age=25, daily_goal=2200)

    assert update.changes() == {"age": 25, "daily_goal": 2200}
    applied = update.apply(DEFAULT_PROFILE.for_user(uuid4()))
    assert applied.age == 25
    assert applied.height_cm == DEFAULT_PROFILE.height_cm

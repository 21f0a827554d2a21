"""Tests for the catalog seeding entrypoint."""

import pytest

from calorie_tracker import seed
from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.foods import DEFAULT_FOODS


def test_seed_reports_created_foods(
    container: AppContainer,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(seed, "build_container", lambda _settings: container)

    assert seed.main() == 0
    assert f"seeded {len(DEFAULT_FOODS)} foods" in capsys.readouterr().out

    assert seed.main() == 0
    assert "seeded 0 foods" in capsys.readouterr().out


def test_seed_fails_without_backend() -> None:
    settings = Settings(supabase_url=None, supabase_service_key=None)

    assert seed.main(settings) == 1

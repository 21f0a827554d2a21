"""Seed the shared food catalog with the default foods."""

import logging

from calorie_tracker.app_logging import configure_logging
from calorie_tracker.config import Settings
from calorie_tracker.containers import build_container
from calorie_tracker.domain.errors import TrackerError

_logger = logging.getLogger(__name__)


def main(settings: Settings | None = None) -> int:
    """Insert missing default foods; return a process exit code."""
    resolved = settings or Settings()
    configure_logging(resolved.log_level)
    container = build_container(resolved)
    try:
        created = container.food_catalog.seed_defaults()
    except TrackerError as exc:
        _logger.error("Catalog seeding failed: %s", exc.message)
        return 1
    print(f"Calorie Tracker: seeded {len(created)} foods")  # noqa: T201
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

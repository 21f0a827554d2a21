"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import Client, create_client

from calorie_tracker.adapters.supabase_consumption_repository import (
    SupabaseConsumptionRepository,
)
from calorie_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from calorie_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from calorie_tracker.adapters.unavailable import UnavailableBackend
from calorie_tracker.config import Settings
from calorie_tracker.services.aggregation import RangeAggregator
from calorie_tracker.services.consumption import (
    ConsumptionRepository,
    ConsumptionService,
)
from calorie_tracker.services.foods import FoodCatalogService, FoodRepository
from calorie_tracker.services.meals import MealLogService
from calorie_tracker.services.profiles import ProfileRepository, ProfileService
from calorie_tracker.services.progress import ProgressService

_logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    """The store handle: one repository per persisted aggregate."""

    consumption: ConsumptionRepository
    foods: FoodRepository
    profiles: ProfileRepository
    client: Client | None = None

    def close(self) -> None:
        """Close the Supabase HTTP session, if one was opened."""
        if self.client is not None:
            self.client.postgrest.session.close()


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    food_catalog: FoodCatalogService
    consumption_service: ConsumptionService
    aggregator: RangeAggregator
    progress_service: ProgressService
    meal_log_service: MealLogService
    close_resources: Callable[[], Awaitable[None]]


def build_repositories(settings: Settings) -> Repositories:
    """Create the store handle for the configured backend.

    Without Supabase credentials every repository is the unavailable backend;
    it tolerates reads only when ``offline_reads`` is enabled.
    """
    if not settings.backend_configured:
        _logger.warning(
            "Supabase is not configured; persistence is unavailable",
            extra={"offline_reads": settings.offline_reads},
        )
        backend = UnavailableBackend(tolerate_reads=settings.offline_reads)
        return Repositories(consumption=backend, foods=backend, profiles=backend)

    client = create_client(settings.supabase_url, settings.supabase_service_key)
    return Repositories(
        consumption=SupabaseConsumptionRepository(client),
        foods=SupabaseFoodRepository(client),
        profiles=SupabaseProfileRepository(client),
        client=client,
    )


def build_container(
    settings: Settings | None = None, repositories: Repositories | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = repositories or build_repositories(resolved_settings)

    food_catalog = FoodCatalogService(store.foods)
    profile_service = ProfileService(store.profiles)
    consumption_service = ConsumptionService(
        repository=store.consumption,
        food_repository=store.foods,
    )
    aggregator = RangeAggregator(consumption_service)
    progress_service = ProgressService(
        aggregator=aggregator,
        profile_service=profile_service,
        thresholds=resolved_settings.progress_thresholds(),
    )
    meal_log_service = MealLogService(
        catalog=food_catalog,
        consumption_service=consumption_service,
    )

    async def close_resources() -> None:
        store.close()
        _logger.info("Store handle released")

    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        food_catalog=food_catalog,
        consumption_service=consumption_service,
        aggregator=aggregator,
        progress_service=progress_service,
        meal_log_service=meal_log_service,
        close_resources=close_resources,
    )

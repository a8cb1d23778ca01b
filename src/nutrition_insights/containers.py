"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass

from supabase import create_client

from nutrition_insights.adapters.memory_record_repository import (
    InMemoryRecordRepository,
)
from nutrition_insights.adapters.supabase_record_repository import (
    SupabaseRecordRepository,
)
from nutrition_insights.config import Settings
from nutrition_insights.services.clusters import ClusterService
from nutrition_insights.services.insights import InsightsService
from nutrition_insights.services.recipes import RecipeService
from nutrition_insights.services.seeding import SeedService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    insights_service: InsightsService
    recipe_service: RecipeService
    cluster_service: ClusterService
    seed_service: SeedService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    repository = _build_repository(resolved_settings)
    _logger.info("Using %s record store", resolved_settings.store_backend)
    return AppContainer(
        settings=resolved_settings,
        insights_service=InsightsService(repository),
        recipe_service=RecipeService(repository),
        cluster_service=ClusterService(),
        seed_service=SeedService(repository),
    )


def _build_repository(
    settings: Settings,
) -> InMemoryRecordRepository | SupabaseRecordRepository:
    if settings.store_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise RuntimeError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required "
                "when STORE_BACKEND=supabase"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseRecordRepository(client)
    return InMemoryRecordRepository.with_demo_data()

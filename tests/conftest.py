"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass

import pytest

from nutrition_insights.adapters.memory_record_repository import (
    InMemoryRecordRepository,
)
from nutrition_insights.config import Settings
from nutrition_insights.containers import AppContainer
from nutrition_insights.domain.insights import NutritionProfile
from nutrition_insights.domain.recipes import Recipe
from nutrition_insights.services.clusters import ClusterService
from nutrition_insights.services.insights import (
    InsightsService,
    NutritionProfileRepository,
)
from nutrition_insights.services.recipes import RecipeRepository, RecipeService
from nutrition_insights.services.seeding import SeedRepository, SeedService


@dataclass
class FailingRecordRepository(
    NutritionProfileRepository, RecipeRepository, SeedRepository
):
    """Record store whose every call fails, as when the database is down."""

    message: str = "connection refused"

    def list_profiles(self) -> list[NutritionProfile]:
        raise ConnectionError(self.message)

    def list_recipes(self) -> list[Recipe]:
        raise ConnectionError(self.message)

    def replace_all(
        self, profiles: Sequence[NutritionProfile], recipes: Sequence[Recipe]
    ) -> None:
        raise ConnectionError(self.message)


def _container(settings: Settings, repository: object) -> AppContainer:
    return AppContainer(
        settings=settings,
        insights_service=InsightsService(repository),
        recipe_service=RecipeService(repository),
        cluster_service=ClusterService(),
        seed_service=SeedService(repository),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(store_backend="memory", default_page_size=10, cors_origins="*")


@pytest.fixture
def repository() -> InMemoryRecordRepository:
    return InMemoryRecordRepository.with_demo_data()


@pytest.fixture
def container(
    settings: Settings, repository: InMemoryRecordRepository
) -> AppContainer:
    return _container(settings, repository)


@pytest.fixture
def failing_container(settings: Settings) -> AppContainer:
    return _container(settings, FailingRecordRepository())

"""Seeding of the record store with the demo dataset."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from nutrition_insights.demo_data import DEMO_PROFILES, DEMO_RECIPES
from nutrition_insights.domain.insights import NutritionProfile
from nutrition_insights.domain.recipes import Recipe

_logger = logging.getLogger(__name__)


class SeedRepository(Protocol):
    """Write interface used only for seeding."""

    def replace_all(
        self, profiles: Sequence[NutritionProfile], recipes: Sequence[Recipe]
    ) -> None:
        """Delete both collections and insert the given records in order."""


@dataclass(frozen=True)
class SeedResult:
    """Counts of records written by a seed run."""

    profiles: int
    recipes: int


@dataclass
class SeedService:
    """Replaces the stored collections with the fixed demo records."""

    repository: SeedRepository
    profiles: Sequence[NutritionProfile] = DEMO_PROFILES
    recipes: Sequence[Recipe] = DEMO_RECIPES

    def seed(self) -> SeedResult:
        """Destructively reseed both collections."""
        _logger.info(
            "Seeding %s nutrition profiles and %s recipes",
            len(self.profiles),
            len(self.recipes),
        )
        self.repository.replace_all(self.profiles, self.recipes)
        return SeedResult(profiles=len(self.profiles), recipes=len(self.recipes))

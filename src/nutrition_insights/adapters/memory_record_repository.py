"""In-memory record store."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from nutrition_insights.demo_data import DEMO_PROFILES, DEMO_RECIPES
from nutrition_insights.domain.insights import NutritionProfile
from nutrition_insights.domain.recipes import Recipe
from nutrition_insights.services.insights import NutritionProfileRepository
from nutrition_insights.services.recipes import RecipeRepository
from nutrition_insights.services.seeding import SeedRepository


@dataclass
class InMemoryRecordRepository(
    NutritionProfileRepository, RecipeRepository, SeedRepository
):
    """Holds both collections in insertion order."""

    profiles: list[NutritionProfile] = field(default_factory=list)
    recipes: list[Recipe] = field(default_factory=list)

    @classmethod
    def with_demo_data(cls) -> "InMemoryRecordRepository":
        """Create a store preloaded with the demo dataset."""
        return cls(profiles=list(DEMO_PROFILES), recipes=list(DEMO_RECIPES))

    def list_profiles(self) -> list[NutritionProfile]:
        """Return a copy of the stored profiles."""
        return list(self.profiles)

    def list_recipes(self) -> list[Recipe]:
        """Return a copy of the stored recipes."""
        return list(self.recipes)

    def replace_all(
        self, profiles: Sequence[NutritionProfile], recipes: Sequence[Recipe]
    ) -> None:
        """Swap both collections for the given records."""
        self.profiles = list(profiles)
        self.recipes = list(recipes)

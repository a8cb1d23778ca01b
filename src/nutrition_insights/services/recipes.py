"""Recipe listing."""

from dataclasses import dataclass
from typing import Protocol

from nutrition_insights.domain.filters import FilterSpec, QueryResult
from nutrition_insights.domain.recipes import Recipe
from nutrition_insights.services.query import query


class RecipeRepository(Protocol):
    """Read interface for recipes."""

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes in seed order."""


@dataclass
class RecipeService:
    """Application service for filtered, paginated recipe lists."""

    repository: RecipeRepository

    def list_recipes(self, spec: FilterSpec) -> QueryResult[Recipe]:
        """Return the requested page of recipes matching the filter."""
        return query(
            self.repository.list_recipes(),
            spec,
            diet_of=lambda recipe: recipe.diet_type,
            text_of=lambda recipe: recipe.name,
        )

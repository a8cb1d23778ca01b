"""Supabase-backed record store."""

from collections.abc import Sequence
from dataclasses import dataclass

from supabase import Client

from nutrition_insights.domain.insights import NutritionProfile
from nutrition_insights.domain.recipes import Recipe
from nutrition_insights.services.insights import NutritionProfileRepository
from nutrition_insights.services.recipes import RecipeRepository
from nutrition_insights.services.seeding import SeedRepository

PROFILES_TABLE = "nutrition_profiles"
RECIPES_TABLE = "recipes"


@dataclass
class SupabaseRecordRepository(
    NutritionProfileRepository, RecipeRepository, SeedRepository
):
    """Supabase implementation of the record store.

    Rows carry a ``position`` column written at seed time so reads return
    records in the same order as the in-memory store.
    """

    client: Client

    def list_profiles(self) -> list[NutritionProfile]:
        """Return all nutrition profiles in seed order."""
        response = (
            self.client.table(PROFILES_TABLE)
            .select("diet_name, calories, protein, carbs, fat")
            .order("position", desc=False)
            .execute()
        )
        return [_parse_profile(row) for row in response.data or []]

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes in seed order."""
        response = (
            self.client.table(RECIPES_TABLE)
            .select("id, name, diet_type, calories, protein")
            .order("position", desc=False)
            .execute()
        )
        return [_parse_recipe(row) for row in response.data or []]

    def replace_all(
        self, profiles: Sequence[NutritionProfile], recipes: Sequence[Recipe]
    ) -> None:
        """Delete every stored row and insert the given records."""
        # PostgREST refuses unfiltered deletes.
        self.client.table(PROFILES_TABLE).delete().gte("position", 0).execute()
        self.client.table(RECIPES_TABLE).delete().gte("position", 0).execute()

        if profiles:
            response = (
                self.client.table(PROFILES_TABLE)
                .insert(
                    [
                        {
                            "position": position,
                            "diet_name": profile.diet_name,
                            "calories": profile.calories,
                            "protein": profile.protein,
                            "carbs": profile.carbs,
                            "fat": profile.fat,
                        }
                        for position, profile in enumerate(profiles)
                    ]
                )
                .execute()
            )
            if not response.data:
                raise RuntimeError("Failed to seed nutrition profiles")

        if recipes:
            response = (
                self.client.table(RECIPES_TABLE)
                .insert(
                    [
                        {
                            "position": position,
                            "id": recipe.id,
                            "name": recipe.name,
                            "diet_type": recipe.diet_type,
                            "calories": recipe.calories,
                            "protein": recipe.protein,
                        }
                        for position, recipe in enumerate(recipes)
                    ]
                )
                .execute()
            )
            if not response.data:
                raise RuntimeError("Failed to seed recipes")


def _parse_profile(row: dict[str, object]) -> NutritionProfile:
    """Parse a nutrition profile row into a domain model."""
    return NutritionProfile(
        diet_name=str(row.get("diet_name", "")),
        calories=float(row.get("calories", 0.0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
    )


def _parse_recipe(row: dict[str, object]) -> Recipe:
    """Parse a recipe row into a domain model."""
    return Recipe(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        diet_type=str(row.get("diet_type", "")),
        calories=float(row.get("calories", 0.0)),
        protein=float(row.get("protein", 0.0)),
    )

"""Fixed demo dataset used for the in-memory store and for seeding."""

from nutrition_insights.domain.clusters import Cluster
from nutrition_insights.domain.insights import NutritionProfile
from nutrition_insights.domain.recipes import Recipe

DEMO_PROFILES: tuple[NutritionProfile, ...] = (
    NutritionProfile(diet_name="Vegan", calories=420, protein=20, carbs=50, fat=15),
    NutritionProfile(diet_name="Keto", calories=530, protein=30, carbs=10, fat=60),
    NutritionProfile(diet_name="Paleo", calories=480, protein=25, carbs=35, fat=30),
    NutritionProfile(
        diet_name="Vegetarian", calories=410, protein=22, carbs=45, fat=20
    ),
    NutritionProfile(
        diet_name="Mediterranean", calories=460, protein=24, carbs=40, fat=28
    ),
)

DEMO_RECIPES: tuple[Recipe, ...] = (
    Recipe(id=1, name="Vegan Bowl", diet_type="vegan", calories=420, protein=18),
    Recipe(id=2, name="Keto Chicken", diet_type="keto", calories=530, protein=42),
    Recipe(id=3, name="Paleo Salad", diet_type="paleo", calories=390, protein=28),
    Recipe(
        id=4, name="Veggie Wrap", diet_type="vegetarian", calories=410, protein=20
    ),
    Recipe(
        id=5,
        name="Mediterranean Tuna",
        diet_type="mediterranean",
        calories=480,
        protein=35,
    ),
    Recipe(
        id=6, name="Vegan Lentil Soup", diet_type="vegan", calories=360, protein=16
    ),
    Recipe(id=7, name="Keto Omelette", diet_type="keto", calories=510, protein=33),
    Recipe(
        id=8, name="Paleo Steak Plate", diet_type="paleo", calories=610, protein=48
    ),
)

DEMO_CLUSTERS: tuple[Cluster, ...] = (
    Cluster(
        cluster_id=1, name="High Protein", foods=["Chicken", "Eggs", "Greek Yogurt"]
    ),
    Cluster(cluster_id=2, name="Low Carb", foods=["Avocado", "Salmon", "Cheese"]),
    Cluster(cluster_id=3, name="Balanced Meals", foods=["Oats", "Rice", "Beans"]),
)

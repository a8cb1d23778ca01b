"""Pydantic response models for the insights API."""

import math

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from nutrition_insights.domain.clusters import Cluster
from nutrition_insights.domain.filters import FilterSpec
from nutrition_insights.domain.insights import ChartBundle, SummaryStats
from nutrition_insights.domain.recipes import Recipe


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LabelledDataset(CamelModel):
    """Chart dataset with a label."""

    label: str
    data: list[float]


class UnlabelledDataset(CamelModel):
    """Chart dataset without a label."""

    data: list[float]


class Point(CamelModel):
    """Scatter coordinate."""

    x: float
    y: float


class ScatterDataset(CamelModel):
    """Scatter dataset of coordinate pairs."""

    label: str
    data: list[Point]


class BarData(CamelModel):
    """Grouped bar chart payload."""

    labels: list[str]
    datasets: list[LabelledDataset]


class ScatterData(CamelModel):
    """Scatter chart payload."""

    datasets: list[ScatterDataset]


class PieData(CamelModel):
    """Pie chart payload."""

    labels: list[str]
    datasets: list[UnlabelledDataset]


class HeatmapData(CamelModel):
    """Heatmap payload."""

    labels: list[str]
    values: list[list[float]]


class Summary(CamelModel):
    """Summary statistics payload."""

    total_diet_types: int
    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fat: float
    best_high_protein: str | None
    best_low_carb: str | None


class Meta(CamelModel):
    """Resolved filter echoed back with the match count."""

    page: int
    page_size: int
    total: int
    total_pages: int
    diet_type: str
    q: str


class InsightsResponse(CamelModel):
    """Response for ``GET /api/insights``."""

    bar_data: BarData
    scatter_data: ScatterData
    pie_data: PieData
    heatmap: HeatmapData
    summary: Summary
    meta: Meta


class RecipeOut(CamelModel):
    """Recipe payload."""

    id: int
    name: str
    diet_type: str
    calories: float
    protein: float


class RecipesResponse(CamelModel):
    """Response for ``GET /api/recipes``."""

    recipes: list[RecipeOut]
    meta: Meta


class ClusterOut(CamelModel):
    """Cluster payload."""

    cluster_id: int
    name: str
    foods: list[str]


class ClustersResponse(CamelModel):
    """Response for ``GET /api/clusters``."""

    clusters: list[ClusterOut]


def build_meta(spec: FilterSpec, total: int) -> Meta:
    """Build response metadata for a resolved filter."""
    return Meta(
        page=spec.page,
        page_size=spec.page_size,
        total=total,
        total_pages=math.ceil(total / spec.page_size),
        diet_type=spec.diet_type,
        q=spec.query,
    )


def insights_response(
    charts: ChartBundle, summary: SummaryStats, meta: Meta
) -> InsightsResponse:
    """Convert derived insights into the API payload."""
    return InsightsResponse(
        bar_data=BarData(
            labels=charts.labels,
            datasets=[
                LabelledDataset(label=series.label, data=series.values)
                for series in charts.bar_series
            ],
        ),
        scatter_data=ScatterData(
            datasets=[
                ScatterDataset(
                    label=charts.scatter_label,
                    data=[Point(x=p.x, y=p.y) for p in charts.scatter_points],
                )
            ]
        ),
        pie_data=PieData(
            labels=charts.labels,
            datasets=[UnlabelledDataset(data=charts.pie_values)],
        ),
        heatmap=HeatmapData(
            labels=charts.heatmap.labels, values=charts.heatmap.values
        ),
        summary=Summary(
            total_diet_types=summary.total_diet_types,
            avg_calories=summary.avg_calories,
            avg_protein=summary.avg_protein,
            avg_carbs=summary.avg_carbs,
            avg_fat=summary.avg_fat,
            best_high_protein=summary.best_high_protein,
            best_low_carb=summary.best_low_carb,
        ),
        meta=meta,
    )


def recipe_out(recipe: Recipe) -> RecipeOut:
    """Convert a recipe to its API payload."""
    return RecipeOut(
        id=recipe.id,
        name=recipe.name,
        diet_type=recipe.diet_type,
        calories=recipe.calories,
        protein=recipe.protein,
    )


def cluster_out(cluster: Cluster) -> ClusterOut:
    """Convert a cluster to its API payload."""
    return ClusterOut(
        cluster_id=cluster.cluster_id, name=cluster.name, foods=list(cluster.foods)
    )

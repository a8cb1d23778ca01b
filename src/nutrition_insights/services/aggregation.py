"""Summary statistics and chart shaping for nutrition profiles."""

import math
from collections.abc import Iterable, Sequence

from nutrition_insights.domain.insights import (
    ChartBundle,
    Heatmap,
    NutritionProfile,
    ScatterPoint,
    Series,
    SummaryStats,
)

HEATMAP_LABELS = ("Calories", "Protein", "Carbs", "Fat")

# Placeholder values; not derived from the profiles being charted.
CORRELATION_MATRIX = (
    (1, 0.4, 0.6, 0.7),
    (0.4, 1, 0.2, 0.3),
    (0.6, 0.2, 1, 0.5),
    (0.7, 0.3, 0.5, 1),
)

SCATTER_LABEL = "Protein vs Carbs"


def average(values: Iterable[float]) -> float:
    """Return the mean rounded half-up to one decimal, or 0 for no values."""
    numbers = list(values)
    if not numbers:
        return 0.0
    mean = sum(numbers) / len(numbers)
    return math.floor(mean * 10 + 0.5) / 10


def best_by_protein(items: Sequence[NutritionProfile]) -> str | None:
    """Return the diet with the highest protein, first one on ties."""
    best: NutritionProfile | None = None
    for item in items:
        if best is None or item.protein > best.protein:
            best = item
    return best.diet_name if best else None


def best_by_carbs(items: Sequence[NutritionProfile]) -> str | None:
    """Return the diet with the lowest carbs, first one on ties."""
    best: NutritionProfile | None = None
    for item in items:
        if best is None or item.carbs < best.carbs:
            best = item
    return best.diet_name if best else None


def summarize(items: Sequence[NutritionProfile]) -> SummaryStats:
    """Compute summary statistics for the given profiles."""
    return SummaryStats(
        total_diet_types=len(items),
        avg_calories=average(item.calories for item in items),
        avg_protein=average(item.protein for item in items),
        avg_carbs=average(item.carbs for item in items),
        avg_fat=average(item.fat for item in items),
        best_high_protein=best_by_protein(items),
        best_low_carb=best_by_carbs(items),
    )


def to_chart_bundle(items: Sequence[NutritionProfile]) -> ChartBundle:
    """Reshape profiles into bar, scatter, pie and heatmap structures."""
    return ChartBundle(
        labels=[item.diet_name for item in items],
        bar_series=[
            Series(label="Protein", values=[item.protein for item in items]),
            Series(label="Carbs", values=[item.carbs for item in items]),
            Series(label="Fat", values=[item.fat for item in items]),
        ],
        scatter_label=SCATTER_LABEL,
        scatter_points=[ScatterPoint(x=item.carbs, y=item.protein) for item in items],
        pie_values=[item.calories for item in items],
        heatmap=Heatmap(
            labels=list(HEATMAP_LABELS),
            values=[list(row) for row in CORRELATION_MATRIX],
        ),
    )

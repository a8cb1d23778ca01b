"""Domain models for nutrition profiles and derived insights."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionProfile:
    """Aggregate nutrition record for a named diet category."""

    diet_name: str
    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class SummaryStats:
    """Summary statistics over a filtered set of nutrition profiles."""

    total_diet_types: int
    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fat: float
    best_high_protein: str | None
    best_low_carb: str | None


@dataclass(frozen=True)
class Series:
    """A labelled sequence of values for a chart dataset."""

    label: str
    values: list[float]


@dataclass(frozen=True)
class ScatterPoint:
    """A single scatter coordinate."""

    x: float
    y: float


@dataclass(frozen=True)
class Heatmap:
    """Labelled square matrix rendered as a heatmap."""

    labels: list[str]
    values: list[list[float]]


@dataclass(frozen=True)
class ChartBundle:
    """Chart-ready structures derived from nutrition profiles."""

    labels: list[str]
    bar_series: list[Series]
    scatter_label: str
    scatter_points: list[ScatterPoint]
    pie_values: list[float]
    heatmap: Heatmap


@dataclass(frozen=True)
class InsightsReport:
    """Charts and summary for the profiles matching a filter."""

    charts: ChartBundle
    summary: SummaryStats
    total: int

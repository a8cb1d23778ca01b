"""Insights over nutrition profiles."""

import logging
from dataclasses import dataclass
from typing import Protocol

from nutrition_insights.domain.filters import FilterSpec
from nutrition_insights.domain.insights import InsightsReport, NutritionProfile
from nutrition_insights.services.aggregation import summarize, to_chart_bundle
from nutrition_insights.services.query import filter_records

_logger = logging.getLogger(__name__)


class NutritionProfileRepository(Protocol):
    """Read interface for nutrition profiles."""

    def list_profiles(self) -> list[NutritionProfile]:
        """Return all profiles in seed order."""


@dataclass
class InsightsService:
    """Application service computing charts and summaries per filter."""

    repository: NutritionProfileRepository

    def get_insights(self, spec: FilterSpec) -> InsightsReport:
        """Return charts and summary for every profile matching the filter.

        Insights are computed over the full match set; ``spec.page`` and
        ``spec.page_size`` do not narrow it.
        """
        profiles = self.repository.list_profiles()
        matched = filter_records(profiles, spec, _diet_name, _diet_name)
        return InsightsReport(
            charts=to_chart_bundle(matched),
            summary=summarize(matched),
            total=len(matched),
        )

    def check_store(self) -> int:
        """Read the profile collection once and return its size."""
        count = len(self.repository.list_profiles())
        _logger.info("Record store reachable: %s nutrition profiles", count)
        return count


def _diet_name(profile: NutritionProfile) -> str:
    return profile.diet_name

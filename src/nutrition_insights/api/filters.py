"""Query-string parsing into filter specs."""

import math

from nutrition_insights.domain.filters import ALL_DIETS, FilterSpec


def parse_filter_spec(
    diet_type: str | None,
    query: str | None,
    page: str | None,
    page_size: str | None,
    default_page_size: int = 10,
) -> FilterSpec:
    """Build a filter spec from raw query-string values.

    Text values are trimmed and lowercased; a blank diet type means all diets.
    Numbers are floored and clamped to at least 1, and unparseable numbers
    fall back to their defaults instead of being rejected.
    """
    return FilterSpec(
        diet_type=_normalize(diet_type) or ALL_DIETS,
        query=_normalize(query),
        page=_coerce_positive_int(page, default=1),
        page_size=_coerce_positive_int(page_size, default=default_page_size),
    )


def _normalize(value: str | None) -> str:
    return (value or "").strip().lower()


def _coerce_positive_int(raw: str | None, default: int) -> int:
    if raw is None or not raw.strip():
        return max(1, default)
    try:
        number = float(raw)
    except ValueError:
        return max(1, default)
    if not math.isfinite(number):
        return max(1, default)
    return max(1, math.floor(number))

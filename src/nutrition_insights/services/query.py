"""Filtering and pagination over record collections."""

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from nutrition_insights.domain.filters import ALL_DIETS, FilterSpec, QueryResult

T = TypeVar("T")


def filter_records(
    records: Iterable[T],
    spec: FilterSpec,
    diet_of: Callable[[T], str],
    text_of: Callable[[T], str],
) -> list[T]:
    """Return records matching both the diet and text predicates, in order."""
    diet_type = _normalize(spec.diet_type) or ALL_DIETS
    text = _normalize(spec.query)
    return [
        record
        for record in records
        if _matches_diet(diet_of(record), diet_type)
        and _matches_text(text_of(record), text)
    ]


def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """Return the 1-based page window; pages past the end are empty."""
    start = (page - 1) * page_size
    return list(items[start : start + page_size])


def query(
    records: Iterable[T],
    spec: FilterSpec,
    diet_of: Callable[[T], str],
    text_of: Callable[[T], str],
) -> QueryResult[T]:
    """Filter records and return the requested page with the total count."""
    matched = filter_records(records, spec, diet_of, text_of)
    return QueryResult(
        items=paginate(matched, spec.page, spec.page_size),
        total=len(matched),
    )


def _matches_diet(value: str, diet_type: str) -> bool:
    return diet_type == ALL_DIETS or _normalize(value) == diet_type


def _matches_text(value: str, query: str) -> bool:
    return not query or query in _normalize(value)


def _normalize(value: str | None) -> str:
    return str(value or "").strip().lower()

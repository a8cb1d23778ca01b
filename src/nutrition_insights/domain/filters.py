"""Filter and query result models."""

from dataclasses import dataclass
from typing import Generic, TypeVar

ALL_DIETS = "all"

T = TypeVar("T")


@dataclass(frozen=True)
class FilterSpec:
    """Resolved filter for a single request.

    ``diet_type`` and ``query`` are stored trimmed and lowercased. ``page`` and
    ``page_size`` are always at least 1.
    """

    diet_type: str = ALL_DIETS
    query: str = ""
    page: int = 1
    page_size: int = 10

    @property
    def offset(self) -> int:
        """Index of the first record on the requested page."""
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """A page of matching records plus the total match count."""

    items: list[T]
    total: int

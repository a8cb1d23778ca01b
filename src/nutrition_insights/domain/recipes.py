"""Domain models for recipes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Recipe:
    """A named dish tagged with a diet type and nutrition facts."""

    id: int
    name: str
    diet_type: str
    calories: float
    protein: float

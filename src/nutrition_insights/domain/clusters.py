"""Domain models for food clusters."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Cluster:
    """A named group of foods."""

    cluster_id: int
    name: str
    foods: list[str]

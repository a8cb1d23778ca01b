"""Static food clusters."""

from dataclasses import dataclass

from nutrition_insights.demo_data import DEMO_CLUSTERS
from nutrition_insights.domain.clusters import Cluster


@dataclass
class ClusterService:
    """Serves the fixed list of food clusters."""

    clusters: tuple[Cluster, ...] = DEMO_CLUSTERS

    def list_clusters(self) -> list[Cluster]:
        """Return all clusters."""
        return list(self.clusters)

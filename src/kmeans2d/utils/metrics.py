"""
Quality metrics for a partition.
"""

from typing import List, Sequence

from ..base.interfaces import Observation


def inertia(clusters: Sequence[Sequence[Observation]], centroids: Sequence[Observation]) -> float:
    """Compute sum of squared distances from members to their centroid.

    Args:
        clusters: K clusters, cluster i belonging to centroids[i]
        centroids: K centroids

    Returns:
        Total inertia (lower is better)
    """
    if len(clusters) != len(centroids):
        raise ValueError(f"Got {len(clusters)} clusters for {len(centroids)} centroids")

    total = 0.0
    for cluster, c in zip(clusters, centroids):
        for p in cluster:
            dx = p.x - c.x
            dy = p.y - c.y
            total += dx * dx + dy * dy

    return total


def cluster_sizes(clusters: Sequence[Sequence[Observation]]) -> List[int]:
    """Number of members in each cluster."""
    return [len(cluster) for cluster in clusters]

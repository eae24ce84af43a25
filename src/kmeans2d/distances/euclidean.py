"""
Euclidean distance metric for clustering.

The only metric the partition loop uses: straight-line distance in the plane.
"""

import math
import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric, Observation


def euclidean_distance(p1: Observation, p2: Observation) -> float:
    """Compute sqrt((x2 - x1)^2 + (y2 - y1)^2)."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


class EuclideanDistance(DistanceMetric):
    """Euclidean distance metric.

    Computes ||p - c|| between observations, or between every row of a
    point tensor and every row of a centroid tensor.
    """

    def __init__(self, squared: bool = False):
        """
        Args:
            squared: If True, return squared distances.
                    If False, return actual Euclidean distances (default).
        """
        self.squared = squared

    def compute(self, p1: Observation, p2: Observation, **kwargs) -> float:
        """Compute the distance between two observations."""
        if self.squared:
            dx = p2.x - p1.x
            dy = p2.y - p1.y
            return dx * dx + dy * dy
        return euclidean_distance(p1, p2)

    def compute_matrix(self, points: Tensor, centroids: Tensor) -> Tensor:
        """Compute distances from every point to every centroid.

        Args:
            points: (n, 2) tensor of points
            centroids: (K, 2) tensor of centroids

        Returns:
            (n, K) tensor of distances
        """
        # Exact differences, not torch.cdist: ties must compare equal.
        diff = points.unsqueeze(1) - centroids.unsqueeze(0)
        squared_distances = torch.sum(diff * diff, dim=2)

        if self.squared:
            return squared_distances
        else:
            return torch.sqrt(squared_distances)

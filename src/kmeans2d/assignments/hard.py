"""
Hard assignment strategy for k-means partitioning.

Assigns each observation to its nearest centroid by Euclidean distance.
"""

from typing import List, Optional, Sequence
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, Observation
from ..distances.euclidean import EuclideanDistance, euclidean_distance
from ..exceptions import InvalidArgumentError
from ..utils.tensor import observations_to_tensor


def nearest_centroid(observation: Observation, centroids: Sequence[Observation]) -> int:
    """Find the index of the centroid nearest to an observation.

    On exact distance ties the lowest index wins.

    Args:
        observation: Point to assign
        centroids: Non-empty sequence of centroids

    Returns:
        Index into ``centroids``
    """
    if len(centroids) == 0:
        raise InvalidArgumentError("centroids must not be empty")

    min_idx = 0
    min_dist = euclidean_distance(observation, centroids[0])

    for i in range(1, len(centroids)):
        dist = euclidean_distance(observation, centroids[i])
        if dist < min_dist:
            min_idx = i
            min_dist = dist

    return min_idx


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest centroid.

    Each observation is assigned to exactly one centroid. Distances are
    computed in one batch on float64 tensors; ``torch.argmin`` returns the
    first minimum, which gives the same lowest-index tie rule as
    ``nearest_centroid``.
    """

    def __init__(self, device: Optional[torch.device] = None):
        """
        Args:
            device: Torch device for the distance matrix (CPU if None)
        """
        super().__init__()
        self.device = device if device is not None else torch.device('cpu')
        self.metric = EuclideanDistance()

    def prepare(self, observations: Sequence[Observation]) -> Tensor:
        """Convert observations once so repeated rounds can reuse the tensor."""
        return observations_to_tensor(observations, self.device)

    def compute_assignments(self, observations: Sequence[Observation],
                            centroids: Sequence[Observation],
                            points: Optional[Tensor] = None,
                            **kwargs) -> List[int]:
        """Assign each observation to its nearest centroid.

        Args:
            observations: Sequence of n observations
            centroids: Non-empty sequence of K centroids
            points: Optional (n, 2) tensor from ``prepare(observations)``
            **kwargs: Ignored for basic hard assignment

        Returns:
            List of n centroid indices
        """
        if len(centroids) == 0:
            raise InvalidArgumentError("centroids must not be empty")

        if len(observations) == 0:
            return []

        if points is None:
            points = self.prepare(observations)
        centers = observations_to_tensor(centroids, self.device)

        distances = self.metric.compute_matrix(points, centers)

        # Assign to nearest centroid (minimum distance)
        assignments = torch.argmin(distances, dim=1)

        return assignments.tolist()

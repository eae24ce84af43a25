"""
Random initialization strategy for k-means partitioning.

Selects random observations from the dataset as initial centroids.
"""

from typing import List, Optional, Sequence, Union
import torch

from ..base.interfaces import InitializationStrategy, Observation
from ..utils.validation import check_n_clusters, check_random_state


def sample_centroids(observations: Sequence[Observation], k: int,
                     random_state: Optional[Union[int, torch.Generator]] = None) -> List[Observation]:
    """Select k distinct observations uniformly at random.

    The whole sequence is shuffled on a copy and the first k elements are
    returned. The returned elements are the caller's observation objects,
    and the caller's sequence keeps its order.

    Args:
        observations: Sequence of n observations
        k: Number of centroids to select
        random_state: Seed or torch.Generator; the global torch RNG if None

    Returns:
        New list of k observations

    Raises:
        InsufficientDataError: If n < k
        InvalidKError: If k <= 0
    """
    n_points = 0 if observations is None else len(observations)
    check_n_clusters(k, n_points)

    generator = check_random_state(random_state)
    permutation = torch.randperm(n_points, generator=generator)

    shuffled = [observations[i] for i in permutation.tolist()]
    return shuffled[:k]


class RandomInit(InitializationStrategy):
    """Random initialization by selecting observations from the dataset.

    Selects n_clusters random observations (without replacement) as
    initial centroids.
    """

    def __init__(self, random_state: Optional[Union[int, torch.Generator]] = None):
        """
        Args:
            random_state: Seed or generator used for every call
        """
        self.generator = check_random_state(random_state)

    def initialize(self, observations: Sequence[Observation], n_clusters: int,
                   **kwargs) -> List[Observation]:
        """Initialize centroids with random observations.

        Args:
            observations: Sequence of observations
            n_clusters: Number of centroids

        Returns:
            List of selected observations
        """
        return sample_centroids(observations, n_clusters, random_state=self.generator)

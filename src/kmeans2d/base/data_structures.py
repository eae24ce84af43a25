"""
Core data structures for k-means partitioning.

Provides the concrete centroid value type and the per-iteration record used
for convergence tracking and debugging.
"""

from typing import Tuple, Dict, Any
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Centroid:
    """A 2D point holding two float64 coordinates.

    Used as the mean of a cluster and as the default observation type.
    Satisfies the ``Observation`` protocol.
    """

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def from_observation(cls, observation) -> 'Centroid':
        """Copy the coordinates of any observation into a Centroid."""
        return cls(float(observation.x), float(observation.y))


@dataclass
class PartitionState:
    """State of the partition loop after one iteration.

    ``centroids`` is a snapshot taken after the update step of the
    iteration, or after the assignment pass on the final iteration.
    """
    iteration: int
    centroids: Tuple[Centroid, ...]
    cluster_sizes: Tuple[int, ...]
    inertia: float
    converged: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)

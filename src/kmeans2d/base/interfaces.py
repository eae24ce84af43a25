"""
Core interfaces for k-means partitioning of 2D observations.

This module defines the observation capability set and the abstract base
classes that each algorithm component implements, so the partition loop can
be assembled from interchangeable pieces.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Observation(Protocol):
    """A point in the plane.

    Any object exposing float ``x`` and ``y`` attributes can be clustered.
    The algorithms only read these coordinates and never modify the object.
    """

    @property
    def x(self) -> float:
        """Horizontal coordinate."""
        ...

    @property
    def y(self) -> float:
        """Vertical coordinate."""
        ...


class DistanceMetric(ABC):
    """Abstract base class for point-to-point distance computations."""

    @abstractmethod
    def compute(self, p1: Observation, p2: Observation, **kwargs) -> float:
        """Compute the distance between two observations.

        Args:
            p1: First observation
            p2: Second observation
            **kwargs: Metric-specific parameters

        Returns:
            Non-negative distance
        """
        pass


class InitializationStrategy(ABC):
    """Abstract base class for choosing initial centroids."""

    @abstractmethod
    def initialize(self, observations: Sequence[Observation], n_clusters: int,
                   **kwargs) -> List[Observation]:
        """Choose initial centroids.

        Args:
            observations: Sequence of observations
            n_clusters: Number of centroids to produce

        Returns:
            New list of ``n_clusters`` centroids
        """
        pass


class AssignmentStrategy(ABC):
    """Abstract base class for observation-to-centroid assignment."""

    @abstractmethod
    def compute_assignments(self, observations: Sequence[Observation],
                            centroids: Sequence[Observation],
                            **kwargs) -> List[int]:
        """Compute the centroid index for each observation.

        Args:
            observations: Sequence of n observations
            centroids: Non-empty sequence of K centroids

        Returns:
            List of n centroid indices in ``[0, K)``
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for recomputing a centroid from its cluster."""

    @abstractmethod
    def update(self, cluster: Sequence[Observation], **kwargs) -> Observation:
        """Compute a new centroid for a non-empty cluster.

        Args:
            cluster: Observations currently assigned to one centroid

        Returns:
            The recomputed centroid
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if the algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []

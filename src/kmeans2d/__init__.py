"""
kmeans2d: Lloyd's k-means clustering for two-dimensional points.

Any object with float ``x`` and ``y`` attributes can be clustered. The
package provides a functional API and a fit/predict estimator:

Example usage:
    >>> from kmeans2d import Centroid, partition_with_centroids
    >>>
    >>> points = [Centroid(1, 1), Centroid(2, 2), Centroid(14, 14), Centroid(15, 15)]
    >>> centroids = [Centroid(1, 1), Centroid(14, 14)]
    >>> clusters = partition_with_centroids(points, centroids, max_iter=10)
    >>>
    >>> # Or with the estimator
    >>> from kmeans2d import KMeans
    >>> kmeans = KMeans(n_clusters=2, random_state=0, verbose=1)
    >>> labels = kmeans.fit_predict([[1, 1], [2, 2], [14, 14], [15, 15]])
"""

__version__ = '0.1.0'

# Import main algorithms
from .algorithms.partition import partition, partition_with_centroids
from .algorithms.kmeans import KMeans

# Components
from .initialization.random import sample_centroids
from .assignments.hard import nearest_centroid
from .distances.euclidean import euclidean_distance
from .updates.mean import recalculate_centroid
from .utils.convergence import centroids_are_equal
from .utils.validation import as_observations

# Import visualization
from .visualization import plot_partition

# Convenience imports
from .base import (
    Observation,
    Centroid,
    PartitionState
)

from .exceptions import (
    KMeansError,
    InsufficientDataError,
    InvalidKError,
    InvalidArgumentError
)

__all__ = [
    # Algorithms
    'partition',
    'partition_with_centroids',
    'KMeans',

    # Components
    'sample_centroids',
    'nearest_centroid',
    'euclidean_distance',
    'recalculate_centroid',
    'centroids_are_equal',
    'as_observations',

    # Core data structures
    'Observation',
    'Centroid',
    'PartitionState',

    # Errors
    'KMeansError',
    'InsufficientDataError',
    'InvalidKError',
    'InvalidArgumentError',

    # Visualization
    'plot_partition',

    # Version
    '__version__'
]

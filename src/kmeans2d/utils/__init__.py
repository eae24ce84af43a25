"""Utility functions for k-means partitioning."""

from .convergence import (
    CentroidsUnchanged,
    centroids_are_equal
)

from .metrics import (
    inertia,
    cluster_sizes
)

from .validation import (
    check_n_clusters,
    check_max_iter,
    check_random_state,
    check_observations,
    check_centroids,
    as_observations
)

from .tensor import observations_to_tensor

__all__ = [
    # Convergence criteria
    'CentroidsUnchanged',
    'centroids_are_equal',

    # Metrics
    'inertia',
    'cluster_sizes',

    # Validation
    'check_n_clusters',
    'check_max_iter',
    'check_random_state',
    'check_observations',
    'check_centroids',
    'as_observations',

    # Tensors
    'observations_to_tensor'
]

"""
Input validation and conversion utilities.

Provides functions for validating arguments before partitioning and for
turning plain coordinate arrays into observations.
"""

from typing import Optional, Union, List, Sequence, MutableSequence
import math
import torch
from torch import Tensor
import numpy as np

from ..base.interfaces import Observation
from ..base.data_structures import Centroid
from ..exceptions import InsufficientDataError, InvalidKError, InvalidArgumentError


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def check_n_clusters(n_clusters: int, n_samples: int) -> None:
    """Validate number of clusters.

    Args:
        n_clusters: Number of clusters
        n_samples: Number of samples

    Raises:
        TypeError: If n_clusters is not an integer
        InsufficientDataError: If there are fewer samples than clusters
        InvalidKError: If n_clusters is not positive
    """
    if not _is_integer(n_clusters):
        raise TypeError(f"n_clusters must be int, got {type(n_clusters)}")

    if n_samples < n_clusters:
        raise InsufficientDataError(f"not enough data to calculate centroids: "
                                    f"n_clusters ({n_clusters}) is larger than "
                                    f"n_samples ({n_samples})")

    if n_clusters <= 0:
        raise InvalidKError(f"n_clusters must be positive, got {n_clusters}")


def check_max_iter(max_iter: int) -> None:
    """Validate the iteration budget.

    Raises:
        TypeError: If max_iter is not an integer
        InvalidArgumentError: If max_iter is zero or negative
    """
    if not _is_integer(max_iter):
        raise TypeError(f"max_iter must be int, got {type(max_iter)}")

    if max_iter <= 0:
        raise InvalidArgumentError(f"max_iter must be positive, got {max_iter}")


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> Optional[torch.Generator]:
    """Create generator from random state.

    Args:
        random_state: Seed or generator

    Returns:
        Generator or None
    """
    if random_state is None:
        return None
    elif _is_integer(random_state):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")


def check_observations(observations: Sequence[Observation], name: str = 'observations') -> None:
    """Validate that a sequence is non-empty and holds finite 2D observations.

    Raises:
        InvalidArgumentError: If the sequence is empty or a coordinate is not finite
        TypeError: If an element does not expose ``x`` and ``y``
    """
    if observations is None or len(observations) == 0:
        raise InvalidArgumentError(f"{name} must not be empty")

    for i, p in enumerate(observations):
        if not isinstance(p, Observation):
            raise TypeError(f"{name}[{i}] must expose x and y, got {type(p)}")
        if not (math.isfinite(p.x) and math.isfinite(p.y)):
            raise InvalidArgumentError(f"{name}[{i}] has non-finite coordinates "
                                       f"({p.x}, {p.y})")


def check_centroids(centroids: MutableSequence[Observation]) -> None:
    """Validate a centroid list that the partition loop will update in place."""
    if centroids is None or len(centroids) == 0:
        raise InvalidArgumentError("centroids must not be empty")

    if not isinstance(centroids, MutableSequence):
        raise TypeError(f"centroids must be a mutable sequence, got {type(centroids)}")

    check_observations(centroids, name='centroids')


def as_observations(data: Union[Sequence[Observation], np.ndarray, Tensor, list]) -> List[Observation]:
    """Convert coordinate data into a list of observations.

    Args:
        data: Either a sequence of observations, or (n, 2) coordinates as a
            list of pairs, numpy array or tensor

    Returns:
        New list of observations; coordinate input becomes ``Centroid`` values

    Raises:
        InvalidArgumentError: If the shape is not (n, 2) or values are not finite
    """
    if isinstance(data, Tensor):
        data = data.detach().cpu().numpy()
    elif not isinstance(data, np.ndarray) and len(data) > 0 and \
            all(isinstance(p, Observation) for p in data):
        return list(data)

    arr = np.asarray(data, dtype=np.float64)
    if arr.size == 0:
        return []

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidArgumentError(f"Expected (n, 2) coordinates, got shape {arr.shape}")

    if not np.isfinite(arr).all():
        raise InvalidArgumentError("Input contains NaN or infinite values")

    return [Centroid(float(x), float(y)) for x, y in arr]

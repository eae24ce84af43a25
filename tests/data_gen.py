# tests/data_gen.py
"""
Tiny synthetic-data generators reused across the kmeans2d test suite.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple
import numpy as np

from kmeans2d import Centroid


def make_three_clumps() -> Tuple[List[Centroid], List[Centroid]]:
    """
    Twelve points in three well-separated clumps of four, around
    (1.5, 1.5), (14.5, 14.5) and (-10.5, -10.5), plus starting centroids at
    (1, 1), (14, 14) and (-10, -10).

    Returns
    -------
    observations : list of 12 Centroid, grouped by clump in order
    centroids : list of 3 Centroid
    """
    observations = [
        Centroid(1, 1), Centroid(1, 2), Centroid(2, 1), Centroid(2, 2),
        Centroid(14, 14), Centroid(15, 14), Centroid(14, 15), Centroid(15, 15),
        Centroid(-10, -10), Centroid(-11, -10), Centroid(-10, -11), Centroid(-11, -11),
    ]
    centroids = [Centroid(1, 1), Centroid(14, 14), Centroid(-10, -10)]
    return observations, centroids


def make_blobs_2d(
    n_per: int = 50,
    centers: Sequence[Tuple[float, float]] = ((0.0, 0.0), (10.0, 10.0), (-10.0, 10.0)),
    noise: float = 0.5,
    seed: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Isotropic Gaussian blobs in the plane.

    Returns
    -------
    X : (len(centers) * n_per, 2) ndarray, float64
        Rows grouped by blob in the order of ``centers``.
    y : (len(centers) * n_per,) ndarray, int64
        Ground-truth blob index of each row.
    """
    rng = np.random.default_rng(seed)
    parts = [np.asarray(c, dtype=np.float64) + noise * rng.normal(size=(n_per, 2))
             for c in centers]
    X = np.vstack(parts)
    y = np.repeat(np.arange(len(centers)), n_per)
    return X, y

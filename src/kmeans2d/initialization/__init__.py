"""Initialization strategies for k-means partitioning."""

from .random import RandomInit, sample_centroids

__all__ = [
    'RandomInit',
    'sample_centroids'
]

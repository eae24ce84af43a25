"""Clustering algorithm implementations."""

from .partition import partition, partition_with_centroids, lloyd
from .kmeans import KMeans

__all__ = [
    'partition',
    'partition_with_centroids',
    'lloyd',
    'KMeans'
]

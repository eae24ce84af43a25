"""Assignment strategies for k-means partitioning."""

from .hard import HardAssignment, nearest_centroid

__all__ = [
    'HardAssignment',
    'nearest_centroid'
]

"""Centroid update strategies for k-means partitioning."""

from .mean import MeanUpdater, recalculate_centroid

__all__ = [
    'MeanUpdater',
    'recalculate_centroid'
]

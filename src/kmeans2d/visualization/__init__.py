"""Visualization utilities for clustering results."""

from .plot_clusters import plot_partition

__all__ = [
    'plot_partition'
]

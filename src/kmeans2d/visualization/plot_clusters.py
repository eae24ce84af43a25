"""
Cluster visualization utilities.

Draws a 2D partition as one scatter series per cluster, with optional
centroid markers.
"""

from typing import Optional, List, Sequence
import matplotlib.pyplot as plt
import numpy as np

from ..base.interfaces import Observation


def _coordinates(points: Sequence[Observation]) -> np.ndarray:
    if len(points) == 0:
        return np.zeros((0, 2))
    return np.array([[p.x, p.y] for p in points], dtype=np.float64)


def plot_partition(clusters: Sequence[Sequence[Observation]],
                   centroids: Optional[Sequence[Observation]] = None,
                   ax: Optional[plt.Axes] = None,
                   colors: Optional[List[str]] = None,
                   alpha: float = 0.7,
                   center_marker: str = 'X',
                   center_size: int = 200,
                   point_size: int = 50,
                   show_legend: bool = True,
                   title: Optional[str] = None) -> plt.Axes:
    """Plot a 2D partition.

    Args:
        clusters: K clusters of observations
        centroids: Optional K centroids
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        center_marker: Marker for centroids
        center_size: Size of centroid markers
        point_size: Size of data points
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    n_clusters = len(clusters)

    # Default colors
    if colors is None:
        cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
        colors = [cmap(i % cmap.N) for i in range(n_clusters)]

    # Empty clusters are skipped but keep their color slot
    for k, cluster in enumerate(clusters):
        if len(cluster) == 0:
            continue
        xy = _coordinates(cluster)
        ax.scatter(xy[:, 0], xy[:, 1],
                   c=[colors[k % len(colors)]],
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {k}')

    if centroids is not None and len(centroids) > 0:
        centers = _coordinates(centroids)
        ax.scatter(centers[:, 0], centers[:, 1],
                   c='black',
                   marker=center_marker,
                   s=center_size,
                   edgecolors='white',
                   linewidth=2,
                   label='Centroids',
                   zorder=10)

    ax.set_xlabel('x')
    ax.set_ylabel('y')

    if title:
        ax.set_title(title)

    if show_legend and ax.collections:
        ax.legend()

    return ax

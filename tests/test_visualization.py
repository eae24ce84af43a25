# tests/test_visualization.py
"""
Plotting smoke tests (Agg backend, set in conftest).
"""

from __future__ import annotations

import matplotlib.pyplot as plt

from kmeans2d import Centroid, partition_with_centroids, plot_partition

from data_gen import make_three_clumps


def test_plot_partition_draws_each_cluster_and_centroids():
    observations, centroids = make_three_clumps()
    clusters = partition_with_centroids(observations, centroids, 10)

    ax = plot_partition(clusters, centroids, title="clumps")

    # three clusters + centroid series
    assert len(ax.collections) == 4
    assert ax.get_title() == "clumps"
    labels = [t.get_text() for t in ax.get_legend().get_texts()]
    assert labels == ["Cluster 0", "Cluster 1", "Cluster 2", "Centroids"]
    plt.close(ax.figure)


def test_plot_partition_skips_empty_clusters():
    fig, ax = plt.subplots()
    out = plot_partition([[Centroid(0, 0)], []], show_legend=False, ax=ax)
    assert out is ax
    assert len(ax.collections) == 1
    assert ax.get_legend() is None
    plt.close(fig)

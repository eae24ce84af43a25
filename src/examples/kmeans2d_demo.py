"""
Demo of k-means partitioning in the plane.

This example shows how to:
1. Generate three Gaussian blobs
2. Partition them with the functional API and with the KMeans estimator
3. Plot the resulting clusters
"""

from dataclasses import dataclass

import torch
import matplotlib.pyplot as plt

from kmeans2d import KMeans, Centroid, partition_with_centroids, plot_partition


@dataclass(frozen=True)
class City:
    """Any type with x and y can be clustered."""
    name: str
    x: float
    y: float


def generate_blobs(n_points_per_cluster=100, noise_level=1.0):
    """Generate three well-separated blobs as (n, 2) tensor."""
    torch.manual_seed(42)

    centers = torch.tensor([[0.0, 0.0], [10.0, 10.0], [-8.0, 6.0]])
    blobs = [
        center + torch.randn(n_points_per_cluster, 2) * noise_level
        for center in centers
    ]
    return torch.cat(blobs, dim=0)


def main():
    X = generate_blobs()

    kmeans = KMeans(n_clusters=3, random_state=0, verbose=1)
    kmeans.fit(X)

    print(f"Centroids: {kmeans.cluster_centers_}")
    print(f"Iterations: {kmeans.n_iter_}, converged: {kmeans.converged_}")
    print(f"Inertia: {kmeans.inertia_:.3f}")

    # Custom observation type with hand-picked starting centroids
    cities = [
        City('a', 0.5, 0.2), City('b', 0.9, 1.1), City('c', 9.5, 10.2),
        City('d', 10.3, 9.8), City('e', -8.1, 6.4), City('f', -7.7, 5.9),
    ]
    centroids = [Centroid(0, 0), Centroid(10, 10), Centroid(-8, 6)]
    clusters = partition_with_centroids(cities, centroids, max_iter=10)
    for i, cluster in enumerate(clusters):
        print(f"Cluster {i}: {[c.name for c in cluster]}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 6))
    plot_partition(kmeans.clusters_, kmeans.cluster_centers_, ax=axes[0], title='Blobs')
    plot_partition(clusters, centroids, ax=axes[1], title='Cities')
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()

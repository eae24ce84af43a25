"""
Lloyd's k-means partition loop.

Alternates nearest-centroid assignment with centroid recomputation until a
round leaves every centroid unchanged or the iteration budget runs out.
"""

from typing import List, MutableSequence, Optional, Sequence, Tuple, Union
import time
import torch

from ..base.interfaces import (
    Observation, AssignmentStrategy, ParameterUpdater, ConvergenceCriterion
)
from ..base.data_structures import Centroid, PartitionState
from ..assignments.hard import HardAssignment
from ..updates.mean import MeanUpdater
from ..initialization.random import sample_centroids
from ..utils.convergence import CentroidsUnchanged
from ..utils.metrics import inertia, cluster_sizes
from ..utils.validation import check_centroids, check_observations, check_max_iter


Clusters = List[List[Observation]]


def _record(iteration: int, centroids: Sequence[Observation], clusters: Clusters,
            converged: bool, **metadata) -> PartitionState:
    return PartitionState(
        iteration=iteration,
        centroids=tuple(Centroid.from_observation(c) for c in centroids),
        cluster_sizes=tuple(cluster_sizes(clusters)),
        inertia=inertia(clusters, centroids),
        converged=converged,
        metadata=metadata
    )


def lloyd(observations: Sequence[Observation],
          centroids: MutableSequence[Observation],
          max_iter: int,
          assignment_strategy: Optional[AssignmentStrategy] = None,
          update_strategy: Optional[ParameterUpdater] = None,
          convergence_criterion: Optional[ConvergenceCriterion] = None,
          verbose: int = 0) -> Tuple[Clusters, List[PartitionState], bool]:
    """Run the partition loop and report how it went.

    Centroid slots of non-empty clusters are overwritten in place each
    round. Once a round leaves every centroid unchanged, one more
    assignment pass runs against the stable centroids and the loop stops.

    Args:
        observations: Non-empty sequence of observations (read only)
        centroids: Non-empty mutable sequence of initial centroids
        max_iter: Positive iteration budget
        assignment_strategy: Defaults to HardAssignment
        update_strategy: Defaults to MeanUpdater
        convergence_criterion: Defaults to CentroidsUnchanged
        verbose: Verbosity level (0=silent, 1=summary, 2=per iteration)

    Returns:
        clusters: Final partition, clusters[i] belonging to centroids[i]
        history: One PartitionState per iteration run
        converged: Whether a round without centroid movement was seen
    """
    check_centroids(centroids)
    check_observations(observations)
    check_max_iter(max_iter)

    assigner = assignment_strategy if assignment_strategy is not None else HardAssignment()
    updater = update_strategy if update_strategy is not None else MeanUpdater()
    criterion = convergence_criterion if convergence_criterion is not None else CentroidsUnchanged()
    criterion.reset()

    # Observations are fixed for the whole call; convert them once
    points = assigner.prepare(observations) if isinstance(assigner, HardAssignment) else None

    is_last_iter = False
    final_clusters: Clusters = []
    history: List[PartitionState] = []
    start_time = time.time()

    for iteration in range(max_iter):
        iter_start_time = time.time()

        # Assignment step
        assignments = assigner.compute_assignments(observations, centroids, points=points)
        clusters: Clusters = [[] for _ in range(len(centroids))]
        for p, idx in zip(observations, assignments):
            clusters[idx].append(p)

        final_clusters = clusters

        if is_last_iter:
            history.append(_record(iteration, centroids, clusters, True, final_pass=True))
            if verbose >= 2:
                print(f"Iteration {iteration:3d}: final assignment pass")
            break

        previous_centroids = list(centroids)

        # Update step; empty clusters keep their centroid
        for i, cluster in enumerate(clusters):
            if len(cluster) > 0:
                centroids[i] = updater.update(cluster)

        if criterion.check({
            'iteration': iteration,
            'previous_centroids': previous_centroids,
            'centroids': centroids
        }):
            is_last_iter = True

        state = _record(iteration, centroids, clusters, is_last_iter)
        history.append(state)

        iter_time = time.time() - iter_start_time
        if verbose >= 2:
            print(f"Iteration {iteration:3d}: inertia = {state.inertia:.6f} "
                  f"sizes = {list(state.cluster_sizes)} ({iter_time:.3f}s)")

    if verbose:
        total_time = time.time() - start_time
        if is_last_iter:
            print(f"Converged after {len(history)} iterations ({total_time:.3f}s)")
        else:
            print(f"Stopped after {len(history)} iterations without convergence "
                  f"({total_time:.3f}s)")

    return final_clusters, history, is_last_iter


def partition_with_centroids(observations: Sequence[Observation],
                             centroids: MutableSequence[Observation],
                             max_iter: int) -> Clusters:
    """Partition observations starting from the given centroids.

    Use this when initial centroids come from custom logic. The centroid
    list is updated in place as the algorithm converges; pass a copy to
    keep the originals.

    Args:
        observations: Non-empty sequence of observations
        centroids: Non-empty mutable sequence of initial centroids
        max_iter: Positive iteration budget

    Returns:
        ``len(centroids)`` clusters, cluster i holding the observations
        nearest to centroids[i] in input order

    Raises:
        InvalidArgumentError: If observations or centroids are empty, or
            max_iter is not positive
    """
    clusters, _, _ = lloyd(observations, centroids, max_iter)
    return clusters


def partition(observations: Sequence[Observation], max_iter: int, k: int,
              random_state: Optional[Union[int, torch.Generator]] = None) -> Clusters:
    """Partition observations into k clusters from randomly sampled centroids.

    Args:
        observations: Non-empty sequence of observations
        max_iter: Positive iteration budget
        k: Number of clusters
        random_state: Seed or torch.Generator for sampling initial centroids

    Returns:
        k clusters

    Raises:
        InsufficientDataError: If there are fewer observations than k
        InvalidKError: If k <= 0
        InvalidArgumentError: If max_iter is not positive
    """
    centroids = sample_centroids(observations, k, random_state=random_state)
    return partition_with_centroids(observations, centroids, max_iter)

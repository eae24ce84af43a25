"""
Convergence criteria for k-means partitioning.

The partition loop stops moving centroids once a full update round leaves
every centroid exactly where it was.
"""

from typing import Dict, Any, Sequence

from ..base.interfaces import ConvergenceCriterion, Observation


def centroids_are_equal(c1: Sequence[Observation], c2: Sequence[Observation]) -> bool:
    """Exact coordinate-wise equality of two centroid sequences."""
    if len(c1) != len(c2):
        return False

    for a, b in zip(c1, c2):
        if a.x != b.x or a.y != b.y:
            return False

    return True


class CentroidsUnchanged(ConvergenceCriterion):
    """Convergence when no centroid moved during the last update round.

    Compares with exact floating-point equality; there is no tolerance.
    """

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if the update step left all centroids in place.

        ``current_state`` must hold ``previous_centroids`` (snapshot taken
        before the update) and ``centroids`` (after the update).
        """
        previous = current_state['previous_centroids']
        current = current_state['centroids']

        converged = centroids_are_equal(previous, current)
        moved = sum(1 for a, b in zip(previous, current) if a.x != b.x or a.y != b.y)

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'n_moved': moved,
            'converged': converged
        })

        return converged

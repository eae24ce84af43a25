"""
Mean update strategy for centroid-based clustering.
"""

from typing import Sequence

from ..base.interfaces import ParameterUpdater, Observation
from ..base.data_structures import Centroid
from ..exceptions import InvalidArgumentError


def recalculate_centroid(cluster: Sequence[Observation]) -> Centroid:
    """Return the coordinate-wise mean of a non-empty cluster."""
    if len(cluster) == 0:
        raise InvalidArgumentError("cannot recalculate the centroid of an empty cluster")

    sum_x = 0.0
    sum_y = 0.0
    for p in cluster:
        sum_x += p.x
        sum_y += p.y

    n = float(len(cluster))
    return Centroid(x=sum_x / n, y=sum_y / n)


class MeanUpdater(ParameterUpdater):
    """Updates a centroid by computing the mean of its assigned observations."""

    def update(self, cluster: Sequence[Observation], **kwargs) -> Centroid:
        """Compute the cluster mean.

        Args:
            cluster: Observations assigned to this centroid (non-empty)
            **kwargs: Ignored

        Returns:
            New centroid at the cluster mean
        """
        return recalculate_centroid(cluster)

# tests/test_convergence.py
"""
Centroid stability checks

Covers:
- centroids_are_equal: length mismatch, differing and identical sets
- CentroidsUnchanged: exact comparison with no tolerance, history, reset
"""

from __future__ import annotations

import pytest

from kmeans2d import Centroid, centroids_are_equal
from kmeans2d.utils import CentroidsUnchanged


@pytest.mark.parametrize("c1, c2, expected", [
    ([], [Centroid(0, 0)], False),
    ([Centroid(1, 1)], [Centroid(2, 2)], False),
    ([Centroid(1, 1)], [Centroid(1, 1)], True),
    ([Centroid(1, 1), Centroid(2, 2)], [Centroid(1, 1), Centroid(2, 2.5)], False),
    ([], [], True),
])
def test_centroids_are_equal(c1, c2, expected):
    assert centroids_are_equal(c1, c2) is expected


def test_criterion_has_no_tolerance():
    crit = CentroidsUnchanged()
    prev = [Centroid(1.0, 1.0)]
    nudged = [Centroid(1.0 + 1e-15, 1.0)]
    assert crit.check({"iteration": 0, "previous_centroids": prev, "centroids": nudged}) is False
    assert crit.check({"iteration": 1, "previous_centroids": nudged, "centroids": list(nudged)}) is True


def test_criterion_history_and_reset():
    crit = CentroidsUnchanged()
    crit.check({
        "iteration": 0,
        "previous_centroids": [Centroid(0, 0), Centroid(5, 5)],
        "centroids": [Centroid(0, 1), Centroid(5, 5)],
    })
    assert crit.history == [{"iteration": 0, "n_moved": 1, "converged": False}]

    crit.reset()
    assert crit.history == []

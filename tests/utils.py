# tests/utils.py
"""
Small, reusable helpers used across the kmeans2d test suite.

Functions:
- same_members(clusters, observations): multiset equality of all cluster
  members against the input, by object identity.
- labels_equal_up_to_perm(y1, y2, K): label vectors equal under relabeling.
"""

from __future__ import annotations

import itertools
from collections import Counter
from typing import Any, Sequence

import numpy as np


def same_members(clusters: Sequence[Sequence[Any]], observations: Sequence[Any]) -> bool:
    """True if every observation appears in exactly one cluster, as the same object."""
    members = Counter(id(p) for cluster in clusters for p in cluster)
    expected = Counter(id(p) for p in observations)
    return members == expected


def labels_equal_up_to_perm(y1: Sequence[int], y2: Sequence[int], K: int) -> bool:
    """Return True if y2 can be permuted to equal y1 exactly."""
    y1 = np.asarray(y1)
    y2 = np.asarray(y2)
    for perm in itertools.permutations(range(K)):
        mapping = np.array(perm)
        if np.array_equal(y1, mapping[y2]):
            return True
    return False

"""Base classes and interfaces for k-means partitioning."""

from .interfaces import (
    Observation,
    DistanceMetric,
    InitializationStrategy,
    AssignmentStrategy,
    ParameterUpdater,
    ConvergenceCriterion
)

from .data_structures import (
    Centroid,
    PartitionState
)

__all__ = [
    # Interfaces
    'Observation',
    'DistanceMetric',
    'InitializationStrategy',
    'AssignmentStrategy',
    'ParameterUpdater',
    'ConvergenceCriterion',

    # Data structures
    'Centroid',
    'PartitionState'
]

"""
Error taxonomy for k-means partitioning.

All errors derive from ValueError so callers can catch argument problems
generically or one condition at a time.
"""


class KMeansError(ValueError):
    """Base class for errors raised by the partitioning routines."""


class InsufficientDataError(KMeansError):
    """Fewer observations than requested clusters."""


class InvalidKError(KMeansError):
    """Requested cluster count is zero or negative."""


class InvalidArgumentError(KMeansError):
    """Empty observations or centroids, or a non-positive iteration budget."""

"""cachematrix warning categories.

These exist so users can filter/suppress cachematrix diagnostics without
catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""


class CacheMatrixWarning(UserWarning):
    """Base warning category for all cachematrix user-facing warnings."""


class CachedInverseNotice(CacheMatrixWarning):
    """Emitted when an inverse is served from a handle's cache."""

from __future__ import annotations

import numpy as np


class CacheMatrixError(Exception):
    """Base class for cachematrix errors."""


class NotInvertibleError(CacheMatrixError, np.linalg.LinAlgError):
    """The matrix is singular, not square, or otherwise cannot be inverted."""


class UninitializedMatrixError(NotInvertibleError):
    """The handle still holds its empty default matrix."""

from __future__ import annotations

from typing import Any

import numpy as np

from .errors import NotInvertibleError, UninitializedMatrixError


def _as_inexact(array: np.ndarray) -> np.ndarray:
    """Convert object arrays (Fraction, Decimal, ...) to a dtype LAPACK accepts."""
    if array.dtype != object:
        return array
    for dtype in (np.float64, np.complex128):
        try:
            return array.astype(dtype)
        except (TypeError, ValueError):
            continue
    raise NotInvertibleError("Matrix entries cannot be converted to floating point.")


def invert(matrix: Any) -> np.ndarray:
    """Return the inverse of a square matrix using ``numpy.linalg.inv``.

    Raises ``UninitializedMatrixError`` for an empty matrix and
    ``NotInvertibleError`` for anything NumPy cannot invert. Object arrays of
    exact numbers are inverted in floating point.
    """

    array = np.asarray(matrix)
    if array.ndim != 2:
        raise NotInvertibleError(f"Matrix must be 2D to be inverted; got {array.ndim}D input.")
    if array.size == 0:
        raise UninitializedMatrixError("Matrix has no entries; set a value before inverting.")

    rows, cols = array.shape
    if rows != cols:
        raise NotInvertibleError(f"Matrix must be square to be inverted; got shape ({rows}, {cols}).")

    array = _as_inexact(array)
    if not np.all(np.isfinite(array)):
        raise NotInvertibleError("Matrix contains non-finite entries (NaN or inf).")

    try:
        return np.linalg.inv(array)
    except np.linalg.LinAlgError as exc:
        raise NotInvertibleError(f"Matrix is not invertible: {exc}") from exc

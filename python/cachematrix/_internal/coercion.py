from __future__ import annotations

import numbers
from typing import Any

import numpy as np


def empty_matrix() -> np.ndarray:
    """Placeholder value held by a handle before a real matrix is set."""
    return coerce_matrix(np.empty((0, 0), dtype=np.float64))


def _is_numeric_object_array(array: np.ndarray) -> bool:
    # Fraction, Decimal and other numbers.Number entries land in object arrays.
    return all(isinstance(x, numbers.Number) for x in array.flat)


def coerce_matrix(candidate: Any) -> np.ndarray:
    """Return a private, read-only 2D copy of ``candidate``.

    Accepts NumPy arrays, anything exposing ``__array__`` and nested
    sequences (rows may themselves be arrays). Boolean matrices become
    float64; object arrays are kept as long as every entry is a number.
    Squareness and invertibility are not checked here; the inversion routine
    reports those.
    """

    if isinstance(candidate, (str, bytes, bytearray)):
        raise TypeError("Matrix data must be a 2D nested sequence or a NumPy array.")

    try:
        array = np.array(candidate, copy=True)
    except ValueError as exc:
        raise ValueError("Matrix data must be rectangular (all rows the same length).") from exc

    if array.ndim != 2:
        raise TypeError(f"Matrix data must be 2D; got {array.ndim}D input.")
    if array.dtype == np.bool_:
        array = array.astype(np.float64)
    elif array.dtype == object:
        if not _is_numeric_object_array(array):
            raise TypeError("Matrix entries must be numeric.")
    elif not np.issubdtype(array.dtype, np.number):
        raise TypeError(f"Matrix entries must be numeric; got dtype {array.dtype}.")

    array.setflags(write=False)
    return array

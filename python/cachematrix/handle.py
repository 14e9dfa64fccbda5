"""Matrix handle that owns a value and an optional cached inverse."""
from __future__ import annotations

from typing import Any

import numpy as np

from ._internal import coercion as _coercion
from ._internal import formatting as _formatting


class CacheMatrix:
    """Wraps one matrix and a slot for its inverse.

    The handle is the only way to replace the matrix, and every replacement
    empties the inverse slot. The stored arrays are private read-only copies,
    so they cannot be changed behind the handle's back.
    """

    def __init__(self, initial: Any = None) -> None:
        if initial is None:
            self._value = _coercion.empty_matrix()
        else:
            self._value = _coercion.coerce_matrix(initial)
        self._cached_inverse: np.ndarray | None = None
        self._epoch = 0

    def set_value(self, new_value: Any) -> None:
        """Replace the matrix and drop any cached inverse.

        The cache is cleared even when ``new_value`` equals the current value.
        """
        value = _coercion.coerce_matrix(new_value)
        self._value = value
        self._cached_inverse = None
        self._epoch += 1

    def get_value(self) -> np.ndarray:
        return self._value

    def set_cached_inverse(self, inverse: Any) -> None:
        # No shape check; cache_solve is the only intended writer.
        self._cached_inverse = _coercion.coerce_matrix(inverse)

    def get_cached_inverse(self) -> np.ndarray | None:
        return self._cached_inverse

    def has_cached_inverse(self) -> bool:
        return self._cached_inverse is not None

    @property
    def shape(self) -> tuple[int, int]:
        return self._value.shape

    @property
    def epoch(self) -> int:
        """Number of ``set_value`` calls made on this handle."""
        return self._epoch

    def __str__(self) -> str:
        return _formatting.handle_str(self)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} shape={self.shape} cached_inverse={self.has_cached_inverse()}>"


def make_cache_matrix(x: Any = None) -> CacheMatrix:
    """Create a handle for ``x``; with no argument the handle starts empty."""
    return CacheMatrix(x)

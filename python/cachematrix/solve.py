from __future__ import annotations

import sys
import warnings
from typing import Any, Callable

import numpy as np

from ._internal import linalg as _linalg
from ._internal.warnings import CachedInverseNotice
from .handle import CacheMatrix


def cache_solve(handle: CacheMatrix, *, invert: Callable[[Any], Any] | None = None) -> np.ndarray:
    """Return the inverse of ``handle``'s matrix, computing it only on a miss.

    A cached inverse is returned as-is and announced with a
    ``CachedInverseNotice`` warning. On a miss ``invert`` (default:
    ``numpy.linalg.inv`` behind ``cachematrix.invert``) is called on the
    current value and the result is stored on the handle. Errors raised by
    ``invert`` propagate and leave the cache empty.
    """

    cached = handle.get_cached_inverse()
    if cached is not None:
        # A fresh registry per hit keeps the "default" filter action from
        # hiding repeated hits at the same call site.
        caller = sys._getframe(1)
        warnings.warn_explicit(
            "getting cached inverse",
            CachedInverseNotice,
            caller.f_code.co_filename,
            caller.f_lineno,
            module=caller.f_globals.get("__name__"),
            registry={},
            module_globals=caller.f_globals,
        )
        return cached

    if invert is None:
        invert = _linalg.invert

    data = handle.get_value()
    inverse = invert(data)
    handle.set_cached_inverse(inverse)
    return handle.get_cached_inverse()

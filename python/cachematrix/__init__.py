"""Matrices that remember their inverse until the matrix is replaced."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _dist_version

try:
    __version__ = _dist_version("cachematrix")
except PackageNotFoundError:
    __version__ = "unknown"

from ._internal import formatting as _formatting
from ._internal.errors import (
    CacheMatrixError,
    NotInvertibleError,
    UninitializedMatrixError,
)
from ._internal.linalg import invert
from ._internal.warnings import CacheMatrixWarning, CachedInverseNotice
from .handle import CacheMatrix, make_cache_matrix
from .solve import cache_solve


def set_print_options(*, edge_items: int = 4) -> None:
    """Set how many leading/trailing rows and columns ``str(handle)`` shows."""
    _formatting.configure(edge_items=edge_items)


__all__ = [
    "CacheMatrix",
    "CacheMatrixError",
    "CacheMatrixWarning",
    "CachedInverseNotice",
    "NotInvertibleError",
    "UninitializedMatrixError",
    "cache_solve",
    "invert",
    "make_cache_matrix",
    "set_print_options",
]

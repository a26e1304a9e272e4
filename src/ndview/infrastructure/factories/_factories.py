"""
Construction helpers for NDArray.

Every helper allocates a flat buffer and hands it to ``NDArray(buffer,
shape)``; none of them touches layouts directly. Numeric helpers produce
numpy-backed arrays. The ``*_like`` helpers copy the shape (and backend and
dtype) of an existing array, never its values or layout.
"""

from __future__ import annotations

from math import prod
from typing import Any, Optional, Sequence, Union

import numpy as np

from .. import _constants
from ..array._array import NDArray
from ...domain.backend._backend import Backend

ShapeLike = Union[int, Sequence[int]]

# Fill values stored natively by numpy; anything else goes to a list buffer
_NUMPY_SCALARS = (bool, int, float, complex, np.generic)


def _size_of(shape: ShapeLike) -> int:
    if isinstance(shape, (int, np.integer)):
        return int(shape)
    return prod(shape)


def zeros(shape: ShapeLike, dtype: Any = None) -> NDArray:
    """
    Return a numpy-backed array of zeros.

    Parameters
    ----------
    shape : int | Sequence[int]
        Array shape.
    dtype : numpy dtype, optional
        Defaults to ``DEFAULT_DTYPE`` (float32).
    """
    dtype = _constants.DEFAULT_DTYPE if dtype is None else dtype
    return NDArray(np.zeros(_size_of(shape), dtype=dtype), shape)


def ones(shape: ShapeLike, dtype: Any = None) -> NDArray:
    """Return a numpy-backed array of ones (``DEFAULT_DTYPE`` by default)."""
    dtype = _constants.DEFAULT_DTYPE if dtype is None else dtype
    return NDArray(np.ones(_size_of(shape), dtype=dtype), shape)


def full(
    value: Any,
    shape: ShapeLike,
    dtype: Any = None,
    backend: Union[str, Backend, None] = None,
) -> NDArray:
    """
    Return an array with every element equal to `value`.

    Parameters
    ----------
    value : Any
        Fill value.
    shape : int | Sequence[int]
        Array shape.
    dtype : numpy dtype, optional
        Element dtype (numpy backend only). Inferred from `value` if omitted.
    backend : str | Backend, optional
        When omitted, numbers (Python or numpy scalars) produce a
        numpy-backed array and any other value a list-backed one.
    """
    if backend is None:
        numeric = isinstance(value, _NUMPY_SCALARS)
        backend = "numpy" if numeric or dtype is not None else "python"
    n = _size_of(shape)
    if Backend(backend).is_numpy():
        return NDArray(np.full(n, value, dtype=dtype), shape)
    return NDArray([value] * n, shape, backend=backend)


def arange(
    start: Any, stop: Optional[Any] = None, step: Any = 1, dtype: Any = None
) -> NDArray:
    """
    Return a 1-D numpy-backed array of evenly spaced values.

    Follows ``numpy.arange``: with a single argument the values run from 0
    up to (excluding) `start`.

    Examples
    --------
    >>> arange(1, 5).to_list()
    [1, 2, 3, 4]
    """
    if stop is None:
        start, stop = 0, start
    values = np.arange(start, stop, step, dtype=dtype)
    return NDArray(values, (values.size,))


def full_like(value: Any, other: NDArray) -> NDArray:
    """
    Return an array shaped like `other` filled with `value`.

    The result uses `other`'s backend and, for numpy, its dtype.
    """
    return NDArray(
        [value] * other.size, other.shape, backend=other.backend, dtype=other.dtype
    )


def zeros_like(other: NDArray) -> NDArray:
    """Return an array of zeros shaped like `other`."""
    return full_like(0, other)


def ones_like(other: NDArray) -> NDArray:
    """Return an array of ones shaped like `other`."""
    return full_like(1, other)

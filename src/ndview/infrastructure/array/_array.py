"""
Concrete NDArray implementation.

This module provides `NDArray`, an N-dimensional array that satisfies the
domain-level `IArray` protocol. An array is a flat buffer plus a `Layout`
(shape, fixed strides, one affine map per axis and a base offset). Structural
transforms (transpose, flip, swap, slice, axis selection) produce new arrays
sharing the same buffer through copy-on-write handles; element values are
only copied when an array is mutated while shared, or when an operation
materializes a new array.

Design notes
------------
- Behavior is assembled from mixins. Mixins that read or write the flat
  buffer directly register numpy and python control paths, selected at
  runtime from ``self.backend``.
- The numpy backend stores a 1-D ``numpy.ndarray``. The python backend
  stores a ``list`` and accepts any element type supporting the operators
  used on it (``Fraction``, ``Decimal``, ``str`` for comparisons, ...).
- There is no broadcasting and no strided slicing.
"""

from __future__ import annotations

import warnings
from math import prod
from typing import Any, Iterable, Optional, Sequence, Union

import numpy as np

from ...domain.backend._backend import Backend
from ...domain._errors import ShapeMismatchError
from .. import _constants
from ._buffer import CowBuffer
from ._index_map import AffineIndexMap
from ._layout import Layout
from ._shape_and_indexing import ArrayShapeAndIndexingMixin
from .mixins.memory import ArrayMixinMemory
from .mixins.reduction import ArrayMixinReduction
from .mixins.arithmetic import ArrayMixinArithmetic
from .mixins.unary import ArrayMixinUnary

ShapeLike = Union[int, Sequence[int]]
BackendSpec = Union[str, Backend, None]


def _as_shape(shape: ShapeLike) -> tuple[int, ...]:
    dims = (shape,) if isinstance(shape, (int, np.integer)) else tuple(shape)
    dims = tuple(int(n) for n in dims)
    for n in dims:
        if n < 0:
            raise ValueError(f"negative extent in shape {dims}")
    return dims


def _resolve_backend(buffer: Any, backend: BackendSpec, dtype: Any) -> Backend:
    if backend is not None:
        return Backend(backend)
    if isinstance(buffer, np.ndarray) or dtype is not None:
        return Backend(_constants.DEFAULT_BACKEND_FOR_NDARRAYS)
    return Backend(_constants.DEFAULT_BACKEND_FOR_SEQUENCES)


def _flat_list(buffer: Any) -> list:
    if isinstance(buffer, np.ndarray):
        return buffer.ravel().tolist()
    return list(buffer)


class NDArray(
    ArrayMixinMemory,
    ArrayMixinReduction,
    ArrayMixinArithmetic,
    ArrayMixinUnary,
    ArrayShapeAndIndexingMixin,
):
    """
    N-dimensional array over a flat, copy-on-write buffer.

    Parameters
    ----------
    buffer : Iterable | numpy.ndarray
        Elements in row-major order. An ndarray of any shape is raveled.
        The buffer is always copied; the array never aliases caller data.
    shape : int | Sequence[int]
        Logical shape. ``prod(shape)`` must equal the element count.
    backend : str | Backend | None, optional
        ``"numpy"`` or ``"python"``. When None, ndarray buffers (or any
        buffer given together with `dtype`) use numpy and other iterables use
        the python backend.
    dtype : numpy dtype, optional
        Element dtype for the numpy backend.

    Raises
    ------
    ValueError
        If `shape` holds a negative extent, or `dtype` is given for the
        python backend.
    ShapeMismatchError
        If the element count does not match ``prod(shape)``.

    Warns
    -----
    RuntimeWarning
        If the numpy backend is requested for elements numpy can only store
        as ``dtype=object``; the array falls back to the python backend.

    Examples
    --------
    >>> a = NDArray(range(6), (2, 3))
    >>> a.transpose().to_list()
    [0, 3, 1, 4, 2, 5]
    """

    def __init__(
        self,
        buffer: Union[Iterable[Any], np.ndarray],
        shape: ShapeLike,
        backend: BackendSpec = None,
        *,
        dtype: Any = None,
    ) -> None:
        shape_ = _as_shape(shape)
        backend_ = _resolve_backend(buffer, backend, dtype)

        if backend_.is_numpy():
            if not isinstance(buffer, np.ndarray):
                buffer = list(buffer)
            data = np.array(buffer, dtype=dtype).reshape(-1)
            if data.dtype == np.dtype(object):
                warnings.warn(
                    "numpy backend requested for elements that numpy stores as "
                    "dtype=object; falling back to the python backend.",
                    RuntimeWarning,
                    stacklevel=2,
                )
                backend_ = Backend("python")
                data = _flat_list(buffer)
        else:
            if dtype is not None:
                raise ValueError("dtype is only supported by the numpy backend")
            data = _flat_list(buffer)

        if len(data) != prod(shape_):
            raise ShapeMismatchError(
                prod(shape_), len(data), context=f"buffer for shape {shape_}"
            )

        self._buffer = CowBuffer(data)
        self._layout = Layout.row_major(shape_)
        self._backend = backend_

    @classmethod
    def _from_parts(
        cls, buffer: CowBuffer, layout: Layout, backend: Backend
    ) -> "NDArray":
        """
        Construct an array from an existing buffer handle and layout.

        This bypasses `__init__` and performs no validation; callers must
        guarantee that every offset of `layout` lies inside `buffer`.
        """
        obj = cls.__new__(cls)
        obj._buffer = buffer
        obj._layout = layout
        obj._backend = backend
        return obj

    def __repr__(self) -> str:
        return (
            f"NDArray(shape={self.shape}, backend={self._backend}, "
            f"values={self.to_list()!r})"
        )

    def __eq__(self, other: object) -> bool:
        """
        Structural equality: same shape and equal elements in logical order.

        Layout and backend are ignored, so a view equals its dense copy.
        """
        if not isinstance(other, NDArray):
            return NotImplemented
        return self.shape == other.shape and all(
            a == b for a, b in zip(self.iter(), other.iter())
        )

    __hash__ = None

    # ----------------------------
    # Descriptors
    # ----------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        return self._layout.shape

    @property
    def strides(self) -> tuple[int, ...]:
        return self._layout.strides

    @property
    def maps(self) -> tuple[AffineIndexMap, ...]:
        """Per-axis affine index maps."""
        return self._layout.maps

    @property
    def ndim(self) -> int:
        return self._layout.ndim

    @property
    def size(self) -> int:
        return self._layout.size

    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def dtype(self) -> Optional[np.dtype]:
        """
        Element dtype of the numpy buffer, or None for the python backend.
        """
        if self._backend.is_numpy():
            return self._buffer.data.dtype
        return None

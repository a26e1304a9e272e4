"""
Array access, iteration and zero-copy view mixin.

This module defines `ArrayShapeAndIndexingMixin`, which implements every
`NDArray` method that either resolves logical indices (``get``, ``[]``,
``set``) or derives a new view over the same buffer (``transpose``,
``flip``, ``swap_axes``, ``slice``, ``index_axis``, ``axis_views``).

Design notes
------------
- This mixin is intended to be inherited by the concrete `NDArray` class.
- To avoid circular imports it never imports `NDArray`; views are built with
  ``type(self)._from_parts(...)``.
- Views receive a new `CowBuffer` handle over the same storage. The layout of
  every view is checked against the buffer length before the view exists, so
  a view can never resolve an index to an out-of-buffer offset.
- Methods assume the host class provides ``_layout``, ``_buffer`` and
  ``_backend``.
"""

from __future__ import annotations

import operator
from typing import Any, Iterator, Sequence, Tuple, Union

import numpy as np

from ...domain._array import IArray
from ...domain._errors import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    RangeOutOfBoundsError,
)
from ...domain._ranges import RangeSpec, bounded_range_of
from ._iteration import ArrayIterator, AxisIter
from ._layout import Layout, normalize_axis

IndexKey = Union[int, Sequence[int]]


def _as_index_tuple(indices: IndexKey) -> Tuple[int, ...]:
    if isinstance(indices, (int, np.integer)):
        return (operator.index(indices),)
    return tuple(operator.index(i) for i in indices)


class ArrayShapeAndIndexingMixin(IArray):
    """
    Indexing and structural view operations for the concrete NDArray.

    This mixin groups together methods that:
    - resolve logical index tuples to elements (``get``, ``__getitem__``),
    - write single elements through copy-on-write (``set``, ``__setitem__``),
    - traverse the array in row-major order (``iter``, ``flat``, ``axes``),
    - derive zero-copy views (transpose, flip, swap, slice, selection).
    """

    # ----------------------------
    # View construction
    # ----------------------------
    def _derive(self, layout: Layout) -> "ArrayShapeAndIndexingMixin":
        """
        Build a view over this array's buffer with a new layout.

        Raises
        ------
        RangeOutOfBoundsError
            If any logical index of `layout` would resolve outside the buffer.
        """
        n = len(self._buffer)
        bounds = layout.offset_bounds()
        if bounds is not None and (bounds[0] < 0 or bounds[1] >= n):
            raise RangeOutOfBoundsError(bounds[0], bounds[1] + 1, None, n)
        return type(self)._from_parts(self._buffer.share(), layout, self._backend)

    # ----------------------------
    # Access
    # ----------------------------
    def get(self, indices: IndexKey, default: Any = None) -> Any:
        """
        Return the element at a logical index tuple, or `default`.

        Parameters
        ----------
        indices : int | Sequence[int]
            One index per axis (a bare int is accepted for 1-D arrays).
        default : Any, optional
            Returned when an index is outside its axis. Defaults to None.

        Returns
        -------
        Any
            The element at ``indices`` or `default`.

        Raises
        ------
        DimensionMismatchError
            If the number of indices differs from ``ndim``.
        """
        idx = _as_index_tuple(indices)
        layout = self._layout
        if not layout.in_bounds(idx):
            return default
        offset = layout.offset_of(idx)
        if offset < 0 or offset >= len(self._buffer):
            return default
        return self._buffer[offset]

    def __getitem__(self, key: Any) -> Any:
        """
        Asserting element access, or slicing when the key holds slices.

        ``a[i, j]`` returns the element and raises `IndexOutOfBoundsError` if
        it does not exist. ``a[1:3, :]`` returns a view like `slice`; integer
        entries in a slicing key select (and drop) that axis, and missing
        trailing entries select the whole axis.
        """
        if isinstance(key, slice) or (
            isinstance(key, tuple) and any(isinstance(k, slice) for k in key)
        ):
            return self._getitem_view(key if isinstance(key, tuple) else (key,))

        idx = _as_index_tuple(key)
        if not self._layout.in_bounds(idx):
            raise IndexOutOfBoundsError(idx, self.shape)
        return self._buffer[self._layout.offset_of(idx)]

    def _getitem_view(self, key: Tuple[Any, ...]) -> "ArrayShapeAndIndexingMixin":
        key = key + (slice(None),) * (self.ndim - len(key))
        specs = []
        selected = []
        for axis, k in enumerate(key):
            if isinstance(k, slice):
                specs.append(k)
            else:
                specs.append(range(int(k), int(k) + 1))
                selected.append(axis)

        view = self.slice(specs)
        for axis in reversed(selected):
            view = view.index_axis(axis, 0)
        return view

    def set(self, indices: IndexKey, value: Any) -> None:
        """
        Write one element, splitting a shared buffer first.

        Raises
        ------
        IndexOutOfBoundsError
            If the index does not exist.
        """
        idx = _as_index_tuple(indices)
        if not self._layout.in_bounds(idx):
            raise IndexOutOfBoundsError(idx, self.shape)
        data = self._buffer.make_mut()
        data[self._layout.offset_of(idx)] = value

    def __setitem__(self, key: IndexKey, value: Any) -> None:
        self.set(key, value)

    # ----------------------------
    # Traversal
    # ----------------------------
    def iter(self) -> ArrayIterator:
        """Return a fresh row-major iterator over the elements."""
        return ArrayIterator(self)

    def flat(self) -> ArrayIterator:
        """Alias of `iter`."""
        return ArrayIterator(self)

    def __iter__(self) -> Iterator[Any]:
        return ArrayIterator(self)

    def axes(self) -> AxisIter:
        """Iterate over ``(extent, stride)`` pairs, one per axis."""
        return AxisIter(self.shape, self.strides)

    def axis_views(self, axis: int) -> Iterator["ArrayShapeAndIndexingMixin"]:
        """
        Decompose the array into ``shape[axis]`` views along `axis`.

        Each view fixes `axis` at one index and has one dimension fewer.

        Raises
        ------
        AxisOutOfBoundsError
            If `axis` is not a valid axis.
        """
        axis_ = normalize_axis(axis, self.ndim)
        return (self.index_axis(axis_, i) for i in range(self.shape[axis_]))

    # ----------------------------
    # Structural views
    # ----------------------------
    def transpose(self) -> "ArrayShapeAndIndexingMixin":
        """
        Reverse the order of the axes.

        ``out.get((i, j, k)) == self.get((k, j, i))``. Zero-copy.
        """
        return self._derive(self._layout.transposed())

    def t(self) -> "ArrayShapeAndIndexingMixin":
        """Alias of `transpose` returning a sibling view."""
        return self._derive(self._layout.transposed())

    @property
    def T(self) -> "ArrayShapeAndIndexingMixin":
        return self.t()

    def flip(self, axis: int) -> "ArrayShapeAndIndexingMixin":
        """
        Reverse the element order along `axis`. Zero-copy.

        Raises
        ------
        AxisOutOfBoundsError
            If `axis` is not a valid axis.
        """
        return self._derive(self._layout.flipped(axis))

    def swap_axes(self, axis0: int, axis1: int) -> "ArrayShapeAndIndexingMixin":
        """
        Exchange two axes. Zero-copy.

        Raises
        ------
        AxisOutOfBoundsError
            If either axis is not a valid axis.
        """
        return self._derive(self._layout.swapped(axis0, axis1))

    def slice(self, ranges: Sequence[RangeSpec]) -> "ArrayShapeAndIndexingMixin":
        """
        Narrow every axis to a sub-range. Zero-copy.

        Parameters
        ----------
        ranges : Sequence[RangeSpec]
            One range specification per axis: an `AxisRange`, a unit-step
            ``slice`` or ``range``, or a ``(start, end)`` tuple. Ranges are
            relative to this array's current extents.

        Returns
        -------
        NDArray
            View of shape ``(end - start for each axis)``.

        Raises
        ------
        DimensionMismatchError
            If ``len(ranges) != ndim``.
        RangeOutOfBoundsError
            If a range ends past its axis or starts after its end.
        ValueError
            If a slice or range has a step other than 1.
        """
        if len(ranges) != self.ndim:
            raise DimensionMismatchError(self.ndim, len(ranges), what="ranges")
        bounded = [
            bounded_range_of(n, spec) for n, spec in zip(self.shape, ranges)
        ]
        return self._derive(self._layout.sliced(bounded))

    def index_axis(self, axis: int, index: int) -> "ArrayShapeAndIndexingMixin":
        """
        Select one index along `axis`, removing that axis. Zero-copy.

        Raises
        ------
        AxisOutOfBoundsError
            If `axis` is not a valid axis.
        RangeOutOfBoundsError
            If `index` is outside the axis.
        """
        return self._derive(self._layout.selected(axis, index))

    # ----------------------------
    # Layout queries
    # ----------------------------
    def is_contiguous(self) -> bool:
        """
        True when row-major logical order equals physical buffer order.

        Holds for every freshly constructed array and for views whose maps
        are all identity over the full buffer.
        """
        return self._layout.is_row_major(len(self._buffer))

    def shares_buffer_with(self, other: "ArrayShapeAndIndexingMixin") -> bool:
        """True when both arrays currently read the same storage."""
        return self._buffer.same_storage(other._buffer)

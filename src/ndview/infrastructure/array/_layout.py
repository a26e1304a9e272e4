"""
Shape/stride descriptor combined with per-axis affine maps.

A `Layout` holds everything needed to resolve a logical index tuple to a
physical offset into a flat buffer:

    offset = base + sum(maps[a].map(idx[a]) * strides[a] for a in axes)

Design notes
------------
- Strides are computed once, from the shape the buffer was created with.
  Transforms only permute them; they are never recomputed.
- `shape`, `strides` and `maps` are always permuted together, so an axis
  keeps its extent, stride and map in the same position.
- `base` is zero for every layout created from a buffer. Rank-reducing
  selections fold the fixed coordinate of the removed axis into it.
- Layouts are immutable; every transform returns a new layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import prod
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from ...domain._errors import (
    AxisOutOfBoundsError,
    DimensionMismatchError,
    RangeOutOfBoundsError,
)
from ._index_map import AffineIndexMap
from ._iteration import odometer


def row_major_strides(shape: Sequence[int]) -> Tuple[int, ...]:
    """
    Compute row-major strides for `shape`.

    ``stride[a]`` is the product of all extents after axis ``a``; the last
    axis always has stride 1.
    """
    strides = []
    acc = 1
    for n in reversed(shape):
        strides.append(acc)
        acc *= n
    return tuple(reversed(strides))


def normalize_axis(axis: int, ndim: int) -> int:
    """
    Map a possibly negative axis into ``[0, ndim)``.

    Raises
    ------
    AxisOutOfBoundsError
        If `axis` is outside ``[-ndim, ndim)``.
    """
    axis_ = axis + ndim if axis < 0 else axis
    if axis_ < 0 or axis_ >= ndim:
        raise AxisOutOfBoundsError(axis, ndim)
    return axis_


@dataclass(frozen=True)
class Layout:
    """
    Immutable description of how a logical index space maps onto a buffer.

    Attributes
    ----------
    shape : tuple[int, ...]
        Logical extent per axis.
    strides : tuple[int, ...]
        Physical stride per axis.
    maps : tuple[AffineIndexMap, ...]
        Affine map per axis.
    base : int
        Constant physical offset.
    """

    shape: Tuple[int, ...]
    strides: Tuple[int, ...]
    maps: Tuple[AffineIndexMap, ...]
    base: int = 0

    @classmethod
    def row_major(cls, shape: Sequence[int]) -> "Layout":
        """Identity-mapped, row-major layout for a freshly built buffer."""
        shape = tuple(int(n) for n in shape)
        return cls(
            shape=shape,
            strides=row_major_strides(shape),
            maps=tuple(AffineIndexMap.identity() for _ in shape),
        )

    @property
    def ndim(self) -> int:
        return len(self.shape)

    @property
    def size(self) -> int:
        return prod(self.shape)

    # ----------------------------
    # Index resolution
    # ----------------------------
    def in_bounds(self, indices: Sequence[int]) -> bool:
        if len(indices) != len(self.shape):
            raise DimensionMismatchError(len(self.shape), len(indices))
        return all(0 <= i < n for i, n in zip(indices, self.shape))

    def offset_of(self, indices: Sequence[int]) -> int:
        """Physical offset of a logical index tuple (not bounds-checked)."""
        offset = self.base
        for i, stride, imap in zip(indices, self.strides, self.maps):
            offset += imap.map(i) * stride
        return offset

    def offset_bounds(self) -> Optional[Tuple[int, int]]:
        """
        Return the smallest and largest physical offsets reachable.

        Returns None for a layout with no elements.
        """
        if self.size == 0:
            return None
        lo = hi = self.base
        for n, stride, imap in zip(self.shape, self.strides, self.maps):
            first, last = imap.map(0) * stride, imap.map(n - 1) * stride
            lo += min(first, last)
            hi += max(first, last)
        return lo, hi

    def iter_offsets(self) -> Iterator[int]:
        """Physical offsets of all elements in row-major logical order."""
        for indices in odometer(self.shape):
            yield self.offset_of(indices)

    def offsets_array(self) -> np.ndarray:
        """
        Physical offsets of all elements in row-major logical order, as a
        flat ``np.intp`` array.

        Equivalent to ``np.fromiter(self.iter_offsets(), np.intp)`` but built
        by broadcasting one coordinate vector per axis.
        """
        offsets = np.full(self.shape, self.base, dtype=np.intp)
        for axis, (n, stride, imap) in enumerate(
            zip(self.shape, self.strides, self.maps)
        ):
            coords = imap.multiplier * np.arange(n, dtype=np.intp) + imap.offset
            view_shape = [1] * self.ndim
            view_shape[axis] = n
            offsets = offsets + (coords * stride).reshape(view_shape)
        return offsets.reshape(-1)

    def is_row_major(self, buffer_len: int) -> bool:
        """
        True when logical row-major order equals physical order of the buffer.
        """
        return (
            self.base == 0
            and all(m.is_identity() for m in self.maps)
            and self.strides == row_major_strides(self.shape)
            and self.size == buffer_len
        )

    # ----------------------------
    # Transforms
    # ----------------------------
    def transposed(self) -> "Layout":
        return Layout(
            self.shape[::-1], self.strides[::-1], self.maps[::-1], self.base
        )

    def swapped(self, axis0: int, axis1: int) -> "Layout":
        a = normalize_axis(axis0, self.ndim)
        b = normalize_axis(axis1, self.ndim)

        def _swap(items: tuple) -> tuple:
            items = list(items)
            items[a], items[b] = items[b], items[a]
            return tuple(items)

        return Layout(
            _swap(self.shape), _swap(self.strides), _swap(self.maps), self.base
        )

    def flipped(self, axis: int) -> "Layout":
        a = normalize_axis(axis, self.ndim)
        maps = list(self.maps)
        maps[a] = maps[a].flipped(self.shape[a])
        return Layout(self.shape, self.strides, tuple(maps), self.base)

    def sliced(self, ranges: Sequence[range]) -> "Layout":
        """
        Narrow every axis to a half-open range of its current extent.

        Raises
        ------
        DimensionMismatchError
            If the number of ranges differs from the dimensionality.
        RangeOutOfBoundsError
            If a range ends past the axis extent or starts after its end.
        """
        if len(ranges) != self.ndim:
            raise DimensionMismatchError(self.ndim, len(ranges), what="ranges")

        for axis, (r, n) in enumerate(zip(ranges, self.shape)):
            if r.start < 0 or r.stop > n or r.start > r.stop:
                raise RangeOutOfBoundsError(r.start, r.stop, axis, n)

        shape = tuple(r.stop - r.start for r in ranges)
        maps = tuple(m.append_offset(r.start) for m, r in zip(self.maps, ranges))
        return Layout(shape, self.strides, maps, self.base)

    def selected(self, axis: int, index: int) -> "Layout":
        """
        Fix `axis` at logical `index` and drop it.

        Raises
        ------
        RangeOutOfBoundsError
            If `index` is outside the axis extent.
        """
        a = normalize_axis(axis, self.ndim)
        n = self.shape[a]
        if index < 0 or index >= n:
            raise RangeOutOfBoundsError(index, index + 1, a, n)

        base = self.base + self.maps[a].map(index) * self.strides[a]
        return Layout(
            self.shape[:a] + self.shape[a + 1 :],
            self.strides[:a] + self.strides[a + 1 :],
            self.maps[:a] + self.maps[a + 1 :],
            base,
        )

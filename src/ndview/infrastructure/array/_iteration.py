"""
Row-major traversal of N-dimensional index spaces.

`odometer` enumerates index tuples with the last axis varying fastest,
carrying into more significant axes when an axis wraps around. The
`ArrayIterator` turns that sequence into elements by resolving every tuple
through the array's own ``get``, so traversal is oblivious to whether the
array is an original or a transformed view.
"""

from __future__ import annotations

from math import prod
from typing import Any, Iterator, Sequence, Tuple

from ...domain._array import IArray

_OUT_OF_RANGE = object()


def odometer(shape: Sequence[int]) -> Iterator[Tuple[int, ...]]:
    """
    Yield every index tuple of `shape` in row-major order.

    Exactly ``prod(shape)`` tuples are produced: none if any extent is zero,
    a single empty tuple for a 0-d shape.
    """
    ndim = len(shape)
    if any(n == 0 for n in shape):
        return
    indices = [0] * ndim
    while True:
        yield tuple(indices)
        axis = ndim - 1
        while axis >= 0:
            indices[axis] += 1
            if indices[axis] < shape[axis]:
                break
            indices[axis] = 0
            axis -= 1
        if axis < 0:
            return


class ArrayIterator:
    """
    Lazy row-major iterator over the elements of an array.

    A fresh iterator is created per traversal; it cannot be restarted.

    Parameters
    ----------
    array : IArray
        Array (or view) to traverse.
    """

    __slots__ = ("_array", "_indices", "_remaining")

    def __init__(self, array: IArray) -> None:
        self._array = array
        self._indices = odometer(array.shape)
        self._remaining = prod(array.shape)

    def __iter__(self) -> "ArrayIterator":
        return self

    def __next__(self) -> Any:
        if self._remaining <= 0:
            raise StopIteration
        indices = next(self._indices)
        item = self._array.get(indices, _OUT_OF_RANGE)
        if item is _OUT_OF_RANGE:
            self._remaining = 0
            raise StopIteration
        self._remaining -= 1
        return item

    def __length_hint__(self) -> int:
        return max(self._remaining, 0)


class AxisIter:
    """
    Iterator of ``(extent, stride)`` pairs, one per axis.
    """

    __slots__ = ("_pairs",)

    def __init__(self, shape: Sequence[int], strides: Sequence[int]) -> None:
        self._pairs = iter(tuple(zip(shape, strides)))

    def __iter__(self) -> "AxisIter":
        return self

    def __next__(self) -> Tuple[int, int]:
        return next(self._pairs)

"""
Shape-, axis- and index-related exceptions for ndview.

This module defines the error taxonomy used by the array engine. Every check
is performed eagerly at the offending call, so these exceptions are raised
before any view is built or any buffer is touched; a failing operation never
leaves a half-initialized array behind.

The classes derive from the closest built-in exception (`ValueError` for
size/shape disagreements, `IndexError` for out-of-range positions) so that
callers can catch them either precisely or generically.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class ShapeMismatchError(ValueError):
    """
    Raised when an element count or operand shape disagrees with a declared shape.

    Typical sources are:
    - constructing an array whose buffer length differs from ``prod(shape)``,
    - elementwise arithmetic between arrays of different shapes,
    - reshaping to a shape with a different element count.

    Attributes
    ----------
    expected : Any
        The shape or element count that was required.
    actual : Any
        The shape or element count that was supplied.
    """

    def __init__(self, expected: Any, actual: Any, context: str = "") -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        expected : Any
            Required shape or element count.
        actual : Any
            Supplied shape or element count.
        context : str, optional
            Short description of the operation that failed.
        """
        prefix = f"{context}: " if context else ""
        super().__init__(f"{prefix}expected {expected!r}, got {actual!r}.")
        self.expected = expected
        self.actual = actual


class DimensionMismatchError(ValueError):
    """
    Raised when a per-axis argument list does not match the array's dimensionality.

    Raised for index tuples passed to ``get`` / ``[]`` and for range lists
    passed to ``slice`` whose length differs from ``ndim``.
    """

    def __init__(self, ndim: int, got: int, what: str = "indices") -> None:
        super().__init__(f"Expected {ndim} {what} for a {ndim}-D array, got {got}.")
        self.ndim = ndim
        self.got = got


class AxisOutOfBoundsError(IndexError):
    """
    Raised when an axis argument is outside ``[-ndim, ndim)``.

    Attributes
    ----------
    axis : int
        The axis argument as supplied by the caller.
    ndim : int
        Dimensionality of the array the axis was applied to.
    """

    def __init__(self, axis: int, ndim: int) -> None:
        super().__init__(f"Axis {axis} is out of bounds for a {ndim}-D array.")
        self.axis = axis
        self.ndim = ndim


class RangeOutOfBoundsError(IndexError):
    """
    Raised when a range or selection escapes the current extent of an axis.

    This covers slice ranges whose end exceeds the axis extent (or whose
    start exceeds their end), out-of-range single-index selections, and
    views whose resolved physical offsets would fall outside the buffer.
    """

    def __init__(
        self, start: int, end: int, axis: Optional[int], extent: int
    ) -> None:
        where = (
            f"axis {axis} with extent {extent}"
            if axis is not None
            else f"a buffer of length {extent}"
        )
        super().__init__(f"Range [{start}, {end}) is out of bounds for {where}.")
        self.start = start
        self.end = end
        self.axis = axis
        self.extent = extent


class IndexOutOfBoundsError(IndexError):
    """
    Raised by asserting accessors (``array[idx]``) on an out-of-range index.

    The recoverable counterpart is ``get``, which returns a default instead.
    """

    def __init__(self, indices: Sequence[int], shape: Sequence[int]) -> None:
        super().__init__(
            f"Index {tuple(indices)} is out of bounds for shape {tuple(shape)}."
        )
        self.indices = tuple(indices)
        self.shape = tuple(shape)


class EmptyArrayError(ValueError):
    """
    Raised by reductions that are undefined on an array with no elements.
    """

    def __init__(self, op: str) -> None:
        super().__init__(f"{op}() is undefined for an empty array.")
        self.op = op

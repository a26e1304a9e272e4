"""
Backend-agnostic contracts and value objects: the `IArray` protocol, the
error taxonomy, axis range normalization and backend descriptors.
"""

from ._array import IArray
from ._errors import (
    ShapeMismatchError,
    DimensionMismatchError,
    AxisOutOfBoundsError,
    RangeOutOfBoundsError,
    IndexOutOfBoundsError,
    EmptyArrayError,
)
from ._ranges import AxisRange, Bound, bounded_range_of
from .backend import Backend, BackendType, BackendLike

__all__ = [
    IArray.__name__,
    ShapeMismatchError.__name__,
    DimensionMismatchError.__name__,
    AxisOutOfBoundsError.__name__,
    RangeOutOfBoundsError.__name__,
    IndexOutOfBoundsError.__name__,
    EmptyArrayError.__name__,
    AxisRange.__name__,
    Bound.__name__,
    bounded_range_of.__name__,
    Backend.__name__,
    BackendType.__name__,
    BackendLike.__name__,
]

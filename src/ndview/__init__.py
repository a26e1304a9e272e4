"""
ndview: N-dimensional arrays with zero-copy affine views.

An `NDArray` is a flat, copy-on-write buffer plus a layout of shape, fixed
strides and one ``{+1, -1}``-multiplier affine map per axis. Transpose,
flip, axis swap, sub-range slicing and axis selection are all expressed by
rewriting the layout, never by copying elements.

>>> from ndview import arange
>>> a = arange(1, 17).reshape((4, 4))
>>> a.flip(0).slice([(1, 3), (1, 3)]).flip(1).to_list()
[11, 10, 7, 6]
"""

from .domain import (
    ShapeMismatchError,
    DimensionMismatchError,
    AxisOutOfBoundsError,
    RangeOutOfBoundsError,
    IndexOutOfBoundsError,
    EmptyArrayError,
    AxisRange,
    Bound,
    bounded_range_of,
    Backend,
    BackendType,
)
from .infrastructure import (
    NDArray,
    AffineIndexMap,
    Layout,
    zeros,
    ones,
    full,
    arange,
    zeros_like,
    ones_like,
    full_like,
    Matrix,
)

__version__ = "0.1.0"

__all__ = [
    "NDArray",
    "AffineIndexMap",
    "Layout",
    "Matrix",
    "zeros",
    "ones",
    "full",
    "arange",
    "zeros_like",
    "ones_like",
    "full_like",
    "AxisRange",
    "Bound",
    "bounded_range_of",
    "Backend",
    "BackendType",
    "ShapeMismatchError",
    "DimensionMismatchError",
    "AxisOutOfBoundsError",
    "RangeOutOfBoundsError",
    "IndexOutOfBoundsError",
    "EmptyArrayError",
]

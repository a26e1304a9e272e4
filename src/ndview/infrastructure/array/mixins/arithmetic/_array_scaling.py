"""
Backend-specific scalar multiplication and division.

Only numbers (Python `numbers.Number` or numpy scalars) are accepted as the
scalar operand; anything else yields ``NotImplemented`` so Python raises
`TypeError`.

Scaling maps a scalar function over the *entire* physical buffer, including
elements a view does not currently expose, and re-wraps the new buffer in
the source layout. Because every element is transformed, the view reads
exactly the scaled values of what it read before.
"""

import numbers
import operator
from typing import Any, Callable

import numpy as np

from ..._array_builder import array_control_path_manager
from ..._buffer import CowBuffer

from .....domain.backend._backend import Backend
from .....domain._array import IArray

from ._base import ArrayMixinArithmetic as AMA


def _is_scalar_operand(value: Any) -> bool:
    return isinstance(value, (numbers.Number, np.generic))


def _rewrap(self: IArray, data: Any) -> IArray:
    # Object results (Fraction, Decimal scalars) belong on the python backend
    if isinstance(data, np.ndarray) and data.dtype == np.dtype(object):
        return type(self)._from_parts(
            CowBuffer(data.tolist()), self._layout, Backend("python")
        )
    return type(self)._from_parts(CowBuffer(data), self._layout, self._backend)


def _scale_numpy(self: IArray, other: Any, fn: Callable[[Any, Any], Any]):
    if not _is_scalar_operand(other):
        return NotImplemented
    return _rewrap(self, fn(self._buffer.data, other))


def _scale_python(self: IArray, other: Any, fn: Callable[[Any, Any], Any]):
    if not _is_scalar_operand(other):
        return NotImplemented
    return _rewrap(self, [fn(v, other) for v in self._buffer.data])


@array_control_path_manager(AMA, AMA.__mul__, Backend("numpy"))
def array_mul_numpy(self: IArray, other: Any) -> IArray:
    return _scale_numpy(self, other, operator.mul)


@array_control_path_manager(AMA, AMA.__mul__, Backend("python"))
def array_mul_python(self: IArray, other: Any) -> IArray:
    return _scale_python(self, other, operator.mul)


@array_control_path_manager(AMA, AMA.__truediv__, Backend("numpy"))
def array_div_numpy(self: IArray, other: Any) -> IArray:
    """
    Numpy control path for scalar division.

    Integer buffers are promoted to floating point by numpy's true division.
    """
    return _scale_numpy(self, other, operator.truediv)


@array_control_path_manager(AMA, AMA.__truediv__, Backend("python"))
def array_div_python(self: IArray, other: Any) -> IArray:
    return _scale_python(self, other, operator.truediv)

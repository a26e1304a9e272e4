"""
Backend-specific implementations of array addition and subtraction.

This module registers numpy and python control paths for
`ArrayMixinArithmetic.__add__` and ``__sub__``.

Both preserve the same high-level semantics:
- operands are paired in row-major *logical* order (a flipped or transposed
  operand contributes its visible order, not its buffer order),
- the result is a new dense array with a private buffer,
- there is no broadcasting.

The numpy path gathers both operands with one vectorized read each and
combines the flat results; when the right operand is list-backed it falls
back to zipping the iterators, like the python path.
"""

import operator
from typing import Any, Callable

from ..._array_builder import array_control_path_manager

from .....domain.backend._backend import Backend
from .....domain._array import IArray

from ._base import ArrayMixinArithmetic as AMA
from ._base import check_same_shape, is_array_operand


def _zip_combine(self: IArray, other: IArray, fn: Callable[[Any, Any], Any]):
    data = [fn(a, b) for a, b in zip(self.iter(), other.iter())]
    return type(self)(data, self.shape, backend=Backend("python"))


def _numpy_combine(self: IArray, other: IArray, fn: Callable[[Any, Any], Any]):
    if not other.backend.is_numpy():
        return _zip_combine(self, other, fn)
    return type(self)(fn(self.gather(), other.gather()), self.shape)


@array_control_path_manager(AMA, AMA.__add__, Backend("numpy"))
def array_add_numpy(self: IArray, other: IArray) -> IArray:
    """
    Numpy control path for elementwise addition.

    Returns
    -------
    NDArray
        Numpy-backed when `other` is numpy-backed too, otherwise list-backed.
    """
    if not is_array_operand(other):
        return NotImplemented
    check_same_shape(self, other, "+")
    return _numpy_combine(self, other, operator.add)


@array_control_path_manager(AMA, AMA.__add__, Backend("python"))
def array_add_python(self: IArray, other: IArray) -> IArray:
    if not is_array_operand(other):
        return NotImplemented
    check_same_shape(self, other, "+")
    return _zip_combine(self, other, operator.add)


@array_control_path_manager(AMA, AMA.__sub__, Backend("numpy"))
def array_sub_numpy(self: IArray, other: IArray) -> IArray:
    if not is_array_operand(other):
        return NotImplemented
    check_same_shape(self, other, "-")
    return _numpy_combine(self, other, operator.sub)


@array_control_path_manager(AMA, AMA.__sub__, Backend("python"))
def array_sub_python(self: IArray, other: IArray) -> IArray:
    if not is_array_operand(other):
        return NotImplemented
    check_same_shape(self, other, "-")
    return _zip_combine(self, other, operator.sub)

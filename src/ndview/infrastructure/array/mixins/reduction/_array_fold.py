"""
Backend-specific sum and product folds via control-path dispatch.

Both backends fold over the row-major iterator; they differ only in the
seed. Numpy-backed arrays start from the identity of their own dtype, so an
empty ``int32`` array sums to ``np.int32(0)``; list-backed arrays start from
the Python integers 0 and 1, which act as identities for every numeric type
(``int``, ``float``, ``Fraction``, ``Decimal``, ...).
"""

import operator
from functools import reduce

from ..._array_builder import array_control_path_manager

from .....domain.backend._backend import Backend
from .....domain._array import IArray

from ._base import ArrayMixinReduction as AMR


@array_control_path_manager(AMR, AMR.sum, Backend("numpy"))
def array_sum_numpy(self: IArray):
    return reduce(operator.add, self.iter(), self.dtype.type(0))


@array_control_path_manager(AMR, AMR.sum, Backend("python"))
def array_sum_python(self: IArray):
    return reduce(operator.add, self.iter(), 0)


@array_control_path_manager(AMR, AMR.prod, Backend("numpy"))
def array_prod_numpy(self: IArray):
    return reduce(operator.mul, self.iter(), self.dtype.type(1))


@array_control_path_manager(AMR, AMR.prod, Backend("python"))
def array_prod_python(self: IArray):
    return reduce(operator.mul, self.iter(), 1)

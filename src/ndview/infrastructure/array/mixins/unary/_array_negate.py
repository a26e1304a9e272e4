"""
Backend-specific implementations of in-place negation.

The numpy path negates the private buffer with a single ufunc call writing
into itself; the python path rebuilds the list contents in place.
"""

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain.backend._backend import Backend
from .....domain._array import IArray

from ._base import ArrayMixinUnary as AMU


@array_control_path_manager(AMU, AMU.negate, Backend("numpy"))
def array_negate_numpy(self: IArray) -> IArray:
    data = self._buffer.make_mut()
    np.negative(data, out=data)
    return self


@array_control_path_manager(AMU, AMU.negate, Backend("python"))
def array_negate_python(self: IArray) -> IArray:
    data = self._buffer.make_mut()
    data[:] = [-v for v in data]
    return self

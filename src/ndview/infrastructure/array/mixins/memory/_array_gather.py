"""
Backend-specific materialization of arrays via control-path dispatch.

This module registers the numpy and python implementations of
`ArrayMixinMemory.gather`, ``to_list`` and ``to_numpy``.

- numpy: the physical offsets of all logical elements are computed in one
  vectorized pass (`Layout.offsets_array`) and used for a single fancy-index
  read of the flat buffer.
- python: elements are drained from the row-major iterator one at a time.

Both produce the same sequence: the row-major logical order of the view.
"""

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain.backend._backend import Backend
from .....domain._array import IArray

from ._base import ArrayMixinMemory as AMM


@array_control_path_manager(AMM, AMM.gather, Backend("numpy"))
def array_gather_numpy(self: IArray):
    """
    Numpy control path for `gather`.

    Returns
    -------
    numpy.ndarray
        A new 1-D array with the buffer's dtype.
    """
    return self._buffer.data[self._layout.offsets_array()]


@array_control_path_manager(AMM, AMM.gather, Backend("python"))
def array_gather_python(self: IArray) -> list:
    """
    Python control path for `gather`.

    Returns
    -------
    list
        A new list holding the elements in row-major logical order.
    """
    return list(self.iter())


@array_control_path_manager(AMM, AMM.to_list, Backend("numpy"))
def array_to_list_numpy(self: IArray) -> list:
    return self.gather().tolist()


@array_control_path_manager(AMM, AMM.to_list, Backend("python"))
def array_to_list_python(self: IArray) -> list:
    return self.gather()


@array_control_path_manager(AMM, AMM.to_numpy, Backend("numpy"))
def array_to_numpy_numpy(self: IArray):
    return self.gather().reshape(self.shape)


@array_control_path_manager(AMM, AMM.to_numpy, Backend("python"))
def array_to_numpy_python(self: IArray):
    """
    Python control path for `to_numpy`.

    NumPy infers the dtype from the elements; arbitrary objects end up in an
    ``object`` array.
    """
    return np.array(self.gather()).reshape(self.shape)

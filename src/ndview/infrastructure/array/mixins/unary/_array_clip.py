"""
Backend-specific implementations of clipping.

`clip` materializes the logical sequence and clamps it into a new array.
`clip_inplace` writes back only at the physical offsets the layout exposes:
the numpy path computes all offsets at once and performs one masked
read-modify-write, the python path walks the offsets one by one.
"""

from typing import Any

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain.backend._backend import Backend
from .....domain._array import IArray

from ._base import ArrayMixinUnary as AMU
from ._base import check_clip_bounds


@array_control_path_manager(AMU, AMU.clip, Backend("numpy"))
def array_clip_numpy(self: IArray, lo: Any, hi: Any) -> IArray:
    check_clip_bounds(lo, hi)
    return type(self)(np.clip(self.gather(), lo, hi), self.shape)


@array_control_path_manager(AMU, AMU.clip, Backend("python"))
def array_clip_python(self: IArray, lo: Any, hi: Any) -> IArray:
    check_clip_bounds(lo, hi)
    data = [min(max(v, lo), hi) for v in self.iter()]
    return type(self)(data, self.shape, backend=self.backend)


@array_control_path_manager(AMU, AMU.clip_inplace, Backend("numpy"))
def array_clip_inplace_numpy(self: IArray, lo: Any, hi: Any) -> IArray:
    """
    Numpy control path for `clip_inplace`.

    Offsets are unique for every valid layout, so the fancy-index write
    touches each visible element exactly once.
    """
    check_clip_bounds(lo, hi)
    data = self._buffer.make_mut()
    offsets = self._layout.offsets_array()
    data[offsets] = np.clip(data[offsets], lo, hi)
    return self


@array_control_path_manager(AMU, AMU.clip_inplace, Backend("python"))
def array_clip_inplace_python(self: IArray, lo: Any, hi: Any) -> IArray:
    check_clip_bounds(lo, hi)
    data = self._buffer.make_mut()
    for offset in self._layout.iter_offsets():
        data[offset] = min(max(data[offset], lo), hi)
    return self

"""
Array memory operation registrations for ndview.

This package aggregates backend-specific implementations of memory-related
`NDArray` operations and registers them through the array control-path
dispatch system:

- `gather`    : copy the logical elements into a new flat buffer
- `to_list`   : flat Python list in logical order
- `to_numpy`  : ndarray of the array's shape

Shape-changing operations built on `gather` (`copy`, `reshape`, `flatten`,
`ravel`) live on the mixin itself.

Public API
----------
Only `ArrayMixinMemory` is re-exported. The implementation modules are
imported for their registration side effects.
"""

from ._array_gather import *
from ._base import ArrayMixinMemory

__all__ = [
    ArrayMixinMemory.__name__,
]

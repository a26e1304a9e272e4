"""
Arithmetic mixins and backend-specific implementations for NDArray.

This package aggregates the arithmetic mixin and its control paths:

- addition           (``__add__``)
- subtraction        (``__sub__``)
- multiplication     (``__mul__`` / ``__rmul__``, scalar only)
- true division      (``__truediv__``, scalar only)

Design notes
------------
- Implementation modules are imported for their *side effects*: registering
  control paths with the array control-path manager.
- These implementation modules are not part of the public API.

Public API
----------
Only the base mixin class is exported:

- ``ArrayMixinArithmetic``
"""

from ._array_addition import *
from ._array_scaling import *
from ._base import ArrayMixinArithmetic

__all__ = [
    ArrayMixinArithmetic.__name__,
]

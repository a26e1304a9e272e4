"""
Unary mixins and backend-specific implementations for NDArray.

Registered operations:

- ``negate`` (in place) and ``__neg__``
- ``clip`` (new array) and ``clip_inplace``

Only ``ArrayMixinUnary`` is exported; the implementation modules are
imported for their registration side effects.
"""

from ._array_negate import *
from ._array_clip import *
from ._base import ArrayMixinUnary

__all__ = [
    ArrayMixinUnary.__name__,
]

"""
Concrete array implementation.

Importing this package imports every mixin subpackage, which registers the
numpy and python control paths before the first `NDArray` is used.
"""

from ._array import NDArray
from ._index_map import AffineIndexMap
from ._layout import Layout
from ._buffer import CowBuffer

__all__ = [
    NDArray.__name__,
    AffineIndexMap.__name__,
    Layout.__name__,
    CowBuffer.__name__,
]

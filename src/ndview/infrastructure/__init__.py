"""
Concrete implementations: `NDArray`, its layout machinery, construction
helpers and the fixed-size `Matrix`.
"""

from .array import NDArray, AffineIndexMap, Layout, CowBuffer
from .factories import (
    zeros,
    ones,
    full,
    arange,
    zeros_like,
    ones_like,
    full_like,
)
from .matrix import Matrix

__all__ = [
    NDArray.__name__,
    AffineIndexMap.__name__,
    Layout.__name__,
    CowBuffer.__name__,
    zeros.__name__,
    ones.__name__,
    full.__name__,
    arange.__name__,
    zeros_like.__name__,
    ones_like.__name__,
    full_like.__name__,
    Matrix.__name__,
]

from ._factories import (
    zeros,
    ones,
    full,
    arange,
    zeros_like,
    ones_like,
    full_like,
)

__all__ = [
    zeros.__name__,
    ones.__name__,
    full.__name__,
    arange.__name__,
    zeros_like.__name__,
    ones_like.__name__,
    full_like.__name__,
]

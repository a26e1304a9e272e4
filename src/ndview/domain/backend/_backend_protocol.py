"""
Backend abstraction contracts for ndview.

This module defines a duck-typed `BackendLike` protocol that represents a
buffer backend descriptor without coupling to the concrete `Backend` class.

Design notes
------------
- Uses `typing.Protocol` and `@runtime_checkable` so that both static type
  checkers and runtime `isinstance` checks can validate backend-like objects.
- Higher layers (the `IArray` protocol in particular) type against this
  protocol rather than the concrete class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BackendLike(Protocol):
    """
    Duck-typed backend contract.

    Any object providing these members can stand in for a buffer backend
    descriptor.
    """

    type: object

    def is_numpy(self) -> bool: ...
    def is_python(self) -> bool: ...
    def __str__(self) -> str: ...

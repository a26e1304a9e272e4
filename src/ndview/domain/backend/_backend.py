"""
Buffer backend abstraction.

This module defines lightweight descriptors for the two kinds of flat
storage an array can sit on:

- `BackendType`: an enumeration of supported backend categories
- `Backend`: a concrete, hashable backend descriptor that validates and
  normalizes user-facing backend strings such as "numpy" or "python"

The backend is the state key used by the control-path dispatcher: every
operation that reads or writes the flat buffer directly has one registered
implementation per backend.
"""

from enum import Enum


class BackendType(Enum):
    """
    Enumeration of supported buffer backends.

    Attributes
    ----------
    NUMPY : BackendType
        A one-dimensional ``numpy.ndarray`` buffer.
    PYTHON : BackendType
        A plain Python ``list`` buffer holding arbitrary element objects.
    """

    NUMPY = "numpy"
    PYTHON = "python"


class Backend:
    """
    Concrete buffer backend descriptor.

    Parameters
    ----------
    backend : str | Backend
        Backend identifier. Must be either ``"numpy"`` or ``"python"``,
        or an existing `Backend` instance.

    Raises
    ------
    ValueError
        If the provided backend string is not supported.

    Notes
    -----
    - Instances compare and hash by their `BackendType`, so they can be used
      as dispatch keys.
    - `__slots__` prevents dynamic attribute creation.
    """

    __slots__ = ("type",)

    def __init__(self, backend: "str | Backend"):
        if isinstance(backend, Backend):
            self.type = backend.type
            return
        try:
            self.type = BackendType(backend)
        except ValueError:
            raise ValueError(
                f"Invalid backend {backend!r}. Expected 'numpy' or 'python'"
            ) from None

    def __str__(self) -> str:
        return self.type.value

    def __repr__(self) -> str:
        return f"Backend('{self.type.value}')"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Backend):
            return self.type is other.type
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.type)

    def is_numpy(self) -> bool:
        """Return True if the buffer is a NumPy array."""
        return self.type is BackendType.NUMPY

    def is_python(self) -> bool:
        """Return True if the buffer is a Python list."""
        return self.type is BackendType.PYTHON

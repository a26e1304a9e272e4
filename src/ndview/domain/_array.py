"""
Array interface definitions.

This module defines the domain-level interface for N-dimensional array views
using structural typing. It captures the surface that iteration, reductions
and arithmetic rely on, so those layers can be written against any object
that resolves logical indices to elements the same way.

Notes
-----
- The protocol is backend-agnostic: it does not mention NumPy.
- Only the members consumed across module boundaries are listed; concrete
  arrays expose considerably more (see `ndview.infrastructure.array.NDArray`).
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Protocol, Sequence, runtime_checkable

from .backend._backend_protocol import BackendLike


@runtime_checkable
class IArray(Protocol):
    """
    N-dimensional array interface.

    An `IArray` is a logical, row-major indexable view over a flat buffer.
    Its elements are addressed by one non-negative index per axis.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the logical extent of every axis.

        Returns
        -------
        tuple[int, ...]
            One non-negative extent per axis.
        """
        ...

    @property
    def strides(self) -> tuple[int, ...]:
        """
        Return the physical stride of every axis.

        Strides are fixed at construction from the original row-major shape
        and are only ever permuted by transforms.
        """
        ...

    @property
    def ndim(self) -> int:
        """Number of axes."""
        ...

    @property
    def size(self) -> int:
        """Number of logically addressable elements, ``prod(shape)``."""
        ...

    @property
    def backend(self) -> BackendLike:
        """Descriptor of the flat buffer kind used for dispatch."""
        ...

    def get(self, indices: Sequence[int], default: Any = None) -> Any:
        """
        Resolve a logical index tuple to an element.

        Parameters
        ----------
        indices : Sequence[int]
            One index per axis.
        default : Any, optional
            Returned when any index is out of range. Defaults to None.

        Returns
        -------
        Any
            The element, or `default`.
        """
        ...

    def __iter__(self) -> Iterator[Any]:
        """Iterate over all elements in row-major logical order."""
        ...

    def axis_views(self, axis: int) -> Iterator["IArray"]:
        """
        Decompose the array along an axis.

        Yields ``shape[axis]`` arrays, each a view at one index along `axis`
        with that axis removed.
        """
        ...

    def max(self) -> Optional[Any]: ...

    def min(self) -> Optional[Any]: ...

"""
Unary mixin defining negation and clipping for NDArray.

This module declares :class:`ArrayMixinUnary`. The in-place operations
(`negate`, `clip_inplace`) follow the copy-on-write discipline: a shared
buffer is split first, so sibling views and the source array are never
affected. The out-of-place `clip` returns a new dense array.
"""

from typing import Any
from abc import ABC

from .....domain._array import IArray


def check_clip_bounds(lo: Any, hi: Any) -> None:
    if lo > hi:
        raise ValueError(f"clip requires lo <= hi, got lo={lo!r}, hi={hi!r}")


class ArrayMixinUnary(ABC):
    """
    Abstract mixin defining elementwise unary operations.

    Notes
    -----
    - `negate`, `clip` and `clip_inplace` are interface declarations whose
      bodies are registered per backend.
    - `__neg__` is shared: it negates a sibling handle, so the operand keeps
      its values.
    """

    def negate(self: IArray) -> IArray:
        """
        Negate every element of the physical buffer in place.

        A shared buffer is copied first, so other arrays reading the same
        storage are unaffected. Because the whole buffer is negated, every
        element visible through this array's layout is negated.

        Returns
        -------
        NDArray
            ``self``, to allow chaining.
        """
        ...

    def __neg__(self: IArray) -> IArray:
        """
        Return a negated sibling of this array.

        The result keeps this array's layout over a private, negated copy of
        the buffer.
        """
        sibling = type(self)._from_parts(
            self._buffer.share(), self._layout, self._backend
        )
        return sibling.negate()

    def clip(self: IArray, lo: Any, hi: Any) -> IArray:
        """
        Clamp every element into ``[lo, hi]``.

        Parameters
        ----------
        lo, hi : Any
            Inclusive bounds, comparable with the elements.

        Returns
        -------
        NDArray
            A new dense array of this array's shape. This array is unchanged.

        Raises
        ------
        ValueError
            If ``lo > hi``.
        """
        ...

    def clip_inplace(self: IArray, lo: Any, hi: Any) -> IArray:
        """
        Clamp the logically visible elements into ``[lo, hi]`` in place.

        Elements of the buffer that this array does not expose keep their
        values. A shared buffer is copied first.

        Returns
        -------
        NDArray
            ``self``.

        Raises
        ------
        ValueError
            If ``lo > hi``.
        """
        ...

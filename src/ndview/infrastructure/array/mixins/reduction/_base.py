"""
Reduction mixin defining the public NDArray reduction API.

This module declares :class:`ArrayMixinReduction`. Every reduction consumes
the row-major iteration sequence of the array (or of each axis-wise
sub-array) and never the physical buffer, so a reduction over a flipped or
sliced view reduces exactly the logically visible elements.

``sum`` and ``prod`` are interface declarations whose bodies are registered
per backend: they differ only in the identity element used as the fold seed.
The remaining reductions are built on top of them and on ``max`` / ``min``.
"""

import builtins
import operator
from functools import reduce
from typing import Any, List, Optional
from abc import ABC

from .....domain._array import IArray
from .....domain._errors import EmptyArrayError


class ArrayMixinReduction(ABC):
    """
    Abstract mixin defining reductions over arrays.

    Notes
    -----
    - Whole-array reductions fold over ``self.iter()``.
    - ``*_across(axis)`` reductions return one result per index along
      `axis`, computed independently on each view of ``axis_views(axis)``.
    - Positions returned by the ``arg_*`` family are flat row-major logical
      positions, not index tuples.
    """

    # ----------------------------
    # Extremes
    # ----------------------------
    def max(self: IArray) -> Optional[Any]:
        """
        Largest element, or None for an empty array.

        Ties resolve to any of the equal elements.
        """
        return builtins.max(self.iter(), default=None)

    def min(self: IArray) -> Optional[Any]:
        """Smallest element, or None for an empty array."""
        return builtins.min(self.iter(), default=None)

    def arg_max(self: IArray) -> List[int]:
        """
        Flat logical positions of *every* element equal to the maximum.

        Returns
        -------
        list[int]
            Ascending positions; empty for an empty array.
        """
        extreme = self.max()
        if extreme is None:
            return []
        return [i for i, v in enumerate(self.iter()) if v == extreme]

    def arg_min(self: IArray) -> List[int]:
        """Flat logical positions of every element equal to the minimum."""
        extreme = self.min()
        if extreme is None:
            return []
        return [i for i, v in enumerate(self.iter()) if v == extreme]

    def max_across(self: IArray, axis: int) -> List[Optional[Any]]:
        """
        Maximum of each sub-array along `axis`.

        Returns
        -------
        list
            ``shape[axis]`` entries, None for empty sub-arrays.

        Raises
        ------
        AxisOutOfBoundsError
            If `axis` is not a valid axis.
        """
        return [view.max() for view in self.axis_views(axis)]

    def min_across(self: IArray, axis: int) -> List[Optional[Any]]:
        """Minimum of each sub-array along `axis`."""
        return [view.min() for view in self.axis_views(axis)]

    def arg_max_across(self: IArray, axis: int) -> List[Optional[int]]:
        """
        First position of the maximum within each sub-array along `axis`.

        Unlike `arg_max`, only the first tied position is reported.
        """
        return [
            next(iter(view.arg_max()), None) for view in self.axis_views(axis)
        ]

    def arg_min_across(self: IArray, axis: int) -> List[Optional[int]]:
        """First position of the minimum within each sub-array along `axis`."""
        return [
            next(iter(view.arg_min()), None) for view in self.axis_views(axis)
        ]

    def ptp(self: IArray) -> Optional[Any]:
        """Peak to peak, ``max() - min()``; None for an empty array."""
        hi = self.max()
        if hi is None:
            return None
        return hi - self.min()

    # ----------------------------
    # Folds
    # ----------------------------
    def sum(self: IArray) -> Any:
        """
        Sum of all elements, seeded with the additive identity.

        Returns the identity (zero) for an empty array.
        """
        ...

    def prod(self: IArray) -> Any:
        """
        Product of all elements, seeded with the multiplicative identity.

        Returns the identity (one) for an empty array.
        """
        ...

    def sum_across(self: IArray, axis: int) -> List[Any]:
        """Sum of each sub-array along `axis`."""
        return [view.sum() for view in self.axis_views(axis)]

    def prod_across(self: IArray, axis: int) -> List[Any]:
        """Product of each sub-array along `axis`."""
        return [view.prod() for view in self.axis_views(axis)]

    # ----------------------------
    # Statistics
    # ----------------------------
    def mean(self: IArray) -> Any:
        """
        Arithmetic mean, ``sum() / size``.

        Raises
        ------
        EmptyArrayError
            If the array has no elements.
        """
        if self.size == 0:
            raise EmptyArrayError("mean")
        return self.sum() / self.size

    def var(self: IArray) -> Any:
        """
        Population variance: mean squared deviation from the mean.

        The divisor is the element count (not ``size - 1``).

        Raises
        ------
        EmptyArrayError
            If the array has no elements.
        """
        if self.size == 0:
            raise EmptyArrayError("var")
        m = self.mean()
        squares = ((x - m) * (x - m) for x in self.iter())
        return reduce(operator.add, squares, 0) / self.size

    def mean_across(self: IArray, axis: int) -> List[Any]:
        """Mean of each sub-array along `axis`."""
        return [view.mean() for view in self.axis_views(axis)]

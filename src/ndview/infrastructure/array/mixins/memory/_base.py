"""
Memory mixin defining materialization and reshape APIs.

This module declares :class:`ArrayMixinMemory`, which specifies how an array
(or view) is turned into fresh, densely packed storage. The backend-specific
primitives (``gather``, ``to_list``, ``to_numpy``) are registered elsewhere
through the array control-path manager; the shape-changing operations built
on top of them (``copy``, ``reshape``, ``flatten``, ``ravel``) are shared.

Reshape always copies. An affine per-axis map over fixed original strides
cannot express every logical reordering once a non-identity view is
reshaped (transpose followed by reshape, for instance), so the current
logical order is drained into a new buffer instead.
"""

from math import prod
from typing import Any, Sequence, Union
from abc import ABC

import numpy as np

from .....domain._array import IArray
from .....domain._errors import ShapeMismatchError


class ArrayMixinMemory(ABC):
    """
    Abstract mixin defining materialization and reshape operations.

    Notes
    -----
    - ``gather``, ``to_list`` and ``to_numpy`` are interface declarations;
      their bodies are provided per backend.
    - Every method here returns data in row-major *logical* order, never in
      physical buffer order.
    """

    def gather(self: IArray) -> Any:
        """
        Copy the logically visible elements into a new flat buffer.

        Returns
        -------
        numpy.ndarray | list
            A 1-D ndarray (numpy backend) or a list (python backend) of
            ``size`` elements in row-major logical order.
        """
        ...

    def to_list(self: IArray) -> list:
        """
        Return the elements as a flat Python list in row-major logical order.

        Numpy-backed elements are converted to the matching Python scalars.
        """
        ...

    def to_numpy(self: IArray) -> Any:
        """
        Return the elements as an ndarray of shape ``self.shape``.

        The result never aliases the array's buffer.
        """
        ...

    def copy(self: IArray) -> IArray:
        """
        Return a dense, identity-mapped array with a private buffer.
        """
        return type(self)(self.gather(), self.shape, backend=self.backend)

    def reshape(self: IArray, new_shape: Union[int, Sequence[int]]) -> IArray:
        """
        Return a new array with the same logical elements and a new shape.

        Parameters
        ----------
        new_shape : int | Sequence[int]
            Target shape. Its element count must equal ``self.size``.

        Returns
        -------
        NDArray
            A fresh, identity-mapped array. The buffer is always copied,
            even when this array is already contiguous.

        Raises
        ------
        ShapeMismatchError
            If ``prod(new_shape) != self.size``.
        """
        if isinstance(new_shape, (int, np.integer)):
            new_shape = (new_shape,)
        shape = tuple(int(n) for n in new_shape)
        if prod(shape) != self.size:
            raise ShapeMismatchError(
                self.size, prod(shape), context=f"reshape {self.shape} -> {shape}"
            )
        return type(self)(self.gather(), shape, backend=self.backend)

    def flatten(self: IArray) -> IArray:
        """Copy into a 1-D array of length ``size``."""
        return self.reshape((self.size,))

    def ravel(self: IArray) -> IArray:
        """Alias of `flatten`; also always copies."""
        return self.reshape((self.size,))

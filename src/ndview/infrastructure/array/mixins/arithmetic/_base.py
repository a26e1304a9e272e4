"""
Arithmetic mixin defining elementwise NDArray operators.

This module declares :class:`ArrayMixinArithmetic`, an abstract mixin that
specifies the public API and semantics for elementwise arithmetic on arrays.

The mixin itself does not implement the arithmetic. Concrete numpy/python
implementations are provided elsewhere and registered via the control-path
dispatch mechanism, keeping the array core lightweight while allowing
backend-specific execution behind a single interface.

Two families of operators exist, with different layout semantics:

- Array-array operators (``+``, ``-``) combine the *logical* sequences of
  both operands and always produce a new dense array.
- Array-scalar operators (``*``, ``/``) act on the *physical* buffer and
  keep the source layout (shape, strides, maps and base).
"""

from typing import Any, Union
from abc import ABC

from .....domain._array import IArray
from .....domain._errors import ShapeMismatchError

Number = Union[int, float]


def check_same_shape(a: IArray, b: IArray, op: str) -> None:
    """
    Require two operands with identical dimensionality and extents.

    Raises
    ------
    ShapeMismatchError
        If ``a.shape != b.shape``.
    """
    if a.shape != b.shape:
        raise ShapeMismatchError(a.shape, b.shape, context=f"operands of {op!r}")


class ArrayMixinArithmetic(ABC):
    """
    Abstract mixin defining elementwise arithmetic operations for arrays.

    Notes
    -----
    - Methods defined here (other than the reflected forms) serve as
      interface declarations; no computation is performed in this class.
    - There is no broadcasting: array operands must match in shape.
    - Operands of the wrong kind make the operator return ``NotImplemented``
      so Python can try the reflected operation.
    """

    # ----------------------------
    # Addition / subtraction
    # ----------------------------
    def __add__(self: IArray, other: IArray) -> IArray:
        """
        Elementwise sum of two arrays of identical shape.

        Parameters
        ----------
        other : NDArray
            Right-hand operand. Elements are paired in row-major logical
            order, regardless of either operand's layout.

        Returns
        -------
        NDArray
            New dense, identity-mapped array of the common shape. The
            result uses the numpy backend only when both operands do.

        Raises
        ------
        ShapeMismatchError
            If the shapes differ.
        """
        ...

    def __sub__(self: IArray, other: IArray) -> IArray:
        """
        Elementwise difference of two arrays of identical shape.

        Same pairing, result and error rules as `__add__`.
        """
        ...

    # ----------------------------
    # Scalar scaling
    # ----------------------------
    def __mul__(self: IArray, other: Number) -> IArray:
        """
        Multiply every element by a scalar.

        The operation is applied to the whole physical buffer; the result
        carries the same shape, strides, maps and base as this array, over a
        fresh buffer.

        Parameters
        ----------
        other : Number
            Scalar factor. Array operands return ``NotImplemented``.
        """
        ...

    def __rmul__(self: IArray, other: Number) -> IArray:
        """Right-hand multiplication to support ``scalar * array``."""
        return self.__mul__(other)

    def __truediv__(self: IArray, other: Number) -> IArray:
        """
        Divide every element by a scalar.

        Layout handling is identical to `__mul__`. Division by zero follows
        the backend: numpy yields ``inf``/``nan``, Python raises
        ``ZeroDivisionError``.
        """
        ...


def is_array_operand(value: Any) -> bool:
    """True for values that take part in array-array arithmetic."""
    return isinstance(value, ArrayMixinArithmetic)

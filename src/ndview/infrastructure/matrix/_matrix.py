"""
Fixed-size two-dimensional matrix with flat row-major storage.

`Matrix` is independent of `NDArray`: it has no views, strides or affine
maps. Element ``(i, j)`` of a ``rows x cols`` matrix lives at flat position
``i * cols + j``.
"""

from __future__ import annotations

from typing import Any, Iterable, Tuple

from ...domain._errors import IndexOutOfBoundsError, ShapeMismatchError


class Matrix:
    """
    Row-major ``rows x cols`` matrix.

    Parameters
    ----------
    values : Iterable
        Exactly ``rows * cols`` elements in row-major order.
    rows, cols : int
        Matrix dimensions.

    Raises
    ------
    ShapeMismatchError
        If the number of values differs from ``rows * cols``.
    """

    __slots__ = ("_values", "_rows", "_cols")

    def __init__(self, values: Iterable[Any], rows: int, cols: int) -> None:
        values = list(values)
        if len(values) != rows * cols:
            raise ShapeMismatchError(
                rows * cols, len(values), context=f"matrix {rows}x{cols}"
            )
        self._values = values
        self._rows = rows
        self._cols = cols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._cols)

    def __getitem__(self, key: Tuple[int, int]) -> Any:
        i, j = key
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexOutOfBoundsError((i, j), self.shape)
        return self._values[i * self._cols + j]

    def reshape(self, rows: int, cols: int) -> "Matrix":
        """
        Reinterpret the same values as a ``rows x cols`` matrix.

        Raises
        ------
        ShapeMismatchError
            If ``rows * cols`` differs from the current size.
        """
        size = self._rows * self._cols
        if rows * cols != size:
            raise ShapeMismatchError(
                size, rows * cols, context=f"reshape {self.shape} -> {(rows, cols)}"
            )
        out = Matrix.__new__(Matrix)
        out._values = self._values
        out._rows = rows
        out._cols = cols
        return out

    def to_list(self) -> list:
        """Flat copy of the values in row-major order."""
        return list(self._values)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, values={self._values!r})"

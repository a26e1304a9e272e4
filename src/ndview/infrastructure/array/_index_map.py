"""
Per-axis affine index maps.

An `AffineIndexMap` translates a logical coordinate along one axis into a
physical coordinate along the same axis of the original buffer layout:

    physical = multiplier * logical + offset

The multiplier is restricted to +1 or -1. That is enough to express
reversal (flip) and shifting (slicing), and composes in O(1) without
remembering any history, but it cannot express strided views such as
"every other element".
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AffineIndexMap:
    """
    Immutable affine map ``i -> multiplier * i + offset`` over one axis.

    Attributes
    ----------
    multiplier : int
        Direction of traversal, +1 (forward) or -1 (reversed).
    offset : int
        Physical coordinate of logical index 0.
    """

    multiplier: int = 1
    offset: int = 0

    def __post_init__(self) -> None:
        if self.multiplier not in (1, -1):
            raise ValueError(
                f"multiplier must be +1 or -1, got {self.multiplier!r}"
            )

    @classmethod
    def identity(cls) -> "AffineIndexMap":
        return cls(1, 0)

    def map(self, index: int) -> int:
        """Return the physical coordinate of logical `index`."""
        return self.multiplier * index + self.offset

    def append_offset(self, delta: int) -> "AffineIndexMap":
        """
        Shift the logical origin by `delta` logical steps.

        The shift is taken in the map's current direction, so slicing a
        flipped axis moves towards lower physical coordinates.
        """
        return AffineIndexMap(self.multiplier, self.offset + self.multiplier * delta)

    def flipped(self, extent: int) -> "AffineIndexMap":
        """
        Reverse the direction of the map over an axis of length `extent`.

        Logical index 0 of the result resolves to what was logical index
        ``extent - 1``. Flipping twice with the same extent returns an equal
        map.
        """
        shifted = self.append_offset(extent - 1)
        return AffineIndexMap(-shifted.multiplier, shifted.offset)

    def is_identity(self) -> bool:
        return self.multiplier == 1 and self.offset == 0

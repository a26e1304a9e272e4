"""
Per-axis range specifications and their normalization.

`slice` accepts one range specification per axis. A specification may be
written in several ways (both ends inclusive, inclusive start with exclusive
end, unbounded on either side, exclusive start, ...). Before any view is
built, every specification is normalized against the current extent of its
axis into a canonical half-open ``range(start, end)``.

Accepted forms
--------------
- `AxisRange`: explicit bounds with `Bound.INCLUDED` / `Bound.EXCLUDED`,
  ``None`` meaning unbounded
- ``slice(start, stop)``: inclusive start, exclusive stop, ``None`` unbounded
- ``range(start, stop)``: inclusive start, exclusive stop
- ``(start, end)`` tuple: inclusive start, exclusive end
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class Bound(Enum):
    """Whether a range endpoint is part of the range."""

    INCLUDED = "included"
    EXCLUDED = "excluded"


@dataclass(frozen=True)
class AxisRange:
    """
    An explicit range over one axis.

    Attributes
    ----------
    start : Optional[int]
        Lower endpoint, or None for "from the beginning".
    end : Optional[int]
        Upper endpoint, or None for "to the end".
    start_bound : Bound
        Whether `start` itself is selected. Defaults to INCLUDED.
    end_bound : Bound
        Whether `end` itself is selected. Defaults to EXCLUDED.
    """

    start: Optional[int] = None
    end: Optional[int] = None
    start_bound: Bound = Bound.INCLUDED
    end_bound: Bound = Bound.EXCLUDED

    @classmethod
    def closed(cls, start: int, end: int) -> "AxisRange":
        """Both endpoints included (``start..=end``)."""
        return cls(start, end, Bound.INCLUDED, Bound.INCLUDED)

    @classmethod
    def half_open(cls, start: int, end: int) -> "AxisRange":
        """Start included, end excluded (``start..end``)."""
        return cls(start, end, Bound.INCLUDED, Bound.EXCLUDED)

    @classmethod
    def starting_at(cls, start: int) -> "AxisRange":
        """Everything from `start` onwards."""
        return cls(start, None)

    @classmethod
    def up_to(cls, end: int, inclusive: bool = False) -> "AxisRange":
        """Everything before `end` (or up to and including it)."""
        return cls(None, end, end_bound=Bound.INCLUDED if inclusive else Bound.EXCLUDED)

    @classmethod
    def full(cls) -> "AxisRange":
        """The whole axis."""
        return cls()


RangeSpec = Union[AxisRange, slice, range, Tuple[int, int]]


def _as_axis_range(spec: RangeSpec) -> AxisRange:
    if isinstance(spec, AxisRange):
        return spec
    if isinstance(spec, slice):
        if spec.step not in (None, 1):
            raise ValueError(
                f"Strided slices are not supported (step={spec.step}); "
                "views only support unit steps."
            )
        return AxisRange(spec.start, spec.stop)
    if isinstance(spec, range):
        if spec.step != 1:
            raise ValueError(
                f"Strided ranges are not supported (step={spec.step}); "
                "views only support unit steps."
            )
        return AxisRange(spec.start, spec.stop)
    if isinstance(spec, tuple) and len(spec) == 2:
        return AxisRange(spec[0], spec[1])
    raise TypeError(f"Unsupported range specification: {spec!r}")


def bounded_range_of(upper_bound: int, spec: RangeSpec) -> range:
    """
    Normalize a range specification to a half-open ``range(start, end)``.

    Parameters
    ----------
    upper_bound : int
        Current extent of the axis; used for unbounded ends and to clamp
        inclusive ends.
    spec : RangeSpec
        Range specification in any accepted form.

    Returns
    -------
    range
        Canonical range with unit step. The result is not validated against
        `upper_bound`; an exclusive end beyond the extent is reported by the
        caller.

    Raises
    ------
    ValueError
        If a slice or range has a step other than 1.
    TypeError
        If the specification has an unsupported type.
    """
    r = _as_axis_range(spec)

    if r.start is None:
        start = 0
    elif r.start_bound is Bound.INCLUDED:
        start = int(r.start)
    else:
        start = int(r.start) + 1

    if r.end is None:
        end = upper_bound
    elif r.end_bound is Bound.EXCLUDED:
        end = int(r.end)
    else:
        end = min(int(r.end) + 1, upper_bound)

    return range(start, end)

"""
Reduction mixins and backend-specific implementations for NDArray.

This package aggregates the reduction mixin and the control paths it needs:

- ``max`` / ``min`` / ``arg_max`` / ``arg_min`` and their ``*_across`` forms
- ``sum`` / ``prod`` (registered per backend) and ``*_across`` forms
- ``mean`` / ``var`` / ``ptp``

Public API
----------
Only ``ArrayMixinReduction`` is exported; ``_array_fold`` is imported for
its registration side effects.
"""

from ._array_fold import *
from ._base import ArrayMixinReduction

__all__ = [
    ArrayMixinReduction.__name__,
]

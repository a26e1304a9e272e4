"""
Array control-path manager for backend-specific dispatch.

This module defines the shared control-path manager used to register and
resolve backend-specific implementations of `NDArray` methods. It is the
generic `create_path_builder` specialized to the ``"backend"`` attribute:

    @array_control_path_manager(ArrayMixin, ArrayMixin.op, Backend("numpy"))
    def op_numpy(self, ...): ...

    @array_control_path_manager(ArrayMixin, ArrayMixin.op, Backend("python"))
    def op_python(self, ...): ...

At runtime ``array.op(...)`` dispatches to the implementation registered for
``array.backend``.
"""

from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches NDArray methods based on `self.backend`
array_control_path_manager = create_path_builder("backend")

"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to
one of several registered implementations based on the value of a named
attribute of the receiving object.

Core idea
---------
- A *base* method is declared on a mixin class; its signature and docstring
  become the canonical ones.
- Several "control paths" are registered for that method, each keyed by
  ``(ClassName, MethodName, StateVal)``.
- At runtime the installed wrapper reads ``getattr(self, state_attr)`` and
  calls the implementation registered for that value as a normal bound
  method (``impl(self, *args, **kwargs)``).

Important notes
---------------
- The first registration replaces the base method on the class with the
  dispatching wrapper; later registrations only extend the mapping.
- Registered implementations live in a closure-local mapping owned by each
  `create_path_builder()` call, so different builders never share paths.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Union,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

_MISSING = object()


def create_path_builder(state_attr: str) -> Callable[
    [
        Type,
        Callable[P, R],
        Hashable,
        Optional[Union[Type[Exception], Callable[[Callable[P, R], Any], None]]],
    ],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create a "path builder" that registers control paths keyed by ``state_attr``.

    Usage::

        backend_paths = create_path_builder("backend")

        class Mixin:
            def op(self, x: int) -> int: ...

        @backend_paths(Mixin, Mixin.op, Backend("numpy"))
        def op_numpy(self, x: int) -> int:
            ...

    Calling ``obj.op(x)`` then dispatches on ``obj.backend``.

    Parameters
    ----------
    state_attr : str
        Name of the attribute read from ``self`` to select an implementation.

    Returns
    -------
    Callable
        ``templator(cls, method, state, trap_exception=None) -> decorator``.
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "StateVal",
        ],
    )

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[
            Union[Type[Exception], Callable[[Callable[P, R], Any], None]]
        ] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            Class whose method is replaced by the dispatching wrapper.
        method : Callable[P, R]
            The base method being templated.
        state : Hashable
            Value of ``state_attr`` that selects the decorated implementation.
        trap_exception : optional
            Controls what happens when no path matches the runtime state:

            - ``None``: raise `NotImplementedError`.
            - an exception class: raise it.
            - any other callable: call ``trap_exception(method, state)`` and
              then raise `NotImplementedError`.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The argument for 'state' must be hashable. Got {state!r}"
            ) from None

        smk = MethodKey(cls.__name__, method.__name__, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[smk] = sub_method

            @wraps(method)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                cur_state = getattr(self, state_attr, _MISSING)
                if cur_state is _MISSING:
                    raise NotImplementedError(
                        "{} is missing attribute {}".format(
                            type(self), repr(state_attr)
                        )
                    )
                key = MethodKey(cls.__name__, method.__name__, cur_state)
                if sm := methods_map.get(key):
                    return sm(self, *args, **kwargs)
                if trap_exception is None:
                    raise NotImplementedError(
                        "Missing control path ({}={}) for {}".format(
                            state_attr, repr(cur_state), method.__name__
                        )
                    )
                if isinstance(trap_exception, type) and issubclass(
                    trap_exception, BaseException
                ):
                    raise trap_exception(
                        f"{method.__name__} is not available for "
                        f"{state_attr}={cur_state!r}"
                    )
                trap_exception(method, cur_state)
                raise NotImplementedError(method.__name__)

            setattr(cls, method.__name__, wrapper)
            return sub_method

        return decorator

    return templator

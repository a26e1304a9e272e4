from ._backend import Backend, BackendType
from ._backend_protocol import BackendLike

__all__ = [
    Backend.__name__,
    BackendType.__name__,
    BackendLike.__name__,
]

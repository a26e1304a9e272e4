from ._matrix import Matrix

__all__ = [Matrix.__name__]

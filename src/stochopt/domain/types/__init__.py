from ._numpy import NDArrayLike

__all__ = [NDArrayLike.__name__]

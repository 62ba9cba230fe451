"""
Domain-level structural typing for NumPy-like arrays.

This module defines :class:`NDArrayLike`, a backend-agnostic Protocol for the
objects stochopt passes around as iterates, gradients and accumulators,
without introducing a dependency on NumPy in the domain layer.

Design intent
-------------
- The domain contracts (`IDecomposableFunction`, `IUpdatePolicy`,
  `IOptimizer`) describe arrays only through this protocol.
- Only the attributes the optimization loop actually relies on are modelled:
  the shape and in-place arithmetic, plus ``__array__`` for conversion.
- ``numpy.ndarray`` is the canonical implementer; the infrastructure layer
  works with it directly.
"""

from __future__ import annotations
from typing import Protocol, Tuple, Any, runtime_checkable


@runtime_checkable
class NDArrayLike(Protocol):
    """
    Structural interface for ndarray-like iterates and gradients.

    Notes
    -----
    - This is a *Protocol*, not a concrete base class.
    - Optimizers mutate iterates in place, so implementers must support the
      augmented assignment operators with element-wise semantics.
    """

    @property
    def shape(self) -> Tuple[int, ...]:
        """
        Shape of the array as a tuple of dimension sizes.
        """
        ...

    def __array__(self, dtype: Any = ...) -> Any:
        """
        Return a backend-native array representation.

        This enables ``np.asarray(obj)`` in the infrastructure layer without
        importing NumPy here.
        """
        ...

    def __isub__(self, other: Any) -> NDArrayLike:
        """
        In-place element-wise subtraction, used to apply updates.
        """
        ...

    def __iadd__(self, other: Any) -> NDArrayLike:
        """
        In-place element-wise addition, used to accumulate policy state.
        """
        ...

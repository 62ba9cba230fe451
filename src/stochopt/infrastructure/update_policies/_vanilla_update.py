"""
Plain gradient-descent update rule.

This is the stateless policy used by `SGD` when no other rule is supplied:
every coordinate moves by ``step_size`` times its gradient component.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from ...domain._update_policy import Shape
from ._base import UpdatePolicyRegistry, as_shape, check_operands


@UpdatePolicyRegistry.register_policy("vanilla")
class VanillaUpdate:
    """
    Vanilla SGD update policy.

    Update rule
    -----------
        p <- p - step_size * g

    Notes
    -----
    - The policy holds no history; `initialize()` only records the iterate
      shape so mismatched gradients are still rejected.
    - `update()` before `initialize()` is allowed and skips the shape check.
    """

    def __init__(self) -> None:
        self._shape: Optional[Tuple[int, ...]] = None

    @property
    def shape(self) -> Optional[Tuple[int, ...]]:
        return self._shape

    def initialize(self, shape: Shape) -> None:
        self._shape = as_shape(shape)

    def update(
        self, iterate: np.ndarray, step_size: float, gradient: np.ndarray
    ) -> None:
        gradient = np.asarray(gradient)
        if self._shape is not None:
            check_operands(self._shape, iterate, gradient)

        # p <- p - lr * g
        iterate -= step_size * gradient

"""
Optimizer configuration.

`SGDConfig` bundles the hyperparameters of the stochastic iteration driver
into a single immutable value. Optimizers store their own copy, so a config
object handed to one optimizer can be reused or modified (via `with_()`)
without affecting runs already configured from it.

Notes
-----
- Values are not validated. A non-positive step size or a negative tolerance
  yields degenerate optimization results rather than an exception.
- ``max_iterations == 0`` means "no iteration limit", never "zero steps".
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional


@dataclass(frozen=True)
class SGDConfig:
    """
    Hyperparameters of the stochastic iteration driver.

    Attributes
    ----------
    step_size : float
        Global step size passed to the update policy. Defaults to 0.01.
    max_iterations : int
        Maximum number of sub-function visits across all passes (one
        iteration is one sample, not one pass). 0 means unbounded.
        Defaults to 100000.
    tolerance : float
        Run converges once the pass-over-pass change of the mean sampled loss
        is ``<= tolerance``. Defaults to 1e-5.
    shuffle : bool
        If True, visit sub-functions in a fresh random order every pass;
        otherwise visit them in index order. Defaults to True.
    seed : int or None
        Seed for the permutation generator. A fixed seed makes shuffled runs
        reproducible. Defaults to None (fresh OS entropy per run).
    """

    step_size: float = 0.01
    max_iterations: int = 100000
    tolerance: float = 1e-5
    shuffle: bool = True
    seed: Optional[int] = None

    def with_(self, **changes: Any) -> SGDConfig:
        """
        Return a copy of this config with the given fields replaced.
        """
        return replace(self, **changes)

"""
AdaGrad optimizer.

AdaGrad is stochastic gradient descent whose step is scaled per coordinate by
the inverse square root of the accumulated squared gradients, performing
larger updates for sparse parameters and smaller updates for frequently
updated ones. This module wires the generic `SGD` driver to `AdaGradUpdate`
and exposes the AdaGrad hyperparameters directly.
"""

from __future__ import annotations

from typing import Optional, Union

from ...domain._objective import IDecomposableFunction
from .._config import SGDConfig
from ..update_policies import AdaGradUpdate
from ._sgd import SGD


class AdaGrad(SGD):
    """
    AdaGrad optimizer for decomposable objectives.

    The defaults are not necessarily good for a given problem; tailor them to
    the task at hand.

    Parameters
    ----------
    function : IDecomposableFunction
        Objective to minimize.
    step_size : float, optional
        Global step size. Defaults to 0.01.
    epsilon : float, optional
        Initial value of the squared-gradient accumulator. Defaults to 1e-8.
    max_iterations : int, optional
        Maximum number of sub-function visits (one iteration is one point,
        not one pass). 0 means no limit. Defaults to 100000.
    tolerance : float, optional
        Convergence threshold on the pass-over-pass change of the mean
        sampled loss. Defaults to 1e-5.
    shuffle : bool, optional
        If True, sub-functions are visited in a fresh random order every
        pass; otherwise in index order. Defaults to True.
    seed : int or None, optional
        Seed for the shuffling generator. Defaults to None.

    Examples
    --------
    >>> opt = AdaGrad(f, step_size=0.99, epsilon=1.0, tolerance=1e-9)
    >>> final_objective = opt.optimize(x0)   # x0 now holds the minimizer
    """

    def __init__(
        self,
        function: IDecomposableFunction,
        step_size: float = 0.01,
        epsilon: float = 1e-8,
        max_iterations: int = 100000,
        tolerance: float = 1e-5,
        shuffle: bool = True,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(
            function,
            update_policy=AdaGradUpdate(epsilon),
            config=SGDConfig(
                step_size=step_size,
                max_iterations=max_iterations,
                tolerance=tolerance,
                shuffle=shuffle,
                seed=seed,
            ),
        )

    @property
    def update_policy(self) -> AdaGradUpdate:
        """The `AdaGradUpdate` instance applied at every iteration."""
        return self._update_policy

    @update_policy.setter
    def update_policy(self, update_policy: Union[AdaGradUpdate, str]) -> None:
        self._ensure_idle("update_policy")
        policy = self._resolve_policy(update_policy)
        if not isinstance(policy, AdaGradUpdate):
            raise TypeError(
                f"AdaGrad requires an AdaGradUpdate policy, got {type(policy).__name__}"
            )
        self._update_policy = policy

    @property
    def epsilon(self) -> float:
        """Value used to initialise the squared-gradient accumulator."""
        return self._update_policy.epsilon

    @epsilon.setter
    def epsilon(self, value: float) -> None:
        self._ensure_idle("epsilon")
        self._update_policy = AdaGradUpdate(value)

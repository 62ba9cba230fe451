"""
Stochastic Gradient Descent (SGD) driver.

This module provides the generic stochastic iteration loop of stochopt. The
driver repeatedly samples one sub-function of a decomposable objective,
computes its gradient and hands it to an update policy, which applies the
actual step to the iterate.

Design notes
------------
- The update rule is a strategy object satisfying `IUpdatePolicy`; the driver
  never inspects its internals. `VanillaUpdate` is used when none is given.
- The iterate is the caller's `numpy.ndarray` and is mutated in place.
- One iteration is one sub-function visit; a *pass* is ``n`` consecutive
  iterations, where ``n = function.num_functions()``.
- Convergence is tested once per pass on the mean of the losses sampled
  during that pass (each evaluated just before its own update).
- When shuffling, a fresh permutation is drawn at the start of every pass
  from a generator created at the start of the run, so runs with the same
  `SGDConfig.seed` are reproducible.
- The loop is strictly sequential with one sample per step.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np

from ...domain._errors import EmptyObjectiveError, OptimizerBusyError
from ...domain._objective import IDecomposableFunction
from ...domain._update_policy import IUpdatePolicy
from .._config import SGDConfig
from ..update_policies import UpdatePolicyRegistry, VanillaUpdate
from ._history import RunHistory, Termination

logger = logging.getLogger(__name__)


class SGD:
    """
    Stochastic Gradient Descent driver with a pluggable update policy.

    For each visited sub-function ``i`` the driver performs:

        loss_i = function.evaluate(p, i)        # convergence signal only
        g      = function.gradient(p, i)
        update_policy.update(p, step_size, g)   # p modified in place

    Parameters
    ----------
    function : IDecomposableFunction
        Objective to minimize.
    update_policy : IUpdatePolicy or str, optional
        Update rule, or the registry name of one (e.g. ``"adagrad"``).
        Defaults to a new `VanillaUpdate`.
    config : SGDConfig, optional
        Driver hyperparameters. Defaults to ``SGDConfig()``.

    Notes
    -----
    - Termination: the run is *converged* when the mean sampled loss of a
      pass differs from the previous pass by at most ``tolerance``, and
      *exhausted* when ``max_iterations > 0`` iterations have been performed.
      Both return the mean objective over all sub-functions at the final
      point; `history` tells them apart.
    - Configuration, policy and function may be replaced between runs but not
      while `optimize()` is executing.
    """

    def __init__(
        self,
        function: IDecomposableFunction,
        update_policy: Optional[Union[IUpdatePolicy, str]] = None,
        config: Optional[SGDConfig] = None,
    ) -> None:
        self._running = False
        self._function = function
        self._update_policy = self._resolve_policy(update_policy)
        self._config = config if config is not None else SGDConfig()
        self._history: Optional[RunHistory] = None

    @staticmethod
    def _resolve_policy(
        update_policy: Optional[Union[IUpdatePolicy, str]],
    ) -> IUpdatePolicy:
        if update_policy is None:
            return VanillaUpdate()
        if isinstance(update_policy, str):
            return UpdatePolicyRegistry.create(update_policy)
        return update_policy

    def _ensure_idle(self, attribute: str) -> None:
        if self._running:
            raise OptimizerBusyError(attribute)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def function(self) -> IDecomposableFunction:
        """The objective minimized by this optimizer."""
        return self._function

    @function.setter
    def function(self, function: IDecomposableFunction) -> None:
        self._ensure_idle("function")
        self._function = function

    @property
    def update_policy(self) -> IUpdatePolicy:
        """The update rule applied at every iteration."""
        return self._update_policy

    @update_policy.setter
    def update_policy(self, update_policy: Union[IUpdatePolicy, str]) -> None:
        self._ensure_idle("update_policy")
        self._update_policy = self._resolve_policy(update_policy)

    @property
    def config(self) -> SGDConfig:
        """The (immutable) driver configuration."""
        return self._config

    @config.setter
    def config(self, config: SGDConfig) -> None:
        self._ensure_idle("config")
        self._config = config.with_()

    @property
    def history(self) -> Optional[RunHistory]:
        """
        Diagnostics of the most recent run (None before the first run).
        """
        return self._history

    @property
    def step_size(self) -> float:
        return self._config.step_size

    @step_size.setter
    def step_size(self, value: float) -> None:
        self._ensure_idle("step_size")
        self._config = self._config.with_(step_size=value)

    @property
    def max_iterations(self) -> int:
        """Maximum number of iterations (0 indicates no limit)."""
        return self._config.max_iterations

    @max_iterations.setter
    def max_iterations(self, value: int) -> None:
        self._ensure_idle("max_iterations")
        self._config = self._config.with_(max_iterations=value)

    @property
    def tolerance(self) -> float:
        return self._config.tolerance

    @tolerance.setter
    def tolerance(self, value: float) -> None:
        self._ensure_idle("tolerance")
        self._config = self._config.with_(tolerance=value)

    @property
    def shuffle(self) -> bool:
        """Whether sub-functions are visited in a fresh random order per pass."""
        return self._config.shuffle

    @shuffle.setter
    def shuffle(self, value: bool) -> None:
        self._ensure_idle("shuffle")
        self._config = self._config.with_(shuffle=value)

    # ------------------------------------------------------------------
    # Optimization
    # ------------------------------------------------------------------

    def optimize(self, iterate: np.ndarray) -> float:
        """
        Minimize the objective starting at ``iterate``.

        Parameters
        ----------
        iterate : np.ndarray
            Starting point, floating dtype. Modified in place to hold the
            final point.

        Returns
        -------
        float
            Mean of ``function.evaluate(iterate, i)`` over all ``i`` at the
            final point.

        Raises
        ------
        TypeError
            If ``iterate`` is not a floating-point ``numpy.ndarray``.
        EmptyObjectiveError
            If the objective has no sub-functions.
        OptimizerBusyError
            If called re-entrantly while a run is already in progress.
        """
        if not isinstance(iterate, np.ndarray):
            raise TypeError(
                f"iterate must be a numpy.ndarray, got {type(iterate).__name__}"
            )
        if not np.issubdtype(iterate.dtype, np.floating):
            raise TypeError(f"iterate must have a floating dtype, got {iterate.dtype}")

        self._ensure_idle("optimize")
        self._running = True
        try:
            return self._run(iterate)
        finally:
            self._running = False

    def _run(self, iterate: np.ndarray) -> float:
        function = self._function
        policy = self._update_policy
        config = self._config

        num_functions = int(function.num_functions())
        if num_functions <= 0:
            raise EmptyObjectiveError(num_functions)

        policy.initialize(iterate.shape)

        history = RunHistory()
        self._history = history

        rng = np.random.default_rng(config.seed)
        if config.shuffle:
            order = rng.permutation(num_functions)
        else:
            order = np.arange(num_functions)

        last_objective = np.inf
        pass_objective = 0.0
        position = 0

        while True:
            i = int(order[position])

            pass_objective += float(function.evaluate(iterate, i))
            gradient = function.gradient(iterate, i)
            policy.update(iterate, config.step_size, gradient)

            history.iterations += 1
            position += 1

            if position == num_functions:
                mean_objective = pass_objective / num_functions
                history.append_pass(mean_objective)
                logger.debug(
                    "Pass %d: mean sampled objective %.10g",
                    history.passes,
                    mean_objective,
                )

                if abs(mean_objective - last_objective) <= config.tolerance:
                    history.termination = Termination.CONVERGED
                    break

                last_objective = mean_objective
                pass_objective = 0.0
                position = 0
                if config.shuffle:
                    order = rng.permutation(num_functions)

            if config.max_iterations > 0 and history.iterations >= config.max_iterations:
                history.termination = Termination.EXHAUSTED
                break

        final_objective = self._mean_objective(iterate, num_functions)
        history.final_objective = final_objective

        if history.termination is Termination.CONVERGED:
            logger.info(
                "SGD converged after %d iterations (%d passes); objective %.10g",
                history.iterations,
                history.passes,
                final_objective,
            )
        else:
            logger.info(
                "SGD exhausted its budget of %d iterations without converging; "
                "objective %.10g",
                config.max_iterations,
                final_objective,
            )
        return final_objective

    def _mean_objective(self, iterate: np.ndarray, num_functions: int) -> float:
        total = 0.0
        for i in range(num_functions):
            total += float(self._function.evaluate(iterate, i))
        return total / num_functions

"""
Precondition-related exceptions for stochopt.

This module defines the runtime errors raised when an optimizer or an update
policy is driven in a way that indicates a caller or driver bug (as opposed to
a numerical problem with the data). These exceptions let the optimization loop
fail fast and clearly instead of silently producing a corrupted iterate.

Numerical degeneracies (NaN/Inf gradients, non-convergence within the
iteration budget, non-positive step sizes) are deliberately *not* represented
here; they surface only through the returned objective value.
"""


class PreconditionError(RuntimeError):
    """
    Base class for precondition violations in stochopt.

    Catching this class catches every error raised by the library for misuse
    of its optimizers and update policies.
    """


class DimensionMismatchError(PreconditionError):
    """
    Raised when an update is requested with an array whose shape differs from
    the shape the update policy was initialized for.

    Attributes
    ----------
    what : str
        Which operand mismatched (e.g., "iterate", "gradient").
    expected : tuple[int, ...]
        Shape recorded by `initialize()`.
    actual : tuple[int, ...]
        Shape of the offending operand.
    """

    def __init__(self, what: str, expected: tuple, actual: tuple) -> None:
        """
        Initialize the DimensionMismatchError.

        Parameters
        ----------
        what : str
            Name of the operand whose shape is wrong.
        expected : tuple
            Shape the policy state was allocated for.
        actual : tuple
            Shape that was received.
        """
        super().__init__(
            f"{what} shape mismatch: policy initialized for {expected}, got {actual}."
        )
        self.what = what
        self.expected = tuple(expected)
        self.actual = tuple(actual)


class PolicyNotInitializedError(PreconditionError):
    """
    Raised when `update()` is called on a stateful update policy before
    `initialize()` has allocated its state.
    """

    def __init__(self, policy: str) -> None:
        super().__init__(
            f"{policy}.update() called before {policy}.initialize()."
        )
        self.policy = policy


class EmptyObjectiveError(PreconditionError):
    """
    Raised when an optimizer is asked to minimize an objective that reports
    zero sub-functions.

    A pass over zero sub-functions has no mean loss, so neither the
    convergence signal nor the final objective value is defined.
    """

    def __init__(self, num_functions: int) -> None:
        super().__init__(
            f"Decomposable objective must have at least one function, got {num_functions}."
        )
        self.num_functions = num_functions


class OptimizerBusyError(PreconditionError):
    """
    Raised when an optimizer's configuration is replaced while a run is in
    progress.

    Attributes
    ----------
    attribute : str
        Name of the setting that was being modified.
    """

    def __init__(self, attribute: str) -> None:
        super().__init__(
            f"Cannot modify '{attribute}' while an optimization run is in progress."
        )
        self.attribute = attribute

"""
Optimization run history.

This module defines lightweight data structures that record what happened
during a single optimizer run: the mean sampled loss of every completed pass,
the number of iterations performed, the terminal state, and the final
objective value.

Design goals
------------
- Minimal surface area: no dependency on objectives or update policies
- Deterministic ordering and explicit pass indexing
- Human-readable and debugger-friendly representation
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Termination(str, Enum):
    """
    Terminal state of an optimization run.

    Both states return the same kind of value from `optimize()`; they differ
    only for diagnostics.
    """

    CONVERGED = "converged"
    EXHAUSTED = "exhausted"


@dataclass
class RunHistory:
    """
    Record of a single optimization run.

    Attributes
    ----------
    pass_losses : List[float]
        Mean sampled loss of each *completed* pass, ordered by pass index.
        A trailing partial pass cut short by the iteration budget is not
        recorded.
    iterations : int
        Total number of sub-function visits performed.
    termination : Termination or None
        How the run ended; None while the run is in progress.
    final_objective : float or None
        Mean objective over all sub-functions at the final point.

    Notes
    -----
    This object is intentionally passive: the optimizer appends values; the
    history performs no aggregation of its own.
    """

    pass_losses: List[float] = field(default_factory=list)
    iterations: int = 0
    termination: Optional[Termination] = None
    final_objective: Optional[float] = None

    def append_pass(self, mean_loss: float) -> None:
        """
        Append the mean sampled loss of a completed pass.
        """
        self.pass_losses.append(float(mean_loss))

    @property
    def passes(self) -> int:
        """Number of completed passes."""
        return len(self.pass_losses)

    @property
    def converged(self) -> bool:
        return self.termination is Termination.CONVERGED

    def __repr__(self) -> str:
        state = self.termination.value if self.termination else "running"
        return (
            f"RunHistory({state}, iterations={self.iterations}, "
            f"passes={self.passes}, final_objective={self.final_objective})"
        )

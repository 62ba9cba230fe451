"""
Update policy public API.

This module aggregates the built-in update rules and registers them into the
`UpdatePolicyRegistry` via import side effects.

Exports
-------
- UpdatePolicyRegistry:
    Name-based registry used to build policies (``"adagrad"``, ``"vanilla"``).
- AdaGradUpdate:
    Per-coordinate adaptive rule scaled by accumulated squared gradients.
- VanillaUpdate:
    Stateless ``p -= step_size * g`` rule.
"""

from ._base import UpdatePolicyRegistry
from ._adagrad_update import AdaGradUpdate
from ._vanilla_update import VanillaUpdate

__all__ = [
    UpdatePolicyRegistry.__name__,
    AdaGradUpdate.__name__,
    VanillaUpdate.__name__,
]

"""
Update policy registry and dispatch utilities.

This module defines `UpdatePolicyRegistry`, which maps string names (e.g.
``"adagrad"``, ``"vanilla"``) to concrete update policy classes so that
optimizers can be configured by name.

Design
------
- Policy classes are registered by string name via a class decorator.
- `create()` builds a *fresh* policy instance on every call; policy state is
  per-run and must never be shared between optimizers.
- The registry only stores classes. Whether a registered class satisfies the
  `IUpdatePolicy` contract is checked structurally at creation time.

Usage example
-------------
Registering a policy:

    @UpdatePolicyRegistry.register_policy("adagrad")
    class AdaGradUpdate:
        ...

Building a policy:

    policy = UpdatePolicyRegistry.create("adagrad", epsilon=1e-8)
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Tuple, Type, TypeVar

import numpy as np

from ...domain._errors import DimensionMismatchError
from ...domain._update_policy import IUpdatePolicy, Shape

T = TypeVar("T", bound=type)


def as_shape(shape: Shape) -> Tuple[int, ...]:
    """
    Normalize an integer dimension or a shape tuple into a shape tuple.
    """
    if isinstance(shape, (int, np.integer)):
        return (int(shape),)
    return tuple(int(s) for s in shape)


def check_operands(
    expected: Tuple[int, ...], iterate: np.ndarray, gradient: np.ndarray
) -> None:
    """
    Raise `DimensionMismatchError` unless both operands have shape `expected`.
    """
    if iterate.shape != expected:
        raise DimensionMismatchError("iterate", expected, iterate.shape)
    if gradient.shape != expected:
        raise DimensionMismatchError("gradient", expected, gradient.shape)


class UpdatePolicyRegistry:
    """
    Class-level registry of update policies.

    Notes
    -----
    - Policies are stored by string name in a class-level mapping.
    - Registration keys must be unique unless ``overwrite=True``.
    """

    POLICIES: ClassVar[Dict[str, Type[Any]]] = {}

    @classmethod
    def register_policy(
        cls, name: str, *, overwrite: bool = False
    ) -> Callable[[T], T]:
        """
        Decorator to register an update policy class under `name`.

        Parameters
        ----------
        name:
            Registry key used to build the policy later.
        overwrite:
            If False (default), raises if `name` is already registered.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Policy name must be a non-empty string")

        def decorator(policy_cls: T) -> T:
            if not overwrite and name in cls.POLICIES:
                raise ValueError(f"Update policy already registered: {name!r}")
            cls.POLICIES[name] = policy_cls
            return policy_cls

        return decorator

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """Return registered policy names (sorted)."""
        return tuple(sorted(cls.POLICIES))

    @classmethod
    def get(cls, name: str) -> Type[Any]:
        """Get a registered policy class by name."""
        try:
            return cls.POLICIES[name]
        except KeyError as e:
            available = ", ".join(sorted(cls.POLICIES)) or "<none>"
            raise ValueError(
                f"Unsupported update policy name: {name!r}. "
                f"Available: {available}"
            ) from e

    @classmethod
    def create(cls, name: str, **kwargs: Any) -> IUpdatePolicy:
        """
        Build a new policy instance registered under `name`.

        Parameters
        ----------
        name:
            Registry key of the policy.
        **kwargs:
            Forwarded to the policy constructor (e.g., ``epsilon``).

        Raises
        ------
        ValueError
            If `name` is not registered.
        TypeError
            If the registered class does not satisfy `IUpdatePolicy`.
        """
        policy = cls.get(name)(**kwargs)
        if not isinstance(policy, IUpdatePolicy):
            raise TypeError(
                f"Registered policy {name!r} does not implement IUpdatePolicy"
            )
        return policy

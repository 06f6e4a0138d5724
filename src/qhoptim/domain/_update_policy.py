"""
Domain-level contract for update policies.

An update policy turns the gradient observed at the current iterate into the
delta the driver adds to that iterate. Plain SGD, Adam and QHAdam differ only
in their policy; they all share the same mini-batch driver loop.

Notes
-----
- Policies own their state (moment accumulators, step counters) explicitly.
  Nothing is stored globally, and `reset()` is the only way to return a
  policy to its freshly-initialized state.
- Policies never raise for numerical reasons. NaN/Inf in a gradient flow
  into the returned delta unchanged.
"""

from __future__ import annotations

from typing import Any, Tuple, Protocol, runtime_checkable


@runtime_checkable
class IUpdatePolicy(Protocol):
    """
    Update policy contract.

    Required members
    ----------------
    - `initialize(shape)` allocates zeroed state for an iterate shape.
    - `compute_delta(gradient)` advances the state by one step and returns
      the delta to apply.
    - `reset()` zeroes the state without changing its shape.
    - `iteration` reports how many steps have been taken since the last
      initialize/reset.
    - `step_size` is a plain mutable attribute.
    """

    step_size: float

    def initialize(self, shape: Tuple[int, ...]) -> None:
        """
        Allocate zeroed state for iterates of the given shape.
        """
        ...

    def compute_delta(self, gradient: Any) -> Any:
        """
        Advance the policy by one step and return the delta for the iterate.
        """
        ...

    def reset(self) -> None:
        """
        Zero all accumulators and the step counter.
        """
        ...

    @property
    def iteration(self) -> int:
        """
        Return the number of steps taken since the last initialize/reset.
        """
        ...

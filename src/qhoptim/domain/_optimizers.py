"""
Domain-level optimizer contracts for qhoptim.

This module defines the `IOptimizer` protocol, which specifies the minimal
interface required for optimizer implementations (e.g., SGD, Adam, QHAdam).

Notes
-----
- Domain contracts are backend-agnostic and must not depend on NumPy or
  infrastructure implementations.
- Optimizers drive a decomposable objective towards a minimum by mutating a
  caller-owned iterate in place. How the objective computes its gradient is
  outside the scope of this protocol.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol, runtime_checkable

from ._function import IDecomposableFunction


@runtime_checkable
class IOptimizer(Protocol):
    """
    Optimizer interface contract.

    Required methods
    ----------------
    - `optimize(function, iterate, callbacks)` runs the optimizer until a
      termination condition is met and returns the final objective value.
    """

    def optimize(
        self,
        function: IDecomposableFunction,
        iterate: Any,
        callbacks: Iterable[object] = (),
    ) -> float:
        """
        Minimize `function` starting from `iterate`.

        The iterate is modified in place to hold the final point.
        """
        ...

    @property
    def iteration(self) -> int:
        """
        Return the number of update steps taken by the most recent call.
        """
        ...

"""
Domain-level contract for decomposable objective functions.

A decomposable (separable) objective is a sum of sub-functions, one per
sample or term:

    f(x) = sum_i f_i(x)

Stochastic optimizers only ever look at a batch of those sub-functions at a
time. This module defines the minimal surface the driver loop needs from
such an objective.

Notes
-----
- Domain contracts are backend-agnostic; arrays are described as `Any`
  here even though every bundled implementation uses NumPy.
- The batch is identified by an explicit index array. The driver owns the
  visiting order (and its shuffling), so an objective never has to keep
  permutation state of its own.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, runtime_checkable


@runtime_checkable
class IDecomposableFunction(Protocol):
    """
    Separable objective function contract.

    Required methods
    ----------------
    - `num_functions()` returns the number of sub-functions.
    - `num_parameters()` returns the number of scalar parameters expected
      in the iterate.
    - `evaluate(iterate, indices)` returns the summed objective of a batch.
    - `evaluate_with_gradient(iterate, indices)` returns the summed
      objective and the summed gradient of a batch.
    """

    def num_functions(self) -> int:
        """
        Return the number of separable sub-functions.
        """
        ...

    def num_parameters(self) -> int:
        """
        Return the number of scalar parameters the objective expects.
        """
        ...

    def evaluate(self, iterate: Any, indices: Any) -> float:
        """
        Evaluate the sum of the sub-functions selected by `indices`.

        Parameters
        ----------
        iterate : Any
            Current parameter values.
        indices : Any
            One-dimensional integer array of sub-function indices.

        Returns
        -------
        float
            Summed objective value over the batch.
        """
        ...

    def evaluate_with_gradient(self, iterate: Any, indices: Any) -> Tuple[float, Any]:
        """
        Evaluate the objective and its gradient for a batch of sub-functions.

        Parameters
        ----------
        iterate : Any
            Current parameter values.
        indices : Any
            One-dimensional integer array of sub-function indices.

        Returns
        -------
        tuple[float, Any]
            Summed objective value and summed gradient. The gradient has the
            same shape as `iterate`.
        """
        ...

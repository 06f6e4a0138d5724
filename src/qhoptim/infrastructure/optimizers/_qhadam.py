"""
QHAdam optimizer.

This module wires the `QHAdamUpdate` policy into the generic `SGD` driver and
exposes every hyperparameter through a single mutable configuration object,
`QHAdamConfig`.

QHAdam is sensitive to its hyperparameters; the defaults (v1=0.7, v2=1.0)
are a reasonable starting point but will not fit every problem.

Design notes
------------
- Ranges are validated once, when a `QHAdamConfig` is constructed.
  Changing fields afterwards is plain attribute assignment and is not
  re-validated.
- `optimize()` copies the current configuration into the driver and the
  policy before every call, so edits to `config` take effect on the next
  call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..policies._qhadam_update import QHAdamUpdate
from ._configured import ConfiguredOptimizer, validate_common


@dataclass
class QHAdamConfig:
    """
    Hyperparameters of the QHAdam optimizer.

    Attributes
    ----------
    step_size : float
        Step size for each iteration. Must be > 0.
    batch_size : int
        Number of sub-functions processed in a single step. Must be >= 1.
    v1 : float
        First quasi-hyperbolic term (weight of the momentum in the numerator).
    v2 : float
        Second quasi-hyperbolic term (weight of the smoothed second moment
        in the denominator).
    beta1 : float
        Decay rate of the first moment estimate, in [0, 1).
    beta2 : float
        Decay rate of the second moment estimate, in [0, 1).
    epsilon : float
        Term added to the denominator. Must be > 0.
    max_iterations : int
        Maximum number of update steps (0 means no limit). Must be >= 0.
    tolerance : float
        Epoch-to-epoch objective change below which the run stops.
        Must be >= 0.
    shuffle : bool
        Whether sub-functions are visited in a shuffled order.
    reset_policy : bool
        Whether the moment estimates are reset before every `optimize()` call.
    exact_objective : bool
        Whether to compute the full objective at the final point.
    seed : Optional[int]
        Seed of the shuffling generator.
    """

    step_size: float = 0.001
    batch_size: int = 32
    v1: float = 0.7
    v2: float = 1.0
    beta1: float = 0.9
    beta2: float = 0.999
    epsilon: float = 1e-8
    max_iterations: int = 100000
    tolerance: float = 1e-5
    shuffle: bool = True
    reset_policy: bool = True
    exact_objective: bool = False
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """
        Validate hyperparameter ranges.

        Raises
        ------
        ValueError
            If any hyperparameter is outside its valid range.
        """
        validate_common(self)


class QHAdam(ConfiguredOptimizer):
    """
    Quasi-hyperbolic Adam optimizer for separable objectives.

    Examples
    --------
    >>> opt = QHAdam(step_size=0.01, batch_size=1, shuffle=False)
    >>> opt.config.max_iterations = 500
    >>> final = opt.optimize(function, iterate)  # doctest: +SKIP
    """

    config_class = QHAdamConfig

    def _make_policy(self) -> QHAdamUpdate:
        return QHAdamUpdate()

    def _sync_policy(self, policy: QHAdamUpdate) -> None:
        cfg = self.config
        policy.v1 = float(cfg.v1)
        policy.v2 = float(cfg.v2)
        policy.beta1 = float(cfg.beta1)
        policy.beta2 = float(cfg.beta2)
        policy.epsilon = float(cfg.epsilon)

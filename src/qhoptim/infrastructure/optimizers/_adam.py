"""
Adam optimizer.

This module contains only Adam: the `AdamUpdate` policy plugged into the
`SGD` driver, configured through `AdamConfig`. It mirrors `QHAdam` without
the quasi-hyperbolic weights.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..policies._adam_update import AdamUpdate
from ._configured import ConfiguredOptimizer, validate_common


@dataclass
class AdamConfig:
    """
    Hyperparameters of the Adam optimizer.

    See `QHAdamConfig` for the meaning of each field; the ranges are the same.
    """

    step_size: float = 0.001
    batch_size: int = 32
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
        validate_common(self)


class Adam(ConfiguredOptimizer):
    """
    Adam optimizer for separable objectives.
    """

    config_class = AdamConfig

    def _make_policy(self) -> AdamUpdate:
        return AdamUpdate()

    def _sync_policy(self, policy: AdamUpdate) -> None:
        cfg = self.config
        policy.beta1 = float(cfg.beta1)
        policy.beta2 = float(cfg.beta2)
        policy.epsilon = float(cfg.epsilon)

"""
Shared plumbing for configuration-driven optimizers.

`QHAdam` and `Adam` are thin wrappers: a validated configuration dataclass
plus an `SGD` driver around one update policy. This module holds the parts
they have in common, namely the range checks for the driver-level
hyperparameters and the copy of those values into the driver before every
call.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, Optional

import numpy as np

from ...domain._function import IDecomposableFunction
from ...domain._update_policy import IUpdatePolicy
from ._sgd import SGD


def validate_common(cfg: Any) -> None:
    """
    Validate the hyperparameters shared by every adaptive-moment config.

    Raises
    ------
    ValueError
        If any hyperparameter is outside its valid range.
    """
    if cfg.step_size <= 0.0:
        raise ValueError(f"step_size must be > 0, got {cfg.step_size}")
    if cfg.batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {cfg.batch_size}")
    if not (0.0 <= cfg.beta1 < 1.0) or not (0.0 <= cfg.beta2 < 1.0):
        raise ValueError(
            f"beta1 and beta2 must be in [0,1), got ({cfg.beta1}, {cfg.beta2})"
        )
    if cfg.epsilon <= 0.0:
        raise ValueError(f"epsilon must be > 0, got {cfg.epsilon}")
    if cfg.max_iterations < 0:
        raise ValueError(f"max_iterations must be >= 0, got {cfg.max_iterations}")
    if cfg.tolerance < 0.0:
        raise ValueError(f"tolerance must be >= 0, got {cfg.tolerance}")


class ConfiguredOptimizer:
    """
    Base for optimizers built from a config dataclass and an update policy.

    Subclasses set `config_class`, implement `_make_policy()` and copy their
    policy-specific fields in `_sync_policy()`.
    """

    config_class: type = object

    def __init__(self, config: Optional[Any] = None, **overrides) -> None:
        """
        Parameters
        ----------
        config : optional
            Initial configuration. Defaults to `config_class()`.
        **overrides
            Field values replacing those of `config`. They are validated
            together with the rest of the configuration.
        """
        if config is None:
            config = self.config_class(**overrides)
        elif overrides:
            config = replace(config, **overrides)
        self.config = config

        self._driver = SGD(self._make_policy())
        self._sync()

    def _make_policy(self) -> IUpdatePolicy:
        raise NotImplementedError

    def _sync_policy(self, policy: Any) -> None:
        raise NotImplementedError

    @property
    def driver(self) -> SGD:
        return self._driver

    @property
    def update_policy(self) -> Any:
        return self._driver.update_policy

    @property
    def iteration(self) -> int:
        """
        Number of update steps taken by the most recent `optimize()` call.
        """
        return self._driver.iteration

    def _sync(self) -> None:
        cfg = self.config
        self._sync_policy(self.update_policy)

        drv = self._driver
        drv.step_size = float(cfg.step_size)
        drv.batch_size = int(cfg.batch_size)
        drv.max_iterations = int(cfg.max_iterations)
        drv.tolerance = float(cfg.tolerance)
        drv.shuffle = bool(cfg.shuffle)
        drv.reset_policy = bool(cfg.reset_policy)
        drv.exact_objective = bool(cfg.exact_objective)
        drv.seed = cfg.seed

    def optimize(
        self,
        function: IDecomposableFunction,
        iterate: np.ndarray,
        callbacks: Iterable[object] = (),
    ) -> float:
        """
        Optimize `function`, modifying `iterate` in place.

        The current configuration is copied into the driver and the policy
        first, so edits to `config` take effect on this call.

        Parameters
        ----------
        function : IDecomposableFunction
            Separable objective to minimize.
        iterate : np.ndarray
            Starting point (will be modified).
        callbacks : Iterable[object], optional
            Optimization callbacks.

        Returns
        -------
        float
            Objective value of the final point.
        """
        self._sync()
        return self._driver._run(function, iterate, callbacks, stacklevel=4)

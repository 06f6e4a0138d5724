"""
Progress-reporting and early-stopping callbacks.
"""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

import numpy as np


class PrintLoss:
    """
    Print the summed objective after every epoch.

    Parameters
    ----------
    stream : Optional[TextIO], optional
        Output stream. Defaults to `sys.stdout` at print time.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def end_epoch(
        self,
        optimizer: Any,
        function: Any,
        iterate: Any,
        epoch: int,
        objective: float,
    ) -> bool:
        parts = [
            f"Epoch {epoch + 1}",
            f"objective: {objective:.6f}",
            f"steps: {optimizer.iteration}",
        ]
        print(" - ".join(parts), file=self.stream or sys.stdout)
        return False


class EarlyStopAtMinLoss:
    """
    Stop when the epoch objective has not improved for `patience` epochs.

    Parameters
    ----------
    patience : int, optional
        Number of non-improving epochs tolerated. Must be >= 1. Defaults to 10.

    Attributes
    ----------
    best_objective : float
        Lowest epoch objective seen in the current run.
    """

    def __init__(self, patience: int = 10) -> None:
        if patience < 1:
            raise ValueError(f"patience must be >= 1, got {patience}")
        self.patience = int(patience)
        self.best_objective = np.inf
        self._wait = 0

    def begin_optimization(self, optimizer: Any, function: Any, iterate: Any) -> None:
        self.best_objective = np.inf
        self._wait = 0

    def end_epoch(
        self,
        optimizer: Any,
        function: Any,
        iterate: Any,
        epoch: int,
        objective: float,
    ) -> bool:
        if objective < self.best_objective:
            self.best_objective = float(objective)
            self._wait = 0
            return False

        self._wait += 1
        return self._wait >= self.patience

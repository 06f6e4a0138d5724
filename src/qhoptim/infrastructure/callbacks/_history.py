"""
Optimization history utilities.

This module defines a lightweight callback that records the summed objective
of every completed epoch, in a manner similar to Keras' `History` object.

Design goals
------------
- Minimal surface area: no dependency on the optimizer internals beyond the
  callback hooks
- Deterministic ordering and explicit epoch indexing
- Human-readable and debugger-friendly representation
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class History:
    """
    Callback collecting per-epoch optimization metrics.

    Attributes
    ----------
    history : Dict[str, List[float]]
        Mapping from metric name to a list of per-epoch values. The driver
        reports ``"objective"`` (summed epoch objective).
    epoch : List[int]
        Zero-based epoch indices corresponding to entries in `history`.
    steps : List[int]
        Cumulative update steps at the end of each recorded epoch.

    Notes
    -----
    - Metric values are stored as Python `float`; step counts as `int`.
    - The callback never asks the driver to stop.
    """

    history: Dict[str, List[float]] = field(default_factory=dict)
    epoch: List[int] = field(default_factory=list)
    steps: List[int] = field(default_factory=list)

    def begin_optimization(self, optimizer: Any, function: Any, iterate: Any) -> None:
        """
        Clear records from a previous run.
        """
        self.history.clear()
        self.epoch.clear()
        self.steps.clear()

    def end_epoch(
        self,
        optimizer: Any,
        function: Any,
        iterate: Any,
        epoch: int,
        objective: float,
    ) -> bool:
        self.epoch.append(int(epoch))
        self.history.setdefault("objective", []).append(float(objective))
        self.steps.append(int(optimizer.iteration))
        return False

    def last(self) -> Dict[str, float]:
        """
        Return metrics from the most recent epoch.

        Returns
        -------
        Dict[str, float]
            Mapping from metric name to its latest recorded value.
            Metrics with no recorded values are omitted.
        """
        out: Dict[str, float] = {}
        for k, vs in self.history.items():
            if vs:
                out[k] = float(vs[-1])
        return out

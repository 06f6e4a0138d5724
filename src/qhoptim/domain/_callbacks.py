"""
Domain-level contract for optimization callbacks.

Callbacks observe an optimization run from the outside. Every hook is
optional: the driver only calls the ones a callback object defines. Any hook
except `end_optimization` may return True to ask the driver to stop.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol


class IOptimizationCallback(Protocol):
    """
    Optimization callback contract.

    Hooks
    -----
    - `begin_optimization(optimizer, function, iterate)`
    - `step_taken(optimizer, function, iterate, objective)`
    - `end_epoch(optimizer, function, iterate, epoch, objective)`
    - `end_optimization(optimizer, function, iterate)`

    Notes
    -----
    The protocol lists all hooks for documentation purposes. Concrete
    callbacks may implement any subset of them; the driver checks with
    `getattr` before calling.
    """

    def begin_optimization(
        self, optimizer: Any, function: Any, iterate: Any
    ) -> Optional[bool]: ...

    def step_taken(
        self, optimizer: Any, function: Any, iterate: Any, objective: float
    ) -> Optional[bool]: ...

    def end_epoch(
        self,
        optimizer: Any,
        function: Any,
        iterate: Any,
        epoch: int,
        objective: float,
    ) -> Optional[bool]: ...

    def end_optimization(self, optimizer: Any, function: Any, iterate: Any) -> None: ...

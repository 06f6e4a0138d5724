"""
Generic mini-batch stochastic optimization driver.

This module provides `SGD`, the outer loop shared by every update policy
(plain SGD, Adam, QHAdam). The driver selects batches of sub-functions,
asks the objective for the batch gradient at the current iterate, passes
that gradient to its update policy and adds the returned delta to the
iterate in place.

Design notes
------------
- The driver is parameterized by an `IUpdatePolicy` instance rather than
  subclassed per algorithm. Swapping the policy swaps the algorithm.
- The driver owns the visiting order of the sub-functions. Batches are
  contiguous slices of that order; with `shuffle=True` the order is
  permuted at the start of every epoch.
- `max_iterations` counts update steps (processed batches), not samples.
- Convergence is only checked when an epoch completes, by comparing the
  summed objective of that epoch with the previous one.
- Non-finite objectives or gradients are not detected. They propagate into
  the iterate and the returned value.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from ...domain._errors import ConfigurationError, DimensionMismatchError
from ...domain._function import IDecomposableFunction
from ...domain._update_policy import IUpdatePolicy


def _notify(callbacks: List[object], hook: str, *args) -> bool:
    """
    Invoke `hook` on every callback that defines it.

    Returns
    -------
    bool
        True if at least one callback asked the driver to stop.
    """
    stop = False
    for cb in callbacks:
        fn = getattr(cb, hook, None)
        if fn is not None and fn(*args):
            stop = True
    return stop


@dataclass
class SGD:
    """
    Mini-batch stochastic optimization driver.

    Parameters
    ----------
    update_policy : IUpdatePolicy
        Policy converting gradients into iterate deltas.
    step_size : float, optional
        Step size pushed into the policy at the start of every call.
        Defaults to 0.01.
    batch_size : int, optional
        Number of sub-functions per step. Defaults to 32.
    max_iterations : int, optional
        Maximum number of update steps; 0 means no limit. Defaults to 100000.
    tolerance : float, optional
        Stop when the summed objective of two consecutive epochs differs by
        less than this value. Defaults to 1e-5.
    shuffle : bool, optional
        Visit sub-functions in a random order, reshuffled every epoch.
        Defaults to True.
    reset_policy : bool, optional
        Reset the policy state at the start of every `optimize()` call.
        Defaults to True.
    exact_objective : bool, optional
        Return the objective over all sub-functions at the final iterate
        instead of the last epoch's running sum. Defaults to False.
    seed : Optional[int], optional
        Seed of the generator used for shuffling. Defaults to None.

    Notes
    -----
    All hyperparameters are plain attributes and may be changed between
    calls. The policy state survives across calls when `reset_policy` is
    False and the iterate shape does not change.
    """

    update_policy: IUpdatePolicy
    step_size: float = 0.01
    batch_size: int = 32
    max_iterations: int = 100000
    tolerance: float = 1e-5
    shuffle: bool = True
    reset_policy: bool = True
    exact_objective: bool = False
    seed: Optional[int] = None

    def __init__(
        self,
        update_policy: IUpdatePolicy,
        *,
        step_size: float = 0.01,
        batch_size: int = 32,
        max_iterations: int = 100000,
        tolerance: float = 1e-5,
        shuffle: bool = True,
        reset_policy: bool = True,
        exact_objective: bool = False,
        seed: Optional[int] = None,
    ) -> None:
        self.update_policy = update_policy
        self.step_size = float(step_size)
        self.batch_size = int(batch_size)
        self.max_iterations = int(max_iterations)
        self.tolerance = float(tolerance)
        self.shuffle = bool(shuffle)
        self.reset_policy = bool(reset_policy)
        self.exact_objective = bool(exact_objective)
        self.seed = seed

        self._iteration = 0
        self._epoch = 0
        self._policy_shape: Optional[Tuple[int, ...]] = None

    @property
    def iteration(self) -> int:
        """
        Number of update steps taken by the most recent `optimize()` call.
        """
        return self._iteration

    @property
    def epoch(self) -> int:
        """
        Number of epochs completed by the most recent `optimize()` call.
        """
        return self._epoch

    def _check_inputs(
        self,
        function: IDecomposableFunction,
        iterate: np.ndarray,
        stacklevel: int = 2,
    ) -> int:
        """
        Validate the call inputs and return the number of sub-functions.

        `stacklevel` is forwarded to `warnings.warn` so that warnings point
        at the caller of the public `optimize()` entry point.

        Raises
        ------
        ConfigurationError
            If the iterate is not a floating NumPy array, the batch size is
            smaller than one, or the objective has no sub-functions.
        DimensionMismatchError
            If the iterate size differs from the objective's parameter count.
        """
        if not isinstance(iterate, np.ndarray) or not np.issubdtype(
            iterate.dtype, np.floating
        ):
            raise ConfigurationError(
                f"iterate must be a floating-point numpy.ndarray, got {type(iterate).__name__}"
                + (f" of dtype {iterate.dtype}" if isinstance(iterate, np.ndarray) else "")
            )

        expected = int(function.num_parameters())
        if iterate.size != expected:
            raise DimensionMismatchError(expected, int(iterate.size))

        if self.batch_size < 1:
            raise ConfigurationError(f"batch_size must be >= 1, got {self.batch_size}")

        num_functions = int(function.num_functions())
        if num_functions < 1:
            raise ConfigurationError("objective must have at least one sub-function")

        if self.batch_size > num_functions:
            warnings.warn(
                f"batch_size ({self.batch_size}) exceeds the number of functions "
                f"({num_functions}); batches are clamped to {num_functions}.",
                RuntimeWarning,
                stacklevel=stacklevel,
            )
        return num_functions

    def _prepare_policy(self, shape: Tuple[int, ...]) -> None:
        """
        Bring the policy into the state required at the start of a call.

        Notes
        -----
        The policy's own moment shape is checked as well as the shape seen on
        the previous call, since `update_policy` may have been replaced by a
        policy that already holds state for another shape.
        """
        policy = self.update_policy
        policy.step_size = self.step_size
        moments = getattr(policy, "first_moment", None)
        stale = moments is not None and np.shape(moments) != tuple(shape)
        if self._policy_shape != shape or stale:
            policy.initialize(shape)
            self._policy_shape = shape
        elif self.reset_policy:
            policy.reset()

    def _full_objective(
        self, function: IDecomposableFunction, iterate: np.ndarray, num_functions: int
    ) -> float:
        """
        Evaluate the objective over all sub-functions, batch by batch.
        """
        total = 0.0
        for begin in range(0, num_functions, self.batch_size):
            end = min(begin + self.batch_size, num_functions)
            total += float(function.evaluate(iterate, np.arange(begin, end)))
        return total

    def optimize(
        self,
        function: IDecomposableFunction,
        iterate: np.ndarray,
        callbacks: Iterable[object] = (),
    ) -> float:
        """
        Minimize `function` starting from `iterate`.

        Parameters
        ----------
        function : IDecomposableFunction
            Separable objective to minimize.
        iterate : np.ndarray
            Starting point. Modified in place to hold the final point.
        callbacks : Iterable[object], optional
            Objects implementing any subset of the `IOptimizationCallback`
            hooks.

        Returns
        -------
        float
            Summed objective of the last completed epoch (the running sum of
            the current epoch if none completed), or the full objective at the
            final iterate when `exact_objective` is set.

        Raises
        ------
        ConfigurationError
            If the inputs are invalid (see `_check_inputs`).
        """
        return self._run(function, iterate, callbacks, stacklevel=4)

    def _run(
        self,
        function: IDecomposableFunction,
        iterate: np.ndarray,
        callbacks: Iterable[object],
        stacklevel: int,
    ) -> float:
        """
        Body of `optimize()`.

        Wrappers call this directly with the same `stacklevel` as `optimize()`
        (warn -> `_check_inputs` -> `_run` -> entry point -> user), so the
        warnings point at the user's call from either entry point.
        """
        num_functions = self._check_inputs(function, iterate, stacklevel=stacklevel)
        callbacks = list(callbacks)

        self._prepare_policy(iterate.shape)
        policy = self.update_policy

        rng = np.random.default_rng(self.seed)
        ordering = np.arange(num_functions)
        if self.shuffle:
            rng.shuffle(ordering)

        self._iteration = 0
        self._epoch = 0
        position = 0
        epoch_objective = 0.0
        last_objective = np.inf

        stop = _notify(callbacks, "begin_optimization", self, function, iterate)

        while not stop and (
            self.max_iterations == 0 or self._iteration < self.max_iterations
        ):
            effective = min(self.batch_size, num_functions - position)
            indices = ordering[position : position + effective]

            objective, gradient = function.evaluate_with_gradient(iterate, indices)
            iterate += policy.compute_delta(gradient)

            self._iteration += 1
            position += effective
            epoch_objective += float(objective)

            stop = _notify(callbacks, "step_taken", self, function, iterate, objective)

            if position < num_functions:
                continue

            # epoch boundary
            stop = (
                _notify(
                    callbacks,
                    "end_epoch",
                    self,
                    function,
                    iterate,
                    self._epoch,
                    epoch_objective,
                )
                or stop
            )
            converged = abs(last_objective - epoch_objective) < self.tolerance
            last_objective = epoch_objective
            epoch_objective = 0.0
            position = 0
            self._epoch += 1

            if converged:
                break
            if self.shuffle:
                rng.shuffle(ordering)

        _notify(callbacks, "end_optimization", self, function, iterate)

        if self.exact_objective:
            return self._full_objective(function, iterate, num_functions)
        if self._epoch == 0:
            return epoch_objective
        return float(last_objective)

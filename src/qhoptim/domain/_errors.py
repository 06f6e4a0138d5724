"""
Configuration-related exceptions for qhoptim.

This module defines the errors raised when an optimization run is set up
with inputs that cannot work together, for example an iterate whose size
does not match the number of parameters expected by the objective. They are
raised once, at `optimize()` entry, before any optimizer state is touched.

Numerical problems (division by near-zero, NaN/Inf in gradients) are not
represented here: they are absorbed by the epsilon term or propagate into
the iterate unchanged.
"""


class ConfigurationError(ValueError):
    """
    Raised when an optimization call is configured with invalid inputs.

    Typical causes are an iterate that is not a floating-point NumPy array,
    or a batch size smaller than one at the time `optimize()` is entered.
    The error is fatal to the call that raised it and is never retried.
    """


class DimensionMismatchError(ConfigurationError):
    """
    Raised when the iterate size disagrees with the objective's parameter count.

    Attributes
    ----------
    expected : int
        Number of parameters the objective function expects.
    actual : int
        Number of elements in the iterate supplied by the caller.
    """

    def __init__(self, expected: int, actual: int) -> None:
        """
        Initialize the DimensionMismatchError.

        Parameters
        ----------
        expected : int
            Parameter count reported by the objective function.
        actual : int
            Element count of the supplied iterate.
        """
        super().__init__(
            f"Iterate has {actual} elements but the objective expects {expected}."
        )
        self.expected = expected
        self.actual = actual

"""Error classes that are thrown from the British National Grid package."""

from typing import Any

__all__ = ("Error", "ConvergenceError", "DatumMismatchError")


class Error(RuntimeError):
    """Base class for all exceptions that are thrown from the British
    National Grid package.
    """

    pass


class ConvergenceError(Error):
    """Error thrown when an iterative computation did not reach its
    tolerance within the allowed number of iterations. This typically means
    that the input is outside the valid domain of the projection or is
    numerically degenerate (e.g., NaN).
    """

    def __init__(self, what: str, iterations: int, value: Any = None):
        """Constructor.

        Parameters:
            what: short description of the computation that did not converge
            iterations: the number of iterations that were performed
            value: the last value of the iteration
        """
        super().__init__(
            f"{what} did not converge after {iterations} iterations "
            f"(last value = {value!r})"
        )
        self.what = what
        self.iterations = iterations
        self.value = value


class DatumMismatchError(Error):
    """Error thrown when a coordinate expressed on one ellipsoid is passed
    to a transformation that is bound to another one.
    """

    def __init__(self, expected, actual):
        super().__init__(
            f"Expected coordinate on {expected.name}, got one on {actual.name}"
        )
        self.expected = expected
        self.actual = actual

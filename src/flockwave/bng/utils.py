"""Utility functions that do not fit elsewhere."""

import logging

from typing import Callable, TypeVar

from .errors import ConvergenceError

__all__ = ("iterate_until_converged",)

T = TypeVar("T")

log = logging.getLogger(__name__)


def iterate_until_converged(
    step: Callable[[T], T],
    initial: T,
    converged: Callable[[T], bool],
    *,
    max_iterations: int,
    what: str = "Iteration",
) -> T:
    """Runs a fixed-point iteration with a hard limit on the number of
    steps.

    The convergence criterion is evaluated on the initial value and after
    every step, so an initial value that already satisfies the criterion is
    returned as is.

    Parameters:
        step: function that maps the current state of the iteration to the
            next one
        initial: the initial state of the iteration
        converged: predicate that decides whether the given state is
            accurate enough
        max_iterations: the maximum number of steps to take
        what: human-readable name of the computation, used in log messages
            and in the exception

    Returns:
        the first state that satisfied the convergence criterion

    Raises:
        ConvergenceError: if the criterion was not satisfied within the
            allowed number of steps
    """
    value = initial
    for iteration in range(max_iterations + 1):
        if converged(value):
            log.debug("%s converged after %d iterations", what, iteration)
            return value
        if iteration < max_iterations:
            value = step(value)

    log.warning(f"{what} did not converge after {max_iterations} iterations")
    raise ConvergenceError(what, max_iterations, value)

"""statdist.core.errors

Exception types raised by the special-function engines and distributions.

- DomainError: an argument violates a documented precondition. Always raised
  before any iterative work starts.
- MaxIterationsExceeded: a series or continued-fraction evaluation did not
  reach machine precision within its iteration budget.

Both derive from StatisticsError so callers can catch everything at once.
"""

from __future__ import annotations

from typing import Optional


class StatisticsError(Exception):
    """Base class for all statdist errors."""


class DomainError(StatisticsError, ValueError):
    """An input is outside the domain of the requested operation."""


class MaxIterationsExceeded(StatisticsError, ArithmeticError):
    """A convergence loop ran out of iterations.

    Attributes:
        iterations: iteration budget that was exhausted
        method: name of the evaluation strategy that failed
    """

    def __init__(self, message: str = "", iterations: Optional[int] = None, method: str = ""):
        if not message:
            message = f"{method or 'evaluation'} did not converge"
            if iterations is not None:
                message += f" within {iterations} iterations"
        super().__init__(message)
        self.iterations = iterations
        self.method = method

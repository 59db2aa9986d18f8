"""
Evaluation options for the special-function engines.

This module defines the iteration budgets and regime switches used by the
incomplete gamma and inverse error function routines.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class EvaluationOptions:
    """
    Configuration options for special-function evaluation.

    Attributes:
        max_iterations: Iteration budget for the incomplete gamma series and
            continued fraction (default: 100)
        large_parameter_switch: Shape parameter from which P(a, x) is evaluated
            by Gauss-Legendre quadrature instead of series/continued fraction
            (default: 100)
        newton_iterations: Maximum Newton refinements for the inverse
            incomplete gamma function (default: 12)
        erf_newton_iterations: Fixed number of Newton refinements for the
            inverse complementary error function (default: 2)
    """

    max_iterations: int = 100
    large_parameter_switch: int = 100
    newton_iterations: int = 12
    erf_newton_iterations: int = 2

    def __post_init__(self):
        """Validate options after initialization."""
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")

        if self.large_parameter_switch < 2:
            raise ValueError("large_parameter_switch must be at least 2")

        if self.newton_iterations < 0:
            raise ValueError("newton_iterations cannot be negative")

        if self.erf_newton_iterations < 0:
            raise ValueError("erf_newton_iterations cannot be negative")

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "max_iterations": self.max_iterations,
            "large_parameter_switch": self.large_parameter_switch,
            "newton_iterations": self.newton_iterations,
            "erf_newton_iterations": self.erf_newton_iterations,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EvaluationOptions":
        """
        Create options from dictionary.

        Unknown keys are ignored; missing keys take their default values.

        Args:
            data: Dictionary with option values

        Returns:
            EvaluationOptions instance
        """
        defaults = cls()
        return cls(
            max_iterations=int(data.get("max_iterations", defaults.max_iterations)),
            large_parameter_switch=int(
                data.get("large_parameter_switch", defaults.large_parameter_switch)
            ),
            newton_iterations=int(data.get("newton_iterations", defaults.newton_iterations)),
            erf_newton_iterations=int(
                data.get("erf_newton_iterations", defaults.erf_newton_iterations)
            ),
        )


DEFAULT_OPTIONS = EvaluationOptions()

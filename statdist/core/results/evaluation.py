"""
Result classes for special-function evaluation.

The incomplete gamma routines compute log Gamma(a) as a by-product. Instead of
stashing it on a mutable evaluator, it is returned next to the probabilities.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    return value


@dataclass(frozen=True)
class IncompleteGammaResult:
    """
    Regularized incomplete gamma function values for one (a, x) pair.

    Attributes:
        a: shape parameter
        x: integration limit
        p: lower regularized incomplete gamma P(a, x)
        q: upper regularized incomplete gamma Q(a, x) = 1 - P(a, x)
        gln: log Gamma(a) computed during the evaluation (nan when no
            evaluation strategy ran, i.e. x == 0)
        method: strategy used ("trivial", "series", "continued_fraction",
            "quadrature")
    """

    a: float
    x: float
    p: float
    q: float
    gln: float
    method: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "a": self.a,
            "x": self.x,
            "p": self.p,
            "q": self.q,
            "gln": _json_safe_value(self.gln),
            "method": self.method,
        }

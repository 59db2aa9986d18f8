"""Special functions: log-gamma, incomplete gamma, error function.

Pure Python on top of numpy; no SciPy dependency is required.
"""

from .gamma import (
    GammaEvaluator,
    beta,
    binomial_coefficient,
    factorial,
    gammp,
    gammq,
    incomplete_gamma,
    invgammp,
    log_factorial,
    log_gamma,
    warm_caches,
)
from .erf import erf, erfc, inverf, inverfc

__all__ = [
    # Gamma
    "GammaEvaluator",
    "beta",
    "binomial_coefficient",
    "factorial",
    "gammp",
    "gammq",
    "incomplete_gamma",
    "invgammp",
    "log_factorial",
    "log_gamma",
    "warm_caches",

    # Error function
    "erf",
    "erfc",
    "inverf",
    "inverfc",
]

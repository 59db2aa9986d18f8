"""
statdist - special functions and probability distributions

Log-gamma, regularized incomplete gamma and its inverse, the error function
and its inverse, and the chi-square and normal distributions built on them.

Conventions:
- All functions take and return Python floats
- Invalid arguments raise DomainError (a ValueError)
- Series/continued-fraction non-convergence raises MaxIterationsExceeded
- Inverse functions (invgammp, inverfc, inverf) never raise on
  non-convergence; they return their best estimate
"""

__version__ = "1.0.0"

from .core.errors import StatisticsError, DomainError, MaxIterationsExceeded
from .core.models import EvaluationOptions
from .core.results import IncompleteGammaResult
from .core.special import (
    GammaEvaluator,
    log_gamma,
    factorial,
    log_factorial,
    binomial_coefficient,
    beta,
    incomplete_gamma,
    gammp,
    gammq,
    invgammp,
    erf,
    erfc,
    inverf,
    inverfc,
)
from .core.distributions import (
    ChiSquaredDistribution,
    NormalDistribution,
    FunctionEvaluator,
    propagate,
)
from .core.sampling import RandomizerType, create_randomizer

__all__ = [
    # Version
    "__version__",

    # Errors
    "StatisticsError",
    "DomainError",
    "MaxIterationsExceeded",

    # Options and results
    "EvaluationOptions",
    "IncompleteGammaResult",

    # Special functions
    "GammaEvaluator",
    "log_gamma",
    "factorial",
    "log_factorial",
    "binomial_coefficient",
    "beta",
    "incomplete_gamma",
    "gammp",
    "gammq",
    "invgammp",
    "erf",
    "erfc",
    "inverf",
    "inverfc",

    # Distributions
    "ChiSquaredDistribution",
    "NormalDistribution",
    "FunctionEvaluator",
    "propagate",

    # Samplers
    "RandomizerType",
    "create_randomizer",
]

"""
Core module for statdist.

Special functions (log-gamma, incomplete gamma, erf), the chi-square and
normal distributions built on them, and simple random samplers.
"""

from .errors import StatisticsError, DomainError, MaxIterationsExceeded

from .models import EvaluationOptions, DEFAULT_OPTIONS

from .results import IncompleteGammaResult

from .special import (
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
    erf,
    erfc,
    inverf,
    inverfc,
)

from .distributions import (
    ChiSquaredDistribution,
    chi2_cdf,
    chi2_critical_interval,
    chi2_pdf,
    chi2_ppf,
    DerivativeEvaluator,
    FunctionEvaluator,
    NormalDistribution,
    mahalanobis_distance,
    normal_cdf,
    normal_pdf,
    normal_ppf,
    propagate,
    propagate_distribution,
)

from .sampling import (
    GaussianRandomizer,
    Randomizer,
    RandomizerType,
    UniformRandomizer,
    create_randomizer,
)

__all__ = [
    # Errors
    "StatisticsError",
    "DomainError",
    "MaxIterationsExceeded",

    # Options and results
    "EvaluationOptions",
    "DEFAULT_OPTIONS",
    "IncompleteGammaResult",

    # Special functions
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
    "erf",
    "erfc",
    "inverf",
    "inverfc",

    # Distributions
    "ChiSquaredDistribution",
    "chi2_cdf",
    "chi2_critical_interval",
    "chi2_pdf",
    "chi2_ppf",
    "DerivativeEvaluator",
    "FunctionEvaluator",
    "NormalDistribution",
    "mahalanobis_distance",
    "normal_cdf",
    "normal_pdf",
    "normal_ppf",
    "propagate",
    "propagate_distribution",

    # Samplers
    "GaussianRandomizer",
    "Randomizer",
    "RandomizerType",
    "UniformRandomizer",
    "create_randomizer",
]

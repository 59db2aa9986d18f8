"""Probability distributions built on the special-function engines.

- Chi-square: density, CDF, quantile, critical interval
- Normal: density, CDF, quantile, Mahalanobis distance, propagation
"""

from .chi_square import (
    ChiSquaredDistribution,
    chi2_cdf,
    chi2_critical_interval,
    chi2_pdf,
    chi2_ppf,
)
from .normal import (
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

__all__ = [
    # Chi-square
    "ChiSquaredDistribution",
    "chi2_cdf",
    "chi2_critical_interval",
    "chi2_pdf",
    "chi2_ppf",

    # Normal
    "DerivativeEvaluator",
    "FunctionEvaluator",
    "NormalDistribution",
    "mahalanobis_distance",
    "normal_cdf",
    "normal_pdf",
    "normal_ppf",
    "propagate",
    "propagate_distribution",
]

"""statdist.core.distributions.chi_square

Chi-square distribution with nu degrees of freedom.

  If X ~ ChiSquare(nu), then X = 2 * Gamma(a=nu/2, scale=1).
  CDF is regularized lower incomplete gamma P(nu/2, x/2).
  Quantile is 2 * invgammp(p, nu/2).

The density is evaluated in log space with the normalizing constant
  fac = ln(2) * nu/2 + ln(Gamma(nu/2)),
which ChiSquaredDistribution caches per shape.

Both a bound form (ChiSquaredDistribution) and free functions taking nu
explicitly (chi2_pdf, chi2_cdf, chi2_ppf) are provided; they give identical
results.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple

from ..errors import DomainError
from ..models.options import EvaluationOptions
from ..special.gamma import GammaEvaluator, log_gamma

_LN2 = 0.693147180559945309


def _check_nu(nu: float) -> None:
    if not (nu > 0.0):
        raise DomainError(f"nu must be positive, got {nu}")


def _fac(nu: float) -> float:
    return _LN2 * (0.5 * nu) + log_gamma(0.5 * nu)


def _pdf(x2: float, nu: float, fac: float) -> float:
    if not (x2 > 0.0):
        raise DomainError(f"chi square must be greater than zero, got {x2}")
    if math.isinf(x2):
        return 0.0
    return math.exp(-0.5 * (x2 - (nu - 2.0) * math.log(x2)) - fac)


def _cdf(x2: float, nu: float, evaluator: GammaEvaluator) -> float:
    if not (x2 >= 0.0):
        raise DomainError(f"chi square must be positive or zero, got {x2}")
    return evaluator.gammp(0.5 * nu, 0.5 * x2)


def _ppf(p: float, nu: float, evaluator: GammaEvaluator) -> float:
    if not (0.0 <= p < 1.0):
        raise DomainError(f"p must be in [0,1), got {p}")
    return 2.0 * evaluator.invgammp(p, 0.5 * nu)


# ----------------------------
# Free functions
# ----------------------------


def chi2_pdf(x2: float, nu: float) -> float:
    """PDF of chi-square distribution.

    Args:
        x2: value (> 0)
        nu: degrees of freedom (> 0)
    """
    _check_nu(nu)
    return _pdf(x2, nu, _fac(nu))


def chi2_cdf(x2: float, nu: float, options: Optional[EvaluationOptions] = None) -> float:
    """CDF of chi-square distribution.

    Args:
        x2: value (>= 0)
        nu: degrees of freedom (> 0)
        options: incomplete gamma iteration budgets

    Returns:
        P(X <= x2)

    Raises:
        DomainError: for nu <= 0 or x2 < 0
        MaxIterationsExceeded: if the incomplete gamma evaluation fails to converge
    """
    _check_nu(nu)
    return _cdf(x2, nu, GammaEvaluator(options))


def chi2_ppf(p: float, nu: float, options: Optional[EvaluationOptions] = None) -> float:
    """Quantile (inverse CDF) of chi-square distribution.

    Args:
        p: probability in [0, 1)
        nu: degrees of freedom (> 0)

    Returns:
        x such that chi2_cdf(x, nu) ~= p
    """
    _check_nu(nu)
    return _ppf(p, nu, GammaEvaluator(options))


def chi2_critical_interval(
    nu: float,
    alpha: float,
    options: Optional[EvaluationOptions] = None,
) -> Tuple[float, float]:
    """Two-sided chi-square critical interval.

    Returns (lower, upper) such that P(lower <= X <= upper) = 1 - alpha.
    """
    if not (0.0 < alpha < 1.0):
        raise DomainError(f"alpha must be in (0,1), got {alpha}")
    _check_nu(nu)
    evaluator = GammaEvaluator(options)
    lower = _ppf(alpha / 2.0, nu, evaluator)
    upper = _ppf(1.0 - alpha / 2.0, nu, evaluator)
    return float(lower), float(upper)


# ----------------------------
# Bound distribution
# ----------------------------


class ChiSquaredDistribution:
    """Chi-square distribution bound to a shape parameter nu.

    Attributes:
        nu: degrees of freedom (> 0); setting it recomputes the density
            normalization
    """

    def __init__(self, nu: float, options: Optional[EvaluationOptions] = None):
        self._gamma = GammaEvaluator(options)
        self._nu = 0.0
        self._fac = 0.0
        self.nu = nu

    @property
    def nu(self) -> float:
        return self._nu

    @nu.setter
    def nu(self, value: float) -> None:
        _check_nu(value)
        self._nu = float(value)
        self._fac = _fac(self._nu)

    @property
    def options(self) -> EvaluationOptions:
        return self._gamma.options

    def density(self, x2: float) -> float:
        """Probability density at x2 (> 0)."""
        return _pdf(x2, self._nu, self._fac)

    def cdf(self, x2: float) -> float:
        """P(X <= x2) for x2 >= 0."""
        return _cdf(x2, self._nu, self._gamma)

    def inverse_cdf(self, p: float) -> float:
        """Quantile for p in [0, 1)."""
        return _ppf(p, self._nu, self._gamma)

    def critical_interval(self, alpha: float) -> Tuple[float, float]:
        """Two-sided (lower, upper) quantiles at significance alpha."""
        if not (0.0 < alpha < 1.0):
            raise DomainError(f"alpha must be in (0,1), got {alpha}")
        return self.inverse_cdf(alpha / 2.0), self.inverse_cdf(1.0 - alpha / 2.0)

    def __repr__(self) -> str:
        return f"ChiSquaredDistribution(nu={self._nu!r})"

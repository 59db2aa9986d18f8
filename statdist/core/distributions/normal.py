"""statdist.core.distributions.normal

Normal (Gaussian) distribution built on the erf engine.

  pdf(x)  = 1 / (sigma sqrt(2 pi)) * exp(-0.5 ((x - mu) / sigma)^2)
  cdf(x)  = 0.5 * erfc(-(x - mu) / (sigma sqrt(2)))
  ppf(p)  = -sqrt(2) * sigma * inverfc(2 p) + mu

First-order uncertainty propagation through a scalar function f:

  mu'    = f(mu)
  sigma' = |f'(mu)| * sigma

This linearization is only accurate when sigma is small compared with the
curvature of f around mu. Nothing checks that.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from ..errors import DomainError
from ..special.erf import erfc, inverfc

SQRT2 = math.sqrt(2.0)
HALF_SQRT2 = SQRT2 / 2.0
GAUSSIAN_NORM = 1.0 / math.sqrt(2.0 * math.pi)


class DerivativeEvaluator(Protocol):
    """A scalar function together with its first derivative."""

    def evaluate(self, x: float) -> float:
        ...

    def evaluate_derivative(self, x: float) -> float:
        ...


@dataclass(frozen=True)
class FunctionEvaluator:
    """DerivativeEvaluator built from two plain callables.

    Attributes:
        function: f(x)
        derivative: f'(x)
    """

    function: Callable[[float], float]
    derivative: Callable[[float], float]

    def evaluate(self, x: float) -> float:
        return float(self.function(x))

    def evaluate_derivative(self, x: float) -> float:
        return float(self.derivative(x))


def _check_sigma(sigma: float) -> None:
    if not (sigma > 0.0):
        raise DomainError(f"standard deviation must be greater than zero, got {sigma}")


def _pdf(x: float, mu: float, sigma: float) -> float:
    return (GAUSSIAN_NORM / sigma) * math.exp(-0.5 * ((x - mu) / sigma) ** 2)


def _cdf(x: float, mu: float, sigma: float) -> float:
    return 0.5 * erfc(-HALF_SQRT2 * (x - mu) / sigma)


def _ppf(p: float, mu: float, sigma: float) -> float:
    if not (0.0 < p < 1.0):
        raise DomainError(f"p must be in (0,1), got {p}")
    return -SQRT2 * sigma * inverfc(2.0 * p) + mu


# ----------------------------
# Free functions
# ----------------------------


def normal_pdf(x: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Normal probability density at x."""
    _check_sigma(sigma)
    return _pdf(x, mu, sigma)


def normal_cdf(x: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Normal CDF P(X <= x)."""
    _check_sigma(sigma)
    return _cdf(x, mu, sigma)


def normal_ppf(p: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Normal quantile (inverse CDF).

    Args:
        p: probability in (0, 1)
        mu: mean
        sigma: standard deviation (> 0)

    Returns:
        x such that P(X <= x) = p
    """
    _check_sigma(sigma)
    return _ppf(p, mu, sigma)


def mahalanobis_distance(x: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """|x - mu| / sigma."""
    _check_sigma(sigma)
    return abs(x - mu) / sigma


def propagate(
    evaluator: DerivativeEvaluator,
    mean: float,
    standard_deviation: float,
    result: Optional["NormalDistribution"] = None,
) -> "NormalDistribution":
    """Propagate a normal variable through a differentiable function.

    Args:
        evaluator: provides f(x) and f'(x)
        mean: mean of the input variable
        standard_deviation: standard deviation of the input variable
        result: distribution to overwrite; a new one is created when None

    Returns:
        NormalDistribution with mean f(mean) and standard deviation
        |f'(mean)| * standard_deviation

    Raises:
        DomainError: if the propagated standard deviation is not positive
            (for example f'(mean) == 0)
    """
    evaluation = evaluator.evaluate(mean)
    derivative = evaluator.evaluate_derivative(mean)
    sigma = abs(derivative * standard_deviation)
    _check_sigma(sigma)
    if result is None:
        result = NormalDistribution()
    result.mean = evaluation
    result.standard_deviation = sigma
    return result


def propagate_distribution(
    evaluator: DerivativeEvaluator,
    dist: "NormalDistribution",
    result: Optional["NormalDistribution"] = None,
) -> "NormalDistribution":
    """propagate() taking the input mean and deviation from a distribution."""
    return propagate(evaluator, dist.mean, dist.standard_deviation, result)


# ----------------------------
# Bound distribution
# ----------------------------


class NormalDistribution:
    """Normal distribution N(mean, standard_deviation^2).

    Attributes:
        mean: any real value (default 0)
        standard_deviation: strictly positive (default 1)
        variance: standard_deviation squared; setting it updates
            standard_deviation
    """

    def __init__(self, mean: float = 0.0, standard_deviation: float = 1.0):
        self._sigma = 1.0
        self.standard_deviation = standard_deviation
        self.mean = mean

    @property
    def mean(self) -> float:
        return self._mu

    @mean.setter
    def mean(self, value: float) -> None:
        self._mu = float(value)

    @property
    def standard_deviation(self) -> float:
        return self._sigma

    @standard_deviation.setter
    def standard_deviation(self, value: float) -> None:
        _check_sigma(value)
        self._sigma = float(value)

    @property
    def variance(self) -> float:
        return self._sigma * self._sigma

    @variance.setter
    def variance(self, value: float) -> None:
        if not (value > 0.0):
            raise DomainError(f"variance must be greater than zero, got {value}")
        self._sigma = math.sqrt(value)

    def density(self, x: float) -> float:
        return _pdf(x, self._mu, self._sigma)

    def cdf(self, x: float) -> float:
        return _cdf(x, self._mu, self._sigma)

    def inverse_cdf(self, p: float) -> float:
        """Quantile for p in (0, 1)."""
        return _ppf(p, self._mu, self._sigma)

    def mahalanobis_distance(self, x: float) -> float:
        return abs(x - self._mu) / self._sigma

    def propagate_this_distribution(
        self,
        evaluator: DerivativeEvaluator,
        result: Optional["NormalDistribution"] = None,
    ) -> "NormalDistribution":
        """Distribution of f(X) for X following this distribution (linearized)."""
        return propagate_distribution(evaluator, self, result)

    def __repr__(self) -> str:
        return f"NormalDistribution(mean={self._mu!r}, standard_deviation={self._sigma!r})"

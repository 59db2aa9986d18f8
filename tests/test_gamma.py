"""
Tests for the gamma function family.
"""

import math
import threading

import numpy as np
import pytest

from statdist.core.errors import DomainError, MaxIterationsExceeded
from statdist.core.models.options import EvaluationOptions
from statdist.core.special import gamma as gamma_module
from statdist.core.special.gamma import (
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


class TestLogGamma:
    """Tests for log_gamma."""

    def test_log_gamma_of_one_is_zero(self):
        assert log_gamma(1.0) == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("n", [2, 3, 4, 5])
    def test_log_gamma_matches_log_factorial_for_small_integers(self, n):
        assert log_gamma(float(n)) == pytest.approx(math.log(math.factorial(n - 1)), abs=1e-8)

    @pytest.mark.parametrize("x", [0.1, 0.5, 1.5, 7.25, 30.0, 171.5, 1.0e4])
    def test_log_gamma_matches_stdlib(self, x):
        assert log_gamma(x) == pytest.approx(math.lgamma(x), rel=1e-12, abs=1e-12)

    def test_half_gives_log_sqrt_pi(self):
        assert log_gamma(0.5) == pytest.approx(0.5 * math.log(math.pi), abs=1e-12)

    @pytest.mark.parametrize("x", [0.0, -1.0, -0.5, float("nan")])
    def test_non_positive_argument_raises(self, x):
        with pytest.raises(DomainError):
            log_gamma(x)


class TestFactorials:
    """Tests for factorial, log_factorial and the shared tables."""

    @pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 20])
    def test_small_factorials_are_exact(self, n):
        assert factorial(n) == float(math.factorial(n))

    def test_largest_factorial_is_finite(self):
        value = factorial(170)
        assert math.isfinite(value)
        assert value == pytest.approx(float(math.factorial(170)), rel=1e-12)

    @pytest.mark.parametrize("n", [-1, 171, 1000])
    def test_factorial_out_of_range_raises(self, n):
        with pytest.raises(DomainError):
            factorial(n)

    def test_factorial_rejects_non_integer(self):
        with pytest.raises(DomainError):
            factorial(2.5)

    def test_factorial_accepts_integral_float_and_numpy_int(self):
        assert factorial(4.0) == 24.0
        assert factorial(np.int64(4)) == 24.0

    @pytest.mark.parametrize("n", [0, 1, 10, 170, 1999, 2000, 5000])
    def test_log_factorial_matches_lgamma(self, n):
        assert log_factorial(n) == pytest.approx(math.lgamma(n + 1.0), rel=1e-12, abs=1e-12)

    def test_log_factorial_negative_raises(self):
        with pytest.raises(DomainError):
            log_factorial(-1)

    def test_tables_are_read_only(self):
        warm_caches()
        with pytest.raises(ValueError):
            gamma_module._factorial_table()[3] = 0.0
        with pytest.raises(ValueError):
            gamma_module._log_factorial_table()[3] = 0.0

    def test_concurrent_first_use_builds_one_table(self, monkeypatch):
        monkeypatch.setattr(gamma_module, "_factorials", None)
        monkeypatch.setattr(gamma_module, "_log_factorials", None)

        tables = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            tables.append((gamma_module._factorial_table(), gamma_module._log_factorial_table()))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(tables) == 8
        assert all(f is tables[0][0] for f, _ in tables)
        assert all(lf is tables[0][1] for _, lf in tables)
        assert factorial(6) == 720.0


class TestBinomialAndBeta:
    """Tests for binomial_coefficient and beta."""

    @pytest.mark.parametrize(
        "n, k",
        [(5, 2), (10, 0), (10, 10), (52, 5), (170, 85), (200, 3), (1000, 2)],
    )
    def test_binomial_coefficient_matches_math_comb(self, n, k):
        assert binomial_coefficient(n, k) == pytest.approx(float(math.comb(n, k)), rel=1e-9)

    def test_binomial_coefficient_is_integral(self):
        assert binomial_coefficient(30, 12) == float(math.comb(30, 12))

    @pytest.mark.parametrize("n, k", [(5, -1), (5, 6)])
    def test_binomial_coefficient_bad_k_raises(self, n, k):
        with pytest.raises(DomainError):
            binomial_coefficient(n, k)

    def test_beta_known_value(self):
        # B(2, 3) = 1! 2! / 4! = 1/12
        assert beta(2.0, 3.0) == pytest.approx(1.0 / 12.0, rel=1e-12)

    def test_beta_is_symmetric(self):
        assert beta(0.7, 3.2) == pytest.approx(beta(3.2, 0.7), rel=1e-14)

    def test_beta_non_positive_raises(self):
        with pytest.raises(DomainError):
            beta(0.0, 1.0)


class TestIncompleteGamma:
    """Tests for P(a, x), Q(a, x) and strategy selection."""

    def test_infinite_x_is_trivial(self):
        res = incomplete_gamma(1.0, float("inf"))
        assert res.p == 1.0
        assert res.q == 0.0
        assert res.method == "trivial"

    def test_zero_x_is_trivial(self):
        res = incomplete_gamma(3.0, 0.0)
        assert res.p == 0.0
        assert res.q == 1.0
        assert res.method == "trivial"
        assert math.isnan(res.gln)

    @pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 2.0, 5.0, 20.0])
    def test_shape_one_is_exponential_cdf(self, x):
        assert gammp(1.0, x) == pytest.approx(1.0 - math.exp(-x), abs=1e-14)
        assert gammq(1.0, x) == pytest.approx(math.exp(-x), rel=1e-12)

    def test_half_shape_matches_erf(self):
        # P(1/2, x) = erf(sqrt(x))
        for x in (0.2, 1.0, 3.0):
            assert gammp(0.5, x) == pytest.approx(math.erf(math.sqrt(x)), abs=1e-13)

    @pytest.mark.parametrize(
        "a, x, method",
        [
            (3.0, 2.0, "series"),
            (3.0, 4.0, "continued_fraction"),
            (0.5, 1.6, "continued_fraction"),
            (150.0, 140.0, "quadrature"),
            (100.0, 50.0, "quadrature"),
        ],
    )
    def test_strategy_selection(self, a, x, method):
        assert incomplete_gamma(a, x).method == method

    @pytest.mark.parametrize(
        "a, x",
        [
            (0.3, 0.1),
            (1.0, 2.0),
            (2.5, 1.0),
            (5.0, 12.0),
            (20.0, 18.0),
            (40.0, 55.0),
            (250.0, 240.0),
            (150.0, 0.01),
            (150.0, 2500.0),
            (1000.0, 1.0e5),
        ],
    )
    def test_p_plus_q_is_one(self, a, x):
        assert gammp(a, x) + gammq(a, x) == pytest.approx(1.0, abs=1e-8)

    def test_quadrature_far_upper_tail(self):
        res = incomplete_gamma(150.0, 2500.0)
        assert res.method == "quadrature"
        assert res.p == 1.0
        assert res.q == 0.0

    def test_quadrature_far_lower_tail(self):
        res = incomplete_gamma(150.0, 0.01)
        assert res.method == "quadrature"
        assert res.p == 0.0
        assert res.q == 1.0

    def test_quadrature_stays_in_unit_interval(self):
        for x in np.linspace(0.5, 1500.0, 301):
            res = incomplete_gamma(300.0, float(x))
            assert 0.0 <= res.p <= 1.0
            assert 0.0 <= res.q <= 1.0

    def test_result_carries_log_gamma(self):
        res = incomplete_gamma(5.0, 2.0)
        assert res.gln == pytest.approx(math.log(24.0), abs=1e-12)
        assert res.to_dict()["method"] == "series"

    def test_quadrature_agrees_with_series_and_continued_fraction(self):
        # Raise the switch so the same a is evaluated without quadrature.
        reference = EvaluationOptions(max_iterations=2000, large_parameter_switch=10_000)
        for x in (120.0, 140.0, 150.0, 165.0, 190.0):
            approx = gammp(150.0, x)
            exact = gammp(150.0, x, reference)
            assert approx == pytest.approx(exact, abs=1e-6)

    def test_quadrature_near_saddle_point(self):
        # P(a, a) ~ 1/2 + 1/(3 sqrt(2 pi a)) for large a
        a = 400.0
        expected = 0.5 + 1.0 / (3.0 * math.sqrt(2.0 * math.pi * a))
        assert gammp(a, a) == pytest.approx(expected, abs=1e-3)

    def test_p_is_monotone_in_x(self):
        xs = np.linspace(0.0, 30.0, 121)
        values = np.array([gammp(4.5, float(x)) for x in xs])
        assert np.all(values >= 0.0)
        assert np.all(values <= 1.0)
        assert np.all(np.diff(values) >= 0.0)

    @pytest.mark.parametrize("a, x", [(0.0, 1.0), (-1.0, 1.0), (1.0, -0.1), (1.0, float("nan"))])
    def test_bad_arguments_raise(self, a, x):
        with pytest.raises(DomainError):
            gammp(a, x)
        with pytest.raises(DomainError):
            gammq(a, x)

    def test_series_budget_exhaustion_raises(self):
        opts = EvaluationOptions(max_iterations=1)
        with pytest.raises(MaxIterationsExceeded) as excinfo:
            gammp(5.0, 3.0, opts)
        assert excinfo.value.method == "series"
        assert excinfo.value.iterations == 1

    def test_continued_fraction_budget_exhaustion_raises(self):
        opts = EvaluationOptions(max_iterations=1)
        with pytest.raises(MaxIterationsExceeded) as excinfo:
            gammq(3.0, 5.0, opts)
        assert excinfo.value.method == "continued_fraction"

    def test_max_iterations_exceeded_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            gammp(5.0, 3.0, EvaluationOptions(max_iterations=1))


class TestInverseIncompleteGamma:
    """Tests for invgammp."""

    @pytest.mark.parametrize("a, x", [(1.0, 2.0), (2.0, 3.0), (0.5, 0.3), (7.0, 4.0), (30.0, 35.0)])
    def test_recovers_x(self, a, x):
        assert invgammp(gammp(a, x), a) == pytest.approx(x, abs=1e-8)

    @pytest.mark.parametrize("p", [0.001, 0.1, 0.5, 0.9, 0.999])
    def test_inverse_of_exponential(self, p):
        assert invgammp(p, 1.0) == pytest.approx(-math.log(1.0 - p), rel=1e-10)

    def test_large_shape_round_trip(self):
        a = 200.0
        x = invgammp(0.3, a)
        assert gammp(a, x) == pytest.approx(0.3, abs=1e-6)

    def test_p_at_or_above_one_is_clamped(self):
        assert invgammp(1.0, 4.0) == 100.0
        assert invgammp(1.5, 400.0) == pytest.approx(400.0 + 100.0 * 20.0)

    def test_p_at_or_below_zero_returns_zero(self):
        assert invgammp(0.0, 3.0) == 0.0
        assert invgammp(-0.2, 3.0) == 0.0

    def test_non_positive_shape_raises(self):
        with pytest.raises(DomainError):
            invgammp(0.5, 0.0)

    def test_zero_newton_steps_returns_initial_guess_without_raising(self):
        guess = invgammp(0.5, 3.0, EvaluationOptions(newton_iterations=0))
        refined = invgammp(0.5, 3.0)
        assert guess > 0.0
        assert guess == pytest.approx(refined, rel=0.05)


class TestGammaEvaluator:
    """Tests for the per-caller evaluator and its gln value."""

    def test_gln_is_nan_before_first_call(self):
        assert math.isnan(GammaEvaluator().gln)

    def test_gln_tracks_last_call(self):
        ev = GammaEvaluator()
        ev.gammp(5.0, 2.0)
        assert ev.gln == pytest.approx(math.log(24.0), abs=1e-12)
        ev.gammq(3.0, 10.0)
        assert ev.gln == pytest.approx(math.log(2.0), abs=1e-12)
        ev.invgammp(0.4, 4.0)
        assert ev.gln == pytest.approx(math.log(6.0), abs=1e-12)

    def test_trivial_evaluation_keeps_previous_gln(self):
        ev = GammaEvaluator()
        ev.gammp(5.0, 2.0)
        ev.gammp(2.0, 0.0)
        assert ev.gln == pytest.approx(math.log(24.0), abs=1e-12)

    def test_evaluator_matches_free_functions(self):
        ev = GammaEvaluator()
        assert ev.gammp(2.5, 1.7) == gammp(2.5, 1.7)
        assert ev.gammq(2.5, 4.7) == gammq(2.5, 4.7)
        assert ev.invgammp(0.8, 2.5) == invgammp(0.8, 2.5)

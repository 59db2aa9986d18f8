"""
Tests for the uniform and Gaussian samplers.
"""

import numpy as np
import pytest

from statdist.core.errors import DomainError
from statdist.core.sampling.randomizer import (
    GaussianRandomizer,
    Randomizer,
    RandomizerType,
    UniformRandomizer,
    create_randomizer,
)


def _rng(seed=42):
    return np.random.default_rng(seed)


class TestFactory:
    """Tests for create_randomizer and RandomizerType."""

    def test_default_is_uniform(self):
        r = create_randomizer()
        assert isinstance(r, UniformRandomizer)
        assert r.randomizer_type is RandomizerType.UNIFORM

    def test_gaussian(self):
        r = create_randomizer(RandomizerType.GAUSSIAN, _rng())
        assert isinstance(r, GaussianRandomizer)
        assert r.randomizer_type is RandomizerType.GAUSSIAN

    def test_from_string(self):
        assert RandomizerType.from_string(" Gaussian ") is RandomizerType.GAUSSIAN
        assert isinstance(create_randomizer("uniform"), UniformRandomizer)
        with pytest.raises(ValueError):
            RandomizerType.from_string("poisson")

    def test_injected_generator_is_used(self):
        gen = _rng()
        r = create_randomizer(RandomizerType.UNIFORM, gen)
        assert r.generator is gen

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            Randomizer()


class TestUniformRandomizer:
    """Tests for UniformRandomizer."""

    def test_same_seed_same_sequence(self):
        a = UniformRandomizer(_rng(7)).next_doubles(10)
        b = UniformRandomizer(_rng(7)).next_doubles(10)
        assert np.array_equal(a, b)

    def test_seed_resets_sequence(self):
        r = UniformRandomizer()
        r.seed(3)
        first = r.next_double()
        r.seed(3)
        assert r.next_double() == first

    def test_doubles_in_range(self):
        values = UniformRandomizer(_rng()).next_doubles(5000, -2.0, 3.0)
        assert values.shape == (5000,)
        assert np.all(values >= -2.0)
        assert np.all(values < 3.0)
        assert float(np.mean(values)) == pytest.approx(0.5, abs=0.1)

    def test_ints_in_range(self):
        r = UniformRandomizer(_rng())
        values = r.next_ints(2000, 5, 10)
        assert np.all(values >= 5)
        assert np.all(values < 10)
        assert set(np.unique(values).tolist()) == {5, 6, 7, 8, 9}
        assert 5 <= r.next_int(5, 10) < 10

    def test_booleans(self):
        values = UniformRandomizer(_rng()).next_booleans(2000)
        assert values.dtype == bool
        assert 0.4 < float(np.mean(values)) < 0.6

    def test_invalid_range_raises(self):
        r = UniformRandomizer(_rng())
        with pytest.raises(DomainError):
            r.next_double(1.0, 1.0)
        with pytest.raises(DomainError):
            r.next_int(3, 2)

    def test_invalid_length_raises(self):
        r = UniformRandomizer(_rng())
        with pytest.raises(DomainError):
            r.next_doubles(0)
        with pytest.raises(DomainError):
            r.next_booleans(-1)


class TestGaussianRandomizer:
    """Tests for GaussianRandomizer."""

    def test_defaults(self):
        r = GaussianRandomizer(_rng())
        assert r.mean == 0.0
        assert r.standard_deviation == 1.0

    def test_sample_moments(self):
        r = GaussianRandomizer(_rng(11), mean=5.0, standard_deviation=2.0)
        values = r.next_doubles(20000)
        assert float(np.mean(values)) == pytest.approx(5.0, abs=0.1)
        assert float(np.std(values)) == pytest.approx(2.0, rel=0.05)

    def test_boolean_threshold(self):
        r = GaussianRandomizer(_rng(5), mean=0.0, standard_deviation=1.0)
        below_mean = np.mean([r.next_boolean() for _ in range(4000)])
        assert 0.45 < float(below_mean) < 0.55
        assert all(r.next_boolean(threshold=100.0) for _ in range(50))

    def test_next_int_truncates_sample(self):
        r = GaussianRandomizer(_rng(), mean=1000.0, standard_deviation=1e-9)
        assert r.next_int() in (999, 1000)

    @pytest.mark.parametrize("sigma", [0.0, -1.0])
    def test_invalid_standard_deviation_raises(self, sigma):
        with pytest.raises(DomainError):
            GaussianRandomizer(_rng(), standard_deviation=sigma)

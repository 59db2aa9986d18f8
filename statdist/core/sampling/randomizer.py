"""statdist.core.sampling.randomizer

Uniform and Gaussian samplers.

Both wrap an injected ``numpy.random.Generator``; they add ranges, thresholds
and array helpers on top of it and nothing else. ``create_randomizer`` picks
the implementation from a RandomizerType.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union

import numpy as np

from ..errors import DomainError


class RandomizerType(Enum):
    """Enumeration of supported sampler types."""
    UNIFORM = "uniform"
    GAUSSIAN = "gaussian"

    @classmethod
    def from_string(cls, s: str) -> "RandomizerType":
        """Create RandomizerType from string (case-insensitive)."""
        s_lower = s.lower().strip()
        for kind in cls:
            if kind.value == s_lower:
                return kind
        raise ValueError(f"Unknown randomizer type: {s}")


def _check_length(length: int) -> None:
    if length <= 0:
        raise DomainError(f"length must be positive, got {length}")


def _check_range(min_value: float, max_value: float) -> None:
    if max_value <= min_value:
        raise DomainError(
            f"max_value must be greater than min_value, got [{min_value}, {max_value})"
        )


class Randomizer(ABC):
    """Base class of the samplers.

    Attributes:
        generator: source of random bits
    """

    def __init__(self, generator: Optional[np.random.Generator] = None):
        self.generator = generator if generator is not None else np.random.default_rng()

    def seed(self, seed: int) -> None:
        """Replace the generator by a freshly seeded one."""
        self.generator = np.random.default_rng(seed)

    @property
    @abstractmethod
    def randomizer_type(self) -> RandomizerType:
        ...

    @abstractmethod
    def next_double(self) -> float:
        ...

    @abstractmethod
    def next_doubles(self, length: int) -> np.ndarray:
        ...

    @abstractmethod
    def next_boolean(self) -> bool:
        ...

    def next_booleans(self, length: int) -> np.ndarray:
        _check_length(length)
        return np.array([self.next_boolean() for _ in range(length)], dtype=bool)


class UniformRandomizer(Randomizer):
    """Uniformly distributed values. Ranges are [min_value, max_value)."""

    @property
    def randomizer_type(self) -> RandomizerType:
        return RandomizerType.UNIFORM

    def next_boolean(self) -> bool:
        return bool(self.generator.integers(0, 2))

    def next_int(self, min_value: int, max_value: int) -> int:
        _check_range(min_value, max_value)
        return int(self.generator.integers(min_value, max_value))

    def next_ints(self, length: int, min_value: int, max_value: int) -> np.ndarray:
        _check_length(length)
        _check_range(min_value, max_value)
        return self.generator.integers(min_value, max_value, size=length)

    def next_double(self, min_value: float = 0.0, max_value: float = 1.0) -> float:
        _check_range(min_value, max_value)
        return float(self.generator.random() * (max_value - min_value) + min_value)

    def next_doubles(
        self, length: int, min_value: float = 0.0, max_value: float = 1.0
    ) -> np.ndarray:
        _check_length(length)
        _check_range(min_value, max_value)
        return self.generator.random(length) * (max_value - min_value) + min_value


class GaussianRandomizer(Randomizer):
    """Normally distributed values N(mean, standard_deviation^2)."""

    DEFAULT_MEAN = 0.0
    DEFAULT_STANDARD_DEVIATION = 1.0

    def __init__(
        self,
        generator: Optional[np.random.Generator] = None,
        mean: float = DEFAULT_MEAN,
        standard_deviation: float = DEFAULT_STANDARD_DEVIATION,
    ):
        super().__init__(generator)
        self.mean = float(mean)
        self._standard_deviation = 1.0
        self.standard_deviation = standard_deviation

    @property
    def standard_deviation(self) -> float:
        return self._standard_deviation

    @standard_deviation.setter
    def standard_deviation(self, value: float) -> None:
        if not (value > 0.0):
            raise DomainError(f"standard deviation must be greater than zero, got {value}")
        self._standard_deviation = float(value)

    @property
    def randomizer_type(self) -> RandomizerType:
        return RandomizerType.GAUSSIAN

    def next_double(self) -> float:
        return float(self._standard_deviation * self.generator.standard_normal() + self.mean)

    def next_doubles(self, length: int) -> np.ndarray:
        _check_length(length)
        return self._standard_deviation * self.generator.standard_normal(length) + self.mean

    def next_int(self) -> int:
        return int(self.next_double())

    def next_boolean(self, threshold: Optional[float] = None) -> bool:
        """True when a sample falls below threshold (the mean by default)."""
        if threshold is None:
            threshold = self.mean
        return self.next_double() < threshold


def create_randomizer(
    randomizer_type: Union[RandomizerType, str] = RandomizerType.UNIFORM,
    generator: Optional[np.random.Generator] = None,
) -> Randomizer:
    """Build a sampler of the requested type around generator."""
    if isinstance(randomizer_type, str):
        randomizer_type = RandomizerType.from_string(randomizer_type)

    if randomizer_type is RandomizerType.GAUSSIAN:
        return GaussianRandomizer(generator)
    return UniformRandomizer(generator)

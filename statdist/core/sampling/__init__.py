"""Random samplers wrapping a numpy Generator."""

from .randomizer import (
    GaussianRandomizer,
    Randomizer,
    RandomizerType,
    UniformRandomizer,
    create_randomizer,
)

__all__ = [
    "GaussianRandomizer",
    "Randomizer",
    "RandomizerType",
    "UniformRandomizer",
    "create_randomizer",
]

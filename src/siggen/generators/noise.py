"""Gaussian noise generation (Box-Muller)."""

from __future__ import annotations

import math

import numpy as np

TWO_PI = 2.0 * math.pi


def noise_amplitude(signal_amplitude: float, noise_level: float) -> float:
    """
    Convert a noise level in percent of the signal amplitude into an amplitude.

    Levels ``<= 0`` disable noise. Levels above 100 are not clamped and scale
    linearly.
    """
    if noise_level <= 0:
        return 0.0
    return signal_amplitude * (noise_level / 100.0)


def sample(amplitude: float, rng: np.random.Generator) -> float:
    """
    Draw one normally distributed noise value scaled by ``amplitude``.

    Consumes exactly two uniform draws from ``rng``. ``Generator.random``
    returns values in ``[0, 1)``; ``1 - u`` maps them into ``(0, 1]`` so the
    logarithm is always defined.
    """
    u1 = 1.0 - rng.random()
    u2 = 1.0 - rng.random()
    std_normal = math.sqrt(-2.0 * math.log(u1)) * math.sin(TWO_PI * u2)
    return std_normal * amplitude


def samples(amplitude: float, rng: np.random.Generator, size: int) -> np.ndarray:
    """Vectorized :func:`sample`: ``size`` values from ``2 * size`` draws."""
    u1 = 1.0 - rng.random(size)
    u2 = 1.0 - rng.random(size)
    return np.sqrt(-2.0 * np.log(u1)) * np.sin(TWO_PI * u2) * amplitude


class GaussianNoise:
    """Bundles the two noise operations behind one injectable object."""

    def noise_amplitude(self, signal_amplitude: float, noise_level: float) -> float:
        return noise_amplitude(signal_amplitude, noise_level)

    def sample(self, amplitude: float, rng: np.random.Generator) -> float:
        return sample(amplitude, rng)

    def samples(self, amplitude: float, rng: np.random.Generator, size: int) -> np.ndarray:
        return samples(amplitude, rng, size)

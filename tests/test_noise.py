import math

import numpy as np
import pytest

from siggen.generators.noise import GaussianNoise, noise_amplitude, sample, samples

A = 10.0


def test_noise_amplitude_levels() -> None:
    assert noise_amplitude(A, 0) == 0.0
    assert noise_amplitude(A, -1) == 0.0
    assert noise_amplitude(A, 10) == pytest.approx(A * 0.1)
    assert noise_amplitude(A, 100) == pytest.approx(A)
    assert noise_amplitude(A, 150) == pytest.approx(1.5 * A)


def test_sample_applies_box_muller_to_two_draws() -> None:
    rng = np.random.default_rng(42)
    reference = np.random.default_rng(42)

    value = sample(2.0, rng)

    u1 = 1.0 - reference.random()
    u2 = 1.0 - reference.random()
    expected = math.sqrt(-2.0 * math.log(u1)) * math.sin(2.0 * math.pi * u2) * 2.0
    assert value == pytest.approx(expected)
    # both generators consumed the same two draws
    assert rng.random() == reference.random()


def test_sample_with_zero_amplitude_is_zero() -> None:
    rng = np.random.default_rng(0)
    assert all(sample(0.0, rng) == 0.0 for _ in range(100))


def test_samples_are_finite_and_roughly_standard_normal() -> None:
    values = samples(1.0, np.random.default_rng(7), 50_000)
    assert values.shape == (50_000,)
    assert np.all(np.isfinite(values))
    assert abs(values.mean()) < 0.03
    assert values.std() == pytest.approx(1.0, abs=0.03)


def test_gaussian_noise_delegates() -> None:
    noise = GaussianNoise()
    assert noise.noise_amplitude(4.0, 50) == 2.0
    assert noise.sample(3.0, np.random.default_rng(1)) == sample(3.0, np.random.default_rng(1))

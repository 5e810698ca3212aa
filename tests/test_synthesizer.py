import math

import numpy as np
import pytest

from siggen.core.cancellation import CancellationToken, OperationCancelled
from siggen.core.models import SignalType
from siggen.generators.synthesizer import SignalSynthesizer, partition_bounds
from siggen.generators.waveforms import sine, triangle


@pytest.fixture
def synth() -> SignalSynthesizer:
    return SignalSynthesizer(seed=1234)


@pytest.mark.parametrize("count", [0, -5])
def test_rejects_non_positive_point_count(synth, count) -> None:
    with pytest.raises(ValueError):
        synth.synthesize(SignalType.SINE, point_count=count)


def test_rejects_unknown_type_and_zero_frequency_for_triangle(synth) -> None:
    with pytest.raises(ValueError):
        synth.synthesize("gaussian")
    with pytest.raises(ValueError):
        synth.synthesize(SignalType.TRIANGLE, frequency=0.0)


def test_metadata_is_carried_verbatim(synth) -> None:
    signal = synth.synthesize(
        SignalType.SQUARE,
        amplitude=2.5,
        frequency=2.0,
        phase=math.pi / 4,
        point_count=50,
        time_interval=2.0,
        noise_level=5,
    )
    assert signal.type is SignalType.SQUARE
    assert signal.amplitude == 2.5
    assert signal.frequency == 2.0
    assert signal.phase == math.pi / 4
    assert signal.time_interval == 2.0
    assert signal.noise_level == 5
    assert signal.point_count == len(signal.points) == 50


def test_time_grid_is_evenly_spaced(synth) -> None:
    signal = synth.synthesize(SignalType.SINE, point_count=5, time_interval=1.0)
    assert [p.time for p in signal.points] == [0.0, 0.25, 0.5, 0.75, 1.0]


@pytest.mark.parametrize("count,interval", [(2, 3.0), (101, 0.1), (977, 12.5)])
def test_first_and_last_time(synth, count, interval) -> None:
    signal = synth.synthesize(SignalType.SINE, point_count=count, time_interval=interval)
    assert len(signal.points) == count
    assert signal.points[0].time == 0.0
    assert signal.points[-1].time == pytest.approx(interval)
    assert np.all(np.diff(signal.times()) > 0)


def test_single_point_signal(synth) -> None:
    signal = synth.synthesize(SignalType.SINE, point_count=1, time_interval=4.0)
    assert [p.time for p in signal.points] == [0.0]


def test_noise_free_values_follow_waveform(synth) -> None:
    signal = synth.synthesize(
        SignalType.TRIANGLE, amplitude=3.0, frequency=2.0, phase=0.3, point_count=64
    )
    expected = triangle(3.0, 2.0, signal.times(), 0.3)
    np.testing.assert_allclose(signal.values(), expected)


def test_parallel_and_sequential_agree_on_layout() -> None:
    sequential = SignalSynthesizer(parallel_threshold=10_000)
    parallel = SignalSynthesizer(parallel_threshold=10, max_workers=3)

    a = sequential.synthesize(SignalType.SINE, amplitude=2.0, frequency=3.0, point_count=5000)
    b = parallel.synthesize(SignalType.SINE, amplitude=2.0, frequency=3.0, point_count=5000)

    assert len(a.points) == len(b.points) == 5000
    np.testing.assert_array_equal(a.times(), b.times())
    np.testing.assert_allclose(a.values(), b.values(), atol=1e-12)


def test_parallel_noise_is_reproducible_with_seed() -> None:
    synth = SignalSynthesizer(parallel_threshold=100, max_workers=4)
    a = synth.synthesize(SignalType.SINE, point_count=20_000, noise_level=50, seed=99)
    b = synth.synthesize(SignalType.SINE, point_count=20_000, noise_level=50, seed=99)
    np.testing.assert_array_equal(a.values(), b.values())


def test_noise_scales_with_level() -> None:
    synth = SignalSynthesizer(seed=5)
    signal = synth.synthesize(
        SignalType.SINE, amplitude=4.0, frequency=1.0, point_count=40_000, noise_level=25
    )
    residual = signal.values() - sine(4.0, 1.0, signal.times(), 0.0)
    assert residual.std() == pytest.approx(1.0, abs=0.05)


def test_cancellation_before_start_raises(synth) -> None:
    token = CancellationToken()
    token.cancel()
    with pytest.raises(OperationCancelled):
        synth.synthesize(SignalType.SINE, point_count=10_000, cancellation=token)
    with pytest.raises(OperationCancelled):
        synth.synthesize(SignalType.SINE, point_count=10, cancellation=token)


def test_cancellation_during_sequential_generation(countdown_token) -> None:
    synth = SignalSynthesizer()
    with pytest.raises(OperationCancelled):
        synth.synthesize(SignalType.SINE, point_count=500, cancellation=countdown_token(100))


def test_cancellation_during_parallel_generation(countdown_token) -> None:
    synth = SignalSynthesizer(parallel_threshold=10, max_workers=2)
    with pytest.raises(OperationCancelled):
        synth.synthesize(SignalType.SAWTOOTH, point_count=50_000, cancellation=countdown_token(3))


def test_partition_bounds_cover_range_without_overlap() -> None:
    bounds = partition_bounds(10_001, 12)
    assert bounds[0][0] == 0
    assert bounds[-1][1] == 10_001
    for (_, hi), (lo, _) in zip(bounds, bounds[1:]):
        assert hi == lo
    assert partition_bounds(3, 8) == [(0, 1), (1, 2), (2, 3)]

"""Waveform functions.

Each function maps ``(amplitude, frequency, time, phase)`` to the
instantaneous value of one periodic waveform. They are pure and accept either
a scalar ``time`` (returning ``float``) or an array of times (returning a
``float64`` array), which lets the synthesizer evaluate whole partitions at
once.
"""

from __future__ import annotations

import math
from typing import Callable, Union

import numpy as np
from numpy.typing import ArrayLike

from ..core.models import SignalType

TWO_PI = 2.0 * math.pi

Value = Union[float, np.ndarray]
WaveformFunc = Callable[[float, float, ArrayLike, float], Value]


def _unwrap(result: np.ndarray) -> Value:
    return float(result) if result.ndim == 0 else result


def _require_positive_frequency(frequency: float) -> None:
    if not frequency > 0:
        raise ValueError(f"frequency must be > 0 for periodic folding, got {frequency}")


def _fold(frequency: float, time: ArrayLike, phase: float) -> tuple[np.ndarray, float]:
    """
    Shift ``time`` by the phase and fold it into ``[0, period)``.

    Returns the folded time and the period.
    """
    _require_positive_frequency(frequency)
    period = 1.0 / frequency
    time_shift = phase / (TWO_PI * frequency)
    t = np.fmod(np.asarray(time, dtype=np.float64) + time_shift, period)
    t = np.where(t < 0, t + period, t)
    return t, period


def sine(amplitude: float, frequency: float, time: ArrayLike, phase: float = 0.0) -> Value:
    t = np.asarray(time, dtype=np.float64)
    return _unwrap(amplitude * np.sin(TWO_PI * frequency * t + phase))


def square(amplitude: float, frequency: float, time: ArrayLike, phase: float = 0.0) -> Value:
    """Sign of the matching sine times ``amplitude``; 0 at exact zero crossings."""
    t = np.asarray(time, dtype=np.float64)
    return _unwrap(np.sign(np.sin(TWO_PI * frequency * t + phase)) * amplitude)


def triangle(amplitude: float, frequency: float, time: ArrayLike, phase: float = 0.0) -> Value:
    """
    Symmetric triangle wave.

    Rises linearly from ``-amplitude`` to ``+amplitude`` during the first half
    period and falls back during the second half.
    """
    t, period = _fold(frequency, time, phase)
    half_period = period / 2.0
    slope = 4.0 * amplitude / period
    rising = slope * t - amplitude
    falling = -slope * (t - half_period) + amplitude
    return _unwrap(np.where(t < half_period, rising, falling))


def sawtooth(amplitude: float, frequency: float, time: ArrayLike, phase: float = 0.0) -> Value:
    """Ramp from ``-amplitude`` at the start of each period towards ``+amplitude``."""
    t, period = _fold(frequency, time, phase)
    return _unwrap(2.0 * amplitude * (t / period) - amplitude)


def waveform_for(signal_type: SignalType | str) -> WaveformFunc:
    """Return the waveform function for ``signal_type``."""
    kind = SignalType.parse(signal_type)
    if kind is SignalType.SINE:
        return sine
    if kind is SignalType.SQUARE:
        return square
    if kind is SignalType.TRIANGLE:
        return triangle
    if kind is SignalType.SAWTOOTH:
        return sawtooth
    raise ValueError(f"Unsupported signal type {signal_type!r}")  # pragma: no cover


def waveform_value(
    signal_type: SignalType | str,
    amplitude: float,
    frequency: float,
    time: ArrayLike,
    phase: float = 0.0,
) -> Value:
    """Evaluate the waveform of ``signal_type`` at ``time``."""
    return waveform_for(signal_type)(amplitude, frequency, time, phase)

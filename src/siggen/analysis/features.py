"""Summary statistics over a signal's values."""

from __future__ import annotations

from typing import Tuple, Union

import numpy as np
from numpy.typing import ArrayLike

from ..core.models import Signal


SignalLike = Union[Signal, ArrayLike]


def _to_1d_array(signal: SignalLike) -> np.ndarray:
    """Convert a :class:`Signal` or array-like input to a 1D float64 array."""
    if isinstance(signal, Signal):
        arr = signal.values()
    else:
        arr = np.asarray(signal, dtype=float)
    if arr.size == 0:
        raise ValueError("signal must contain at least one sample")
    if arr.ndim != 1:
        raise ValueError(f"signal must be 1-D, got shape {arr.shape}")
    return arr


def rms(signal: SignalLike) -> float:
    """
    Compute root-mean-square (RMS) value of a 1-D signal.

    Parameters
    ----------
    signal:
        :class:`Signal` or 1-D array-like of samples.

    Returns
    -------
    float
        RMS value of the signal.
    """
    arr = _to_1d_array(signal)
    return float(np.sqrt(np.mean(np.square(arr))))


def peak_to_peak(signal: SignalLike) -> float:
    """Compute peak-to-peak value (max - min) of a 1-D signal."""
    arr = _to_1d_array(signal)
    return float(np.max(arr) - np.min(arr))


def value_range(signal: SignalLike, *, margin: float = 0.0) -> Tuple[float, float]:
    """
    Return ``(min, max)`` of the values, widened by ``margin`` times the span.

    A constant signal gets a symmetric span of 1 so chart axes never collapse.
    """
    arr = _to_1d_array(signal)
    lo = float(np.min(arr))
    hi = float(np.max(arr))
    span = hi - lo
    if span == 0:
        return lo - 0.5, hi + 0.5
    pad = span * float(margin)
    return lo - pad, hi + pad

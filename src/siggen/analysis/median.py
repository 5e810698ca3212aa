"""Sliding-window median filter.

Windows of 3, 5 and 7 samples use dedicated small-buffer sorts and clamp
out-of-range indices to the nearest edge, so the edge samples are repeated and
the window always holds ``window_size`` values. Every other odd size takes
the general path, where the window shrinks near the edges and only in-range
samples are considered. The two edge policies give different results on the
first and last ``window_size // 2`` samples.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

from ..core.cancellation import CancellationToken, check_cancelled
from ..core.models import Signal, SignalPoint
from ..tools.debug import time_block

logger = logging.getLogger(__name__)

CHECK_INTERVAL = 1000


def median3(a: float, b: float, c: float) -> float:
    if a > b:
        a, b = b, a
    if b > c:
        b, c = c, b
    if a > b:
        a, b = b, a
    return b


def _median5(window: List[float]) -> float:
    for i in range(4):
        for j in range(i + 1, 5):
            if window[i] > window[j]:
                window[i], window[j] = window[j], window[i]
    return window[2]


def _insertion_sort(window: List[float]) -> None:
    for i in range(1, len(window)):
        key = window[i]
        j = i - 1
        while j >= 0 and window[j] > key:
            window[j + 1] = window[j]
            j -= 1
        window[j + 1] = key


def _filter3(values: Sequence[float], out: List[float], token, interval: int) -> None:
    n = len(values)
    last = n - 1
    for i in range(n):
        if i % interval == 0:
            check_cancelled(token)
        out[i] = median3(values[max(0, i - 1)], values[i], values[min(last, i + 1)])


def _filter5(values: Sequence[float], out: List[float], token, interval: int) -> None:
    n = len(values)
    last = n - 1
    window = [0.0] * 5
    for i in range(n):
        if i % interval == 0:
            check_cancelled(token)
        for slot, j in enumerate(range(i - 2, i + 3)):
            window[slot] = values[min(max(j, 0), last)]
        out[i] = _median5(window)


def _filter7(values: Sequence[float], out: List[float], token, interval: int) -> None:
    n = len(values)
    last = n - 1
    window = [0.0] * 7
    for i in range(n):
        if i % interval == 0:
            check_cancelled(token)
        for slot, j in enumerate(range(i - 3, i + 4)):
            window[slot] = values[min(max(j, 0), last)]
        _insertion_sort(window)
        out[i] = window[3]


def _filter_general(
    values: Sequence[float], out: List[float], window_size: int, token, interval: int
) -> None:
    n = len(values)
    radius = window_size // 2
    # one buffer per call; slots past a shrunken edge window hold +inf so
    # they sort after every in-range sample
    scratch = [math.inf] * window_size
    for i in range(n):
        if i % interval == 0:
            check_cancelled(token)
        start = max(0, i - radius)
        end = min(n - 1, i + radius)
        size = end - start + 1
        for slot in range(window_size):
            scratch[slot] = values[start + slot] if slot < size else math.inf
        scratch.sort()
        out[i] = scratch[size // 2]


def median_filter_values(
    values: Sequence[float],
    window_size: int = 3,
    cancellation: CancellationToken | None = None,
    *,
    check_interval: int = CHECK_INTERVAL,
) -> List[float]:
    """
    Median-filter a plain sequence of values.

    Raises ``ValueError`` for an even or non-positive ``window_size`` and
    :class:`OperationCancelled` when ``cancellation`` is set at a checkpoint
    (every ``check_interval`` samples).
    """
    if window_size < 1 or window_size % 2 == 0:
        raise ValueError(f"window_size must be odd and > 0, got {window_size}")
    values = list(values)
    if not values or window_size == 1:
        return values

    interval = max(1, int(check_interval))
    out = [0.0] * len(values)
    if window_size == 3:
        _filter3(values, out, cancellation, interval)
    elif window_size == 5:
        _filter5(values, out, cancellation, interval)
    elif window_size == 7:
        _filter7(values, out, cancellation, interval)
    else:
        _filter_general(values, out, window_size, cancellation, interval)
    return out


class MedianFilter:
    """Apply :func:`median_filter_values` to a :class:`Signal`."""

    def __init__(self, check_interval: int = CHECK_INTERVAL) -> None:
        self.check_interval = max(1, int(check_interval))

    @classmethod
    def from_config(cls, config) -> "MedianFilter":
        return cls(check_interval=config.filter_check_interval)

    def apply(
        self,
        signal: Signal,
        window_size: int = 3,
        cancellation: CancellationToken | None = None,
    ) -> Signal:
        """
        Return a new signal whose values are the windowed medians.

        Times are kept, ``created_at`` is refreshed and ``signal`` is left
        untouched. Empty signals and ``window_size == 1`` return a plain clone.
        """
        if window_size < 1 or window_size % 2 == 0:
            raise ValueError(f"window_size must be odd and > 0, got {window_size}")
        if not signal.points or window_size == 1:
            return signal.clone()

        logger.debug("Median filter: window=%d, points=%d", window_size, len(signal.points))
        with time_block(f"median filter w={window_size}", logger):
            filtered = median_filter_values(
                [p.value for p in signal.points],
                window_size,
                cancellation,
                check_interval=self.check_interval,
            )
        points = [SignalPoint(p.time, v) for p, v in zip(signal.points, filtered)]
        return signal.with_points(points)


def apply_median_filter(
    signal: Signal,
    window_size: int = 3,
    cancellation: CancellationToken | None = None,
) -> Signal:
    """Convenience wrapper around :meth:`MedianFilter.apply`."""
    return MedianFilter().apply(signal, window_size, cancellation)

"""Point-count reduction for display."""

from __future__ import annotations

import math
from typing import List, Sequence, TypeVar

from ..core.models import Signal

P = TypeVar("P")

MAX_DISPLAY_POINTS = 10_000


def stride_indices(count: int, max_points: int) -> List[int]:
    """
    Indices kept by :func:`downsample_points` for ``count`` input points.

    Walks ``0, step, 2*step, ...`` with ``step = ceil(count / (max_points - 1))``
    over all but the final index, keeping at most ``max_points - 1`` of them,
    then appends the final index. The last segment may be shorter than
    ``step``.

    The final point is appended whenever its index was not the last one
    collected. Indices are compared, not point values, so a trailing
    duplicate of the last strided point is still kept.
    """
    if count <= max_points or max_points < 2:
        return list(range(count))
    step = math.ceil(count / (max_points - 1))
    kept = list(range(0, count - 1, step))[: max_points - 1]
    if kept[-1] != count - 1:
        kept.append(count - 1)
    return kept


def downsample_points(points: Sequence[P], max_points: int) -> List[P]:
    return [points[i] for i in stride_indices(len(points), max_points)]


def downsample(signal: Signal, max_points: int = MAX_DISPLAY_POINTS) -> Signal:
    """
    Reduce ``signal`` to at most ``max_points`` points for display.

    Returns ``signal`` itself when it already fits or ``max_points < 2``.
    Otherwise a new signal keeps the first and last original points and
    the original metadata.
    """
    count = len(signal.points)
    if count <= max_points or max_points < 2:
        return signal
    return signal.clone(points=downsample_points(signal.points, max_points))

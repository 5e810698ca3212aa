"""Signal post-processing (median filtering, downsampling, statistics).

Modules here operate on :class:`~siggen.core.models.Signal` objects or plain
value sequences and stay free of I/O so they can be reused from the CLI,
background tasks, or tests alike. Every transform returns a new signal.
"""

from .downsample import MAX_DISPLAY_POINTS, downsample, downsample_points
from .features import peak_to_peak, rms, value_range
from .median import MedianFilter, apply_median_filter, median_filter_values

__all__ = [
    "MAX_DISPLAY_POINTS",
    "MedianFilter",
    "apply_median_filter",
    "downsample",
    "downsample_points",
    "median_filter_values",
    "peak_to_peak",
    "rms",
    "value_range",
]

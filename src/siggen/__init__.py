"""Deterministic signal synthesis and processing.

Generate Sine / Square / Triangle / Sawtooth waveforms with Gaussian noise,
then median-filter and downsample them for display. The heavy lifting lives
in :mod:`siggen.generators` and :mod:`siggen.analysis`; :mod:`siggen.dataio`
stores signals and :mod:`siggen.cli` ties everything together.
"""

from .analysis import MedianFilter, downsample
from .core import (
    CancellationToken,
    OperationCancelled,
    Signal,
    SignalParameters,
    SignalPoint,
    SignalType,
)
from .generators import SignalSynthesizer

__version__ = "0.1.0"

__all__ = [
    "CancellationToken",
    "MedianFilter",
    "OperationCancelled",
    "Signal",
    "SignalParameters",
    "SignalPoint",
    "SignalSynthesizer",
    "SignalType",
    "downsample",
]

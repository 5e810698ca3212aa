"""Core data model and the cooperative cancellation used across the package.

Everything else builds on the dataclasses in :mod:`models` (signals, points,
generation parameters) and on :mod:`cancellation` / :mod:`background` for
running long operations off the caller's thread.
"""

from .background import BackgroundTask, start_task
from .cancellation import CancellationToken, OperationCancelled, check_cancelled
from .models import Signal, SignalDefaults, SignalParameters, SignalPoint, SignalType

__all__ = [
    "BackgroundTask",
    "CancellationToken",
    "OperationCancelled",
    "Signal",
    "SignalDefaults",
    "SignalParameters",
    "SignalPoint",
    "SignalType",
    "check_cancelled",
    "start_task",
]

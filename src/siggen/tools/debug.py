"""Timing helpers for the long-running operations (synthesis, filtering).

Timings are reported through ``logging`` at DEBUG level. Setting
``SIGGEN_DEBUG=1`` forces them on even when the logger is quieter.
"""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from typing import Iterator, Optional

_TRUTHY = {"1", "true", "yes", "on"}


def debug_enabled() -> bool:
    """True when ``SIGGEN_DEBUG`` is set to a truthy value."""
    return os.getenv("SIGGEN_DEBUG", "").strip().lower() in _TRUTHY


def _should_report(logger: logging.Logger) -> bool:
    return debug_enabled() or logger.isEnabledFor(logging.DEBUG)


@contextmanager
def time_block(label: str, logger: Optional[logging.Logger] = None) -> Iterator[None]:
    """
    Log how long the wrapped block took.

    Nothing is measured when neither ``SIGGEN_DEBUG`` nor DEBUG logging is
    active for ``logger``. A block that raises is still reported.
    """
    logger = logger or logging.getLogger("siggen.timing")
    if not _should_report(logger):
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        level = logging.INFO if debug_enabled() else logging.DEBUG
        logger.log(level, "%s took %.3f ms", label, elapsed_ms)

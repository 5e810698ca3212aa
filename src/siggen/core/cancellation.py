"""Cooperative cancellation shared by synthesis and filtering."""

from __future__ import annotations

import threading
from typing import Optional


class OperationCancelled(Exception):
    """Raised when a caller-requested cancellation aborts an operation."""


class CancellationToken:
    """
    Thin wrapper around :class:`threading.Event`.

    The owner calls :meth:`cancel`; long-running work calls
    :meth:`raise_if_cancelled` at its own checkpoints.
    """

    __slots__ = ("_event",)

    def __init__(self, event: Optional[threading.Event] = None) -> None:
        self._event = event or threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise OperationCancelled("operation was cancelled")


def check_cancelled(token: Optional[CancellationToken]) -> None:
    """Raise :class:`OperationCancelled` if ``token`` is set (``None`` never is)."""
    if token is not None:
        token.raise_if_cancelled()

"""Run synthesis or filtering on a background thread.

The core never blocks on I/O, but generating 100k points or filtering with a
wide window takes long enough that an interactive caller should not wait on
its own thread. :func:`start_task` hands the work to a daemon thread and
returns a handle that can cancel it and collect the outcome.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .cancellation import CancellationToken

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class BackgroundTask(Generic[T]):
    thread: threading.Thread
    token: CancellationToken
    future: "Future[T]"

    def cancel(self) -> None:
        """Request cooperative cancellation; the worker stops at its next checkpoint."""
        self.token.cancel()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the task finished; return False on timeout."""
        self.thread.join(timeout)
        return not self.thread.is_alive()

    def result(self, timeout: Optional[float] = None) -> T:
        """
        Return the task's value or re-raise its exception.

        A cancelled task raises :class:`OperationCancelled`.
        """
        return self.future.result(timeout)

    def done(self) -> bool:
        return self.future.done()

    def is_alive(self) -> bool:
        return self.thread.is_alive()


def start_task(
    func: Callable[..., T],
    *args: Any,
    token: Optional[CancellationToken] = None,
    thread_name: Optional[str] = None,
    **kwargs: Any,
) -> BackgroundTask[T]:
    """
    Start ``func(*args, cancellation=token, **kwargs)`` on a daemon thread.
    """
    token = token or CancellationToken()
    future: Future[T] = Future()
    future.set_running_or_notify_cancel()

    def _target() -> None:
        try:
            value = func(*args, cancellation=token, **kwargs)
        except BaseException as exc:
            logger.debug("Background task %s ended with %r", thread.name, exc)
            future.set_exception(exc)
        else:
            future.set_result(value)

    thread = threading.Thread(
        target=_target,
        name=thread_name or "SigGenTask",
        daemon=True,
    )
    thread.start()
    return BackgroundTask(thread=thread, token=token, future=future)

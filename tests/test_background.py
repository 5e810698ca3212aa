import threading

import pytest

from siggen.core.background import start_task
from siggen.core.cancellation import CancellationToken, OperationCancelled
from siggen.core.models import SignalType
from siggen.generators import SignalSynthesizer


def test_synthesis_runs_off_the_calling_thread() -> None:
    seen = {}

    def work(count, cancellation=None):
        seen["thread"] = threading.current_thread().name
        return SignalSynthesizer().synthesize(
            SignalType.SINE, point_count=count, cancellation=cancellation
        )

    task = start_task(work, 256, thread_name="Worker-1")
    signal = task.result(timeout=10)

    assert len(signal.points) == 256
    assert seen["thread"] == "Worker-1"
    assert task.done()
    assert task.wait(timeout=1)


def test_pre_cancelled_task_reports_cancellation() -> None:
    token = CancellationToken()
    token.cancel()
    task = start_task(SignalSynthesizer().synthesize, SignalType.SQUARE, token=token)
    with pytest.raises(OperationCancelled):
        task.result(timeout=10)


def test_cancel_stops_waiting_worker() -> None:
    started = threading.Event()

    def wait_for_cancel(cancellation=None):
        started.set()
        while True:
            cancellation.raise_if_cancelled()
            started.wait(0.01)

    task = start_task(wait_for_cancel)
    assert started.wait(5)
    task.cancel()
    with pytest.raises(OperationCancelled):
        task.result(timeout=5)
    assert task.wait(timeout=5)


def test_errors_are_re_raised() -> None:
    task = start_task(SignalSynthesizer().synthesize, SignalType.SINE, point_count=0)
    with pytest.raises(ValueError):
        task.result(timeout=10)

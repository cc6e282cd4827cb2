"""Unit tests for ExecutionMonitor."""

import threading

import pytest

from classilist.application.execution import ExecutionMonitor
from classilist.application.ports import ProgressMonitorPort
from classilist.domain.errors import WriteCancelledError


class TestExecutionMonitor:
    """Test suite for ExecutionMonitor."""

    def test_implements_progress_port(self):
        assert isinstance(ExecutionMonitor(), ProgressMonitorPort)

    def test_not_cancelled_initially(self):
        monitor = ExecutionMonitor()
        assert monitor.is_cancelled is False
        monitor.check_cancelled()

    def test_cancel_makes_check_raise(self):
        monitor = ExecutionMonitor()
        monitor.cancel()
        assert monitor.is_cancelled
        with pytest.raises(WriteCancelledError):
            monitor.check_cancelled()

    def test_cancel_from_another_thread(self):
        monitor = ExecutionMonitor()
        worker = threading.Thread(target=monitor.cancel)
        worker.start()
        worker.join()
        assert monitor.is_cancelled

    def test_progress_is_clamped_and_monotonic(self):
        monitor = ExecutionMonitor()
        monitor.set_progress(0.5, "half")
        monitor.set_progress(0.2, "back")
        assert monitor.progress == 0.5
        assert monitor.message == "back"
        monitor.set_progress(3.0, "over")
        assert monitor.progress == 1.0

    def test_callback_receives_updates(self):
        calls: list[tuple[float | None, str]] = []
        monitor = ExecutionMonitor(progress_callback=lambda f, m: calls.append((f, m)))

        monitor.set_progress(0.25, "a")
        monitor.set_progress(None, "b")

        assert calls == [(0.25, "a"), (None, "b")]

    def test_cancel_after_timer(self):
        monitor = ExecutionMonitor()
        fired = threading.Event()
        monitor.cancel_after(0.01)
        # Wait for the timer thread to flip the flag.
        for _ in range(200):
            if monitor.is_cancelled:
                fired.set()
                break
            threading.Event().wait(0.01)
        assert fired.is_set()

    def test_stop_timer_prevents_cancel(self):
        monitor = ExecutionMonitor()
        monitor.cancel_after(60)
        monitor.stop_timer()
        assert monitor.is_cancelled is False

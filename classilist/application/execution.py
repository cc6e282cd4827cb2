"""Cooperative cancellation and progress reporting for table writes.

The writer polls the monitor once per row boundary. Any thread (a signal
handler, a timer, a UI) may call :meth:`ExecutionMonitor.cancel`; the
write stops before the next row is started.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from ..domain.errors import WriteCancelledError

if TYPE_CHECKING:
    from collections.abc import Callable


class ExecutionMonitor:
    def __init__(
        self, progress_callback: Callable[[float | None, str], None] | None = None
    ) -> None:
        super().__init__()
        self._cancelled = threading.Event()
        self._progress_callback = progress_callback
        self._timer: threading.Timer | None = None
        self.progress: float = 0.0
        self.message: str = ""

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    def check_cancelled(self) -> None:
        if self._cancelled.is_set():
            raise WriteCancelledError()

    def set_progress(self, fraction: float | None, message: str) -> None:
        if fraction is not None:
            fraction = min(max(fraction, 0.0), 1.0)
            # Progress never moves backwards.
            self.progress = max(self.progress, fraction)
        self.message = message
        if self._progress_callback is not None:
            self._progress_callback(
                self.progress if fraction is not None else None, message
            )

    def cancel_after(self, seconds: float) -> None:
        self.stop_timer()
        self._timer = threading.Timer(seconds, self.cancel)
        self._timer.daemon = True
        self._timer.start()

    def stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from rich.progress import (
    BarColumn,
    Progress,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

if TYPE_CHECKING:
    from types import TracebackType

    from rich.console import Console

PROGRESS_TOTAL = 100.0


class ProgressPresenter:
    """Renders writer progress as a rich progress bar.

    Instances are used as the progress callback of an ``ExecutionMonitor``.
    """

    def __init__(self, console: Console, *, enabled: bool = True) -> None:
        super().__init__()
        self.console = console
        self.enabled = enabled
        self.updates = 0
        self.last_message = ""
        self.last_fraction: float | None = None
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def __enter__(self) -> Self:
        if self.enabled:
            self._progress = Progress(
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                TimeElapsedColumn(),
                console=self.console,
                transient=True,
            )
            self._progress.start()
            self._task = self._progress.add_task("Writing rows", total=None)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task = None

    def __call__(self, fraction: float | None, message: str) -> None:
        self.updates += 1
        self.last_message = message
        if fraction is not None:
            self.last_fraction = fraction
        if self._progress is None or self._task is None:
            return
        if fraction is None:
            self._progress.update(self._task, description=message)
        else:
            self._progress.update(
                self._task,
                description=message,
                total=PROGRESS_TOTAL,
                completed=fraction * PROGRESS_TOTAL,
            )

    @property
    def progress_percentage(self) -> float | None:
        if self.last_fraction is None:
            return None
        return self.last_fraction * PROGRESS_TOTAL

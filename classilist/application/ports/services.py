from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path

    from ...domain.entities.columns import ColumnSpec
    from ...domain.entities.rows import Row
    from ...domain.services.header_rewriter import ClassificationLayout
    from ..models import WriteResult


@runtime_checkable
class RowSourcePort(Protocol):
    """Pull-based table input: column metadata first, then rows on demand."""

    @property
    def columns(self) -> Sequence[ColumnSpec]: ...

    @property
    def row_count(self) -> int | None: ...

    def __iter__(self) -> Iterator[Row]: ...


@runtime_checkable
class ProgressMonitorPort(Protocol):
    pass

    @property
    def is_cancelled(self) -> bool: ...

    def check_cancelled(self) -> None: ...

    def set_progress(self, fraction: float | None, message: str) -> None: ...


@runtime_checkable
class OutputTargetPort(Protocol):
    pass

    @property
    def path(self) -> Path: ...

    @property
    def existed_before(self) -> bool: ...

    @property
    def has_content(self) -> bool: ...

    def open(self) -> TextIO: ...

    def close(self) -> None: ...

    def discard(self) -> None: ...


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_export_start(
        self, source_name: str, output_path: Path, overwrite_policy: str
    ) -> None: ...

    def log_column_roles(self, layout: ClassificationLayout) -> None: ...

    def log_write_complete(
        self, output_path: Path, rows_written: int, *, header_written: bool
    ) -> None: ...

    def log_write_cancelled(self, output_path: Path, rows_written: int) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class TableWriterPort(Protocol):
    pass

    def write(
        self,
        source: RowSourcePort,
        monitor: ProgressMonitorPort | None = None,
        *,
        write_header: bool = True,
    ) -> WriteResult: ...

from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.services.header_rewriter import ClassificationLayout


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_export_start(
        self, source_name: str, output_path: Path, overwrite_policy: str
    ) -> None:
        return None

    @override
    def log_column_roles(self, layout: ClassificationLayout) -> None:
        return None

    @override
    def log_write_complete(
        self, output_path: Path, rows_written: int, *, header_written: bool
    ) -> None:
        return None

    @override
    def log_write_cancelled(self, output_path: Path, rows_written: int) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None

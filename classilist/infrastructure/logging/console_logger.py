from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort
from ...domain.entities.columns import RoleKind

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.services.header_rewriter import ClassificationLayout


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    source_name: str = ""
    output_path: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _new_stats() -> dict[str, int]:
    return {
        "exports_started": 0,
        "exports_completed": 0,
        "exports_cancelled": 0,
        "rows_written": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _new_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_export_start(
        self, source_name: str, output_path: Path, overwrite_policy: str
    ) -> None:
        self.set_context(source_name=source_name, output_path=str(output_path))
        self._stats["exports_started"] += 1
        self.console.print(f"[bold]Exporting {source_name}[/bold] → {output_path}")
        self.verbose(f"Overwrite policy: {overwrite_policy}")

    @override
    def log_column_roles(self, layout: ClassificationLayout) -> None:
        features = layout.by_role(RoleKind.FEATURE)
        self.verbose(
            f"Class column '{layout.class_column}': "
            f"{len(layout.class_names)} classes, {len(features)} features"
        )
        if self.verbosity >= LogLevel.DEBUG:
            for descriptor in layout.descriptors:
                self.debug(
                    f"  {descriptor.name} → {descriptor.header_name} "
                    f"({descriptor.column_type.value})"
                )

    @override
    def log_write_complete(
        self, output_path: Path, rows_written: int, *, header_written: bool
    ) -> None:
        self._stats["exports_completed"] += 1
        self._stats["rows_written"] += rows_written
        header = "" if header_written else " (no header)"
        self.success(f"Wrote {rows_written:,} rows to {output_path}{header}")

    @override
    def log_write_cancelled(self, output_path: Path, rows_written: int) -> None:
        self._stats["exports_cancelled"] += 1
        self.warning(
            f"Export to {output_path} cancelled after {rows_written:,} rows; "
            "partial output removed"
        )

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Export Statistics:[/dim]")
            self.console.print(
                f"[dim]  Exports completed: {self._stats['exports_completed']}[/dim]"
            )
            self.console.print(
                f"[dim]  Rows written: {self._stats['rows_written']:,}[/dim]"
            )
            if self._stats["exports_cancelled"] > 0:
                self.console.print(
                    f"[dim yellow]  Cancelled: {self._stats['exports_cancelled']}"
                    "[/dim yellow]"
                )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _new_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        if self._context.source_name:
            return escape(f"[{self._context.source_name}]") + " "
        return ""

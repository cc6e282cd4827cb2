from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from ...application.models import ExportResponse
    from ...domain.entities.export_settings import ExportSettings


class SummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, response: ExportResponse, settings: ExportSettings) -> None:
        fmt = settings.format
        self.console.print()
        table = Table(title="Export Summary", show_header=False)
        table.add_column("Setting", style="bold")
        table.add_column("Value")
        table.add_row("Output", str(response.output_path))
        table.add_row("Rows written", f"{response.rows_written:,}")
        table.add_row("Header", "written" if response.header_written else "skipped")
        table.add_row("Separator", repr(fmt.column_separator))
        table.add_row("Quote mode", fmt.quote_mode.name)
        table.add_row("Missing values", repr(fmt.missing_value_pattern))
        table.add_row("Decimal separator", repr(fmt.decimal_separator))
        table.add_row("Line ending", fmt.line_ending.name)
        table.add_row("Encoding", fmt.resolved_encoding)
        table.add_row("If exists", settings.overwrite_policy.value)
        self.console.print(table)
        if response.has_warnings:
            self.console.print()
            self.console.print(f"[yellow]Warnings ({len(response.warnings)}):[/yellow]")
            for message in response.warnings:
                self.console.print(f"  [yellow]⚠[/yellow] {message}")

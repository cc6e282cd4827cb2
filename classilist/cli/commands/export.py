"""Export command - Write a classification result table as delimited text.

This module is a thin adapter between the Click CLI framework and the
application layer's ExportTableUseCase. It is responsible for:
1. Parsing CLI arguments and merging them over config and saved settings
2. Reading the input table
3. Running the use case under a cancellable execution monitor
4. Formatting the response for user output
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from pathlib import Path
import signal
import threading
from typing import TYPE_CHECKING, cast

import click
from rich.console import Console

from ...application.execution import ExecutionMonitor
from ...application.models import ExportRequest
from ...config import ConfigLoader
from ...domain.entities.export_settings import ExportSettings, OverwritePolicy
from ...domain.entities.format_settings import LineEnding, QuoteMode
from ...domain.errors import ClassilistError, WriteCancelledError
from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.csv_reader import CSVReadOptions
from ...infrastructure.io.row_sources import DataFrameRowSource
from ...infrastructure.repositories.settings_repository import (
    load_export_settings,
    save_export_settings,
)
from ..presenters.progress import ProgressPresenter
from ..presenters.summary import SummaryPresenter

if TYPE_CHECKING:
    from collections.abc import Iterator
    from types import FrameType

    from ...config import ClassilistConfig

console = Console()

EXIT_CANCELLED = 130

QUOTE_MODE_CHOICES = [mode.value for mode in QuoteMode]
LINE_ENDINGS = {
    "system": LineEnding.PLATFORM_DEFAULT,
    "lf": LineEnding.LF,
    "crlf": LineEnding.CRLF,
    "cr": LineEnding.CR,
}
IF_EXISTS_CHOICES = [policy.value.lower() for policy in OverwritePolicy]

# Option name -> FormatSettings field, for plain string overrides.
STRING_OPTIONS = {
    "separator": "column_separator",
    "missing": "missing_value_pattern",
    "quote_begin": "quote_begin",
    "quote_end": "quote_end",
    "quote_replacement": "quote_replacement",
    "separator_replacement": "separator_replacement",
    "decimal_separator": "decimal_separator",
}

ESCAPES = {"\\t": "\t", "\\n": "\n", "\\r": "\r"}


def unescape(value: str) -> str:
    """Translate the shell-friendly spellings ``\\t``, ``\\n`` and ``\\r``."""
    for escaped, actual in ESCAPES.items():
        value = value.replace(escaped, actual)
    return value


@dataclass(frozen=True)
class ExportCommandOptions:
    config_file: Path | None
    settings_file: Path | None
    save_settings: Path | None
    separator: str | None
    missing: str | None
    quote_mode: str | None
    quote_begin: str | None
    quote_end: str | None
    quote_replacement: str | None
    separator_replacement: str | None
    replace_separator_in_strings: bool | None
    write_row_id: bool | None
    decimal_separator: str | None
    line_ending: str | None
    encoding: str | None
    if_exists: str | None
    input_separator: str | None
    input_encoding: str | None
    index_column: str | None
    timeout: float | None
    progress: bool
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> ExportCommandOptions:
        return cls(
            config_file=cast("Path | None", options.get("config_file")),
            settings_file=cast("Path | None", options.get("settings_file")),
            save_settings=cast("Path | None", options.get("save_settings")),
            separator=cast("str | None", options.get("separator")),
            missing=cast("str | None", options.get("missing")),
            quote_mode=cast("str | None", options.get("quote_mode")),
            quote_begin=cast("str | None", options.get("quote_begin")),
            quote_end=cast("str | None", options.get("quote_end")),
            quote_replacement=cast("str | None", options.get("quote_replacement")),
            separator_replacement=cast(
                "str | None", options.get("separator_replacement")
            ),
            replace_separator_in_strings=cast(
                "bool | None", options.get("replace_separator_in_strings")
            ),
            write_row_id=cast("bool | None", options.get("write_row_id")),
            decimal_separator=cast("str | None", options.get("decimal_separator")),
            line_ending=cast("str | None", options.get("line_ending")),
            encoding=cast("str | None", options.get("encoding")),
            if_exists=cast("str | None", options.get("if_exists")),
            input_separator=cast("str | None", options.get("input_separator")),
            input_encoding=cast("str | None", options.get("input_encoding")),
            index_column=cast("str | None", options.get("index_column")),
            timeout=cast("float | None", options.get("timeout")),
            progress=cast("bool", options.get("progress", True)),
            verbose=cast("int", options.get("verbose", 0)),
        )


def build_export_settings(
    options: ExportCommandOptions, output_file: Path, runtime_config: ClassilistConfig
) -> ExportSettings:
    """Merge saved settings (or config) with the options given on the command line."""
    if options.settings_file is not None:
        saved = load_export_settings(options.settings_file)
        fmt, policy = saved.format, saved.overwrite_policy
    else:
        fmt = runtime_config.format_settings
        policy = runtime_config.overwrite_policy

    overrides: dict[str, object] = {}
    for option_name, field_name in STRING_OPTIONS.items():
        value = getattr(options, option_name)
        if value is not None:
            overrides[field_name] = unescape(value)
    if options.quote_mode is not None:
        overrides["quote_mode"] = QuoteMode(options.quote_mode.lower())
    if options.replace_separator_in_strings is not None:
        overrides["replace_separator_in_strings"] = options.replace_separator_in_strings
    if options.write_row_id is not None:
        overrides["write_row_id"] = options.write_row_id
    if options.line_ending is not None:
        overrides["line_ending"] = LINE_ENDINGS[options.line_ending.lower()]
    if options.encoding is not None:
        overrides["encoding"] = options.encoding.strip() or None
    if options.if_exists is not None:
        policy = OverwritePolicy(options.if_exists.capitalize())

    return ExportSettings(
        format=replace(fmt, **overrides),
        file_name=str(output_file),
        overwrite_policy=policy,
    )


@contextmanager
def cancel_on_interrupt(monitor: ExecutionMonitor) -> Iterator[None]:
    """Turn Ctrl-C into a cancellation request for the running write."""
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _handler(signum: int, frame: FrameType | None) -> None:
        monitor.cancel()

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


@click.command()
@click.argument(
    "input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.argument("output_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a classilist.toml config file (default: ./classilist.toml)",
)
@click.option(
    "--settings",
    "settings_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Load writer settings from a JSON document saved with --save-settings",
)
@click.option(
    "--save-settings",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Save the effective writer settings to a JSON document",
)
@click.option("--separator", help="Column separator (use \\t for tab)")
@click.option("--missing", help="Pattern written for missing values")
@click.option(
    "--quote-mode",
    type=click.Choice(QUOTE_MODE_CHOICES, case_sensitive=False),
    help="When to quote values",
)
@click.option("--quote-begin", help="Opening quote pattern")
@click.option("--quote-end", help="Closing quote pattern")
@click.option(
    "--quote-replacement", help="Replacement for the closing quote inside values"
)
@click.option(
    "--separator-replacement",
    help="Replacement for the separator inside unquoted values",
)
@click.option(
    "--replace-separator-in-strings/--keep-separator-in-strings",
    "replace_separator_in_strings",
    default=None,
    help="Also replace the separator inside quoted strings (quote mode 'replace')",
)
@click.option(
    "--row-id/--no-row-id",
    "write_row_id",
    default=None,
    help="Write the row key as the first column",
)
@click.option("--decimal-separator", help="Decimal separator for numeric columns")
@click.option(
    "--line-ending",
    type=click.Choice(list(LINE_ENDINGS), case_sensitive=False),
    help="Line terminator (default: platform)",
)
@click.option("--encoding", help="Output encoding (default: platform)")
@click.option(
    "--if-exists",
    type=click.Choice(IF_EXISTS_CHOICES, case_sensitive=False),
    help="What to do when the output file exists",
)
@click.option("--input-separator", help="Column separator of the input CSV")
@click.option("--input-encoding", help="Encoding of the input CSV")
@click.option(
    "--index-col",
    "index_column",
    help="Input column holding the row keys (default: Row0, Row1, ...)",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0.0, min_open=True),
    help="Cancel the export after this many seconds",
)
@click.option(
    "--progress/--no-progress",
    default=True,
    show_default=True,
    help="Show a progress bar while writing",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def export_command(input_file: Path, output_file: Path, **options: object) -> None:
    """Export a classification result table to a delimited text file.

    The input CSV must contain the columns produced by a classifier: the
    actual class column, a 'Prediction (<class column>)' column, one
    'P (<class column>=<class>)' column per class and the feature columns.
    Headers are rewritten to A-<class>, Predicted, P-<class> and F-<name>.

    Examples:

    \b
        # Write with the defaults (comma, strings quoted)
        classilist export scored.csv result.csv

    \b
        # Tab separated, German decimal comma, append to an existing file
        classilist export scored.csv result.tsv --separator '\\t' \\
            --decimal-separator , --if-exists append

    \b
        # Give up after 30 seconds
        classilist export big.csv result.csv --timeout 30
    """
    command_options = ExportCommandOptions.from_kwargs(dict(options))

    container = DependencyContainer(verbose=command_options.verbose, console=console)
    logger = container.create_logger()

    try:
        runtime_config = ConfigLoader.load(config_file=command_options.config_file)
        settings = build_export_settings(command_options, output_file, runtime_config)
        read_options = CSVReadOptions(
            separator=unescape(
                command_options.input_separator or runtime_config.input_separator
            ),
            encoding=command_options.input_encoding or runtime_config.input_encoding,
            index_column=command_options.index_column,
        )
        frame = container.create_csv_reader().read(input_file, read_options)
        if command_options.save_settings is not None:
            save_export_settings(settings, command_options.save_settings)
            logger.verbose(f"Settings saved to {command_options.save_settings}")
    except (ClassilistError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    use_case = container.create_export_use_case()

    with ProgressPresenter(console, enabled=command_options.progress) as progress:
        monitor = ExecutionMonitor(progress_callback=progress)
        request = ExportRequest(
            source=DataFrameRowSource(frame),
            settings=settings,
            source_name=input_file.name,
            monitor=monitor,
        )
        if command_options.timeout is not None:
            monitor.cancel_after(command_options.timeout)
        try:
            with cancel_on_interrupt(monitor):
                response = use_case.execute(request)
        except WriteCancelledError as e:
            raise click.exceptions.Exit(EXIT_CANCELLED) from e
        except ClassilistError as e:
            raise click.ClickException(str(e)) from e
        finally:
            monitor.stop_timer()

    SummaryPresenter(console).present(response, settings)
    logger.log_final_stats()

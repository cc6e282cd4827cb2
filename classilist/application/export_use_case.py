"""Export a classification result table to a delimited text file.

The use case runs the checks that need no output (settings consistency,
column roles), opens the destination according to the overwrite policy,
drives the table writer and removes partial output when the write is
cancelled or fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.entities.export_settings import OverwritePolicy
from ..domain.errors import ClassilistError, WriteCancelledError
from ..domain.services.header_rewriter import derive_column_roles
from ..domain.services.settings_checks import (
    settings_warnings,
    validate_export_settings,
)
from .models import ExportResponse

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO

    from ..domain.entities.export_settings import ExportSettings
    from ..domain.entities.format_settings import FormatSettings
    from .models import ExportRequest
    from .ports.services import LoggerPort, OutputTargetPort, TableWriterPort


@dataclass(slots=True)
class ExportDependencies:
    logger: LoggerPort
    target_factory: Callable[[ExportSettings], OutputTargetPort]
    writer_factory: Callable[[TextIO, FormatSettings, LoggerPort], TableWriterPort]


class ExportTableUseCase:
    """Validates, opens the destination and writes one table."""

    def __init__(self, dependencies: ExportDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._target_factory = dependencies.target_factory
        self._writer_factory = dependencies.writer_factory

    def execute(self, request: ExportRequest) -> ExportResponse:
        settings = request.settings
        validate_export_settings(settings)
        columns = request.source.columns
        derive_column_roles(columns)

        target = self._target_factory(settings)
        warnings = settings_warnings(
            settings, columns, destination_exists=target.existed_before
        )
        for message in warnings:
            self.logger.warning(message)

        # Appending to a file that already has rows must not repeat the header.
        write_header = not (
            settings.overwrite_policy is OverwritePolicy.APPEND and target.has_content
        )
        self.logger.log_export_start(
            request.source_name, target.path, settings.overwrite_policy.value
        )

        sink = target.open()
        try:
            writer = self._writer_factory(sink, settings.format, self.logger)
            result = writer.write(
                request.source, request.monitor, write_header=write_header
            )
            target.close()
        except WriteCancelledError as exc:
            self._discard(target)
            self.logger.log_write_cancelled(target.path, exc.rows_written)
            raise
        except Exception:
            self._discard(target)
            raise

        if result.warning is not None:
            warnings.append(result.warning)
        self.logger.log_write_complete(
            target.path, result.rows_written, header_written=result.header_written
        )
        return ExportResponse(
            output_path=target.path,
            rows_written=result.rows_written,
            header_written=result.header_written,
            warnings=warnings,
        )

    def _discard(self, target: OutputTargetPort) -> None:
        try:
            target.discard()
        except ClassilistError as exc:
            self.logger.warning(str(exc))
        else:
            self.logger.debug(f"Partial output removed: {target.path}")

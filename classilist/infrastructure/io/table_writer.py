"""Streaming writer for classification result tables.

The writer pulls one row at a time from a row source, formats every cell
according to the :class:`FormatSettings` and writes the finished line to a
text sink. Memory use does not grow with the number of rows.

A write goes through ``validate headers -> header line -> rows -> flush``.
Header validation happens before anything reaches the sink, so a table
that does not follow the classification-result naming convention leaves
the sink untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...application.models import WriteResult
from ...constants import HeaderNames
from ...domain.entities.format_settings import FormatSettings
from ...domain.errors import SinkWriteError, WriteCancelledError
from ...domain.services.header_rewriter import derive_column_roles
from ...domain.services.quoting import TokenQuoter, replace_decimal_separator
from .row_sources import DataFrameRowSource

if TYPE_CHECKING:
    from typing import TextIO

    import pandas as pd

    from ...application.ports.services import (
        LoggerPort,
        ProgressMonitorPort,
        RowSourcePort,
    )
    from ...domain.entities.columns import ColumnDescriptor
    from ...domain.entities.rows import Row


@dataclass(slots=True)
class WriteSession:
    total_rows: int | None
    row_index: int = 0
    warning: str | None = None

    def warn_once(self, message: str) -> None:
        if self.warning is None:
            self.warning = message

    def progress_message(self, key: str) -> str:
        message = f'Writing row {self.row_index + 1} ("{key}")'
        if self.total_rows:
            message += f" of {self.total_rows}"
        return message

    @property
    def fraction(self) -> float | None:
        if not self.total_rows or self.total_rows <= 0:
            return None
        return self.row_index / self.total_rows


class TableWriter:
    def __init__(
        self,
        sink: TextIO,
        settings: FormatSettings | None = None,
        *,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self._sink = sink
        self._settings = settings or FormatSettings()
        self._quoter = TokenQuoter(self._settings)
        self._logger = logger
        self._last_warning: str | None = None

    @property
    def settings(self) -> FormatSettings:
        return self._settings

    @property
    def last_warning(self) -> str | None:
        return self._last_warning

    def write(
        self,
        source: RowSourcePort,
        monitor: ProgressMonitorPort | None = None,
        *,
        write_header: bool = True,
    ) -> WriteResult:
        self._last_warning = None
        layout = derive_column_roles(source.columns)
        if self._logger is not None:
            self._logger.log_column_roles(layout)

        session = WriteSession(total_rows=source.row_count)
        if write_header:
            self._emit(self._header_line(layout.descriptors))

        for row in source:
            if monitor is not None:
                monitor.set_progress(
                    session.fraction, session.progress_message(row.key)
                )
                try:
                    monitor.check_cancelled()
                except WriteCancelledError as exc:
                    exc.rows_written = session.row_index
                    raise
            self._emit(self._row_line(row, layout.descriptors, session))
            session.row_index += 1

        try:
            self._sink.flush()
        except (OSError, ValueError) as exc:
            raise SinkWriteError(f"Failed to flush output: {exc}") from exc

        self._last_warning = session.warning
        if session.warning is not None and self._logger is not None:
            self._logger.warning(session.warning)
        return WriteResult(
            rows_written=session.row_index,
            header_written=write_header,
            warning=session.warning,
        )

    def _header_line(self, descriptors: tuple[ColumnDescriptor, ...]) -> str:
        tokens: list[str] = []
        if self._settings.write_row_id:
            tokens.append(self._quoter.quote(HeaderNames.ROW_ID))
        tokens.extend(self._quoter.quote(d.header_name) for d in descriptors)
        return self._join(tokens)

    def _row_line(
        self,
        row: Row,
        descriptors: tuple[ColumnDescriptor, ...],
        session: WriteSession,
    ) -> str:
        tokens: list[str] = []
        if self._settings.write_row_id:
            tokens.append(self._quoter.quote(row.key))
        for descriptor in descriptors:
            value = row.cells[descriptor.index]
            if value is None:
                # Missing patterns are never quoted.
                tokens.append(self._settings.missing_value_pattern)
                continue
            text = str(value)
            if descriptor.is_numeric and self._settings.rewrites_decimal_separator:
                text = self._rewrite_decimal(text, row, descriptor, session)
            tokens.append(self._quoter.quote(text, numeric=descriptor.is_numeric))
        return self._join(tokens)

    def _rewrite_decimal(
        self,
        text: str,
        row: Row,
        descriptor: ColumnDescriptor,
        session: WriteSession,
    ) -> str:
        separator = self._settings.decimal_separator
        if separator not in text:
            return replace_decimal_separator(text, separator)
        session.warn_once(
            f"Specified decimal separator ('{separator}') is contained in the "
            "numerical value. Not replacing decimal separator (e.g. in row "
            f'#{session.row_index} ("{row.key}") column #{descriptor.index} '
            f'("{descriptor.name}")).'
        )
        return text

    def _join(self, tokens: list[str]) -> str:
        line = self._settings.column_separator.join(tokens)
        return line + self._settings.line_terminator

    def _emit(self, text: str) -> None:
        try:
            self._sink.write(text)
        except (OSError, ValueError) as exc:
            raise SinkWriteError(f"Failed to write output: {exc}") from exc


def write_table(
    dataframe: pd.DataFrame,
    sink: TextIO,
    settings: FormatSettings | None = None,
    *,
    monitor: ProgressMonitorPort | None = None,
    write_header: bool = True,
) -> WriteResult:
    writer = TableWriter(sink, settings)
    return writer.write(
        DataFrameRowSource(dataframe), monitor, write_header=write_header
    )

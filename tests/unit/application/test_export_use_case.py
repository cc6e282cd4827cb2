"""Tests for the export use case.

The use case is exercised with mocked output targets and writers so that
the orchestration (checks, header suppression, cleanup) can be verified
without touching the filesystem.
"""

from pathlib import Path
from unittest.mock import Mock

import pytest

from classilist.application.export_use_case import (
    ExportDependencies,
    ExportTableUseCase,
)
from classilist.application.models import ExportRequest, WriteResult
from classilist.domain.entities import (
    ColumnSpec,
    ColumnType,
    ExportSettings,
    FormatSettings,
    OverwritePolicy,
)
from classilist.domain.errors import (
    HeaderValidationError,
    InvalidSettingsError,
    SinkWriteError,
    WriteCancelledError,
)
from classilist.infrastructure.io import IterableRowSource
from classilist.infrastructure.io.exceptions import OutputTargetError
from classilist.infrastructure.logging import NullLogger


def _source(columns: list[ColumnSpec]) -> IterableRowSource:
    return IterableRowSource(columns, [], row_count=0)


class TestExportTableUseCase:
    """Tests for ExportTableUseCase."""

    def _create_use_case(
        self,
        *,
        existed_before: bool = False,
        has_content: bool = False,
        result: WriteResult | None = None,
    ):
        """Create use case with mocked target and writer."""
        target = Mock()
        target.path = Path("out.csv")
        target.existed_before = existed_before
        target.has_content = has_content
        writer = Mock()
        writer.write.return_value = result or WriteResult(
            rows_written=3, header_written=True
        )
        logger = Mock(wraps=NullLogger())
        use_case = ExportTableUseCase(
            ExportDependencies(
                logger=logger,
                target_factory=Mock(return_value=target),
                writer_factory=Mock(return_value=writer),
            )
        )
        return use_case, target, writer, logger

    def test_successful_export(self, iris_columns):
        # Arrange
        use_case, target, writer, _ = self._create_use_case()
        request = ExportRequest(
            source=_source(iris_columns),
            settings=ExportSettings(file_name="out.csv"),
        )

        # Act
        response = use_case.execute(request)

        # Assert
        assert response.rows_written == 3
        assert response.header_written is True
        assert response.output_path == Path("out.csv")
        assert not response.has_warnings
        target.open.assert_called_once()
        target.close.assert_called_once()
        target.discard.assert_not_called()
        assert writer.write.call_args.kwargs == {"write_header": True}

    def test_invalid_settings_fail_before_opening(self, iris_columns):
        use_case, target, _, _ = self._create_use_case()
        request = ExportRequest(source=_source(iris_columns), settings=ExportSettings())

        with pytest.raises(InvalidSettingsError):
            use_case.execute(request)
        target.open.assert_not_called()

    def test_bad_headers_fail_before_opening(self):
        use_case, target, _, _ = self._create_use_case()
        request = ExportRequest(
            source=_source([ColumnSpec("a"), ColumnSpec("b")]),
            settings=ExportSettings(file_name="out.csv"),
        )

        with pytest.raises(HeaderValidationError):
            use_case.execute(request)
        target.open.assert_not_called()

    def test_append_to_non_empty_file_skips_header(self, iris_columns):
        use_case, _, writer, _ = self._create_use_case(
            existed_before=True, has_content=True
        )
        settings = ExportSettings(
            file_name="out.csv", overwrite_policy=OverwritePolicy.APPEND
        )

        response = use_case.execute(
            ExportRequest(source=_source(iris_columns), settings=settings)
        )

        assert writer.write.call_args.kwargs == {"write_header": False}
        assert response.warnings == [
            "Selected output file exists and will be appended: out.csv"
        ]

    def test_append_to_empty_file_writes_header(self, iris_columns):
        use_case, _, writer, _ = self._create_use_case(
            existed_before=True, has_content=False
        )
        settings = ExportSettings(
            file_name="out.csv", overwrite_policy=OverwritePolicy.APPEND
        )

        use_case.execute(ExportRequest(source=_source(iris_columns), settings=settings))

        assert writer.write.call_args.kwargs == {"write_header": True}

    def test_writer_warning_is_reported(self, iris_columns):
        use_case, _, _, _ = self._create_use_case(
            result=WriteResult(rows_written=1, header_written=True, warning="careful")
        )
        response = use_case.execute(
            ExportRequest(
                source=_source(iris_columns),
                settings=ExportSettings(file_name="out.csv"),
            )
        )
        assert response.warnings == ["careful"]

    def test_cancellation_discards_output(self, iris_columns):
        # Arrange
        use_case, target, writer, logger = self._create_use_case()
        writer.write.side_effect = WriteCancelledError(rows_written=2)
        request = ExportRequest(
            source=_source(iris_columns),
            settings=ExportSettings(file_name="out.csv"),
        )

        # Act
        with pytest.raises(WriteCancelledError):
            use_case.execute(request)

        # Assert
        target.discard.assert_called_once()
        target.close.assert_not_called()
        logger.log_write_cancelled.assert_called_once_with(Path("out.csv"), 2)

    def test_write_failure_discards_output(self, iris_columns):
        use_case, target, writer, _ = self._create_use_case()
        writer.write.side_effect = SinkWriteError("disk full")

        with pytest.raises(SinkWriteError, match="disk full"):
            use_case.execute(
                ExportRequest(
                    source=_source(iris_columns),
                    settings=ExportSettings(file_name="out.csv"),
                )
            )
        target.discard.assert_called_once()

    def test_writer_construction_failure_discards_output(self, iris_columns):
        use_case, target, _, _ = self._create_use_case()
        use_case._writer_factory = Mock(side_effect=LookupError("unknown encoding"))

        with pytest.raises(LookupError):
            use_case.execute(
                ExportRequest(
                    source=_source(iris_columns),
                    settings=ExportSettings(file_name="out.csv"),
                )
            )
        target.open.assert_called_once()
        target.discard.assert_called_once()
        target.close.assert_not_called()

    def test_failed_cleanup_is_logged(self, iris_columns):
        use_case, target, writer, logger = self._create_use_case()
        writer.write.side_effect = SinkWriteError("disk full")
        target.discard.side_effect = OutputTargetError("locked")

        with pytest.raises(SinkWriteError):
            use_case.execute(
                ExportRequest(
                    source=_source(iris_columns),
                    settings=ExportSettings(file_name="out.csv"),
                )
            )
        logger.warning.assert_called_with("locked")

    def test_numeric_columns_with_clashing_decimal_separator_warn(self):
        use_case, _, _, logger = self._create_use_case()
        columns = [
            ColumnSpec("x", ColumnType.NUMERIC),
            ColumnSpec("Class"),
            ColumnSpec("Prediction (Class)"),
            ColumnSpec("P (Class=a)", ColumnType.NUMERIC),
        ]
        settings = ExportSettings(
            format=FormatSettings(column_separator=";", decimal_separator=";"),
            file_name="out.csv",
        )

        response = use_case.execute(
            ExportRequest(source=_source(columns), settings=settings)
        )

        assert len(response.warnings) == 1
        logger.warning.assert_called_once()

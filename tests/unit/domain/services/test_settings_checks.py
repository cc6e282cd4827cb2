"""Unit tests for pre-export settings checks."""

import pytest

from classilist.domain.entities import (
    ColumnSpec,
    ColumnType,
    ExportSettings,
    FormatSettings,
    OverwritePolicy,
)
from classilist.domain.errors import InvalidSettingsError
from classilist.domain.services.settings_checks import (
    DECIMAL_IN_SEPARATOR_WARNING,
    HARD_TO_READ_WARNING,
    settings_warnings,
    validate_export_settings,
)

NUMERIC = [ColumnSpec("x", ColumnType.NUMERIC)]
TEXT = [ColumnSpec("x", ColumnType.TEXT)]


class TestValidateExportSettings:
    def test_valid_settings(self):
        validate_export_settings(ExportSettings(file_name="out.csv"))

    def test_missing_file_name(self):
        with pytest.raises(InvalidSettingsError, match="Missing output file name"):
            validate_export_settings(ExportSettings())

    def test_missing_pattern_containing_separator(self):
        settings = ExportSettings(
            format=FormatSettings(missing_value_pattern="n,a"), file_name="out.csv"
        )
        with pytest.raises(InvalidSettingsError, match="must not contain"):
            validate_export_settings(settings)


class TestSettingsWarnings:
    """Test suite for settings_warnings."""

    def test_no_warnings_for_defaults(self):
        assert settings_warnings(ExportSettings(file_name="f"), NUMERIC) == []

    def test_existing_file_overwritten(self):
        warnings = settings_warnings(
            ExportSettings(file_name="f"), TEXT, destination_exists=True
        )
        assert warnings == ["Selected output file exists and will be overwritten: f"]

    def test_existing_file_appended(self):
        settings = ExportSettings(
            file_name="f", overwrite_policy=OverwritePolicy.APPEND
        )
        warnings = settings_warnings(settings, TEXT, destination_exists=True)
        assert warnings == ["Selected output file exists and will be appended: f"]

    def test_abort_policy_does_not_warn(self):
        settings = ExportSettings(
            file_name="f", overwrite_policy=OverwritePolicy.ABORT
        )
        assert settings_warnings(settings, TEXT, destination_exists=True) == []

    def test_hard_to_read_output(self):
        fmt = FormatSettings(column_separator="", quote_end="")
        warnings = settings_warnings(ExportSettings(format=fmt, file_name="f"), TEXT)
        assert HARD_TO_READ_WARNING in warnings

    def test_decimal_separator_in_column_separator(self):
        fmt = FormatSettings(column_separator=", ", decimal_separator=",")
        settings = ExportSettings(format=fmt, file_name="f")
        assert settings_warnings(settings, NUMERIC) == [DECIMAL_IN_SEPARATOR_WARNING]
        # Only relevant when numeric columns exist.
        assert settings_warnings(settings, TEXT) == []

"""Consistency checks run before an export touches the destination file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..entities.export_settings import OverwritePolicy
from ..errors import InvalidSettingsError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..entities.columns import ColumnSpec
    from ..entities.export_settings import ExportSettings

HARD_TO_READ_WARNING = (
    "No separator and no quotes and no missing value pattern set.\n"
    "Written data will be hard to read!"
)
DECIMAL_IN_SEPARATOR_WARNING = (
    "The data separator contains (or is equal to) the decimal separator\n"
    "Written data will be hard to read!"
)


def validate_export_settings(settings: ExportSettings) -> None:
    if not settings.file_name:
        raise InvalidSettingsError("Missing output file name.")
    fmt = settings.format
    if fmt.column_separator and fmt.missing_value_pattern:
        if fmt.column_separator in fmt.missing_value_pattern:
            raise InvalidSettingsError(
                f"The pattern for missing values ('{fmt.missing_value_pattern}') "
                f"must not contain the data separator ('{fmt.column_separator}')."
            )


def settings_warnings(
    settings: ExportSettings,
    columns: Sequence[ColumnSpec],
    *,
    destination_exists: bool = False,
) -> list[str]:
    warnings: list[str] = []
    if destination_exists:
        if settings.overwrite_policy is OverwritePolicy.APPEND:
            warnings.append(
                "Selected output file exists and will be appended: "
                f"{settings.file_name}"
            )
        elif settings.overwrite_policy is OverwritePolicy.OVERWRITE:
            warnings.append(
                "Selected output file exists and will be overwritten: "
                f"{settings.file_name}"
            )

    fmt = settings.format
    no_quotes = not fmt.quote_begin or not fmt.quote_end
    if not fmt.column_separator and not fmt.missing_value_pattern and no_quotes:
        warnings.append(HARD_TO_READ_WARNING)

    has_numeric = any(column.is_numeric for column in columns)
    if has_numeric and fmt.decimal_separator in fmt.column_separator:
        warnings.append(DECIMAL_IN_SEPARATOR_WARNING)
    return warnings

"""Persisted export settings.

Settings are stored as flat key-value JSON documents. Keys added in later
versions of the format are optional and fall back to their defaults, so
older documents keep loading.
"""

from collections.abc import Mapping
import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import Defaults, SettingsKeys
from ...domain.entities.export_settings import ExportSettings, OverwritePolicy
from ...domain.entities.format_settings import FormatSettings, LineEnding, QuoteMode
from ...domain.errors import ClassilistError, InvalidSettingsError
from ..io.exceptions import DataSourceNotFoundError

QUOTE_MODE_NAMES: dict[str, QuoteMode] = {
    "IF_NEEDED": QuoteMode.IF_NEEDED,
    "STRINGS": QuoteMode.STRINGS_ONLY,
    "ALWAYS": QuoteMode.ALWAYS,
    "REPLACE": QuoteMode.REPLACE,
}
LINE_ENDING_NAMES: dict[str, LineEnding] = {
    "SYST": LineEnding.PLATFORM_DEFAULT,
    "LF": LineEnding.LF,
    "CRLF": LineEnding.CRLF,
    "CR": LineEnding.CR,
}


class SettingsSaveError(ClassilistError):
    pass


class SettingsDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    missing: str | None = Field(alias=SettingsKeys.MISSING)
    write_column_header: bool = Field(alias=SettingsKeys.COLUMN_HEADER)
    write_row_header: bool = Field(alias=SettingsKeys.ROW_HEADER)
    column_separator: str | None = Field(
        default=Defaults.COLUMN_SEPARATOR, alias=SettingsKeys.SEPARATOR
    )
    quote_begin: str | None = Field(
        default=Defaults.QUOTE_BEGIN, alias=SettingsKeys.QUOTE_BEGIN
    )
    quote_end: str | None = Field(
        default=Defaults.QUOTE_END, alias=SettingsKeys.QUOTE_END
    )
    quote_mode: str = Field(default="STRINGS", alias=SettingsKeys.QUOTE_MODE)
    quote_replacement: str | None = Field(
        default=Defaults.QUOTE_REPLACEMENT, alias=SettingsKeys.QUOTE_REPLACEMENT
    )
    separator_replacement: str | None = Field(
        default=Defaults.SEPARATOR_REPLACEMENT,
        alias=SettingsKeys.SEPARATOR_REPLACEMENT,
    )
    replace_separator_in_strings: bool = Field(
        default=False, alias=SettingsKeys.REPLACE_SEPARATOR_IN_STRINGS
    )
    decimal_separator: str = Field(
        default=Defaults.DECIMAL_SEPARATOR, alias=SettingsKeys.DECIMAL_SEPARATOR
    )
    line_ending: str = Field(default="SYST", alias=SettingsKeys.LINE_ENDING)
    encoding: str | None = Field(default=None, alias=SettingsKeys.CHARACTER_ENCODING)
    file_name: str | None = Field(default=None, alias=SettingsKeys.FILE_NAME)
    overwrite_policy: str | None = Field(
        default=None, alias=SettingsKeys.OVERWRITE_POLICY
    )
    legacy_append: bool | None = Field(default=None, alias=SettingsKeys.LEGACY_APPEND)


def _quote_mode(name: str) -> QuoteMode:
    try:
        return QUOTE_MODE_NAMES[name]
    except KeyError:
        raise InvalidSettingsError(
            f"Specified quotation mode ('{name}') is unknown."
        ) from None


def _line_ending(name: str) -> LineEnding:
    try:
        return LINE_ENDING_NAMES[name]
    except KeyError:
        raise InvalidSettingsError(
            f"Specified line ending mode ('{name}') is unknown."
        ) from None


def _overwrite_policy(document: SettingsDocument) -> OverwritePolicy:
    if document.overwrite_policy is not None:
        try:
            return OverwritePolicy(document.overwrite_policy)
        except ValueError:
            raise InvalidSettingsError(
                "Unable to parse 'file overwrite policy' field: "
                f"{document.overwrite_policy}"
            ) from None
    if document.legacy_append is not None:
        if document.legacy_append:
            return OverwritePolicy.APPEND
        return OverwritePolicy.OVERWRITE
    return OverwritePolicy.ABORT


def export_settings_from_mapping(data: Mapping[str, Any]) -> ExportSettings:
    try:
        document = SettingsDocument.model_validate(dict(data))
    except ValidationError as exc:
        problems = ", ".join(
            f"{'.'.join(str(p) for p in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        raise InvalidSettingsError(f"Invalid settings: {problems}") from exc

    fmt = FormatSettings(
        column_separator=document.column_separator,
        missing_value_pattern=document.missing,
        quote_begin=document.quote_begin,
        quote_end=document.quote_end,
        quote_replacement=document.quote_replacement,
        quote_mode=_quote_mode(document.quote_mode),
        separator_replacement=document.separator_replacement,
        replace_separator_in_strings=document.replace_separator_in_strings,
        write_row_id=document.write_row_header,
        decimal_separator=document.decimal_separator,
        line_ending=_line_ending(document.line_ending),
        encoding=document.encoding,
    )
    return ExportSettings(
        format=fmt,
        file_name=document.file_name,
        overwrite_policy=_overwrite_policy(document),
    )


def export_settings_to_mapping(settings: ExportSettings) -> dict[str, Any]:
    fmt = settings.format
    quote_names = {mode: name for name, mode in QUOTE_MODE_NAMES.items()}
    line_names = {ending: name for name, ending in LINE_ENDING_NAMES.items()}
    return {
        SettingsKeys.SEPARATOR: fmt.column_separator,
        SettingsKeys.MISSING: fmt.missing_value_pattern,
        SettingsKeys.QUOTE_BEGIN: fmt.quote_begin,
        SettingsKeys.QUOTE_END: fmt.quote_end,
        SettingsKeys.QUOTE_MODE: quote_names[fmt.quote_mode],
        SettingsKeys.QUOTE_REPLACEMENT: fmt.quote_replacement,
        SettingsKeys.SEPARATOR_REPLACEMENT: fmt.separator_replacement,
        SettingsKeys.REPLACE_SEPARATOR_IN_STRINGS: fmt.replace_separator_in_strings,
        SettingsKeys.COLUMN_HEADER: fmt.write_column_header,
        SettingsKeys.ROW_HEADER: fmt.write_row_id,
        SettingsKeys.DECIMAL_SEPARATOR: fmt.decimal_separator,
        SettingsKeys.LINE_ENDING: line_names[fmt.line_ending],
        SettingsKeys.CHARACTER_ENCODING: fmt.encoding,
        SettingsKeys.FILE_NAME: settings.file_name,
        SettingsKeys.OVERWRITE_POLICY: settings.overwrite_policy.value,
    }


def load_export_settings(path: str | Path) -> ExportSettings:
    file_path = Path(path)
    if not file_path.exists():
        raise DataSourceNotFoundError(f"Settings file not found: {file_path}")
    try:
        with file_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except json.JSONDecodeError as exc:
        raise InvalidSettingsError(f"Invalid JSON in {file_path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise InvalidSettingsError(f"Settings in {file_path} must be a JSON object")
    return export_settings_from_mapping(data)


def save_export_settings(settings: ExportSettings, path: str | Path) -> None:
    file_path = Path(path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        payload = export_settings_to_mapping(settings)
        with file_path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)
    except OSError as exc:
        raise SettingsSaveError(f"Failed to save settings: {exc}") from exc

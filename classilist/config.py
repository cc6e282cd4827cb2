from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
import os
from pathlib import Path
import tomllib
from typing import TypeVar, cast
import warnings

from .constants import Defaults
from .domain.entities.export_settings import OverwritePolicy
from .domain.entities.format_settings import FormatSettings, LineEnding, QuoteMode

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True, slots=True)
class ClassilistConfig:
    format_settings: FormatSettings = field(default_factory=FormatSettings)
    overwrite_policy: OverwritePolicy = OverwritePolicy.OVERWRITE
    input_encoding: str = Defaults.INPUT_ENCODING
    input_separator: str = Defaults.COLUMN_SEPARATOR

    def __post_init__(self) -> None:
        if not self.input_encoding:
            raise ValueError("input_encoding must not be empty")
        if not self.input_separator:
            raise ValueError("input_separator must not be empty")

    @classmethod
    def from_env(cls) -> ClassilistConfig:
        fmt = FormatSettings()
        overrides: dict[str, object] = {}
        if (value := os.getenv("CLASSILIST_SEPARATOR")) is not None:
            overrides["column_separator"] = value
        if (value := os.getenv("CLASSILIST_MISSING")) is not None:
            overrides["missing_value_pattern"] = value
        if value := os.getenv("CLASSILIST_QUOTE_MODE"):
            overrides["quote_mode"] = _parse_enum(
                QuoteMode, value, key="CLASSILIST_QUOTE_MODE"
            )
        if value := os.getenv("CLASSILIST_DECIMAL_SEPARATOR"):
            overrides["decimal_separator"] = value
        if value := os.getenv("CLASSILIST_ENCODING"):
            overrides["encoding"] = value.strip()
        policy = OverwritePolicy.OVERWRITE
        if value := os.getenv("CLASSILIST_IF_EXISTS"):
            policy = _parse_enum(OverwritePolicy, value, key="CLASSILIST_IF_EXISTS")
        return cls(
            format_settings=replace(fmt, **overrides),
            overwrite_policy=policy,
            input_encoding=os.getenv(
                "CLASSILIST_INPUT_ENCODING", Defaults.INPUT_ENCODING
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> ClassilistConfig:
        config = ClassilistConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: ClassilistConfig
    ) -> ClassilistConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        format_section = _get_table(data, "format")
        output_section = _get_table(data, "output")
        input_section = _get_table(data, "input")

        overrides: dict[str, object] = {}
        for key in (
            "column_separator",
            "missing_value_pattern",
            "quote_begin",
            "quote_end",
            "quote_replacement",
            "separator_replacement",
            "decimal_separator",
        ):
            if (value := format_section.get(key)) is not None:
                overrides[key] = str(value)
        for key in ("replace_separator_in_strings", "write_row_id"):
            if (value := format_section.get(key)) is not None:
                overrides[key] = _coerce_bool(value, key=f"format.{key}")
        if (value := format_section.get("quote_mode")) is not None:
            overrides["quote_mode"] = _parse_enum(
                QuoteMode, str(value), key="format.quote_mode"
            )
        if (value := format_section.get("line_ending")) is not None:
            overrides["line_ending"] = _parse_enum(
                LineEnding, str(value), key="format.line_ending"
            )
        if "encoding" in format_section:
            raw = format_section.get("encoding")
            cleaned = str(raw).strip() if raw is not None else ""
            overrides["encoding"] = cleaned or None

        overwrite_policy = base_config.overwrite_policy
        if (value := output_section.get("if_exists")) is not None:
            overwrite_policy = _parse_enum(
                OverwritePolicy, str(value), key="output.if_exists"
            )
        input_encoding = base_config.input_encoding
        if (value := input_section.get("encoding")) is not None:
            input_encoding = str(value)
        input_separator = base_config.input_separator
        if (value := input_section.get("separator")) is not None:
            input_separator = str(value)

        return ClassilistConfig(
            format_settings=replace(base_config.format_settings, **overrides),
            overwrite_policy=overwrite_policy,
            input_encoding=input_encoding,
            input_separator=input_separator,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _parse_enum(enum_type: type[E], value: str, *, key: str) -> E:
    wanted = value.strip().replace("-", "_").upper()
    for member in enum_type:
        if member.name == wanted:
            return member
    choices = ", ".join(m.name.lower() for m in enum_type)
    raise ValueError(f"{key} must be one of {choices}, got {value!r}")


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"true", "false"}:
        return value.strip().lower() == "true"
    raise ValueError(f"{key} must be a bool, got {type(value).__name__}")

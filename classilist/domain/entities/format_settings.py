"""Formatting options for delimited text output.

A ``FormatSettings`` instance is built once (from defaults, a config file or
a persisted settings document) and is never modified afterwards. Derive
variants with :func:`dataclasses.replace`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import locale
import os

from ...constants import Defaults


class QuoteMode(Enum):
    ALWAYS = "always"
    IF_NEEDED = "if_needed"
    REPLACE = "replace"
    STRINGS_ONLY = "strings_only"


class LineEnding(Enum):
    PLATFORM_DEFAULT = None
    LF = "\n"
    CRLF = "\r\n"
    CR = "\r"

    @property
    def terminator(self) -> str:
        if self.value is None:
            return os.linesep
        return self.value


_STRING_FIELDS = (
    "column_separator",
    "missing_value_pattern",
    "quote_begin",
    "quote_end",
    "quote_replacement",
    "separator_replacement",
)


@dataclass(frozen=True, slots=True)
class FormatSettings:
    column_separator: str = Defaults.COLUMN_SEPARATOR
    missing_value_pattern: str = Defaults.MISSING_VALUE_PATTERN
    quote_begin: str = Defaults.QUOTE_BEGIN
    quote_end: str = Defaults.QUOTE_END
    quote_replacement: str = Defaults.QUOTE_REPLACEMENT
    quote_mode: QuoteMode = QuoteMode.STRINGS_ONLY
    separator_replacement: str = Defaults.SEPARATOR_REPLACEMENT
    replace_separator_in_strings: bool = False
    write_row_id: bool = False
    decimal_separator: str = Defaults.DECIMAL_SEPARATOR
    line_ending: LineEnding = LineEnding.PLATFORM_DEFAULT
    encoding: str | None = None

    def __post_init__(self) -> None:
        # Null strings are written as empty strings.
        for name in _STRING_FIELDS:
            if getattr(self, name) is None:
                object.__setattr__(self, name, "")
        # The decimal separator is a single character.
        object.__setattr__(
            self,
            "decimal_separator",
            (self.decimal_separator or "")[:1] or Defaults.DECIMAL_SEPARATOR,
        )

    @property
    def write_column_header(self) -> bool:
        """Always true; header emission is decided per write call."""
        return True

    @property
    def line_terminator(self) -> str:
        return self.line_ending.terminator

    @property
    def resolved_encoding(self) -> str:
        return self.encoding or locale.getpreferredencoding(False)

    @property
    def rewrites_decimal_separator(self) -> bool:
        return self.decimal_separator != "."

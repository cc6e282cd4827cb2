from __future__ import annotations

from typing import TYPE_CHECKING

from ..entities.format_settings import QuoteMode

if TYPE_CHECKING:
    from ..entities.format_settings import FormatSettings


def replace_decimal_separator(value: str, separator: str) -> str:
    """Replace the decimal point of ``value`` if it contains exactly one dot."""
    if value.count(".") != 1:
        return value
    return value.replace(".", separator)


class TokenQuoter:
    """Quotes and escapes header and data tokens for one set of settings."""

    def __init__(self, settings: FormatSettings) -> None:
        super().__init__()
        self._settings = settings

    def quote(self, value: str, *, numeric: bool = False) -> str:
        settings = self._settings
        mode = settings.quote_mode
        replace_in_strings = settings.replace_separator_in_strings and not numeric

        if mode is QuoteMode.ALWAYS:
            result = self.replace_separator(value) if replace_in_strings else value
            return self.replace_and_quote(result)

        if mode is QuoteMode.IF_NEEDED:
            separator = settings.column_separator
            needs_quotes = separator in value if separator else True
            needs_quotes = needs_quotes or value == settings.missing_value_pattern
            result = self.replace_separator(value) if replace_in_strings else value
            return self.replace_and_quote(result) if needs_quotes else result

        if mode is QuoteMode.REPLACE:
            return self.replace_separator(value)

        # STRINGS_ONLY
        if numeric:
            return value
        if settings.replace_separator_in_strings:
            value = self.replace_separator(value)
        return self.replace_and_quote(value)

    def replace_and_quote(self, value: str) -> str:
        """Wrap ``value`` in quotes, replacing any closing quote inside it."""
        quote_end = self._settings.quote_end
        if not quote_end:
            return f"{self._settings.quote_begin}{value}"
        # str.replace scans left to right and never rescans inserted text.
        escaped = value.replace(quote_end, self._settings.quote_replacement)
        return f"{self._settings.quote_begin}{escaped}{quote_end}"

    def replace_separator(self, value: str) -> str:
        separator = self._settings.column_separator
        if not separator:
            return value
        return value.replace(separator, self._settings.separator_replacement)

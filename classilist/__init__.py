"""Classilist package.

This package writes classification result tables to delimited text files
with configurable quoting, missing-value substitution and decimal
separators. Column headers are rewritten to the classification-list
convention:

- ``A-<class>`` for the actual class column
- ``Predicted`` for the predicted class column
- ``P-<class>`` for each class probability column
- ``F-<name>`` for every feature column
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("classilist")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from classilist.domain.entities.format_settings import (
    FormatSettings,
    LineEnding,
    QuoteMode,
)
from classilist.infrastructure.io.table_writer import TableWriter, write_table

__all__ = [
    "__version__",
    "FormatSettings",
    "LineEnding",
    "QuoteMode",
    "TableWriter",
    "write_table",
]

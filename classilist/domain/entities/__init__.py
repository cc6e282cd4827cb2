from .columns import ColumnDescriptor, ColumnSpec, ColumnType, RoleKind
from .export_settings import ExportSettings, OverwritePolicy
from .format_settings import FormatSettings, LineEnding, QuoteMode
from .rows import Row

__all__ = [
    "ColumnDescriptor",
    "ColumnSpec",
    "ColumnType",
    "ExportSettings",
    "FormatSettings",
    "LineEnding",
    "OverwritePolicy",
    "QuoteMode",
    "RoleKind",
    "Row",
]

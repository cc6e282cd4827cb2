"""Pure services for header derivation, token quoting and settings checks."""

from .header_rewriter import ClassificationLayout, derive_column_roles
from .quoting import TokenQuoter, replace_decimal_separator

__all__ = [
    "ClassificationLayout",
    "TokenQuoter",
    "derive_column_roles",
    "replace_decimal_separator",
]

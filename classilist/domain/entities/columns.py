from dataclasses import dataclass
from enum import Enum

from ...constants import HeaderNames


class ColumnType(Enum):
    NUMERIC = "numeric"
    TEXT = "text"


class RoleKind(Enum):
    ACTUAL_CLASS = "actual_class"
    PREDICTED_CLASS = "predicted_class"
    CLASS_PROBABILITY = "class_probability"
    FEATURE = "feature"


@dataclass(frozen=True, slots=True)
class ColumnSpec:
    name: str
    column_type: ColumnType = ColumnType.TEXT

    @property
    def is_numeric(self) -> bool:
        return self.column_type is ColumnType.NUMERIC


@dataclass(frozen=True, slots=True)
class ColumnDescriptor:
    index: int
    name: str
    column_type: ColumnType
    role: RoleKind
    class_name: str | None = None

    @property
    def is_numeric(self) -> bool:
        return self.column_type is ColumnType.NUMERIC

    @property
    def header_name(self) -> str:
        if self.role is RoleKind.ACTUAL_CLASS:
            return f"{HeaderNames.ACTUAL_PREFIX}{self.class_name}"
        if self.role is RoleKind.PREDICTED_CLASS:
            return HeaderNames.PREDICTED
        if self.role is RoleKind.CLASS_PROBABILITY:
            return f"{HeaderNames.PROBABILITY_PREFIX}{self.class_name}"
        return f"{HeaderNames.FEATURE_PREFIX}{self.name}"

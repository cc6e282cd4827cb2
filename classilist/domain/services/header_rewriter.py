"""Column role derivation for classification result tables.

A classification result table carries one ``Prediction (<class column>)``
column, the original class column, one ``P (<class column>=<class>)``
column per class and any number of feature columns. The roles decide the
rewritten header names written by the table writer.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import TYPE_CHECKING

from ...constants import Patterns
from ..entities.columns import ColumnDescriptor, RoleKind
from ..errors import HeaderValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..entities.columns import ColumnSpec

PREDICTION_PATTERN = re.compile(Patterns.PREDICTION_COLUMN)

MISSING_PREDICTION = "Predicted column name not correct"
MISSING_ACTUAL = "Actual class column missing"
MISSING_FEATURES = "No feature columns"
MISSING_PROBABILITIES = "No probability columns"


@dataclass(frozen=True, slots=True)
class ClassificationLayout:
    class_column: str
    prediction_index: int
    descriptors: tuple[ColumnDescriptor, ...]

    @property
    def header_names(self) -> tuple[str, ...]:
        return tuple(d.header_name for d in self.descriptors)

    def by_role(self, role: RoleKind) -> tuple[ColumnDescriptor, ...]:
        return tuple(d for d in self.descriptors if d.role is role)

    @property
    def class_names(self) -> tuple[str, ...]:
        return tuple(
            d.class_name or ""
            for d in self.by_role(RoleKind.CLASS_PROBABILITY)
        )


def find_prediction_column(columns: Sequence[ColumnSpec]) -> tuple[int, str] | None:
    """Return index and class column name of the last prediction column."""
    for index in range(len(columns) - 1, -1, -1):
        match = PREDICTION_PATTERN.search(columns[index].name)
        if match:
            return index, match.group(1)
    return None


def derive_column_roles(columns: Sequence[ColumnSpec]) -> ClassificationLayout:
    found = find_prediction_column(columns)
    if found is None:
        raise HeaderValidationError([MISSING_PREDICTION])
    prediction_index, class_column = found
    probability_pattern = re.compile(
        Patterns.PROBABILITY_COLUMN.format(class_column=re.escape(class_column))
    )

    descriptors: list[ColumnDescriptor] = []
    for index, column in enumerate(columns):
        role = RoleKind.FEATURE
        class_name: str | None = None
        if column.name == class_column:
            role = RoleKind.ACTUAL_CLASS
            class_name = class_column
        elif index == prediction_index:
            role = RoleKind.PREDICTED_CLASS
        elif match := probability_pattern.search(column.name):
            role = RoleKind.CLASS_PROBABILITY
            class_name = match.group(1)
        descriptors.append(
            ColumnDescriptor(
                index=index,
                name=column.name,
                column_type=column.column_type,
                role=role,
                class_name=class_name,
            )
        )

    roles = {d.role for d in descriptors}
    problems: list[str] = []
    if RoleKind.ACTUAL_CLASS not in roles:
        problems.append(MISSING_ACTUAL)
    if RoleKind.FEATURE not in roles:
        problems.append(MISSING_FEATURES)
    if RoleKind.CLASS_PROBABILITY not in roles:
        problems.append(MISSING_PROBABILITIES)
    if problems:
        raise HeaderValidationError(problems)

    return ClassificationLayout(
        class_column=class_column,
        prediction_index=prediction_index,
        descriptors=tuple(descriptors),
    )

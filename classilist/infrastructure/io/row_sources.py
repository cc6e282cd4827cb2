"""Row source adapters feeding the table writer."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

from ...domain.entities.columns import ColumnSpec, ColumnType
from ...domain.entities.rows import Row

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence


def column_type_for(dtype: object) -> ColumnType:
    if pd.api.types.is_numeric_dtype(dtype):
        return ColumnType.NUMERIC
    return ColumnType.TEXT


def _cell(value: object) -> object | None:
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        # Array-like cells are never missing.
        return value
    return value


class DataFrameRowSource:
    """Streams the rows of a DataFrame without copying it."""

    def __init__(self, frame: pd.DataFrame) -> None:
        super().__init__()
        self._frame = frame
        self._columns = tuple(
            ColumnSpec(str(name), column_type_for(frame.iloc[:, position].dtype))
            for position, name in enumerate(frame.columns)
        )

    @property
    def columns(self) -> Sequence[ColumnSpec]:
        return self._columns

    @property
    def row_count(self) -> int | None:
        return len(self._frame.index)

    def __iter__(self) -> Iterator[Row]:
        default_index = isinstance(self._frame.index, pd.RangeIndex)
        for position, values in enumerate(
            self._frame.itertuples(index=True, name=None)
        ):
            label, *cells = values
            key = f"Row{position}" if default_index else str(label)
            yield Row(key=key, cells=tuple(_cell(v) for v in cells))


class IterableRowSource:
    """Single-pass source over any iterable of rows."""

    def __init__(
        self,
        columns: Sequence[ColumnSpec],
        rows: Iterable[Row],
        *,
        row_count: int | None = None,
    ) -> None:
        super().__init__()
        self._columns = tuple(columns)
        self._rows = rows
        self._row_count = row_count
        self._consumed = False

    @property
    def columns(self) -> Sequence[ColumnSpec]:
        return self._columns

    @property
    def row_count(self) -> int | None:
        return self._row_count

    def __iter__(self) -> Iterator[Row]:
        if self._consumed:
            raise RuntimeError("Row source can only be iterated once")
        self._consumed = True
        return iter(self._rows)

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pandas as pd

from .exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


def _default_na_values() -> list[str]:
    return [""]


@dataclass(slots=True)
class CSVReadOptions:
    normalize_headers: bool = True
    separator: str = ","
    encoding: str = "utf-8"
    index_column: str | None = None
    na_values: list[str] = field(default_factory=_default_na_values)


class CSVReader:
    """Loads an input table for export; pandas infers the column types.

    Nullable dtypes keep an integer column with empty cells integral.
    """

    def read(self, path: Path, options: CSVReadOptions | None = None) -> pd.DataFrame:
        if options is None:
            options = CSVReadOptions()
        if not path.exists():
            raise DataSourceNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {path}")
        try:
            df = pd.read_csv(
                path,
                sep=options.separator,
                keep_default_na=False,
                na_values=options.na_values,
                encoding=options.encoding,
                dtype_backend="numpy_nullable",
            )
        except FileNotFoundError as e:
            raise DataSourceNotFoundError(f"File not found: {path}") from e
        except pd.errors.ParserError as e:
            raise DataParseError(f"Failed to parse CSV {path}: {e}") from e
        except pd.errors.EmptyDataError as e:
            raise DataParseError(f"CSV file is empty: {path}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {path}. Try a different encoding: {e}"
            ) from e
        except Exception as e:
            raise DataParseError(f"Unexpected error reading {path}: {e}") from e
        if df.shape[1] == 0:
            raise DataParseError(f"CSV file has no columns: {path}")
        if options.normalize_headers:
            df = self._normalize_headers(df)
        if options.index_column is not None:
            if options.index_column not in df.columns:
                raise DataParseError(
                    f"Row ID column '{options.index_column}' not found in {path}"
                )
            df = df.set_index(options.index_column)
        return df

    def _normalize_headers(self, df: pd.DataFrame) -> pd.DataFrame:
        df.columns = [str(col).strip() for col in df.columns]
        return df

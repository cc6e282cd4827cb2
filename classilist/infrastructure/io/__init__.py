"""Infrastructure I/O layer.

This package contains the table writer, row source adapters, the file
output target and the CSV input reader.
"""

from .csv_reader import CSVReader, CSVReadOptions
from .exceptions import (
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    OutputTargetError,
)
from .output_target import FileOutputTarget
from .row_sources import DataFrameRowSource, IterableRowSource
from .table_writer import TableWriter, write_table

__all__ = [
    "CSVReader",
    "CSVReadOptions",
    "DataFrameRowSource",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "FileOutputTarget",
    "IterableRowSource",
    "OutputTargetError",
    "TableWriter",
    "write_table",
]

"""Port interfaces for external dependencies.

This module defines abstract interfaces (protocols) that external
adapters must implement. This enables dependency injection and testing.
"""

from .services import (
    LoggerPort,
    OutputTargetPort,
    ProgressMonitorPort,
    RowSourcePort,
    TableWriterPort,
)

__all__ = [
    "LoggerPort",
    "OutputTargetPort",
    "ProgressMonitorPort",
    "RowSourcePort",
    "TableWriterPort",
]

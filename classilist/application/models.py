from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from ..domain.entities.export_settings import ExportSettings
    from .ports.services import ProgressMonitorPort, RowSourcePort


def _empty_str_list() -> list[str]:
    return []


@dataclass(slots=True)
class WriteResult:
    rows_written: int = 0
    header_written: bool = False
    warning: str | None = None

    @property
    def has_warning(self) -> bool:
        return self.warning is not None


@dataclass(slots=True)
class ExportRequest:
    source: RowSourcePort
    settings: ExportSettings
    source_name: str = "table"
    monitor: ProgressMonitorPort | None = None


@dataclass(slots=True)
class ExportResponse:
    output_path: Path
    rows_written: int = 0
    header_written: bool = False
    warnings: list[str] = field(default_factory=_empty_str_list)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

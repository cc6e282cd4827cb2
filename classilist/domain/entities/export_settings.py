from dataclasses import dataclass, field
from enum import Enum

from .format_settings import FormatSettings


class OverwritePolicy(Enum):
    ABORT = "Abort"
    OVERWRITE = "Overwrite"
    APPEND = "Append"


@dataclass(frozen=True, slots=True)
class ExportSettings:
    """Format settings plus the destination file they are written to."""

    format: FormatSettings = field(default_factory=FormatSettings)
    file_name: str | None = None
    overwrite_policy: OverwritePolicy = OverwritePolicy.OVERWRITE

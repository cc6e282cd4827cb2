"""File destination for exports.

Opens the output file according to the overwrite policy and knows how to
undo a partial write: a file created by the export is deleted, a file that
was appended to is truncated back to its previous size.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ...domain.entities.export_settings import OverwritePolicy
from .exceptions import OutputTargetError

if TYPE_CHECKING:
    from typing import TextIO


class FileOutputTarget:
    def __init__(
        self,
        path: str | Path,
        *,
        overwrite_policy: OverwritePolicy = OverwritePolicy.OVERWRITE,
        encoding: str = "utf-8",
    ) -> None:
        super().__init__()
        self._path = Path(path)
        self._policy = overwrite_policy
        self._encoding = encoding
        self._handle: TextIO | None = None
        self._existed_before = self._path.exists()
        self._original_size = self._path.stat().st_size if self._existed_before else 0

    @property
    def path(self) -> Path:
        return self._path

    @property
    def existed_before(self) -> bool:
        return self._existed_before

    @property
    def has_content(self) -> bool:
        return self._existed_before and self._original_size > 0

    @property
    def appending(self) -> bool:
        return self._policy is OverwritePolicy.APPEND and self._existed_before

    def open(self) -> TextIO:
        if self._handle is not None:
            return self._handle
        if self._existed_before and self._policy is OverwritePolicy.ABORT:
            raise OutputTargetError(
                f"Output file '{self._path}' exists and must not be overwritten "
                "due to user settings."
            )
        if self._path.is_dir():
            raise OutputTargetError(f"Output location is a directory: {self._path}")
        mode = "a" if self._policy is OverwritePolicy.APPEND else "w"
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            # newline="" keeps the configured line terminator untranslated.
            self._handle = self._path.open(mode, encoding=self._encoding, newline="")
        except (OSError, LookupError) as exc:
            raise OutputTargetError(f"Cannot open {self._path}: {exc}") from exc
        return self._handle

    def close(self) -> None:
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        try:
            handle.close()
        except OSError as exc:
            raise OutputTargetError(f"Failed to close {self._path}: {exc}") from exc

    def discard(self) -> None:
        """Remove whatever this target wrote."""
        if self._handle is not None:
            handle, self._handle = self._handle, None
            try:
                handle.close()
            except (OSError, ValueError):
                # Closing after an interrupted write may fail; the file is
                # removed or truncated below regardless.
                pass
        try:
            if self.appending:
                with self._path.open("r+b") as raw:
                    raw.truncate(self._original_size)
            elif self._path.exists():
                self._path.unlink()
        except OSError as exc:
            raise OutputTargetError(
                f"Unable to remove partial output {self._path}: {exc}"
            ) from exc

class ClassilistError(Exception):
    pass


class InvalidSettingsError(ClassilistError):
    pass


class TableWriteError(ClassilistError):
    pass


class HeaderValidationError(TableWriteError):
    """Column names do not follow the classification-result convention."""

    def __init__(self, problems: tuple[str, ...] | list[str]) -> None:
        self.problems = tuple(problems)
        super().__init__("; ".join(self.problems))


class SinkWriteError(TableWriteError):
    pass


class WriteCancelledError(ClassilistError):
    """Raised when a write stops at a row boundary on request.

    Not a ``TableWriteError``: callers discard partial output and move on.
    """

    def __init__(self, message: str = "Writing was cancelled", rows_written: int = 0):
        self.rows_written = rows_written
        super().__init__(message)

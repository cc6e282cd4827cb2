from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.export_use_case import ExportDependencies, ExportTableUseCase
from .io.csv_reader import CSVReader
from .io.output_target import FileOutputTarget
from .io.table_writer import TableWriter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from typing import TextIO

    from ..application.ports.services import LoggerPort
    from ..domain.entities.export_settings import ExportSettings
    from ..domain.entities.format_settings import FormatSettings


def _create_output_target(settings: ExportSettings) -> FileOutputTarget:
    if not settings.file_name:
        raise ValueError("Export settings carry no output file name")
    return FileOutputTarget(
        settings.file_name,
        overwrite_policy=settings.overwrite_policy,
        encoding=settings.format.resolved_encoding,
    )


def _create_table_writer(
    sink: TextIO, settings: FormatSettings, logger: LoggerPort
) -> TableWriter:
    return TableWriter(sink, settings, logger=logger)


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self._logger_instance: LoggerPort | None = None
        self._csv_reader_instance: CSVReader | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_csv_reader(self) -> CSVReader:
        if self._csv_reader_instance is None:
            self._csv_reader_instance = CSVReader()
        return self._csv_reader_instance

    def create_export_use_case(self) -> ExportTableUseCase:
        return ExportTableUseCase(
            ExportDependencies(
                logger=self.create_logger(),
                target_factory=_create_output_target,
                writer_factory=_create_table_writer,
            )
        )

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._csv_reader_instance = None


def create_default_container(verbose: int = 0) -> DependencyContainer:
    return DependencyContainer(verbose=verbose)


def create_test_container() -> DependencyContainer:
    return DependencyContainer(use_null_logger=True)

"""Roles command - Show how the columns of a table would be written."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...config import ConfigLoader
from ...domain.errors import ClassilistError, HeaderValidationError
from ...domain.services.header_rewriter import derive_column_roles
from ...infrastructure.io.csv_reader import CSVReader, CSVReadOptions
from ...infrastructure.io.row_sources import DataFrameRowSource
from ..presenters.roles import RolesPresenter
from .export import unescape

console = Console()


@click.command()
@click.argument(
    "input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a classilist.toml config file (default: ./classilist.toml)",
)
@click.option("--input-separator", help="Column separator of the input CSV")
@click.option("--input-encoding", help="Encoding of the input CSV")
def roles_command(
    input_file: Path,
    config_file: Path | None,
    input_separator: str | None,
    input_encoding: str | None,
) -> None:
    """Print the role and output header of every column in INPUT_FILE.

    Fails when the table is not a classification result: no
    'Prediction (<class>)' column, no actual class column, no probability
    columns or no feature columns.
    """
    try:
        runtime_config = ConfigLoader.load(config_file=config_file)
        read_options = CSVReadOptions(
            separator=unescape(input_separator or runtime_config.input_separator),
            encoding=input_encoding or runtime_config.input_encoding,
        )
        frame = CSVReader().read(input_file, read_options)
    except (ClassilistError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    presenter = RolesPresenter(console)
    try:
        layout = derive_column_roles(DataFrameRowSource(frame).columns)
    except HeaderValidationError as e:
        presenter.present_problems(e.problems)
        raise click.ClickException(
            f"{input_file.name} is not a classification result table"
        ) from e
    presenter.present(layout)

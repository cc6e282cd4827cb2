import click

from .commands.export import export_command
from .commands.roles import roles_command


@click.group()
def app() -> None:
    pass


app.add_command(export_command, name="export")
app.add_command(roles_command, name="roles")
__all__ = ["app"]

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from ...domain.services.header_rewriter import ClassificationLayout

ROLE_LABELS = {
    "actual_class": "[cyan]actual class[/cyan]",
    "predicted_class": "[magenta]predicted class[/magenta]",
    "class_probability": "[green]class probability[/green]",
    "feature": "feature",
}


class RolesPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, layout: ClassificationLayout, *, title: str = "") -> None:
        default_title = f"Column roles (class column '{layout.class_column}')"
        table = Table(title=title or default_title)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Column")
        table.add_column("Type")
        table.add_column("Role")
        table.add_column("Written as", style="bold")
        for descriptor in layout.descriptors:
            table.add_row(
                str(descriptor.index + 1),
                descriptor.name,
                descriptor.column_type.value,
                ROLE_LABELS[descriptor.role.value],
                descriptor.header_name,
            )
        self.console.print(table)
        classes = ", ".join(layout.class_names)
        self.console.print(f"[bold]Classes:[/bold] {classes}")

    def present_problems(self, problems: tuple[str, ...]) -> None:
        self.console.print("[red]✗[/red] Not a classification result table:")
        for problem in problems:
            self.console.print(f"  - {problem}")

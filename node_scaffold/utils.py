"""Shared console helpers for node-typescript-scaffold.

Rich-based status messages and tables used by the CLI and the MCP server.
The server talks MCP over stdout, so it prints through ``err_console``.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from node_scaffold.scaffolder.models import TemplateDescriptor

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(
    data: dict[str, str], title: str = "Summary", *, out: Console | None = None
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        out: Console to print on (defaults to stdout).
    """
    out = out or console
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    out.print(table)
    out.print()


def print_templates_table(
    templates: list[TemplateDescriptor], *, out: Console | None = None
) -> None:
    """Print the available templates with their dependencies."""
    out = out or console
    table = Table(title="Available templates", show_header=True, header_style="bold cyan")
    table.add_column("Template", style="bold", no_wrap=True)
    table.add_column("Description")
    table.add_column("Dependencies", style="dim")

    for template in templates:
        deps = ", ".join(template.dependencies) or "-"
        table.add_row(template.name, template.description, deps)

    out.print(table)


def print_success(message: str, *, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{message}[/bold green]")


def print_error(message: str, *, out: Console | None = None) -> None:
    """Print a red error message."""
    (out or console).print(f"[bold red]{message}[/bold red]")


def print_warning(message: str, *, out: Console | None = None) -> None:
    """Print a yellow warning message."""
    (out or console).print(f"[bold yellow]{message}[/bold yellow]")

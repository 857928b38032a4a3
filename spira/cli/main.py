"""
Spira CLI - Command Line Interface

Main entry point for the spira command.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from spira.models import VersionResponse
from spira.version import BUILD_DATE, GIT_COMMIT, VERSION, __version__

# Initialize Typer app
app = typer.Typer(
    name="spira",
    help="Spira - RDF resource mapping for Python",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


class OutputFormat(str, Enum):
    """Output format options."""
    text = "text"
    json = "json"


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"spira {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version", "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    Spira - RDF resource mapping for Python
    """
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()


def _show_version_table() -> None:
    table = Table(box=box.ROUNDED, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Version", f"[bold green]{VERSION}[/bold green]")
    table.add_row("Components", ", ".join(str(part) for part in VERSION.to_tuple()))
    table.add_row("Extra", VERSION.extra or "[dim]none[/dim]")
    table.add_row("Build date", BUILD_DATE)
    table.add_row("Git commit", GIT_COMMIT)

    console.print(Panel.fit(
        table,
        title="[bold blue]Spira[/bold blue]",
        border_style="blue",
    ))


@app.command()
def version(
    short: Annotated[
        bool,
        typer.Option("--short", "-s", help="Print only the version string"),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.text,
) -> None:
    """
    Show version and build information.

    Examples:
        spira version
        spira version --short
        spira version --format json
    """
    if short:
        console.print(VERSION.to_string(), highlight=False)
    elif output_format == OutputFormat.json:
        console.print_json(VersionResponse.from_version(VERSION).model_dump_json())
    else:
        _show_version_table()


if __name__ == "__main__":
    app()

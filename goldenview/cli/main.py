#!/usr/bin/env python3
"""
goldenview CLI - golden-file snapshots for stateful views

Main entrypoint for the goldenview command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from goldenview import __version__
from goldenview.cli.commands import script, snapshots
from goldenview.logging_config import setup_logging
from goldenview.snapshot.names import to_safe_filename

app = typer.Typer(
    name="goldenview",
    help="Golden-file snapshot testing for stateful views",
    add_completion=False,
)

console = Console()

app.add_typer(snapshots.app, name="snapshots", help="Golden file operations")

app.command(name="script")(script.script_command)


@app.callback()
def main_callback(
    log_level: str = typer.Option(None, "--log-level", help="Override GOLDENVIEW_LOG_LEVEL"),
):
    setup_logging(level=log_level)


@app.command()
def sanitize(name: str = typer.Argument(..., help="Snapshot name")):
    """Print the file name used for a snapshot name."""
    print(to_safe_filename(name))


@app.command()
def version():
    """Show version information."""
    table = Table(show_header=False, box=None)
    table.add_row("[bold]goldenview[/bold]", f"v{__version__}")
    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()

"""
Snapshot commands: list, reset
"""

import json
import os
import re
from typing import List

import typer
from rich.console import Console
from rich.table import Table

from goldenview.config import HarnessConfig
from goldenview.fs import FileSystem, OsFileSystem
from goldenview.snapshot.names import to_safe_filename

app = typer.Typer()
console = Console()


def find_run_snapshots(fs: FileSystem, root: str, run_id: str) -> List[str]:
    """
    Names of the golden files written by replays of run_id, in index order.
    """
    if not fs.isdir(root):
        return []
    pattern = re.compile(rf"^{re.escape(to_safe_filename(run_id))}_(\d{{3,}})$")
    found = []
    for name in fs.listdir(root):
        m = pattern.match(name)
        if m:
            found.append((int(m.group(1)), name))
    return [name for _, name in sorted(found)]


@app.command("list")
def list_snapshots(
    run_id: str = typer.Argument(..., help="Run identifier"),
    root: str = typer.Option(None, "--root", "-r", help="Snapshot directory (default: GOLDENVIEW_SNAPSHOT_DIR)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    List golden files recorded for a run.

    Examples:
        goldenview snapshots list login
        goldenview snapshots list login --json
    """
    root = root or HarnessConfig.from_env().snapshot_dir
    fs = OsFileSystem()
    try:
        entries = []
        for name in find_run_snapshots(fs, root, run_id):
            content = fs.read_text(os.path.join(root, name))
            entries.append({"name": name, "chars": len(content), "lines": len(content.splitlines())})
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if json_output:
        print(json.dumps({"run_id": run_id, "root": root, "snapshots": entries}, indent=2))
        raise typer.Exit(0)

    if not entries:
        console.print(f"[yellow]No snapshots for {run_id} in {root}[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Snapshots for {run_id}")
    table.add_column("Name", style="green")
    table.add_column("Chars", style="cyan", justify="right")
    table.add_column("Lines", style="cyan", justify="right")
    for entry in entries:
        table.add_row(entry["name"], str(entry["chars"]), str(entry["lines"]))
    console.print(table)


@app.command()
def reset(
    run_id: str = typer.Argument(..., help="Run identifier"),
    root: str = typer.Option(None, "--root", "-r", help="Snapshot directory (default: GOLDENVIEW_SNAPSHOT_DIR)"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Delete without asking"),
):
    """
    Delete the golden files of a run so the next replay records them again.

    The event script itself is kept.

    Examples:
        goldenview snapshots reset login
        goldenview snapshots reset login --yes
    """
    root = root or HarnessConfig.from_env().snapshot_dir
    fs = OsFileSystem()
    names = find_run_snapshots(fs, root, run_id)
    if not names:
        console.print(f"[yellow]No snapshots for {run_id} in {root}[/yellow]")
        raise typer.Exit(0)

    if not yes:
        typer.confirm(f"Delete {len(names)} snapshot files for {run_id}?", abort=True)

    try:
        for name in names:
            fs.remove(os.path.join(root, name))
    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    console.print(f"[green]✓ Deleted {len(names)} snapshot files[/green]")

"""
Script command: show the event groups of a script
"""

import json

import typer
from rich.console import Console
from rich.table import Table

from goldenview.config import HarnessConfig
from goldenview.core.errors import FatalHarnessError
from goldenview.fs import OsFileSystem
from goldenview.script.parser import load_script
from goldenview.snapshot.names import snapshot_name

console = Console()


def script_command(
    run_id: str = typer.Argument(..., help="Run identifier ({run_id}.txt)"),
    root: str = typer.Option(None, "--root", "-r", help="Snapshot directory (default: GOLDENVIEW_SNAPSHOT_DIR)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Parse an event script and show its groups with the snapshot each produces.

    Examples:
        goldenview script login
        goldenview script login --root tests/testdata/snapshots --json
    """
    root = root or HarnessConfig.from_env().snapshot_dir
    try:
        parsed = load_script(root, run_id, OsFileSystem())
    except FatalHarnessError as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    rows = []
    for i, group in enumerate(parsed.groups):
        rows.append(
            {
                "group": i,
                "events": [str(each) for each in group],
                "snapshot": snapshot_name(run_id, i + 1),
            }
        )

    if json_output:
        output = {
            "run_id": run_id,
            "initial_snapshot": snapshot_name(run_id, 0),
            "groups": rows,
        }
        print(json.dumps(output, indent=2))
        raise typer.Exit(0)

    table = Table(title=f"Script {run_id}")
    table.add_column("Group", style="cyan", justify="right")
    table.add_column("Events", style="green")
    table.add_column("Snapshot", style="yellow")
    table.add_row("-", "(init)", snapshot_name(run_id, 0))
    for row in rows:
        table.add_row(str(row["group"]), ", ".join(repr(e) for e in row["events"]), row["snapshot"])
    console.print(table)

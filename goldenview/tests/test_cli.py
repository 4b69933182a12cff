"""
Tests for the goldenview CLI.
"""

import json
import os
import tempfile

from typer.testing import CliRunner

from goldenview import __version__
from goldenview.cli.main import app

runner = CliRunner()


def write(path, content):
    with open(path, "w") as f:
        f.write(content)


def test_sanitize():
    result = runner.invoke(app, ["sanitize", "x wins/2"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "x_wins_2"


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_script_json():
    with tempfile.TemporaryDirectory() as tmpdir:
        write(os.path.join(tmpdir, "run1.txt"), "# c\ndown,enter\nhi\n")

        result = runner.invoke(app, ["script", "run1", "--root", tmpdir, "--json"])

        assert result.exit_code == 0
        out = json.loads(result.stdout)
        assert out["initial_snapshot"] == "run1_000"
        assert out["groups"] == [
            {"group": 0, "events": ["down", "enter"], "snapshot": "run1_001"},
            {"group": 1, "events": ["hi"], "snapshot": "run1_002"},
        ]


def test_script_table():
    with tempfile.TemporaryDirectory() as tmpdir:
        write(os.path.join(tmpdir, "r.txt"), "tab\n")
        result = runner.invoke(app, ["script", "r", "--root", tmpdir])
        assert result.exit_code == 0
        assert "r_001" in result.stdout


def test_script_missing():
    with tempfile.TemporaryDirectory() as tmpdir:
        result = runner.invoke(app, ["script", "nope", "--root", tmpdir, "--json"])
        assert result.exit_code == 2
        assert "nope.txt" in json.loads(result.stdout)["error"]


def test_script_uses_env_root(monkeypatch):
    with tempfile.TemporaryDirectory() as tmpdir:
        write(os.path.join(tmpdir, "e.txt"), "up\n")
        monkeypatch.setenv("GOLDENVIEW_SNAPSHOT_DIR", tmpdir)
        result = runner.invoke(app, ["script", "e", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["groups"][0]["events"] == ["up"]


def test_snapshots_list_and_reset():
    with tempfile.TemporaryDirectory() as tmpdir:
        write(os.path.join(tmpdir, "run1.txt"), "tab\n")
        write(os.path.join(tmpdir, "run1_000"), "a\n")
        write(os.path.join(tmpdir, "run1_001"), "b\nc\n")
        write(os.path.join(tmpdir, "run10_000"), "other run\n")

        result = runner.invoke(app, ["snapshots", "list", "run1", "--root", tmpdir, "--json"])
        assert result.exit_code == 0
        out = json.loads(result.stdout)
        assert [s["name"] for s in out["snapshots"]] == ["run1_000", "run1_001"]
        assert out["snapshots"][1]["lines"] == 2

        result = runner.invoke(app, ["snapshots", "reset", "run1", "--root", tmpdir], input="n\n")
        assert result.exit_code != 0
        assert os.path.exists(os.path.join(tmpdir, "run1_000"))

        result = runner.invoke(app, ["snapshots", "reset", "run1", "--root", tmpdir, "--yes"])
        assert result.exit_code == 0
        assert sorted(os.listdir(tmpdir)) == ["run1.txt", "run10_000"]


def test_snapshots_list_empty():
    with tempfile.TemporaryDirectory() as tmpdir:
        result = runner.invoke(app, ["snapshots", "list", "run1", "--root", tmpdir])
        assert result.exit_code == 0
        assert "No snapshots" in result.stdout


def test_snapshots_list_counts_last_line_without_newline():
    with tempfile.TemporaryDirectory() as tmpdir:
        write(os.path.join(tmpdir, "r_000"), "a")
        write(os.path.join(tmpdir, "r_001"), "a\nb")

        result = runner.invoke(app, ["snapshots", "list", "r", "--root", tmpdir, "--json"])

        assert result.exit_code == 0
        lines = [s["lines"] for s in json.loads(result.stdout)["snapshots"]]
        assert lines == [1, 2]


def test_snapshots_list_non_utf8_exits_2():
    with tempfile.TemporaryDirectory() as tmpdir:
        with open(os.path.join(tmpdir, "r_000"), "wb") as f:
            f.write(b"\xff\xfe bad")

        result = runner.invoke(app, ["snapshots", "list", "r", "--root", tmpdir])

        assert result.exit_code == 2
        assert "Error" in result.stdout

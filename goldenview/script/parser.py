"""
Event script loading.

A script lives next to the snapshots as {run_id}.txt. Each non-blank,
non-comment line is one event group; tokens are comma separated:

    # open the menu and pick the second entry
    down,enter
    tab
    // type a name
    hello,enter

There is no escaping. A token cannot contain a comma, and a line that starts
with "#" or "//" is always a comment.
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.errors import MissingScriptError
from ..core.events import KeyEvent, decode
from ..fs import FileSystem, OsFileSystem

EventGroup = Tuple[KeyEvent, ...]

COMMENT_PREFIXES = ("#", "//")


@dataclass(frozen=True)
class Script:
    """
    Parsed event script.

    Fields:
        run_id: Identifier the script was loaded for
        groups: Event groups in file order
    """
    run_id: str
    groups: Tuple[EventGroup, ...]

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self):
        return iter(self.groups)


def script_path(root_dir: str, run_id: str) -> str:
    return os.path.join(root_dir, f"{run_id}.txt")


def parse_script_text(text: str) -> Tuple[EventGroup, ...]:
    groups = []
    for raw in text.split("\n"):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue
        groups.append(tuple(decode(token) for token in line.split(",")))
    return tuple(groups)


def load_script(root_dir: str, run_id: str, fs: Optional[FileSystem] = None) -> Script:
    """
    Load the event script for run_id from root_dir.

    A missing script means the test forgot its fixture, so this is fatal.

    Raises:
        MissingScriptError: If root_dir/{run_id}.txt cannot be read as UTF-8 text
    """
    fs = fs or OsFileSystem()
    path = script_path(root_dir, run_id)
    try:
        text = fs.read_text(path)
    except (OSError, UnicodeDecodeError) as ex:
        raise MissingScriptError(path, str(ex)) from ex
    return Script(run_id=run_id, groups=parse_script_text(text))

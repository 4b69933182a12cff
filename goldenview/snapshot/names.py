"""
Snapshot file naming.
"""

import re

_NON_SAFE_FILENAME = re.compile(r"[^0-9a-zA-Z\-._]")


def to_safe_filename(name: str) -> str:
    """Replace every character outside [0-9a-zA-Z-._] with an underscore."""
    return _NON_SAFE_FILENAME.sub("_", name)


def snapshot_name(run_id: str, index: int) -> str:
    """
    Name of snapshot number index in a replay run.

    Example:
        snapshot_name("login form", 2) == "login_form_002"
    """
    return to_safe_filename(f"{run_id}_{index:03d}")

"""
Golden-file snapshots.

This module provides:
- SnapshotSuite: Factory for snapshots sharing one root directory
- Snapshot: Read, write or verify one golden file
- to_safe_filename / snapshot_name: File naming
"""

from .names import snapshot_name, to_safe_filename
from .store import Snapshot, SnapshotSuite, VerifyFunc, assert_equal

__all__ = [
    "Snapshot",
    "SnapshotSuite",
    "VerifyFunc",
    "assert_equal",
    "snapshot_name",
    "to_safe_filename",
]

"""
Snapshot storage: one golden file per snapshot name.

Modes:
- verify=False: the file is rewritten whenever the view differs (record/update)
- verify=True, no stored content: the view is recorded as the first baseline
- verify=True, stored content: the verify function compares, the file is left alone
"""

import difflib
import os
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.errors import SnapshotStoreError
from ..fs import FileSystem, OsFileSystem
from ..logging_config import get_logger

# Standard "assertEqual" of a test library: (expected, actual, message).
# Expected to register a test failure on mismatch; the return value is ignored.
VerifyFunc = Callable[[str, str, str], None]

logger = get_logger(__name__)


def assert_equal(expected: str, actual: str, message: str) -> None:
    """
    VerifyFunc that raises AssertionError with a unified diff.

    Raises:
        AssertionError: If expected != actual
    """
    if expected == actual:
        return
    diff = "".join(
        difflib.unified_diff(
            expected.splitlines(keepends=True),
            actual.splitlines(keepends=True),
            fromfile=f"{message} (golden)",
            tofile=f"{message} (rendered)",
        )
    )
    raise AssertionError(f"snapshot mismatch: {message}\n{diff}")


class SnapshotSuite:
    """
    Snapshot tests sharing one directory for their golden files.

    Usually the root is under "testdata".
    """

    def __init__(self, root_dir: str, fs: Optional[FileSystem] = None) -> None:
        self.root_dir = root_dir
        self.fs = fs or OsFileSystem()

    def path_for(self, name: str) -> str:
        return os.path.join(self.root_dir, name)

    def new_snapshot(self, name: str, verify: bool, equal: VerifyFunc) -> "Snapshot":
        """
        Create a snapshot.

        Args:
            name: Last part of the golden file path, used as given
            verify: Compare with stored content instead of overwriting it
            equal: Assertion called with (stored, rendered, name) in verify mode

        Returns:
            Snapshot bound to root_dir/name
        """
        return Snapshot(
            name=name,
            path=self.path_for(name),
            verify=verify,
            equal=equal,
            fs=self.fs,
        )


@dataclass(frozen=True)
class Snapshot:
    """
    A single golden file.

    Fields:
        name: Snapshot name, also the file name
        path: Full path of the golden file
        verify: Verify mode flag
        equal: Assertion used in verify mode
        fs: Filesystem holding the file
    """
    name: str
    path: str
    verify: bool
    equal: VerifyFunc
    fs: FileSystem

    def read(self) -> str:
        """
        Read stored content. A missing file reads as an empty string.

        Raises:
            SnapshotStoreError: If the file exists but cannot be read or is not UTF-8
        """
        try:
            return self.fs.read_text(self.path)
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError) as ex:
            raise SnapshotStoreError(self.path, str(ex)) from ex

    def write(self, content: str) -> None:
        """
        Write content, creating the parent directory when missing.

        Raises:
            SnapshotStoreError: If the write fails
        """
        try:
            self.fs.makedirs(os.path.dirname(self.path))
            self.fs.write_text(self.path, content)
        except OSError as ex:
            raise SnapshotStoreError(self.path, str(ex)) from ex

    def run(self, view: str) -> None:
        """
        Record or verify view against the golden file.

        Raises only when something unexpected fails. Whether the test itself
        fails is up to the equal function.

        Raises:
            SnapshotStoreError: On filesystem failure
        """
        content = self.read()
        if self.verify and content != "":
            logger.debug("Verifying snapshot %s", self.name)
            self.equal(content, view, self.name)
            return
        if view != content:
            logger.debug("Writing snapshot %s (%d chars)", self.name, len(view))
            self.write(view)
            return
        logger.debug("Snapshot %s unchanged", self.name)

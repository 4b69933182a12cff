"""
Filesystem operations that fail the test instead of returning errors.
"""

import os
from typing import List

from .fs import FileSystem

# Padding appended by write_large_text_file.
LARGE_FILE_PADDING = 1024 * 1024


class AssertFs:
    """
    Test helper over a FileSystem.

    Every method raises AssertionError with the path and the caller's message
    when the operation fails or the expectation does not hold.
    """

    def __init__(self, fs: FileSystem) -> None:
        self.fs = fs

    def write_text_file(self, path: str, content: str, message: str) -> None:
        """Write a text file, creating its directories."""
        self._write_text_file(path, content, 0, message)

    def write_large_text_file(self, path: str, content: str, message: str) -> None:
        """Write content followed by a megabyte of "0" characters."""
        self._write_text_file(path, content, LARGE_FILE_PADDING, message)

    def _write_text_file(self, path: str, content: str, padding: int, message: str) -> None:
        self.mkdir_all(os.path.dirname(path), message)
        try:
            self.fs.write_text(path, content + "0" * padding)
        except OSError as ex:
            raise AssertionError(f"write, path: {path}, message: {message}, error: {ex}") from ex

    def dir_exists(self, path: str, message: str) -> None:
        if not self.fs.isdir(path):
            raise AssertionError(f"dir exists, path: {path}, message: {message}")

    def exists(self, path: str, message: str) -> None:
        if not self.fs.exists(path):
            raise AssertionError(f"exists, path: {path}, message: {message}")

    def not_exists(self, path: str, message: str) -> None:
        if self.fs.exists(path):
            raise AssertionError(f"not exists, path: {path}, message: {message}")

    def read_lines(self, path: str, message: str) -> List[str]:
        """Split file content on newlines. An empty file has no lines."""
        try:
            content = self.fs.read_text(path)
        except OSError as ex:
            raise AssertionError(f"read lines, path: {path}, message: {message}, error: {ex}") from ex
        if not content:
            return []
        return content.split("\n")

    def mkdir_all(self, path: str, message: str) -> None:
        try:
            self.fs.makedirs(path)
        except OSError as ex:
            raise AssertionError(f"mkdir, path: {path}, message: {message}, error: {ex}") from ex

    def contains(self, path: str, content: str, message: str) -> None:
        """Assert the file content equals content."""
        actual = "\n".join(self.read_lines(path, message))
        if actual != content:
            raise AssertionError(f"contains, path: {path}, message: {message}")

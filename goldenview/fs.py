"""
Filesystem abstraction used by snapshot and script storage.

This module provides:
- FileSystem: Abstract interface
- OsFileSystem: Real disk access
- MemoryFileSystem: In-memory tree for tests
"""

import os
import posixpath
from abc import ABC, abstractmethod
from typing import Dict, List, Set


class FileSystem(ABC):
    """
    Abstract filesystem interface.

    All implementations must guarantee:
    - read_text raises FileNotFoundError for a missing file, other OSError otherwise
    - write_text never creates parent directories
    - content round-trips byte-for-byte (UTF-8, no newline translation)
    """

    @abstractmethod
    def read_text(self, path: str) -> str:
        ...

    @abstractmethod
    def write_text(self, path: str, content: str) -> None:
        ...

    @abstractmethod
    def makedirs(self, path: str) -> None:
        """Create path and any missing parents. Existing directories are fine."""
        ...

    @abstractmethod
    def exists(self, path: str) -> bool:
        ...

    @abstractmethod
    def isdir(self, path: str) -> bool:
        ...

    @abstractmethod
    def listdir(self, path: str) -> List[str]:
        ...

    @abstractmethod
    def remove(self, path: str) -> None:
        ...


class OsFileSystem(FileSystem):
    """Filesystem backed by the local disk."""

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()

    def write_text(self, path: str, content: str) -> None:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)

    def makedirs(self, path: str) -> None:
        os.makedirs(path or ".", exist_ok=True)

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def isdir(self, path: str) -> bool:
        return os.path.isdir(path)

    def listdir(self, path: str) -> List[str]:
        return sorted(os.listdir(path))

    def remove(self, path: str) -> None:
        os.remove(path)


class MemoryFileSystem(FileSystem):
    """
    In-memory filesystem.

    Paths are normalized with posixpath. The root directory always exists.
    """

    def __init__(self) -> None:
        self._files: Dict[str, str] = {}
        self._dirs: Set[str] = {"/", "."}

    def _norm(self, path: str) -> str:
        return posixpath.normpath(path)

    def _parent(self, path: str) -> str:
        return posixpath.dirname(path) or "."

    def read_text(self, path: str) -> str:
        p = self._norm(path)
        if p in self._dirs:
            raise IsADirectoryError(path)
        if p not in self._files:
            raise FileNotFoundError(path)
        return self._files[p]

    def write_text(self, path: str, content: str) -> None:
        p = self._norm(path)
        if p in self._dirs:
            raise IsADirectoryError(path)
        if self._parent(p) not in self._dirs:
            raise FileNotFoundError(f"parent directory missing: {path}")
        self._files[p] = content

    def makedirs(self, path: str) -> None:
        p = self._norm(path or ".")
        while p not in self._dirs:
            if p in self._files:
                raise FileExistsError(path)
            self._dirs.add(p)
            p = self._parent(p)

    def exists(self, path: str) -> bool:
        p = self._norm(path)
        return p in self._files or p in self._dirs

    def isdir(self, path: str) -> bool:
        return self._norm(path) in self._dirs

    def listdir(self, path: str) -> List[str]:
        p = self._norm(path)
        if p not in self._dirs:
            raise FileNotFoundError(path)
        names = set()
        for each in list(self._files) + list(self._dirs):
            if each != p and self._parent(each) == p:
                names.add(posixpath.basename(each))
        return sorted(names)

    def remove(self, path: str) -> None:
        p = self._norm(path)
        if p not in self._files:
            raise FileNotFoundError(path)
        del self._files[p]

"""
Filesystem capability used by the core operations.

This module defines the FileOps protocol that archive routing and project
creation go through for every filesystem query and mutation, with two
implementations:

- RealFileOps: delegates to the operating system via pathlib/os
- MemoryFileOps: dict-backed filesystem for deterministic tests

Both implementations report failures with the built-in OSError subclasses
and agree on semantics:

- create_dir_all is a no-op on an existing directory and fails through a file
- move never overwrites: an existing destination raises FileExistsError
- append_bytes creates a missing file but never a missing parent directory
"""

import errno
import logging
import os
from enum import Enum
from pathlib import Path, PurePath, PurePosixPath
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class FileOps(Protocol):
    """
    Protocol for filesystem access.

    Implementations raise OSError subclasses on failure; callers translate
    them into slugpm exceptions.
    """

    def exists(self, path: PurePath) -> bool:
        """Check whether anything (file or directory) exists at path."""
        ...

    def is_dir(self, path: PurePath) -> bool:
        """Check whether path is an existing directory."""
        ...

    def create_dir_all(self, path: PurePath) -> None:
        """
        Create a directory and any missing parents.

        Raises:
            FileExistsError: If path exists and is not a directory
            NotADirectoryError: If a parent component is a file
        """
        ...

    def move(self, src: PurePath, dst: PurePath) -> None:
        """
        Rename src to dst.

        Raises:
            FileNotFoundError: If src or dst's parent directory is missing
            FileExistsError: If dst already exists
            OSError: If the move is otherwise impossible (directory into
                itself, across devices, permissions)
        """
        ...

    def append_bytes(self, path: PurePath, data: bytes) -> None:
        """
        Append data to the file at path, creating the file if needed.

        Raises:
            FileNotFoundError: If the parent directory is missing
            IsADirectoryError: If path is a directory
        """
        ...


def _os_error(cls: type[OSError], code: int, path: PurePath) -> OSError:
    return cls(code, os.strerror(code), str(path))


class RealFileOps:
    """FileOps backed by the real filesystem."""

    def exists(self, path: PurePath) -> bool:
        p = Path(path)
        return p.exists() or p.is_symlink()

    def is_dir(self, path: PurePath) -> bool:
        return Path(path).is_dir()

    def create_dir_all(self, path: PurePath) -> None:
        logger.debug("mkdir -p %s", path)
        Path(path).mkdir(parents=True, exist_ok=True)

    def move(self, src: PurePath, dst: PurePath) -> None:
        if not self.exists(src):
            raise _os_error(FileNotFoundError, errno.ENOENT, src)
        # os.rename silently replaces files on POSIX
        if self.exists(dst):
            raise _os_error(FileExistsError, errno.EEXIST, dst)
        logger.debug("rename %s -> %s", src, dst)
        os.rename(src, dst)

    def append_bytes(self, path: PurePath, data: bytes) -> None:
        logger.debug("append %d bytes to %s", len(data), path)
        with open(path, "ab") as f:
            f.write(data)


class _Entry(Enum):
    DIRECTORY = "directory"


class MemoryFileOps:
    """
    FileOps backed by an in-memory mapping.

    Each path maps either to the DIRECTORY marker or to the file's bytes.
    The filesystem root and ``.`` always exist as directories, so both
    absolute and relative paths work.

    Example:
        >>> fs = MemoryFileOps()
        >>> fs.add_file(PurePosixPath("a/b/notes.txt"), b"hi")
        >>> fs.is_dir(PurePosixPath("a/b"))
        True
    """

    def __init__(self) -> None:
        self._entries: dict[PurePosixPath, bytes | _Entry] = {}

    @staticmethod
    def _key(path: PurePath) -> PurePosixPath:
        return PurePosixPath(path)

    @staticmethod
    def _is_root(path: PurePosixPath) -> bool:
        return path == path.parent

    def exists(self, path: PurePath) -> bool:
        key = self._key(path)
        return self._is_root(key) or key in self._entries

    def is_dir(self, path: PurePath) -> bool:
        key = self._key(path)
        return self._is_root(key) or self._entries.get(key) is _Entry.DIRECTORY

    def create_dir_all(self, path: PurePath) -> None:
        key = self._key(path)
        for component in reversed([key, *key.parents]):
            if self._is_root(component):
                continue
            entry = self._entries.get(component)
            if entry is None:
                self._entries[component] = _Entry.DIRECTORY
            elif entry is not _Entry.DIRECTORY:
                if component == key:
                    raise _os_error(FileExistsError, errno.EEXIST, path)
                raise _os_error(NotADirectoryError, errno.ENOTDIR, path)

    def move(self, src: PurePath, dst: PurePath) -> None:
        s, d = self._key(src), self._key(dst)
        if not self.exists(s):
            raise _os_error(FileNotFoundError, errno.ENOENT, src)
        if self.exists(d):
            raise _os_error(FileExistsError, errno.EEXIST, dst)
        self._check_parent(d)
        if self._is_root(s):
            raise _os_error(OSError, errno.EBUSY, src)
        if self.is_dir(s) and s in d.parents:
            raise _os_error(OSError, errno.EINVAL, dst)

        moved = [k for k in self._entries if k == s or s in k.parents]
        for k in moved:
            self._entries[d / k.relative_to(s)] = self._entries.pop(k)

    def append_bytes(self, path: PurePath, data: bytes) -> None:
        key = self._key(path)
        if self.is_dir(key):
            raise _os_error(IsADirectoryError, errno.EISDIR, path)
        self._check_parent(key)
        existing = self._entries.get(key, b"")
        assert isinstance(existing, bytes)
        self._entries[key] = existing + data

    def _check_parent(self, key: PurePosixPath) -> None:
        parent = key.parent
        if not self.exists(parent):
            raise _os_error(FileNotFoundError, errno.ENOENT, key)
        if not self.is_dir(parent):
            raise _os_error(NotADirectoryError, errno.ENOTDIR, key)

    # ------------------------------------------------------------------
    # Test helpers
    # ------------------------------------------------------------------

    def add_file(self, path: PurePath, data: bytes = b"") -> None:
        """Create a file with content, creating parent directories."""
        key = self._key(path)
        self.create_dir_all(key.parent)
        if self.is_dir(key):
            raise _os_error(IsADirectoryError, errno.EISDIR, path)
        self._entries[key] = data

    def read_bytes(self, path: PurePath) -> bytes:
        """Return a file's content."""
        key = self._key(path)
        entry = self._entries.get(key)
        if entry is None:
            raise _os_error(FileNotFoundError, errno.ENOENT, path)
        if entry is _Entry.DIRECTORY:
            raise _os_error(IsADirectoryError, errno.EISDIR, path)
        return entry

    def paths(self) -> list[PurePosixPath]:
        """All stored paths, sorted."""
        return sorted(self._entries)

"""File-system backends used by the project generator.

``LocalFileSystem`` performs real disk I/O.  ``MemoryFileSystem`` keeps
directories and files in dictionaries so emission can be exercised without
touching the disk.  Both expose the same small interface and both translate
failures into :class:`~agentic_engine.errors.FileSystemError`.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Protocol

from agentic_engine.errors import FileSystemError


class FileSystem(Protocol):
    """Operations the generator needs from a file system."""

    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def mkdir(self, path: Path) -> None: ...

    def write_text(self, path: Path, content: str) -> None: ...

    def read_text(self, path: Path) -> str: ...


class LocalFileSystem:
    """Real disk I/O through :mod:`pathlib`."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def mkdir(self, path: Path) -> None:
        """Create *path* and its parents; an existing directory is fine."""
        target = Path(path)
        try:
            target.mkdir(parents=True, exist_ok=True)
        except FileExistsError:
            raise FileSystemError(target, "exists and is not a directory") from None
        except OSError as exc:
            raise FileSystemError(target, exc.strerror or str(exc)) from exc

    def write_text(self, path: Path, content: str) -> None:
        """Write *content* as UTF-8, replacing any existing file."""
        target = Path(path)
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise FileSystemError(target, exc.strerror or str(exc)) from exc

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")


class MemoryFileSystem:
    """In-memory file system.

    Paths are normalised to POSIX strings.  Directory creation registers every
    ancestor, and writing a file requires its parent directory to exist, which
    mirrors what the local backend would see on disk.

    Attributes:
        directories: Set of directory paths that have been created.
        files: Mapping of file path to content.
        read_only: Paths (files or directories) where writes must fail.
    """

    def __init__(self) -> None:
        self.directories: set[str] = set()
        self.files: dict[str, str] = {}
        self.read_only: set[str] = set()

    # -- Queries -----------------------------------------------------------

    def exists(self, path: Path) -> bool:
        key = _key(path)
        return key in self.directories or key in self.files

    def is_dir(self, path: Path) -> bool:
        return _key(path) in self.directories

    def read_text(self, path: Path) -> str:
        key = _key(path)
        if key not in self.files:
            raise FileNotFoundError(key)
        return self.files[key]

    # -- Mutations ---------------------------------------------------------

    def mkdir(self, path: Path) -> None:
        key = PurePosixPath(_key(path))
        for candidate in reversed((key, *key.parents)):
            name = str(candidate)
            if name in self.files:
                raise FileSystemError(name, "exists and is not a directory")
            if name not in self.directories and self._blocked(name):
                raise FileSystemError(name, "Permission denied")
            self.directories.add(name)

    def write_text(self, path: Path, content: str) -> None:
        key = _key(path)
        parent = str(PurePosixPath(key).parent)
        if key in self.directories:
            raise FileSystemError(key, "Is a directory")
        if parent not in self.directories:
            raise FileSystemError(key, "No such file or directory")
        if self._blocked(key):
            raise FileSystemError(key, "Permission denied")
        self.files[key] = content

    # -- Helpers -----------------------------------------------------------

    def _blocked(self, key: str) -> bool:
        path = PurePosixPath(key)
        return any(
            str(path) == ro or PurePosixPath(ro) in path.parents
            for ro in self.read_only
        )


def _key(path: Path | str) -> str:
    return PurePosixPath(Path(path).as_posix()).as_posix()

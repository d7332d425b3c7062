# Filesystem collaborator used by the walker.
#
# Everything the walk needs from the disk goes through FileSystem so tests can
# substitute an in-memory tree.  Entries are classified without following
# symlinks: a link to a directory is reported as SYMLINK, never DIRECTORY.

from __future__ import annotations

import os
import stat as statmod
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from dirwiz.models.enums import EntryKind


@dataclass(slots=True, frozen=True)
class FsStat:
    kind: EntryKind
    size: int

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(slots=True, frozen=True)
class FsEntry:
    path: str
    name: str
    # None when the entry was listed but its metadata could not be read;
    # error then holds the failure.
    stat: FsStat | None
    error: OSError | None = None


class FileSystem(Protocol):
    def list_directory(self, path: str) -> list[FsEntry]:
        """List the immediate entries of *path*.  Raises ``OSError`` if unreadable."""
        ...

    def stat(self, path: str) -> FsStat: ...

    def exists(self, path: str) -> bool: ...

    def expanduser(self, path: str) -> str: ...

    def absolute(self, path: str) -> str: ...

    def read_text(self, path: str) -> str: ...


def _kind_from_mode(mode: int) -> EntryKind:
    if statmod.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if statmod.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if statmod.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


def _to_fs_stat(st: os.stat_result) -> FsStat:
    kind = _kind_from_mode(st.st_mode)
    return FsStat(kind=kind, size=st.st_size if kind is EntryKind.FILE else 0)


class OsFileSystem:
    def list_directory(self, path: str) -> list[FsEntry]:
        entries: list[FsEntry] = []
        with os.scandir(path) as it:
            for entry in it:
                try:
                    st = _to_fs_stat(entry.stat(follow_symlinks=False))
                except OSError as exc:
                    entries.append(FsEntry(path=entry.path, name=entry.name, stat=None, error=exc))
                    continue
                entries.append(FsEntry(path=entry.path, name=entry.name, stat=st))
        return entries

    def stat(self, path: str) -> FsStat:
        return _to_fs_stat(os.stat(path))

    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    def expanduser(self, path: str) -> str:
        return os.path.expanduser(path)

    def absolute(self, path: str) -> str:
        return str(Path(path).absolute())

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")


DEFAULT_FS: FileSystem = OsFileSystem()

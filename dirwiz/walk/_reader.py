from __future__ import annotations

import logging

from dirwiz.models.enums import EntryKind, ErrorPolicy
from dirwiz.models.walk import WalkAbortedError, WalkError, WalkErrorCode, WalkStats
from dirwiz.services.fs import FileSystem

logger = logging.getLogger(__name__)


class DirReader:
    """Reads one directory at a time and applies the walk's error policy.

    Shared by every work unit of a walk, so the statistics and the error log
    cover the whole traversal.
    """

    __slots__ = ("_fs", "_on_error", "stats", "errors")

    def __init__(self, fs: FileSystem, on_error: ErrorPolicy, stats: WalkStats | None = None) -> None:
        self._fs = fs
        self._on_error = on_error
        self.stats = stats if stats is not None else WalkStats()
        self.errors: list[WalkError] = []

    def read(self, path: str) -> tuple[int, list[str]]:
        """Return ``(bytes of regular files, subdirectory paths)`` directly under *path*."""
        try:
            entries = self._fs.list_directory(path)
        except OSError as exc:
            self._fail(WalkErrorCode.UNREADABLE_DIRECTORY, path, f"Cannot read directory: {exc}", exc)
            self.stats.directories += 1
            return 0, []

        total = 0
        subdirs: list[str] = []
        files = 0
        for entry in entries:
            st = entry.stat
            if st is None:
                self._fail(
                    WalkErrorCode.UNREADABLE_ENTRY,
                    entry.path,
                    f"Cannot stat entry: {entry.error}" if entry.error else "Cannot stat entry",
                    entry.error,
                )
                continue
            if st.kind is EntryKind.DIRECTORY:
                subdirs.append(entry.path)
            elif st.kind is EntryKind.FILE:
                total += st.size
                files += 1
            # Symlinks and special files carry no bytes.

        self.stats.directories += 1
        self.stats.files += files
        self.stats.bytes_total += total
        return total, subdirs

    def _fail(self, code: WalkErrorCode, path: str, message: str, cause: OSError | None) -> None:
        error = WalkError(code=code, path=path, message=message)
        if self._on_error is ErrorPolicy.ABORT:
            raise WalkAbortedError(error) from cause
        logger.warning("Skipping %s (%s)", path, message)
        self.errors.append(error)
        self.stats.access_errors += 1

# Walker: pull-based traversal over a collection of work units.
#
# State machine:
#   ACTIVE    — more than one live unit; next() pops from the unit at cursor.
#   DRAINING  — one unit left; it is split on the next pull if it holds more
#               pending paths than options.split_threshold.
#   EXHAUSTED — no units left (terminal).
#
# Units are retired with swap-remove, so the relative order of the remaining
# units is not stable.  interleave() only moves the cursor; it never changes
# which items are produced.

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from result import Err, Ok

from dirwiz.models.walk import (
    Item,
    WalkAbortedError,
    WalkError,
    WalkErrorCode,
    WalkOptions,
    WalkResult,
    WalkStats,
)
from dirwiz.services.fs import DEFAULT_FS, FileSystem
from dirwiz.walk._reader import DirReader
from dirwiz.walk._unit import WorkUnit, create_unit

logger = logging.getLogger(__name__)


class WalkerState(str, Enum):
    ACTIVE = "active"
    DRAINING = "draining"
    EXHAUSTED = "exhausted"


class Walker(Iterator[Item]):
    """Yields ``(directory, direct file bytes)`` once for every directory under the root."""

    def __init__(self, root: str, options: WalkOptions | None = None, fs: FileSystem = DEFAULT_FS) -> None:
        self._options = options or WalkOptions()
        self._reader = DirReader(fs, self._options.on_error)
        self._work: list[WorkUnit] = [create_unit(self._options.split_policy, (root,))]
        self._index = 0

    @property
    def units(self) -> tuple[WorkUnit, ...]:
        return tuple(self._work)

    @property
    def cursor(self) -> int:
        return self._index

    @property
    def stats(self) -> WalkStats:
        return self._reader.stats

    @property
    def errors(self) -> list[WalkError]:
        """I/O errors skipped so far (only populated with ``ErrorPolicy.SKIP``)."""
        return self._reader.errors

    @property
    def state(self) -> WalkerState:
        if not self._work:
            return WalkerState.EXHAUSTED
        if len(self._work) == 1:
            return WalkerState.DRAINING
        return WalkerState.ACTIVE

    def __iter__(self) -> Walker:
        return self

    def __next__(self) -> Item:
        while (unit := self._current()) is not None:
            try:
                item = unit.pop(self._reader)
            except WalkAbortedError:
                self._work.clear()
                self._index = 0
                raise
            if item is None:
                self._retire()
                continue
            if not len(unit):
                self._retire()
            if self._options.auto_interleave:
                self.interleave()
            return item
        raise StopIteration

    def interleave(self) -> None:
        """Move the cursor to the next live unit, wrapping around."""
        self._index += 1
        if self._index >= len(self._work):
            self._index = 0

    def _retire(self) -> None:
        unit = self._work[self._index]
        last = self._work.pop()
        if self._index < len(self._work):
            self._work[self._index] = last
        else:
            self._index = 0
        logger.debug("Retired %r, %d unit(s) left", unit, len(self._work))

    def _current(self) -> WorkUnit | None:
        """Return the unit at the cursor, splitting the last one first if needed."""
        if not self._work:
            return None
        if len(self._work) == 1 and len(self._work[0]) > self._options.split_threshold:
            self._work = self._work[0].split()
            self._index = 0
            self._reader.stats.splits += 1
        return self._work[self._index]


@dataclass(slots=True, frozen=True)
class DirWiz:
    """Root descriptor.  Each iteration starts a fresh walk from *path*."""

    path: str
    options: WalkOptions = field(default_factory=WalkOptions)
    fs: FileSystem = DEFAULT_FS

    def __iter__(self) -> Walker:
        return Walker(self.path, self.options, self.fs)


def resolve_root(path: str, fs: FileSystem) -> str | WalkError:
    """Validate and resolve a walk root.

    Returns the absolute path, or a ``WalkError`` on failure.
    """
    expanded = fs.expanduser(path)
    if not fs.exists(expanded):
        return WalkError(
            code=WalkErrorCode.NOT_FOUND,
            path=expanded,
            message="Path does not exist",
        )

    resolved = fs.absolute(expanded)
    try:
        root_stat = fs.stat(resolved)
    except OSError as exc:
        return WalkError(
            code=WalkErrorCode.ROOT_STAT_FAILED,
            path=resolved,
            message=f"Cannot stat root: {exc}",
        )
    if not root_stat.is_dir:
        return WalkError(
            code=WalkErrorCode.NOT_DIRECTORY,
            path=resolved,
            message="Path is not a directory",
        )
    return resolved


def walk(path: str, options: WalkOptions | None = None, fs: FileSystem = DEFAULT_FS) -> WalkResult:
    resolved = resolve_root(path, fs)
    if isinstance(resolved, WalkError):
        return Err(resolved)
    return Ok(Walker(resolved, options, fs))

# Work units: independent stacks of not-yet-read directories.
#
# A unit is seeded with one directory (or a slice of another unit) and only
# ever grows by adding subdirectories of the directory it just read, so every
# pending path descends from the unit's seed.  split() partitions the pending
# paths along subtree boundaries; the Walker calls it when a single unit is
# left so that several branches are live again.
#
# Two disciplines:
#   StackUnit — LIFO list.  Popping the deepest entry and pushing its children
#       keeps the list sorted by depth, which split() relies on.
#   TreeUnit  — list kept sorted component-wise, so a directory's descendants
#       sit contiguously right after it.

from __future__ import annotations

import bisect
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import PurePath
from typing import override

from dirwiz.models.enums import SplitPolicy
from dirwiz.models.walk import Item
from dirwiz.walk._reader import DirReader

logger = logging.getLogger(__name__)


def _parts(path: str) -> tuple[str, ...]:
    return PurePath(path).parts


def _depth(path: str) -> int:
    return len(_parts(path))


class WorkUnit(ABC):
    """Pending directories of one traversal branch."""

    __slots__ = ()

    @property
    @abstractmethod
    def paths(self) -> tuple[str, ...]:
        """Pending paths in the unit's internal order."""

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def _take(self) -> str: ...

    @abstractmethod
    def _add(self, paths: list[str]) -> None: ...

    @abstractmethod
    def _explode(self) -> list[WorkUnit]: ...

    def pop(self, reader: DirReader) -> Item | None:
        """Read the next pending directory and queue its subdirectories.

        Returns ``None`` when nothing is pending.
        """
        if not len(self):
            return None
        path = self._take()
        total, subdirs = reader.read(path)
        self._add(subdirs)
        return path, total

    def split(self) -> list[WorkUnit]:
        """Partition the pending paths into new units, leaving this one empty.

        Raises ``ValueError`` unless more than one path is pending.
        """
        pending = len(self)
        if pending <= 1:
            msg = f"Cannot split a unit with {pending} pending path(s)"
            raise ValueError(msg)
        units = self._explode()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s split %d pending paths into units of sizes %s",
                type(self).__name__,
                pending,
                [len(u) for u in units],
            )
        return units


class StackUnit(WorkUnit):
    __slots__ = ("_stack",)

    def __init__(self, paths: Iterable[str]) -> None:
        self._stack: list[str] = list(paths)

    @property
    @override
    def paths(self) -> tuple[str, ...]:
        return tuple(self._stack)

    @override
    def __len__(self) -> int:
        return len(self._stack)

    @override
    def _take(self) -> str:
        return self._stack.pop()

    @override
    def _add(self, paths: list[str]) -> None:
        self._stack.extend(paths)

    @override
    def _explode(self) -> list[WorkUnit]:
        stack = self._stack
        top = _depth(stack[0])
        units: list[WorkUnit] = []
        if top != _depth(stack[-1]):
            # Everything deeper than top + 1 was pushed while reading one
            # top + 1 directory, so it stays together.
            pos = bisect.bisect_right(stack, top + 1, key=_depth)
            if pos < len(stack):
                units.append(StackUnit(stack[pos:]))
            del stack[pos:]
        # The rest have not been read yet; one unit each.
        units.extend(StackUnit((p,)) for p in stack)
        stack.clear()
        return units

    @override
    def __repr__(self) -> str:
        return f"StackUnit({self._stack!r})"


class TreeUnit(WorkUnit):
    __slots__ = ("_sorted",)

    def __init__(self, paths: Iterable[str]) -> None:
        self._sorted: list[str] = sorted(paths, key=_parts)

    @property
    @override
    def paths(self) -> tuple[str, ...]:
        return tuple(self._sorted)

    @override
    def __len__(self) -> int:
        return len(self._sorted)

    @override
    def _take(self) -> str:
        return self._sorted.pop()

    @override
    def _add(self, paths: list[str]) -> None:
        for path in paths:
            bisect.insort(self._sorted, path, key=_parts)

    @override
    def _explode(self) -> list[WorkUnit]:
        groups: list[list[str]] = []
        items = self._sorted
        i = 0
        while i < len(items):
            head = _parts(items[i])
            j = i + 1
            while j < len(items) and _parts(items[j])[: len(head)] == head:
                j += 1
            groups.append(items[i:j])
            i = j
        items.clear()
        # Last subtree first, matching the pop order within a unit.
        return [TreeUnit(group) for group in reversed(groups)]

    @override
    def __repr__(self) -> str:
        return f"TreeUnit({self._sorted!r})"


def create_unit(policy: SplitPolicy | str, paths: Iterable[str]) -> WorkUnit:
    """Create an empty-or-seeded unit for *policy* (``depth`` or ``subtree``).

    Raises ``ValueError`` for unknown names.
    """
    name = policy.value if isinstance(policy, SplitPolicy) else policy
    if name == SplitPolicy.DEPTH.value:
        return StackUnit(paths)
    if name == SplitPolicy.SUBTREE.value:
        return TreeUnit(paths)
    msg = f"Unknown split policy: {name}. Use: depth, subtree."
    raise ValueError(msg)

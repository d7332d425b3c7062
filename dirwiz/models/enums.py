from __future__ import annotations

from enum import Enum
from typing import Any


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


class SplitPolicy(str, Enum):
    DEPTH = "depth"
    SUBTREE = "subtree"

    @classmethod
    def from_str(cls, value: Any) -> SplitPolicy:
        return cls(str(value).lower())


class ErrorPolicy(str, Enum):
    ABORT = "abort"
    SKIP = "skip"

    @classmethod
    def from_str(cls, value: Any) -> ErrorPolicy:
        return cls(str(value).lower())

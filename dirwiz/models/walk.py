from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from result import Result

from dirwiz.models.enums import ErrorPolicy, SplitPolicy

if TYPE_CHECKING:
    from dirwiz.walk.walker import Walker

# (directory path, bytes held directly by its regular files)
type Item = tuple[str, int]


@dataclass(slots=True, frozen=True)
class WalkOptions:
    split_policy: SplitPolicy = SplitPolicy.DEPTH
    # The last live unit is split once its pending count exceeds this.
    split_threshold: int = 1
    on_error: ErrorPolicy = ErrorPolicy.ABORT
    auto_interleave: bool = False

    def __post_init__(self) -> None:
        if self.split_threshold < 1:
            msg = f"split_threshold must be >= 1, got {self.split_threshold}"
            raise ValueError(msg)


@dataclass(slots=True)
class WalkStats:
    directories: int = 0
    files: int = 0
    bytes_total: int = 0
    access_errors: int = 0
    splits: int = 0


class WalkErrorCode(str, Enum):
    NOT_FOUND = "not_found"
    NOT_DIRECTORY = "not_directory"
    ROOT_STAT_FAILED = "root_stat_failed"
    UNREADABLE_DIRECTORY = "unreadable_directory"
    UNREADABLE_ENTRY = "unreadable_entry"


@dataclass(slots=True, frozen=True)
class WalkError:
    code: WalkErrorCode
    path: str
    message: str


class WalkAbortedError(Exception):
    """Raised out of ``Walker.__next__`` when an I/O failure aborts the walk."""

    def __init__(self, error: WalkError) -> None:
        super().__init__(f"{error.message}: {error.path}")
        self.error = error


type WalkResult = Result[Walker, WalkError]

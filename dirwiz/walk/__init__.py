from __future__ import annotations

from dirwiz.walk._reader import DirReader
from dirwiz.walk._unit import StackUnit, TreeUnit, WorkUnit, create_unit
from dirwiz.walk.walker import DirWiz, Walker, WalkerState, resolve_root, walk

__all__ = [
    "DirReader",
    "DirWiz",
    "StackUnit",
    "TreeUnit",
    "WalkerState",
    "Walker",
    "WorkUnit",
    "create_unit",
    "resolve_root",
    "walk",
]

from __future__ import annotations

import posixpath
import random

from tests.fs_mock import MemoryFileSystem

# name -> file size, or name -> nested layout for a subdirectory
type Layout = dict[str, int | Layout]


def build_tree(fs: MemoryFileSystem, root: str, layout: Layout) -> None:
    fs.add_dir(root)
    for name, value in layout.items():
        path = posixpath.join(root, name)
        if isinstance(value, dict):
            build_tree(fs, path, value)
        else:
            fs.add_file(path, size=value)


def random_layout(rng: random.Random, depth: int, fanout: int = 4) -> Layout:
    layout: Layout = {}
    for idx in range(rng.randint(0, fanout)):
        layout[f"f{idx}"] = rng.randint(0, 1000)
    if depth > 0:
        for idx in range(rng.randint(0, fanout)):
            layout[f"d{idx}"] = random_layout(rng, depth - 1, fanout)
    return layout


def expected_items(root: str, layout: Layout) -> set[tuple[str, int]]:
    """Every directory in *layout* with the bytes of its direct files."""
    total = sum(v for v in layout.values() if isinstance(v, int))
    items = {(root, total)}
    for name, value in layout.items():
        if isinstance(value, dict):
            items |= expected_items(posixpath.join(root, name), value)
    return items

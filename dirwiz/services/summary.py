from __future__ import annotations

import heapq
from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from dirwiz.config.schema import AppConfig
from dirwiz.models.walk import Item, WalkStats
from dirwiz.services.formatting import format_bytes


def _stats_panel(stats: WalkStats) -> Panel:
    body = (
        f"Directories: [bold]{stats.directories}[/bold]\n"
        f"Files: [bold]{stats.files}[/bold]\n"
        f"Total Size: [bold]{format_bytes(stats.bytes_total)}[/bold]\n"
        f"Access Errors: [bold]{stats.access_errors}[/bold]\n"
        f"Splits: [bold]{stats.splits}[/bold]"
    )
    return Panel(body, title="Walk Summary", border_style="blue")


def _top_dirs_table(items: Iterable[Item], top_n: int) -> Table:
    table = Table(title="Largest Directories (direct files)", header_style="bold cyan")
    table.add_column("Path")
    table.add_column("Size", justify="right")
    for path, total in heapq.nlargest(top_n, items, key=lambda item: item[1]):
        table.add_row(escape(path), format_bytes(total))
    return table


def render_summary(console: Console, items: Iterable[Item], stats: WalkStats, config: AppConfig) -> None:
    """Print the stats panel and the *config.top_count* directories holding the most file bytes."""
    console.print(_stats_panel(stats))
    console.print(_top_dirs_table(items, config.top_count))

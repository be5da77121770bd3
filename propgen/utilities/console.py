"""
Console display of generated value distributions.

Renders value counts as a rich table, which makes it easy to eyeball
whether a weighted or sized generator behaves as intended.
"""

from __future__ import annotations

from collections.abc import Mapping

from rich.console import Console
from rich.table import Table

from .formatters import format_percentage, format_value

COLORS = {
    "header": "#00d4ff",
    "value": "#ffd93d",
    "bar": "#00a854",
    "muted": "#6c757d",
}

BAR_WIDTH = 30


def render_distribution(counts: Mapping[object, int], title: str = "Distribution") -> Table:
    """Build a table of value, count, share and a proportional bar, most common first."""
    total = sum(counts.values())
    table = Table(title=title, header_style=f"bold {COLORS['header']}")
    table.add_column("Value", style=COLORS["value"])
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right", style=COLORS["muted"])
    table.add_column("", style=COLORS["bar"])

    top = max(counts.values(), default=0)
    for value, count in sorted(counts.items(), key=lambda item: (-item[1], repr(item[0]))):
        bar = "█" * (round(BAR_WIDTH * count / top) if top else 0)
        table.add_row(format_value(value), str(count), format_percentage(count, total), bar)

    table.caption = f"{total} samples, {len(counts)} distinct values"
    return table


def print_distribution(
    counts: Mapping[object, int], title: str = "Distribution", console: Console | None = None
) -> None:
    """Print the distribution table."""
    (console or Console()).print(render_distribution(counts, title))

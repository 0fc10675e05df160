"""
Rich diagnostics for out-of-order sequences.

Useful while debugging a failing `assert_sorted`: the table lists every
adjacent pair that breaks the ordering, with its left index and both
compared values (after `path`, when one is given). Headers and values are
plain `Text`, so brackets in a repr are shown as-is rather than read as
rich markup.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .properties import violation_indices

__all__ = ["violation_table", "print_violations"]


def violation_table(
    xs: Sequence[Any],
    path: Optional[Callable[[Any], Any]] = None,
    by: Optional[Callable[[Any, Any], bool]] = None,
    *,
    title: str = "Out-of-order pairs",
) -> Table:
    """Build a table with one row per out-of-order adjacent pair of `xs`."""
    values = list(xs) if path is None else [path(x) for x in xs]
    table = Table(title=title)
    table.add_column("i", justify="right", style="bold")
    table.add_column(Text("xs[i]"))
    table.add_column(Text("xs[i+1]"))
    for i in violation_indices(values, by=by):
        table.add_row(str(i), Text(repr(values[i])), Text(repr(values[i + 1])))
    return table


def print_violations(
    xs: Sequence[Any],
    path: Optional[Callable[[Any], Any]] = None,
    by: Optional[Callable[[Any, Any], bool]] = None,
    *,
    console: Optional[Console] = None,
) -> int:
    """
    Print the violations of `xs` and return how many there are.

    Prints a single "sorted" line instead of an empty table when every
    adjacent pair is in order.
    """
    console = console or Console()
    table = violation_table(xs, path, by)
    if table.row_count == 0:
        console.print(f"[bold green]sorted[/bold green] ({len(xs)} elements)")
        return 0
    console.print(table)
    return table.row_count

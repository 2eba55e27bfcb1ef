"""Render a coverage summary as a text table.

Layout::

    ╭────────┬────────┬──────┬──────────╮
    │ File   │ Branch │ Line │ Function │
    ├────────┼────────┼──────┼──────────┤
    │ mod.ts │     50 │   80 │      100 │
    │ Total  │     50 │   80 │      100 │
    ╰────────┴────────┴──────┴──────────╯
"""

from __future__ import annotations

import io
from decimal import ROUND_HALF_UP, Decimal

from rich import box
from rich.console import Console
from rich.table import Table

from lcovgate.coverage.models import CoverageMetrics, CoverageSummary

# Wide enough that rich never wraps a file name
_RENDER_WIDTH = 240


def short_path(path: str) -> str:
    """Final path segment; the whole path when there is no usable segment."""
    return path.rsplit("/", 1)[-1] or path


def format_percentage(value: float, places: int = 0) -> str:
    """Percentage rounded half-up to ``places`` decimals, e.g. 12.5 -> '13'."""
    return str(Decimal(value).quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP))


def _row(label: str, metrics: CoverageMetrics) -> list[str]:
    return [
        label,
        format_percentage(metrics.branches.percentage),
        format_percentage(metrics.lines.percentage),
        format_percentage(metrics.functions.percentage),
    ]


def build_table(summary: CoverageSummary) -> Table:
    """Build the rich Table: one row per file, ``Total`` last."""
    table = Table(box=box.ROUNDED, show_lines=False)
    table.add_column("File")
    table.add_column("Branch", justify="right")
    table.add_column("Line", justify="right")
    table.add_column("Function", justify="right")

    for path, metrics in summary.files.items():
        table.add_row(*_row(short_path(path), metrics))
    table.add_row(*_row("Total", summary.total))
    return table


def format_summary(summary: CoverageSummary) -> str:
    """Plain-text table for the summary (no ANSI styling)."""
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=_RENDER_WIDTH,
        color_system=None,
        highlight=False,
        emoji=False,
        markup=False,
    )
    console.print(build_table(summary))
    return buffer.getvalue().rstrip("\n")

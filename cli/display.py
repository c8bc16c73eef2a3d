"""Rich rendering helpers for CLI output (single-responsibility display layer)."""

from __future__ import annotations

import time
from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from complexity_roi.classification import (
    BUCKET_LABELS,
    ComplexityBucket,
    badge_color,
    complexity_bucket,
    quadrant_badge_color,
    refactor_quadrant,
)
from complexity_roi.metrics import MetricsSummary
from complexity_roi.views import ScatterSeries, TablePage

console = Console()


# ------------------------------------------------------------------
# Panels
# ------------------------------------------------------------------


def error_panel(msg: str) -> None:
    """Print a red error panel."""
    console.print(Panel(msg, title="Error", border_style="red"))


def success_panel(msg: str) -> None:
    """Print a green success panel."""
    console.print(Panel(msg, title="Success", border_style="green"))


def info_panel(title: str, body: str) -> None:
    """Print a blue informational panel."""
    console.print(Panel(body, title=title, border_style="blue"))


# ------------------------------------------------------------------
# Simulated loading
# ------------------------------------------------------------------


def loading(delay: float, message: str = "Generating analysis...") -> None:
    """Hold a spinner for *delay* seconds before results are shown."""
    if delay <= 0:
        return
    with console.status(message, spinner="dots"):
        time.sleep(delay)


# ------------------------------------------------------------------
# Tables
# ------------------------------------------------------------------


def dict_table(data: dict[str, Any], title: str = "") -> None:
    """Render a key/value table from a dict."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(str(key), str(value))
    console.print(table)


def _bar(pct: int, width: int = 20) -> str:
    filled = round(width * min(max(pct, 0), 100) / 100)
    return "█" * filled + "░" * (width - filled)


def summary_tables(summary: MetricsSummary) -> None:
    """Render the metrics-summary surface."""
    dist = Table(
        title=f"Complexity Distribution ({summary.total_files} files)",
        show_header=True,
        header_style="bold cyan",
    )
    dist.add_column("Bucket")
    dist.add_column("Share")
    dist.add_column("%", justify="right")
    dist.add_column("Files", justify="right")
    for bucket in ComplexityBucket:
        pct = summary.distribution.percentages[bucket]
        dist.add_row(
            Text(BUCKET_LABELS[bucket]),
            _bar(pct),
            f"{pct}%",
            str(summary.distribution.counts[bucket]),
        )
    console.print(dist)

    dict_table(
        {
            "Average complexity": summary.complexity.mean,
            "Median complexity": summary.complexity.median,
            "Total refactor time (days)": summary.refactor_time.total_days,
            "Total refactor time (months)": summary.refactor_time.total_months,
            "Average refactor time (days)": summary.refactor_time.average_days,
        },
        title="Complexity & Effort",
    )

    quadrants = Table(title="ROI Quadrants", show_header=True, header_style="bold cyan")
    quadrants.add_column("Quadrant")
    quadrants.add_column("Files", justify="right")
    for quadrant, count in summary.quadrants.items():
        quadrants.add_row(
            Text(quadrant.label, style=quadrant_badge_color(quadrant)), str(count)
        )
    for quadrant, count in summary.churn_quadrants.items():
        quadrants.add_row(
            Text(f"{quadrant.label} (churn)", style=quadrant_badge_color(quadrant)),
            str(count),
        )
    console.print(quadrants)

    zone = summary.optimal_zone
    info_panel(
        "Optimal Investment Zone",
        f"{zone.count} files ({zone.percentage}%) fall within the ideal balance "
        f"of complexity and effort.\n"
        f"Total {zone.total_days} days, average {zone.average_days} days per file.",
    )


def records_table(page: TablePage) -> None:
    """Render one page of the file table with complexity and quadrant badges."""
    table = Table(
        title="Files",
        show_header=True,
        header_style="bold cyan",
        caption=(
            f"Showing {page.first_row} to {page.last_row} of {page.total_rows} results"
            f" (page {page.page} of {max(page.total_pages, 1)})"
        ),
    )
    table.add_column("File")
    table.add_column("Complexity", justify="right")
    table.add_column("Refactor (days)", justify="right")
    table.add_column("LOC", justify="right")
    table.add_column("Churn", justify="right")
    table.add_column("Last Modified")
    table.add_column("ROI Quadrant")

    if not page.rows:
        console.print("[dim]No files match your search criteria.[/dim]")
        return

    for record in page.rows:
        bucket = complexity_bucket(record.complexity)
        quadrant = refactor_quadrant(record.complexity, record.refactor_time_days)
        table.add_row(
            record.file_name,
            Text(
                f"{record.complexity} {BUCKET_LABELS[bucket]}",
                style=badge_color(record.complexity),
            ),
            str(record.refactor_time_days),
            str(record.lines_of_code),
            str(record.churn),
            record.last_modified,
            Text(quadrant.label, style=quadrant_badge_color(quadrant)),
        )
    console.print(table)


def series_table(series: Sequence[ScatterSeries], y_label: str, y_max: int) -> None:
    """Render scatter series sizes and extents."""
    table = Table(
        title=f"Scatter Series (y: {y_label}, axis 0–{y_max})",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Bucket")
    table.add_column("Colour")
    table.add_column("Points", justify="right")
    table.add_column("y range", justify="right")
    for s in series:
        ys = [p.y for p in s.points]
        span = f"{min(ys)}–{max(ys)}" if ys else "-"
        table.add_row(
            Text(BUCKET_LABELS[s.bucket], style=f"bold {s.color}"),
            s.color,
            str(len(s.points)),
            span,
        )
    console.print(table)

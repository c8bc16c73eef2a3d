"""Analysis commands: metrics summary, file table, scatter chart and export."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from cli.display import (
    console,
    info_panel,
    loading,
    records_table,
    series_table,
    success_panel,
    summary_tables,
)
from cli.session import DatasetSession
from complexity_roi.classification import (
    DEFAULT_OPTIMAL_ZONE,
    DEFAULT_THRESHOLDS,
    ROADMAP_ORDER,
    AnalysisView,
    ComplexityBucket,
    RefactorQuadrant,
    classify_frame,
)
from complexity_roi.dataset import records_to_frame, save_records_csv
from complexity_roi.metrics import compute_metrics_summary
from complexity_roi.views import (
    CHURN_COMPLEXITY_CURVE,
    SortField,
    TableQuery,
    axis_max,
    build_scatter_series,
    group_by_quadrant,
    run_table_query,
)


def _session(ctx: typer.Context) -> DatasetSession:
    return ctx.obj


# ------------------------------------------------------------------
# summary
# ------------------------------------------------------------------


def summary(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON."),
) -> None:
    """Show the complexity distribution, effort totals and ROI quadrants."""
    session = _session(ctx)
    records = session.records
    loading(session.delay)
    result = compute_metrics_summary(records)
    if as_json:
        console.print_json(json.dumps(result.to_dict()))
        return
    summary_tables(result)


# ------------------------------------------------------------------
# table
# ------------------------------------------------------------------


def table(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Substring of the file name"),
    bucket: Optional[ComplexityBucket] = typer.Option(
        None, "--bucket", help="Only files in this complexity bucket"
    ),
    quadrant: Optional[RefactorQuadrant] = typer.Option(
        None, "--quadrant", help="Only files in this ROI quadrant"
    ),
    sort: SortField = typer.Option(SortField.COMPLEXITY, "--sort", help="Sort column"),
    ascending: bool = typer.Option(False, "--asc", help="Sort ascending"),
    page: int = typer.Option(1, "--page", min=1, help="Page number (1-based)"),
    rows: int = typer.Option(10, "--rows", min=1, help="Rows per page"),
) -> None:
    """List files with search, filters, sorting and pagination."""
    session = _session(ctx)
    query = TableQuery(
        search=search,
        bucket=bucket,
        quadrant=quadrant,
        sort_field=sort,
        descending=not ascending,
        page=page,
        rows_per_page=rows,
    )
    result = run_table_query(session.records, query)
    loading(session.delay)
    records_table(result)


# ------------------------------------------------------------------
# chart
# ------------------------------------------------------------------


def chart(
    ctx: typer.Context,
    view: AnalysisView = typer.Option(
        AnalysisView.REFACTOR_TIME, "--view", help="Metric plotted against complexity"
    ),
) -> None:
    """Summarise the scatter-chart series and next-step recommendations."""
    session = _session(ctx)
    records = session.records
    series = build_scatter_series(records, view)
    y_max = axis_max(records, view)
    loading(session.delay)

    if view is AnalysisView.CHURN:
        series_table(series, "churn (changes)", y_max)
        curve = ", ".join(f"({c:g}, {ch:g})" for c, ch in CHURN_COMPLEXITY_CURVE)
        info_panel(
            "Churn Quadrants",
            "\n".join(
                f"{q.label}: {len(members)} files"
                for q, members in group_by_quadrant(records, view).items()
            )
            + f"\n\nChurn-complexity inversion curve: {curve}",
        )
        return

    series_table(series, "refactor time (days)", y_max)
    groups = group_by_quadrant(records, view)
    quick_wins = len(groups[RefactorQuadrant.LOW_HANGING_FRUIT])
    redesign = len(groups[RefactorQuadrant.HIGH_COMPLEXITY])
    zone = DEFAULT_OPTIMAL_ZONE
    roadmap = "\n".join(
        f"{step}. {q.label} ({len(groups[q])} files)"
        for step, q in enumerate(ROADMAP_ORDER, start=1)
    )
    info_panel(
        "Next Step Recommendations",
        f"Focus on files in the Optimal Investment Zone for quick modernization "
        f"wins. These {quick_wins} files offer the best balance of complexity "
        f"and required effort.\n"
        f"Reassess high-complexity, high-time files (complexity > "
        f"{DEFAULT_THRESHOLDS.complexity:g}, > {DEFAULT_THRESHOLDS.refactor_time:g} "
        f"days) for potential architectural redesign. Consider breaking these "
        f"{redesign} files into smaller, more manageable components.\n"
        f"Optimal zone centre: complexity {zone.complexity_center:g}, "
        f"{zone.time_center:g} days.\n"
        f"Suggested roadmap:\n{roadmap}",
    )


# ------------------------------------------------------------------
# export
# ------------------------------------------------------------------


def export(
    ctx: typer.Context,
    path: Path = typer.Argument(help="Destination CSV file"),
) -> None:
    """Write the dataset, with classification columns, to a CSV file."""
    records = _session(ctx).records
    labels = classify_frame(records_to_frame(records))
    written = save_records_csv(records, path, extra_columns=labels)
    success_panel(f"Wrote {len(records)} records to {written}")

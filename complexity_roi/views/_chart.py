"""Scatter-chart series for the refactor-time and churn views."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from complexity_roi.classification import (
    BUCKET_COLORS,
    DEFAULT_THRESHOLDS,
    AnalysisView,
    ChurnQuadrant,
    ComplexityBucket,
    QuadrantThresholds,
    RefactorQuadrant,
    churn_quadrant,
    complexity_bucket,
    refactor_quadrant,
)
from complexity_roi.dataset import FileRecord
from complexity_roi.exceptions import DataError
from complexity_roi.views._config import AXIS_PADDING


@dataclass(frozen=True)
class ScatterPoint:
    file_name: str
    x: float
    y: float
    quadrant: RefactorQuadrant | ChurnQuadrant


@dataclass(frozen=True)
class ScatterSeries:
    """Points of one complexity bucket, drawn in the bucket colour."""

    bucket: ComplexityBucket
    color: str
    points: tuple[ScatterPoint, ...]


def y_value(record: FileRecord, view: AnalysisView) -> float:
    """The y coordinate of *record* in *view*."""
    if view is AnalysisView.CHURN:
        return float(record.churn)
    return record.refactor_time_days


def view_quadrant(
    record: FileRecord,
    view: AnalysisView,
    thresholds: QuadrantThresholds = DEFAULT_THRESHOLDS,
) -> RefactorQuadrant | ChurnQuadrant:
    """Quadrant of *record* under the scheme matching *view*."""
    if view is AnalysisView.CHURN:
        return churn_quadrant(record.complexity, record.churn, thresholds)
    return refactor_quadrant(record.complexity, record.refactor_time_days, thresholds)


def build_scatter_series(
    records: Sequence[FileRecord],
    view: AnalysisView = AnalysisView.REFACTOR_TIME,
    thresholds: QuadrantThresholds = DEFAULT_THRESHOLDS,
) -> tuple[ScatterSeries, ...]:
    """Group records into one series per complexity bucket.

    All five buckets are returned, in ascending order, even when empty.
    Points keep the input order within a series.
    """
    grouped: dict[ComplexityBucket, list[ScatterPoint]] = {
        bucket: [] for bucket in ComplexityBucket
    }
    for record in records:
        grouped[complexity_bucket(record.complexity)].append(
            ScatterPoint(
                file_name=record.file_name,
                x=record.complexity,
                y=y_value(record, view),
                quadrant=view_quadrant(record, view, thresholds),
            )
        )
    return tuple(
        ScatterSeries(bucket=bucket, color=BUCKET_COLORS[bucket], points=tuple(points))
        for bucket, points in grouped.items()
    )


def group_by_quadrant(
    records: Sequence[FileRecord],
    view: AnalysisView = AnalysisView.REFACTOR_TIME,
    thresholds: QuadrantThresholds = DEFAULT_THRESHOLDS,
) -> dict[RefactorQuadrant | ChurnQuadrant, tuple[FileRecord, ...]]:
    """Records per quadrant of the scheme matching *view* (all four keys)."""
    quadrants = ChurnQuadrant if view is AnalysisView.CHURN else RefactorQuadrant
    grouped: dict[RefactorQuadrant | ChurnQuadrant, list[FileRecord]] = {
        q: [] for q in quadrants
    }
    for record in records:
        grouped[view_quadrant(record, view, thresholds)].append(record)
    return {q: tuple(members) for q, members in grouped.items()}


def axis_max(records: Sequence[FileRecord], view: AnalysisView) -> int:
    """Upper y-axis bound: the largest y value plus 10%, rounded up.

    Raises
    ------
    DataError
        If *records* is empty.
    """
    if len(records) == 0:
        raise DataError("axis_max requires at least one record")
    largest = max(y_value(r, view) for r in records)
    return math.ceil(largest * AXIS_PADDING)

"""Pure classification of file records into buckets, quadrants, and zones."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from complexity_roi.classification._config import (
    BUCKET_BREAKPOINTS,
    BUCKET_COLORS,
    CHURN_QUADRANT_COLORS,
    DEFAULT_OPTIMAL_ZONE,
    DEFAULT_THRESHOLDS,
    QUADRANT_COLORS,
    ChurnQuadrant,
    ComplexityBucket,
    OptimalZone,
    QuadrantThresholds,
    RefactorQuadrant,
)
from complexity_roi.dataset import FileRecord

_BUCKETS_ASCENDING: tuple[ComplexityBucket, ...] = (
    ComplexityBucket.VERY_LOW,
    ComplexityBucket.LOW,
    ComplexityBucket.MEDIUM,
    ComplexityBucket.MODERATELY_HIGH,
    ComplexityBucket.HIGH,
)


def complexity_bucket(complexity: float) -> ComplexityBucket:
    """Bucket *complexity*: <20, [20,40), [40,60), [60,80), >=80."""
    for bucket, upper in zip(_BUCKETS_ASCENDING, BUCKET_BREAKPOINTS):
        if complexity < upper:
            return bucket
    return ComplexityBucket.HIGH


def refactor_quadrant(
    complexity: float,
    refactor_time_days: float,
    thresholds: QuadrantThresholds = DEFAULT_THRESHOLDS,
) -> RefactorQuadrant:
    """Place a file in the refactor-time ROI quadrants.

    Values equal to a threshold fall on the low side, so
    ``(50, 7)`` is low-hanging fruit.
    """
    cheap = refactor_time_days <= thresholds.refactor_time
    if complexity <= thresholds.complexity:
        return (
            RefactorQuadrant.LOW_HANGING_FRUIT
            if cheap
            else RefactorQuadrant.WORTH_EXPLORING
        )
    return (
        RefactorQuadrant.STRATEGIC_OPPORTUNITY
        if cheap
        else RefactorQuadrant.HIGH_COMPLEXITY
    )


def churn_quadrant(
    complexity: float,
    churn: float,
    thresholds: QuadrantThresholds = DEFAULT_THRESHOLDS,
) -> ChurnQuadrant:
    """Place a file in the churn ROI quadrants."""
    frequent = churn > thresholds.churn
    if complexity <= thresholds.complexity:
        return ChurnQuadrant.LOWER_ROI if frequent else ChurnQuadrant.STABLE
    return (
        ChurnQuadrant.REFACTOR_REQUIRED if frequent else ChurnQuadrant.LOWER_PRIORITY
    )


def is_in_optimal_zone(
    complexity: float,
    refactor_time_days: float,
    zone: OptimalZone = DEFAULT_OPTIMAL_ZONE,
) -> bool:
    """Whether the point lies inside the optimal investment zone (inclusive)."""
    return (
        zone.complexity_min <= complexity <= zone.complexity_max
        and zone.time_min <= refactor_time_days <= zone.time_max
    )


def complexity_color(complexity: float) -> str:
    """Hex colour of a scatter point."""
    return BUCKET_COLORS[complexity_bucket(complexity)]


def badge_color(complexity: float) -> str:
    """Rich style for a complexity badge."""
    return f"bold white on {complexity_color(complexity)}"


def quadrant_badge_color(quadrant: RefactorQuadrant | ChurnQuadrant) -> str:
    """Rich style for a quadrant badge."""
    if isinstance(quadrant, RefactorQuadrant):
        text, background = QUADRANT_COLORS[quadrant]
    else:
        text, background = CHURN_QUADRANT_COLORS[quadrant]
    return f"{text} on {background}"


@dataclass(frozen=True)
class RecordClassification:
    """Every label the surfaces display for one record."""

    file_name: str
    bucket: ComplexityBucket
    refactor_quadrant: RefactorQuadrant
    churn_quadrant: ChurnQuadrant
    in_optimal_zone: bool
    color: str


def classify_record(
    record: FileRecord,
    thresholds: QuadrantThresholds = DEFAULT_THRESHOLDS,
    zone: OptimalZone = DEFAULT_OPTIMAL_ZONE,
) -> RecordClassification:
    """Classify a single record."""
    return RecordClassification(
        file_name=record.file_name,
        bucket=complexity_bucket(record.complexity),
        refactor_quadrant=refactor_quadrant(
            record.complexity, record.refactor_time_days, thresholds
        ),
        churn_quadrant=churn_quadrant(record.complexity, record.churn, thresholds),
        in_optimal_zone=is_in_optimal_zone(
            record.complexity, record.refactor_time_days, zone
        ),
        color=complexity_color(record.complexity),
    )


def classify_frame(
    frame: pd.DataFrame,
    thresholds: QuadrantThresholds = DEFAULT_THRESHOLDS,
    zone: OptimalZone = DEFAULT_OPTIMAL_ZONE,
) -> pd.DataFrame:
    """Label columns for a record frame.

    Parameters
    ----------
    frame : pd.DataFrame
        Frame with ``complexity``, ``refactorTimeDays`` and ``churn``
        columns, as produced by
        :func:`~complexity_roi.dataset.records_to_frame`.
    thresholds : QuadrantThresholds
        Quadrant split points.
    zone : OptimalZone
        Optimal investment zone.

    Returns
    -------
    pd.DataFrame
        Same index as *frame*, with ``bucket``, ``refactorQuadrant``,
        ``churnQuadrant`` and ``inOptimalZone`` columns holding enum
        values (strings) and booleans.
    """
    rows = [
        {
            "bucket": complexity_bucket(c).value,
            "refactorQuadrant": refactor_quadrant(c, t, thresholds).value,
            "churnQuadrant": churn_quadrant(c, ch, thresholds).value,
            "inOptimalZone": is_in_optimal_zone(c, t, zone),
        }
        for c, t, ch in zip(
            frame["complexity"], frame["refactorTimeDays"], frame["churn"]
        )
    ]
    return pd.DataFrame(
        rows,
        index=frame.index,
        columns=["bucket", "refactorQuadrant", "churnQuadrant", "inOptimalZone"],
    )

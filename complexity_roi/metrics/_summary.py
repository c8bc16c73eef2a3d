"""Summary statistics over a file-record dataset."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from complexity_roi.classification import (
    DEFAULT_OPTIMAL_ZONE,
    DEFAULT_THRESHOLDS,
    ChurnQuadrant,
    ComplexityBucket,
    OptimalZone,
    QuadrantThresholds,
    RefactorQuadrant,
    churn_quadrant,
    complexity_bucket,
    is_in_optimal_zone,
    refactor_quadrant,
)
from complexity_roi.dataset import FileRecord
from complexity_roi.exceptions import DataError

DAYS_PER_MONTH = 30


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def percentage(count: int, total: int) -> int:
    """``round(count / total * 100)``; 0 when *total* is 0."""
    if total == 0:
        return 0
    return round_half_up(count / total * 100)


def _require_records(records: Sequence[FileRecord], caller: str) -> None:
    if len(records) == 0:
        raise DataError(f"{caller} requires at least one record")


# ---------------------------------------------------------------------------
# Result containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BucketDistribution:
    """File counts and independently rounded percentages per bucket.

    Percentages are rounded one bucket at a time and need not sum to 100.
    """

    counts: dict[ComplexityBucket, int]
    percentages: dict[ComplexityBucket, int]


@dataclass(frozen=True)
class ComplexityStats:
    mean: float
    median: float


@dataclass(frozen=True)
class RefactorTimeStats:
    """Effort totals; months are ``total_days / 30``."""

    total_days: float
    average_days: float
    total_months: float


@dataclass(frozen=True)
class OptimalZoneStats:
    count: int
    percentage: int
    total_days: float
    average_days: float


@dataclass(frozen=True)
class MetricsSummary:
    """Everything the metrics-summary surface displays."""

    total_files: int
    distribution: BucketDistribution
    complexity: ComplexityStats
    refactor_time: RefactorTimeStats
    quadrants: dict[RefactorQuadrant, int]
    churn_quadrants: dict[ChurnQuadrant, int]
    optimal_zone: OptimalZoneStats

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable dict keyed by enum values."""
        return {
            "total_files": self.total_files,
            "distribution": {
                b.value: self.distribution.percentages[b] for b in ComplexityBucket
            },
            "counts": {b.value: self.distribution.counts[b] for b in ComplexityBucket},
            "complexity": {
                "mean": self.complexity.mean,
                "median": self.complexity.median,
            },
            "refactor_time": {
                "total_days": self.refactor_time.total_days,
                "average_days": self.refactor_time.average_days,
                "total_months": self.refactor_time.total_months,
            },
            "quadrants": {q.value: n for q, n in self.quadrants.items()},
            "churn_quadrants": {q.value: n for q, n in self.churn_quadrants.items()},
            "optimal_zone": {
                "count": self.optimal_zone.count,
                "percentage": self.optimal_zone.percentage,
                "total_days": self.optimal_zone.total_days,
                "average_days": self.optimal_zone.average_days,
            },
        }


# ---------------------------------------------------------------------------
# Aggregations
# ---------------------------------------------------------------------------


def compute_bucket_distribution(records: Sequence[FileRecord]) -> BucketDistribution:
    """Count files per complexity bucket and convert to percentages."""
    counts = {bucket: 0 for bucket in ComplexityBucket}
    for record in records:
        counts[complexity_bucket(record.complexity)] += 1
    total = len(records)
    percentages = {bucket: percentage(n, total) for bucket, n in counts.items()}
    return BucketDistribution(counts=counts, percentages=percentages)


def compute_complexity_stats(records: Sequence[FileRecord]) -> ComplexityStats:
    """Mean and median complexity, rounded to 2 decimals.

    The median of an even-sized sample is the average of the two middle
    values.

    Raises
    ------
    DataError
        If *records* is empty.
    """
    _require_records(records, "compute_complexity_stats")
    values = np.array([r.complexity for r in records], dtype=np.float64)
    return ComplexityStats(
        mean=round(float(np.mean(values)), 2),
        median=round(float(np.median(values)), 2),
    )


def compute_refactor_time_stats(records: Sequence[FileRecord]) -> RefactorTimeStats:
    """Total (1 decimal), average and month-equivalent (2 decimals) effort.

    Raises
    ------
    DataError
        If *records* is empty.
    """
    _require_records(records, "compute_refactor_time_stats")
    total = round(float(np.sum([r.refactor_time_days for r in records])), 1)
    return RefactorTimeStats(
        total_days=total,
        average_days=round(total / len(records), 2),
        total_months=round(total / DAYS_PER_MONTH, 2),
    )


def compute_quadrant_counts(
    records: Sequence[FileRecord],
    thresholds: QuadrantThresholds = DEFAULT_THRESHOLDS,
) -> dict[RefactorQuadrant, int]:
    """Number of files in each refactor-time quadrant (all four present)."""
    counts = {quadrant: 0 for quadrant in RefactorQuadrant}
    for record in records:
        quadrant = refactor_quadrant(
            record.complexity, record.refactor_time_days, thresholds
        )
        counts[quadrant] += 1
    return counts


def compute_churn_quadrant_counts(
    records: Sequence[FileRecord],
    thresholds: QuadrantThresholds = DEFAULT_THRESHOLDS,
) -> dict[ChurnQuadrant, int]:
    """Number of files in each churn quadrant (all four present)."""
    counts = {quadrant: 0 for quadrant in ChurnQuadrant}
    for record in records:
        counts[churn_quadrant(record.complexity, record.churn, thresholds)] += 1
    return counts


def compute_optimal_zone_stats(
    records: Sequence[FileRecord],
    zone: OptimalZone = DEFAULT_OPTIMAL_ZONE,
) -> OptimalZoneStats:
    """Size and effort of the optimal investment zone.

    The average is 0 when no file falls inside the zone.
    """
    inside = [
        r.refactor_time_days
        for r in records
        if is_in_optimal_zone(r.complexity, r.refactor_time_days, zone)
    ]
    count = len(inside)
    total = round(float(np.sum(inside)), 1) if inside else 0.0
    return OptimalZoneStats(
        count=count,
        percentage=percentage(count, len(records)),
        total_days=total,
        average_days=round(total / count, 2) if count > 0 else 0.0,
    )


def compute_metrics_summary(
    records: Sequence[FileRecord],
    thresholds: QuadrantThresholds = DEFAULT_THRESHOLDS,
    zone: OptimalZone = DEFAULT_OPTIMAL_ZONE,
) -> MetricsSummary:
    """Compute every summary statistic for *records*.

    Parameters
    ----------
    records : Sequence[FileRecord]
        Dataset snapshot.  Not modified.
    thresholds : QuadrantThresholds
        Quadrant split points.
    zone : OptimalZone
        Optimal investment zone.

    Returns
    -------
    MetricsSummary
        See :class:`MetricsSummary` for field descriptions.

    Raises
    ------
    DataError
        If *records* is empty.
    """
    _require_records(records, "compute_metrics_summary")
    return MetricsSummary(
        total_files=len(records),
        distribution=compute_bucket_distribution(records),
        complexity=compute_complexity_stats(records),
        refactor_time=compute_refactor_time_stats(records),
        quadrants=compute_quadrant_counts(records, thresholds),
        churn_quadrants=compute_churn_quadrant_counts(records, thresholds),
        optimal_zone=compute_optimal_zone_stats(records, zone),
    )

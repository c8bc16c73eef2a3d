"""Dataset summary statistics for the metrics surface."""

from complexity_roi.metrics._summary import (
    DAYS_PER_MONTH,
    BucketDistribution,
    ComplexityStats,
    MetricsSummary,
    OptimalZoneStats,
    RefactorTimeStats,
    compute_bucket_distribution,
    compute_churn_quadrant_counts,
    compute_complexity_stats,
    compute_metrics_summary,
    compute_optimal_zone_stats,
    compute_quadrant_counts,
    compute_refactor_time_stats,
    percentage,
    round_half_up,
)

__all__ = [
    "BucketDistribution",
    "ComplexityStats",
    "DAYS_PER_MONTH",
    "MetricsSummary",
    "OptimalZoneStats",
    "RefactorTimeStats",
    "compute_bucket_distribution",
    "compute_churn_quadrant_counts",
    "compute_complexity_stats",
    "compute_metrics_summary",
    "compute_optimal_zone_stats",
    "compute_quadrant_counts",
    "compute_refactor_time_stats",
    "percentage",
    "round_half_up",
]

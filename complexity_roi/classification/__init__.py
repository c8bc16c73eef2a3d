"""Complexity buckets, ROI quadrants, and the optimal investment zone."""

from complexity_roi.classification._classifier import (
    RecordClassification,
    badge_color,
    churn_quadrant,
    classify_frame,
    classify_record,
    complexity_bucket,
    complexity_color,
    is_in_optimal_zone,
    quadrant_badge_color,
    refactor_quadrant,
)
from complexity_roi.classification._config import (
    BUCKET_BREAKPOINTS,
    BUCKET_COLORS,
    BUCKET_LABELS,
    CHURN_QUADRANT_COLORS,
    CHURN_QUADRANT_LABELS,
    DEFAULT_OPTIMAL_ZONE,
    DEFAULT_THRESHOLDS,
    QUADRANT_COLORS,
    QUADRANT_LABELS,
    ROADMAP_ORDER,
    AnalysisView,
    ChurnQuadrant,
    ComplexityBucket,
    OptimalZone,
    QuadrantThresholds,
    RefactorQuadrant,
)

__all__ = [
    "AnalysisView",
    "BUCKET_BREAKPOINTS",
    "BUCKET_COLORS",
    "BUCKET_LABELS",
    "CHURN_QUADRANT_COLORS",
    "CHURN_QUADRANT_LABELS",
    "ChurnQuadrant",
    "ComplexityBucket",
    "DEFAULT_OPTIMAL_ZONE",
    "DEFAULT_THRESHOLDS",
    "OptimalZone",
    "QUADRANT_COLORS",
    "QUADRANT_LABELS",
    "QuadrantThresholds",
    "ROADMAP_ORDER",
    "RecordClassification",
    "RefactorQuadrant",
    "badge_color",
    "churn_quadrant",
    "classify_frame",
    "classify_record",
    "complexity_bucket",
    "complexity_color",
    "is_in_optimal_zone",
    "quadrant_badge_color",
    "refactor_quadrant",
]

"""Labels, thresholds, and colour tables shared by every surface."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from complexity_roi.exceptions import ConfigurationError

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ComplexityBucket(str, Enum):
    """Complexity tier with fixed breakpoints at 20, 40, 60 and 80."""

    VERY_LOW = "very_low"
    LOW = "low"
    MEDIUM = "medium"
    MODERATELY_HIGH = "moderately_high"
    HIGH = "high"

    @property
    def label(self) -> str:
        return BUCKET_LABELS[self]


class RefactorQuadrant(str, Enum):
    """ROI quadrant of the (complexity, refactor time) plane."""

    LOW_HANGING_FRUIT = "low_hanging_fruit"
    WORTH_EXPLORING = "worth_exploring"
    HIGH_COMPLEXITY = "high_complexity"
    STRATEGIC_OPPORTUNITY = "strategic_opportunity"

    @property
    def label(self) -> str:
        return QUADRANT_LABELS[self]


class ChurnQuadrant(str, Enum):
    """ROI quadrant of the (complexity, churn) plane."""

    LOWER_ROI = "lower_roi"
    STABLE = "stable"
    LOWER_PRIORITY = "lower_priority"
    REFACTOR_REQUIRED = "refactor_required"

    @property
    def label(self) -> str:
        return CHURN_QUADRANT_LABELS[self]


class AnalysisView(str, Enum):
    """Which metric is plotted against complexity."""

    REFACTOR_TIME = "refactor_time"
    CHURN = "churn"


# ---------------------------------------------------------------------------
# Mapping constants
# ---------------------------------------------------------------------------

# Lower bounds of LOW, MEDIUM, MODERATELY_HIGH and HIGH
BUCKET_BREAKPOINTS: tuple[float, float, float, float] = (20.0, 40.0, 60.0, 80.0)

BUCKET_LABELS: dict[ComplexityBucket, str] = {
    ComplexityBucket.VERY_LOW: "Very Low",
    ComplexityBucket.LOW: "Low",
    ComplexityBucket.MEDIUM: "Medium",
    ComplexityBucket.MODERATELY_HIGH: "Moderately High",
    ComplexityBucket.HIGH: "High",
}

QUADRANT_LABELS: dict[RefactorQuadrant, str] = {
    RefactorQuadrant.LOW_HANGING_FRUIT: "Low-Hanging Fruit",
    RefactorQuadrant.WORTH_EXPLORING: "Worth Exploring",
    RefactorQuadrant.HIGH_COMPLEXITY: "High Complexity",
    RefactorQuadrant.STRATEGIC_OPPORTUNITY: "Strategic Opportunity",
}

CHURN_QUADRANT_LABELS: dict[ChurnQuadrant, str] = {
    ChurnQuadrant.LOWER_ROI: "Lower ROI",
    ChurnQuadrant.STABLE: "Stable",
    ChurnQuadrant.LOWER_PRIORITY: "Lower Priority",
    ChurnQuadrant.REFACTOR_REQUIRED: "Refactor Required",
}

# Suggested order for a phased modernisation roadmap
ROADMAP_ORDER: tuple[RefactorQuadrant, ...] = (
    RefactorQuadrant.LOW_HANGING_FRUIT,
    RefactorQuadrant.STRATEGIC_OPPORTUNITY,
    RefactorQuadrant.WORTH_EXPLORING,
    RefactorQuadrant.HIGH_COMPLEXITY,
)

BUCKET_COLORS: dict[ComplexityBucket, str] = {
    ComplexityBucket.VERY_LOW: "#00AA57",
    ComplexityBucket.LOW: "#CAE46A",
    ComplexityBucket.MEDIUM: "#FFC010",
    ComplexityBucket.MODERATELY_HIGH: "#D17600",
    ComplexityBucket.HIGH: "#970606",
}

# (text, background) pairs
QUADRANT_COLORS: dict[RefactorQuadrant, tuple[str, str]] = {
    RefactorQuadrant.LOW_HANGING_FRUIT: ("#023430", "#E0FFE0"),
    RefactorQuadrant.WORTH_EXPLORING: ("#944F01", "#FFFBD0"),
    RefactorQuadrant.HIGH_COMPLEXITY: ("#970606", "#FFE5E5"),
    RefactorQuadrant.STRATEGIC_OPPORTUNITY: ("#2D0B59", "#F0E8FF"),
}

CHURN_QUADRANT_COLORS: dict[ChurnQuadrant, tuple[str, str]] = {
    ChurnQuadrant.LOWER_ROI: ("#944F01", "#FFE8D0"),
    ChurnQuadrant.STABLE: ("#023430", "#E0FFE0"),
    ChurnQuadrant.LOWER_PRIORITY: ("#01579B", "#E0F0FF"),
    ChurnQuadrant.REFACTOR_REQUIRED: ("#970606", "#FFE5E5"),
}


# ---------------------------------------------------------------------------
# Frozen dataclass configs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class QuadrantThresholds:
    """Axis split points for both ROI quadrant schemes.

    A value equal to a threshold belongs to the lower side.

    Parameters
    ----------
    complexity : float
        X-axis split.
    refactor_time : float
        Y-axis split, in days, for the refactor-time scheme.
    churn : float
        Y-axis split, in changes, for the churn scheme.
    """

    complexity: float = 50.0
    refactor_time: float = 7.0
    churn: float = 10.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.complexity <= 100.0:
            raise ConfigurationError(
                f"complexity threshold must be in [0, 100], got {self.complexity}"
            )
        if self.refactor_time <= 0.0:
            raise ConfigurationError(
                f"refactor_time threshold must be > 0, got {self.refactor_time}"
            )
        if self.churn <= 0.0:
            raise ConfigurationError(f"churn threshold must be > 0, got {self.churn}")


@dataclass(frozen=True)
class OptimalZone:
    """Inclusive rectangle of the (complexity, refactor time) plane.

    Parameters
    ----------
    complexity_min, complexity_max : float
        Complexity range.
    time_min, time_max : float
        Refactor-time range in days.
    """

    complexity_min: float = 20.0
    complexity_max: float = 50.0
    time_min: float = 1.0
    time_max: float = 7.0

    def __post_init__(self) -> None:
        if self.complexity_min > self.complexity_max:
            raise ConfigurationError(
                f"complexity_min ({self.complexity_min}) exceeds "
                f"complexity_max ({self.complexity_max})"
            )
        if self.time_min > self.time_max:
            raise ConfigurationError(
                f"time_min ({self.time_min}) exceeds time_max ({self.time_max})"
            )

    @property
    def complexity_center(self) -> float:
        return (self.complexity_min + self.complexity_max) / 2

    @property
    def time_center(self) -> float:
        return (self.time_min + self.time_max) / 2


DEFAULT_THRESHOLDS = QuadrantThresholds()
DEFAULT_OPTIMAL_ZONE = OptimalZone()

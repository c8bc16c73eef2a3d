"""Configuration for table queries and chart construction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from complexity_roi.classification import ComplexityBucket, RefactorQuadrant
from complexity_roi.exceptions import ConfigurationError


class SortField(str, Enum):
    """Sortable table columns, valued by their wire names."""

    FILE_NAME = "fileName"
    COMPLEXITY = "complexity"
    REFACTOR_TIME_DAYS = "refactorTimeDays"
    LINES_OF_CODE = "linesOfCode"
    LAST_MODIFIED = "lastModified"
    CHURN = "churn"


SORT_ATTRIBUTES: dict[SortField, str] = {
    SortField.FILE_NAME: "file_name",
    SortField.COMPLEXITY: "complexity",
    SortField.REFACTOR_TIME_DAYS: "refactor_time_days",
    SortField.LINES_OF_CODE: "lines_of_code",
    SortField.LAST_MODIFIED: "last_modified",
    SortField.CHURN: "churn",
}

# Decision boundary drawn over the churn view, as (complexity, churn) points
CHURN_COMPLEXITY_CURVE: tuple[tuple[float, float], ...] = (
    (5, 25),
    (10, 20),
    (15, 16),
    (25, 12),
    (35, 9),
    (50, 7),
    (65, 5),
    (80, 4),
    (95, 3),
)

# Headroom above the largest plotted value
AXIS_PADDING = 1.1


@dataclass(frozen=True)
class TableQuery:
    """Immutable description of one table view.

    Parameters
    ----------
    search : str
        Case-insensitive substring matched against file names.  Empty
        matches everything.
    bucket : ComplexityBucket or None
        Keep only files in this complexity bucket.
    quadrant : RefactorQuadrant or None
        Keep only files in this refactor-time quadrant.
    sort_field : SortField
        Column to sort by.
    descending : bool
        Sort direction.
    page : int
        1-based page number.  Clamped to the available pages.
    rows_per_page : int
        Page size.
    """

    search: str = ""
    bucket: ComplexityBucket | None = None
    quadrant: RefactorQuadrant | None = None
    sort_field: SortField = SortField.COMPLEXITY
    descending: bool = True
    page: int = 1
    rows_per_page: int = 10

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ConfigurationError(f"page must be >= 1, got {self.page}")
        if self.rows_per_page < 1:
            raise ConfigurationError(
                f"rows_per_page must be >= 1, got {self.rows_per_page}"
            )

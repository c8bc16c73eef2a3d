"""File record model and the hand-authored reference records."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from numbers import Integral, Real
from typing import Any

from complexity_roi.exceptions import RecordValidationError

DATE_FORMAT = "%Y-%m-%d"

# Python attribute name -> wire (column) name used by presentation surfaces
FIELD_NAMES: dict[str, str] = {
    "file_name": "fileName",
    "complexity": "complexity",
    "refactor_time_days": "refactorTimeDays",
    "lines_of_code": "linesOfCode",
    "last_modified": "lastModified",
    "churn": "churn",
}


@dataclass(frozen=True)
class FileRecord:
    """A single source file scored for modernisation.

    Records are validated on construction: numeric fields must be finite
    and inside their documented ranges, otherwise
    :class:`~complexity_roi.exceptions.RecordValidationError` is raised.
    Validation never clamps.

    Parameters
    ----------
    file_name : str
        File name including extension.
    complexity : float
        Synthetic complexity score in [0, 100].
    refactor_time_days : float
        Estimated refactor effort in days, strictly positive.
    lines_of_code : int
        Line count, at least 1.
    last_modified : str
        Date of last modification, ``YYYY-MM-DD``.
    churn : int
        Number of historical changes, at least 1.
    """

    file_name: str
    complexity: float
    refactor_time_days: float
    lines_of_code: int
    last_modified: str
    churn: int

    def __post_init__(self) -> None:
        validate_record(self)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase mapping consumed by presentation surfaces."""
        return {wire: getattr(self, attr) for attr, wire in FIELD_NAMES.items()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FileRecord:
        """Build a record from a camelCase (or snake_case) mapping.

        Integral floats such as ``12.0`` are accepted for the integer
        fields; anything else is left for validation to reject.
        """
        values: dict[str, Any] = {}
        for attr, wire in FIELD_NAMES.items():
            if wire in data:
                values[attr] = data[wire]
            elif attr in data:
                values[attr] = data[attr]
            else:
                raise RecordValidationError(wire, "missing field")

        for attr in ("lines_of_code", "churn"):
            value = values[attr]
            if isinstance(value, float) and value.is_integer():
                values[attr] = int(value)
            elif isinstance(value, Integral) and not isinstance(value, bool):
                values[attr] = int(value)

        for attr in ("complexity", "refactor_time_days"):
            value = values[attr]
            if isinstance(value, Real) and not isinstance(value, bool):
                values[attr] = float(value)

        return cls(**values)


def _require_number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise RecordValidationError(name, f"expected a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise RecordValidationError(name, f"must be finite, got {value}")
    return float(value)


def _require_count(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise RecordValidationError(name, f"expected an integer, got {value!r}")
    if value < 1:
        raise RecordValidationError(name, f"must be >= 1, got {value}")
    return int(value)


def validate_record(record: FileRecord) -> None:
    """Check that every field of *record* is well-formed.

    Raises
    ------
    RecordValidationError
        On the first field that fails.
    """
    if not isinstance(record.file_name, str) or not record.file_name.strip():
        raise RecordValidationError("fileName", "must be a non-empty string")

    complexity = _require_number("complexity", record.complexity)
    if not 0.0 <= complexity <= 100.0:
        raise RecordValidationError(
            "complexity", f"must be in [0, 100], got {complexity}"
        )

    refactor_time = _require_number("refactorTimeDays", record.refactor_time_days)
    if refactor_time <= 0.0:
        raise RecordValidationError(
            "refactorTimeDays", f"must be > 0, got {refactor_time}"
        )

    _require_count("linesOfCode", record.lines_of_code)
    _require_count("churn", record.churn)

    if not isinstance(record.last_modified, str):
        raise RecordValidationError("lastModified", "must be a YYYY-MM-DD string")
    try:
        datetime.strptime(record.last_modified, DATE_FORMAT)
    except ValueError as exc:
        raise RecordValidationError(
            "lastModified", f"not a YYYY-MM-DD date: {record.last_modified!r}"
        ) from exc


# ---------------------------------------------------------------------------
# Reference records
# ---------------------------------------------------------------------------

BASE_RECORDS: tuple[FileRecord, ...] = (
    # High complexity (80-100)
    FileRecord("auth-service.js", 90, 14, 730, "2023-08-12", 18),
    FileRecord("payment-processor.ts", 85, 12, 680, "2023-07-18", 15),
    FileRecord("security-middleware.js", 80, 10, 520, "2023-06-22", 12),
    # Moderately high complexity (60-79)
    FileRecord("data-aggregator.js", 75, 9, 460, "2023-09-02", 14),
    FileRecord("legacy-adapter.ts", 70, 8, 410, "2023-08-05", 8),
    FileRecord("analytics-engine.js", 65, 7, 390, "2023-07-28", 10),
    FileRecord("realtime-processor.js", 60, 6, 350, "2023-10-04", 9),
    # Medium complexity (40-59)
    FileRecord("dashboard.jsx", 55, 5, 310, "2023-09-05", 11),
    FileRecord("api-client.js", 50, 4.5, 280, "2023-08-29", 8),
    FileRecord("form-validation.js", 45, 4, 245, "2023-09-18", 7),
    FileRecord("query-builder.ts", 40, 3.5, 220, "2023-10-12", 5),
    # Low complexity (20-39)
    FileRecord("ui-components.js", 35, 3, 195, "2023-10-01", 16),
    FileRecord("notification-system.js", 30, 2.5, 175, "2023-09-25", 6),
    FileRecord("utility-helpers.ts", 25, 2, 150, "2023-07-12", 13),
    FileRecord("theme-provider.jsx", 20, 1.5, 120, "2023-08-17", 9),
    # Very low complexity (0-19)
    FileRecord("data-formatter.js", 15, 1, 90, "2023-09-20", 7),
    FileRecord("error-logger.js", 10, 0.5, 65, "2023-08-08", 3),
    FileRecord("config-loader.js", 5, 0.2, 40, "2023-10-05", 5),
)

EDGE_CASE_RECORDS: tuple[FileRecord, ...] = (
    # High complexity, low refactor time
    FileRecord("well-documented-complex.ts", 88, 3.2, 650, "2023-09-12", 4),
    # Low complexity, high refactor time
    FileRecord("spaghetti-simple.js", 22, 9.5, 180, "2023-07-05", 21),
    # Legacy monolith
    FileRecord("legacy-monolith.js", 98, 22, 2100, "2023-03-10", 3),
    # Tiny utility
    FileRecord("tiny-utility.ts", 2, 0.1, 12, "2023-10-15", 25),
)

"""Synthetic code-complexity ROI analysis built on numpy and pandas.

Modules
-------
dataset
    File records, hand-authored base and edge-case records, the
    randomised variation generator, and validated import/export of
    record collections.
classification
    Complexity buckets, refactor-time and churn ROI quadrants, the
    optimal investment zone, and the single shared set of thresholds
    every surface classifies with.
metrics
    Summary statistics over a dataset: bucket distribution, mean and
    median complexity, refactor-time totals, quadrant and optimal-zone
    counts.
views
    Table queries (search, filter, sort, paginate) and scatter-chart
    series built from the same classifier.
"""

import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

logging.getLogger("complexity_roi").addHandler(logging.NullHandler())

from complexity_roi.exceptions import (
    ComplexityROIError,
    ConfigurationError,
    DataError,
    RecordValidationError,
)

__all__ = [
    "ComplexityROIError",
    "ConfigurationError",
    "DataError",
    "RecordValidationError",
]

try:
    __version__ = _pkg_version("complexity-roi")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"

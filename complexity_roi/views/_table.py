"""Search, filter, sort, and paginate records for the table surface."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from operator import attrgetter
from typing import Any

from complexity_roi.classification import (
    DEFAULT_THRESHOLDS,
    ComplexityBucket,
    QuadrantThresholds,
    RefactorQuadrant,
    complexity_bucket,
    refactor_quadrant,
)
from complexity_roi.dataset import FileRecord
from complexity_roi.exceptions import ConfigurationError
from complexity_roi.views._config import SORT_ATTRIBUTES, SortField, TableQuery


@dataclass(frozen=True)
class TablePage:
    """One page of table rows plus the "showing X to Y of Z" figures.

    ``first_row`` and ``last_row`` are 1-based and both 0 when nothing
    matched.
    """

    rows: tuple[FileRecord, ...]
    page: int
    total_pages: int
    total_rows: int
    first_row: int
    last_row: int


def filter_records(
    records: Sequence[FileRecord],
    search: str = "",
    bucket: ComplexityBucket | None = None,
    quadrant: RefactorQuadrant | None = None,
    thresholds: QuadrantThresholds = DEFAULT_THRESHOLDS,
) -> list[FileRecord]:
    """Records matching every given criterion, in input order."""
    needle = search.lower()
    matched = []
    for record in records:
        if needle and needle not in record.file_name.lower():
            continue
        if bucket is not None and complexity_bucket(record.complexity) != bucket:
            continue
        if quadrant is not None and refactor_quadrant(
            record.complexity, record.refactor_time_days, thresholds
        ) != quadrant:
            continue
        matched.append(record)
    return matched


def sort_records(
    records: Sequence[FileRecord],
    field: SortField = SortField.COMPLEXITY,
    descending: bool = True,
) -> list[FileRecord]:
    """Stable sort; file names compare case-insensitively."""
    key: Callable[[FileRecord], Any]
    if field is SortField.FILE_NAME:
        key = lambda record: record.file_name.casefold()  # noqa: E731
    else:
        key = attrgetter(SORT_ATTRIBUTES[field])
    return sorted(records, key=key, reverse=descending)


def paginate(
    records: Sequence[FileRecord],
    page: int = 1,
    rows_per_page: int = 10,
) -> TablePage:
    """Slice out one page, clamping *page* into ``[1, total_pages]``.

    Raises
    ------
    ConfigurationError
        If *rows_per_page* is less than 1.
    """
    if rows_per_page < 1:
        raise ConfigurationError(f"rows_per_page must be >= 1, got {rows_per_page}")
    total_rows = len(records)
    total_pages = math.ceil(total_rows / rows_per_page)
    page = min(max(page, 1), max(total_pages, 1))
    start = (page - 1) * rows_per_page
    rows = tuple(records[start : start + rows_per_page])
    return TablePage(
        rows=rows,
        page=page,
        total_pages=total_pages,
        total_rows=total_rows,
        first_row=start + 1 if rows else 0,
        last_row=start + len(rows),
    )


def run_table_query(
    records: Sequence[FileRecord],
    query: TableQuery | None = None,
    thresholds: QuadrantThresholds = DEFAULT_THRESHOLDS,
) -> TablePage:
    """Filter, sort, then paginate *records* according to *query*."""
    if query is None:
        query = TableQuery()
    matched = filter_records(
        records,
        search=query.search,
        bucket=query.bucket,
        quadrant=query.quadrant,
        thresholds=thresholds,
    )
    ordered = sort_records(matched, query.sort_field, query.descending)
    return paginate(ordered, query.page, query.rows_per_page)

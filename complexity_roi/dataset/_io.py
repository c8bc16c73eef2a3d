"""Conversion between record collections and pandas DataFrames."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from complexity_roi.dataset._records import FIELD_NAMES, FileRecord
from complexity_roi.exceptions import DataError, RecordValidationError

logger = logging.getLogger(__name__)

COLUMNS: tuple[str, ...] = tuple(FIELD_NAMES.values())


def records_to_frame(records: Sequence[FileRecord]) -> pd.DataFrame:
    """Tabulate *records* with the camelCase column names.

    Row order follows *records*; the index is a plain ``RangeIndex``.
    """
    frame = pd.DataFrame([r.to_dict() for r in records], columns=list(COLUMNS))
    return frame.astype(
        {
            "complexity": "float64",
            "refactorTimeDays": "float64",
            "linesOfCode": "int64",
            "churn": "int64",
        }
    )


def records_from_frame(frame: pd.DataFrame) -> tuple[FileRecord, ...]:
    """Validate and convert a DataFrame into records.

    Extra columns are ignored.  The first invalid row aborts the whole
    conversion; values are never clamped or repaired.

    Raises
    ------
    DataError
        If a required column is missing.
    RecordValidationError
        If any row fails record validation.  The message names the
        zero-based row position.
    """
    if not isinstance(frame, pd.DataFrame):
        raise DataError(
            f"records_from_frame requires a pandas DataFrame, got {type(frame).__name__}"
        )
    missing = [col for col in COLUMNS if col not in frame.columns]
    if missing:
        raise DataError(f"missing required columns: {', '.join(missing)}")

    records: list[FileRecord] = []
    for pos, row in enumerate(frame[list(COLUMNS)].itertuples(index=False, name=None)):
        data = dict(zip(COLUMNS, row))
        if not isinstance(data["lastModified"], str) and pd.notna(data["lastModified"]):
            data["lastModified"] = str(data["lastModified"])
        try:
            records.append(FileRecord.from_dict(data))
        except RecordValidationError as exc:
            raise RecordValidationError(exc.field, f"row {pos}: {exc}") from exc
    return tuple(records)


def load_records_csv(path: str | Path) -> tuple[FileRecord, ...]:
    """Read and validate a CSV file written by :func:`save_records_csv`.

    Raises
    ------
    DataError
        If the file is missing, empty or not parsable as CSV.
    """
    path = Path(path)
    if not path.is_file():
        raise DataError(f"dataset file not found: {path}")
    try:
        frame = pd.read_csv(
            path,
            dtype={"fileName": str, "lastModified": str},
            float_precision="round_trip",
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise DataError(f"cannot parse {path}: {exc}") from exc
    records = records_from_frame(frame)
    logger.info("Loaded %d records from %s", len(records), path)
    return records


def save_records_csv(
    records: Sequence[FileRecord],
    path: str | Path,
    extra_columns: pd.DataFrame | None = None,
) -> Path:
    """Write *records* to CSV, optionally with extra (e.g. label) columns.

    *extra_columns* must have one row per record, in record order.
    """
    path = Path(path)
    frame = records_to_frame(records)
    if extra_columns is not None:
        if len(extra_columns) != len(frame):
            raise DataError(
                f"extra_columns has {len(extra_columns)} rows, expected {len(frame)}"
            )
        frame = pd.concat(
            [frame, extra_columns.reset_index(drop=True)], axis=1
        )
    frame.to_csv(path, index=False)
    logger.info("Wrote %d records to %s", len(frame), path)
    return path

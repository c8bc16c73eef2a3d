"""Tests for DataFrame and CSV conversion of record collections."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from complexity_roi import DataError, RecordValidationError
from complexity_roi.dataset import (
    COLUMNS,
    load_records_csv,
    records_from_frame,
    records_to_frame,
    save_records_csv,
)


class TestRecordsToFrame:
    def test_columns_and_dtypes(self, dataset) -> None:
        frame = records_to_frame(dataset)
        assert list(frame.columns) == list(COLUMNS)
        assert len(frame) == len(dataset)
        assert frame["complexity"].dtype == np.float64
        assert frame["churn"].dtype == np.int64
        assert frame["linesOfCode"].dtype == np.int64

    def test_row_order(self, dataset) -> None:
        frame = records_to_frame(dataset)
        assert frame["fileName"].tolist() == [r.file_name for r in dataset]

    def test_empty(self) -> None:
        frame = records_to_frame([])
        assert frame.empty
        assert list(frame.columns) == list(COLUMNS)


class TestRecordsFromFrame:
    def test_round_trip(self, dataset) -> None:
        assert records_from_frame(records_to_frame(dataset)) == dataset

    def test_extra_columns_ignored(self, dataset) -> None:
        frame = records_to_frame(dataset[:3]).assign(note="x")
        assert records_from_frame(frame) == dataset[:3]

    def test_missing_column(self, dataset) -> None:
        frame = records_to_frame(dataset).drop(columns=["churn"])
        with pytest.raises(DataError, match="churn"):
            records_from_frame(frame)

    def test_not_a_frame(self) -> None:
        with pytest.raises(DataError, match="DataFrame"):
            records_from_frame([{"fileName": "a.js"}])  # type: ignore[arg-type]

    def test_invalid_row_reports_position(self, dataset) -> None:
        frame = records_to_frame(dataset[:5])
        frame.loc[3, "complexity"] = 140.0
        with pytest.raises(RecordValidationError, match="row 3") as excinfo:
            records_from_frame(frame)
        assert excinfo.value.field == "complexity"

    def test_nan_rejected_not_clamped(self, dataset) -> None:
        frame = records_to_frame(dataset[:2])
        frame["refactorTimeDays"] = frame["refactorTimeDays"].astype("float64")
        frame.loc[0, "refactorTimeDays"] = np.nan
        with pytest.raises(RecordValidationError):
            records_from_frame(frame)


class TestCsv:
    def test_save_and_load(self, dataset, tmp_path) -> None:
        path = save_records_csv(dataset, tmp_path / "files.csv")
        assert path.exists()
        assert load_records_csv(path) == dataset

    def test_extra_columns_written(self, dataset, tmp_path) -> None:
        labels = pd.DataFrame({"tag": ["t"] * len(dataset)})
        path = save_records_csv(dataset, tmp_path / "files.csv", extra_columns=labels)
        frame = pd.read_csv(path)
        assert "tag" in frame.columns
        assert load_records_csv(path) == dataset

    def test_extra_columns_length_mismatch(self, dataset, tmp_path) -> None:
        labels = pd.DataFrame({"tag": ["t"]})
        with pytest.raises(DataError, match="rows"):
            save_records_csv(dataset, tmp_path / "files.csv", extra_columns=labels)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(DataError, match="not found"):
            load_records_csv(tmp_path / "nope.csv")

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.csv"
        path.write_text("")
        with pytest.raises(DataError, match="cannot parse"):
            load_records_csv(path)

    def test_malformed_file(self, tmp_path) -> None:
        path = tmp_path / "broken.csv"
        path.write_text('fileName,complexity\n"a.js,10\n')
        with pytest.raises(DataError):
            load_records_csv(path)

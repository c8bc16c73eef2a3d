"""Shared test fixtures for the complexity-roi test suite."""

from __future__ import annotations

import numpy as np
import pytest

from complexity_roi.dataset import FileRecord, generate_dataset


def make_record(
    complexity: float = 35.0,
    refactor_time_days: float = 4.0,
    churn: int = 5,
    file_name: str = "sample.ts",
    lines_of_code: int = 200,
    last_modified: str = "2023-05-01",
) -> FileRecord:
    """Build a valid record, overriding only what a test cares about."""
    return FileRecord(
        file_name=file_name,
        complexity=complexity,
        refactor_time_days=refactor_time_days,
        lines_of_code=lines_of_code,
        last_modified=last_modified,
        churn=churn,
    )


@pytest.fixture()
def record_factory():
    """Factory for valid records with keyword overrides."""
    return make_record


@pytest.fixture()
def dataset() -> tuple[FileRecord, ...]:
    """Reference dataset generated from seed 42."""
    return generate_dataset(rng=np.random.default_rng(42))


@pytest.fixture()
def equal_split_records() -> list[FileRecord]:
    """100 records, 20 in each complexity bucket."""
    complexities = (10.0, 30.0, 50.0, 70.0, 90.0)
    return [
        make_record(complexity=c, file_name=f"file-{i:03d}.js")
        for i, c in enumerate(complexities * 20)
    ]

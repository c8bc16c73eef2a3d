"""File records, reference data, and synthetic dataset generation."""

from complexity_roi.dataset._config import (
    BUSINESS_KEYWORDS,
    DEFAULT_CATEGORY,
    FILE_EXTENSIONS,
    NAME_TEMPLATES,
    ChurnTier,
    GeneratorConfig,
)
from complexity_roi.dataset._generator import (
    check_base_records,
    draw_churn,
    draw_last_modified,
    expected_dataset_size,
    generate_dataset,
    generate_variation,
    pick_category,
    vary_complexity_and_time,
)
from complexity_roi.dataset._io import (
    COLUMNS,
    load_records_csv,
    records_from_frame,
    records_to_frame,
    save_records_csv,
)
from complexity_roi.dataset._records import (
    BASE_RECORDS,
    EDGE_CASE_RECORDS,
    FIELD_NAMES,
    FileRecord,
    validate_record,
)

__all__ = [
    "BASE_RECORDS",
    "BUSINESS_KEYWORDS",
    "COLUMNS",
    "ChurnTier",
    "DEFAULT_CATEGORY",
    "EDGE_CASE_RECORDS",
    "FIELD_NAMES",
    "FILE_EXTENSIONS",
    "FileRecord",
    "GeneratorConfig",
    "NAME_TEMPLATES",
    "check_base_records",
    "draw_churn",
    "draw_last_modified",
    "expected_dataset_size",
    "generate_dataset",
    "generate_variation",
    "load_records_csv",
    "pick_category",
    "records_from_frame",
    "records_to_frame",
    "save_records_csv",
    "validate_record",
    "vary_complexity_and_time",
]

"""Tests for synthetic dataset generation."""

from __future__ import annotations

from datetime import datetime

import numpy as np
import pytest

from complexity_roi import ConfigurationError
from complexity_roi.dataset import (
    BASE_RECORDS,
    EDGE_CASE_RECORDS,
    FILE_EXTENSIONS,
    NAME_TEMPLATES,
    FileRecord,
    GeneratorConfig,
    check_base_records,
    draw_churn,
    draw_last_modified,
    expected_dataset_size,
    generate_dataset,
    generate_variation,
    pick_category,
    vary_complexity_and_time,
)

_N_BASE = len(BASE_RECORDS)
_N_VARIATIONS = _N_BASE * 5


def _variations(dataset):
    return dataset[_N_BASE : _N_BASE + _N_VARIATIONS]


class TestPickCategory:
    @pytest.mark.parametrize(
        ("name", "category"),
        [
            ("auth-service.js", "auth"),
            ("api-client.js", "api"),
            ("data-aggregator.js", "data"),
            ("ui-components.js", "ui"),
            ("query-builder.ts", "ui"),
            ("payment-processor.ts", "business"),
            ("invoice-printer.ts", "business"),
            ("security-middleware.js", "security"),
            ("legacy-adapter.ts", "utils"),
            ("config-loader.js", "utils"),
        ],
    )
    def test_reference_names(self, name: str, category: str) -> None:
        assert pick_category(name) == category

    def test_case_insensitive(self) -> None:
        assert pick_category("AUTH-Gate.JS") == "auth"


class TestVaryComplexityAndTime:
    def test_noise_bounds_without_anomaly(self) -> None:
        rng = np.random.default_rng(0)
        cfg = GeneratorConfig.for_stable()
        for _ in range(200):
            c, t, anomalous = vary_complexity_and_time(60.0, 10.0, rng, cfg)
            assert not anomalous
            assert 54.0 <= c <= 66.0
            assert 8.5 <= t <= 11.5

    def test_complex_anomaly_overrides_noise(self) -> None:
        rng = np.random.default_rng(0)
        cfg = GeneratorConfig(anomaly_probability=1.0, anomaly_split=1.0)
        c, t, anomalous = vary_complexity_and_time(60.0, 10.0, rng, cfg)
        assert anomalous
        assert c == 66.0
        assert t == 6.0

    def test_simple_anomaly_overrides_noise(self) -> None:
        rng = np.random.default_rng(0)
        cfg = GeneratorConfig(anomaly_probability=1.0)
        c, t, anomalous = vary_complexity_and_time(30.0, 2.0, rng, cfg)
        assert anomalous
        assert c == 27.0
        assert t == 3.6

    def test_pivot_value_never_anomalous(self) -> None:
        rng = np.random.default_rng(0)
        cfg = GeneratorConfig(anomaly_probability=1.0, anomaly_split=1.0)
        _, _, anomalous = vary_complexity_and_time(50.0, 4.5, rng, cfg)
        assert not anomalous

    def test_anomaly_overshoot_is_clamped(self) -> None:
        rng = np.random.default_rng(0)
        cfg = GeneratorConfig(anomaly_probability=1.0, anomaly_split=1.0)
        c, t, anomalous = vary_complexity_and_time(98.0, 22.0, rng, cfg)
        assert anomalous
        assert c == 100.0
        assert t == 13.2

    def test_returns_python_floats(self) -> None:
        rng = np.random.default_rng(4)
        for _ in range(20):
            c, t, _ = vary_complexity_and_time(47.0, 3.3, rng)
            assert type(c) is float
            assert type(t) is float

    def test_one_decimal(self) -> None:
        rng = np.random.default_rng(3)
        for _ in range(50):
            c, t, _ = vary_complexity_and_time(47.0, 3.3, rng)
            assert round(c, 1) == c
            assert round(t, 1) == t


class TestDrawChurn:
    @pytest.mark.parametrize(
        ("complexity", "low", "high"),
        [(75.0, 5, 20), (70.0, 3, 15), (41.0, 3, 15), (40.0, 1, 10), (5.0, 1, 10)],
    )
    def test_tiers(self, complexity: float, low: int, high: int) -> None:
        rng = np.random.default_rng(1)
        cfg = GeneratorConfig.for_stable()
        values = {draw_churn(complexity, rng, cfg)[0] for _ in range(300)}
        assert min(values) >= low
        assert max(values) <= high

    def test_stable_complex_outlier(self) -> None:
        rng = np.random.default_rng(1)
        cfg = GeneratorConfig(outlier_probability=1.0)
        for _ in range(100):
            churn, outlier = draw_churn(85.0, rng, cfg)
            assert outlier
            assert 1 <= churn <= 5

    def test_frequent_change_outlier(self) -> None:
        rng = np.random.default_rng(1)
        cfg = GeneratorConfig(outlier_probability=1.0, outlier_split=1.0)
        for _ in range(100):
            churn, outlier = draw_churn(12.0, rng, cfg)
            assert outlier
            assert 10 <= churn <= 25

    def test_mid_complexity_has_no_outlier(self) -> None:
        rng = np.random.default_rng(1)
        cfg = GeneratorConfig(outlier_probability=1.0, outlier_split=1.0)
        for _ in range(50):
            _, outlier = draw_churn(50.0, rng, cfg)
            assert not outlier


class TestDrawLastModified:
    def test_window(self) -> None:
        rng = np.random.default_rng(5)
        for _ in range(200):
            value = draw_last_modified(rng)
            date = datetime.strptime(value, "%Y-%m-%d")
            assert date.year == 2023
            assert 1 <= date.month <= 10
            assert 1 <= date.day <= 28
            assert len(value) == 10


class TestGenerateVariation:
    def test_name_follows_category_and_index(self) -> None:
        rng = np.random.default_rng(2)
        base = BASE_RECORDS[0]  # auth-service.js
        for i in range(10):
            record = generate_variation(base, i, rng)
            templates = NAME_TEMPLATES["auth"]
            expected = templates[i % len(templates)]
            stem, ext = record.file_name.rsplit(".", 1)
            assert stem == expected
            assert f".{ext}" in FILE_EXTENSIONS

    def test_lines_follow_base_complexity(self) -> None:
        rng = np.random.default_rng(2)
        base = BASE_RECORDS[0]
        for i in range(50):
            record = generate_variation(base, i, rng)
            assert 432 <= record.lines_of_code <= 648

    def test_lines_floor(self) -> None:
        rng = np.random.default_rng(2)
        base = BASE_RECORDS[-1]  # config-loader.js, complexity 5
        for i in range(50):
            assert generate_variation(base, i, rng).lines_of_code >= 20


class TestGenerateDataset:
    def test_size(self, dataset) -> None:
        assert len(dataset) == _N_BASE * 6 + 4 == 112
        assert expected_dataset_size() == 112

    def test_size_follows_config(self) -> None:
        cfg = GeneratorConfig(variations_per_base=2)
        records = generate_dataset(cfg, seed=1)
        assert len(records) == _N_BASE * 3 + 4 == expected_dataset_size(cfg)

    def test_returns_tuple(self, dataset) -> None:
        assert isinstance(dataset, tuple)

    def test_base_records_first_and_unchanged(self, dataset) -> None:
        assert dataset[:_N_BASE] == BASE_RECORDS

    def test_edge_cases_last_and_unchanged(self, dataset) -> None:
        assert dataset[-4:] == EDGE_CASE_RECORDS

    def test_ranges(self, dataset) -> None:
        for record in dataset:
            assert 1 <= record.complexity <= 100
            assert record.churn >= 1
            assert record.refactor_time_days > 0
            assert record.lines_of_code >= 1

    def test_variation_lines_floor(self, dataset) -> None:
        assert all(r.lines_of_code >= 20 for r in _variations(dataset))

    def test_variations_grouped_by_base(self, dataset) -> None:
        variations = _variations(dataset)
        for b, base in enumerate(BASE_RECORDS):
            category = pick_category(base.file_name)
            for i in range(5):
                name = variations[b * 5 + i].file_name
                assert name.rsplit(".", 1)[0] in NAME_TEMPLATES[category]

    def test_seed_reproducible(self) -> None:
        assert generate_dataset(seed=7) == generate_dataset(seed=7)

    def test_rng_takes_precedence_over_seed(self) -> None:
        a = generate_dataset(rng=np.random.default_rng(3), seed=99)
        b = generate_dataset(seed=3)
        assert a == b

    def test_custom_base_records(self) -> None:
        bases = BASE_RECORDS[:2]
        records = generate_dataset(seed=0, base_records=bases, edge_cases=())
        assert len(records) == 12
        assert records[:2] == bases

    def test_field_types_are_builtin(self, dataset) -> None:
        for record in dataset:
            assert type(record.complexity) in (float, int)
            assert type(record.refactor_time_days) in (float, int)
            assert type(record.lines_of_code) is int
            assert type(record.churn) is int

    def test_tiny_base_time_rejected_before_generation(self) -> None:
        base = FileRecord("x-utils.ts", 10, 0.04, 10, "2023-01-01", 1)
        with pytest.raises(ConfigurationError, match="x-utils.ts"):
            generate_dataset(seed=0, base_records=(base,), edge_cases=())


class TestCheckBaseRecords:
    def test_reference_records_pass(self) -> None:
        check_base_records(BASE_RECORDS)
        check_base_records(EDGE_CASE_RECORDS)

    def test_noise_floor(self) -> None:
        base = FileRecord("x-utils.ts", 10, 0.05, 10, "2023-01-01", 1)
        with pytest.raises(ConfigurationError, match="refactor time"):
            check_base_records((base,), GeneratorConfig.for_stable())

    def test_complex_anomaly_factor(self) -> None:
        base = FileRecord("heavy.ts", 80, 0.08, 480, "2023-01-01", 1)
        check_base_records((base,), GeneratorConfig.for_stable())
        with pytest.raises(ConfigurationError, match="heavy.ts"):
            check_base_records((base,), GeneratorConfig())

    def test_no_variations_skips_check(self) -> None:
        base = FileRecord("x-utils.ts", 10, 0.04, 10, "2023-01-01", 1)
        check_base_records((base,), GeneratorConfig(variations_per_base=0))

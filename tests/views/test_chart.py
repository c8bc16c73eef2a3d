"""Tests for scatter-chart series construction."""

from __future__ import annotations

import pytest

from complexity_roi import DataError
from complexity_roi.classification import (
    BUCKET_COLORS,
    AnalysisView,
    ChurnQuadrant,
    ComplexityBucket,
    RefactorQuadrant,
)
from complexity_roi.views import (
    CHURN_COMPLEXITY_CURVE,
    axis_max,
    build_scatter_series,
    group_by_quadrant,
    view_quadrant,
    y_value,
)


class TestYValue:
    def test_views(self, record_factory) -> None:
        record = record_factory(refactor_time_days=4.5, churn=12)
        assert y_value(record, AnalysisView.REFACTOR_TIME) == 4.5
        assert y_value(record, AnalysisView.CHURN) == 12.0

    def test_view_quadrant_follows_view(self, record_factory) -> None:
        record = record_factory(complexity=80, refactor_time_days=3, churn=15)
        assert (
            view_quadrant(record, AnalysisView.REFACTOR_TIME)
            is RefactorQuadrant.STRATEGIC_OPPORTUNITY
        )
        assert view_quadrant(record, AnalysisView.CHURN) is ChurnQuadrant.REFACTOR_REQUIRED


class TestBuildScatterSeries:
    def test_one_series_per_bucket(self, record_factory) -> None:
        series = build_scatter_series([record_factory(complexity=90)])
        assert [s.bucket for s in series] == list(ComplexityBucket)
        assert [s.color for s in series] == [BUCKET_COLORS[b] for b in ComplexityBucket]
        assert len(series[-1].points) == 1
        assert all(len(s.points) == 0 for s in series[:-1])

    def test_every_record_plotted_once(self, dataset) -> None:
        series = build_scatter_series(dataset, AnalysisView.CHURN)
        assert sum(len(s.points) for s in series) == len(dataset)

    def test_point_coordinates(self, record_factory) -> None:
        record = record_factory(file_name="x.js", complexity=45, churn=7)
        (point,) = build_scatter_series([record], AnalysisView.CHURN)[2].points
        assert point.file_name == "x.js"
        assert (point.x, point.y) == (45, 7.0)
        assert point.quadrant is ChurnQuadrant.STABLE


class TestGroupByQuadrant:
    def test_refactor_keys(self, dataset) -> None:
        grouped = group_by_quadrant(dataset)
        assert set(grouped) == set(RefactorQuadrant)
        assert sum(len(v) for v in grouped.values()) == len(dataset)

    def test_churn_keys(self, record_factory) -> None:
        grouped = group_by_quadrant([record_factory()], AnalysisView.CHURN)
        assert set(grouped) == set(ChurnQuadrant)
        assert grouped[ChurnQuadrant.STABLE] == (record_factory(),)


class TestAxisMax:
    def test_padding(self, record_factory) -> None:
        records = [record_factory(refactor_time_days=t) for t in (4.0, 15.0)]
        assert axis_max(records, AnalysisView.REFACTOR_TIME) == 17

    def test_rounds_up(self, record_factory) -> None:
        records = [record_factory(churn=12)]
        assert axis_max(records, AnalysisView.CHURN) == 14

    def test_empty(self) -> None:
        with pytest.raises(DataError):
            axis_max([], AnalysisView.CHURN)


class TestChurnCurve:
    def test_monotone_decreasing(self) -> None:
        xs = [x for x, _ in CHURN_COMPLEXITY_CURVE]
        ys = [y for _, y in CHURN_COMPLEXITY_CURVE]
        assert xs == sorted(xs)
        assert ys == sorted(ys, reverse=True)

"""Table queries and scatter-chart series over a dataset."""

from complexity_roi.views._chart import (
    ScatterPoint,
    ScatterSeries,
    axis_max,
    build_scatter_series,
    group_by_quadrant,
    view_quadrant,
    y_value,
)
from complexity_roi.views._config import (
    AXIS_PADDING,
    CHURN_COMPLEXITY_CURVE,
    SORT_ATTRIBUTES,
    SortField,
    TableQuery,
)
from complexity_roi.views._table import (
    TablePage,
    filter_records,
    paginate,
    run_table_query,
    sort_records,
)

__all__ = [
    "AXIS_PADDING",
    "CHURN_COMPLEXITY_CURVE",
    "SORT_ATTRIBUTES",
    "ScatterPoint",
    "ScatterSeries",
    "SortField",
    "TablePage",
    "TableQuery",
    "axis_max",
    "build_scatter_series",
    "filter_records",
    "group_by_quadrant",
    "paginate",
    "run_table_query",
    "sort_records",
    "view_quadrant",
    "y_value",
]

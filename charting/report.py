"""JSON-serializable axis and statistics reports for chart data."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from charts.chart_data import LineAndBarChartData, format_y_axis_labels

from . import settings


def build_axis_report(chart: LineAndBarChartData, *, decimals: int | None = None) -> dict[str, Any]:
    """Summarize a chart's statistics and axis labels.

    Args:
        chart: Chart data to summarize.
        decimals: Decimal places for formatted Y labels; defaults to
            `settings.Y_AXIS_LABEL_DECIMALS`.

    Returns:
        A dictionary with:
        - `statistics`: range/min/max/average
        - `x_axis_labels`, `y_axis_labels`, `y_axis_labels_formatted`
        - `header_location`, `view_data`
    """

    y_labels = chart.get_y_axis_labels()
    return {
        "statistics": {
            "range": chart.get_range(),
            "min": chart.get_min_value(),
            "max": chart.get_max_value(),
            "average": chart.get_average(),
        },
        "x_axis_labels": list(chart.get_x_axis_labels()),
        "y_axis_labels": list(y_labels),
        "y_axis_labels_formatted": list(
            format_y_axis_labels(y_labels, decimals=settings.Y_AXIS_LABEL_DECIMALS if decimals is None else decimals)
        ),
        "header_location": str(chart.get_header_location()),
        "view_data": asdict(chart.view_data),
    }

"""Chart data model shared by line and bar charts.

`LineAndBarChartData` binds a data series collection to a style descriptor and
answers the layout questions the rendering layer asks on each pass: summary
statistics, axis labels, header placement and layout hints.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from . import data_functions
from .dto import ChartViewData, DataSeriesCollection, MultiDataSet, SingleDataSet
from .style import InfoBoxPlacement, LabelsFrom, LineAndBarChartStyle

log = logging.getLogger(__name__)


@dataclass(slots=True)
class LineAndBarChartData:
    """Data and style for a single line or bar chart.

    Args:
        data_sets: A `SingleDataSet` or a `MultiDataSet`.
        chart_style: Style descriptor; the host may replace it between redraws.
        x_axis_labels: Optional chart-level X labels used instead of the data
            point labels when `chart_style.x_axis_labels_from` is `chart_data`.
        x_axis_label_padding: Label used to pad a short `x_axis_labels` list.
    """

    data_sets: DataSeriesCollection
    chart_style: LineAndBarChartStyle = field(default_factory=LineAndBarChartStyle)
    x_axis_labels: tuple[str, ...] | None = None
    x_axis_label_padding: str = ""

    def get_range(self) -> float:
        """Difference between the highest and lowest value in the data set(s)."""

        match self.data_sets:
            case MultiDataSet():
                return data_functions.multi_data_set_range(self.data_sets)
            case SingleDataSet():
                return data_functions.data_set_range(self.data_sets)
        raise TypeError(f"Unsupported data set type: {type(self.data_sets).__name__}")

    def get_min_value(self) -> float:
        """Lowest value in the data set(s)."""

        match self.data_sets:
            case MultiDataSet():
                return data_functions.multi_data_set_min_value(self.data_sets)
            case SingleDataSet():
                return data_functions.data_set_min_value(self.data_sets)
        raise TypeError(f"Unsupported data set type: {type(self.data_sets).__name__}")

    def get_max_value(self) -> float:
        """Highest value in the data set(s)."""

        match self.data_sets:
            case MultiDataSet():
                return data_functions.multi_data_set_max_value(self.data_sets)
            case SingleDataSet():
                return data_functions.data_set_max_value(self.data_sets)
        raise TypeError(f"Unsupported data set type: {type(self.data_sets).__name__}")

    def get_average(self) -> float:
        """Average value of the data set(s)."""

        match self.data_sets:
            case MultiDataSet():
                return data_functions.multi_data_set_average(self.data_sets)
            case SingleDataSet():
                return data_functions.data_set_average(self.data_sets)
        raise TypeError(f"Unsupported data set type: {type(self.data_sets).__name__}")

    def get_header_location(self) -> InfoBoxPlacement:
        """Return the configured info box placement."""

        return self.chart_style.info_box_placement

    def get_x_axis_labels(self) -> tuple[str, ...]:
        """Resolve the X axis label strings.

        Labels come from the data points, or from `x_axis_labels` when the style
        selects `LabelsFrom.chart_data`. A chart-level list whose length differs
        from the number of X positions is truncated or padded with
        `x_axis_label_padding`. Without a chart-level list the data point labels
        are used.

        Returns:
            One label per X position.
        """

        match self.chart_style.x_axis_labels_from:
            case LabelsFrom.data_point:
                return self._data_point_labels()
            case LabelsFrom.chart_data:
                if self.x_axis_labels is None:
                    return self._data_point_labels()
                return self._fit_labels(self.x_axis_labels)
        raise ValueError(f"Unsupported label source: {self.chart_style.x_axis_labels_from!r}")

    def get_y_axis_labels(self) -> tuple[float, ...]:
        """Evenly spaced Y axis tick values.

        Ticks run from the lower of 0 and the data minimum up to the data
        maximum, both inclusive. A single tick is the data maximum.

        Returns:
            Exactly `chart_style.y_axis_number_of_labels` non-decreasing values.
        """

        count = self.chart_style.y_axis_number_of_labels
        top = self.get_max_value()
        if count == 1:
            return (top,)
        bottom = min(0.0, self.get_min_value())
        step = (top - bottom) / (count - 1)
        labels = [bottom + step * index for index in range(count - 1)]
        labels.append(top)
        return tuple(labels)

    @property
    def view_data(self) -> ChartViewData:
        """Layout hints derived from the current data and style."""

        return ChartViewData(
            has_x_axis_labels=any(label for label in self.get_x_axis_labels()),
            has_y_axis_labels=self.point_count() > 0,
        )

    def point_count(self) -> int:
        """Number of X positions (points in the longest series)."""

        return len(self._label_series().data_points)

    def _label_series(self) -> SingleDataSet:
        if isinstance(self.data_sets, MultiDataSet):
            if not self.data_sets.data_sets:
                return SingleDataSet(data_points=())
            return max(self.data_sets.data_sets, key=lambda data_set: len(data_set.data_points))
        return self.data_sets

    def _data_point_labels(self) -> tuple[str, ...]:
        return tuple(point.x_axis_label or "" for point in self._label_series().data_points)

    def _fit_labels(self, labels: Sequence[str]) -> tuple[str, ...]:
        expected = self.point_count()
        if len(labels) == expected:
            return tuple(labels)
        log.debug("X axis label count %d does not match %d data points; fitting.", len(labels), expected)
        if len(labels) > expected:
            return tuple(labels[:expected])
        return tuple(labels) + (self.x_axis_label_padding,) * (expected - len(labels))


def format_y_axis_labels(labels: Sequence[float], *, decimals: int = 0) -> tuple[str, ...]:
    """Format Y axis tick values for display.

    Args:
        labels: Tick values from `get_y_axis_labels`.
        decimals: Number of decimal places.

    Returns:
        Fixed-point strings, one per tick.
    """

    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}.")
    return tuple(f"{value:.{decimals}f}" for value in labels)

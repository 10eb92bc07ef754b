"""DTOs for line and bar chart data sets.

Data sets are immutable snapshots. The type of the collection is its tag:
`SingleDataSet` holds one series, `MultiDataSet` holds several series that
are plotted together.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DataPoint:
    """One numeric observation in a series.

    Args:
        value: Numeric value plotted on the Y axis.
        x_axis_label: Optional label shown on the X axis for this point.
        description: Optional long-form description of the point.
    """

    value: float
    x_axis_label: str | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class SingleDataSet:
    """An ordered series of data points (one line or one set of bars).

    Args:
        data_points: Points in plotting order.
        legend_title: Optional legend title for the series.
    """

    data_points: tuple[DataPoint, ...]
    legend_title: str = ""

    def values(self) -> tuple[float, ...]:
        """Return the point values in order."""

        return tuple(float(point.value) for point in self.data_points)


@dataclass(frozen=True, slots=True)
class MultiDataSet:
    """An ordered collection of series plotted together.

    Args:
        data_sets: Contained single series in plotting order.
    """

    data_sets: tuple[SingleDataSet, ...]


DataSeriesCollection = SingleDataSet | MultiDataSet


@dataclass(frozen=True, slots=True)
class ChartViewData:
    """Layout hints derived from the chart data.

    Args:
        has_x_axis_labels: True when at least one non-empty X axis label exists.
        has_y_axis_labels: True when the chart has data to label on the Y axis.
    """

    has_x_axis_labels: bool = False
    has_y_axis_labels: bool = False

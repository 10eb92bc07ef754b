"""Style descriptors shared by line and bar charts.

A style is a passive configuration record. It is validated once at
construction time and read by `LineAndBarChartData` on every layout pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

DEFAULT_Y_AXIS_NUMBER_OF_LABELS = 10


class InvalidConfigurationError(ValueError):
    """Raised when a style descriptor violates its construction contract."""

    def __init__(self, *, field_name: str, value: object, reason: str) -> None:
        """Initialize the error.

        Args:
            field_name: Name of the offending style field.
            value: Rejected value.
            reason: Short human-readable constraint description.
        """

        super().__init__(f"Invalid chart style {field_name}={value!r}: {reason}.")
        self.field_name = field_name
        self.value = value
        self.reason = reason


class XAxisLabelPosition(StrEnum):
    """Where the X axis labels are drawn."""

    top = "top"
    bottom = "bottom"


class YAxisLabelPosition(StrEnum):
    """Where the Y axis labels are drawn."""

    leading = "leading"
    trailing = "trailing"


class LabelsFrom(StrEnum):
    """Source of the X axis label strings."""

    data_point = "data_point"
    chart_data = "chart_data"


class InfoBoxPlacement(StrEnum):
    """Placement of the touch info box relative to the chart."""

    floating = "floating"
    info_box = "info_box"
    header = "header"


@dataclass(frozen=True, slots=True)
class GridStyle:
    """Style of the grid lines breaking up the chart.

    Args:
        number_of_lines: How many grid lines to draw.
        line_color: Line color as a CSS-style string.
        line_width: Stroke width in points.
        dash: Dash pattern lengths; empty for a solid line.
        dash_phase: Offset into the dash pattern.
    """

    number_of_lines: int = 10
    line_color: str = "rgba(128, 128, 128, 0.25)"
    line_width: float = 1.0
    dash: tuple[float, ...] = (5.0, 10.0)
    dash_phase: float = 0.0

    def __post_init__(self) -> None:
        if self.number_of_lines < 1:
            raise InvalidConfigurationError(
                field_name="number_of_lines", value=self.number_of_lines, reason="must be >= 1"
            )
        if self.line_width < 0:
            raise InvalidConfigurationError(field_name="line_width", value=self.line_width, reason="must be >= 0")


@dataclass(frozen=True, slots=True)
class LineAndBarChartStyle:
    """Style data for line and bar charts.

    Args:
        x_axis_grid_style: Style of the vertical grid lines.
        y_axis_grid_style: Style of the horizontal grid lines.
        x_axis_label_position: X axis labels at the top or bottom.
        x_axis_labels_from: Whether X labels come from data points or the chart data.
        y_axis_label_position: Y axis labels on the leading or trailing edge.
        y_axis_number_of_labels: Number of tick labels on the Y axis (>= 1).
        info_box_placement: Where the info box is shown, returned as the header location.

    Raises:
        InvalidConfigurationError: When `y_axis_number_of_labels` is below 1.
    """

    x_axis_grid_style: GridStyle = field(default_factory=GridStyle)
    y_axis_grid_style: GridStyle = field(default_factory=GridStyle)
    x_axis_label_position: XAxisLabelPosition = XAxisLabelPosition.bottom
    x_axis_labels_from: LabelsFrom = LabelsFrom.data_point
    y_axis_label_position: YAxisLabelPosition = YAxisLabelPosition.leading
    y_axis_number_of_labels: int = DEFAULT_Y_AXIS_NUMBER_OF_LABELS
    info_box_placement: InfoBoxPlacement = InfoBoxPlacement.floating

    def __post_init__(self) -> None:
        if isinstance(self.y_axis_number_of_labels, bool) or not isinstance(self.y_axis_number_of_labels, int):
            raise InvalidConfigurationError(
                field_name="y_axis_number_of_labels",
                value=self.y_axis_number_of_labels,
                reason="must be an integer",
            )
        if self.y_axis_number_of_labels < 1:
            raise InvalidConfigurationError(
                field_name="y_axis_number_of_labels",
                value=self.y_axis_number_of_labels,
                reason="must be >= 1",
            )

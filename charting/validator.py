"""Validation for chart definition payloads.

Chart definitions are user-editable files, so this validator reports every
problem it finds instead of stopping at the first one. Errors make the
definition unusable; warnings describe values that are resolved by a
documented fallback (empty data, mismatched X label counts).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, cast

from charts.chart_data import LineAndBarChartData
from charts.style import InfoBoxPlacement, LabelsFrom, XAxisLabelPosition, YAxisLabelPosition

from .loader import parse_chart_definition


@dataclass(frozen=True, slots=True)
class ChartValidationResult:
    """Validation result for a chart definition payload.

    Args:
        is_valid: True when no errors exist.
        errors: Fatal validation errors.
        warnings: Non-fatal warnings intended for display.
    """

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def validate_chart_definition(payload: dict[str, Any]) -> ChartValidationResult:
    """Validate a raw chart definition payload.

    Args:
        payload: Mapping read from a chart definition file.

    Returns:
        ChartValidationResult containing errors and warnings.
    """

    errors: list[str] = []
    warnings: list[str] = []

    style_raw = payload.get("style") or {}
    if not isinstance(style_raw, dict):
        errors.append("style must be a mapping.")
        style_raw = {}
    style = cast(dict[str, Any], style_raw)

    count = style.get("y_axis_number_of_labels")
    if count is not None and count != "":
        parsed_count = _as_int(count)
        if parsed_count is None:
            errors.append(f"style.y_axis_number_of_labels must be an integer, got {count!r}.")
        elif parsed_count < 1:
            errors.append(f"style.y_axis_number_of_labels must be >= 1, got {parsed_count}.")

    enum_fields = {
        "x_axis_label_position": XAxisLabelPosition,
        "x_axis_labels_from": LabelsFrom,
        "y_axis_label_position": YAxisLabelPosition,
        "info_box_placement": InfoBoxPlacement,
    }
    for name, enum_type in enum_fields.items():
        value = style.get(name)
        if value is None:
            continue
        allowed = {member.value for member in enum_type}
        if str(value).strip().casefold() not in allowed:
            errors.append(f"style.{name} is not a supported value: {value!r} (allowed: {sorted(allowed)}).")

    for name in ("x_axis_grid_style", "y_axis_grid_style"):
        grid = style.get(name)
        if grid is None:
            continue
        if not isinstance(grid, dict):
            errors.append(f"style.{name} must be a mapping.")
            continue
        lines = grid.get("number_of_lines")
        if lines is not None:
            parsed_lines = _as_int(lines)
            if parsed_lines is None or parsed_lines < 1:
                errors.append(f"style.{name}.number_of_lines must be an integer >= 1, got {lines!r}.")
        width = grid.get("line_width")
        if width is not None:
            parsed_width = _as_finite_float(width)
            if parsed_width is None or parsed_width < 0:
                errors.append(f"style.{name}.line_width must be a finite number >= 0, got {width!r}.")
        phase = grid.get("dash_phase")
        if phase is not None and _as_finite_float(phase) is None:
            errors.append(f"style.{name}.dash_phase must be a finite number, got {phase!r}.")
        dash = grid.get("dash")
        if dash is not None and (
            not isinstance(dash, list) or any(_as_finite_float(x) is None for x in dash)
        ):
            errors.append(f"style.{name}.dash must be a list of finite numbers, got {dash!r}.")

    labels = payload.get("x_axis_labels")
    if labels is not None and not isinstance(labels, list):
        errors.append("x_axis_labels must be a list when present.")

    if errors:
        return ChartValidationResult(is_valid=False, errors=tuple(errors), warnings=tuple(warnings))

    try:
        definition = parse_chart_definition(payload)
    except ValueError as exc:
        errors.append(str(exc))
        return ChartValidationResult(is_valid=False, errors=tuple(errors), warnings=tuple(warnings))

    chart = LineAndBarChartData(data_sets=definition.data_sets, chart_style=definition.style)
    point_count = chart.point_count()
    if point_count == 0:
        warnings.append("data_sets contains no data points; statistics default to 0.")

    if definition.x_axis_labels is not None:
        if definition.style.x_axis_labels_from is LabelsFrom.data_point:
            warnings.append("x_axis_labels is ignored because style.x_axis_labels_from is 'data_point'.")
        elif len(definition.x_axis_labels) != point_count:
            policy = "truncated" if len(definition.x_axis_labels) > point_count else "padded"
            warnings.append(
                f"x_axis_labels has {len(definition.x_axis_labels)} entries for {point_count} data points; "
                f"labels will be {policy}."
            )
    elif definition.style.x_axis_labels_from is LabelsFrom.chart_data:
        warnings.append("style.x_axis_labels_from is 'chart_data' but no x_axis_labels are set; using data points.")

    return ChartValidationResult(is_valid=True, errors=(), warnings=tuple(warnings))


def _as_int(value: object) -> int | None:
    """Parse an integer the way the snapshot codec does; booleans are rejected."""

    if isinstance(value, bool):
        return None
    try:
        return int(str(value))
    except ValueError:
        return None


def _as_finite_float(value: object) -> float | None:
    """Parse a finite float; booleans, NaN and infinities are rejected."""

    if isinstance(value, bool) or value is None:
        return None
    try:
        parsed = float(str(value))
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None

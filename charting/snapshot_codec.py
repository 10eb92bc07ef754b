"""Snapshot encoding/decoding helpers for chart styles and data sets."""

from __future__ import annotations

import math
from enum import StrEnum
from typing import Any, TypeVar, cast

from charts.dto import DataPoint, DataSeriesCollection, MultiDataSet, SingleDataSet
from charts.style import (
    DEFAULT_Y_AXIS_NUMBER_OF_LABELS,
    GridStyle,
    InfoBoxPlacement,
    LabelsFrom,
    LineAndBarChartStyle,
    XAxisLabelPosition,
    YAxisLabelPosition,
)

_EnumT = TypeVar("_EnumT", bound=StrEnum)


def encode_chart_style(style: LineAndBarChartStyle) -> dict[str, Any]:
    """Encode a LineAndBarChartStyle into a JSON-serializable dictionary.

    Args:
        style: Style descriptor to encode.

    Returns:
        Dict payload safe for JSON or YAML storage.
    """

    return {
        "x_axis_grid_style": _encode_grid_style(style.x_axis_grid_style),
        "y_axis_grid_style": _encode_grid_style(style.y_axis_grid_style),
        "x_axis_label_position": str(style.x_axis_label_position),
        "x_axis_labels_from": str(style.x_axis_labels_from),
        "y_axis_label_position": str(style.y_axis_label_position),
        "y_axis_number_of_labels": style.y_axis_number_of_labels,
        "info_box_placement": str(style.info_box_placement),
    }


def decode_chart_style(payload: dict[str, Any]) -> LineAndBarChartStyle:
    """Decode a LineAndBarChartStyle from a stored payload dictionary.

    Unknown enum values fall back to the style defaults. A missing label count
    uses `DEFAULT_Y_AXIS_NUMBER_OF_LABELS`.

    Args:
        payload: Payload previously produced by `encode_chart_style`, or
            hand-written in a chart definition file.

    Returns:
        LineAndBarChartStyle instance.

    Raises:
        ValueError: When the label count is not an integer.
        InvalidConfigurationError: When a decoded value violates the style contract.
    """

    raw_count = payload.get("y_axis_number_of_labels")
    if raw_count is None or raw_count == "":
        count = DEFAULT_Y_AXIS_NUMBER_OF_LABELS
    else:
        try:
            count = int(str(raw_count))
        except ValueError as exc:
            raise ValueError(f"y_axis_number_of_labels must be an integer, got {raw_count!r}.") from exc

    return LineAndBarChartStyle(
        x_axis_grid_style=_decode_grid_style(payload.get("x_axis_grid_style")),
        y_axis_grid_style=_decode_grid_style(payload.get("y_axis_grid_style")),
        x_axis_label_position=_parse_enum(
            XAxisLabelPosition, payload.get("x_axis_label_position"), XAxisLabelPosition.bottom
        ),
        x_axis_labels_from=_parse_enum(LabelsFrom, payload.get("x_axis_labels_from"), LabelsFrom.data_point),
        y_axis_label_position=_parse_enum(
            YAxisLabelPosition, payload.get("y_axis_label_position"), YAxisLabelPosition.leading
        ),
        y_axis_number_of_labels=count,
        info_box_placement=_parse_enum(
            InfoBoxPlacement, payload.get("info_box_placement"), InfoBoxPlacement.floating
        ),
    )


def encode_data_sets(data_sets: DataSeriesCollection) -> dict[str, Any]:
    """Encode a single or multi data set into a tagged dictionary.

    Args:
        data_sets: Data set collection to encode.

    Returns:
        `{"kind": "single", ...}` or `{"kind": "multi", "data_sets": [...]}`.
    """

    if isinstance(data_sets, MultiDataSet):
        return {"kind": "multi", "data_sets": [_encode_single(data_set) for data_set in data_sets.data_sets]}
    return {"kind": "single", **_encode_single(data_sets)}


def decode_data_sets(payload: dict[str, Any]) -> DataSeriesCollection:
    """Decode a data set collection from a tagged dictionary.

    Args:
        payload: Payload produced by `encode_data_sets`.

    Returns:
        SingleDataSet or MultiDataSet.

    Raises:
        ValueError: When the kind is unknown, a multi entry is not a mapping, or a
            data point has no finite numeric value.
    """

    kind = str(payload.get("kind") or "single").strip().casefold()
    if kind == "single":
        return _decode_single(payload)
    if kind == "multi":
        raw_sets = payload.get("data_sets") or []
        if not isinstance(raw_sets, list):
            raise ValueError("Multi data set payload requires a list under 'data_sets'.")
        for idx, raw in enumerate(raw_sets):
            if not isinstance(raw, dict):
                raise ValueError(f"data_sets[{idx}] must be a mapping with a 'data_points' list.")
        return MultiDataSet(data_sets=tuple(_decode_single(cast(dict[str, Any], raw)) for raw in raw_sets))
    raise ValueError(f"Unknown data set kind: {kind!r}.")


def _encode_grid_style(style: GridStyle) -> dict[str, Any]:
    """Encode a GridStyle for JSON storage."""

    return {
        "number_of_lines": style.number_of_lines,
        "line_color": style.line_color,
        "line_width": style.line_width,
        "dash": list(style.dash),
        "dash_phase": style.dash_phase,
    }


def _decode_grid_style(value: object) -> GridStyle:
    """Decode a GridStyle, using defaults for missing or unparseable values."""

    if not isinstance(value, dict):
        return GridStyle()
    raw = cast(dict[str, Any], value)
    default = GridStyle()
    number_of_lines = _parse_int(raw.get("number_of_lines"))
    line_width = _parse_float(raw.get("line_width"))
    dash_phase = _parse_float(raw.get("dash_phase"))
    return GridStyle(
        number_of_lines=default.number_of_lines if number_of_lines is None else number_of_lines,
        line_color=str(raw.get("line_color") or default.line_color),
        line_width=default.line_width if line_width is None else line_width,
        dash=_parse_dash(raw.get("dash"), default=default.dash),
        dash_phase=default.dash_phase if dash_phase is None else dash_phase,
    )


def _encode_single(data_set: SingleDataSet) -> dict[str, Any]:
    """Encode one series without the kind tag."""

    return {
        "legend_title": data_set.legend_title,
        "data_points": [
            {
                "value": point.value,
                "x_axis_label": point.x_axis_label,
                "description": point.description,
            }
            for point in data_set.data_points
        ],
    }


def _decode_single(payload: dict[str, Any]) -> SingleDataSet:
    """Decode one series, ignoring any kind tag."""

    raw_points = payload.get("data_points") or []
    if not isinstance(raw_points, list):
        raise ValueError("Data set payload requires a list under 'data_points'.")
    points: list[DataPoint] = []
    for idx, raw in enumerate(raw_points):
        if isinstance(raw, dict):
            point = cast(dict[str, Any], raw)
            value = _parse_float(point.get("value"))
            label = _parse_optional_str(point.get("x_axis_label"))
            description = _parse_optional_str(point.get("description"))
        else:
            value, label, description = _parse_float(raw), None, None
        if value is None:
            raise ValueError(f"data_points[{idx}] requires a numeric value.")
        points.append(DataPoint(value=value, x_axis_label=label, description=description))
    return SingleDataSet(data_points=tuple(points), legend_title=str(payload.get("legend_title") or ""))


def _parse_enum(enum_type: type[_EnumT], value: object, default: _EnumT) -> _EnumT:
    """Best-effort enum parsing for snapshot payloads."""

    if value is None:
        return default
    try:
        return enum_type(str(value).strip().casefold())
    except ValueError:
        return default


def _parse_float(value: object) -> float | None:
    """Best-effort float parsing for snapshot payloads; non-finite values are rejected."""

    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        parsed = float(str(value))
    except ValueError:
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def _parse_optional_str(value: object) -> str | None:
    """Return None for missing values, otherwise the string form."""

    if value is None:
        return None
    return str(value)


def _parse_int(value: object) -> int | None:
    """Best-effort int parsing for snapshot payloads."""

    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return int(str(value))
    except ValueError:
        return None


def _parse_dash(value: object, *, default: tuple[float, ...]) -> tuple[float, ...]:
    """Parse a dash pattern; any unparseable entry keeps the default pattern."""

    if not isinstance(value, list):
        return default
    parsed = [_parse_float(x) for x in value]
    if any(x is None for x in parsed):
        return default
    return tuple(cast(list[float], parsed))

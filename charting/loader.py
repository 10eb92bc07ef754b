"""YAML chart definition loading.

A chart definition file holds three top-level keys:

- `style`: a style payload (see `snapshot_codec.decode_chart_style`),
- `data_sets`: a tagged single/multi data set payload,
- `x_axis_labels`: optional chart-level X axis labels.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

import yaml

from charts.chart_data import LineAndBarChartData
from charts.dto import DataSeriesCollection
from charts.style import LineAndBarChartStyle

from . import settings
from .snapshot_codec import decode_chart_style, decode_data_sets, encode_chart_style, encode_data_sets


@dataclass(frozen=True, slots=True)
class ChartDefinition:
    """A parsed chart definition.

    Attributes:
        style: Decoded style descriptor.
        data_sets: Decoded single or multi data set.
        x_axis_labels: Optional chart-level X axis labels.
    """

    style: LineAndBarChartStyle
    data_sets: DataSeriesCollection
    x_axis_labels: tuple[str, ...] | None = None

    def to_chart_data(self) -> LineAndBarChartData:
        """Bind the definition into chart data using the configured label padding."""

        return LineAndBarChartData(
            data_sets=self.data_sets,
            chart_style=self.style,
            x_axis_labels=self.x_axis_labels,
            x_axis_label_padding=settings.X_AXIS_LABEL_PADDING,
        )


def read_definition_payload(path: str | Path) -> dict[str, Any]:
    """Read a chart definition file into a raw payload dictionary.

    Raises:
        ValueError: When the document is not a mapping.
    """

    raw = Path(path).read_text(encoding="utf-8")
    payload = yaml.safe_load(raw) or {}
    if not isinstance(payload, dict):
        raise ValueError(f"Chart definition {str(path)!r} must be a mapping at the top level.")
    return cast(dict[str, Any], payload)


def parse_chart_definition(payload: dict[str, Any]) -> ChartDefinition:
    """Parse a raw payload into a ChartDefinition.

    Raises:
        ValueError: When a section is malformed.
        InvalidConfigurationError: When the style violates its contract.
    """

    style_raw = payload.get("style") or {}
    if not isinstance(style_raw, dict):
        raise ValueError("'style' must be a mapping.")
    data_raw = payload.get("data_sets") or {}
    if not isinstance(data_raw, dict):
        raise ValueError("'data_sets' must be a mapping.")
    labels_raw = payload.get("x_axis_labels")
    if labels_raw is not None and not isinstance(labels_raw, list):
        raise ValueError("'x_axis_labels' must be a list when present.")

    x_axis_labels = None
    if labels_raw is not None:
        x_axis_labels = tuple("" if label is None else str(label) for label in labels_raw)

    return ChartDefinition(
        style=decode_chart_style(cast(dict[str, Any], style_raw)),
        data_sets=decode_data_sets(cast(dict[str, Any], data_raw)),
        x_axis_labels=x_axis_labels,
    )


def load_chart_definition(path: str | Path) -> ChartDefinition:
    """Load and parse a YAML chart definition file."""

    return parse_chart_definition(read_definition_payload(path))


def dump_chart_definition(definition: ChartDefinition) -> str:
    """Serialize a ChartDefinition back to YAML text."""

    payload: dict[str, Any] = {
        "style": encode_chart_style(definition.style),
        "data_sets": encode_data_sets(definition.data_sets),
    }
    if definition.x_axis_labels is not None:
        payload["x_axis_labels"] = list(definition.x_axis_labels)
    return yaml.safe_dump(payload, sort_keys=False)

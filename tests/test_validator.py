"""Unit tests for chart definition validation."""

from __future__ import annotations

import pytest

from charting.validator import validate_chart_definition

pytestmark = pytest.mark.unit


def _payload(**overrides: object) -> dict:
    payload: dict = {
        "style": {"y_axis_number_of_labels": 3},
        "data_sets": {"kind": "single", "data_points": [{"value": 2, "x_axis_label": "Q1"}, {"value": 8}]},
    }
    payload.update(overrides)
    return payload


def test_valid_definition_has_no_errors_or_warnings() -> None:
    """A well-formed definition validates cleanly."""

    result = validate_chart_definition(_payload())

    assert result.is_valid is True
    assert result.errors == ()
    assert result.warnings == ()


def test_validation_collects_every_style_error() -> None:
    """All style problems are reported together."""

    result = validate_chart_definition(
        _payload(
            style={
                "y_axis_number_of_labels": 0,
                "x_axis_label_position": "middle",
                "info_box_placement": "nowhere",
                "y_axis_grid_style": {"number_of_lines": 0, "line_width": -2},
            }
        )
    )

    assert result.is_valid is False
    assert any("y_axis_number_of_labels must be >= 1" in error for error in result.errors)
    assert any("x_axis_label_position is not a supported value" in error for error in result.errors)
    assert any("info_box_placement is not a supported value" in error for error in result.errors)
    assert any("number_of_lines" in error for error in result.errors)
    assert any("line_width" in error for error in result.errors)


def test_validation_label_count_parsing_matches_decoding() -> None:
    """Integer strings are accepted like the decoder does; other values are errors."""

    assert validate_chart_definition(_payload(style={"y_axis_number_of_labels": "3"})).is_valid is True
    for bad in ("three", 2.5, True):
        result = validate_chart_definition(_payload(style={"y_axis_number_of_labels": bad}))
        assert result.is_valid is False
        assert any("must be an integer" in error for error in result.errors)


def test_validation_reports_malformed_data_sets() -> None:
    """Data set decoding errors become validation errors."""

    result = validate_chart_definition(_payload(data_sets={"kind": "pie"}))

    assert result.is_valid is False
    assert result.errors == ("Unknown data set kind: 'pie'.",)


def test_label_count_mismatch_is_a_warning() -> None:
    """Mismatched chart-level labels are valid but flagged."""

    result = validate_chart_definition(
        _payload(style={"x_axis_labels_from": "chart_data"}, x_axis_labels=["a", "b", "c"])
    )

    assert result.is_valid is True
    assert result.warnings == ("x_axis_labels has 3 entries for 2 data points; labels will be truncated.",)


def test_ignored_and_missing_label_lists_are_warnings() -> None:
    """Unused or absent chart-level label lists are flagged."""

    ignored = validate_chart_definition(_payload(x_axis_labels=["a", "b"]))
    missing = validate_chart_definition(_payload(style={"x_axis_labels_from": "chart_data"}))

    assert ignored.is_valid is True
    assert any("is ignored" in warning for warning in ignored.warnings)
    assert missing.is_valid is True
    assert any("no x_axis_labels are set" in warning for warning in missing.warnings)


def test_empty_data_is_a_warning() -> None:
    """Empty data sets are valid; statistics default to zero."""

    result = validate_chart_definition(_payload(data_sets={"kind": "multi", "data_sets": []}))

    assert result.is_valid is True
    assert any("no data points" in warning for warning in result.warnings)


def test_null_grid_fields_fall_back_to_defaults() -> None:
    """Grid fields set to null are valid and use the grid defaults."""

    result = validate_chart_definition(
        _payload(
            style={
                "x_axis_grid_style": {"number_of_lines": None},
                "y_axis_grid_style": {"line_width": None, "dash_phase": None, "dash": None},
            }
        )
    )

    assert result.is_valid is True


@pytest.mark.parametrize(
    "grid, field",
    [
        ({"dash_phase": [1]}, "dash_phase"),
        ({"dash": [1, "x"]}, "dash"),
        ({"dash": "5,10"}, "dash"),
        ({"line_width": ".inf"}, "line_width"),
        ({"number_of_lines": "many"}, "number_of_lines"),
    ],
)
def test_malformed_grid_fields_are_errors(grid: dict, field: str) -> None:
    """Malformed grid values are reported instead of raising."""

    result = validate_chart_definition(_payload(style={"x_axis_grid_style": grid}))

    assert result.is_valid is False
    assert any(f"x_axis_grid_style.{field}" in error for error in result.errors)


@pytest.mark.parametrize(
    "data_sets, message",
    [
        ({"kind": "multi", "data_sets": [5]}, "data_sets[0] must be a mapping"),
        ({"data_points": [1, "inf"]}, "data_points[1] requires a numeric value"),
        ({"data_points": [float("nan"), 1, 5]}, "data_points[0] requires a numeric value"),
    ],
)
def test_malformed_or_non_finite_data_are_errors(data_sets: dict, message: str) -> None:
    """Non-mapping series and non-finite values are reported instead of raising."""

    result = validate_chart_definition(_payload(data_sets=data_sets))

    assert result.is_valid is False
    assert any(message in error for error in result.errors)

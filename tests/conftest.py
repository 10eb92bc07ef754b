"""Pytest fixtures shared across chart tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from charts.dto import DataPoint, MultiDataSet, SingleDataSet


def make_single(values: Sequence[float], *, labels: Sequence[str | None] | None = None) -> SingleDataSet:
    """Build a SingleDataSet from raw values and optional labels."""

    label_list = list(labels) if labels is not None else [None] * len(values)
    return SingleDataSet(
        data_points=tuple(DataPoint(value=v, x_axis_label=label) for v, label in zip(values, label_list, strict=True))
    )


@pytest.fixture
def make_series():
    """Return the SingleDataSet builder used by parametrized tests."""

    return make_single


@pytest.fixture
def single_data_set() -> SingleDataSet:
    """Return the [2, 4, 6, 8] series labelled Q1..Q4."""

    return make_single([2, 4, 6, 8], labels=["Q1", "Q2", "Q3", "Q4"])


@pytest.fixture
def multi_data_set() -> MultiDataSet:
    """Return two series of different lengths."""

    return MultiDataSet(
        data_sets=(
            make_single([3, -1, 7], labels=["a", "b", "c"]),
            make_single([10, 2, 4, 0], labels=["Mon", "Tue", "Wed", "Thu"]),
        )
    )


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no filesystem access.
    - `integration`: tests touching files, YAML parsing or the CLI.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )

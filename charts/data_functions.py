"""Summary statistics over single and multi data sets.

Every function is total: an empty data set yields 0.0 instead of raising.
Multi data set statistics flatten all series into one sequence of values
(in series order, then point order) and apply the single-series rule.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .dto import MultiDataSet, SingleDataSet

log = logging.getLogger(__name__)

EMPTY_DATA_SET_VALUE = 0.0


def flatten_values(data_sets: MultiDataSet) -> tuple[float, ...]:
    """Return the union of all point values across every series.

    Args:
        data_sets: Multi data set to flatten.

    Returns:
        Values of the first series, then the second, and so on.
    """

    values: list[float] = []
    for data_set in data_sets.data_sets:
        values.extend(data_set.values())
    return tuple(values)


def values_min(values: Sequence[float]) -> float:
    """Lowest value, or 0.0 for an empty sequence."""

    if not values:
        log.debug("Minimum requested for an empty data set; returning %s.", EMPTY_DATA_SET_VALUE)
        return EMPTY_DATA_SET_VALUE
    return float(min(values))


def values_max(values: Sequence[float]) -> float:
    """Highest value, or 0.0 for an empty sequence."""

    if not values:
        log.debug("Maximum requested for an empty data set; returning %s.", EMPTY_DATA_SET_VALUE)
        return EMPTY_DATA_SET_VALUE
    return float(max(values))


def values_range(values: Sequence[float]) -> float:
    """Difference between the highest and lowest value, or 0.0 when empty."""

    if not values:
        log.debug("Range requested for an empty data set; returning %s.", EMPTY_DATA_SET_VALUE)
        return EMPTY_DATA_SET_VALUE
    return float(max(values)) - float(min(values))


def values_average(values: Sequence[float]) -> float:
    """Arithmetic mean of the values, or 0.0 when empty."""

    if not values:
        log.debug("Average requested for an empty data set; returning %s.", EMPTY_DATA_SET_VALUE)
        return EMPTY_DATA_SET_VALUE
    return sum(values) / len(values)


def data_set_range(data_set: SingleDataSet) -> float:
    return values_range(data_set.values())


def data_set_min_value(data_set: SingleDataSet) -> float:
    return values_min(data_set.values())


def data_set_max_value(data_set: SingleDataSet) -> float:
    return values_max(data_set.values())


def data_set_average(data_set: SingleDataSet) -> float:
    return values_average(data_set.values())


def multi_data_set_range(data_sets: MultiDataSet) -> float:
    return values_range(flatten_values(data_sets))


def multi_data_set_min_value(data_sets: MultiDataSet) -> float:
    return values_min(flatten_values(data_sets))


def multi_data_set_max_value(data_sets: MultiDataSet) -> float:
    return values_max(flatten_values(data_sets))


def multi_data_set_average(data_sets: MultiDataSet) -> float:
    """Mean over the union of all values, not a mean of per-series means."""

    return values_average(flatten_values(data_sets))

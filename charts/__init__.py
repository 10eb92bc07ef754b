"""Pure chart-data package for line and bar charts.

This package contains deterministic, testable computations that operate on
in-memory data sets and style descriptors. It must not perform any I/O.
"""

from .chart_data import LineAndBarChartData

__all__ = ["LineAndBarChartData"]

#!/usr/bin/env python3
"""Print the axis and statistics report for a chart definition.

Loads a YAML chart definition, validates it and prints a JSON report with the
summary statistics, X and Y axis labels, header location and layout hints.
"""

from __future__ import annotations

import argparse
import json
import logging

from charting import settings
from charting.loader import parse_chart_definition, read_definition_payload
from charting.report import build_axis_report
from charting.validator import validate_chart_definition


def main(argv: list[str] | None = None) -> int:
    """Run the report and print JSON; returns 1 when the definition is invalid."""

    parser = argparse.ArgumentParser(description="Report axis labels and statistics for a chart definition.")
    parser.add_argument("--definition", required=True, help="Path to the YAML chart definition file.")
    parser.add_argument("--decimals", type=int, default=None, help="Decimal places for formatted Y axis labels.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    payload = read_definition_payload(args.definition)
    validation = validate_chart_definition(payload)
    if not validation.is_valid:
        print(json.dumps({"errors": list(validation.errors), "warnings": list(validation.warnings)}, indent=2))
        return 1

    chart = parse_chart_definition(payload).to_chart_data()
    report = build_axis_report(chart, decimals=args.decimals)
    report["warnings"] = list(validation.warnings)
    print(json.dumps(report, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

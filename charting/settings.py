"""Environment-driven settings for chart loading and reporting.

Values are read once at import time so defaults are not checked into chart
definition files.
"""

from __future__ import annotations

import os


def _env_int(name: str, *, default: int) -> int:
    """Parse an integer environment variable.

    Args:
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        Parsed integer value.
    """

    raw = os.getenv(name)
    if raw is None:
        return default
    return int(raw.strip())


def _env_str(name: str, *, default: str) -> str:
    """Read a string environment variable, keeping surrounding whitespace."""

    raw = os.getenv(name)
    if raw is None:
        return default
    return raw


X_AXIS_LABEL_PADDING = _env_str("CHARTS_X_AXIS_LABEL_PADDING", default="")
Y_AXIS_LABEL_DECIMALS = _env_int("CHARTS_Y_AXIS_LABEL_DECIMALS", default=0)
LOG_LEVEL = _env_str("CHARTS_LOG_LEVEL", default="WARNING").strip().upper()

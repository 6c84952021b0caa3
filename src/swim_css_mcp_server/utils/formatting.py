"""Formatting utilities for swim times and paces."""

import math

from swim_css_mcp_server.models.css import TimeBreakdown


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_time(seconds: float | None, include_decimals: bool = False) -> str:
    """
    Convert seconds to M:SS, or M:SS.d when include_decimals is set.

    Returns "-" for a missing or non-numeric value. Without decimals the
    seconds are rounded, so 59.6 seconds past the minute renders as ":60".
    """
    if seconds is None or not math.isfinite(seconds):
        return "-"

    mins = math.floor(seconds / 60)
    remainder = seconds % 60

    if include_decimals and remainder % 1 != 0:
        secs = math.floor(remainder)
        tenths = _round_half_up((remainder - secs) * 10)
        return f"{mins}:{secs:02d}.{tenths}"

    secs = _round_half_up(remainder)
    return f"{mins}:{secs:02d}"


def format_pace(seconds_per_100: float | None) -> str:
    """Convert a per-100 pace in seconds to M:SS.d/100 format (e.g., '1:44.5/100')."""
    if seconds_per_100 is None or not math.isfinite(seconds_per_100):
        return "-"
    return f"{format_time(seconds_per_100, include_decimals=True)}/100"


def breakdown_trial(seconds: float, distance: int) -> TimeBreakdown:
    """
    Build the display values for one trial.

    Args:
        seconds: Trial time in seconds
        distance: Trial distance (e.g. 200 or 400)

    Returns:
        TimeBreakdown with the formatted time and its per-100 pace
    """
    pace = seconds / (distance / 100)
    return TimeBreakdown(
        distance=distance,
        seconds=seconds,
        min_sec=format_time(seconds, include_decimals=True),
        pace=format_time(pace, include_decimals=True),
    )

"""Utility functions for the Swim CSS MCP Server."""

from swim_css_mcp_server.utils.formatting import breakdown_trial, format_pace, format_time
from swim_css_mcp_server.utils.parsing import (
    PERIOD_FORMAT_MAX_MINUTES,
    parse_time,
    validate_time_input,
)

__all__ = [
    "format_time",
    "format_pace",
    "breakdown_trial",
    "PERIOD_FORMAT_MAX_MINUTES",
    "parse_time",
    "validate_time_input",
]

"""MCP tools for parsing times and calculating CSS."""

from typing import Any

from swim_css_mcp_server.calculator import calculate_css_from_inputs
from swim_css_mcp_server.errors import CSSValidationError, error_message
from swim_css_mcp_server.models.css import CSSLimits
from swim_css_mcp_server.utils.formatting import breakdown_trial, format_pace
from swim_css_mcp_server.utils.formatting import format_time as render_time
from swim_css_mcp_server.utils.parsing import parse_time as read_time
from swim_css_mcp_server.utils.parsing import validate_time_input


def register_calculator_tools(mcp, limits: CSSLimits, lenient: bool = False):
    """Register CSS calculator MCP tools."""

    @mcp.tool()
    def parse_time(time_input: str) -> dict[str, Any]:
        """
        Parse a swim time into seconds.

        Accepts M:SS, M:SS.s, "M SS", M.SS (up to 12 minutes) or plain seconds.

        Args:
            time_input: Time as typed by the swimmer, e.g. "3:28" or "208.5"

        Returns:
            Dictionary containing the time in seconds and its M:SS form
        """
        seconds = read_time(time_input)
        if seconds is None:
            return {"error": "Invalid time format"}
        return {
            "data": {
                "input": time_input,
                "seconds": seconds,
                "formatted": render_time(seconds, include_decimals=True),
            }
        }

    @mcp.tool()
    def format_time(seconds: float, include_decimals: bool = False) -> dict[str, Any]:
        """
        Format seconds as M:SS, or M:SS.d with include_decimals.

        Args:
            seconds: Time in seconds
            include_decimals: Show tenths of a second when present (default: False)

        Returns:
            Dictionary containing the formatted time
        """
        return {"data": {"formatted": render_time(seconds, include_decimals=include_decimals)}}

    @mcp.tool()
    def validate_time(time_input: str, distance: int) -> dict[str, Any]:
        """
        Check a single trial time before calculating CSS.

        Args:
            time_input: Time as typed by the swimmer
            distance: Trial distance, 200 or 400

        Returns:
            Dictionary with valid flag, and the error kind and message when invalid
        """
        kind = validate_time_input(time_input, distance, limits)
        if kind is None:
            return {"data": {"valid": True, "kind": None, "message": None}}
        return {
            "data": {
                "valid": False,
                "kind": kind.value,
                "message": error_message(kind, limits),
            }
        }

    @mcp.tool()
    def calculate_css(time_200: str, time_400: str) -> dict[str, Any]:
        """
        Calculate Critical Swim Speed from a 200 and a 400 time trial.

        CSS = (400 time - 200 time) / 2, in seconds per 100.

        Args:
            time_200: 200 trial time, e.g. "3:28"
            time_400: 400 trial time, e.g. "7:20"

        Returns:
            Dictionary containing CSS, both trial paces and their formatted forms
        """
        try:
            result = calculate_css_from_inputs(time_200, time_400, limits, lenient=lenient)
        except CSSValidationError as e:
            return e.to_dict()

        return {
            "data": {
                **result.model_dump(),
                "css_formatted": format_pace(result.css),
                "pace200_formatted": format_pace(result.pace200),
                "pace400_formatted": format_pace(result.pace400),
                "trials": [
                    breakdown_trial(result.pace200 * 2, 200).model_dump(),
                    breakdown_trial(result.pace400 * 4, 400).model_dump(),
                ],
            }
        }

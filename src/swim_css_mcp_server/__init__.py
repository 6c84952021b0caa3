"""Critical Swim Speed calculator exposed as an MCP server."""

from swim_css_mcp_server.calculator import calculate_css, calculate_css_from_inputs
from swim_css_mcp_server.errors import ConfigurationError, CSSError, CSSValidationError
from swim_css_mcp_server.models import CSSLimits, CSSResult, TimeBreakdown, ValidationErrorKind
from swim_css_mcp_server.utils import format_time, parse_time, validate_time_input

__all__ = [
    "calculate_css",
    "calculate_css_from_inputs",
    "parse_time",
    "format_time",
    "validate_time_input",
    "CSSLimits",
    "CSSResult",
    "TimeBreakdown",
    "ValidationErrorKind",
    "CSSError",
    "CSSValidationError",
    "ConfigurationError",
]

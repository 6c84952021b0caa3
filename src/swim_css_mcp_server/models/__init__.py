"""Pydantic models for the Swim CSS MCP Server."""

from swim_css_mcp_server.models.css import (
    CSSLimits,
    CSSResult,
    TimeBreakdown,
    ValidationErrorKind,
)

__all__ = [
    "ValidationErrorKind",
    "CSSLimits",
    "CSSResult",
    "TimeBreakdown",
]

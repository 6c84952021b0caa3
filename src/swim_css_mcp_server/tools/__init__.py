"""MCP tools for the Swim CSS MCP Server."""

from swim_css_mcp_server.tools.calculator import register_calculator_tools

__all__ = [
    "register_calculator_tools",
]


def register_all_tools(mcp, limits, lenient=False):
    """Register all MCP tools with the server."""
    register_calculator_tools(mcp, limits, lenient)

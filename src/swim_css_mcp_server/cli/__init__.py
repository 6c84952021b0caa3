"""CLI tools for the Swim CSS MCP Server."""

from swim_css_mcp_server.cli.calculate import main as calculate_main

__all__ = [
    "calculate_main",
]

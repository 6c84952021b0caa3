#!/usr/bin/env python3
"""
MCP server for Critical Swim Speed calculations.
This server exposes tools to parse swim times and calculate CSS from a 200/400 test.
"""

import sys

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from swim_css_mcp_server.config import is_lenient, load_limits
from swim_css_mcp_server.errors import ConfigurationError
from swim_css_mcp_server.tools import register_all_tools


def create_server(limits=None, lenient: bool = False) -> FastMCP:
    """
    Create the MCP server with all tools registered.

    Args:
        limits: CSSLimits to validate trial times against (default: read from environment)
        lenient: Skip the plausibility bounds checks

    Returns:
        Configured FastMCP server
    """
    if limits is None:
        limits = load_limits()
    mcp = FastMCP("Swim CSS Calculator")
    register_all_tools(mcp, limits, lenient)
    return mcp


def main() -> int:
    """Main function to start the Swim CSS MCP server."""
    load_dotenv()

    # stdout carries the MCP protocol, status lines go to stderr
    print("Starting Swim CSS MCP server!", file=sys.stderr)

    try:
        limits = load_limits()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    lenient = is_lenient()
    print(
        f"200 limits: {limits.min200:g}-{limits.max200:g}s, "
        f"400 limits: {limits.min400:g}-{limits.max400:g}s"
        + (" (lenient mode, limits not enforced)" if lenient else ""),
        file=sys.stderr,
    )

    mcp = create_server(limits, lenient)
    mcp.run(transport="stdio")
    return 0


if __name__ == "__main__":
    sys.exit(main())

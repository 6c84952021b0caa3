"""
Pytest configuration file.

Provides a stand-in for FastMCP that records registered tools so they can be
called directly, and clears calculator environment variables between tests.
"""

import pytest

from swim_css_mcp_server.config import LENIENT_ENV_VAR, LIMIT_ENV_VARS


class RecordingMCP:
    """Collects functions registered with @mcp.tool()."""

    def __init__(self):
        self.tools = {}

    def tool(self):
        def decorator(fn):
            self.tools[fn.__name__] = fn
            return fn

        return decorator


@pytest.fixture
def recording_mcp():
    return RecordingMCP()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run each test without CSS_* overrides or a stray .env file."""
    for var in (*LIMIT_ENV_VARS, LENIENT_ENV_VAR):
        # setenv first so values loaded from .env files during a test are undone
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)

"""Tests for swim_css_mcp_server/config.py and the CSSLimits model."""

import pytest
from pydantic import ValidationError

from swim_css_mcp_server.config import is_lenient, load_limits
from swim_css_mcp_server.errors import ConfigurationError
from swim_css_mcp_server.models.css import CSSLimits


def test_default_limits():
    """Test the default plausibility bounds."""
    limits = CSSLimits()
    assert (limits.min200, limits.max200) == (100, 360)
    assert (limits.min400, limits.max400) == (210, 720)


def test_limits_are_frozen():
    """Test that limits cannot be changed after creation."""
    limits = CSSLimits()
    with pytest.raises(ValidationError):
        limits.min200 = 50


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min200": 0},
        {"max400": -1},
        {"min200": 400},
        {"min400": 800},
    ],
)
def test_invalid_limits_rejected(kwargs):
    """Test non-positive limits and min > max pairs."""
    with pytest.raises(ValidationError):
        CSSLimits(**kwargs)


def test_load_limits_defaults_when_unset():
    """Test that an empty environment gives the default limits."""
    assert load_limits({}) == CSSLimits()


def test_load_limits_from_environment(monkeypatch):
    """Test overrides read from os.environ."""
    monkeypatch.setenv("CSS_TIME200_MIN", "90")
    monkeypatch.setenv("CSS_TIME400_MAX", "800.5")
    limits = load_limits()
    assert limits.min200 == 90
    assert limits.max200 == 360
    assert limits.max400 == 800.5


def test_load_limits_ignores_blank_values():
    """Test that blank variables keep their defaults."""
    assert load_limits({"CSS_TIME200_MAX": "  "}) == CSSLimits()


def test_load_limits_rejects_non_numeric():
    """Test a readable error for a non-numeric value."""
    with pytest.raises(ConfigurationError, match="CSS_TIME400_MIN"):
        load_limits({"CSS_TIME400_MIN": "3:30"})


def test_load_limits_rejects_inconsistent_limits():
    """Test that min > max is reported as a configuration error."""
    with pytest.raises(ConfigurationError):
        load_limits({"CSS_TIME200_MIN": "400"})


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1", True),
        ("true", True),
        ("YES", True),
        ("on", True),
        ("0", False),
        ("", False),
        ("no", False),
    ],
)
def test_is_lenient(value, expected):
    """Test the CSS_LENIENT switch."""
    assert is_lenient({"CSS_LENIENT": value}) is expected


def test_is_lenient_unset():
    """Test lenient mode is off by default."""
    assert is_lenient() is False

"""Calculator configuration loaded from environment variables."""

import os
from collections.abc import Mapping

from pydantic import ValidationError

from swim_css_mcp_server.errors import ConfigurationError
from swim_css_mcp_server.models.css import CSSLimits

# Environment variable -> CSSLimits field
LIMIT_ENV_VARS = {
    "CSS_TIME200_MIN": "min200",
    "CSS_TIME200_MAX": "max200",
    "CSS_TIME400_MIN": "min400",
    "CSS_TIME400_MAX": "max400",
}

LENIENT_ENV_VAR = "CSS_LENIENT"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def load_limits(env: Mapping[str, str] | None = None) -> CSSLimits:
    """
    Build calculator limits from environment variables.

    Unset variables keep their default value.

    Args:
        env: Mapping to read from, defaults to os.environ

    Returns:
        CSSLimits with any overrides applied

    Raises:
        ConfigurationError: If a value is not a number or the limits are inconsistent
    """
    if env is None:
        env = os.environ

    overrides: dict[str, float] = {}
    for var, field in LIMIT_ENV_VARS.items():
        raw = env.get(var)
        if raw is None or not raw.strip():
            continue
        try:
            overrides[field] = float(raw)
        except ValueError as err:
            raise ConfigurationError(f"{var} must be a number of seconds, got {raw!r}") from err

    try:
        return CSSLimits(**overrides)
    except ValidationError as err:
        raise ConfigurationError(f"Invalid CSS limits: {err}") from err


def is_lenient(env: Mapping[str, str] | None = None) -> bool:
    """Whether CSS_LENIENT asks for the bounds checks to be skipped."""
    if env is None:
        env = os.environ
    return env.get(LENIENT_ENV_VAR, "").strip().lower() in _TRUE_VALUES

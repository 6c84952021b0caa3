"""Exceptions for the Swim CSS MCP Server."""

from swim_css_mcp_server.models.css import CSSLimits, ValidationErrorKind
from swim_css_mcp_server.utils.formatting import format_time

_FIXED_MESSAGES = {
    ValidationErrorKind.TIMES_MUST_BE_POSITIVE: "Times must be positive values",
    ValidationErrorKind.TIME_400_MUST_BE_GREATER: "400m time must be greater than 200m time",
    ValidationErrorKind.PACE_FASTER_THAN_EXPECTED: "400m pace cannot be faster than 200m pace",
    ValidationErrorKind.INVALID_INPUT: "Invalid time format",
    ValidationErrorKind.SECONDS_MUST_BE_LESS_THAN_60: "Seconds must be less than 60",
}


def limit_for(kind: ValidationErrorKind, limits: CSSLimits | None = None) -> float | None:
    """Return the limit a range error refers to, or None for other kinds."""
    limits = limits or CSSLimits()
    return {
        ValidationErrorKind.TIME_200_TOO_FAST: limits.min200,
        ValidationErrorKind.TIME_200_TOO_SLOW: limits.max200,
        ValidationErrorKind.TIME_400_TOO_FAST: limits.min400,
        ValidationErrorKind.TIME_400_TOO_SLOW: limits.max400,
    }.get(kind)


def error_message(
    kind: ValidationErrorKind,
    limits: CSSLimits | None = None,
    limit: float | None = None,
) -> str:
    """
    Get the human-readable message for a validation error.

    Args:
        kind: The validation error kind
        limits: Limits used to fill in range messages when ``limit`` is not given
        limit: The violated limit in seconds, if already known

    Returns:
        Message suitable for showing next to the offending input
    """
    if kind in _FIXED_MESSAGES:
        return _FIXED_MESSAGES[kind]

    if limit is None:
        limit = limit_for(kind, limits)
    if kind in (ValidationErrorKind.TIME_200_TOO_FAST, ValidationErrorKind.TIME_400_TOO_FAST):
        return f"Time must be at least {format_time(limit)}"
    return f"Time must be less than {format_time(limit)}"


class CSSError(Exception):
    """Base exception for CSS calculator errors."""


class ConfigurationError(CSSError):
    """Raised when the calculator limits cannot be loaded or are invalid."""


class CSSValidationError(CSSError):
    """Raised when trial times fail a validation rule."""

    def __init__(self, kind: ValidationErrorKind, limit: float | None = None):
        self.kind = kind
        self.limit = limit
        super().__init__(error_message(kind, limit=limit))

    def to_dict(self) -> dict[str, str | float | None]:
        """Serialize for tool responses."""
        return {"error": str(self), "kind": self.kind.value, "limit": self.limit}

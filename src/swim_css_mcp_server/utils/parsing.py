"""Parsing utilities for swim trial times."""

import math
import re

from swim_css_mcp_server.models.css import CSSLimits, ValidationErrorKind

# Largest minutes value for which "M.SS" is read as minutes and seconds
# rather than decimal seconds. 12 minutes covers any plausible 400 trial.
PERIOD_FORMAT_MAX_MINUTES = 12

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_REAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PERIOD_RE = re.compile(r"([0-9]+)\.([0-9]{2})")
_WHITESPACE_RE = re.compile(r"\s+")


def _to_int(text: str) -> int | None:
    text = text.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


def _to_float(text: str) -> float | None:
    text = text.strip()
    if not _REAL_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def _split_min_sec(text: str) -> list[str] | None:
    """Split a colon or whitespace separated time, or None if it has neither."""
    if ":" in text:
        return text.split(":")
    if _WHITESPACE_RE.search(text):
        return _WHITESPACE_RE.split(text)
    return None


def _parse_min_sec(parts: list[str]) -> float | None:
    if len(parts) != 2:
        return None
    minutes = _to_int(parts[0])
    seconds = _to_float(parts[1])
    if minutes is None or seconds is None:
        return None
    if minutes < 0 or not 0 <= seconds < 60:
        return None
    return minutes * 60 + seconds


def parse_time(value: str, max_period_minutes: int = PERIOD_FORMAT_MAX_MINUTES) -> float | None:
    """
    Parse a free-form swim time into total seconds.

    Accepted formats, checked in order:
        "3:28" / "3:28.5"   minutes and seconds separated by a colon
        "3 28" / "3 28.5"   minutes and seconds separated by whitespace
        "3.28"              minutes and two-digit seconds, only when the
                            minutes are at most ``max_period_minutes``
        "208" / "208.5"     total seconds

    Once a colon or whitespace separator is found the input either parses
    in that format or is rejected; it is never retried as plain seconds.

    Args:
        value: Raw user input
        max_period_minutes: Upper bound for reading "M.SS" as minutes

    Returns:
        Total seconds, or None if the input is not a valid positive time
    """
    trimmed = value.strip()
    if not trimmed:
        return None

    parts = _split_min_sec(trimmed)
    if parts is not None:
        return _parse_min_sec(parts)

    period_match = _PERIOD_RE.fullmatch(trimmed)
    if period_match:
        minutes = int(period_match.group(1))
        seconds = int(period_match.group(2))
        if minutes <= max_period_minutes:
            if seconds < 60:
                return float(minutes * 60 + seconds)
            return None
        # Too many minutes to be M.SS, read it as decimal seconds below

    seconds = _to_float(trimmed)
    if seconds is None or seconds <= 0:
        return None
    return seconds


def _seconds_part_too_large(trimmed: str, max_period_minutes: int) -> bool:
    parts = _split_min_sec(trimmed)
    if parts is not None:
        if len(parts) != 2:
            return False
        seconds = _to_float(parts[1])
        return seconds is not None and seconds >= 60

    period_match = _PERIOD_RE.fullmatch(trimmed)
    if period_match:
        minutes = int(period_match.group(1))
        seconds = int(period_match.group(2))
        return minutes <= max_period_minutes and seconds >= 60
    return False


def validate_time_input(
    value: str,
    distance: int,
    limits: CSSLimits | None = None,
    max_period_minutes: int = PERIOD_FORMAT_MAX_MINUTES,
) -> ValidationErrorKind | None:
    """
    Check a single trial input before any calculation.

    Blank input is treated as incomplete rather than invalid and returns None.
    Range checks only apply to the 200 and 400 distances.

    Args:
        value: Raw user input
        distance: Trial distance (200 or 400)
        limits: Plausibility bounds, defaults to CSSLimits()
        max_period_minutes: Upper bound for reading "M.SS" as minutes

    Returns:
        The first problem found, or None if the input is acceptable
    """
    trimmed = value.strip()
    if not trimmed:
        return None

    if _seconds_part_too_large(trimmed, max_period_minutes):
        return ValidationErrorKind.SECONDS_MUST_BE_LESS_THAN_60

    time = parse_time(trimmed, max_period_minutes=max_period_minutes)
    if time is None:
        return ValidationErrorKind.INVALID_INPUT

    limits = limits or CSSLimits()
    if distance == 200:
        if time < limits.min200:
            return ValidationErrorKind.TIME_200_TOO_FAST
        if time > limits.max200:
            return ValidationErrorKind.TIME_200_TOO_SLOW
    elif distance == 400:
        if time < limits.min400:
            return ValidationErrorKind.TIME_400_TOO_FAST
        if time > limits.max400:
            return ValidationErrorKind.TIME_400_TOO_SLOW

    return None

"""
Critical Swim Speed calculation.

CSS is the pace per 100 a swimmer can hold at threshold, estimated from a
200 and a 400 time trial:

    CSS = (time400 - time200) / 2

Inputs are checked against plausibility limits before anything is computed.
The order of the checks decides which error is reported when several
rules are broken at once.
"""

import math

from swim_css_mcp_server.errors import CSSValidationError
from swim_css_mcp_server.models.css import CSSLimits, CSSResult, ValidationErrorKind
from swim_css_mcp_server.utils.parsing import parse_time


def check_limits(time200: float, time400: float, limits: CSSLimits) -> None:
    """Raise CSSValidationError if either trial time is outside its limits."""
    if time200 < limits.min200:
        raise CSSValidationError(ValidationErrorKind.TIME_200_TOO_FAST, limits.min200)
    if time200 > limits.max200:
        raise CSSValidationError(ValidationErrorKind.TIME_200_TOO_SLOW, limits.max200)
    if time400 < limits.min400:
        raise CSSValidationError(ValidationErrorKind.TIME_400_TOO_FAST, limits.min400)
    if time400 > limits.max400:
        raise CSSValidationError(ValidationErrorKind.TIME_400_TOO_SLOW, limits.max400)


def calculate_css(
    time200: float,
    time400: float,
    limits: CSSLimits | None = None,
    *,
    lenient: bool = False,
) -> CSSResult:
    """
    Calculate CSS and the per-100 paces of both trials.

    Args:
        time200: 200 trial time in seconds
        time400: 400 trial time in seconds
        limits: Plausibility bounds, defaults to CSSLimits()
        lenient: Skip the plausibility bounds and only check positivity,
            ordering and pace

    Returns:
        CSSResult with css, pace200 and pace400 in seconds per 100

    Raises:
        CSSValidationError: If the times break a validation rule
    """
    if not (math.isfinite(time200) and math.isfinite(time400)):
        raise CSSValidationError(ValidationErrorKind.INVALID_INPUT)

    if time200 <= 0 or time400 <= 0:
        raise CSSValidationError(ValidationErrorKind.TIMES_MUST_BE_POSITIVE)

    if not lenient:
        check_limits(time200, time400, limits or CSSLimits())

    if time400 <= time200:
        raise CSSValidationError(ValidationErrorKind.TIME_400_MUST_BE_GREATER)

    pace200 = time200 / 2
    pace400 = time400 / 4

    # Holding a faster pace over the longer trial is not physiologically plausible
    if pace400 < pace200:
        raise CSSValidationError(ValidationErrorKind.PACE_FASTER_THAN_EXPECTED)

    css = (time400 - time200) / 2
    return CSSResult(css=css, pace200=pace200, pace400=pace400)


def calculate_css_from_inputs(
    time200_input: str,
    time400_input: str,
    limits: CSSLimits | None = None,
    *,
    lenient: bool = False,
) -> CSSResult:
    """
    Parse two raw trial inputs and calculate CSS.

    Raises:
        CSSValidationError: InvalidInput if either input does not parse,
            otherwise whatever calculate_css raises
    """
    time200 = parse_time(time200_input)
    time400 = parse_time(time400_input)
    if time200 is None or time400 is None:
        raise CSSValidationError(ValidationErrorKind.INVALID_INPUT)
    return calculate_css(time200, time400, limits, lenient=lenient)

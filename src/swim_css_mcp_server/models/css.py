"""Pydantic models for CSS test calculations."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ValidationErrorKind(str, Enum):
    """Reasons a time input or a CSS calculation can be rejected."""

    TIMES_MUST_BE_POSITIVE = "TimesMustBePositive"
    TIME_200_TOO_FAST = "Time200TooFast"
    TIME_200_TOO_SLOW = "Time200TooSlow"
    TIME_400_TOO_FAST = "Time400TooFast"
    TIME_400_TOO_SLOW = "Time400TooSlow"
    TIME_400_MUST_BE_GREATER = "Time400MustBeGreater"
    PACE_FASTER_THAN_EXPECTED = "PaceFasterThanExpected"
    INVALID_INPUT = "InvalidInput"
    SECONDS_MUST_BE_LESS_THAN_60 = "SecondsMustBeLessThan60"


class CSSLimits(BaseModel):
    """
    Plausibility bounds for the two trial times, in seconds.

    The defaults reject anything faster than world-record pace
    (1:40 for 200, 3:30 for 400) and anything slower than 6:00 / 12:00.
    """

    model_config = ConfigDict(frozen=True)

    min200: float = Field(default=100, gt=0)
    max200: float = Field(default=360, gt=0)
    min400: float = Field(default=210, gt=0)
    max400: float = Field(default=720, gt=0)

    @model_validator(mode="after")
    def check_ranges(self) -> "CSSLimits":
        """Reject limit pairs where the minimum exceeds the maximum."""
        if self.min200 > self.max200:
            raise ValueError(f"min200 ({self.min200}) must not exceed max200 ({self.max200})")
        if self.min400 > self.max400:
            raise ValueError(f"min400 ({self.min400}) must not exceed max400 ({self.max400})")
        return self


class CSSResult(BaseModel):
    """Critical Swim Speed and the per-100 paces of both trials, in seconds."""

    model_config = ConfigDict(frozen=True)

    css: float
    pace200: float
    pace400: float


class TimeBreakdown(BaseModel):
    """Display values for a single trial."""

    model_config = ConfigDict(frozen=True)

    distance: int
    seconds: float
    min_sec: str  # M:SS(.d)
    pace: str  # M:SS(.d) per 100

#!/usr/bin/env python3
"""
Calculate Critical Swim Speed from a 200 and a 400 time trial.

Times can be entered as M:SS, M:SS.s, "M SS", M.SS or plain seconds.
The report shows, for each trial:
- The trial time
- The pace per 100
And the resulting CSS pace per 100.
"""

import argparse
import json

from dotenv import load_dotenv

from swim_css_mcp_server.calculator import calculate_css
from swim_css_mcp_server.config import is_lenient, load_limits
from swim_css_mcp_server.errors import ConfigurationError, CSSValidationError, error_message
from swim_css_mcp_server.models.css import CSSResult, TimeBreakdown
from swim_css_mcp_server.utils.formatting import breakdown_trial, format_pace
from swim_css_mcp_server.utils.parsing import parse_time, validate_time_input


def print_report(trials: list[TimeBreakdown], result: CSSResult) -> None:
    """Print the trial breakdowns and CSS result."""
    print("=" * 80)
    print("CRITICAL SWIM SPEED")
    print("=" * 80)
    print()

    for trial in trials:
        print(
            f"{trial.distance}m trial:  {trial.min_sec:>8}  ({trial.seconds:g} sec)   "
            f"pace {trial.pace}/100"
        )
    print()

    print("-" * 80)
    print(f"CSS:            {format_pace(result.css)}")
    print(f"200m pace:      {format_pace(result.pace200)}")
    print(f"400m pace:      {format_pace(result.pace400)}")
    print("-" * 80)


def main(argv: list[str] | None = None) -> int:
    """Main function to calculate CSS from the command line."""
    parser = argparse.ArgumentParser(
        description="Calculate Critical Swim Speed from 200 and 400 time trials"
    )
    parser.add_argument("time_200", help="200 trial time (e.g. 3:28, 3.28 or 208)")
    parser.add_argument("time_400", help="400 trial time (e.g. 7:20, 7.20 or 440)")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip the plausibility limits (also enabled by CSS_LENIENT=1)",
    )
    parser.add_argument(
        "--env-file",
        help="Path to .env file with CSS_TIME200_MIN/MAX and CSS_TIME400_MIN/MAX overrides",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    args = parser.parse_args(argv)

    # Load environment variables
    if args.env_file:
        load_dotenv(dotenv_path=args.env_file, override=True)
    else:
        load_dotenv()

    try:
        limits = load_limits()
    except ConfigurationError as e:
        print(f"Error: {e}")
        return 1
    lenient = args.lenient or is_lenient()

    # Report input problems per trial before calculating
    times: dict[int, float] = {}
    for distance, raw in ((200, args.time_200), (400, args.time_400)):
        problem = validate_time_input(raw, distance, limits)
        if problem is not None and not (lenient and problem.value.startswith(f"Time{distance}")):
            print(f"Error: {distance}m time {raw!r}: {error_message(problem, limits)}")
            return 1
        seconds = parse_time(raw)
        if seconds is None:
            print(f"Error: {distance}m time: please enter a time")
            return 1
        times[distance] = seconds

    try:
        result = calculate_css(times[200], times[400], limits, lenient=lenient)
    except CSSValidationError as e:
        print(f"Error: {e}")
        return 1

    trials = [breakdown_trial(times[200], 200), breakdown_trial(times[400], 400)]

    if args.json:
        payload = {
            **result.model_dump(),
            "trials": [trial.model_dump() for trial in trials],
        }
        print(json.dumps(payload, indent=2))
    else:
        print_report(trials, result)

    return 0


if __name__ == "__main__":
    exit(main())

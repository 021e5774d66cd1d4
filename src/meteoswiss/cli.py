"""Command-line entry point: print the weather for a postal code."""

from __future__ import annotations

import argparse
import logging
import sys

from meteoswiss._logging import configure_logging
from meteoswiss.client import MeteoSwissClient
from meteoswiss.exceptions import MeteoSwissError
from meteoswiss.models import WeatherReport
from meteoswiss.quality import check_report

EXIT_OK = 0
EXIT_QUALITY = 1
EXIT_ERROR = 2


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="meteoswiss",
        description="Fetch current weather and forecast for a Swiss postal code.",
    )
    parser.add_argument("postal_code", type=int, help="4-digit postal code, e.g. 1201.")
    parser.add_argument(
        "--timeout-ms",
        type=int,
        default=None,
        help="Request timeout in milliseconds (0 waits forever).",
    )
    parser.add_argument(
        "--days",
        type=_non_negative_int,
        default=None,
        help="Number of forecast days to print.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Run plausibility checks and exit 1 if any fail.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log query details.")
    return parser.parse_args(argv)


def _print_report(report: WeatherReport, days: int | None) -> None:
    current = report.current_weather
    print(f"Current Temperature: {current.temperature:.1f}°C (icon {current.icon})")

    forecast = report.forecast if days is None else report.forecast[:days]
    for entry in forecast:
        print(
            f"  {entry.day_date}  {entry.temperature_min:5.1f} / {entry.temperature_max:5.1f}°C"
            f"  {entry.precipitation:4.1f} mm"
        )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(level=logging.INFO if args.verbose else logging.WARNING)

    try:
        with MeteoSwissClient(timeout_ms=args.timeout_ms) as client:
            report = client.query(args.postal_code)
    except MeteoSwissError as exc:
        print(f"Failed to retrieve weather data: {exc}", file=sys.stderr)
        return EXIT_ERROR

    with report:
        _print_report(report, args.days)
        if not args.check:
            return EXIT_OK
        problems = check_report(report)

    for problem in problems:
        print(f"Error: {problem}", file=sys.stderr)
    return EXIT_QUALITY if problems else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

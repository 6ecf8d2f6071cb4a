"""Command-line interface for planetary hours."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from datetime import date, datetime

from planetary_hours import __version__
from planetary_hours.config import Settings, get_settings
from planetary_hours.hours.formatters import (
    format_day_table,
    format_result,
    format_sun_times,
)
from planetary_hours.hours.resolver import PlanetaryHourCalculator
from planetary_hours.models.location import Location

logger = logging.getLogger(__name__)


def _add_location_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "location",
        nargs="?",
        help=(
            "Coordinates as 'lat,lon' (defaults to the configured location); "
            "put -- before a negative latitude"
        ),
    )
    parser.add_argument("--tz", help="IANA timezone, e.g. 'Europe/Paris' (default: UTC)")
    parser.add_argument("--name", help="Label shown for the location")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planetary-hours",
        description="Planetary Hours - the ruling planet of every unequal hour of the day",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Now command
    now_parser = subparsers.add_parser("now", help="Show the current planetary hour")
    _add_location_arguments(now_parser)
    when = now_parser.add_mutually_exclusive_group()
    when.add_argument(
        "--at",
        help="Resolve for this ISO instant instead of the current time",
    )
    when.add_argument(
        "--watch",
        action="store_true",
        help="Keep refreshing until interrupted",
    )

    # Sun command
    sun_parser = subparsers.add_parser("sun", help="Show sunrise, solar noon, and sunset")
    _add_location_arguments(sun_parser)
    sun_parser.add_argument("--date", help="Calendar date as YYYY-MM-DD (default: today)")
    sun_parser.add_argument(
        "--position",
        action="store_true",
        help="Also show the sun's altitude and azimuth",
    )
    sun_parser.add_argument(
        "--at",
        help="ISO instant for --position (default: now)",
    )

    # Day command
    day_parser = subparsers.add_parser("day", help="List all 24 planetary hours of a day")
    _add_location_arguments(day_parser)
    day_parser.add_argument("--date", help="Calendar date as YYYY-MM-DD (default: today)")

    return parser


def _resolve_location(args: argparse.Namespace, settings: Settings) -> Location:
    """Pick the location from the command line, falling back to settings."""
    if args.location:
        return Location.from_string(args.location, timezone=args.tz, name=args.name)

    default = settings.default_location()
    if default is None:
        raise ValueError(
            "No location given. Pass 'lat,lon' or set PLANETARY_HOURS_DEFAULT_LATITUDE "
            "and PLANETARY_HOURS_DEFAULT_LONGITUDE."
        )
    if args.tz is None and args.name is None:
        return default
    return Location(
        coordinates=default.coordinates,
        timezone=args.tz or default.timezone,
        name=args.name or default.name,
    )


def _parse_instant(value: str | None, location: Location) -> datetime | None:
    """Parse --at; naive values are read as wall time at the location."""
    if value is None:
        return None
    instant = datetime.fromisoformat(value)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=location.tzinfo())
    return instant


def _parse_date(value: str | None, location: Location) -> date:
    if value is None:
        return datetime.now(location.tzinfo()).date()
    return date.fromisoformat(value)


def _run_now(args: argparse.Namespace, location: Location, settings: Settings) -> int:
    calculator = PlanetaryHourCalculator(location)
    at = _parse_instant(args.at, location)
    if not args.watch:
        print(format_result(calculator.current_hour(at), location))
        return 0

    try:
        while True:
            print(format_result(calculator.current_hour(), location))
            print()
            time.sleep(settings.refresh_interval_seconds)
    except KeyboardInterrupt:
        return 0


def _run_sun(args: argparse.Namespace, location: Location) -> int:
    calculator = PlanetaryHourCalculator(location)
    print(format_sun_times(calculator.sun_times(_parse_date(args.date, location)), location))
    if args.position:
        from planetary_hours.astronomy.position import get_sun_position

        at = _parse_instant(args.at, location) or datetime.now(location.tzinfo())
        position = get_sun_position(location.coordinates, at)
        print(f"Altitude:   {position.altitude_deg:.2f}°")
        print(f"Azimuth:    {position.azimuth_deg:.2f}°")
    return 0


def _run_day(args: argparse.Namespace, location: Location) -> int:
    calculator = PlanetaryHourCalculator(location)
    day = _parse_date(args.date, location)
    print(f"{location.display_name()} - {day.isoformat()}")
    print(format_day_table(calculator.hours_for_day(day)))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        location = _resolve_location(args, settings)
        if args.command == "now":
            return _run_now(args, location, settings)
        if args.command == "sun":
            return _run_sun(args, location)
        return _run_day(args, location)
    except ValueError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())

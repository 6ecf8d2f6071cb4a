"""Plain-text rendering of planetary hour results."""

from __future__ import annotations

from datetime import datetime, timedelta

from planetary_hours.astronomy.solar import SunTimes
from planetary_hours.models.hours import PlanetaryHour, PlanetaryHourResult
from planetary_hours.models.location import Location


def format_time_remaining(delta: timedelta) -> str:
    """Format a countdown as '1h 2m 3s', or '2m 3s' under an hour."""
    total_seconds = max(int(delta.total_seconds()), 0)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    return f"{minutes}m {seconds}s"


def format_clock(dt: datetime, seconds: bool = True) -> str:
    return dt.strftime("%H:%M:%S" if seconds else "%H:%M")


def format_sun_times(sun: SunTimes, location: Location | None = None) -> str:
    lines = []
    if location is not None:
        lines.append(location.display_name())
    lines.append(f"Date:       {sun.date.isoformat()}")
    lines.append(f"Sunrise:    {format_clock(sun.sunrise, seconds=False)}")
    lines.append(f"Solar noon: {format_clock(sun.solar_noon, seconds=False)}")
    lines.append(f"Sunset:     {format_clock(sun.sunset, seconds=False)}")
    if sun.polar_day:
        lines.append("The sun does not set on this date.")
    elif sun.polar_night:
        lines.append("The sun does not rise on this date.")
    return "\n".join(lines)


def format_result(result: PlanetaryHourResult, location: Location | None = None) -> str:
    """Render a result the way the status screen presents it.

    Args:
        result: Resolved planetary hour
        location: Optional location, used for the header line

    Returns:
        Multi-line summary ending with the countdown to the next hour
    """
    current = result.current_body.info
    upcoming = result.next_body.info
    lines = []
    if location is not None:
        lines.append(location.display_name())
    lines.extend(
        [
            f"{format_clock(result.now)}  {result.segment_name} Hours",
            f"Sunrise {format_clock(result.sunrise, seconds=False)}"
            f"  Sunset {format_clock(result.sunset, seconds=False)}",
            "",
            f"{current.symbol} {current.name} - {current.vibration}",
            f"Planetary Hour {result.hour_ordinal} of {result.segment_name}",
            current.description,
            ", ".join(current.keywords),
            "",
            f"Next: {upcoming.symbol} {upcoming.name} at {format_clock(result.hour_end)}"
            f" (in {format_time_remaining(result.time_remaining)})",
        ]
    )
    return "\n".join(lines)


def format_day_table(hours: list[PlanetaryHour]) -> str:
    """One line per planetary hour: segment, ordinal, start-end, body."""
    lines = []
    for hour in hours:
        segment = "Day  " if hour.is_day_segment else "Night"
        info = hour.body.info
        lines.append(
            f"{segment} {hour.ordinal:>2}  "
            f"{format_clock(hour.start, seconds=False)}-{format_clock(hour.end, seconds=False)}  "
            f"{info.symbol} {info.name}"
        )
    return "\n".join(lines)

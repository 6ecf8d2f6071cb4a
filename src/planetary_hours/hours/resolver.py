"""Planetary hour resolution.

A planetary day runs from sunrise to the next sunrise. Daylight and night
are each split into twelve equal parts, so an hour's length changes with the
season and differs between day and night. The first daylight hour belongs to
the weekday's ruler and each following hour to the next body in the
Chaldean sequence, continuing through the night.

Every function here is pure. Sun times are requested from the solar engine
on each call, including the extra lookups for yesterday's sunset and
tomorrow's sunrise when "now" falls in a night segment.

Near the poles a day's sunset can come after the next day's sunrise. The
daylight segment is then cut short at that sunrise, so the segments of
consecutive days never overlap and every instant belongs to exactly one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo

from planetary_hours.astronomy.solar import SunTimes, compute_sun_times
from planetary_hours.models.hours import PlanetaryHour, PlanetaryHourResult
from planetary_hours.models.location import Coordinates, Location
from planetary_hours.models.planet import (
    HOURS_PER_SEGMENT,
    PlanetaryBody,
    day_ruler,
    hour_ruler,
)

logger = logging.getLogger(__name__)

SunTimesProvider = Callable[[date, Coordinates, tzinfo], SunTimes]

# Lower bound on a segment's span so a collapsed segment never divides by zero
MIN_SEGMENT_SPAN_US = 1

# Daylight shorter than this always ends before the next sunrise
NEAR_FULL_DAY = timedelta(hours=20)


def _utc(dt: datetime) -> datetime:
    return dt.astimezone(timezone.utc)


def _microseconds(delta: timedelta) -> int:
    return (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds


def _hour_boundary(start: datetime, span_us: int, k: int) -> datetime:
    """Start of hour ``k + 1`` in a segment (k = 12 gives the segment end).

    Rounded up to the microsecond, so an instant exactly on a boundary
    belongs to the later hour.
    """
    return start + timedelta(microseconds=-((-span_us * k) // HOURS_PER_SEGMENT))


def _normalize_now(now: datetime, tz: tzinfo | None) -> tuple[datetime, tzinfo]:
    """Attach UTC to naive instants and pick the zone that defines "today"."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    if tz is None:
        tz = now.tzinfo
    return now.astimezone(tz), tz


@dataclass(frozen=True)
class _Segment:
    start: datetime
    end: datetime
    ruler: PlanetaryBody
    is_day: bool


def _dusk(sun: SunTimes, next_sunrise: datetime) -> datetime:
    """End of a day's daylight segment.

    Under the midnight sun, sunset can fall after the next sunrise. Daylight
    then ends at that sunrise and the night between them is empty.
    """
    return min(sun.sunset, next_sunrise, key=_utc)


def _locate_segment(
    now: datetime,
    coordinates: Coordinates,
    tz: tzinfo,
    sun_times: SunTimesProvider,
    today_sun: SunTimes | None = None,
) -> _Segment:
    """Find the day or night segment containing ``now``.

    The planetary day holding ``now`` is the one whose sunrise is the last at
    or before it. Usually that is today's (day segment, or night after
    sunset) or yesterday's (night before sunrise). Under the midnight sun, or
    when ``tz`` is far from the local solar time, it can also be yesterday's
    daylight or tomorrow's daylight that has already begun.
    """
    now_utc = _utc(now)
    day = now.astimezone(tz).date()
    sun = today_sun or sun_times(day, coordinates, tz)
    next_sun = None

    while now_utc < _utc(sun.sunrise):
        day, next_sun = day - timedelta(days=1), sun
        sun = sun_times(day, coordinates, tz)

    if next_sun is None:
        if now_utc < _utc(sun.sunset) and sun.day_length < NEAR_FULL_DAY:
            return _Segment(sun.sunrise, sun.sunset, day_ruler(day), True)
        next_sun = sun_times(day + timedelta(days=1), coordinates, tz)

    while now_utc >= _utc(next_sun.sunrise):
        day, sun = day + timedelta(days=1), next_sun
        next_sun = sun_times(day + timedelta(days=1), coordinates, tz)

    dusk = _dusk(sun, next_sun.sunrise)
    if now_utc < _utc(dusk):
        return _Segment(sun.sunrise, dusk, day_ruler(day), True)
    return _Segment(dusk, next_sun.sunrise, day_ruler(day), False)


def resolve_current_hour(
    now: datetime,
    coordinates: Coordinates,
    *,
    tz: tzinfo | None = None,
    sun_times: SunTimesProvider = compute_sun_times,
) -> PlanetaryHourResult:
    """Find the planetary hour in force at ``now``.

    Args:
        now: The instant to resolve (naive values are taken as UTC)
        coordinates: Observer location (assumed already validated)
        tz: Zone defining the calendar day and returned datetimes; defaults
            to ``now``'s own zone
        sun_times: Solar engine; replaceable for tests

    Returns:
        PlanetaryHourResult for that instant. Never raises for valid input:
        collapsed polar segments are given a one microsecond span.
    """
    now, tz = _normalize_now(now, tz)
    today_sun = sun_times(now.date(), coordinates, tz)

    segment = _locate_segment(now, coordinates, tz, sun_times, today_sun)
    start, end, ruler, is_day = segment.start, segment.end, segment.ruler, segment.is_day

    start_utc = _utc(start)
    span_us = max(_microseconds(_utc(end) - start_utc), MIN_SEGMENT_SPAN_US)
    elapsed_us = _microseconds(_utc(now) - start_utc)

    raw_ordinal = (elapsed_us * HOURS_PER_SEGMENT) // span_us + 1
    hour_ordinal = min(max(raw_ordinal, 1), HOURS_PER_SEGMENT)
    if raw_ordinal != hour_ordinal:
        logger.debug(f"Clamped hour ordinal {raw_ordinal} to {hour_ordinal} at {now}")

    current = hour_ruler(ruler, hour_ordinal, is_day)

    hour_start = _hour_boundary(start_utc, span_us, hour_ordinal - 1)
    if hour_ordinal == HOURS_PER_SEGMENT:
        hour_end = _utc(end)
        # The following segment may be empty near the poles and get skipped
        following = _locate_segment(end, coordinates, tz, sun_times)
        next_body = hour_ruler(following.ruler, 1, following.is_day)
    else:
        hour_end = _hour_boundary(start_utc, span_us, hour_ordinal)
        next_body = current.next()

    logger.debug(
        f"{'Day' if is_day else 'Night'} hour {hour_ordinal} of {ruler.display_name}'s "
        f"day at {coordinates}: {current.display_name}"
    )

    return PlanetaryHourResult(
        now=now,
        current_body=current,
        next_body=next_body,
        hour_ordinal=hour_ordinal,
        body_index=current.position,
        is_day_segment=is_day,
        day_ruler=ruler,
        segment_start=start,
        segment_end=end,
        hour_start=hour_start.astimezone(tz),
        hour_end=hour_end.astimezone(tz),
        hour_length=timedelta(microseconds=span_us) / HOURS_PER_SEGMENT,
        sunrise=today_sun.sunrise,
        sunset=today_sun.sunset,
    )


def _segment_hours(
    start: datetime,
    end: datetime,
    ruler: PlanetaryBody,
    is_day: bool,
    tz: tzinfo,
) -> list[PlanetaryHour]:
    start_utc = _utc(start)
    span_us = max(_microseconds(_utc(end) - start_utc), 0)
    return [
        PlanetaryHour(
            ordinal=k,
            is_day_segment=is_day,
            body=hour_ruler(ruler, k, is_day),
            start=_hour_boundary(start_utc, span_us, k - 1).astimezone(tz),
            end=_hour_boundary(start_utc, span_us, k).astimezone(tz),
        )
        for k in range(1, HOURS_PER_SEGMENT + 1)
    ]


def get_planetary_hours_for_day(
    day: date,
    coordinates: Coordinates,
    *,
    tz: tzinfo = timezone.utc,
    sun_times: SunTimesProvider = compute_sun_times,
) -> list[PlanetaryHour]:
    """List the 24 planetary hours of the planetary day starting on ``day``.

    The table runs from that date's sunrise through twelve day hours and
    twelve night hours, ending at the next day's sunrise. Under the midnight
    sun the day hours stop at that sunrise and the night hours are empty.
    """
    today_sun = sun_times(day, coordinates, tz)
    next_sunrise = sun_times(day + timedelta(days=1), coordinates, tz).sunrise
    dusk = _dusk(today_sun, next_sunrise)
    ruler = day_ruler(day)
    return _segment_hours(today_sun.sunrise, dusk, ruler, True, tz) + _segment_hours(
        dusk, next_sunrise, ruler, False, tz
    )


class PlanetaryHourCalculator:
    """Planetary hours for a fixed location.

    Example:
        ```python
        calc = PlanetaryHourCalculator(
            Location.from_coordinates(48.8566, 2.3522, timezone="Europe/Paris")
        )

        result = calc.current_hour()
        print(result.current_body.display_name, result.time_remaining)

        for hour in calc.hours_for_day(date.today()):
            print(hour.start, hour.body.display_name)
        ```
    """

    def __init__(
        self,
        location: Location,
        sun_times: SunTimesProvider = compute_sun_times,
    ):
        """Initialize calculator for a specific location.

        Args:
            location: Location whose coordinates and timezone are used
            sun_times: Solar engine; replaceable for tests
        """
        self.location = location
        self._sun_times = sun_times

    @property
    def coordinates(self) -> Coordinates:
        return self.location.coordinates

    def sun_times(self, day: date) -> SunTimes:
        """Sunrise and sunset for a local calendar date."""
        return self._sun_times(day, self.coordinates, self.location.tzinfo())

    def current_hour(self, now: datetime | None = None) -> PlanetaryHourResult:
        """Resolve the planetary hour at ``now`` (defaults to the current time)."""
        if now is None:
            now = datetime.now(timezone.utc)
        return resolve_current_hour(
            now,
            self.coordinates,
            tz=self.location.tzinfo(),
            sun_times=self._sun_times,
        )

    def hours_for_day(self, day: date) -> list[PlanetaryHour]:
        """All 24 planetary hours of the planetary day starting on ``day``."""
        return get_planetary_hours_for_day(
            day,
            self.coordinates,
            tz=self.location.tzinfo(),
            sun_times=self._sun_times,
        )

"""Sunrise and sunset from the NOAA solar calculator equations.

This module implements the closed-form NOAA formulation:
- Julian day and Julian centuries since J2000.0
- Mean longitude, mean anomaly, and eccentricity of the Earth's orbit
- Equation of center, true and apparent longitude
- Obliquity of the ecliptic and solar declination
- Equation of time
- Sunrise/sunset hour angle for the standard 90.833° zenith

Everything here is pure arithmetic with no iteration. Angles are degrees at
the public surface and radians inside trig calls. Times are minutes from
local midnight until the final conversion to datetimes.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo

from planetary_hours.models.location import Coordinates

logger = logging.getLogger(__name__)

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0

# Geometric zenith at sunrise/sunset: 90° plus 34' refraction and 16' solar radius
SUNRISE_ZENITH_DEG = 90.833


@dataclass(frozen=True)
class SolarParameters:
    """Intermediate solar quantities for one Julian century value."""

    julian_century: float
    mean_longitude_deg: float
    mean_anomaly_deg: float
    eccentricity: float
    equation_of_center_deg: float
    true_longitude_deg: float
    apparent_longitude_deg: float
    obliquity_deg: float
    declination_deg: float
    equation_of_time_min: float


@dataclass(frozen=True)
class SunTimes:
    """Sunrise and sunset for one calendar day at one location.

    In polar night the hour angle clamps to zero and sunrise, sunset and
    solar noon coincide. In polar day it clamps to 180° and the daylight span
    is a full 24 hours centred on solar noon.
    """

    date: date
    sunrise: datetime
    sunset: datetime
    solar_noon: datetime
    polar_day: bool = False
    polar_night: bool = False

    @property
    def day_length(self) -> timedelta:
        return self.sunset.astimezone(timezone.utc) - self.sunrise.astimezone(timezone.utc)

    @property
    def is_degenerate(self) -> bool:
        """True when the sun never rises or never sets on this date."""
        return self.polar_day or self.polar_night


def julian_day(year: int, month: int, day: int) -> float:
    """Julian day at 0h UT of a proleptic Gregorian calendar date."""
    if month <= 2:
        year -= 1
        month += 12
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    return math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b - 1524.5


def julian_century(jd: float) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (jd - J2000) / DAYS_PER_CENTURY


def _sin_deg(x: float) -> float:
    return math.sin(math.radians(x))


def _cos_deg(x: float) -> float:
    return math.cos(math.radians(x))


def geometric_mean_longitude(t: float) -> float:
    return (280.46646 + t * (36000.76983 + t * 0.0003032)) % 360.0


def geometric_mean_anomaly(t: float) -> float:
    return 357.52911 + t * (35999.05029 - 0.0001537 * t)


def orbit_eccentricity(t: float) -> float:
    return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def equation_of_center(t: float, mean_anomaly: float) -> float:
    m = mean_anomaly
    return (
        _sin_deg(m) * (1.914602 - t * (0.004817 + 0.000014 * t))
        + _sin_deg(2 * m) * (0.019993 - 0.000101 * t)
        + _sin_deg(3 * m) * 0.000289
    )


def apparent_longitude(t: float, true_longitude: float) -> float:
    """True longitude corrected for nutation and aberration."""
    omega = 125.04 - 1934.136 * t
    return true_longitude - 0.00569 - 0.00478 * _sin_deg(omega)


def mean_obliquity(t: float) -> float:
    seconds = 21.448 - t * (46.8150 + t * (0.00059 - t * 0.001813))
    return 23.0 + (26.0 + seconds / 60.0) / 60.0


def corrected_obliquity(t: float) -> float:
    omega = 125.04 - 1934.136 * t
    return mean_obliquity(t) + 0.00256 * _cos_deg(omega)


def declination(obliquity: float, apparent_long: float) -> float:
    return math.degrees(math.asin(_sin_deg(obliquity) * _sin_deg(apparent_long)))


def equation_of_time(
    obliquity: float,
    mean_longitude: float,
    eccentricity: float,
    mean_anomaly: float,
) -> float:
    """Equation of time in minutes."""
    y = math.tan(math.radians(obliquity) / 2.0) ** 2
    l0 = math.radians(mean_longitude)
    m = math.radians(mean_anomaly)
    e = eccentricity
    eq = (
        y * math.sin(2 * l0)
        - 2 * e * math.sin(m)
        + 4 * e * y * math.sin(m) * math.cos(2 * l0)
        - 0.5 * y * y * math.sin(4 * l0)
        - 1.25 * e * e * math.sin(2 * m)
    )
    return 4.0 * math.degrees(eq)


def solar_parameters(jd: float) -> SolarParameters:
    """Evaluate the NOAA series for a Julian day."""
    t = julian_century(jd)
    l0 = geometric_mean_longitude(t)
    m = geometric_mean_anomaly(t)
    e = orbit_eccentricity(t)
    c = equation_of_center(t, m)
    true_long = l0 + c
    app_long = apparent_longitude(t, true_long)
    obliquity = corrected_obliquity(t)
    return SolarParameters(
        julian_century=t,
        mean_longitude_deg=l0,
        mean_anomaly_deg=m,
        eccentricity=e,
        equation_of_center_deg=c,
        true_longitude_deg=true_long,
        apparent_longitude_deg=app_long,
        obliquity_deg=obliquity,
        declination_deg=declination(obliquity, app_long),
        equation_of_time_min=equation_of_time(obliquity, l0, e, m),
    )


def hour_angle_cosine(latitude: float, declination_deg: float) -> float:
    """Unclamped cosine of the sunrise hour angle.

    Values above 1 mean the sun stays below the horizon all day, values
    below -1 mean it never sets. At the poles themselves cos(latitude) is
    zero and the result is an infinity of the matching sign.
    """
    lat = math.radians(latitude)
    dec = math.radians(declination_deg)
    denominator = math.cos(lat) * math.cos(dec)
    numerator = math.cos(math.radians(SUNRISE_ZENITH_DEG))
    tangent_term = math.tan(lat) * math.tan(dec)
    if abs(denominator) < 1e-12:
        # cos(zenith) is negative, so sign follows -tan(lat)*tan(dec)
        return math.copysign(math.inf, -tangent_term) if tangent_term else math.inf
    return numerator / denominator - tangent_term


def sunrise_hour_angle(latitude: float, declination_deg: float) -> float:
    """Sunrise hour angle in degrees, clamped to [0, 180]."""
    cos_ha = hour_angle_cosine(latitude, declination_deg)
    return math.degrees(math.acos(max(-1.0, min(1.0, cos_ha))))


def utc_offset_minutes(day: date, tz: tzinfo) -> float:
    """UTC offset of ``tz`` at local noon on ``day``, in minutes."""
    offset = datetime.combine(day, time(12), tzinfo=tz).utcoffset()
    if offset is None:
        return 0.0
    return offset.total_seconds() / 60.0


def _minutes_to_datetime(day: date, minutes: float, offset_minutes: float, tz: tzinfo) -> datetime:
    """Convert minutes from local midnight into an aware datetime in ``tz``."""
    local_midnight_utc = datetime.combine(day, time.min, tzinfo=timezone.utc) - timedelta(
        minutes=offset_minutes
    )
    return (local_midnight_utc + timedelta(minutes=minutes)).astimezone(tz)


def compute_sun_times(
    day: date,
    coordinates: Coordinates,
    tz: tzinfo = timezone.utc,
) -> SunTimes:
    """Calculate sunrise and sunset for a calendar date and location.

    Args:
        day: Local calendar date
        coordinates: Geographic coordinates (assumed already validated)
        tz: Timezone that defines the local date and the returned datetimes

    Returns:
        SunTimes with timezone-aware sunrise, sunset and solar noon. Never
        raises for in-range coordinates; see SunTimes for the polar cases.
    """
    params = solar_parameters(julian_day(day.year, day.month, day.day))
    cos_ha = hour_angle_cosine(coordinates.latitude, params.declination_deg)
    ha_deg = sunrise_hour_angle(coordinates.latitude, params.declination_deg)

    offset = utc_offset_minutes(day, tz)
    noon = 720.0 - 4.0 * coordinates.longitude - params.equation_of_time_min + offset
    sunrise = noon - 4.0 * ha_deg
    sunset = noon + 4.0 * ha_deg

    polar_night = cos_ha > 1.0
    polar_day = cos_ha < -1.0
    if polar_night or polar_day:
        logger.debug(
            f"Degenerate sun times on {day} at {coordinates}: "
            f"{'polar night' if polar_night else 'polar day'} (cos H = {cos_ha:.3f})"
        )

    return SunTimes(
        date=day,
        sunrise=_minutes_to_datetime(day, sunrise, offset, tz),
        sunset=_minutes_to_datetime(day, sunset, offset, tz),
        solar_noon=_minutes_to_datetime(day, noon, offset, tz),
        polar_day=polar_day,
        polar_night=polar_night,
    )

"""Pytest fixtures for planetary hours tests.

This module provides test fixtures that ensure:
1. No network access (astropy IERS table downloads are disabled)
2. No default location leaks in from the developer's environment
3. A stub solar engine with fixed 06:00/18:00 sun times
"""

from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

import pytest
from astropy.utils import iers

from planetary_hours.astronomy.solar import SunTimes
from planetary_hours.models.location import Coordinates, Location

# Use the bundled Earth orientation tables; never download during tests
iers.conf.auto_download = False


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch):
    """Reset settings cache and clear location env vars for each test."""
    from planetary_hours.config import get_settings

    for name in (
        "PLANETARY_HOURS_DEFAULT_LATITUDE",
        "PLANETARY_HOURS_DEFAULT_LONGITUDE",
        "PLANETARY_HOURS_DEFAULT_LOCATION_NAME",
        "PLANETARY_HOURS_DEFAULT_TIMEZONE",
        "PLANETARY_HOURS_DEBUG",
        "PLANETARY_HOURS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Location Fixtures
# =============================================================================


@pytest.fixture
def sample_coordinates() -> Coordinates:
    """Sample coordinates for New York City."""
    return Coordinates(latitude=40.7128, longitude=-74.0060)


@pytest.fixture
def sample_location(sample_coordinates: Coordinates) -> Location:
    """Sample location with coordinates and timezone."""
    return Location(
        coordinates=sample_coordinates,
        timezone="America/New_York",
        name="New York City",
    )


@pytest.fixture
def new_york_tz() -> ZoneInfo:
    return ZoneInfo("America/New_York")


@pytest.fixture
def greenwich() -> Coordinates:
    """Royal Observatory, Greenwich."""
    return Coordinates(latitude=51.4769, longitude=0.0)


@pytest.fixture
def arctic_coordinates() -> Coordinates:
    """85°N, well inside the Arctic circle."""
    return Coordinates(latitude=85.0, longitude=0.0)


# =============================================================================
# Solar Engine Stubs
# =============================================================================


def make_fixed_sun_times(sunrise: time = time(6), sunset: time = time(18)):
    """Build a solar engine stub returning the same clock times every day."""

    def provider(day: date, coordinates: Coordinates, tz=timezone.utc) -> SunTimes:
        rise = datetime.combine(day, sunrise, tzinfo=tz)
        fall = datetime.combine(day, sunset, tzinfo=tz)
        return SunTimes(
            date=day,
            sunrise=rise,
            sunset=fall,
            solar_noon=rise + (fall - rise) / 2,
        )

    return provider


@pytest.fixture
def fixed_sun_times():
    """Factory for solar engine stubs with custom clock times."""
    return make_fixed_sun_times


@pytest.fixture
def equal_day_sun_times():
    """Sun rises at 06:00 and sets at 18:00 local time on every date."""
    return make_fixed_sun_times()


@pytest.fixture
def sunday() -> date:
    """A Sunday, ruled by the Sun."""
    return date(2024, 6, 23)

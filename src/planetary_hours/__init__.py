"""Planetary Hours.

Sunrise and sunset from the NOAA solar equations, and the Chaldean planetary
hour ruling any instant at any location.
"""

__version__ = "0.1.0"

from planetary_hours.astronomy.solar import SunTimes, compute_sun_times
from planetary_hours.hours.resolver import (
    PlanetaryHourCalculator,
    get_planetary_hours_for_day,
    resolve_current_hour,
)
from planetary_hours.models import (
    CHALDEAN_SEQUENCE,
    Coordinates,
    Location,
    PlanetaryBody,
    PlanetaryHour,
    PlanetaryHourResult,
)

__all__ = [
    "__version__",
    "CHALDEAN_SEQUENCE",
    "Coordinates",
    "Location",
    "PlanetaryBody",
    "PlanetaryHour",
    "PlanetaryHourCalculator",
    "PlanetaryHourResult",
    "SunTimes",
    "compute_sun_times",
    "get_planetary_hours_for_day",
    "resolve_current_hour",
]

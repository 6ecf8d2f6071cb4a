"""Domain models for planetary hour calculations."""

from planetary_hours.models.location import Coordinates, Location
from planetary_hours.models.planet import (
    CHALDEAN_SEQUENCE,
    DAY_RULERS,
    PLANET_INFO,
    PlanetaryBody,
    PlanetInfo,
    body_at,
    day_ruler,
    hour_ruler,
)
from planetary_hours.models.hours import PlanetaryHour, PlanetaryHourResult

__all__ = [
    # Location
    "Coordinates",
    "Location",
    # Planets
    "CHALDEAN_SEQUENCE",
    "DAY_RULERS",
    "PLANET_INFO",
    "PlanetaryBody",
    "PlanetInfo",
    "body_at",
    "day_ruler",
    "hour_ruler",
    # Hours
    "PlanetaryHour",
    "PlanetaryHourResult",
]

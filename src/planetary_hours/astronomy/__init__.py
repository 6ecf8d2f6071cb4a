"""Solar calculations: NOAA sunrise/sunset and astropy sun position."""

from planetary_hours.astronomy.solar import (
    SolarParameters,
    SunTimes,
    compute_sun_times,
    julian_century,
    julian_day,
    solar_parameters,
)

__all__ = [
    "SolarParameters",
    "SunTimes",
    "compute_sun_times",
    "julian_century",
    "julian_day",
    "solar_parameters",
]

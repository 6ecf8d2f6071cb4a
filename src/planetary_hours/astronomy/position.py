"""Sun altitude and azimuth using astropy.

The planetary hour core does not depend on this module. It answers "where is
the sun right now" for the CLI, and gives an independent check that the NOAA
sunrise/sunset instants really are where the sun's centre sits 0.833° below
the horizon.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from astropy import units as u
from astropy.coordinates import AltAz, EarthLocation, get_sun
from astropy.time import Time

from planetary_hours.astronomy.solar import SUNRISE_ZENITH_DEG
from planetary_hours.models.location import Coordinates

# Altitude of the sun's centre at NOAA sunrise/sunset
HORIZON_ALTITUDE_DEG = 90.0 - SUNRISE_ZENITH_DEG


@dataclass
class SunPosition:
    """Geometric sun position seen from one place at one instant."""

    altitude_deg: float  # negative below the horizon
    azimuth_deg: float  # clockwise from north
    time: datetime

    @property
    def is_day(self) -> bool:
        """True between NOAA sunrise and sunset."""
        return self.altitude_deg > HORIZON_ALTITUDE_DEG


def _observer(coords: Coordinates) -> EarthLocation:
    return EarthLocation.from_geodetic(lon=coords.longitude * u.deg, lat=coords.latitude * u.deg)


def _as_utc_time(instant: datetime) -> Time:
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return Time(instant.astimezone(timezone.utc), scale="utc")


def get_sun_position(coords: Coordinates, time: datetime) -> SunPosition:
    """Sun altitude and azimuth at ``time`` (naive values are UTC).

    No atmospheric refraction is applied, so the altitude is geometric and
    directly comparable with HORIZON_ALTITUDE_DEG.
    """
    obstime = _as_utc_time(time)
    horizontal = get_sun(obstime).transform_to(AltAz(obstime=obstime, location=_observer(coords)))
    return SunPosition(
        altitude_deg=float(horizontal.alt.to_value(u.deg)),
        azimuth_deg=float(horizontal.az.to_value(u.deg)),
        time=time,
    )

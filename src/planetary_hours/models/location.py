"""Observer location models.

Construction is the validation boundary: once a Coordinates or Location
exists, the solar engine and the hour resolver trust its values.
"""

from __future__ import annotations

import re
from datetime import timezone, tzinfo
from typing import Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

# "lat,lon" in decimal degrees, each with an optional sign
LAT_LON_RE = re.compile(r"^(?P<lat>[-+]?\d*\.?\d+)\s*,\s*(?P<lon>[-+]?\d*\.?\d+)$")


class Coordinates(BaseModel):
    """A point on the Earth in decimal degrees.

    North and east are positive. Latitude spans -90..90 and longitude
    -180..180; anything outside fails validation.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Degrees north of the equator")
    longitude: float = Field(..., ge=-180, le=180, description="Degrees east of Greenwich")

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse 'lat,lon', e.g. '51.4769,0' or '-33.8688,151.2093'."""
        parsed = LAT_LON_RE.match(value.strip())
        if parsed is None:
            raise ValueError(
                f"Invalid coordinate format: '{value}'. Use 'latitude,longitude', "
                "e.g. '51.4769,0'"
            )
        return cls(latitude=float(parsed["lat"]), longitude=float(parsed["lon"]))

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"

    def to_tuple(self) -> tuple[float, float]:
        return self.latitude, self.longitude

    def label(self) -> str:
        """Four-decimal 'lat, lon' shown when a location has no name."""
        return f"{self.latitude:.4f}, {self.longitude:.4f}"


class Location(BaseModel):
    """Where planetary hours are computed, and in which zone they are shown.

    Without a timezone the calendar day and every reported instant are UTC.
    """

    coordinates: Coordinates
    timezone: str | None = Field(default=None, description="IANA zone, e.g. 'Europe/Paris'")
    name: str | None = Field(default=None, description="Label shown instead of the coordinates")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        if v is not None:
            try:
                ZoneInfo(v)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ValueError(f"Unknown timezone: '{v}'") from e
        return v

    @field_validator("name", mode="before")
    @classmethod
    def blank_name_to_none(cls, v: str | None) -> str | None:
        if isinstance(v, str):
            return v.strip() or None
        return v

    @classmethod
    def from_coordinates(
        cls,
        latitude: float,
        longitude: float,
        timezone: str | None = None,
        name: str | None = None,
    ) -> Self:
        coordinates = Coordinates(latitude=latitude, longitude=longitude)
        return cls(coordinates=coordinates, timezone=timezone, name=name)

    @classmethod
    def from_string(cls, value: str, timezone: str | None = None, name: str | None = None) -> Self:
        """Build a Location from a 'lat,lon' string; place names are not geocoded."""
        return cls(coordinates=Coordinates.from_string(value), timezone=timezone, name=name)

    def tzinfo(self) -> tzinfo:
        """The configured zone, or UTC."""
        return ZoneInfo(self.timezone) if self.timezone else timezone.utc

    def display_name(self) -> str:
        return self.name or self.coordinates.label()

"""Planetary hour result models."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field

from planetary_hours.models.planet import PlanetaryBody


def elapsed(start: datetime, end: datetime) -> timedelta:
    """Absolute time between two aware datetimes, safe across DST changes."""
    return end.astimezone(timezone.utc) - start.astimezone(timezone.utc)


class PlanetaryHourResult(BaseModel):
    """The planetary hour in force at a given instant."""

    model_config = ConfigDict(frozen=True)

    now: datetime = Field(..., description="Instant the hour was resolved for")
    current_body: PlanetaryBody = Field(..., description="Body ruling the current hour")
    next_body: PlanetaryBody = Field(..., description="Body ruling the following hour")
    hour_ordinal: int = Field(..., ge=1, le=12, description="Hour within the segment")
    body_index: int = Field(..., ge=0, le=6, description="Position of current_body in the sequence")
    is_day_segment: bool = Field(..., description="True between sunrise and sunset")
    day_ruler: PlanetaryBody = Field(
        ..., description="Ruler of the planetary day this segment belongs to"
    )

    # Day or night span containing now
    segment_start: datetime
    segment_end: datetime

    # The current unequal hour
    hour_start: datetime
    hour_end: datetime = Field(..., description="Next transition instant")
    hour_length: timedelta = Field(..., description="Segment duration divided by twelve")

    # Sun events of the current calendar day
    sunrise: datetime
    sunset: datetime

    @property
    def segment_duration(self) -> timedelta:
        return elapsed(self.segment_start, self.segment_end)

    @property
    def time_remaining(self) -> timedelta:
        """Time until the next planetary hour begins."""
        return elapsed(self.now, self.hour_end)

    @property
    def segment_name(self) -> str:
        return "Day" if self.is_day_segment else "Night"


class PlanetaryHour(BaseModel):
    """One of the 24 hours of a planetary day."""

    model_config = ConfigDict(frozen=True)

    ordinal: int = Field(..., ge=1, le=12)
    is_day_segment: bool
    body: PlanetaryBody
    start: datetime
    end: datetime

    @property
    def length(self) -> timedelta:
        return elapsed(self.start, self.end)

    def contains(self, instant: datetime) -> bool:
        """True if ``instant`` (timezone-aware) falls within this hour."""
        return elapsed(self.start, instant) >= timedelta(0) and elapsed(instant, self.end) > timedelta(0)

"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
Every variable is prefixed with ``PLANETARY_HOURS_`` and may also be placed in
a ``.env`` file in the working directory.

## Optional Environment Variables

- PLANETARY_HOURS_DEFAULT_LATITUDE / PLANETARY_HOURS_DEFAULT_LONGITUDE:
  Location used when the CLI is given none
- PLANETARY_HOURS_DEFAULT_LOCATION_NAME: Label for that location
- PLANETARY_HOURS_DEFAULT_TIMEZONE: IANA timezone for that location
- PLANETARY_HOURS_LOG_LEVEL: Logging level (default: WARNING)
- PLANETARY_HOURS_DEBUG: Enable debug logging (default: false)

## Example .env file

```
PLANETARY_HOURS_DEFAULT_LATITUDE=48.8566
PLANETARY_HOURS_DEFAULT_LONGITUDE=2.3522
PLANETARY_HOURS_DEFAULT_LOCATION_NAME=Paris
PLANETARY_HOURS_DEFAULT_TIMEZONE=Europe/Paris
```
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from planetary_hours.models.location import Location


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PLANETARY_HOURS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Planetary Hours"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    # Default location
    default_latitude: float | None = Field(default=None, ge=-90, le=90)
    default_longitude: float | None = Field(default=None, ge=-180, le=180)
    default_location_name: str | None = None
    default_timezone: str | None = Field(
        default=None,
        description="IANA timezone identifier for the default location",
    )

    # Display refresh cadence for --watch
    refresh_interval_seconds: float = Field(default=1.0, gt=0, le=60)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.log_level

    def default_location(self) -> Location | None:
        """Build the default Location, or None if no coordinates are configured."""
        if self.default_latitude is None or self.default_longitude is None:
            return None
        return Location.from_coordinates(
            self.default_latitude,
            self.default_longitude,
            timezone=self.default_timezone,
            name=self.default_location_name,
        )


@lru_cache
def get_settings() -> Settings:
    """Settings for this process, read from the environment on first use.

    Call ``get_settings.cache_clear()`` after changing the environment.
    """
    return Settings()


def get_settings_uncached() -> Settings:
    """Re-read the environment and .env file every call."""
    return Settings()

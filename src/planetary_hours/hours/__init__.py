"""Planetary hour resolution and presentation helpers."""

from planetary_hours.hours.formatters import (
    format_day_table,
    format_result,
    format_sun_times,
    format_time_remaining,
)
from planetary_hours.hours.resolver import (
    PlanetaryHourCalculator,
    get_planetary_hours_for_day,
    resolve_current_hour,
)

__all__ = [
    "PlanetaryHourCalculator",
    "get_planetary_hours_for_day",
    "resolve_current_hour",
    "format_day_table",
    "format_result",
    "format_sun_times",
    "format_time_remaining",
]

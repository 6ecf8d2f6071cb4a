"""Planetary bodies, the Chaldean rotation, and the weekday ruler table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class PlanetaryBody(str, Enum):
    """The seven classical bodies, declared in Chaldean order.

    Declaration order matters: ``CHALDEAN_SEQUENCE`` and ``position`` are both
    derived from it.
    """

    SATURN = "saturn"
    JUPITER = "jupiter"
    MARS = "mars"
    SUN = "sun"
    VENUS = "venus"
    MERCURY = "mercury"
    MOON = "moon"

    @property
    def position(self) -> int:
        """Position of this body in the Chaldean sequence (0-6)."""
        return CHALDEAN_SEQUENCE.index(self)

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def info(self) -> PlanetInfo:
        return PLANET_INFO[self]

    def next(self) -> PlanetaryBody:
        """The body ruling the hour after this one (Moon wraps to Saturn)."""
        return body_at(self.position + 1)


CHALDEAN_SEQUENCE: tuple[PlanetaryBody, ...] = tuple(PlanetaryBody)

# Hours per day or night segment. Night hours continue the rotation twelve
# places after the day ruler, i.e. five places around the seven-body cycle.
HOURS_PER_SEGMENT = 12
NIGHT_OFFSET = HOURS_PER_SEGMENT


def body_at(index: int) -> PlanetaryBody:
    """Return the body at ``index`` in the sequence, modulo seven."""
    return CHALDEAN_SEQUENCE[index % len(CHALDEAN_SEQUENCE)]


# Keyed by date.weekday(): 0 = Monday ... 6 = Sunday
DAY_RULERS: dict[int, PlanetaryBody] = {
    0: PlanetaryBody.MOON,
    1: PlanetaryBody.MARS,
    2: PlanetaryBody.MERCURY,
    3: PlanetaryBody.JUPITER,
    4: PlanetaryBody.VENUS,
    5: PlanetaryBody.SATURN,
    6: PlanetaryBody.SUN,
}


def day_ruler(day: date) -> PlanetaryBody:
    """Return the body ruling the first hour of ``day``."""
    return DAY_RULERS[day.weekday()]


def hour_ruler(ruler: PlanetaryBody, hour_ordinal: int, is_day: bool) -> PlanetaryBody:
    """Return the body ruling a given hour of a planetary day.

    Args:
        ruler: The day ruler (first hour after sunrise)
        hour_ordinal: Hour within the segment, 1-12
        is_day: True for the daylight segment, False for the night segment

    Returns:
        The ruling body for that hour
    """
    offset = 0 if is_day else NIGHT_OFFSET
    return body_at(ruler.position + (hour_ordinal - 1) + offset)


@dataclass(frozen=True)
class PlanetInfo:
    """Descriptive metadata for a planetary body."""

    name: str
    symbol: str
    vibration: str
    description: str
    keywords: tuple[str, ...]


PLANET_INFO: dict[PlanetaryBody, PlanetInfo] = {
    PlanetaryBody.SATURN: PlanetInfo(
        name="Saturn",
        symbol="♄",
        vibration="Discipline & Structure",
        description=(
            "Time for focus, boundaries, karma work, meditation, and long-term "
            "planning. Ideal for serious commitments and spiritual discipline."
        ),
        keywords=("Responsibility", "Patience", "Wisdom", "Limitation", "Karma"),
    ),
    PlanetaryBody.JUPITER: PlanetInfo(
        name="Jupiter",
        symbol="♃",
        vibration="Expansion & Abundance",
        description=(
            "Time for growth, opportunities, luck, and prosperity. Ideal for "
            "business ventures, education, travel, and spiritual expansion."
        ),
        keywords=("Luck", "Prosperity", "Growth", "Optimism", "Wisdom"),
    ),
    PlanetaryBody.MARS: PlanetInfo(
        name="Mars",
        symbol="♂",
        vibration="Energy & Action",
        description=(
            "Time for courage, physical activity, competition, and assertiveness. "
            "Ideal for starting projects, workouts, and overcoming obstacles."
        ),
        keywords=("Courage", "Strength", "Passion", "Drive", "Willpower"),
    ),
    PlanetaryBody.SUN: PlanetInfo(
        name="Sun",
        symbol="☉",
        vibration="Vitality & Success",
        description=(
            "Time for leadership, creativity, self-expression, and recognition. "
            "Ideal for important meetings, creative work, and personal power."
        ),
        keywords=("Leadership", "Creativity", "Joy", "Confidence", "Fame"),
    ),
    PlanetaryBody.VENUS: PlanetInfo(
        name="Venus",
        symbol="♀",
        vibration="Love & Harmony",
        description=(
            "Time for relationships, beauty, art, and pleasure. Ideal for "
            "romance, socializing, artistic pursuits, and self-care."
        ),
        keywords=("Love", "Beauty", "Pleasure", "Art", "Harmony"),
    ),
    PlanetaryBody.MERCURY: PlanetInfo(
        name="Mercury",
        symbol="☿",
        vibration="Communication & Intellect",
        description=(
            "Time for thinking, writing, speaking, and learning. Ideal for "
            "negotiations, studies, messages, and intellectual pursuits."
        ),
        keywords=("Communication", "Learning", "Travel", "Logic", "Adaptability"),
    ),
    PlanetaryBody.MOON: PlanetInfo(
        name="Moon",
        symbol="☽",
        vibration="Intuition & Emotion",
        description=(
            "Time for introspection, dreams, psychic work, and nurturing. Ideal "
            "for emotional healing, family matters, and connecting with intuition."
        ),
        keywords=("Intuition", "Dreams", "Emotions", "Nurturing", "Cycles"),
    ),
}

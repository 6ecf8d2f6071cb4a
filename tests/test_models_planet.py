"""Tests for planetary bodies and the day ruler table."""

from datetime import date, timedelta

import pytest

from planetary_hours.models.planet import (
    CHALDEAN_SEQUENCE,
    DAY_RULERS,
    PLANET_INFO,
    PlanetaryBody,
    body_at,
    day_ruler,
    hour_ruler,
)


class TestChaldeanSequence:
    """Tests for the fixed seven-body rotation."""

    def test_sequence_order(self):
        assert [body.display_name for body in CHALDEAN_SEQUENCE] == [
            "Saturn",
            "Jupiter",
            "Mars",
            "Sun",
            "Venus",
            "Mercury",
            "Moon",
        ]

    def test_positions(self):
        for i, body in enumerate(CHALDEAN_SEQUENCE):
            assert body.position == i

    def test_next_wraps_after_moon(self):
        assert PlanetaryBody.MOON.next() == PlanetaryBody.SATURN
        assert PlanetaryBody.SUN.next() == PlanetaryBody.VENUS

    def test_body_at_is_modular(self):
        assert body_at(7) == PlanetaryBody.SATURN
        assert body_at(14 + 3) == PlanetaryBody.SUN
        assert body_at(-1) == PlanetaryBody.MOON

    def test_every_body_has_info(self):
        assert set(PLANET_INFO) == set(PlanetaryBody)
        for body in PlanetaryBody:
            assert body.info.name == body.display_name
            assert len(body.info.keywords) == 5


class TestDayRulers:
    """Tests for the weekday ruler table."""

    @pytest.mark.parametrize(
        "day,expected",
        [
            (date(2024, 6, 17), PlanetaryBody.MOON),  # Monday
            (date(2024, 6, 18), PlanetaryBody.MARS),  # Tuesday
            (date(2024, 6, 19), PlanetaryBody.MERCURY),  # Wednesday
            (date(2024, 6, 20), PlanetaryBody.JUPITER),  # Thursday
            (date(2024, 6, 21), PlanetaryBody.VENUS),  # Friday
            (date(2024, 6, 22), PlanetaryBody.SATURN),  # Saturday
            (date(2024, 6, 23), PlanetaryBody.SUN),  # Sunday
        ],
    )
    def test_day_ruler(self, day: date, expected: PlanetaryBody):
        assert day_ruler(day) == expected

    def test_table_covers_every_weekday(self):
        assert sorted(DAY_RULERS) == list(range(7))
        assert set(DAY_RULERS.values()) == set(PlanetaryBody)

    def test_next_day_ruler_follows_last_night_hour(self):
        """The 25th hour from any day ruler is the next day's ruler."""
        start = date(2024, 6, 17)
        for offset in range(7):
            day = start + timedelta(days=offset)
            last_night_hour = hour_ruler(day_ruler(day), 12, is_day=False)
            assert last_night_hour.next() == day_ruler(day + timedelta(days=1))


class TestHourRuler:
    """Tests for the hour-within-segment mapping."""

    def test_first_day_hour_is_day_ruler(self):
        for body in PlanetaryBody:
            assert hour_ruler(body, 1, is_day=True) == body

    def test_sunday_day_hours(self):
        rulers = [hour_ruler(PlanetaryBody.SUN, k, is_day=True) for k in range(1, 13)]
        assert [r.display_name for r in rulers] == [
            "Sun", "Venus", "Mercury", "Moon", "Saturn", "Jupiter",
            "Mars", "Sun", "Venus", "Mercury", "Moon", "Saturn",
        ]

    def test_night_offset_is_five_places(self):
        """Night hour 1 sits twelve hours (five bodies) past the day ruler."""
        for body in PlanetaryBody:
            night_first = hour_ruler(body, 1, is_day=False)
            assert night_first.position == (body.position + 5) % 7

    def test_night_continues_day(self):
        for body in PlanetaryBody:
            assert hour_ruler(body, 12, is_day=True).next() == hour_ruler(body, 1, is_day=False)

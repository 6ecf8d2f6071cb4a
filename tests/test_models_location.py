"""Tests for observer location models."""

from datetime import timezone
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from planetary_hours.models.location import Coordinates, Location


class TestCoordinates:
    """Tests for the Coordinates value object."""

    @pytest.mark.parametrize(
        "latitude,longitude",
        [(90, 0), (-90, 0), (0, 180), (0, -180), (51.4769, 0.0)],
    )
    def test_accepts_range_limits(self, latitude: float, longitude: float):
        coords = Coordinates(latitude=latitude, longitude=longitude)
        assert coords.to_tuple() == (latitude, longitude)

    @pytest.mark.parametrize(
        "latitude,longitude",
        [(90.0001, 0), (-91, 0), (0, 180.5), (0, -181)],
    )
    def test_rejects_out_of_range(self, latitude: float, longitude: float):
        with pytest.raises(ValidationError):
            Coordinates(latitude=latitude, longitude=longitude)

    def test_frozen(self):
        coords = Coordinates(latitude=10, longitude=20)
        with pytest.raises(ValidationError):
            coords.latitude = 11

    def test_value_equality(self):
        assert Coordinates(latitude=1, longitude=2) == Coordinates(latitude=1, longitude=2)

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("51.4769,0", (51.4769, 0.0)),
            ("+64.1466,-21.9426", (64.1466, -21.9426)),  # Reykjavik
            ("-33.8688,151.2093", (-33.8688, 151.2093)),  # Sydney
            ("  78.2232 ,  15.6267 ", (78.2232, 15.6267)),  # Longyearbyen
            (".5,-.25", (0.5, -0.25)),
        ],
    )
    def test_from_string(self, text: str, expected: tuple[float, float]):
        assert Coordinates.from_string(text).to_tuple() == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["Paris", "48.8566", "48.8566;2.3522", "north,east", ""])
    def test_from_string_rejects_malformed(self, text: str):
        with pytest.raises(ValueError, match="Invalid coordinate format"):
            Coordinates.from_string(text)

    def test_from_string_validates_range(self):
        with pytest.raises(ValidationError):
            Coordinates.from_string("95,10")

    def test_str_round_trips_through_parser(self):
        coords = Coordinates(latitude=-33.8688, longitude=151.2093)
        assert str(coords) == "-33.8688,151.2093"
        assert Coordinates.from_string(str(coords)) == coords

    def test_label_has_four_decimals(self):
        assert Coordinates(latitude=48.85661, longitude=2.35222).label() == "48.8566, 2.3522"
        assert Coordinates(latitude=40.7128, longitude=-74.006).label() == "40.7128, -74.0060"


class TestLocation:
    """Tests for the Location model."""

    def test_minimal(self, sample_coordinates: Coordinates):
        loc = Location(coordinates=sample_coordinates)
        assert loc.timezone is None
        assert loc.name is None
        assert loc.tzinfo() is timezone.utc

    def test_coordinates_required(self):
        with pytest.raises(ValidationError):
            Location(name="Nowhere")

    def test_from_coordinates(self):
        loc = Location.from_coordinates(-33.8688, 151.2093, timezone="Australia/Sydney", name="Sydney")
        assert loc.coordinates.latitude == -33.8688
        assert loc.tzinfo() == ZoneInfo("Australia/Sydney")

    def test_from_string(self):
        loc = Location.from_string("64.1466,-21.9426", timezone="Atlantic/Reykjavik")
        assert loc.coordinates.longitude == pytest.approx(-21.9426)
        assert loc.timezone == "Atlantic/Reykjavik"

    def test_place_names_are_not_geocoded(self):
        with pytest.raises(ValueError, match="Invalid coordinate format"):
            Location.from_string("Paris, France")

    @pytest.mark.parametrize("zone", ["Mars/Olympus_Mons", "../etc/passwd", "Europe/Atlantis"])
    def test_unknown_timezone(self, zone: str):
        with pytest.raises(ValidationError, match="Unknown timezone"):
            Location.from_coordinates(0, 0, timezone=zone)

    def test_tzinfo(self, sample_location: Location, new_york_tz: ZoneInfo):
        assert sample_location.tzinfo() == new_york_tz

    def test_display_name(self, sample_location: Location):
        assert sample_location.display_name() == "New York City"

    def test_display_name_without_name(self):
        assert Location.from_coordinates(78.2232, 15.6267).display_name() == "78.2232, 15.6267"

    @pytest.mark.parametrize("name", ["", "   ", "\t"])
    def test_blank_name_is_dropped(self, name: str):
        loc = Location.from_coordinates(78.2232, 15.6267, name=name)
        assert loc.name is None
        assert loc.display_name() == "78.2232, 15.6267"

    def test_name_is_trimmed(self):
        assert Location.from_coordinates(0, 0, name="  Null Island ").name == "Null Island"

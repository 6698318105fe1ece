"""Tests for unit conversion and formatting helpers."""

import pytest

from raceplan.models.units import (
    UnitPreferences,
    feet_to_meters,
    format_distance,
    format_elevation,
    format_fluid,
    format_hours,
    format_weight,
    km_to_miles,
    meters_to_feet,
    miles_to_km,
    ml_to_oz,
    parse_duration,
    round_half_away,
    to_km,
    to_meters,
)


class TestConversions:
    """Tests for unit conversion factors."""

    def test_distance(self):
        assert km_to_miles(100) == pytest.approx(62.1371)
        assert miles_to_km(100) == pytest.approx(160.934)

    def test_elevation(self):
        assert meters_to_feet(1000) == pytest.approx(3280.84)
        assert feet_to_meters(1000) == pytest.approx(304.8)

    def test_fluid(self):
        assert ml_to_oz(500) == pytest.approx(16.907)

    def test_normalize_by_unit_system(self):
        """Test metric values pass through and imperial values convert."""
        assert to_km(50, "metric") == 50
        assert to_km(100, "imperial") == pytest.approx(160.934)
        assert to_meters(3000, "metric") == 3000
        assert to_meters(10000, "imperial") == pytest.approx(3048)


class TestFormatting:
    """Tests for display formatting."""

    def test_format_distance(self):
        assert format_distance(42.195, "metric") == "42.2 km"
        assert format_distance(26.2, "imperial") == "26.2 mi"

    def test_format_elevation(self):
        assert format_elevation(1234.4, "metric") == "1234 m"
        assert format_elevation(18000, "imperial") == "18000 ft"

    def test_format_fluid(self):
        assert format_fluid(500, "metric") == "500 ml"
        assert format_fluid(16.9, "imperial") == "16.9 oz"

    def test_format_weight(self):
        assert format_weight(60, "metric") == "60 g"
        assert format_weight(2.1, "imperial") == "2.1 oz"

    def test_format_hours(self):
        """Test hours render as zero-padded HH:MM with minutes truncated."""
        assert format_hours(2.0) == "02:00"
        assert format_hours(5.75) == "05:45"
        assert format_hours(0.999) == "00:59"
        assert format_hours(26.5) == "26:30"


class TestParseDuration:
    """Tests for parse_duration."""

    def test_hours_minutes_seconds(self):
        assert parse_duration("10:00:00") == 10
        assert parse_duration("05:30:00") == 5.5
        assert parse_duration("1:00:36") == pytest.approx(1.01)

    def test_hours_minutes(self):
        assert parse_duration("24:15") == 24.25

    @pytest.mark.parametrize("text", ["", "10", "ten:00:00", "1:60:00", "1:00:75"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_duration(text)


class TestRoundHalfAway:
    """Tests for round_half_away."""

    def test_halves_round_away_from_zero(self):
        assert round_half_away(2.5) == 3
        assert round_half_away(0.5) == 1
        assert round_half_away(-2.5) == -3

    def test_non_halves(self):
        assert round_half_away(2.49) == 2
        assert round_half_away(179.99999) == 180
        assert round_half_away(0) == 0

    def test_just_below_half_rounds_down(self):
        """Test the largest double below 0.5 is not pushed up to 1."""
        assert round_half_away(0.49999999999999994) == 0
        assert round_half_away(-0.49999999999999994) == 0
        assert round_half_away(2.4999999999999996) == 2


def test_uniform_preferences():
    """Test uniform() sets every quantity to one system."""
    prefs = UnitPreferences.uniform("imperial")

    assert prefs.distance == "imperial"
    assert prefs.elevation == "imperial"
    assert prefs.fluid == "imperial"
    assert prefs.weight == "imperial"

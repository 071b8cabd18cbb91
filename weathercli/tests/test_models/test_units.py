"""Tests for unit conversions."""

import pytest

from weathercli.units import (
    celsius_to_fahrenheit,
    compass_point,
    fahrenheit_to_celsius,
    inches_to_mm,
    kph_to_mph,
    mph_to_kph,
    precip_mm,
    round_display,
)


class TestTemperature:
    def test_freezing_point(self):
        assert celsius_to_fahrenheit(0) == 32.0

    def test_boiling_point(self):
        assert celsius_to_fahrenheit(100) == 212.0

    def test_london_sample(self):
        value = celsius_to_fahrenheit(21.2)
        assert value == pytest.approx(70.16)
        assert round_display(value) == 70.2

    def test_minus_forty_is_shared(self):
        assert celsius_to_fahrenheit(-40) == -40.0
        assert fahrenheit_to_celsius(-40) == -40.0

    def test_inverse(self):
        assert fahrenheit_to_celsius(celsius_to_fahrenheit(37.5)) == pytest.approx(37.5)


class TestSpeed:
    def test_kph_to_mph(self):
        assert kph_to_mph(1.609344) == pytest.approx(1.0)
        assert kph_to_mph(0) == 0.0

    def test_mph_to_kph(self):
        assert mph_to_kph(10) == pytest.approx(16.09344)


class TestPrecipitation:
    def test_mm_passthrough(self):
        assert precip_mm(4.7) == 4.7

    def test_inches(self):
        assert inches_to_mm(1) == 25.4


class TestCompassPoint:
    @pytest.mark.parametrize(
        ("degrees", "point"),
        [
            (0, "N"),
            (11.2, "N"),
            (11.25, "NNE"),
            (45, "NE"),
            (90, "E"),
            (180, "S"),
            (247, "WSW"),
            (270, "W"),
            (348.75, "N"),
            (360, "N"),
            (450, "E"),
        ],
    )
    def test_points(self, degrees: float, point: str):
        assert compass_point(degrees) == point


class TestRoundDisplay:
    def test_one_decimal(self):
        assert round_display(6.959) == 7.0
        assert round_display(12.84) == 12.8

    @pytest.mark.parametrize("value", [-0.04, -0.0, 0.04])
    def test_no_negative_zero(self, value: float):
        assert str(round_display(value)) == "0.0"

    def test_small_negative_kept(self):
        assert round_display(-0.06) == -0.1

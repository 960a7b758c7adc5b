"""Tests for units, weather records and report formatting."""

import pytest

from weatherterm.data.models import CELSIUS_ICON, FAHRENHEIT_ICON, Unit, Weather, Wind, get_unit
from weatherterm.data.report import format_number, format_report
from weatherterm.errors import InvalidUnit


class TestUnit:
    """Tests for unit validation."""

    def test_valid_units(self):
        """Test both supported units."""
        assert get_unit("metric") is Unit.METRIC
        assert get_unit("imperial") is Unit.IMPERIAL

    @pytest.mark.parametrize("name", ["unknown", "kelvin", "", "Metric"])
    def test_invalid_unit(self, name):
        """Test anything else raises InvalidUnit."""
        with pytest.raises(InvalidUnit) as exc_info:
            get_unit(name)

        assert exc_info.value.unit == name
        assert isinstance(exc_info.value, ValueError)

    @pytest.mark.parametrize(
        "unit,icon",
        [(Unit.METRIC, CELSIUS_ICON), (Unit.IMPERIAL, FAHRENHEIT_ICON), ("unknown", "")],
    )
    def test_unit_icon(self, unit, icon):
        """Test the temperature icon follows the unit."""
        weather = Weather(temperature=0, unit=unit, icon="", wind=Wind(0, ""))
        assert weather.unit_icon == icon


class TestFormatReport:
    """Tests for report formatting."""

    def test_metric_report(self, sample_weather):
        """Test the report layout."""
        assert format_report(sample_weather) == "🌡 21.5°C ☀️   💨 3.2m/s NNE"

    def test_imperial_report(self):
        """Test whole numbers print without a decimal point."""
        weather = Weather(
            temperature=70.0,
            unit=Unit.IMPERIAL,
            icon="☁️",
            wind=Wind(speed=12.0, direction="W"),
        )
        assert format_report(weather) == "🌡 70°F ☁️   💨 12m/s W"

    def test_negative_temperature(self):
        """Test below-zero readings."""
        weather = Weather(
            temperature=-3.25, unit=Unit.METRIC, icon="❄️", wind=Wind(0.5, "N")
        )
        assert format_report(weather) == "🌡 -3.25°C ❄️   💨 0.5m/s N"

    def test_unknown_unit_and_direction(self):
        """Test empty icons and labels still produce a line."""
        weather = Weather(temperature=5, unit="kelvin", icon="", wind=Wind(1, ""))
        assert format_report(weather) == "🌡 5    💨 1m/s "

    def test_pure(self, sample_weather):
        """Test identical input gives identical output."""
        assert format_report(sample_weather) == format_report(sample_weather)
        copy = Weather(
            temperature=21.5, unit=Unit.METRIC, icon="☀️", wind=Wind(3.2, "NNE")
        )
        assert format_report(copy).encode() == format_report(sample_weather).encode()


class TestFormatNumber:
    """Tests for reading formatting."""

    @pytest.mark.parametrize(
        "value,text",
        [
            (21.5, "21.5"),
            (20.0, "20"),
            (0.0, "0"),
            (-3.25, "-3.25"),
            (0.0001, "0.0001"),
            (0.00001, "1e-05"),
            (100000.0, "100000"),
            (1234567.0, "1.234567e+06"),
            (1e6, "1e+06"),
            (0.1 + 0.2, "0.30000000000000004"),
            (5, "5"),
        ],
    )
    def test_shortest_digits(self, value, text):
        """Test readings keep every significant digit and nothing more."""
        assert format_number(value) == text

    def test_non_finite(self):
        """Test NaN and infinities."""
        assert format_number(float("nan")) == "NaN"
        assert format_number(float("inf")) == "+Inf"
        assert format_number(float("-inf")) == "-Inf"

    def test_large_reading_in_report(self):
        """Test large values are not truncated in the report line."""
        weather = Weather(
            temperature=1234567.0, unit=Unit.METRIC, icon="", wind=Wind(1.5, "E")
        )
        assert format_report(weather).startswith("🌡 1.234567e+06°C")

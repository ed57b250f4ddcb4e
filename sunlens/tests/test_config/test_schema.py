"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from sunlens.config.schema import (
    ChartConfig,
    ColorConfig,
    HeatColorConfig,
    LocationConfig,
    SunlensConfig,
    TemperatureUnit,
    UnitFormat,
)


def _heat(temperature: float, r: int = 0, g: int = 0, b: int = 0) -> dict:
    return {"temperature": temperature, "color": {"r": r, "g": g, "b": b}}


class TestSunlensConfig:
    def test_defaults(self):
        config = SunlensConfig()
        assert config.unit_format == UnitFormat.AUTO
        assert config.language == "en"
        assert config.api_key == ""
        assert len(config.chart.heat_map) == 5
        assert config.chart.heat_map_unit == TemperatureUnit.CELSIUS

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            SunlensConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            ChartConfig(heat_map_unit="C", palette="warm")

    def test_unit_format_values(self):
        assert SunlensConfig(unit_format="us").unit_format == UnitFormat.US
        with pytest.raises(ValidationError):
            SunlensConfig(unit_format="kelvin")

    def test_default_location_out_of_range(self):
        loc = {"city": "X", "shortcut": "x", "latitude": 1.0, "longitude": 2.0}
        SunlensConfig(locations=[loc], default_location=0)
        with pytest.raises(ValidationError, match="out of range"):
            SunlensConfig(locations=[loc], default_location=1)

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            SunlensConfig(request_timeout_seconds=0)


class TestChartConfig:
    def test_custom_heat_map(self):
        config = ChartConfig(heat_map=[_heat(0, b=5), _heat(25, r=5)])
        points = config.breakpoints()
        assert [p.temperature for p in points] == [0, 25]
        assert points[1].color.r == 5

    def test_needs_two_breakpoints(self):
        with pytest.raises(ValidationError):
            ChartConfig(heat_map=[_heat(0)])

    def test_must_be_ascending(self):
        with pytest.raises(ValidationError, match="strictly ascending"):
            ChartConfig(heat_map=[_heat(10), _heat(0)])
        with pytest.raises(ValidationError, match="strictly ascending"):
            ChartConfig(heat_map=[_heat(10), _heat(10)])

    def test_fahrenheit_heat_map(self):
        config = ChartConfig(heat_map_unit="F")
        assert config.heat_map_unit == TemperatureUnit.FAHRENHEIT


class TestColorConfig:
    def test_channel_bounds(self):
        ColorConfig(r=0, g=5, b=3)
        with pytest.raises(ValidationError):
            ColorConfig(r=6, g=0, b=0)
        with pytest.raises(ValidationError):
            ColorConfig(r=0, g=-1, b=0)

    def test_heat_color_requires_color(self):
        with pytest.raises(ValidationError):
            HeatColorConfig(temperature=3.0)


class TestLocationConfig:
    def test_valid(self):
        loc = LocationConfig(city="Oslo", shortcut="osl", latitude=59.91, longitude=10.75)
        assert loc.shortcut == "osl"

    def test_latitude_bounds(self):
        with pytest.raises(ValidationError):
            LocationConfig(city="Nowhere", shortcut="n", latitude=91.0, longitude=0.0)

"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator, model_validator

from sunlens.models.color import Color, HeatBreakpoint


class UnitFormat(StrEnum):
    AUTO = "auto"  # location dependent
    SI = "si"      # celsius, meters
    US = "us"      # fahrenheit, miles
    CA = "ca"
    UK = "uk"


class TemperatureUnit(StrEnum):
    CELSIUS = "C"
    FAHRENHEIT = "F"


class ColorConfig(BaseModel):
    model_config = {"extra": "forbid"}

    r: int = Field(ge=0, le=5)
    g: int = Field(ge=0, le=5)
    b: int = Field(ge=0, le=5)


class HeatColorConfig(BaseModel):
    model_config = {"extra": "forbid"}

    temperature: float
    color: ColorConfig


def default_heat_map() -> list[HeatColorConfig]:
    """Blue through red, in Celsius."""
    return [
        HeatColorConfig(temperature=-10, color=ColorConfig(r=0, g=0, b=5)),  # blue
        HeatColorConfig(temperature=0, color=ColorConfig(r=0, g=5, b=5)),    # cyan
        HeatColorConfig(temperature=10, color=ColorConfig(r=0, g=5, b=0)),   # green
        HeatColorConfig(temperature=20, color=ColorConfig(r=5, g=5, b=0)),   # yellow
        HeatColorConfig(temperature=30, color=ColorConfig(r=5, g=0, b=0)),   # red
    ]


class ChartConfig(BaseModel):
    model_config = {"extra": "forbid"}

    heat_map: list[HeatColorConfig] = Field(
        default_factory=default_heat_map, min_length=2
    )
    heat_map_unit: TemperatureUnit = TemperatureUnit.CELSIUS

    @field_validator("heat_map")
    @classmethod
    def _ascending(cls, v: list[HeatColorConfig]) -> list[HeatColorConfig]:
        temps = [h.temperature for h in v]
        if any(a >= b for a, b in zip(temps, temps[1:])):
            raise ValueError("heat_map temperatures must be strictly ascending")
        return v

    def breakpoints(self) -> list[HeatBreakpoint]:
        return [
            HeatBreakpoint(
                temperature=h.temperature,
                color=Color(r=h.color.r, g=h.color.g, b=h.color.b),
            )
            for h in self.heat_map
        ]


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    city: str
    shortcut: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class SunlensConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = "https://api.darksky.net"
    request_timeout_seconds: float = Field(default=30.0, gt=0.0)
    unit_format: UnitFormat = UnitFormat.AUTO
    language: str = "en"
    chart: ChartConfig = ChartConfig()
    default_location: int = Field(default=0, ge=0)
    locations: list[LocationConfig] = []

    @model_validator(mode="after")
    def _default_location_in_range(self) -> "SunlensConfig":
        if self.locations and self.default_location >= len(self.locations):
            raise ValueError(
                f"default_location {self.default_location} out of range "
                f"for {len(self.locations)} locations"
            )
        return self

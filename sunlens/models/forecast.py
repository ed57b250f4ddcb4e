"""Hourly forecast models and the derived chart layout."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Sample:
    time: datetime  # timezone-aware, forecast local time
    temperature: float
    apparent_temperature: float
    precip_probability: float = 0.0
    precip_intensity: float = 0.0
    precip_type: str = ""
    cloud_cover: float = 0.0

    @property
    def hour(self) -> int:
        return self.time.hour


@dataclass
class DayGroup:
    start: datetime
    samples: list[Sample] = field(default_factory=list)

    @property
    def hours(self) -> int:
        return len(self.samples)


@dataclass(frozen=True)
class TemperatureScale:
    minimum: int
    maximum: int

    @property
    def range(self) -> int:
        # bounds inclusive
        return self.maximum - self.minimum + 1


@dataclass(frozen=True)
class ForecastLayout:
    days: list[DayGroup]
    scale: TemperatureScale

    @property
    def samples(self) -> list[Sample]:
        return [s for day in self.days for s in day.samples]

    @property
    def hour_count(self) -> int:
        return sum(day.hours for day in self.days)


@dataclass(frozen=True)
class Forecast:
    latitude: float
    longitude: float
    timezone: str
    units: str
    temperature_unit: str
    summary: str
    samples: list[Sample]

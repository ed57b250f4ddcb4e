"""Shared test fixtures."""

import json
from collections.abc import Callable
from datetime import datetime, timedelta
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest
import yaml

from sunlens.config.defaults import DEFAULT_LOCATIONS
from sunlens.config.schema import SunlensConfig
from sunlens.models.color import Color, HeatBreakpoint
from sunlens.models.forecast import Sample

BERLIN = ZoneInfo("Europe/Berlin")


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def darksky_forecast(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "darksky_forecast.json") as f:
        return json.load(f)


@pytest.fixture
def default_config() -> SunlensConfig:
    """Return default SunlensConfig with default locations."""
    return SunlensConfig(locations=DEFAULT_LOCATIONS)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api_key": "test-key",
        "base_url": "https://test-forecast.example.com",
        "unit_format": "si",
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def heat_map() -> list[HeatBreakpoint]:
    return [
        HeatBreakpoint(-10, Color(0, 0, 5)),
        HeatBreakpoint(10, Color(0, 5, 0)),
        HeatBreakpoint(30, Color(5, 0, 0)),
    ]


@pytest.fixture
def make_samples() -> Callable[..., list[Sample]]:
    """Build consecutive hourly samples starting at a local Berlin time.

    `temps` and `feels` are cycled if shorter than `count`.
    """

    def _make(
        count: int,
        start: datetime = datetime(2026, 10, 18, 22, 0, tzinfo=BERLIN),
        temps: list[float] | None = None,
        feels: list[float] | None = None,
    ) -> list[Sample]:
        temps = temps or [10.0]
        feels = feels or temps
        return [
            Sample(
                time=start + timedelta(hours=i),
                temperature=temps[i % len(temps)],
                apparent_temperature=feels[i % len(feels)],
            )
            for i in range(count)
        ]

    return _make

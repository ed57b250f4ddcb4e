"""Convert a raw forecast API response into hourly samples in local time."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sunlens.models.forecast import Forecast, Sample

logger = logging.getLogger(__name__)


def temperature_unit_for(units: str) -> str:
    """Map the API's unit system flag to a temperature unit label."""
    if units == "us":
        return "F"
    return "C"


def parse_forecast(raw: dict) -> Forecast:
    """Extract hourly samples from a forecast response.

    Sample times are converted to the forecast's own timezone so that day
    boundaries fall on the location's local midnight. Optional fields sent
    as null are treated like missing ones.
    """
    tz_name = raw.get("timezone", "")
    tz = _resolve_timezone(tz_name)
    flags = raw.get("flags", {}) or {}
    units = flags.get("units", "")
    hourly = raw.get("hourly", {}) or {}

    samples: list[Sample] = []
    for point in hourly.get("data", []) or []:
        if point.get("temperature") is None or point.get("time") is None:
            logger.warning("Skipping hourly data point without time/temperature")
            continue
        temperature = float(point["temperature"])
        samples.append(
            Sample(
                time=_local_time(int(point["time"]), tz),
                temperature=temperature,
                apparent_temperature=_optional_float(
                    point, "apparentTemperature", temperature
                ),
                precip_probability=_optional_float(point, "precipProbability"),
                precip_intensity=_optional_float(point, "precipIntensity"),
                precip_type=point.get("precipType") or "",
                cloud_cover=_optional_float(point, "cloudCover"),
            )
        )
    samples.sort(key=lambda s: s.time)

    return Forecast(
        latitude=_optional_float(raw, "latitude"),
        longitude=_optional_float(raw, "longitude"),
        timezone=tz_name or "",
        units=units or "",
        temperature_unit=temperature_unit_for(units),
        summary=hourly.get("summary") or "",
        samples=samples,
    )


def _optional_float(point: dict, key: str, default: float = 0.0) -> float:
    value = point.get(key)
    if value is None:
        return default
    return float(value)


def _local_time(timestamp: int, tz: ZoneInfo | None) -> datetime:
    # Without a zone, apply the machine's zone rules to each instant.
    if tz is None:
        return datetime.fromtimestamp(timestamp).astimezone()
    return datetime.fromtimestamp(timestamp, tz=tz)


def _resolve_timezone(name: str) -> ZoneInfo | None:
    """Return the named zone, or None to use the machine's local zone."""
    if name:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown timezone %r, using local time", name)
    return None

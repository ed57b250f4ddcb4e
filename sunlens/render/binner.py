"""Group hourly samples into calendar days and derive the temperature scale."""

import logging
import math

from sunlens.models.forecast import DayGroup, ForecastLayout, Sample, TemperatureScale
from sunlens.render.errors import EmptyForecast, InvalidDimension

logger = logging.getLogger(__name__)

HOUR_WIDTH = 4


def bin_samples(
    samples: list[Sample],
    available_cols: int,
    columns_per_hour: int = HOUR_WIDTH,
) -> ForecastLayout:
    """Split the samples that fit into `available_cols` into day groups.

    A new day starts at every sample whose local hour is 0; the first day
    may start mid-day. The scale is floored/ceiled so it always contains
    every consumed temperature.
    """
    if not samples:
        raise EmptyForecast("forecast contains no hourly samples")

    hour_count = min(available_cols // columns_per_hour, len(samples))
    if hour_count <= 0:
        raise InvalidDimension(
            f"{available_cols} columns leave no room for a single hour"
        )

    days: list[DayGroup] = []
    day: DayGroup | None = None
    lowest = math.inf
    highest = -math.inf

    for sample in samples[:hour_count]:
        if sample.hour == 0 and day is not None and day.samples:
            days.append(day)
            day = None
        if day is None:
            day = DayGroup(start=sample.time)
        day.samples.append(sample)

        lowest = min(lowest, sample.temperature)
        highest = max(highest, sample.temperature)

    if day is not None and day.samples:
        days.append(day)

    scale = TemperatureScale(minimum=math.floor(lowest), maximum=math.ceil(highest))
    logger.debug(
        "Binned %d hours into %d days, scale %d..%d",
        hour_count, len(days), scale.minimum, scale.maximum,
    )
    return ForecastLayout(days=days, scale=scale)

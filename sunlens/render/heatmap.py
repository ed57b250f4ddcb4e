"""Temperature to color mapping over a sorted breakpoint table."""

from sunlens.models.color import Color, HeatBreakpoint


def color_for_temperature(temperature: float, heat_map: list[HeatBreakpoint]) -> Color:
    """Map a temperature to a color by linear interpolation between breakpoints.

    Temperatures at or beyond either end of the table are clamped to that
    end's color.

    Args:
        temperature: Temperature in the heat map's unit.
        heat_map: Non-empty breakpoint table sorted ascending by temperature.
            At least two entries are needed for interpolation to mean anything.

    Returns:
        The interpolated color.
    """
    lowest = heat_map[0]
    highest = heat_map[-1]
    if temperature <= lowest.temperature:
        return lowest.color
    if temperature >= highest.temperature:
        return highest.color

    low, high = lowest, highest
    for i, point in enumerate(heat_map):
        if temperature <= point.temperature:
            high = point
            if i > 0:
                low = heat_map[i - 1]
            break

    return interpolate_color(low, high, temperature)


def interpolate_color(
    low: HeatBreakpoint, high: HeatBreakpoint, temperature: float
) -> Color:
    """Blend each channel between two breakpoints, truncating to an integer."""
    heat = (temperature - low.temperature) / (high.temperature - low.temperature)
    return Color(
        r=_channel(low.color.r, high.color.r, heat),
        g=_channel(low.color.g, high.color.g, heat),
        b=_channel(low.color.b, high.color.b, heat),
    )


def _channel(low: int, high: int, heat: float) -> int:
    return int(low + heat * (high - low))


def to_heat_map_unit(temperature: float, unit: str, heat_map_unit: str) -> float:
    """Convert a temperature between C and F when the units differ."""
    if unit == heat_map_unit:
        return temperature
    if unit == "F" and heat_map_unit == "C":
        return (temperature - 32.0) * 5.0 / 9.0
    if unit == "C" and heat_map_unit == "F":
        return temperature * 9.0 / 5.0 + 32.0
    raise ValueError(f"Cannot convert temperature from {unit!r} to {heat_map_unit!r}")

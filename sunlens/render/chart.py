"""Chart renderer: lays out hourly samples and draws the terminal chart."""

import logging
import math

from sunlens.config.schema import ChartConfig
from sunlens.models.color import HeatBreakpoint
from sunlens.models.forecast import DayGroup, ForecastLayout, Sample
from sunlens.render.binner import HOUR_WIDTH, bin_samples
from sunlens.render.canvas import Canvas
from sunlens.render.heatmap import color_for_temperature, to_heat_map_unit
from sunlens.terminal import TerminalSize

logger = logging.getLogger(__name__)

LEFT_SIDEBAR_WIDTH = 6
RIGHT_MARGIN = 1

FEELS_COLDER = "┳"
FEELS_WARMER = "┻"
FEELS_SAME = "━"
DAY_SEPARATOR = "│"

WEEKDAYS = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def day_labels(day: DayGroup) -> list[str]:
    """Candidate labels for a day header, longest first."""
    weekday = WEEKDAYS[day.start.weekday()]
    month = MONTHS[day.start.month - 1]
    return [
        f"{weekday}, {month} {day.start.day}",
        weekday,
        weekday[:3],
        weekday[:2],
    ]


def fit_label(candidates: list[str], width: int) -> str:
    for label in candidates:
        if len(label) <= width:
            return label
    return ""


def glyph_for(sample: Sample) -> str:
    temp = round_half_away(sample.temperature)
    feels = round_half_away(sample.apparent_temperature)
    if temp > feels:
        return FEELS_COLDER
    if temp < feels:
        return FEELS_WARMER
    return FEELS_SAME


class ChartRenderer:
    """Renders one forecast per call; keeps no state between calls."""

    def __init__(
        self,
        heat_map: list[HeatBreakpoint],
        temperature_unit: str,
        heat_map_unit: str = "C",
    ):
        self.heat_map = heat_map
        self.temperature_unit = temperature_unit
        self.heat_map_unit = heat_map_unit

    def render(self, samples: list[Sample], terminal_size: TerminalSize) -> str:
        """Render the samples into a block of ANSI-styled text.

        Raises a RenderError before producing any output if the layout fails.
        """
        available = terminal_size.columns - RIGHT_MARGIN - LEFT_SIDEBAR_WIDTH
        layout = bin_samples(samples, available, HOUR_WIDTH)
        canvas = Canvas(layout.scale.range, layout.hour_count * HOUR_WIDTH)

        header = self._header(layout)
        self._plot(layout, canvas)

        lines = list(header)
        scale = layout.scale
        for temp in range(scale.maximum, scale.minimum - 1, -1):
            label = f"{temp:3d}°{self.temperature_unit} "
            lines.append(label + canvas.render_row(temp - scale.minimum))
        lines.extend(self._footer(layout))

        logger.info(
            "Rendered %d hours over %d days (%d rows)",
            layout.hour_count, len(layout.days), scale.range,
        )
        return "\n".join(lines)

    def _header(self, layout: ForecastLayout) -> list[str]:
        pad = " " * LEFT_SIDEBAR_WIDTH
        top, middle, bottom = pad, pad, pad
        for day in layout.days:
            inner = day.hours * HOUR_WIDTH - 2
            label = fit_label(day_labels(day), inner)
            top += "┌" + "─" * inner + "┐"
            middle += "│" + label.ljust(inner) + "│"
            bottom += "└" + "─" * inner + "┘"
        return [top, middle, bottom]

    def _plot(self, layout: ForecastLayout, canvas: Canvas) -> None:
        minimum = layout.scale.minimum
        for hour_index, sample in enumerate(layout.samples):
            row = round_half_away(sample.temperature - minimum)
            col = hour_index * HOUR_WIDTH + HOUR_WIDTH // 2

            heat_temp = to_heat_map_unit(
                sample.temperature, self.temperature_unit, self.heat_map_unit
            )
            canvas.set_color(row, col, color_for_temperature(heat_temp, self.heat_map))
            canvas.set_bold(row, col)
            canvas.set(row, col, glyph_for(sample))

            if sample.hour == 0 or hour_index == 0:
                canvas.set_vertical_bar(hour_index * HOUR_WIDTH, DAY_SEPARATOR)

    def _footer(self, layout: ForecastLayout) -> list[str]:
        pad = " " * LEFT_SIDEBAR_WIDTH
        tick = "─" * (HOUR_WIDTH - 1)
        rule = pad + "└" + tick
        rule += ("┴" + tick) * (layout.hour_count - 1)
        rule += "┘"
        hours = pad + "".join(
            f"{s.hour:02d}" + " " * (HOUR_WIDTH - 2) for s in layout.samples
        )
        return [rule, hours]


def render_forecast(
    samples: list[Sample],
    config: ChartConfig,
    temperature_unit: str,
    terminal_size: TerminalSize,
) -> str:
    """Render samples with the heat map from `config`."""
    renderer = ChartRenderer(
        config.breakpoints(), temperature_unit, config.heat_map_unit
    )
    return renderer.render(samples, terminal_size)

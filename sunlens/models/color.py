"""Color models for the 6x6x6 terminal color cube."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """RGB color with channel values from 0 to 5 (216 colors)."""

    r: int
    g: int
    b: int

    @property
    def cube_index(self) -> int:
        return 16 + 36 * self.r + 6 * self.g + self.b


@dataclass(frozen=True)
class HeatBreakpoint:
    temperature: float
    color: Color

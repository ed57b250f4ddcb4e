"""Errors raised while laying out and rendering a chart."""


class RenderError(Exception):
    """Base class for all render failures. Fatal for the current render call."""


class InvalidDimension(RenderError):
    """Raised when a canvas or layout would have a non-positive size."""


class OutOfBounds(RenderError):
    """Raised when a canvas coordinate lies outside the allocated grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(
            f"cell ({row}, {col}) outside canvas of {rows} rows x {cols} cols"
        )
        self.row = row
        self.col = col


class EmptyForecast(RenderError):
    """Raised when there are no samples to plot."""

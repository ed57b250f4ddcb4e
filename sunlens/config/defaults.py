"""Default location with pre-resolved coordinates."""

from sunlens.config.schema import LocationConfig

DEFAULT_LOCATIONS: list[LocationConfig] = [
    LocationConfig(
        city="Darmstadt, Germany",
        shortcut="da",
        latitude=49.87167,
        longitude=8.65027,
    ),
]

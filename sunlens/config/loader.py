"""YAML config loader with default-file creation and runtime get/set."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from sunlens.config.defaults import DEFAULT_LOCATIONS
from sunlens.config.schema import LocationConfig, SunlensConfig

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(".config") / "sunlens"
CONFIG_FILE_NAME = "sunlens.yaml"


class ConfigError(Exception):
    """Raised when the config file cannot be read or is invalid."""


class ConfigCreated(ConfigError):
    """Raised after a default config file was written for the user to edit."""


def default_config_path() -> Path:
    return Path.home() / CONFIG_DIR / CONFIG_FILE_NAME


def load_config(path: str | Path) -> SunlensConfig:
    """Load and validate config from a YAML file.

    If the file does not exist, a default config is written there and
    ConfigCreated is raised. If no locations are given, DEFAULT_LOCATIONS
    are injected.
    """
    path = Path(path)
    if not path.exists():
        save_config(SunlensConfig(locations=DEFAULT_LOCATIONS), path)
        logger.info("Wrote default config to %s", path)
        raise ConfigCreated(
            f"Created default config file: {path}\n"
            "Please edit it and change the parameters."
        )

    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Error in config file: {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Error in config file: {path}: expected a mapping")

    if "locations" not in raw or not raw["locations"]:
        raw["locations"] = [loc.model_dump() for loc in DEFAULT_LOCATIONS]

    try:
        return SunlensConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Error in config file: {path}: {e}") from e


def save_config(config: SunlensConfig, path: str | Path) -> None:
    """Write the config as YAML, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, sort_keys=False)


def require_api_key(config: SunlensConfig) -> str:
    if not config.api_key:
        raise ConfigError("Please set your api_key in the config file.")
    return config.api_key


def active_location(
    config: SunlensConfig, shortcut: str | None = None
) -> LocationConfig:
    """Return the location for `shortcut`, or the default location."""
    if shortcut is not None:
        for loc in config.locations:
            if loc.shortcut == shortcut:
                return loc
        raise ConfigError(f"Unknown location shortcut: {shortcut}")
    if not config.locations:
        raise ConfigError("No locations configured")
    return config.locations[config.default_location]


def get_config_value(config: SunlensConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'chart.heat_map_unit'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: SunlensConfig, dotted_key: str, value: Any) -> SunlensConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new SunlensConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target: Any = data
    for part in parts[:-1]:
        if isinstance(target, list):
            target = target[int(part)]
        elif isinstance(target, dict):
            target = target[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")

    last: Any = parts[-1]
    if not isinstance(target, (list, dict)):
        raise KeyError(f"Config key not found: {dotted_key}")
    if isinstance(target, list):
        last = int(last)
        old_value = target[last]
    else:
        if last not in target:
            raise KeyError(f"Config key not found: {dotted_key}")
        old_value = target[last]

    # Attempt type coercion for common cases
    if isinstance(value, str):
        if isinstance(old_value, bool):
            value = value.lower() in ("1", "true", "yes", "on")
        elif isinstance(old_value, int):
            value = int(value)
        elif isinstance(old_value, float):
            value = float(value)
    target[last] = value
    return SunlensConfig(**data)

"""CLI entry point for the terminal weather chart."""

import argparse
import logging

from sunlens.config.loader import (
    ConfigError,
    active_location,
    default_config_path,
    get_config_value,
    load_config,
    require_api_key,
    save_config,
    set_config_value,
)
from sunlens.config.schema import LocationConfig
from sunlens.ingest.forecast_client import ForecastClient, ForecastClientError
from sunlens.ingest.forecast_parser import parse_forecast
from sunlens.render.chart import render_forecast
from sunlens.render.errors import RenderError
from sunlens.terminal import TerminalTooSmall, check_terminal_size, get_terminal_size

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sunlens",
        description="Hourly weather forecast chart for the terminal",
    )
    parser.add_argument(
        "--config", default=None, help="Config YAML path (default: ~/.config/sunlens/sunlens.yaml)"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="More logging (-v, -vv)"
    )
    parser.set_defaults(location=None, hours=None)

    sub = parser.add_subparsers(dest="command")

    # show
    show_p = sub.add_parser("show", help="Render the forecast chart (default)")
    show_p.add_argument("--location", help="Location shortcut to show")
    show_p.add_argument("--hours", type=int, help="Limit the number of hours")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    # location list / add / default
    loc_p = sub.add_parser("location", help="Saved locations")
    loc_sub = loc_p.add_subparsers(dest="location_command")
    loc_sub.add_parser("list", help="List saved locations")
    add_p = loc_sub.add_parser("add", help="Save a location")
    add_p.add_argument("city")
    add_p.add_argument("shortcut")
    add_p.add_argument("latitude", type=float)
    add_p.add_argument("longitude", type=float)
    default_p = loc_sub.add_parser("default", help="Set the default location")
    default_p.add_argument("shortcut")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVELS[min(args.verbose, len(LOG_LEVELS) - 1)],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = args.config or default_config_path()
    try:
        config = load_config(config_path)
    except ConfigError as e:
        print(e)
        return 1
    except OSError as e:
        print(f"Error: cannot read config file: {e}")
        return 1

    if args.command in (None, "show"):
        return _cmd_show(config, args)
    elif args.command == "config":
        return _cmd_config(config, config_path, args)
    elif args.command == "location":
        return _cmd_location(config, config_path, args)
    else:
        parser.print_help()
        return 1


def _cmd_show(config, args) -> int:
    try:
        location = active_location(config, args.location)
        client = ForecastClient(
            require_api_key(config),
            base_url=config.base_url,
            timeout=config.request_timeout_seconds,
        )
        raw = client.get_forecast(
            location.latitude, location.longitude,
            units=config.unit_format, language=config.language,
        )
        forecast = parse_forecast(raw)
        samples = forecast.samples
        if args.hours is not None:
            samples = samples[: max(args.hours, 0)]
        size = check_terminal_size(get_terminal_size())
        chart = render_forecast(
            samples, config.chart, forecast.temperature_unit, size
        )
    except (ConfigError, ForecastClientError, TerminalTooSmall, RenderError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Weather for: {location.city} [shortcut:#{location.shortcut}]")
    print(chart)
    return 0


def _cmd_config(config, config_path, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
        except (KeyError, IndexError, TypeError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        if not _save(new_config, config_path):
            return 1
        print(f"Set {key.strip()} = {get_config_value(new_config, key.strip())}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_location(config, config_path, args) -> int:
    if args.location_command == "list":
        for i, loc in enumerate(config.locations):
            marker = "*" if i == config.default_location else " "
            print(
                f"{marker} #{loc.shortcut}: {loc.city} "
                f"({loc.latitude:.5f}, {loc.longitude:.5f})"
            )
        return 0
    elif args.location_command == "add":
        if any(loc.shortcut == args.shortcut for loc in config.locations):
            print(f"Error: shortcut #{args.shortcut} already exists")
            return 1
        try:
            location = LocationConfig(
                city=args.city, shortcut=args.shortcut,
                latitude=args.latitude, longitude=args.longitude,
            )
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        new_config = config.model_copy(
            update={"locations": [*config.locations, location]}
        )
        if not _save(new_config, config_path):
            return 1
        print(f"Added {location.city} [shortcut:#{location.shortcut}]")
        return 0
    elif args.location_command == "default":
        for i, loc in enumerate(config.locations):
            if loc.shortcut == args.shortcut:
                if not _save(
                    config.model_copy(update={"default_location": i}), config_path
                ):
                    return 1
                print(f"Default location: {loc.city}")
                return 0
        print(f"Error: unknown shortcut #{args.shortcut}")
        return 1
    else:
        print("Use: location list | location add | location default")
        return 1


def _save(config, config_path) -> bool:
    try:
        save_config(config, config_path)
    except OSError as e:
        print(f"Error: cannot write config file: {e}")
        return False
    return True

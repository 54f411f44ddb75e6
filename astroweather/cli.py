"""CLI entry point for the astronomy weather client."""

import argparse
import logging
import sys

from astroweather.config.loader import get_config_value, load_config
from astroweather.config.schema import AppConfig, LogLevel
from astroweather.errors import AstroWeatherError, InputError
from astroweather.ingest.seventimer_client import SevenTimerClient
from astroweather.ingest.sunrise_sunset_client import SunriseSunsetClient
from astroweather.models.common import Coordinate, parse_coordinate_line
from astroweather.reporting.csv_export import write_forecast_csv
from astroweather.reporting.formatters import (
    format_forecast_json,
    format_forecast_text,
    format_suntimes_text,
)

PROMPT = (
    "Enter the latitude and longitude in decimal format "
    "('48.208 16.372' for Vienna):"
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="astroweather",
        description="Astronomical weather forecasts and sun times",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--log-level",
        choices=[lvl.value for lvl in LogLevel],
        default=None,
        help="Override the configured log level",
    )

    sub = parser.add_subparsers(dest="command")

    # forecast
    fct_p = sub.add_parser("forecast", help="Show the 7timer ASTRO forecast")
    _add_coordinate_args(fct_p)
    fct_p.add_argument(
        "--csv",
        action="store_true",
        help="Also export every entry to CSV",
    )
    fct_p.add_argument(
        "--csv-path",
        default=None,
        metavar="PATH",
        help="CSV export path (implies --csv; default from config)",
    )
    fct_p.add_argument("--format", choices=["text", "json"], default="text")

    # suntimes
    sun_p = sub.add_parser("suntimes", help="Show today's sunrise and sunset")
    _add_coordinate_args(sun_p)

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    show_p = config_sub.add_parser("show", help="Display current config")
    show_p.add_argument("key", nargs="?", help="Dotted key, e.g. export.csv_path")

    # locations
    sub.add_parser("locations", help="List named locations")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)

    logging.basicConfig(
        level=args.log_level or config.logging.level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "forecast": _cmd_forecast,
        "suntimes": _cmd_suntimes,
        "config": _cmd_config,
        "locations": _cmd_locations,
    }
    try:
        return handlers[args.command](config, args)
    except AstroWeatherError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _add_coordinate_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "coords",
        nargs="*",
        metavar="LAT LNG",
        help="Latitude and longitude; read from stdin when omitted",
    )
    p.add_argument("--location", help="Named location from config")


def _resolve_coordinate(config: AppConfig, args) -> Coordinate:
    if args.location:
        loc = config.find_location(args.location)
        if loc is None:
            raise InputError(f"unknown location: {args.location}")
        return Coordinate(lat=loc.lat, lng=loc.lng)
    if args.coords:
        return parse_coordinate_line(" ".join(args.coords))
    print(PROMPT, file=sys.stderr)
    return parse_coordinate_line(sys.stdin.readline())


def _cmd_forecast(config: AppConfig, args) -> int:
    coord = _resolve_coordinate(config, args)
    provider = config.providers.astro
    client = SevenTimerClient(
        base_url=provider.base_url,
        user_agent=provider.user_agent,
        timeout=provider.timeout,
    )
    forecast = client.get_astro_forecast(coord.lat, coord.lng)

    if args.format == "json":
        print(format_forecast_json(forecast))
    else:
        print(format_forecast_text(forecast))

    if args.csv or args.csv_path:
        path = args.csv_path or config.export.csv_path
        rows = write_forecast_csv(forecast, coord, path)
        print(f"Exported {rows} entries to {path}", file=sys.stderr)
    return 0


def _cmd_suntimes(config: AppConfig, args) -> int:
    coord = _resolve_coordinate(config, args)
    provider = config.providers.suntimes
    client = SunriseSunsetClient(
        base_url=provider.base_url,
        user_agent=provider.user_agent,
        timeout=provider.timeout,
    )
    print(format_suntimes_text(client.get_sun_times(coord.lat, coord.lng)))
    return 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command != "show":
        print("Use: config show [key]")
        return 1
    if args.key is None:
        print(config.model_dump_json(indent=2))
        return 0
    try:
        value = get_config_value(config, args.key)
    except KeyError as e:
        print(f"Error: {e}")
        return 1
    print(value.model_dump_json(indent=2) if hasattr(value, "model_dump_json") else value)
    return 0


def _cmd_locations(config: AppConfig, args) -> int:
    for loc in config.locations:
        print(f"{loc.slug}: {loc.name} ({loc.lat} {loc.lng})")
    return 0

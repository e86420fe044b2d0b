"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys

from outfit_weather import __version__
from outfit_weather.analysis.buckets import bucket_description, bucket_display_name
from outfit_weather.analysis.daily import daily_outfits
from outfit_weather.conditions import classify
from outfit_weather.config import get_settings
from outfit_weather.exceptions import InvalidInputError, WeatherApiError
from outfit_weather.flows import refresh
from outfit_weather.schemas import TemperatureUnit, WindUnit
from outfit_weather.units import format_temperature, format_wind_speed, parse_wind_unit, to_kmh


def _add_location_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, default=None, help="Latitude (default: settings)")
    parser.add_argument("--lon", type=float, default=None, help="Longitude (default: settings)")
    parser.add_argument(
        "--wind-unit",
        type=str,
        default=None,
        help="Wind unit: kmh, mph, ms or kn (default: settings)",
    )
    parser.add_argument(
        "--temp-unit",
        choices=[u.value for u in TemperatureUnit],
        default=None,
        help="Temperature display unit (default: settings)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="outfit-weather",
        description="What to wear, from the current weather and forecast",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'now' command - outfit for current conditions
    now_parser = subparsers.add_parser("now", help="Outfit for the current weather")
    _add_location_args(now_parser)

    # 'forecast' command - one outfit per forecast day
    forecast_parser = subparsers.add_parser("forecast", help="Outfits for the coming days")
    _add_location_args(forecast_parser)

    # 'cache' command - inspect or clear the cached snapshot
    cache_parser = subparsers.add_parser("cache", help="Show or clear cached weather")
    cache_parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete the cached weather",
    )

    subparsers.add_parser("info", help="Show application info")

    return parser


def _wind_unit(args: argparse.Namespace) -> WindUnit:
    return parse_wind_unit(args.wind_unit or get_settings().wind_unit)


def _refresh(args: argparse.Namespace) -> refresh.RefreshResult:
    settings = get_settings()
    return refresh.refresh_outfit(
        lat=args.lat if args.lat is not None else settings.lat,
        lon=args.lon if args.lon is not None else settings.lon,
        wind_unit=_wind_unit(args).value,
        offline_after_seconds=settings.offline_after_seconds,
        max_age_seconds=settings.cache_max_age_seconds,
    )


def _format_age(seconds: float) -> str:
    minutes = int(seconds // 60)
    if minutes < 1:
        return "just now"
    if minutes < 60:
        return f"{minutes} min ago"
    return f"{minutes // 60} h ago"


def cmd_now(args: argparse.Namespace) -> int:
    """Handle the 'now' command."""
    settings = get_settings()
    temp_unit = args.temp_unit or settings.temperature_unit

    try:
        result = _refresh(args)
    except WeatherApiError as exc:
        print(f"Error: {exc.user_message}", file=sys.stderr)
        return 1
    except InvalidInputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    reading = result.snapshot.current
    condition = classify(reading.weather_code)
    wind_kmh = to_kmh(reading.wind_speed, reading.wind_unit)

    print(result.recommendation.emojis)
    print(result.one_liner)
    print(
        f"{condition.icon} {condition.description}, "
        f"{format_temperature(reading.temperature_c, temp_unit)}{temp_unit}, "
        f"wind {format_wind_speed(wind_kmh, _wind_unit(args))}"
    )
    print(
        f"{bucket_display_name(result.recommendation.bucket)} "
        f"({bucket_description(result.recommendation.bucket, temp_unit)})"
    )
    if result.offline:
        print(f"Offline: showing weather from {_format_age(result.age_seconds)}")
    elif result.from_cache:
        print(f"Cached {_format_age(result.age_seconds)}")
    return 0


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command."""
    settings = get_settings()
    temp_unit = args.temp_unit or settings.temperature_unit

    try:
        result = _refresh(args)
    except WeatherApiError as exc:
        print(f"Error: {exc.user_message}", file=sys.stderr)
        return 1
    except InvalidInputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    days = daily_outfits(result.snapshot)
    if not days:
        print("No forecast days available.")
        return 0

    for day in days:
        condition = classify(day.reading.weather_code)
        high = format_temperature(day.forecast.temperature_max_c, temp_unit)
        low = format_temperature(day.forecast.temperature_min_c, temp_unit)
        print(f"{day.label:<9} {condition.icon} {high}/{low}  {day.recommendation.emojis}")
        print(f"          {day.one_liner}")
    if result.offline:
        print(f"Offline: forecast from {_format_age(result.age_seconds)}")
    return 0


def cmd_cache(args: argparse.Namespace) -> int:
    """Handle the 'cache' command."""
    if args.clear:
        refresh.cache.clear()
        print("Weather cache cleared.")
        return 0

    cached = refresh.cache.get_with_age()
    if cached is None:
        print("Weather cache is empty.")
        return 0

    snapshot = cached.reading
    print(f"Stored: {cached.stored_at.isoformat()} ({_format_age(cached.age_seconds)})")
    print(f"Location: ({snapshot.location.lat}, {snapshot.location.lon}) {snapshot.timezone}")
    print(f"Forecast days: {len(snapshot.daily)}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Location: ({settings.lat}, {settings.lon})")
    print(f"Units: {settings.temperature_unit}, {settings.wind_unit}")
    print(f"Data dir: {settings.data_dir}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.debug or get_settings().debug:
        logging.basicConfig(level=logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "now": cmd_now,
        "forecast": cmd_forecast,
        "cache": cmd_cache,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())

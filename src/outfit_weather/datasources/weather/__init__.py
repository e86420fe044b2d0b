"""Open-Meteo weather data source.

Fetches current conditions plus a 7-day forecast from Open-Meteo (free, no
API key) and normalizes them to ``WeatherReading`` / ``WeatherSnapshot``.

Public API:
  - forecast: fetch_current_weather (raw JSON, errors as WeatherApiError)
  - parse: parse_current, parse_daily, parse_snapshot
  - client: API URL and requested variables
"""

from outfit_weather.datasources.weather.client import OPEN_METEO_API
from outfit_weather.datasources.weather.forecast import fetch_current_weather
from outfit_weather.datasources.weather.parse import parse_current, parse_daily, parse_snapshot

__all__ = [
    "OPEN_METEO_API",
    "fetch_current_weather",
    "parse_current",
    "parse_daily",
    "parse_snapshot",
]

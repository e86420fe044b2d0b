"""Current conditions and 7-day forecast from Open-Meteo Forecast API."""

from __future__ import annotations

import logging
from typing import Any

import requests

from outfit_weather.datasources.weather.client import (
    CURRENT_VARS,
    DAILY_VARS,
    FORECAST_DAYS,
    HOURLY_VARS,
    OPEN_METEO_API,
)
from outfit_weather.exceptions import WeatherApiError
from outfit_weather.schemas import WindUnit
from outfit_weather.services.http import is_retryable_status, session
from outfit_weather.units import parse_wind_unit

logger = logging.getLogger(__name__)


def error_for_status(status: int, reason: str = "") -> WeatherApiError:
    """Map an HTTP status to a ``WeatherApiError`` with a user-facing message.

    Retryability follows ``services.http.is_retryable_status``, the same policy
    the session's transport retries use.
    """
    technical, user = _describe_status(status, reason)
    return WeatherApiError(technical, user, is_retryable=is_retryable_status(status))


def _describe_status(status: int, reason: str) -> tuple[str, str]:
    if status == 400:
        return (
            f"Bad Request: Invalid parameters ({reason})",
            "Invalid location. Please try again.",
        )
    if status == 404:
        return (
            f"Not Found: API endpoint unavailable ({reason})",
            "Weather service temporarily unavailable.",
        )
    if status == 429:
        return (
            f"Too Many Requests: Rate limit exceeded ({reason})",
            "Too many requests. Please wait a moment.",
        )
    if 400 <= status < 500:
        return (
            f"Client Error {status}: {reason}",
            "Unable to fetch weather. Please try again.",
        )
    if 500 <= status < 600:
        return (
            f"Server Error {status}: {reason}",
            "Weather service is having issues. Trying again...",
        )
    return f"HTTP {status}: {reason}", "Unable to reach weather service."


def fetch_current_weather(
    lat: float,
    lon: float,
    *,
    wind_unit: WindUnit | str = WindUnit.KMH,
    forecast_days: int = FORECAST_DAYS,
) -> dict[str, Any]:
    """
    Fetch current weather, daily and hourly forecast from Open-Meteo.

    Temperatures are always requested in Celsius; the outfit logic converts
    for display only.

    Args:
        lat: Latitude.
        lon: Longitude.
        wind_unit: Unit Open-Meteo should report wind speeds in.
        forecast_days: Number of forecast days (max 16).

    Returns:
        Raw API response dict with ``current``, ``daily`` and ``hourly`` keys.

    Raises:
        WeatherApiError: On network failure, HTTP error, or a non-JSON body.
    """
    params: dict[str, str | int | float | list[str]] = {
        "latitude": lat,
        "longitude": lon,
        "current": CURRENT_VARS,
        "daily": DAILY_VARS,
        "hourly": HOURLY_VARS,
        "timezone": "auto",
        "forecast_days": forecast_days,
        "temperature_unit": "celsius",
        "wind_speed_unit": parse_wind_unit(wind_unit).value,
    }

    try:
        resp = session.get(OPEN_METEO_API, params=params)
    except (requests.ConnectionError, requests.Timeout) as exc:
        raise WeatherApiError(
            f"Network error: {exc}",
            "No internet connection. Please check your network.",
        ) from exc
    except requests.RequestException as exc:
        raise WeatherApiError(
            f"Unexpected error: {exc}",
            "Something went wrong. Please try again.",
        ) from exc

    if not resp.ok:
        logger.warning("Open-Meteo returned HTTP %s for (%s, %s)", resp.status_code, lat, lon)
        raise error_for_status(resp.status_code, resp.reason or "")

    try:
        result: dict[str, Any] = resp.json()
    except ValueError as exc:
        raise WeatherApiError(
            "Invalid API response: body is not JSON",
            "Received invalid weather data. Please try again.",
        ) from exc
    return result

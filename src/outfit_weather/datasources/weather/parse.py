"""Normalize Open-Meteo responses into ``schemas`` models.

Accepts both the current variable names (``temperature_2m``,
``weather_code``, ``wind_speed_10m``) and the legacy ones (``temperature``,
``weathercode``, ``windspeed``) that older cached payloads use.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import ValidationError

from outfit_weather.conditions import worst_weather_code
from outfit_weather.exceptions import WeatherApiError
from outfit_weather.schemas import (
    DailyForecast,
    Location,
    WeatherReading,
    WeatherSnapshot,
    WindUnit,
)

_UNIT_LABELS = {"km/h": WindUnit.KMH, "mp/h": WindUnit.MPH, "m/s": WindUnit.MS, "kn": WindUnit.KN}


def _invalid(detail: str) -> WeatherApiError:
    return WeatherApiError(
        f"Invalid API response: {detail}",
        "Received invalid weather data. Please try again.",
        is_retryable=True,
    )


def _first(mapping: dict[str, Any], *names: str) -> Any:
    """Value of the first present key among ``names``, else None."""
    for name in names:
        if mapping.get(name) is not None:
            return mapping[name]
    return None


def _wind_unit(payload: dict[str, Any], section: str, fallback: WindUnit) -> WindUnit:
    units = payload.get(f"{section}_units", {})
    label = _first(units, "wind_speed_10m", "windspeed", "windspeed_10m")
    if label is None:
        return fallback
    return _UNIT_LABELS.get(label, fallback)


def parse_current(
    payload: dict[str, Any],
    *,
    wind_unit: WindUnit = WindUnit.KMH,
) -> WeatherReading:
    """
    Build the current ``WeatherReading`` from a forecast response.

    Args:
        payload: Raw Open-Meteo response.
        wind_unit: Unit assumed when the response has no ``current_units``.

    Raises:
        WeatherApiError: If temperature or weather code is missing or invalid.
    """
    current = payload.get("current")
    if not isinstance(current, dict):
        raise _invalid("missing current weather data")

    temperature = _first(current, "temperature_2m", "temperature")
    if not isinstance(temperature, int | float):
        raise _invalid("missing current temperature")

    code = _first(current, "weather_code", "weathercode")
    if not isinstance(code, int | float):
        raise _invalid("missing weather code")

    uv_index = _first(current, "uv_index")
    if uv_index is None:
        uv_index = _today_uv_max(payload)

    observed = current.get("time")
    try:
        return WeatherReading(
            temperature_c=temperature,
            apparent_temperature_c=_first(current, "apparent_temperature"),
            weather_code=int(code),
            wind_speed=_first(current, "wind_speed_10m", "windspeed") or 0.0,
            wind_unit=_wind_unit(payload, "current", wind_unit),
            uv_index=uv_index,
            is_day=bool(current.get("is_day", 1)),
            observed_at=datetime.fromisoformat(observed) if observed else datetime.now(),
        )
    except (ValidationError, ValueError) as exc:
        raise _invalid(str(exc)) from exc


def _today_uv_max(payload: dict[str, Any]) -> float | None:
    daily = payload.get("daily") or {}
    values = daily.get("uv_index_max") or []
    return values[0] if values else None


def _hourly_by_day(payload: dict[str, Any]) -> dict[str, tuple[list[int], list[float]]]:
    """Group hourly weather codes and wind speeds by ISO date."""
    hourly = payload.get("hourly") or {}
    times = hourly.get("time") or []
    codes = _first(hourly, "weather_code", "weathercode") or []
    winds = _first(hourly, "wind_speed_10m", "windspeed_10m") or []

    grouped: dict[str, tuple[list[int], list[float]]] = {}
    for i, stamp in enumerate(times):
        day_codes, day_winds = grouped.setdefault(stamp[:10], ([], []))
        if i < len(codes) and codes[i] is not None:
            day_codes.append(int(codes[i]))
        if i < len(winds) and winds[i] is not None:
            day_winds.append(float(winds[i]))
    return grouped


def parse_daily(payload: dict[str, Any]) -> list[DailyForecast]:
    """
    Build per-day forecasts, folding in the worst hourly weather of each day.

    Returns:
        One ``DailyForecast`` per entry in ``daily.time``. Days without
        hourly data keep ``weather_code_worst`` and ``wind_speed_max`` as None.

    Raises:
        WeatherApiError: If the ``daily`` block is missing or malformed.
    """
    daily = payload.get("daily")
    if not isinstance(daily, dict) or not isinstance(daily.get("time"), list):
        raise _invalid("missing daily forecast data")

    def column(*names: str) -> list[Any]:
        return _first(daily, *names) or []

    highs = column("temperature_2m_max")
    lows = column("temperature_2m_min")
    codes = column("weather_code", "weathercode")
    precip = column("precipitation_probability_max")
    uv = column("uv_index_max")
    hourly = _hourly_by_day(payload)

    def at(values: list[Any], i: int) -> Any:
        return values[i] if i < len(values) else None

    days: list[DailyForecast] = []
    for i, day in enumerate(daily["time"]):
        hour_codes, hour_winds = hourly.get(day, ([], []))
        try:
            days.append(
                DailyForecast(
                    date=date.fromisoformat(day),
                    temperature_max_c=at(highs, i),
                    temperature_min_c=at(lows, i),
                    weather_code=at(codes, i),
                    precipitation_probability_max=at(precip, i),
                    uv_index_max=at(uv, i),
                    weather_code_worst=worst_weather_code(hour_codes),
                    wind_speed_max=max(hour_winds) if hour_winds else None,
                )
            )
        except (ValidationError, ValueError) as exc:
            raise _invalid(f"bad daily row {day}: {exc}") from exc
    return days


def parse_snapshot(
    payload: dict[str, Any],
    *,
    wind_unit: WindUnit = WindUnit.KMH,
) -> WeatherSnapshot:
    """Parse a full response into a ``WeatherSnapshot``."""
    try:
        location = Location(lat=payload["latitude"], lon=payload["longitude"])
    except (KeyError, ValidationError) as exc:
        raise _invalid("missing coordinates") from exc
    return WeatherSnapshot(
        current=parse_current(payload, wind_unit=wind_unit),
        location=location,
        timezone=payload.get("timezone") or "UTC",
        daily=tuple(parse_daily(payload)),
    )

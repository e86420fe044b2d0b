"""Shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest


def _hours(day: str) -> list[str]:
    return [f"{day}T{h:02d}:00" for h in range(24)]


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    """Open-Meteo forecast response for two days in Portland, OR."""
    day1, day2 = "2026-03-02", "2026-03-03"
    codes = [2] * 24 + [3] * 10 + [61] * 4 + [95] + [3] * 9
    winds = [8.0] * 24 + [10.0] * 12 + [32.5] + [10.0] * 11
    return {
        "latitude": 45.5,
        "longitude": -122.6,
        "timezone": "America/Los_Angeles",
        "current_units": {"temperature_2m": "°C", "wind_speed_10m": "km/h"},
        "current": {
            "time": "2026-03-02T08:00",
            "temperature_2m": 6.4,
            "apparent_temperature": 3.1,
            "wind_speed_10m": 12.2,
            "is_day": 1,
            "weather_code": 61,
            "uv_index": 1.2,
        },
        "daily": {
            "time": [day1, day2],
            "temperature_2m_max": [11.3, 9.8],
            "temperature_2m_min": [3.0, 4.1],
            "weather_code": [61, 63],
            "precipitation_probability_max": [80, 95],
            "uv_index_max": [2.4, 1.1],
        },
        "hourly": {
            "time": _hours(day1) + _hours(day2),
            "temperature_2m": [6.0] * 48,
            "weather_code": codes,
            "wind_speed_10m": winds,
            "precipitation_probability": [50] * 48,
        },
    }

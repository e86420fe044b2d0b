"""Wind speed and temperature conversions.

Pure functions with no external dependencies. Wind speeds are normalized to
km/h before any threshold is applied.
"""

from __future__ import annotations

import math

from outfit_weather.exceptions import InvalidInputError
from outfit_weather.schemas import TemperatureUnit, WindUnit

#: Wind at or above this speed adds a windbreaker to the outfit.
WINDY_THRESHOLD_KMH = 15.0

# Multiply a speed in the given unit by this factor to get km/h.
_TO_KMH: dict[WindUnit, float] = {
    WindUnit.KMH: 1.0,
    WindUnit.MPH: 1 / 0.621371,  # to_kmh divides by 0.621371 directly
    WindUnit.MS: 3.6,
    WindUnit.KN: 1.852,
}

_WIND_LABELS: dict[WindUnit, str] = {
    WindUnit.KMH: "km/h",
    WindUnit.MPH: "mph",
    WindUnit.MS: "m/s",
    WindUnit.KN: "kn",
}


def parse_wind_unit(unit: WindUnit | str) -> WindUnit:
    """Resolve a unit name to ``WindUnit``.

    Accepts enum members, their values (``"kmh"``, ``"mph"``, ``"ms"``,
    ``"kn"``) and common spellings such as ``"km/h"`` or ``"m/s"``.

    Raises:
        InvalidInputError: If the unit is not recognized.
    """
    if isinstance(unit, WindUnit):
        return unit
    try:
        return WindUnit(unit)
    except ValueError:
        msg = f"Unrecognized wind speed unit: {unit!r}"
        raise InvalidInputError(msg) from None


def to_kmh(speed: float, unit: WindUnit | str) -> float:
    """Convert a wind speed to km/h."""
    resolved = parse_wind_unit(unit)
    if resolved is WindUnit.MPH:
        return speed / 0.621371
    return speed * _TO_KMH[resolved]


def from_kmh(speed_kmh: float, unit: WindUnit | str) -> float:
    """Convert a km/h wind speed into ``unit``."""
    resolved = parse_wind_unit(unit)
    if resolved is WindUnit.MPH:
        return speed_kmh * 0.621371
    return speed_kmh / _TO_KMH[resolved]


def is_windy(speed: float, unit: WindUnit | str = WindUnit.KMH) -> bool:
    """Whether the wind reaches the windbreaker threshold (inclusive)."""
    return to_kmh(speed, unit) >= WINDY_THRESHOLD_KMH


def c_to_f(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def f_to_c(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return (fahrenheit - 32) * 5 / 9


def convert_temperature(temp_c: float, unit: TemperatureUnit | str) -> float:
    """Convert a Celsius temperature into the display unit."""
    if TemperatureUnit(unit) is TemperatureUnit.F:
        return c_to_f(temp_c)
    return temp_c


def format_temperature(temp_c: float, unit: TemperatureUnit | str) -> str:
    """Format a Celsius temperature for display, e.g. ``"72°"``."""
    return f"{round(convert_temperature(temp_c, unit))}°"


def format_wind_speed(speed_kmh: float, unit: WindUnit | str) -> str:
    """Format a km/h wind speed in ``unit``, e.g. ``"15 mph"``."""
    resolved = parse_wind_unit(unit)
    return f"{round(from_kmh(speed_kmh, resolved))} {_WIND_LABELS[resolved]}"


def ensure_finite(value: float, name: str = "value") -> float:
    """Reject NaN and infinities.

    Raises:
        InvalidInputError: If ``value`` is not a finite number.
    """
    if not math.isfinite(value):
        msg = f"{name} must be finite, got {value!r}"
        raise InvalidInputError(msg)
    return value

"""Temperature buckets.

Six contiguous ranges in Celsius. Each breakpoint is the inclusive upper bound
of the colder bucket, so a reading of exactly 10 °C is ``cold``, not ``cool``.
"""

from __future__ import annotations

from outfit_weather.schemas import TemperatureBucket, TemperatureUnit
from outfit_weather.units import c_to_f, ensure_finite

# (inclusive upper bound °C, bucket); anything above the last bound is HOT.
BUCKET_BREAKPOINTS: tuple[tuple[float, TemperatureBucket], ...] = (
    (0.0, TemperatureBucket.FREEZING),
    (10.0, TemperatureBucket.COLD),
    (16.0, TemperatureBucket.COOL),
    (21.0, TemperatureBucket.MILD),
    (27.0, TemperatureBucket.WARM),
)


def bucket(temp_c: float) -> TemperatureBucket:
    """Classify a Celsius temperature into its bucket.

    Raises:
        InvalidInputError: If ``temp_c`` is NaN or infinite.
    """
    ensure_finite(temp_c, "temperature")
    for upper, name in BUCKET_BREAKPOINTS:
        if temp_c <= upper:
            return name
    return TemperatureBucket.HOT


def bucket_bounds(name: TemperatureBucket) -> tuple[float | None, float | None]:
    """Return ``(exclusive lower, inclusive upper)`` °C bounds; None is open-ended."""
    lower: float | None = None
    for upper, candidate in BUCKET_BREAKPOINTS:
        if candidate is name:
            return lower, upper
        lower = upper
    return lower, None


def bucket_display_name(name: TemperatureBucket) -> str:
    return name.value.capitalize()


def bucket_description(name: TemperatureBucket, unit: TemperatureUnit | str = "C") -> str:
    """Range label for a bucket, e.g. ``"0-10°C"`` or ``"Above 80.6°F"``."""
    fahrenheit = TemperatureUnit(unit) is TemperatureUnit.F
    symbol = "°F" if fahrenheit else "°C"

    def fmt(value: float) -> str:
        converted = c_to_f(value) if fahrenheit else value
        return f"{converted:g}"

    lower, upper = bucket_bounds(name)
    if lower is None and upper is not None:
        return f"{fmt(upper)}{symbol} and below"
    if upper is None and lower is not None:
        return f"Above {fmt(lower)}{symbol}"
    return f"{fmt(lower)}-{fmt(upper)}{symbol}"  # type: ignore[arg-type]

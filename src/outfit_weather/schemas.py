"""
Domain models for outfit-weather.

Pydantic models for normalized weather readings and the recommendations
derived from them. Datasources normalize API responses to these; the
analysis layer only ever sees these types.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# Units
# =============================================================================


class WindUnit(StrEnum):
    """Wind speed units supported by Open-Meteo's ``wind_speed_unit``."""

    KMH = "kmh"
    MPH = "mph"
    MS = "ms"
    KN = "kn"

    @classmethod
    def _missing_(cls, value: object) -> WindUnit | None:
        if isinstance(value, str):
            key = value.strip().lower()
            key = _WIND_UNIT_ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        return None


_WIND_UNIT_ALIASES = {
    "km/h": "kmh",
    "kph": "kmh",
    "m/s": "ms",
    "kt": "kn",
    "kts": "kn",
    "knots": "kn",
}


class TemperatureUnit(StrEnum):
    """Display unit for temperatures. Readings are always stored in Celsius."""

    C = "C"
    F = "F"


# =============================================================================
# Conditions & outfits
# =============================================================================


class ConditionCategory(StrEnum):
    """Coarse grouping of WMO weather codes."""

    CLEAR = "clear"
    CLOUDY = "cloudy"
    FOG = "fog"
    RAIN = "rain"
    SNOW = "snow"
    STORM = "storm"
    UNKNOWN = "unknown"


class TemperatureBucket(StrEnum):
    """Temperature range driving the base outfit, coldest first."""

    FREEZING = "freezing"
    COLD = "cold"
    COOL = "cool"
    MILD = "mild"
    WARM = "warm"
    HOT = "hot"

    @property
    def order(self) -> int:
        """Position from coldest (0) to hottest (5)."""
        return list(TemperatureBucket).index(self)


class Modifier(StrEnum):
    """Additive outfit change triggered by a secondary condition."""

    UMBRELLA = "umbrella"
    SCARF_GLOVES = "scarf_gloves"
    WINDBREAKER = "windbreaker"
    SUN_PROTECTION = "sun_protection"


class ConditionInfo(BaseModel):
    """Human-readable description of a WMO weather code."""

    model_config = {"frozen": True}

    description: str
    icon: str
    category: ConditionCategory


class OutfitItem(BaseModel):
    """A single piece of clothing or accessory."""

    model_config = {"frozen": True}

    glyph: str
    label: str


class OutfitRecommendation(BaseModel):
    """Outfit derived from one reading: base wardrobe plus modifiers."""

    model_config = {"frozen": True}

    bucket: TemperatureBucket
    base_items: tuple[OutfitItem, ...]
    modifiers: tuple[Modifier, ...] = ()
    modifier_items: tuple[OutfitItem, ...] = ()

    @field_validator("modifiers")
    @classmethod
    def _unique_modifiers(cls, value: tuple[Modifier, ...]) -> tuple[Modifier, ...]:
        if len(set(value)) != len(value):
            msg = f"Duplicate modifiers: {value}"
            raise ValueError(msg)
        return value

    @property
    def all_items(self) -> tuple[OutfitItem, ...]:
        """Base items followed by modifier items, in display order."""
        return self.base_items + self.modifier_items

    @property
    def emojis(self) -> str:
        """All item glyphs concatenated, e.g. ``🧥🧣👖🥾☂️``."""
        return "".join(item.glyph for item in self.all_items)

    def has(self, modifier: Modifier) -> bool:
        return modifier in self.modifiers


# =============================================================================
# Readings
# =============================================================================


class Location(BaseModel):
    """Geographic point the weather was fetched for."""

    model_config = {"frozen": True}

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class WeatherReading(BaseModel):
    """Normalized current conditions, the input to outfit composition."""

    model_config = {"frozen": True}

    temperature_c: float = Field(..., allow_inf_nan=False)
    weather_code: int
    wind_speed: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    wind_unit: WindUnit = WindUnit.KMH
    uv_index: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    is_day: bool = True
    observed_at: datetime
    apparent_temperature_c: float | None = Field(default=None, allow_inf_nan=False)


class DailyForecast(BaseModel):
    """One day of the multi-day forecast."""

    model_config = {"frozen": True}

    date: date
    temperature_max_c: float = Field(..., allow_inf_nan=False)
    temperature_min_c: float = Field(..., allow_inf_nan=False)
    weather_code: int
    precipitation_probability_max: float | None = None
    uv_index_max: float | None = None
    weather_code_worst: int | None = None
    wind_speed_max: float | None = None


class WeatherSnapshot(BaseModel):
    """Everything fetched in one refresh: current reading plus daily forecast."""

    model_config = {"frozen": True}

    current: WeatherReading
    location: Location
    timezone: str = "UTC"
    daily: tuple[DailyForecast, ...] = ()


# =============================================================================
# Cache
# =============================================================================

ReadingT = TypeVar("ReadingT", bound=BaseModel)


class CacheEntry(BaseModel, Generic[ReadingT]):
    """The single cached payload and when it was stored."""

    model_config = {"frozen": True}

    reading: ReadingT
    stored_at: datetime
    location: Location | None = None


class CachedReading(BaseModel, Generic[ReadingT]):
    """A cached payload together with its age at lookup time."""

    model_config = {"frozen": True}

    reading: ReadingT
    age_seconds: float = Field(..., ge=0)
    stored_at: datetime

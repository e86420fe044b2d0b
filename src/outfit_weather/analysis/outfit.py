"""Compose an outfit from a weather reading.

The temperature bucket picks a base wardrobe; rain or snow, wind and UV each
add a modifier on top. Modifiers are independent of the bucket, except that
rain and snow are mutually exclusive by construction of the code tables.
"""

from __future__ import annotations

from outfit_weather.analysis.buckets import bucket
from outfit_weather.conditions import is_rain_weather, is_snow_weather
from outfit_weather.schemas import (
    Modifier,
    OutfitItem,
    OutfitRecommendation,
    TemperatureBucket,
    WeatherReading,
)
from outfit_weather.units import is_windy

#: Daytime UV index at or above this adds sunglasses and sunscreen.
UV_THRESHOLD = 6.0

HEAVY_COAT = OutfitItem(glyph="\U0001f9e5", label="Heavy coat")
COAT = OutfitItem(glyph="\U0001f9e5", label="Coat")
LIGHT_JACKET = OutfitItem(glyph="\U0001f9e5", label="Light jacket")
SCARF = OutfitItem(glyph="\U0001f9e3", label="Scarf")
GLOVES = OutfitItem(glyph="\U0001f9e4", label="Gloves")
BOOTS = OutfitItem(glyph="\U0001f97e", label="Boots")
HAT = OutfitItem(glyph="\U0001f9e2", label="Hat")
PANTS = OutfitItem(glyph="\U0001f456", label="Pants")
SHIRT = OutfitItem(glyph="\U0001f455", label="Shirt")
T_SHIRT = OutfitItem(glyph="\U0001f455", label="T-shirt")
SHORTS = OutfitItem(glyph="\U0001fa73", label="Shorts")
SNEAKERS = OutfitItem(glyph="\U0001f45f", label="Sneakers")
SUNGLASSES = OutfitItem(glyph="\U0001f576\ufe0f", label="Sunglasses")
UMBRELLA = OutfitItem(glyph="\u2602\ufe0f", label="Umbrella")
WINDBREAKER = OutfitItem(glyph="\U0001f9e5", label="Windbreaker")
SUNSCREEN = OutfitItem(glyph="\U0001f9f4", label="Sunscreen")

BASE_OUTFITS: dict[TemperatureBucket, tuple[OutfitItem, ...]] = {
    TemperatureBucket.FREEZING: (HEAVY_COAT, SCARF, GLOVES, BOOTS, HAT),
    TemperatureBucket.COLD: (COAT, SCARF, PANTS, BOOTS),
    TemperatureBucket.COOL: (LIGHT_JACKET, SHIRT, PANTS, SNEAKERS),
    TemperatureBucket.MILD: (LIGHT_JACKET, SHIRT, PANTS, SNEAKERS),
    TemperatureBucket.WARM: (SHIRT, PANTS, SNEAKERS, HAT),
    TemperatureBucket.HOT: (T_SHIRT, SHORTS, SNEAKERS, HAT, SUNGLASSES),
}

MODIFIER_ITEMS: dict[Modifier, tuple[OutfitItem, ...]] = {
    Modifier.UMBRELLA: (UMBRELLA,),
    Modifier.SCARF_GLOVES: (SCARF, GLOVES),
    Modifier.WINDBREAKER: (WINDBREAKER,),
    Modifier.SUN_PROTECTION: (SUNGLASSES, SUNSCREEN),
}


def weather_modifiers(reading: WeatherReading) -> tuple[Modifier, ...]:
    """Modifiers that apply to a reading, in display order."""
    modifiers: list[Modifier] = []

    if is_rain_weather(reading.weather_code):
        modifiers.append(Modifier.UMBRELLA)
    elif is_snow_weather(reading.weather_code):
        modifiers.append(Modifier.SCARF_GLOVES)

    if is_windy(reading.wind_speed, reading.wind_unit):
        modifiers.append(Modifier.WINDBREAKER)

    # Night readings never get UV protection, whatever the index says.
    if reading.is_day and reading.uv_index is not None and reading.uv_index >= UV_THRESHOLD:
        modifiers.append(Modifier.SUN_PROTECTION)

    return tuple(modifiers)


def compose(reading: WeatherReading) -> OutfitRecommendation:
    """Build the outfit recommendation for one reading.

    Args:
        reading: Normalized weather reading (temperature in Celsius).

    Returns:
        Recommendation with the bucket, its base wardrobe, and any
        rain/snow, wind and UV modifiers. ``modifier_items`` holds only
        the items the base wardrobe does not already include.
    """
    temp_bucket = bucket(reading.temperature_c)
    modifiers = weather_modifiers(reading)
    base_items = BASE_OUTFITS[temp_bucket]
    extra: list[OutfitItem] = []
    for modifier in modifiers:
        # Items already worn are not listed a second time.
        extra.extend(
            item
            for item in MODIFIER_ITEMS[modifier]
            if item not in base_items and item not in extra
        )
    return OutfitRecommendation(
        bucket=temp_bucket,
        base_items=base_items,
        modifiers=modifiers,
        modifier_items=tuple(extra),
    )

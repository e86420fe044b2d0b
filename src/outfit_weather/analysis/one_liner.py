"""Friendly one-line summaries to go with an outfit.

Line choice is ``seed % len(options)`` so the same inputs and seed always give
the same text. Callers that want variety pass a changing seed (for example
the number of minutes since the epoch).
"""

from __future__ import annotations

from typing import Literal

from outfit_weather.schemas import (
    Modifier,
    OutfitRecommendation,
    TemperatureBucket,
    WeatherReading,
)

UVCategory = Literal["low", "moderate", "high", "extreme"]

MAX_LENGTH = 120

_B = TemperatureBucket

TEMPLATES: dict[TemperatureBucket, dict[str, tuple[str, ...]]] = {
    _B.FREEZING: {
        "default": (
            "Bundle up! It's freezing out there! \U0001f976",
            "Heavy coat weather - stay warm! \u2744\ufe0f",
            "Freezing temps - don't forget your gloves! \U0001f9e4",
        ),
        "rain": (
            "Freezing rain - ice alert! \U0001f9ca",
            "Dress warm and watch for ice!",
            "Heavy coat plus rain gear today! \U0001f9e5\u2602\ufe0f",
        ),
        "snow": (
            "Snow day! Full winter gear! \u2744\ufe0f",
            "Bundle up for the snow! \U0001f9e3",
            "Snowy and freezing - max layers!",
        ),
        "wind": (
            "Freezing with wind chill - brrr! \U0001f32c\ufe0f",
            "Windproof coat essential today!",
            "Wind cuts through everything - bundle up!",
        ),
    },
    _B.COLD: {
        "default": (
            "Pretty chilly - coat weather! \U0001f9e5",
            "Brisk weather - perfect for layers!",
            "Chilly vibes - dress warmly!",
        ),
        "rain": (
            "Cold and rainy - umbrella time! \u2614",
            "Raincoat over your warm coat!",
            "Cold rain - waterproof boots needed!",
        ),
        "snow": (
            "Snow in the air - winter is here! \u2744\ufe0f",
            "Light snow - coat and scarf!",
            "Cold with snow - cozy up!",
        ),
        "wind": (
            "Wind makes it feel colder! \U0001f32c\ufe0f",
            "Windbreaker over your coat!",
            "Wind chill in effect - bundle up!",
        ),
    },
    _B.COOL: {
        "default": (
            "Nice and cool - light jacket! \U0001f9e5",
            "Crisp and comfortable - enjoy!",
            "Cool temps - great outdoor weather!",
        ),
        "rain": (
            "Cool rain - jacket and umbrella! \U0001f327\ufe0f",
            "Light jacket, don't forget the umbrella!",
            "Cool showers - bring an umbrella!",
        ),
        "snow": (
            "Surprise snow! Grab a coat! \u2744\ufe0f",
            "Cold snap with flurries!",
            "Unseasonable snow - stay warm!",
        ),
        "wind": (
            "Breezy and cool - nice! \U0001f32c\ufe0f",
            "Light jacket for the wind!",
            "Windy but nice out!",
        ),
    },
    _B.MILD: {
        "default": (
            "Mild and pleasant - great day! \U0001f60a",
            "Perfect weather - not too hot, not too cold!",
            "Goldilocks weather - just right!",
        ),
        "rain": (
            "Mild rain - light jacket works! \U0001f326\ufe0f",
            "Mild with showers - nice!",
            "Perfect weather, just rainy! \u2614",
        ),
        "snow": (
            "Rare snow in mild weather! \u2744\ufe0f",
            "Unusual snow flurries!",
            "Snow in mild temps - grab a light coat!",
        ),
        "wind": (
            "Nice breeze in mild weather! \U0001f32c\ufe0f",
            "Breezy and comfortable!",
            "Perfect breeze - enjoy it!",
        ),
    },
    _B.WARM: {
        "default": (
            "Warm and nice - t-shirt weather! \U0001f455",
            "Beautiful warm day! \u2600\ufe0f",
            "Lovely warm weather!",
        ),
        "rain": (
            "Warm rain - tropical vibes! \U0001f334",
            "Warm and wet - still nice!",
            "Rain but warm out! \U0001f326\ufe0f",
        ),
        "snow": (
            "Snow in warm weather? Rare! \u2744\ufe0f",
            "Very unusual snow!",
            "Wild weather patterns!",
        ),
        "wind": (
            "Warm breeze - beach vibes! \U0001f3d6\ufe0f",
            "Breezy and warm - perfect!",
            "Great day for a breeze!",
        ),
    },
    _B.HOT: {
        "default": (
            "Hot day - stay cool! \U0001f525",
            "Summer vibes - dress light! \U0001f60e",
            "Heat wave - drink water! \U0001f4a7",
        ),
        "rain": (
            "Hot rain - steamy out! \U0001f326\ufe0f",
            "Hot and wet - muggy!",
            "Steamy rain - umbrella helps!",
        ),
        "snow": (
            "Snow in hot weather? Impossible! \u2744\ufe0f",
            "Weather going crazy!",
            "Extreme weather swing!",
        ),
        "wind": (
            "Hot wind - like a hairdryer! \U0001f32c\ufe0f",
            "Hot and windy - still warm!",
            "Wind just adds heat!",
        ),
    },
}

UV_LINES: dict[UVCategory, tuple[str, ...]] = {
    "moderate": (
        "Don't forget sunscreen! \u2600\ufe0f",
        "Sunscreen time! \U0001f9f4",
        "UV picking up - protect your skin!",
    ),
    "high": (
        "High UV - sunscreen essential! \u2600\ufe0f",
        "Strong sun today - cover up!",
        "UV levels high - be careful!",
    ),
    "extreme": (
        "Extreme UV - stay in shade! \u26a0\ufe0f",
        "Dangerous UV levels - limit sun exposure!",
        "Sun is intense - seek shade! \U0001f333",
    ),
}

# Thunderstorms and fog override the temperature-based line.
SPECIAL_CODE_LINES: dict[int, tuple[str, ...]] = {
    45: ("Foggy out - drive safe! \U0001f32b\ufe0f",),
    48: ("Dense fog - visibility low! \U0001f32b\ufe0f",),
    95: ("Thunderstorm possible - stay indoors! \u26c8\ufe0f",),
    96: ("Thunderstorm with hail - stay safe! \u26c8\ufe0f\U0001f9ca",),
    99: ("Severe thunderstorm - take cover! \u26c8\ufe0f",),
}

FALLBACK_LINES: tuple[str, ...] = (
    "Check outside! \U0001f937",
    "Weather's looking interesting!",
    "Step outside and see!",
)


def uv_category(uv_index: float | None) -> UVCategory:
    """Bucket a UV index: <=2 low, <=5 moderate, <=7 high, else extreme."""
    if uv_index is None or uv_index <= 2:
        return "low"
    if uv_index <= 5:
        return "moderate"
    if uv_index <= 7:
        return "high"
    return "extreme"


def _pick(options: tuple[str, ...], seed: int) -> str:
    return options[seed % len(options)]


def _variant(recommendation: OutfitRecommendation) -> str:
    # Precipitation outranks wind when both apply.
    if recommendation.has(Modifier.UMBRELLA):
        return "rain"
    if recommendation.has(Modifier.SCARF_GLOVES):
        return "snow"
    if recommendation.has(Modifier.WINDBREAKER):
        return "wind"
    return "default"


def generate_one_liner(
    recommendation: OutfitRecommendation,
    reading: WeatherReading,
    *,
    seed: int = 0,
) -> str:
    """Summarize the weather and outfit in one short sentence.

    Args:
        recommendation: Result of ``compose(reading)``.
        reading: The reading the recommendation was built from.
        seed: Selects among equivalent phrasings.

    Returns:
        A line of at most ``MAX_LENGTH`` characters when UV advice is
        appended; the base line alone otherwise.
    """
    special = SPECIAL_CODE_LINES.get(reading.weather_code)
    if special:
        return _pick(special, seed)

    base = _pick(TEMPLATES[recommendation.bucket][_variant(recommendation)], seed)

    category = uv_category(reading.uv_index)
    if reading.is_day and category != "low":
        advice = _pick(UV_LINES[category], seed)
        if len(base) + len(advice) + 1 <= MAX_LENGTH:
            return f"{base} {advice}"

    return base


def fallback_one_liner(seed: int = 0) -> str:
    """Line to show when no weather data is available at all."""
    return _pick(FALLBACK_LINES, seed)

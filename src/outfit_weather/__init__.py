"""Outfit Weather - what to wear, from the current weather and forecast.

Architecture::

    schemas.py      Pydantic models (readings, recommendations, cache entries)
    units.py        Wind speed / temperature conversions
    conditions.py   WMO weather code table, rain/snow predicates
    analysis/       Pure outfit logic (buckets, modifiers, one-liners, daily)
    cache.py        Single-slot cache with age reporting
    store.py        Storage backends for the cache (memory, JSON files)
    datasources/    Open-Meteo client and response parsing
    services/       Shared HTTP session with retry
    flows/          Prefect refresh flow with offline fallback
    config.py       Settings from OUTFIT_* environment variables / .env
    cli.py          `outfit-weather` command line

Data flow: datasources -> schemas.WeatherReading -> analysis.compose ->
OutfitRecommendation; flows/refresh stores each good snapshot in the cache
and serves it back when a later fetch fails.
"""

__version__ = "0.1.0"

from outfit_weather.analysis.outfit import compose
from outfit_weather.cache import WeatherCache
from outfit_weather.config import Settings
from outfit_weather.schemas import OutfitRecommendation, WeatherReading

__all__ = [
    "OutfitRecommendation",
    "Settings",
    "WeatherCache",
    "WeatherReading",
    "__version__",
    "compose",
]

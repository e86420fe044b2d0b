"""Weather-to-outfit decision logic.

Pure functions over ``schemas`` types. Nothing in this package fetches data,
touches the cache, or prints.

Modules:
  - buckets: temperature -> one of six ordered buckets
  - outfit: reading -> base wardrobe + rain/snow, wind and UV modifiers
  - one_liner: recommendation + reading -> short friendly summary
  - daily: forecast snapshot -> one outfit per day

Adding a rule
-------------
1. Prefer a table change (``BASE_OUTFITS``, ``MODIFIER_ITEMS``, the WMO
   tables in ``conditions.py``) over new branches.
2. New modifiers get a ``Modifier`` member in ``schemas.py``, an entry in
   ``MODIFIER_ITEMS`` and a step in ``weather_modifiers``.
3. Add tests in ``tests/test_{module}.py``.
"""

from outfit_weather.analysis.buckets import BUCKET_BREAKPOINTS, bucket
from outfit_weather.analysis.daily import DayOutfit, daily_outfits, day_label
from outfit_weather.analysis.one_liner import fallback_one_liner, generate_one_liner
from outfit_weather.analysis.outfit import BASE_OUTFITS, MODIFIER_ITEMS, UV_THRESHOLD, compose

__all__ = [
    "BASE_OUTFITS",
    "BUCKET_BREAKPOINTS",
    "MODIFIER_ITEMS",
    "UV_THRESHOLD",
    "DayOutfit",
    "bucket",
    "compose",
    "daily_outfits",
    "day_label",
    "fallback_one_liner",
    "generate_one_liner",
]

"""WMO weather code classification.

Maps Open-Meteo ``weathercode`` values to a description, an emoji icon and a
coarse category, and answers the rain/snow questions the outfit logic asks.
Codes are data, not control flow: adding a code means adding a table row.

Reference: https://open-meteo.com/en/docs (WMO Weather interpretation codes)
"""

from __future__ import annotations

from collections.abc import Iterable

from outfit_weather.schemas import ConditionCategory, ConditionInfo

_C = ConditionCategory

# WMO Weather Interpretation Codes
WMO_CONDITIONS: dict[int, ConditionInfo] = {
    0: ConditionInfo(description="Clear sky", icon="\u2600\ufe0f", category=_C.CLEAR),
    1: ConditionInfo(description="Mainly clear", icon="\U0001f324\ufe0f", category=_C.CLEAR),
    2: ConditionInfo(description="Partly cloudy", icon="\u26c5", category=_C.CLOUDY),
    3: ConditionInfo(description="Overcast", icon="\u2601\ufe0f", category=_C.CLOUDY),
    45: ConditionInfo(description="Fog", icon="\U0001f32b\ufe0f", category=_C.FOG),
    48: ConditionInfo(description="Depositing rime fog", icon="\U0001f32b\ufe0f", category=_C.FOG),
    51: ConditionInfo(description="Light drizzle", icon="\U0001f327\ufe0f", category=_C.RAIN),
    53: ConditionInfo(description="Moderate drizzle", icon="\U0001f327\ufe0f", category=_C.RAIN),
    55: ConditionInfo(description="Dense drizzle", icon="\U0001f327\ufe0f", category=_C.RAIN),
    56: ConditionInfo(
        description="Light freezing drizzle", icon="\U0001f328\ufe0f", category=_C.RAIN
    ),
    57: ConditionInfo(
        description="Dense freezing drizzle", icon="\U0001f328\ufe0f", category=_C.RAIN
    ),
    61: ConditionInfo(description="Slight rain", icon="\U0001f327\ufe0f", category=_C.RAIN),
    63: ConditionInfo(description="Moderate rain", icon="\U0001f327\ufe0f", category=_C.RAIN),
    65: ConditionInfo(description="Heavy rain", icon="\U0001f327\ufe0f", category=_C.RAIN),
    66: ConditionInfo(description="Light freezing rain", icon="\U0001f328\ufe0f", category=_C.RAIN),
    67: ConditionInfo(description="Heavy freezing rain", icon="\U0001f328\ufe0f", category=_C.RAIN),
    71: ConditionInfo(description="Slight snow", icon="\U0001f328\ufe0f", category=_C.SNOW),
    73: ConditionInfo(description="Moderate snow", icon="\u2744\ufe0f", category=_C.SNOW),
    75: ConditionInfo(description="Heavy snow", icon="\u2744\ufe0f", category=_C.SNOW),
    77: ConditionInfo(description="Snow grains", icon="\u2744\ufe0f", category=_C.SNOW),
    80: ConditionInfo(description="Slight rain showers", icon="\U0001f326\ufe0f", category=_C.RAIN),
    81: ConditionInfo(
        description="Moderate rain showers", icon="\U0001f326\ufe0f", category=_C.RAIN
    ),
    82: ConditionInfo(description="Violent rain showers", icon="\u26c8\ufe0f", category=_C.RAIN),
    85: ConditionInfo(description="Slight snow showers", icon="\U0001f328\ufe0f", category=_C.SNOW),
    86: ConditionInfo(description="Heavy snow showers", icon="\u2744\ufe0f", category=_C.SNOW),
    95: ConditionInfo(description="Thunderstorm", icon="\u26c8\ufe0f", category=_C.STORM),
    96: ConditionInfo(
        description="Thunderstorm with slight hail", icon="\u26c8\ufe0f", category=_C.STORM
    ),
    99: ConditionInfo(
        description="Thunderstorm with heavy hail", icon="\u26c8\ufe0f", category=_C.STORM
    ),
}

UNKNOWN_CONDITION = ConditionInfo(description="Unknown condition", icon="\u2753", category=_C.UNKNOWN)

#: Codes that call for an umbrella: drizzle, rain, freezing rain, showers, thunderstorms.
RAIN_CODES: frozenset[int] = frozenset(
    {51, 53, 55, 56, 57, 61, 63, 65, 66, 67, 80, 81, 82, 95, 96, 99}
)

#: Codes that call for scarf and gloves: snow, snow grains, snow showers.
SNOW_CODES: frozenset[int] = frozenset({71, 73, 75, 77, 85, 86})


def _check_tables() -> None:
    """Fail at import if the code sets drift out of shape."""
    overlap = RAIN_CODES & SNOW_CODES
    if overlap:
        msg = f"Weather codes cannot be both rain and snow: {sorted(overlap)}"
        raise ValueError(msg)
    undefined = (RAIN_CODES | SNOW_CODES) - WMO_CONDITIONS.keys()
    if undefined:
        msg = f"Rain/snow codes missing from WMO_CONDITIONS: {sorted(undefined)}"
        raise ValueError(msg)


_check_tables()


def classify(code: int) -> ConditionInfo:
    """Look up the condition for a WMO code; unknown codes never raise."""
    return WMO_CONDITIONS.get(code, UNKNOWN_CONDITION)


def is_rain_weather(code: int) -> bool:
    """Whether the code is rain-like (includes thunderstorms and freezing rain)."""
    return code in RAIN_CODES


def is_snow_weather(code: int) -> bool:
    """Whether the code is snow-like."""
    return code in SNOW_CODES


# Hourly codes are ranked by category when picking a day's worst weather.
_SEVERITY: dict[ConditionCategory, int] = {
    _C.UNKNOWN: 0,
    _C.CLEAR: 1,
    _C.CLOUDY: 1,
    _C.FOG: 2,
    _C.RAIN: 3,
    _C.SNOW: 3,
    _C.STORM: 4,
}


def severity(code: int) -> int:
    """Severity rank of a code, 0 (unknown) to 4 (thunderstorm)."""
    return _SEVERITY[classify(code).category]


def worst_weather_code(codes: Iterable[int]) -> int | None:
    """Most severe code in ``codes``; the earliest wins ties.

    Returns None for an empty iterable.
    """
    worst: int | None = None
    for code in codes:
        if worst is None or severity(code) > severity(worst):
            worst = code
    return worst

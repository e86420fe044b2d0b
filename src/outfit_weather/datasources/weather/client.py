"""Open-Meteo API client constants and shared configuration.

API docs: https://open-meteo.com/en/docs
"""

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

# Current conditions feeding the "now" outfit
CURRENT_VARS = [
    "temperature_2m",
    "apparent_temperature",
    "wind_speed_10m",
    "is_day",
    "weather_code",
    "uv_index",
]

# Daily variables for the multi-day outfits
DAILY_VARS = [
    "temperature_2m_max",
    "temperature_2m_min",
    "weather_code",
    "precipitation_probability_max",
    "uv_index_max",
]

# Hourly variables used to find each day's worst weather and strongest wind
HOURLY_VARS = [
    "temperature_2m",
    "weather_code",
    "wind_speed_10m",
    "precipitation_probability",
]

FORECAST_DAYS = 7

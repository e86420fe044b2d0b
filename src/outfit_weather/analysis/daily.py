"""Per-day outfits for the multi-day forecast.

Each forecast day is turned into a synthetic ``WeatherReading`` that errs on
the side of caution (worst hourly code, strongest wind) and composed like a
live reading.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time

from outfit_weather.analysis.one_liner import generate_one_liner
from outfit_weather.analysis.outfit import compose
from outfit_weather.schemas import (
    DailyForecast,
    OutfitRecommendation,
    WeatherReading,
    WeatherSnapshot,
)

SHORT_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True)
class DayOutfit:
    """Outfit for one forecast day."""

    index: int
    label: str
    forecast: DailyForecast
    reading: WeatherReading
    recommendation: OutfitRecommendation
    one_liner: str


def day_label(index: int, day: date) -> str:
    """``"Today"``, ``"Tomorrow"``, then short weekday names (``"Wed"``)."""
    if index == 0:
        return "Today"
    if index == 1:
        return "Tomorrow"
    return SHORT_WEEKDAYS[day.weekday()]


def reading_for_day(index: int, day: DailyForecast, current: WeatherReading) -> WeatherReading:
    """Build the reading used to dress for a forecast day.

    Today uses the lower of the daily high and the current temperature, so the
    outfit still fits if the high has not arrived yet. Future days are
    planned as daytime; today keeps the current day/night flag.
    """
    temperature = (
        min(day.temperature_max_c, current.temperature_c) if index == 0 else day.temperature_max_c
    )
    code = day.weather_code_worst if day.weather_code_worst is not None else day.weather_code
    if day.wind_speed_max is not None:
        wind_speed = day.wind_speed_max
    else:
        wind_speed = current.wind_speed
    return WeatherReading(
        temperature_c=temperature,
        weather_code=code,
        wind_speed=wind_speed,
        wind_unit=current.wind_unit,
        uv_index=day.uv_index_max,
        is_day=current.is_day if index == 0 else True,
        observed_at=current.observed_at if index == 0 else datetime.combine(day.date, time(12)),
    )


def daily_outfits(snapshot: WeatherSnapshot, *, seed: int = 0) -> list[DayOutfit]:
    """Compose an outfit for every day in the snapshot's forecast."""
    outfits: list[DayOutfit] = []
    for index, day in enumerate(snapshot.daily):
        reading = reading_for_day(index, day, snapshot.current)
        recommendation = compose(reading)
        outfits.append(
            DayOutfit(
                index=index,
                label=day_label(index, day.date),
                forecast=day,
                reading=reading,
                recommendation=recommendation,
                one_liner=generate_one_liner(recommendation, reading, seed=seed),
            )
        )
    return outfits

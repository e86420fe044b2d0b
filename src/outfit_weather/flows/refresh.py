"""
Prefect flow that refreshes the weather and recommends an outfit.

Fetches Open-Meteo, stores the snapshot in the single-slot cache, and
composes the outfit. When the fetch fails, the last cached snapshot is served
instead and the result is flagged offline together with its age.

Run locally:
    python -m outfit_weather.flows.refresh
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from prefect import State, flow, task

from outfit_weather.analysis.one_liner import generate_one_liner
from outfit_weather.analysis.outfit import compose
from outfit_weather.cache import WeatherCache
from outfit_weather.config import get_settings
from outfit_weather.datasources.weather import forecast as weather_forecast
from outfit_weather.datasources.weather import parse as weather_parse
from outfit_weather.exceptions import WeatherApiError
from outfit_weather.schemas import OutfitRecommendation, WeatherSnapshot, WindUnit
from outfit_weather.store import JsonFileStorage
from outfit_weather.units import parse_wind_unit

logger = logging.getLogger(__name__)

# Snapshot cache persisted under the configured data directory
cache = WeatherCache(JsonFileStorage(get_settings().data_dir), model=WeatherSnapshot)

DEFAULT_OFFLINE_AFTER_SECONDS = 30 * 60


@dataclass(frozen=True)
class RefreshResult:
    """Outcome of one refresh: what to show and how trustworthy it is."""

    snapshot: WeatherSnapshot
    recommendation: OutfitRecommendation
    one_liner: str
    age_seconds: float = 0.0
    offline: bool = False
    from_cache: bool = False
    error: str | None = None
    offline_after_seconds: float = DEFAULT_OFFLINE_AFTER_SECONDS

    @property
    def is_stale(self) -> bool:
        """Served from cache and older than the offline threshold."""
        return self.from_cache and self.age_seconds > self.offline_after_seconds


def _should_retry(task: object, task_run: object, state: State) -> bool:
    """Retry only errors the weather provider marks as transient."""
    try:
        state.result()
    except WeatherApiError as exc:
        return exc.is_retryable
    except Exception:
        return False
    return False


@task(
    name="fetch-snapshot",
    retries=1,
    retry_delay_seconds=5,
    retry_condition_fn=_should_retry,
)
def fetch_snapshot(lat: float, lon: float, wind_unit: str = "kmh") -> WeatherSnapshot:
    """Fetch and parse current conditions plus the 7-day forecast."""
    unit = parse_wind_unit(wind_unit)
    payload = weather_forecast.fetch_current_weather(lat, lon, wind_unit=unit)
    return weather_parse.parse_snapshot(payload, wind_unit=unit)


@task(name="save-snapshot")
def save_snapshot(snapshot: WeatherSnapshot) -> None:
    """Replace the cached snapshot."""
    cache.store(snapshot, location=snapshot.location)


def _build_result(snapshot: WeatherSnapshot, seed: int | None, **kwargs: object) -> RefreshResult:
    recommendation = compose(snapshot.current)
    if seed is None:
        seed = int(time.time() // 60)
    return RefreshResult(
        snapshot=snapshot,
        recommendation=recommendation,
        one_liner=generate_one_liner(recommendation, snapshot.current, seed=seed),
        **kwargs,  # type: ignore[arg-type]
    )


@flow(name="refresh-outfit", log_prints=True)
def refresh_outfit(
    lat: float = 45.5,
    lon: float = -122.6,
    wind_unit: str = WindUnit.KMH.value,
    offline_after_seconds: float = DEFAULT_OFFLINE_AFTER_SECONDS,
    max_age_seconds: float | None = None,
    seed: int | None = None,
) -> RefreshResult:
    """
    Refresh weather for a location and recommend an outfit.

    Args:
        lat: Latitude (default: Portland, OR).
        lon: Longitude.
        wind_unit: Wind unit to request from Open-Meteo.
        offline_after_seconds: Age past which served cache counts as stale.
        max_age_seconds: If set, a cached snapshot for this location younger
            than this is returned without fetching.
        seed: One-liner phrasing seed; defaults to the current minute.

    Returns:
        ``RefreshResult`` with ``offline=True`` when the fetch failed and the
        cached snapshot was served instead.

    Raises:
        WeatherApiError: If the fetch failed and nothing is cached.
    """
    if max_age_seconds is not None:
        entry = cache.get_for_location(lat, lon, max_age_seconds=max_age_seconds)
        if entry is not None:
            age = cache.age_seconds() or 0.0
            print(f"Cached weather is fresh ({age:.0f}s old), skipping fetch.")
            return _build_result(
                entry.reading,
                seed,
                age_seconds=age,
                from_cache=True,
                offline_after_seconds=offline_after_seconds,
            )

    try:
        print(f"Fetching weather for ({lat}, {lon})...")
        snapshot = fetch_snapshot(lat, lon, wind_unit)
    except WeatherApiError as exc:
        cached = cache.get_with_age()
        if cached is None:
            logger.error("Weather fetch failed and no cached data exists: %s", exc)
            raise
        print(
            f"Fetch failed ({exc.user_message}); "
            f"serving cached weather from {cached.age_seconds:.0f}s ago."
        )
        return _build_result(
            cached.reading,
            seed,
            age_seconds=cached.age_seconds,
            offline=True,
            from_cache=True,
            error=exc.user_message,
            offline_after_seconds=offline_after_seconds,
        )

    save_snapshot(snapshot)
    print(f"Saved weather with {len(snapshot.daily)} forecast days.")
    return _build_result(snapshot, seed, offline_after_seconds=offline_after_seconds)


if __name__ == "__main__":
    result = refresh_outfit()
    print(f"Flow complete: {result.recommendation.emojis} {result.one_liner}")

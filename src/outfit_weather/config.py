"""Application settings loaded from environment variables and ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from outfit_weather.schemas import TemperatureUnit, WindUnit


class Settings(BaseSettings):
    """Typed settings; every field can be overridden with ``OUTFIT_<NAME>``."""

    model_config = SettingsConfigDict(
        env_prefix="OUTFIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "outfit-weather"
    app_env: Literal["dev", "staging", "prod"] = "dev"
    debug: bool = False

    # Default location (Portland, OR)
    lat: float = Field(default=45.5, ge=-90, le=90)
    lon: float = Field(default=-122.6, ge=-180, le=180)

    data_dir: Path = Path("data")
    wind_unit: WindUnit = WindUnit.KMH
    temperature_unit: TemperatureUnit = TemperatureUnit.C

    # A cached reading older than this is presented as offline/stale.
    offline_after_seconds: float = Field(default=30 * 60, ge=0)
    # Cached data younger than this is reused without hitting the network.
    cache_max_age_seconds: float = Field(default=30 * 60, ge=0)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once, then cached)."""
    return Settings()

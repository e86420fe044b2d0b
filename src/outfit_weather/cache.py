"""Single-slot weather cache with age reporting.

Holds the last successfully fetched reading so it can be shown when a refresh
fails. The cache never expires anything on its own: staleness is reported as
an age and the caller decides what to do with it.

States::

    empty --store--> fresh --(refresh fails, get_with_age)--> stale-served
                       ^                                         |
                       +------------------store------------------+

Every ``store`` replaces the whole entry. Lookups never raise; a payload that
cannot be decoded or parsed is logged, removed, and reported as a miss. A
failed write is logged and otherwise ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from pydantic import BaseModel, ValidationError

from outfit_weather.schemas import CachedReading, CacheEntry, Location, WeatherReading
from outfit_weather.store import Storage

logger = logging.getLogger(__name__)

DEFAULT_KEY = "outfit_weather_cache"

#: Max lat/lon difference (degrees, ~1 km) for a cached entry to count as "here".
COORD_THRESHOLD = 0.01


def _utcnow() -> datetime:
    return datetime.now(UTC)


class WeatherCache:
    """Key-less single-slot cache persisted through a ``Storage`` backend.

    Args:
        storage: Backend providing ``read``/``write``/``delete``.
        model: Pydantic model of the cached payload. ``WeatherReading`` by
            default; the refresh flow caches whole ``WeatherSnapshot``s.
        key: Storage key for the slot.
        clock: Returns the current time (timezone-aware). Injected for tests.
    """

    def __init__(
        self,
        storage: Storage,
        *,
        model: type[BaseModel] = WeatherReading,
        key: str = DEFAULT_KEY,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.storage = storage
        self.model = model
        self.key = key
        self._clock = clock
        self._entry_type = CacheEntry[model]  # type: ignore[valid-type]

    def store(self, reading: BaseModel, location: Location | None = None) -> CacheEntry:
        """Replace the cached entry with ``reading``, stamped with the current time.

        A failed write is logged and the previous entry is left in place; the
        returned entry is still usable by the caller.
        """
        if not isinstance(reading, self.model):
            msg = f"Expected {self.model.__name__}, got {type(reading).__name__}"
            raise TypeError(msg)
        entry = self._entry_type(reading=reading, stored_at=self._clock(), location=location)
        try:
            self.storage.write(self.key, entry.model_dump_json())
        except OSError as exc:
            logger.warning("Failed to save weather cache: %s", exc)
            return entry
        logger.debug("Cached %s at %s", self.model.__name__, entry.stored_at.isoformat())
        return entry

    def get(self) -> CacheEntry | None:
        """Return the cached entry, or None if nothing usable is stored."""
        try:
            raw = self.storage.read(self.key)
        except UnicodeDecodeError as exc:
            logger.warning("Discarding undecodable weather cache: %s", exc)
            self.clear()
            return None
        except OSError as exc:
            logger.warning("Failed to read weather cache: %s", exc)
            return None
        if raw is None:
            return None
        try:
            return self._entry_type.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Discarding corrupted weather cache: %s", exc.errors()[:1])
            self.clear()
            return None

    def get_with_age(self) -> CachedReading | None:
        """Return the cached reading with its age in seconds, or None if empty."""
        entry = self.get()
        if entry is None:
            return None
        return CachedReading[self.model](  # type: ignore[valid-type]
            reading=entry.reading,
            age_seconds=self._age(entry),
            stored_at=entry.stored_at,
        )

    def age_seconds(self) -> float | None:
        """Age of the cached entry in seconds, or None if empty."""
        entry = self.get()
        return None if entry is None else self._age(entry)

    def get_for_location(
        self,
        lat: float,
        lon: float,
        max_age_seconds: float | None = None,
    ) -> CacheEntry | None:
        """Return the entry only if it was stored for (about) this location.

        Entries farther than ``COORD_THRESHOLD`` degrees away, stored without
        a location, or older than ``max_age_seconds`` are treated as misses.
        Nothing is deleted.
        """
        entry = self.get()
        if entry is None:
            return None

        age = self._age(entry)
        if max_age_seconds is not None and age > max_age_seconds:
            logger.debug("Weather cache too old: age=%.0fs max=%.0fs", age, max_age_seconds)
            return None

        if entry.location is None:
            return None
        if (
            abs(entry.location.lat - lat) > COORD_THRESHOLD
            or abs(entry.location.lon - lon) > COORD_THRESHOLD
        ):
            logger.debug(
                "Weather cache location mismatch: cached=(%s, %s) current=(%s, %s)",
                entry.location.lat,
                entry.location.lon,
                lat,
                lon,
            )
            return None

        return entry

    def clear(self) -> None:
        """Remove the cached entry, returning the cache to the empty state."""
        try:
            self.storage.delete(self.key)
        except OSError as exc:
            logger.warning("Failed to clear weather cache: %s", exc)

    def _age(self, entry: CacheEntry) -> float:
        stored_at = entry.stored_at
        if stored_at.tzinfo is None:
            stored_at = stored_at.replace(tzinfo=UTC)
        return max(0.0, (self._clock() - stored_at).total_seconds())

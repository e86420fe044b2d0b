"""Key-value persistence backends for the weather cache.

The cache only needs ``read(key) / write(key, value) / delete(key)`` on
strings, so backends stay small:

  - ``MemoryStorage``: dict-backed, one per process (tests, single runs).
  - ``JsonFileStorage``: one ``<key>.json`` file per key under a base
    directory, written atomically so a crash never leaves a half entry.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class Storage(Protocol):
    """Minimal string key-value store the cache writes through."""

    def read(self, key: str) -> str | None: ...

    def write(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStorage:
    """In-memory storage; contents vanish with the process."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def read(self, key: str) -> str | None:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage:
    """Stores each key as a JSON document under ``base_dir``."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir

    def read(self, key: str) -> str | None:
        """Return the stored text, or None if the key was never written."""
        full = self._resolve(key)
        if not full.exists():
            return None
        return full.read_text(encoding="utf-8")

    def write(self, key: str, value: str) -> None:
        """Replace the value for ``key`` in one atomic rename."""
        full = self._resolve(key)
        full.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=full.parent, prefix=f".{full.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp, full)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        self._resolve(key).unlink(missing_ok=True)

    def path_for(self, key: str) -> Path:
        """Absolute path of the file backing ``key``."""
        return self._resolve(key)

    def _resolve(self, key: str) -> Path:
        full = self.base / f"{key}.json"
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Key escapes storage base directory: {key}"
            raise ValueError(msg) from None
        return full

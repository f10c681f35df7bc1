"""
Persistent key-value store on top of diskcache.

DiskCache keeps form entries in a directory so they survive restarts. The
diskcache library makes the store safe to share between threads and
worker processes.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import diskcache

_MISSING = object()


@dataclass(frozen=True)
class CacheEntry:
    """A stored value; distinguishes a stored None from a missing key."""

    value: Any


class DiskCache:
    """
    Directory-backed key-value store.

    Usable as a context manager, which closes the store on exit.

    Attributes:
        cache_dir: Directory holding the cache files.
    """

    def __init__(self, cache_dir: str | Path) -> None:
        self.cache_dir = Path(cache_dir)
        self._cache = diskcache.Cache(str(self.cache_dir))

    def __enter__(self) -> "DiskCache":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __contains__(self, key: str) -> bool:
        return key in self._cache

    def get(self, key: str) -> CacheEntry | None:
        """Return the entry stored under key, or None when absent."""
        value = self._cache.get(key, default=_MISSING)
        if value is _MISSING:
            return None
        return CacheEntry(value)

    def set(self, key: str, value: Any) -> None:
        self._cache.set(key, value)

    def delete(self, key: str) -> bool:
        """Remove key; return True when something was removed."""
        return bool(self._cache.delete(key))

    def close(self) -> None:
        self._cache.close()

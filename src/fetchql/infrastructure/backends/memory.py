"""In-memory cache backend implementation."""

import fnmatch
import math
import time
from collections.abc import Callable
from datetime import timedelta

from cachetools import TLRUCache  # type: ignore[import-untyped]

from fetchql.core.entities.cache_entry import CacheEntry


def _entry_expiry(_key: str, entry: CacheEntry, _now: float) -> float:
    return entry.expires_at


class InMemoryCacheBackend:
    """In-memory cache backend with per-entry TTL.

    Suitable for single-process deployments. Uses cachetools' TLRUCache
    so every entry expires according to its own TTL. Expired entries are
    never returned and are purged lazily on later writes.
    """

    def __init__(
        self,
        maxsize: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache backend.

        Args:
            maxsize: Maximum number of items, or None for no bound.
            clock: Source of the current time in seconds. Must be
                consistent across calls (monotonic by default).
        """
        self._maxsize = maxsize
        self._clock = clock
        self._cache: TLRUCache[str, CacheEntry] = TLRUCache(
            maxsize=math.inf if maxsize is None else maxsize,
            ttu=_entry_expiry,
            timer=clock,
        )

    async def get(self, key: str) -> CacheEntry | None:
        """Retrieve a cache entry by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The stored entry, or None if not found or expired.
        """
        entry = self._cache.get(key)
        return entry if isinstance(entry, CacheEntry) else None

    async def set(self, key: str, value: bytes, ttl: timedelta) -> CacheEntry:
        """Store value, replacing any previous entry for the key.

        Args:
            key: The cache key.
            value: The value to store as bytes.
            ttl: Time-to-live measured from now.

        Returns:
            The freshly stamped entry.
        """
        entry = CacheEntry.create(key=key, value=value, ttl=ttl, now=self._clock())
        if entry.is_valid(entry.inserted_at):
            self._cache[key] = entry
        else:
            # TLRUCache skips expired inserts but keeps the old value.
            self._cache.pop(key, None)
        return entry

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if an unexpired entry existed and was deleted.
        """
        try:
            del self._cache[key]
            return True
        except KeyError:
            return False

    async def exists(self, key: str) -> bool:
        """Check if an unexpired entry exists for the key."""
        return key in self._cache

    async def clear(self) -> None:
        """Clear all cached values."""
        self._cache.clear()

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching pattern.

        Args:
            pattern: Glob-style pattern to match keys.

        Returns:
            Number of keys deleted.
        """
        keys_to_delete = [
            key for key in list(self._cache.keys())
            if fnmatch.fnmatch(key, pattern)
        ]

        count = 0
        for key in keys_to_delete:
            try:
                del self._cache[key]
                count += 1
            except KeyError:
                pass

        return count

    def __len__(self) -> int:
        """Return the number of items in the cache, expired ones included."""
        return len(self._cache)

    @property
    def maxsize(self) -> int | None:
        """Return the maximum size of the cache."""
        return self._maxsize

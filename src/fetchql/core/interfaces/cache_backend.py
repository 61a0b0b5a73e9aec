"""Cache backend interface."""

from datetime import timedelta
from typing import Protocol

from fetchql.core.entities.cache_entry import CacheEntry


class ICacheBackend(Protocol):
    """Contract for cache storage backends.

    All cache backends must implement this protocol to be used
    with ResponseCache. Methods are async so that a distributed store
    can be plugged in without changing callers.
    """

    async def get(self, key: str) -> CacheEntry | None:
        """Retrieve a cache entry by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The stored entry, or None if not found or expired.
        """
        ...

    async def set(self, key: str, value: bytes, ttl: timedelta) -> CacheEntry:
        """Store a value, replacing any previous entry for the key.

        Args:
            key: The cache key.
            value: The value to store as bytes.
            ttl: Time-to-live measured from now.

        Returns:
            The freshly stamped entry.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete a cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        ...

    async def exists(self, key: str) -> bool:
        """Check if an unexpired entry exists for the key."""
        ...

    async def clear(self) -> None:
        """Clear all cached values."""
        ...

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching pattern.

        Args:
            pattern: Glob-style pattern to match keys.

        Returns:
            Number of keys deleted.
        """
        ...

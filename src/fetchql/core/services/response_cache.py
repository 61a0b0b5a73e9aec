"""Response cache - TTL-bounded store for fetch-by-id responses."""

import logging
from dataclasses import replace
from datetime import timedelta
from typing import Any

from fetchql.core.entities.cache_config import CacheConfig
from fetchql.core.entities.cache_entry import CacheEntry
from fetchql.core.entities.cache_key import CacheKey
from fetchql.core.interfaces.cache_backend import ICacheBackend
from fetchql.core.interfaces.key_builder import IKeyBuilder
from fetchql.core.interfaces.serializer import ISerializer

logger = logging.getLogger(__name__)


class ResponseCache:
    """Keyed store of previously retrieved responses with per-entry expiry.

    Composes a backend, a key builder and a serializer. An explicit
    object with the lifetime chosen by its owner; inject it into
    whatever issues queries.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        key_builder: IKeyBuilder,
        serializer: ISerializer,
        config: CacheConfig | None = None,
    ) -> None:
        """Initialize the response cache.

        Args:
            backend: The cache backend to use for storage.
            key_builder: The key builder for generating cache keys.
            serializer: The serializer for encoding/decoding values.
            config: Optional cache configuration. Uses defaults if not provided.
        """
        self._backend = backend
        self._key_builder = key_builder
        self._serializer = serializer
        self._config = config or CacheConfig()

        # Statistics
        self._hits = 0
        self._misses = 0

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def key_builder(self) -> IKeyBuilder:
        """Get the key builder."""
        return self._key_builder

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, and total lookups.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "total": self._hits + self._misses,
        }

    async def lookup(self, key: CacheKey) -> CacheEntry | None:
        """Return the stored entry for ``key`` if present and unexpired.

        Args:
            key: The cache key.

        Returns:
            The entry with its deserialized value, or None on a miss.
        """
        if not self._config.enabled:
            return None

        entry = await self._backend.get(str(key))

        if entry is None:
            self._misses += 1
            logger.debug("Cache miss for %s", key)
            return None

        self._hits += 1
        logger.debug("Cache hit for %s", key)
        return replace(entry, value=self._serializer.deserialize(entry.value))

    async def store(
        self,
        key: CacheKey,
        value: Any,
        ttl: timedelta | None = None,
    ) -> CacheEntry | None:
        """Insert or overwrite the slot for ``key``.

        Args:
            key: The cache key.
            value: The payload to cache.
            ttl: Optional TTL. Uses the configured TTL if not provided.

        Returns:
            The stored entry, or None when caching is disabled.
        """
        if not self._config.enabled:
            return None

        effective_ttl = self._config.ttl if ttl is None else ttl

        serialized = self._serializer.serialize(value)
        entry = await self._backend.set(str(key), serialized, effective_ttl)
        logger.debug("Cached %s for %s", key, effective_ttl)

        return replace(entry, value=value)

    async def invalidate(self, kind: str, identifier: int | None = None) -> int:
        """Drop every cached response for one entity, or for a whole kind.

        Args:
            kind: Entity kind discriminator.
            identifier: The entity identifier, or None for all entities.

        Returns:
            Number of entries removed.
        """
        pattern = self._key_builder.pattern(kind, identifier)
        return await self._backend.delete_pattern(pattern)

    async def clear(self) -> None:
        """Clear all cached entries."""
        await self._backend.clear()
        self._hits = 0
        self._misses = 0

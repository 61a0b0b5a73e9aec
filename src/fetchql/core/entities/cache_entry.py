"""Cache entry entity."""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Holds a cached value together with the clock reading at insertion
    and its time-to-live. Validity is evaluated lazily against a clock
    reading supplied by the caller.
    """

    key: str
    value: Any
    inserted_at: float
    ttl: timedelta

    @property
    def expires_at(self) -> float:
        """Clock reading at which this entry stops being valid."""
        return self.inserted_at + self.ttl.total_seconds()

    def is_valid(self, now: float) -> bool:
        """Check if the entry is still valid at clock reading ``now``.

        Args:
            now: Current reading of the cache clock, in seconds.

        Returns:
            True while ``now < inserted_at + ttl``.
        """
        return now < self.expires_at

    @classmethod
    def create(
        cls,
        key: str,
        value: Any,
        ttl: timedelta,
        now: float,
    ) -> "CacheEntry":
        """Factory method to create a new cache entry.

        Args:
            key: The cache key.
            value: The value to cache.
            ttl: Time-to-live.
            now: Current reading of the cache clock.

        Returns:
            A new CacheEntry instance.
        """
        return cls(key=key, value=value, inserted_at=now, ttl=ttl)

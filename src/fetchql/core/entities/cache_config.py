"""Cache configuration entity."""

from dataclasses import dataclass
from datetime import timedelta

DEFAULT_TTL = timedelta(minutes=15)


@dataclass
class CacheConfig:
    """Cache configuration.

    Provides configuration options for the response cache.

    Concurrency:
        With single_flight=True, concurrent misses for the same key share
        one transport call. With single_flight=False every miss fetches on
        its own and the last successful write wins.
    """

    enabled: bool = True
    ttl: timedelta = DEFAULT_TTL
    max_size: int | None = None  # None = unbounded, entries only expire
    key_prefix: str = "fetchql"
    single_flight: bool = True

"""Wiring helpers for the default in-memory setup."""

import time
from collections.abc import Callable

from fetchql.core.entities.cache_config import CacheConfig
from fetchql.core.interfaces.transport import ITransport
from fetchql.core.services.query_service import QueryService
from fetchql.core.services.response_cache import ResponseCache
from fetchql.core.services.selection_validator import SelectionValidator
from fetchql.infrastructure.backends.memory import InMemoryCacheBackend
from fetchql.infrastructure.key_builders.default import DefaultKeyBuilder
from fetchql.infrastructure.serializers.json import JsonSerializer
from fetchql.infrastructure.transports.http import DEFAULT_ENDPOINT, HttpTransport


def create_response_cache(
    config: CacheConfig | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> ResponseCache:
    """Create a response cache backed by process memory.

    Args:
        config: Cache configuration. Uses defaults if not provided.
        clock: Time source for entry expiry.

    Returns:
        A ready-to-use ResponseCache.
    """
    config = config or CacheConfig()
    return ResponseCache(
        backend=InMemoryCacheBackend(maxsize=config.max_size, clock=clock),
        key_builder=DefaultKeyBuilder(prefix=config.key_prefix),
        serializer=JsonSerializer(),
        config=config,
    )


def create_query_service(
    endpoint: str = DEFAULT_ENDPOINT,
    config: CacheConfig | None = None,
    transport: ITransport | None = None,
    validator: SelectionValidator | None = None,
) -> QueryService:
    """Create a query service with an in-memory response cache.

    Args:
        endpoint: GraphQL endpoint, used when no transport is given.
        config: Cache configuration.
        transport: Transport to use instead of an HttpTransport.
        validator: Optional pre-flight schema check.

    Returns:
        A QueryService owning a fresh cache.
    """
    return QueryService(
        transport=transport or HttpTransport(endpoint=endpoint),
        cache=create_response_cache(config),
        validator=validator,
    )

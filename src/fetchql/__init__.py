"""FetchQL - client-side selection building and response caching for GraphQL.

Composes fetch-by-id queries from a caller-supplied (possibly partial)
field specification, falling back to a rich default shape, and caches
the responses in memory for a bounded time so repeated requests skip
the network.

Example:
    import asyncio

    from fetchql import HttpTransport, Source, Success, create_query_service

    async def main() -> None:
        async with HttpTransport() as transport:
            service = create_query_service(transport=transport)

            outcome = await service.fetch_by_id(1, "id,name,species")
            assert outcome.source is Source.FRESH

            outcome = await service.fetch_by_id(1, "id, name, species")
            assert outcome.source is Source.CACHE
            if isinstance(outcome.result, Success):
                print(outcome.result.data)

            episodes = await service.fetch_all_sorted()

    asyncio.run(main())
"""

from fetchql.client import create_query_service, create_response_cache
from fetchql.core.entities import (
    DEFAULT_FIELD_SPEC,
    DEFAULT_TTL,
    CacheConfig,
    CacheEntry,
    CacheKey,
    Episode,
    ErrorKind,
    Failure,
    FetchOutcome,
    Field,
    FieldSpec,
    QueryResult,
    Source,
    Success,
)
from fetchql.core.interfaces import (
    ICacheBackend,
    IKeyBuilder,
    ISerializer,
    ITransport,
)
from fetchql.core.services import (
    CHARACTERS_QUERY,
    EPISODES_QUERY,
    QueryService,
    ResponseCache,
    SelectionBuilder,
    SelectionValidator,
)
from fetchql.infrastructure import (
    DefaultKeyBuilder,
    HttpTransport,
    InMemoryCacheBackend,
    JsonSerializer,
    SchemaTransport,
    SerializationError,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheConfig",
    "CacheEntry",
    "CacheKey",
    "DEFAULT_TTL",
    "Field",
    "FieldSpec",
    "DEFAULT_FIELD_SPEC",
    # Results
    "Episode",
    "ErrorKind",
    "Failure",
    "FetchOutcome",
    "QueryResult",
    "Source",
    "Success",
    # Core interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "ISerializer",
    "ITransport",
    # Core services
    "QueryService",
    "ResponseCache",
    "SelectionBuilder",
    "SelectionValidator",
    "CHARACTERS_QUERY",
    "EPISODES_QUERY",
    # Infrastructure implementations
    "InMemoryCacheBackend",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "SerializationError",
    "HttpTransport",
    "SchemaTransport",
    # Wiring
    "create_query_service",
    "create_response_cache",
]

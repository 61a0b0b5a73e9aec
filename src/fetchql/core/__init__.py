"""Core domain layer for fetchql."""

from fetchql.core.entities import (
    CacheConfig,
    CacheEntry,
    CacheKey,
    FieldSpec,
    QueryResult,
)
from fetchql.core.interfaces import (
    ICacheBackend,
    IKeyBuilder,
    ISerializer,
    ITransport,
)
from fetchql.core.services import QueryService, ResponseCache, SelectionBuilder

__all__ = [
    # Entities
    "CacheConfig",
    "CacheEntry",
    "CacheKey",
    "FieldSpec",
    "QueryResult",
    # Interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "ISerializer",
    "ITransport",
    # Services
    "QueryService",
    "ResponseCache",
    "SelectionBuilder",
]

"""Infrastructure layer implementations for fetchql."""

from fetchql.infrastructure.backends import InMemoryCacheBackend
from fetchql.infrastructure.key_builders import DefaultKeyBuilder
from fetchql.infrastructure.serializers import JsonSerializer, SerializationError
from fetchql.infrastructure.transports import (
    DEFAULT_ENDPOINT,
    HttpTransport,
    SchemaTransport,
)

__all__ = [
    "InMemoryCacheBackend",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "SerializationError",
    "HttpTransport",
    "SchemaTransport",
    "DEFAULT_ENDPOINT",
]

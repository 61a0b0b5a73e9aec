"""Core interfaces (Protocol classes) for fetchql."""

from fetchql.core.interfaces.cache_backend import ICacheBackend
from fetchql.core.interfaces.key_builder import IKeyBuilder
from fetchql.core.interfaces.serializer import ISerializer
from fetchql.core.interfaces.transport import ITransport

__all__ = [
    "ICacheBackend",
    "IKeyBuilder",
    "ISerializer",
    "ITransport",
]

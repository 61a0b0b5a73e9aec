"""Key builder interface."""

from typing import Protocol

from fetchql.core.entities.cache_key import CacheKey
from fetchql.core.entities.field_spec import FieldSpec


class IKeyBuilder(Protocol):
    """Contract for building cache keys for fetch-by-id requests.

    Key builders must be deterministic: the same kind, identifier and
    field specification always yield the same key.
    """

    def build(self, kind: str, identifier: int, field_spec: FieldSpec) -> CacheKey:
        """Build the cache key for one fetch-by-id request.

        Args:
            kind: Entity kind discriminator (e.g. ``"character"``).
            identifier: The entity identifier.
            field_spec: The field specification actually used.

        Returns:
            The cache key for the request.
        """
        ...

    def pattern(self, kind: str, identifier: int | None = None) -> str:
        """Build a glob pattern matching all keys of an entity or kind."""
        ...

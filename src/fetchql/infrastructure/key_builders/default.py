"""Default key builder implementation."""

import hashlib

from fetchql.core.entities.cache_key import CacheKey
from fetchql.core.entities.field_spec import FieldSpec


class DefaultKeyBuilder:
    """Default key builder for fetch-by-id requests.

    Keys have the form ``<prefix>:<kind>:<identifier>:<spec digest>``.
    The digest is taken over ``FieldSpec.canonical``, so ``"id, name"``
    and ``"id,name"`` share a slot while ``"name,id"`` does not.
    """

    def __init__(self, prefix: str = "fetchql", digest_size: int = 16) -> None:
        """Initialize the key builder.

        Args:
            prefix: Prefix for all cache keys.
            digest_size: Number of hex characters of the SHA-256 digest
                kept in the key.
        """
        self._prefix = prefix
        self._digest_size = digest_size

    @property
    def prefix(self) -> str:
        """Get the key prefix."""
        return self._prefix

    def build(self, kind: str, identifier: int, field_spec: FieldSpec) -> CacheKey:
        """Build the cache key for one fetch-by-id request."""
        return CacheKey(
            prefix=self._prefix,
            kind=kind,
            identifier=identifier,
            spec_hash=self.digest(field_spec),
        )

    def digest(self, field_spec: FieldSpec) -> str:
        """Hash the canonical form of a field specification."""
        canonical = field_spec.canonical.encode("utf-8")
        return hashlib.sha256(canonical).hexdigest()[: self._digest_size]

    def pattern(self, kind: str, identifier: int | None = None) -> str:
        """Build a glob pattern matching all keys of an entity or kind.

        Args:
            kind: Entity kind discriminator.
            identifier: Restrict the pattern to one entity if given.

        Returns:
            A glob pattern for ``ICacheBackend.delete_pattern``.
        """
        parts = [self._prefix, kind]
        parts.append("*" if identifier is None else f"{identifier}:*")
        return ":".join(parts)

"""Cache key value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheKey:
    """Immutable cache key value object.

    Identifies one cached fetch-by-id response: the entity kind, the
    identifier and a digest of the field specification that was
    requested. Built by an ``IKeyBuilder``.
    """

    prefix: str
    kind: str
    identifier: int
    spec_hash: str

    def __str__(self) -> str:
        return ":".join([self.prefix, self.kind, str(self.identifier), self.spec_hash])

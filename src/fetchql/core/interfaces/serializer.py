"""Payload serializer interface."""

from typing import Protocol

from fetchql.core.entities.query_result import JsonObject


class ISerializer(Protocol):
    """Contract for encoding response payloads for storage.

    ``ResponseCache`` stores only the encoded bytes and decodes a fresh
    object on every lookup, so callers may mutate what they receive
    without affecting later hits. Implementations must therefore return
    a new object from every ``deserialize`` call.
    """

    def serialize(self, payload: JsonObject) -> bytes:
        """Encode a response ``data`` object.

        Raises:
            SerializationError: If the payload holds non-JSON values.
        """
        ...

    def deserialize(self, data: bytes) -> JsonObject:
        """Decode bytes produced by ``serialize`` into a new payload.

        Raises:
            SerializationError: If the bytes do not decode to an object.
        """
        ...

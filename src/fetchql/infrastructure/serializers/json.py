"""JSON payload serializer."""

import json

from fetchql.core.entities.query_result import JsonObject


class SerializationError(Exception):
    """Raised when a payload cannot be encoded or decoded."""

    pass


class JsonSerializer:
    """Stores response payloads as compact UTF-8 JSON.

    GraphQL responses are JSON to begin with, so encoding is lossless;
    every decode yields an independent copy of the payload.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def serialize(self, payload: JsonObject) -> bytes:
        try:
            text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Payload is not JSON-serializable: {e}") from e
        return text.encode(self._encoding)

    def deserialize(self, data: bytes) -> JsonObject:
        try:
            payload = json.loads(data.decode(self._encoding))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SerializationError(f"Cached payload is corrupt: {e}") from e
        if not isinstance(payload, dict):
            raise SerializationError(
                f"Cached payload is a {type(payload).__name__}, expected an object"
            )
        return payload

"""Tests for JsonSerializer."""

import pytest

from fetchql.infrastructure.serializers.json import JsonSerializer, SerializationError


class TestJsonSerializer:
    """Tests for JsonSerializer."""

    @pytest.fixture
    def serializer(self) -> JsonSerializer:
        """Create a serializer for testing."""
        return JsonSerializer()

    def test_serialize_payload(self, serializer: JsonSerializer) -> None:
        """Test serializing a response payload."""
        result = serializer.serialize({"character": {"id": "1", "name": "Rick"}})

        assert isinstance(result, bytes)
        assert b"Rick" in result

    def test_deserialize_payload(self, serializer: JsonSerializer) -> None:
        """Test deserializing a response payload."""
        result = serializer.deserialize(b'{"character": {"id": "1"}}')

        assert result == {"character": {"id": "1"}}

    def test_unicode(self, serializer: JsonSerializer) -> None:
        """Test non-ASCII names survive encoding."""
        payload = {"character": {"name": "Señor Meeseeks"}}

        assert serializer.deserialize(serializer.serialize(payload)) == payload

    def test_serialize_error(self, serializer: JsonSerializer) -> None:
        """Test that non-serializable values raise SerializationError."""
        with pytest.raises(SerializationError):
            serializer.serialize({"value": object()})

    def test_deserialize_error(self, serializer: JsonSerializer) -> None:
        """Test that invalid data raises SerializationError."""
        with pytest.raises(SerializationError):
            serializer.deserialize(b"not valid json")

    @pytest.mark.parametrize("data", [b"[1, 2]", b'"text"', b"null"])
    def test_deserialize_non_object(self, serializer: JsonSerializer, data: bytes) -> None:
        """Test that payloads which are not JSON objects are rejected."""
        with pytest.raises(SerializationError):
            serializer.deserialize(data)

    def test_deserialize_returns_new_object(self, serializer: JsonSerializer) -> None:
        """Test each decode yields an independent payload."""
        data = serializer.serialize({"character": {"name": "Rick"}})
        first = serializer.deserialize(data)
        first["character"]["name"] = "Morty"

        assert serializer.deserialize(data) == {"character": {"name": "Rick"}}

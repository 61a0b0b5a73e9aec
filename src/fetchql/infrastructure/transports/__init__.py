"""Transports that deliver queries to a GraphQL API."""

from fetchql.infrastructure.transports.base import error_messages, response_to_result
from fetchql.infrastructure.transports.http import DEFAULT_ENDPOINT, HttpTransport
from fetchql.infrastructure.transports.schema import SchemaTransport

__all__ = [
    "DEFAULT_ENDPOINT",
    "HttpTransport",
    "SchemaTransport",
    "error_messages",
    "response_to_result",
]

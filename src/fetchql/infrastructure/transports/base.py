"""Shared conversion of GraphQL response bodies into query results."""

from typing import Any

from fetchql.core.entities.query_result import Failure, QueryResult, Success


def error_messages(errors: Any) -> tuple[str, ...]:
    """Extract the ordered messages from a GraphQL ``errors`` list."""
    if not isinstance(errors, list):
        return (str(errors),)
    return tuple(
        str(error.get("message", error)) if isinstance(error, dict) else str(error)
        for error in errors
    )


def response_to_result(body: Any) -> QueryResult:
    """Convert a decoded GraphQL response body into a QueryResult.

    Any reported error makes the result a ``Failure``, even when partial
    data came along with it.

    Args:
        body: The decoded response (``{"data": ..., "errors": [...]}``).

    Returns:
        ``Failure`` with the error messages, or ``Success`` with ``data``.
    """
    if not isinstance(body, dict):
        return Failure(errors=("Malformed response: expected a JSON object.",))

    errors = body.get("errors")
    if errors:
        return Failure(errors=error_messages(errors))

    data = body.get("data")
    if data is not None and not isinstance(data, dict):
        return Failure(errors=("Malformed response: 'data' is not an object.",))
    return Success(data)

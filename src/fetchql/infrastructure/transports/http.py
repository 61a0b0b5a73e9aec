"""HTTP transport for a remote GraphQL endpoint."""

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx

from fetchql.core.entities.query_result import Failure, QueryResult, Success
from fetchql.infrastructure.transports.base import response_to_result

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://rickandmortyapi.com/graphql"


class HttpTransport:
    """Sends queries as JSON POST requests to a single GraphQL endpoint.

    Network, HTTP and decoding problems are returned as ``Failure``
    values, never raised.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            endpoint: URL of the GraphQL endpoint, fixed for the lifetime
                of the transport.
            client: Optional client to use. The transport only closes
                clients it created itself.
            timeout: Request timeout in seconds for an owned client.
            headers: Extra headers sent with every request.
        """
        self._endpoint = endpoint
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._headers = dict(headers or {})

    @property
    def endpoint(self) -> str:
        """Get the endpoint URL."""
        return self._endpoint

    async def execute(
        self,
        query: str,
        variables: Mapping[str, Any] | None = None,
    ) -> QueryResult:
        """Execute a GraphQL query over HTTP.

        Args:
            query: The complete query text.
            variables: Variables for the query.

        Returns:
            ``Success`` with the response data, or ``Failure``.
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = dict(variables)

        try:
            response = await self._client.post(
                self._endpoint, json=payload, headers=self._headers
            )
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", self._endpoint, e)
            return Failure(errors=(f"Request to {self._endpoint} failed: {e}",))

        try:
            body = response.json()
        except ValueError:
            logger.warning(
                "Non-JSON response from %s (HTTP %s)",
                self._endpoint,
                response.status_code,
            )
            return Failure(
                errors=(f"HTTP {response.status_code}: response is not valid JSON.",)
            )

        result = response_to_result(body)
        if response.is_error and isinstance(result, Success):
            return Failure(
                errors=(f"HTTP {response.status_code} {response.reason_phrase}",)
            )
        return result

    async def aclose(self) -> None:
        """Close the underlying client if the transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

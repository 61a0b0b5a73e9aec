"""Transport interface."""

from collections.abc import Mapping
from typing import Any, Protocol

from fetchql.core.entities.query_result import QueryResult


class ITransport(Protocol):
    """Contract for sending a finished query to the remote API.

    A transport talks to exactly one endpoint for its whole lifetime
    and reports every problem as a ``Failure`` value.
    """

    async def execute(
        self,
        query: str,
        variables: Mapping[str, Any] | None = None,
    ) -> QueryResult:
        """Execute a GraphQL query.

        Args:
            query: The complete query text.
            variables: Variables for the query.

        Returns:
            ``Success`` with the response data, or ``Failure`` with the
            ordered error messages.
        """
        ...

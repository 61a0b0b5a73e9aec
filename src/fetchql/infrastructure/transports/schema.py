"""In-process transport executing queries against a local schema."""

from collections.abc import Mapping
from typing import Any

from ariadne import graphql
from graphql import GraphQLSchema

from fetchql.core.entities.query_result import QueryResult
from fetchql.infrastructure.transports.base import response_to_result


class SchemaTransport:
    """Executes queries with Ariadne against an executable schema.

    Useful for offline work and tests: the schema plays the part of the
    remote API, including its validation errors.

    Example:
        from ariadne import QueryType, make_executable_schema

        query = QueryType()

        @query.field("character")
        def resolve_character(_, info, id):
            return {"id": id, "name": "Rick Sanchez"}

        schema = make_executable_schema(type_defs, query)
        transport = SchemaTransport(schema)
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        context_value: Any = None,
        debug: bool = False,
    ) -> None:
        """Initialize the transport.

        Args:
            schema: Executable schema with resolvers bound.
            context_value: Context passed to resolvers.
            debug: Include error details in responses.
        """
        self._schema = schema
        self._context_value = context_value
        self._debug = debug
        self._calls = 0

    @property
    def calls(self) -> int:
        """Number of queries executed so far."""
        return self._calls

    async def execute(
        self,
        query: str,
        variables: Mapping[str, Any] | None = None,
    ) -> QueryResult:
        """Execute a query against the local schema."""
        self._calls += 1
        data: dict[str, Any] = {"query": query}
        if variables:
            data["variables"] = dict(variables)

        _success, body = await graphql(
            self._schema,
            data,
            context_value=self._context_value,
            debug=self._debug,
        )
        return response_to_result(body)

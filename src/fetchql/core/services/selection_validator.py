"""Optional pre-flight validation of composed queries against a schema.

Kept apart from ``SelectionBuilder`` so that composition stays a pure,
schema-free step. Use it when the remote schema is known locally and
bad field names should be rejected without a network round-trip.
"""

from graphql import GraphQLError, GraphQLSchema, build_schema, parse, validate


class SelectionValidator:
    """Validates query text against a GraphQL schema using graphql-core."""

    def __init__(self, schema: GraphQLSchema | str) -> None:
        """Initialize the validator.

        Args:
            schema: A schema object or SDL text.
        """
        if isinstance(schema, str):
            schema = build_schema(schema)
        self._schema = schema

    @property
    def schema(self) -> GraphQLSchema:
        """Get the schema queries are validated against."""
        return self._schema

    def validate(self, query: str) -> list[str]:
        """Validate a query.

        Args:
            query: Complete query text.

        Returns:
            Error messages in order; empty when the query is valid.
        """
        try:
            document = parse(query)
        except GraphQLError as e:
            return [e.message]
        return [error.message for error in validate(self._schema, document)]

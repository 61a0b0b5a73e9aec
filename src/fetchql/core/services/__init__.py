"""Domain services for fetchql."""

from fetchql.core.services.query_service import (
    CHARACTERS_QUERY,
    EPISODES_QUERY,
    QueryService,
    classify,
    parse_identifier,
    sort_episodes,
)
from fetchql.core.services.response_cache import ResponseCache
from fetchql.core.services.selection_builder import (
    BY_ID_QUERY_TEMPLATE,
    SelectionBuilder,
    SelectionSyntaxError,
    parse_fields,
)
from fetchql.core.services.selection_validator import SelectionValidator

__all__ = [
    "QueryService",
    "ResponseCache",
    # Selection composition
    "SelectionBuilder",
    "SelectionSyntaxError",
    "SelectionValidator",
    "parse_fields",
    "BY_ID_QUERY_TEMPLATE",
    # List queries
    "CHARACTERS_QUERY",
    "EPISODES_QUERY",
    "classify",
    "parse_identifier",
    "sort_episodes",
]

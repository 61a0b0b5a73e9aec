"""Domain entities for fetchql."""

from fetchql.core.entities.cache_config import DEFAULT_TTL, CacheConfig
from fetchql.core.entities.cache_entry import CacheEntry
from fetchql.core.entities.cache_key import CacheKey
from fetchql.core.entities.field_spec import (
    DEFAULT_FIELD_SPEC,
    DEFAULT_FIELD_SPEC_TEXT,
    Field,
    FieldSpec,
)
from fetchql.core.entities.query_result import (
    Episode,
    ErrorKind,
    Failure,
    FetchOutcome,
    JsonObject,
    QueryResult,
    Source,
    Success,
)

__all__ = [
    "CacheEntry",
    "CacheKey",
    "CacheConfig",
    "DEFAULT_TTL",
    # Field specification
    "Field",
    "FieldSpec",
    "DEFAULT_FIELD_SPEC",
    "DEFAULT_FIELD_SPEC_TEXT",
    # Query results
    "Episode",
    "ErrorKind",
    "Failure",
    "FetchOutcome",
    "JsonObject",
    "QueryResult",
    "Source",
    "Success",
]

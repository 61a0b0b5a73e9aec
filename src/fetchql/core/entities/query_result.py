"""Query result entities.

A query yields either a ``Success`` carrying the response data or a
``Failure`` carrying the ordered error messages. Caller-facing
operations return these values instead of raising.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

JsonObject = dict[str, Any]


class ErrorKind(Enum):
    """Kind of a failed query.

    INVALID_ARGUMENT: Rejected before reaching the cache or transport.
    REMOTE_ERROR: The remote API reported one or more errors.
    EMPTY_RESULT: The remote API succeeded but returned no data.
    """

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    REMOTE_ERROR = "REMOTE_ERROR"
    EMPTY_RESULT = "EMPTY_RESULT"


class Source(Enum):
    """Where a fetch-by-id outcome came from."""

    CACHE = "cache"
    FRESH = "fresh"
    NONE = "none"  # rejected before any lookup


@dataclass(frozen=True)
class Success:
    """Successful query carrying the response ``data`` object."""

    data: JsonObject | None

    @property
    def is_empty(self) -> bool:
        """Check if the payload carries no data.

        A payload is empty when it is missing, has no fields, or every
        top-level field is null (the API answers ``{"character": null}``
        for unknown ids).
        """
        if not self.data:
            return True
        return all(value is None for value in self.data.values())


@dataclass(frozen=True)
class Failure:
    """Failed query carrying the ordered error messages."""

    errors: tuple[str, ...]
    kind: ErrorKind = ErrorKind.REMOTE_ERROR

    @classmethod
    def invalid_argument(cls, message: str) -> "Failure":
        """Create a failure for a rejected caller argument."""
        return cls(errors=(message,), kind=ErrorKind.INVALID_ARGUMENT)

    @classmethod
    def empty_result(cls) -> "Failure":
        """Create a failure for a response without data."""
        return cls(
            errors=("No data returned from the query.",),
            kind=ErrorKind.EMPTY_RESULT,
        )


QueryResult = Success | Failure


@dataclass(frozen=True)
class FetchOutcome:
    """Result of a fetch-by-id call tagged with its source."""

    source: Source
    result: QueryResult

    @property
    def from_cache(self) -> bool:
        """Check if the outcome was served from the cache."""
        return self.source is Source.CACHE


@dataclass(frozen=True)
class Episode:
    """Episode summary used by the sorted episode listing."""

    id: str
    name: str
    air_date: str | None = None

    @classmethod
    def from_payload(cls, payload: JsonObject) -> "Episode":
        """Build an Episode from one entry of ``episodes.results``."""
        return cls(
            id=str(payload.get("id", "")),
            name=payload.get("name") or "",
            air_date=payload.get("air_date"),
        )

"""Query service - orchestrates selection building, caching and transport."""

import asyncio
import logging
from typing import Any

from fetchql.core.entities.cache_key import CacheKey
from fetchql.core.entities.query_result import (
    Episode,
    ErrorKind,
    Failure,
    FetchOutcome,
    QueryResult,
    Source,
    Success,
)
from fetchql.core.interfaces.transport import ITransport
from fetchql.core.services.response_cache import ResponseCache
from fetchql.core.services.selection_builder import SelectionBuilder
from fetchql.core.services.selection_validator import SelectionValidator

logger = logging.getLogger(__name__)

CHARACTERS_QUERY = """
query {
    characters {
        results {
            id
            name
            status
            species
            type
            gender
            origin {
                id
                name
                type
                dimension
                residents {
                    id
                    name
                }
                created
            }
            location {
                id
                name
                type
                dimension
                residents {
                    id
                    name
                }
                created
            }
            image
            episode {
                id
                name
                air_date
                episode
                characters {
                    id
                    name
                }
                created
            }
            created
        }
    }
}
"""

EPISODES_QUERY = """
query {
    episodes {
        results {
            id
            name
            air_date
            episode
            characters {
                id
                name
            }
            created
        }
    }
}
"""


def parse_identifier(identifier: Any) -> int | None:
    """Coerce a caller-supplied identifier to a positive int.

    Accepts ints and strings of decimal digits. Returns None for
    anything else, including booleans, zero and negative numbers.
    """
    if isinstance(identifier, bool):
        return None
    if isinstance(identifier, str):
        text = identifier.strip()
        if not text.isdecimal():
            return None
        identifier = int(text)
    if not isinstance(identifier, int) or identifier <= 0:
        return None
    return identifier


def classify(result: QueryResult) -> QueryResult:
    """Turn a successful response without data into an empty-result failure."""
    if isinstance(result, Success) and result.is_empty:
        return Failure.empty_result()
    return result


def sort_episodes(episodes: list[Episode]) -> list[Episode]:
    """Sort episodes by name; equal names keep their input order."""
    return sorted(episodes, key=lambda episode: episode.name)


class QueryService:
    """Caller-facing operations over a remote GraphQL API.

    Fetch-by-id requests go through the response cache; list queries
    always reach the transport.

    With ``CacheConfig.single_flight`` enabled, concurrent misses for the
    same key share one in-flight transport call and all callers observe
    its result.
    """

    def __init__(
        self,
        transport: ITransport,
        cache: ResponseCache,
        builder: SelectionBuilder | None = None,
        validator: SelectionValidator | None = None,
        entity: str = "character",
    ) -> None:
        """Initialize the query service.

        Args:
            transport: Sends finished queries to the remote API.
            cache: The response cache for fetch-by-id results.
            builder: Selection builder. Uses the default shape if not provided.
            validator: Optional pre-flight schema check for field specs.
            entity: Root field of the fetch-by-id query, also the cache
                key's kind discriminator.
        """
        self._transport = transport
        self._cache = cache
        self._builder = builder or SelectionBuilder()
        self._validator = validator
        self._entity = entity
        self._in_flight: dict[str, asyncio.Task[QueryResult]] = {}

    @property
    def cache(self) -> ResponseCache:
        """Get the response cache."""
        return self._cache

    async def fetch_by_id(
        self,
        identifier: Any,
        raw_spec: str | None = None,
    ) -> FetchOutcome:
        """Fetch one entity by identifier, serving from cache when possible.

        Args:
            identifier: Positive integer id (or a string of digits).
            raw_spec: Optional field specification; the default shape is
                used when it is None or blank.

        Returns:
            The outcome tagged with ``Source.CACHE`` or ``Source.FRESH``.
            Rejected arguments yield ``Source.NONE``.
        """
        entity_id = parse_identifier(identifier)
        if entity_id is None:
            return FetchOutcome(
                source=Source.NONE,
                result=Failure.invalid_argument(
                    f"Invalid ID {identifier!r}. Please enter a positive integer."
                ),
            )

        field_spec = self._builder.build(raw_spec)
        query = self._builder.compose(field_spec, root_field=self._entity)

        if self._validator is not None:
            problems = self._validator.validate(query)
            if problems:
                return FetchOutcome(
                    source=Source.NONE,
                    result=Failure(
                        errors=tuple(problems),
                        kind=ErrorKind.INVALID_ARGUMENT,
                    ),
                )

        key = self._cache.key_builder.build(self._entity, entity_id, field_spec)

        entry = await self._cache.lookup(key)
        if entry is not None:
            return FetchOutcome(source=Source.CACHE, result=Success(entry.value))

        if not self._cache.config.single_flight:
            result = await self._fetch_and_store(key, query, entity_id)
            return FetchOutcome(source=Source.FRESH, result=result)

        slot = str(key)
        task = self._in_flight.get(slot)
        if task is None or task.done():
            task = asyncio.ensure_future(self._fetch_and_store(key, query, entity_id))
            self._in_flight[slot] = task
            task.add_done_callback(lambda done: self._release(slot, done))
        else:
            logger.debug("Joining in-flight fetch for %s", key)

        result = await asyncio.shield(task)
        return FetchOutcome(source=Source.FRESH, result=result)

    async def fetch_all(self) -> QueryResult:
        """Fetch all characters with the fixed list selection."""
        return classify(await self._transport.execute(CHARACTERS_QUERY))

    async def fetch_all_episodes(self) -> QueryResult:
        """Fetch all episodes with the fixed list selection."""
        return classify(await self._transport.execute(EPISODES_QUERY))

    async def fetch_all_sorted(self) -> list[Episode] | Failure:
        """Fetch all episodes ordered by name.

        Returns:
            Episodes ascending by name, ties in response order, or the
            failure reported by the transport.
        """
        result = await self.fetch_all_episodes()
        if isinstance(result, Failure):
            return result

        data = result.data or {}
        results = (data.get("episodes") or {}).get("results") or []
        # Null entries carry nothing to sort.
        episodes = [
            Episode.from_payload(item) for item in results if isinstance(item, dict)
        ]
        return sort_episodes(episodes)

    def _release(self, slot: str, task: "asyncio.Task[QueryResult]") -> None:
        if self._in_flight.get(slot) is task:
            del self._in_flight[slot]

    async def _fetch_and_store(
        self,
        key: CacheKey,
        query: str,
        entity_id: int,
    ) -> QueryResult:
        result = classify(await self._transport.execute(query, {"id": entity_id}))

        if isinstance(result, Failure):
            logger.warning(
                "Fetching %s %s failed (%s): %s",
                self._entity,
                entity_id,
                result.kind.value,
                "; ".join(result.errors),
            )
            return result

        await self._cache.store(key, result.data)
        return result

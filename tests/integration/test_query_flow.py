"""Integration tests running QueryService against a local Ariadne schema."""

import pytest

pytest.importorskip("ariadne")

from ariadne import QueryType, make_executable_schema  # noqa: E402

from fetchql import (  # noqa: E402
    CacheConfig,
    Episode,
    ErrorKind,
    Failure,
    QueryService,
    SchemaTransport,
    SelectionValidator,
    Source,
    Success,
    create_response_cache,
)

TYPE_DEFS = """
type Query {
    character(id: ID!): Character
    characters: Characters
    episodes: Episodes
}

type Characters {
    results: [Character]
}

type Episodes {
    results: [Episode]
}

type Character {
    id: ID
    name: String
    status: String
    species: String
    type: String
    gender: String
    origin: Location
    location: Location
    image: String
    episode: [Episode]
    created: String
}

type Location {
    id: ID
    name: String
    type: String
    dimension: String
    residents: [Character]
    created: String
}

type Episode {
    id: ID
    name: String
    air_date: String
    episode: String
    characters: [Character]
    created: String
}
"""

EARTH = {
    "id": "1",
    "name": "Earth (C-137)",
    "type": "Planet",
    "dimension": "Dimension C-137",
    "residents": [{"id": "1", "name": "Rick Sanchez"}],
    "created": "2017-11-10T12:42:04.162Z",
}

EPISODES = [
    {"id": "2", "name": "Lawnmower Dog", "air_date": "December 9, 2013",
     "episode": "S01E02", "characters": [], "created": "2017-11-10T12:56:33.916Z"},
    {"id": "1", "name": "Pilot", "air_date": "December 2, 2013",
     "episode": "S01E01", "characters": [{"id": "1", "name": "Rick Sanchez"}],
     "created": "2017-11-10T12:56:33.798Z"},
    {"id": "3", "name": "Anatomy Park", "air_date": "December 16, 2013",
     "episode": "S01E03", "characters": [], "created": "2017-11-10T12:56:34.022Z"},
]

CHARACTERS = {
    "1": {
        "id": "1",
        "name": "Rick Sanchez",
        "status": "Alive",
        "species": "Human",
        "type": "",
        "gender": "Male",
        "origin": EARTH,
        "location": EARTH,
        "image": "https://rickandmortyapi.com/api/character/avatar/1.jpeg",
        "episode": [EPISODES[1]],
        "created": "2017-11-04T18:48:46.250Z",
    },
}

query = QueryType()


@query.field("character")
def resolve_character(_, info, id):
    return CHARACTERS.get(str(id))


@query.field("characters")
def resolve_characters(_, info):
    return {"results": list(CHARACTERS.values())}


@query.field("episodes")
def resolve_episodes(_, info):
    return {"results": EPISODES}


schema = make_executable_schema(TYPE_DEFS, query)


@pytest.fixture
def transport() -> SchemaTransport:
    return SchemaTransport(schema)


@pytest.fixture
def service(transport: SchemaTransport, clock) -> QueryService:
    return QueryService(
        transport=transport,
        cache=create_response_cache(CacheConfig(), clock=clock),
    )


class TestQueryFlow:
    """End-to-end tests through the local schema."""

    @pytest.mark.asyncio
    async def test_default_selection_then_cache(
        self, service: QueryService, transport: SchemaTransport
    ) -> None:
        """Test the default shape is fetched once and then served from cache."""
        first = await service.fetch_by_id(1)
        second = await service.fetch_by_id(1)

        assert first.source is Source.FRESH
        assert isinstance(first.result, Success)
        character = first.result.data["character"]
        assert character["name"] == "Rick Sanchez"
        assert character["origin"]["residents"] == [{"id": "1", "name": "Rick Sanchez"}]
        assert character["episode"][0]["characters"] == [{"id": "1", "name": "Rick Sanchez"}]

        assert second.source is Source.CACHE
        assert second.result == first.result
        assert transport.calls == 1

    @pytest.mark.asyncio
    async def test_partial_selection(self, service: QueryService) -> None:
        """Test a partial selection returns only the requested fields."""
        outcome = await service.fetch_by_id(1, "id,name")

        assert outcome.result == Success(
            {"character": {"id": "1", "name": "Rick Sanchez"}}
        )

    @pytest.mark.asyncio
    async def test_expired_entry_refetched(
        self, service: QueryService, transport: SchemaTransport, clock
    ) -> None:
        """Test the cached response is refetched after fifteen minutes."""
        await service.fetch_by_id(1, "id")
        clock.advance(15 * 60 - 1)
        assert (await service.fetch_by_id(1, "id")).source is Source.CACHE

        clock.advance(2)
        assert (await service.fetch_by_id(1, "id")).source is Source.FRESH
        assert transport.calls == 2

    @pytest.mark.asyncio
    async def test_unknown_field_reported_by_server(
        self, service: QueryService, transport: SchemaTransport
    ) -> None:
        """Test unknown fields are forwarded and the server error surfaces."""
        first = await service.fetch_by_id(1, "id,bogus")
        second = await service.fetch_by_id(1, "id,bogus")

        assert isinstance(first.result, Failure)
        assert first.result.kind is ErrorKind.REMOTE_ERROR
        assert "bogus" in first.result.errors[0]
        assert second.source is Source.FRESH
        assert transport.calls == 2

    @pytest.mark.asyncio
    async def test_unknown_id_is_empty_result(self, service: QueryService) -> None:
        """Test an id the server does not know yields an empty result."""
        outcome = await service.fetch_by_id(404)

        assert isinstance(outcome.result, Failure)
        assert outcome.result.kind is ErrorKind.EMPTY_RESULT

    @pytest.mark.asyncio
    async def test_fetch_all(self, service: QueryService) -> None:
        """Test listing all characters with the fixed selection."""
        result = await service.fetch_all()

        assert isinstance(result, Success)
        assert [c["name"] for c in result.data["characters"]["results"]] == [
            "Rick Sanchez"
        ]

    @pytest.mark.asyncio
    async def test_fetch_all_sorted(self, service: QueryService) -> None:
        """Test episodes come back sorted by name."""
        episodes = await service.fetch_all_sorted()

        assert episodes == [
            Episode(id="3", name="Anatomy Park", air_date="December 16, 2013"),
            Episode(id="2", name="Lawnmower Dog", air_date="December 9, 2013"),
            Episode(id="1", name="Pilot", air_date="December 2, 2013"),
        ]

    @pytest.mark.asyncio
    async def test_validator_uses_local_schema(
        self, transport: SchemaTransport, clock
    ) -> None:
        """Test the validator rejects bad fields without executing anything."""
        service = QueryService(
            transport=transport,
            cache=create_response_cache(clock=clock),
            validator=SelectionValidator(schema),
        )

        outcome = await service.fetch_by_id(1, "id,bogus")

        assert outcome.source is Source.NONE
        assert transport.calls == 0

"""Tests for the in-memory ownership data source."""

import pytest

from ownership_guard import InMemoryOwnershipQuery, OwnershipLookup, OwnershipQuery
from ownership_guard.features.ownership.repositories.memory_query import read_field

from conftest import StringDocument


@pytest.fixture
def rows():
    return [
        {"id": "doc1", "owner_id": "user1", "tenant_id": "tenant1"},
        {"id": "doc2", "owner_id": "user2", "tenant_id": "tenant1"},
        {"id": "doc3", "owner_id": "user1", "tenant_id": "tenant2"},
        {"id": "doc4", "owner_id": None, "tenant_id": "tenant1"},
    ]


class TestFirstMatch:
    """Tri-state answers to ownership lookups."""

    @pytest.mark.asyncio
    async def test_owned_row(self, rows):
        query = InMemoryOwnershipQuery(rows)
        assert await query.first_match(OwnershipLookup.owner("id", "doc1", "owner_id", "user1")) is True

    @pytest.mark.asyncio
    async def test_not_owned_row(self, rows):
        query = InMemoryOwnershipQuery(rows)
        assert await query.first_match(OwnershipLookup.owner("id", "doc2", "owner_id", "user1")) is False

    @pytest.mark.asyncio
    async def test_absent_row(self, rows):
        query = InMemoryOwnershipQuery(rows)
        assert await query.first_match(OwnershipLookup.owner("id", "nope", "owner_id", "user1")) is None

    @pytest.mark.asyncio
    async def test_null_owner_never_matches(self, rows):
        query = InMemoryOwnershipQuery(rows)
        assert await query.first_match(OwnershipLookup.owner("id", "doc4", "owner_id", None)) is False

    @pytest.mark.asyncio
    async def test_missing_field_never_matches(self, rows):
        query = InMemoryOwnershipQuery(rows)
        assert await query.first_match(OwnershipLookup.owner("id", "doc1", "creator_id", "user1")) is False

    @pytest.mark.asyncio
    async def test_owner_and_tenant(self, rows):
        query = InMemoryOwnershipQuery(rows)
        owned = OwnershipLookup.owner_and_tenant("id", "doc1", "owner_id", "user1", "tenant_id", "tenant1")
        wrong_tenant = OwnershipLookup.owner_and_tenant("id", "doc3", "owner_id", "user1", "tenant_id", "tenant1")

        assert await query.first_match(owned) is True
        assert await query.first_match(wrong_tenant) is False

    @pytest.mark.asyncio
    async def test_first_row_with_id_wins(self):
        query = InMemoryOwnershipQuery([
            {"id": "dup", "owner_id": "user2"},
            {"id": "dup", "owner_id": "user1"},
        ])
        assert await query.first_match(OwnershipLookup.owner("id", "dup", "owner_id", "user1")) is False

    @pytest.mark.asyncio
    async def test_object_rows(self):
        query = InMemoryOwnershipQuery([StringDocument(id="doc1", owner_id="user1")])
        assert await query.first_match(OwnershipLookup.owner("id", "doc1", "owner_id", "user1")) is True

    @pytest.mark.asyncio
    async def test_rows_are_read_live(self, rows):
        query = InMemoryOwnershipQuery(rows)
        rows.append({"id": "doc5", "owner_id": "user5"})

        assert await query.first_match(OwnershipLookup.owner("id", "doc5", "owner_id", "user5")) is True

    @pytest.mark.asyncio
    async def test_counts_lookups(self, rows):
        query = InMemoryOwnershipQuery(rows)
        await query.first_match(OwnershipLookup.owner("id", "doc1", "owner_id", "user1"))
        await query.first_match(OwnershipLookup.owner("id", "nope", "owner_id", "user1"))

        assert query.lookups_executed == 2

    def test_satisfies_protocol(self, rows):
        assert isinstance(InMemoryOwnershipQuery(rows), OwnershipQuery)


class TestScoping:
    """Scoping helpers narrow the visible rows."""

    @pytest.mark.asyncio
    async def test_where_owned_by(self, rows):
        scoped = InMemoryOwnershipQuery(rows).where_owned_by("user1", "owner_id")
        assert [row["id"] for row in await scoped.fetch_all()] == ["doc1", "doc3"]

    @pytest.mark.asyncio
    async def test_where_tenant(self, rows):
        scoped = InMemoryOwnershipQuery(rows).where_tenant("tenant1", "tenant_id")
        assert [row["id"] for row in await scoped.fetch_all()] == ["doc1", "doc2", "doc4"]

    @pytest.mark.asyncio
    async def test_scopes_compose(self, rows):
        scoped = (
            InMemoryOwnershipQuery(rows)
            .where_tenant("tenant1", "tenant_id")
            .where_owned_by("user1", "owner_id")
        )

        assert [row["id"] for row in await scoped.fetch_all()] == ["doc1"]
        assert scoped.filters == (("tenant_id", "tenant1"), ("owner_id", "user1"))

    @pytest.mark.asyncio
    async def test_scoping_returns_a_new_source(self, rows):
        base = InMemoryOwnershipQuery(rows)
        base.where_owned_by("user1", "owner_id")

        assert base.filters == ()
        assert len(await base.fetch_all()) == 4

    @pytest.mark.asyncio
    async def test_scoped_lookup_hides_rows_outside_scope(self, rows):
        scoped = InMemoryOwnershipQuery(rows).where_tenant("tenant2", "tenant_id")
        assert await scoped.first_match(OwnershipLookup.owner("id", "doc1", "owner_id", "user1")) is None

    def test_rejects_empty_field(self, rows):
        with pytest.raises(ValueError):
            InMemoryOwnershipQuery(rows).where_equals("", "value")

    def test_rejects_missing_rows(self):
        with pytest.raises(ValueError):
            InMemoryOwnershipQuery(None)

    def test_rejects_one_shot_iterators(self, rows):
        with pytest.raises(ValueError):
            InMemoryOwnershipQuery(row for row in rows)
        with pytest.raises(ValueError):
            InMemoryOwnershipQuery(iter(rows))

    @pytest.mark.asyncio
    async def test_tuple_rows_answer_repeatedly(self, rows):
        query = InMemoryOwnershipQuery(tuple(rows))
        lookup = OwnershipLookup.owner("id", "doc1", "owner_id", "user1")

        assert await query.first_match(lookup) is True
        assert await query.first_match(lookup) is True


class TestReadField:
    def test_mapping_and_object(self):
        assert read_field({"owner_id": "user1"}, "owner_id") == "user1"
        assert read_field(StringDocument(id="doc1", owner_id="user1"), "owner_id") == "user1"

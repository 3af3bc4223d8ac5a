"""
Tests for document store collection primitives against in-memory SQLite
"""

import pytest

from bookshelf.store import DocumentStore, StoreError, StoreNotInitializedError


@pytest.mark.integration
class TestSaveAndFind:
    @pytest.mark.asyncio
    async def test_save_assigns_id(self, store):
        author = await store.authors.save(name="Tolkien", age=81)

        assert author.id
        assert len(author.id) == 32
        assert author.name == "Tolkien"
        assert author.age == 81

    @pytest.mark.asyncio
    async def test_find_by_id(self, store):
        saved = await store.notes.save(title="Groceries", description="Milk")

        found = await store.notes.find_by_id(saved.id)

        assert found is not None
        assert found.id == saved.id
        assert found.title == "Groceries"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("record_id", [None, "", "0" * 32, "not-a-real-id"])
    async def test_find_by_id_miss_returns_none(self, store, record_id):
        await store.books.save(name="The Hobbit", genre="Fantasy", author_id="a1")

        assert await store.books.find_by_id(record_id) is None

    @pytest.mark.asyncio
    async def test_find_filters_and_keeps_insertion_order(self, store):
        first = await store.books.save(name="A", genre="Fantasy", author_id="x")
        await store.books.save(name="B", genre="Sci-Fi", author_id="y")
        third = await store.books.save(name="C", genre="Fantasy", author_id="x")

        everything = await store.books.find()
        by_author = await store.books.find(author_id="x")

        assert [b.name for b in everything] == ["A", "B", "C"]
        assert [b.id for b in by_author] == [first.id, third.id]

    @pytest.mark.asyncio
    async def test_find_unknown_field_raises(self, store):
        with pytest.raises(ValueError, match="Unknown field 'title'"):
            await store.authors.find(title="nope")


@pytest.mark.integration
class TestUpdateFirst:
    @pytest.mark.asyncio
    async def test_updates_only_first_match(self, store):
        first = await store.authors.save(name="Anon", age=30)
        second = await store.authors.save(name="Anon", age=40)

        updated = await store.authors.update_first({"name": "Anon"}, {"name": "Known", "age": 31})

        assert updated is not None
        assert updated.id == first.id
        assert updated.name == "Known"
        assert updated.age == 31

        untouched = await store.authors.find_by_id(second.id)
        assert untouched.name == "Anon"
        assert untouched.age == 40

    @pytest.mark.asyncio
    async def test_no_match_returns_none(self, store):
        await store.notes.save(title="A", description="a")

        result = await store.notes.update_first({"title": "Z"}, {"title": "B"})

        assert result is None
        assert [n.title for n in await store.notes.find()] == ["A"]

    @pytest.mark.asyncio
    async def test_unknown_value_field_raises(self, store):
        with pytest.raises(ValueError):
            await store.notes.update_first({"title": "A"}, {"body": "x"})


@pytest.mark.integration
class TestRemove:
    @pytest.mark.asyncio
    async def test_removes_every_match(self, store):
        first = await store.books.save(name="Dup", genre="A", author_id="x")
        await store.books.save(name="Dup", genre="B", author_id="y")
        keep = await store.books.save(name="Other", genre="C", author_id="z")

        result = await store.books.remove(name="Dup")

        assert result.deleted_count == 2
        assert result.first is not None
        assert result.first.id == first.id
        assert result.first.genre == "A"
        assert [b.id for b in await store.books.find()] == [keep.id]

    @pytest.mark.asyncio
    async def test_no_match(self, store):
        result = await store.authors.remove(name="Nobody")

        assert result.first is None
        assert result.deleted_count == 0


class TestStoreLifecycle:
    @pytest.mark.asyncio
    async def test_unopened_store_raises(self):
        store = DocumentStore("sqlite:///:memory:")

        assert not store.is_open
        with pytest.raises(StoreNotInitializedError):
            await store.authors.find()

    @pytest.mark.asyncio
    async def test_open_is_idempotent_and_close_resets(self):
        store = DocumentStore("sqlite:///:memory:")
        store.open()
        store.open()
        assert store.is_open

        await store.close()
        assert not store.is_open
        assert await store.ping() == (False, "Document store not opened")

    @pytest.mark.asyncio
    async def test_ping(self, store):
        assert await store.ping() == (True, None)

    @pytest.mark.asyncio
    async def test_driver_error_is_wrapped(self, store):
        with pytest.raises(StoreError) as exc_info:
            await store.authors.save(name="No Age")

        assert exc_info.value.collection == "authors"
        assert exc_info.value.operation == "save"

    @pytest.mark.asyncio
    async def test_missing_collections_surface_as_store_error(self):
        store = DocumentStore("sqlite:///:memory:")
        store.open()
        try:
            with pytest.raises(StoreError):
                await store.notes.find()
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_drop_collections_discards_records(self, store):
        await store.notes.save(title="Groceries", description="Milk")

        await store.drop_collections()
        with pytest.raises(StoreError):
            await store.notes.find()

        await store.create_collections()
        assert await store.notes.find() == []

    @pytest.mark.asyncio
    async def test_drop_collections_requires_open_store(self):
        store = DocumentStore("sqlite:///:memory:")

        with pytest.raises(StoreNotInitializedError):
            await store.drop_collections()

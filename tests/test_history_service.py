import json
from datetime import datetime, timedelta

import pytest

from config.settings import HISTORY_STORAGE_KEY
from models.history import FormEntryMetadata
from services.history_service import HistoryService
from services.storage import SQLiteKeyValueStore


class TickingClock:
    """Returns a strictly later time on every call."""

    def __init__(self):
        self.current = datetime(2024, 1, 1, 12, 0, 0)

    def __call__(self):
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def history(memory_store):
    """Provides an opened history service over an in-memory store."""
    service = HistoryService(memory_store, max_size=100, clock=TickingClock())
    service.open()
    yield service
    service.close()


def _code(index):
    return f"const Widget{index} = () => <div className=\"p-4\">{index}</div>;"


@pytest.mark.asyncio
async def test_add_assigns_name_version_and_metadata(history):
    """A new component gets its declared name, version 1 and derived metadata."""
    entry = await history.add(_code(1), "login form with email")

    assert entry.id.startswith("comp_")
    assert entry.name == "Widget1"
    assert entry.version == 1
    assert isinstance(entry.metadata, FormEntryMetadata)
    assert entry.metadata.framework == "react"
    assert "tailwind" in entry.metadata.tags


@pytest.mark.asyncio
async def test_add_without_declaration_uses_generated_name(history):
    entry = await history.add("<div>anonymous</div>", "something")
    assert entry.name == f"Component_{entry.id[5:13]}"


@pytest.mark.asyncio
async def test_duplicate_code_becomes_next_version(history):
    """Code equal after whitespace and case normalization is versioned, never replaced."""
    first = await history.add("const Hero = () => <h1>Hi</h1>;", "hero")
    second = await history.add("const  Hero = () =>\n  <H1>hi</H1>;", "hero again")
    third = await history.add("const Hero=()=><h1>Hi</h1>;", "hero once more")

    assert [first.version, second.version, third.version] == [1, 2, 3]
    assert {first.name, second.name, third.name} == {"Hero"}
    assert len({first.id, second.id, third.id}) == 3
    assert len(history.list_all()) == 3


@pytest.mark.asyncio
async def test_prune_removes_oldest_non_favorite(history):
    """With entry #1 a favorite, inserting a 101st entry evicts #2 and keeps #1."""
    entries = [await history.add(_code(index), f"component {index}") for index in range(1, 101)]
    await history.toggle_favorite(entries[0].id)

    newest = await history.add(_code(101), "component 101")

    ids = {entry.id for entry in history.list_all()}
    assert len(ids) == 100
    assert entries[0].id in ids
    assert entries[1].id not in ids
    assert entries[2].id in ids
    assert newest.id in ids


@pytest.mark.asyncio
async def test_favorites_may_exceed_cap(memory_store):
    """Favorites are never evicted, even when they alone exceed the cap."""
    service = HistoryService(memory_store, max_size=10, clock=TickingClock())
    service.open()
    for index in range(3):
        entry = await service.add(_code(index), "card")
        await service.toggle_favorite(entry.id)
    service.max_size = 2

    await service.add(_code(99), "card")

    assert len(service.list_all()) == 3
    assert all(entry.stats.favorite for entry in service.list_all())


@pytest.mark.asyncio
async def test_list_all_is_most_recent_first(history):
    first = await history.add(_code(1), "one")
    second = await history.add(_code(2), "two")
    assert [entry.id for entry in history.list_all()] == [second.id, first.id]


@pytest.mark.asyncio
async def test_get_tracks_usage(history):
    entry = await history.add(_code(1), "button")

    fetched = await history.get(entry.id)

    assert fetched.stats.usage_count == 1
    assert fetched.stats.last_used is not None
    assert await history.get("comp_missing") is None


@pytest.mark.asyncio
async def test_search_and_filters(history):
    await history.add(_code(1), "gradient button")
    await history.add(_code(2), "pricing card")
    favorite = await history.add(_code(3), "main navigation menu")
    await history.toggle_favorite(favorite.id)

    assert [entry.prompt for entry in history.search("GRADIENT")] == ["gradient button"]
    assert [entry.prompt for entry in history.by_category("cards")] == ["pricing card"]
    assert [entry.id for entry in history.favorites()] == [favorite.id]


@pytest.mark.asyncio
async def test_rate_validates_range(history):
    entry = await history.add(_code(1), "card")

    assert (await history.rate(entry.id, 4)).stats.rating == 4
    with pytest.raises(ValueError):
        await history.rate(entry.id, 6)
    assert await history.rate("comp_missing", 3) is None


@pytest.mark.asyncio
async def test_export_then_import_creates_new_version(history):
    """Importing an export goes through add, so it lands as the next version."""
    original = await history.add(_code(7), "login form")
    exported = history.export_entry(original.id)

    document = json.loads(exported)
    assert document["name"] == "Widget7"
    assert document["metadata"]["category"] == "forms"
    assert "exportedAt" in document

    imported = await history.import_entry(exported)

    assert imported.id != original.id
    assert imported.name == original.name
    assert imported.code == original.code
    assert imported.prompt == original.prompt
    assert imported.metadata == original.metadata
    assert imported.version == 2
    assert imported.metadata.category == "forms"


@pytest.mark.asyncio
async def test_malformed_import_returns_none(history):
    assert await history.import_entry("not json at all") is None
    assert await history.import_entry('{"name": "Only a name"}') is None
    assert history.list_all() == []


@pytest.mark.asyncio
async def test_delete_removes_entry_from_collections(history):
    keep = await history.add(_code(1), "card")
    drop = await history.add(_code(2), "card")
    collection = await history.create_collection("Cards", component_ids=[keep.id, drop.id, "comp_unknown"])
    assert collection.components == [keep.id, drop.id]

    assert await history.delete(drop.id) is True

    assert history.get_collection(collection.id).components == [keep.id]
    assert await history.delete(drop.id) is False


@pytest.mark.asyncio
async def test_collection_membership(history):
    entry = await history.add(_code(1), "card")
    collection = await history.create_collection("Empty")

    assert await history.add_to_collection(collection.id, entry.id) is True
    assert await history.add_to_collection(collection.id, entry.id) is False
    assert await history.add_to_collection(collection.id, "comp_missing") is False
    assert await history.remove_from_collection(collection.id, entry.id) is True
    assert await history.remove_from_collection(collection.id, entry.id) is False


@pytest.mark.asyncio
async def test_statistics(history):
    first = await history.add(_code(1), "gradient button")
    second = await history.add(_code(2), "gradient card")
    await history.rate(first.id, 5)
    await history.rate(second.id, 2)
    await history.get(second.id)
    await history.toggle_favorite(first.id)

    stats = history.statistics()

    assert stats.total_components == 2
    assert stats.favorite_count == 1
    assert stats.average_rating == 3.5
    assert stats.most_used_component.id == second.id
    assert stats.categories_breakdown == {"buttons": 1, "cards": 1}
    assert stats.popular_tags[0].tag == "gradient"
    assert stats.popular_tags[0].count == 2


@pytest.mark.asyncio
async def test_clear_history_empties_store(history, memory_store):
    await history.add(_code(1), "card")
    await history.create_collection("Cards")

    await history.clear_history()

    assert history.list_all() == []
    assert history.list_collections() == []
    assert memory_store.get(HISTORY_STORAGE_KEY) == []


@pytest.mark.asyncio
async def test_history_survives_reopen(tmp_path):
    """Entries and collections written to SQLite are loaded by a fresh service."""
    db_path = tmp_path / "history.db"
    writer = HistoryService(SQLiteKeyValueStore(db_path), clock=TickingClock())
    writer.open()
    entry = await writer.add(_code(1), "login form")
    await writer.toggle_favorite(entry.id)
    collection = await writer.create_collection("Forms", component_ids=[entry.id])
    writer.close()

    reader = HistoryService(SQLiteKeyValueStore(db_path))
    reader.open()
    try:
        [loaded] = reader.list_all()
        assert loaded.id == entry.id
        assert loaded.stats.favorite is True
        assert loaded.timestamp == entry.timestamp
        assert isinstance(loaded.metadata, FormEntryMetadata)
        assert reader.get_collection(collection.id).components == [entry.id]
    finally:
        reader.close()


def test_unreadable_storage_starts_empty(memory_store):
    """A corrupt payload is logged and replaced by an empty history."""
    memory_store.set(HISTORY_STORAGE_KEY, [{"bogus": True}])
    service = HistoryService(memory_store)

    service.open()

    assert service.list_all() == []

import pytest

from services.storage import MemoryKeyValueStore, SQLiteKeyValueStore


@pytest.fixture
def sqlite_store(tmp_path):
    """Provides an opened SQLite store in a temporary directory."""
    store = SQLiteKeyValueStore(tmp_path / "kv.db")
    store.open()
    yield store
    store.close()


def test_sqlite_set_get_overwrite_delete(sqlite_store):
    sqlite_store.set("history", [{"id": "comp_1"}])
    sqlite_store.set("history", [{"id": "comp_2"}])

    assert sqlite_store.get("history") == [{"id": "comp_2"}]

    sqlite_store.delete("history")
    assert sqlite_store.get("history") is None


def test_sqlite_requires_open(tmp_path):
    store = SQLiteKeyValueStore(tmp_path / "closed.db")
    with pytest.raises(RuntimeError):
        store.get("history")


def test_sqlite_values_persist_across_connections(tmp_path):
    path = tmp_path / "kv.db"
    writer = SQLiteKeyValueStore(path)
    writer.open()
    writer.set("collections", {"count": 2})
    writer.close()

    reader = SQLiteKeyValueStore(path)
    reader.open()
    assert reader.get("collections") == {"count": 2}
    reader.close()


def test_memory_store_returns_copies():
    """Mutating a value read back never changes what is stored."""
    store = MemoryKeyValueStore()
    store.set("history", [1, 2])

    value = store.get("history")
    value.append(3)

    assert store.get("history") == [1, 2]
    store.delete("history")
    assert store.get("history") is None

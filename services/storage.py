"""
Local key-value persistence for ComponentCraft
"""
import json
import logging
import sqlite3
from contextlib import closing
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)


class KeyValueStore:
    """Interface for the local store: JSON values under string keys."""

    def open(self) -> None:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryKeyValueStore(KeyValueStore):
    """In-process store. Values are kept serialized so reads never alias writes."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def open(self) -> None:
        pass

    def close(self) -> None:
        pass

    def get(self, key: str) -> Optional[Any]:
        raw = self._data.get(key)
        return json.loads(raw) if raw is not None else None

    def set(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class SQLiteKeyValueStore(KeyValueStore):
    """File-backed store with one row per key."""

    def __init__(self, db_path: Union[str, Path] = ":memory:"):
        self.db_path = str(db_path)
        self.conn: Optional[sqlite3.Connection] = None

    def open(self) -> None:
        if self.conn is not None:
            return
        self.conn = sqlite3.connect(self.db_path)
        self.conn.row_factory = sqlite3.Row
        with closing(self.conn.cursor()) as cur:
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
                """
            )
            self.conn.commit()
        logger.info(f"Opened key-value store at {self.db_path}")

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()
            self.conn = None
            logger.info(f"Closed key-value store at {self.db_path}")

    def _connection(self) -> sqlite3.Connection:
        if self.conn is None:
            raise RuntimeError("Key-value store is not open")
        return self.conn

    def get(self, key: str) -> Optional[Any]:
        conn = self._connection()
        with closing(conn.cursor()) as cur:
            cur.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = cur.fetchone()
        if row is None:
            return None
        return json.loads(row["value"])

    def set(self, key: str, value: Any) -> None:
        conn = self._connection()
        with closing(conn.cursor()) as cur:
            cur.execute(
                """
                INSERT INTO kv (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at
                """,
                (key, json.dumps(value), datetime.now().isoformat()),
            )
            conn.commit()

    def delete(self, key: str) -> None:
        conn = self._connection()
        with closing(conn.cursor()) as cur:
            cur.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()

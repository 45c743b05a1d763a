"""SQLite-backed key/value store holding one JSON document per collection."""

from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any

from ..errors import MalformedRecordError, StoreError
from .schema import ensure_schema

logger = logging.getLogger(__name__)


class KeyValueStore:
    """Manages the kv_store table."""

    def __init__(self, db_path: str | Path = "~/.config/frispy/pos.db") -> None:
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            try:
                self._conn = ensure_schema(self._db_path)
            except sqlite3.Error as e:
                logger.exception("Could not open store at %s", self._db_path)
                raise StoreError(f"cannot open store {self._db_path}: {e}") from e
        return self._conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def get_json(self, key: str) -> Any | None:
        """Return the decoded value for ``key``, or None if it is not set."""
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as e:
            logger.exception("Error reading %s", key)
            raise StoreError(f"cannot read {key}: {e}") from e
        if row is None:
            return None
        try:
            return json.loads(row["value"])
        except json.JSONDecodeError as e:
            raise MalformedRecordError(f"stored value for {key!r} is not JSON") from e

    def set_json(self, key: str, value: Any) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """INSERT INTO kv_store (key, value, updated_at)
                   VALUES (?, ?, datetime('now', 'localtime'))
                   ON CONFLICT(key) DO UPDATE SET
                       value = excluded.value,
                       updated_at = excluded.updated_at""",
                (key, json.dumps(value, ensure_ascii=False)),
            )
            conn.commit()
        except sqlite3.Error as e:
            logger.exception("Error saving %s", key)
            raise StoreError(f"cannot save {key}: {e}") from e

    def remove(self, *keys: str) -> None:
        conn = self._get_conn()
        try:
            conn.executemany(
                "DELETE FROM kv_store WHERE key = ?", [(k,) for k in keys]
            )
            conn.commit()
        except sqlite3.Error as e:
            logger.exception("Error removing %s", ", ".join(keys))
            raise StoreError(f"cannot remove {keys}: {e}") from e

    def keys(self) -> list[str]:
        conn = self._get_conn()
        rows = conn.execute("SELECT key FROM kv_store ORDER BY key").fetchall()
        return [r["key"] for r in rows]


class JSONCollection:
    """A list of records stored under a single key.

    Subclasses set ``key`` and implement ``_from_dict``. Records that fail
    to parse are skipped with a warning so one bad entry does not hide the
    rest of the collection.
    """

    key: str = ""

    def __init__(self, kv: KeyValueStore) -> None:
        self._kv = kv

    def _from_dict(self, data: dict):
        raise NotImplementedError

    def _default(self) -> list:
        return []

    def _load(self) -> list:
        raw = self._kv.get_json(self.key)
        if raw is None:
            return self._default()
        if not isinstance(raw, list):
            logger.warning("Ignoring %s: expected a list, got %s", self.key, type(raw).__name__)
            return self._default()

        records = []
        for entry in raw:
            try:
                records.append(self._from_dict(entry))
            except (MalformedRecordError, ValueError, TypeError) as e:
                record_id = entry.get("id") if isinstance(entry, dict) else None
                logger.warning("Skipping malformed %s record %r: %s", self.key, record_id, e)
        return records

    def _save(self, records: list) -> None:
        self._kv.set_json(self.key, [r.to_dict() for r in records])

    def is_stored(self) -> bool:
        return self._kv.get_json(self.key) is not None

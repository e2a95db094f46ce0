"""Durable local store for workspace collections (SQLite).

Each collection is a table of JSON records with an explicit position
column, so the order of a collection (including the lane order of
stacks) round-trips exactly. Writes are whole-collection replaces in a
single transaction. Every call opens its own connection, so methods can
be run from worker threads.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from stackman.constants import BACKGROUND_IMAGE, COLLECTIONS

logger = logging.getLogger(__name__)

ASSETS = "assets"


@contextmanager
def _connect(db_path: Path) -> Iterator[sqlite3.Connection]:
    """Open a connection, commit on success, roll back on error, always close."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    try:
        with conn:
            yield conn
    finally:
        conn.close()


def _check_collection(name: str) -> None:
    if name not in COLLECTIONS:
        raise ValueError(f"unknown collection: {name}")


class Store:
    """SQLite-backed store for tasks, stacks, history, archive and assets."""

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    def _init_schema(self) -> None:
        """Create tables if they don't exist."""
        with _connect(self.db_path) as conn:
            for name in COLLECTIONS:
                extra = "timestamp INTEGER NOT NULL DEFAULT 0," if name == "history" else ""
                conn.execute(
                    f"""
                    CREATE TABLE IF NOT EXISTS {name} (
                        id TEXT PRIMARY KEY,
                        position INTEGER NOT NULL,
                        {extra}
                        data TEXT NOT NULL
                    )
                    """
                )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_history_timestamp ON history(timestamp)")
            conn.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {ASSETS} (
                    key TEXT PRIMARY KEY,
                    kind TEXT NOT NULL,
                    data BLOB
                )
                """
            )

    # --- collections ---

    def clear(self, name: str) -> None:
        """Delete every record in a collection."""
        _check_collection(name)
        with _connect(self.db_path) as conn:
            conn.execute(f"DELETE FROM {name}")

    def _insert(self, conn: sqlite3.Connection, name: str, records: list[dict[str, Any]], start: int = 0) -> None:
        if name == "history":
            conn.executemany(
                "INSERT INTO history (id, position, timestamp, data) VALUES (?, ?, ?, ?)",
                [(r["id"], start + i, r.get("timestamp", 0), json.dumps(r)) for i, r in enumerate(records)],
            )
        else:
            conn.executemany(
                f"INSERT INTO {name} (id, position, data) VALUES (?, ?, ?)",
                [(r["id"], start + i, json.dumps(r)) for i, r in enumerate(records)],
            )

    def bulk_insert(self, name: str, records: list[dict[str, Any]]) -> None:
        """Append records after the existing ones, keeping their order.

        Raises sqlite3.IntegrityError if an id is already present.
        """
        _check_collection(name)
        with _connect(self.db_path) as conn:
            row = conn.execute(f"SELECT COALESCE(MAX(position) + 1, 0) FROM {name}").fetchone()
            self._insert(conn, name, records, start=row[0])

    def replace(self, name: str, records: list[dict[str, Any]]) -> None:
        """Clear a collection and insert records, as one transaction."""
        _check_collection(name)
        with _connect(self.db_path) as conn:
            conn.execute(f"DELETE FROM {name}")
            self._insert(conn, name, records)
        logger.debug("replaced %s with %d records", name, len(records))

    def to_array(self, name: str) -> list[dict[str, Any]]:
        """All records of a collection, in stored order."""
        _check_collection(name)
        with _connect(self.db_path) as conn:
            return self._read(conn, name)

    def _read(self, conn: sqlite3.Connection, name: str) -> list[dict[str, Any]]:
        rows = conn.execute(f"SELECT data FROM {name} ORDER BY position").fetchall()
        return [json.loads(row["data"]) for row in rows]

    def history_since(self, timestamp: int = 0) -> list[dict[str, Any]]:
        """History records at or after timestamp, oldest first."""
        with _connect(self.db_path) as conn:
            rows = conn.execute(
                "SELECT data FROM history WHERE timestamp >= ? ORDER BY timestamp, position",
                (timestamp,),
            ).fetchall()
        return [json.loads(row["data"]) for row in rows]

    # --- assets ---

    def put_asset(self, key: str, value: bytes | str) -> None:
        """Store an asset, overwriting any previous value for key."""
        kind = "text" if isinstance(value, str) else "binary"
        data = value if isinstance(value, str) else sqlite3.Binary(value)
        with _connect(self.db_path) as conn:
            conn.execute(
                f"INSERT OR REPLACE INTO {ASSETS} (key, kind, data) VALUES (?, ?, ?)",
                (key, kind, data),
            )

    def _get_asset(self, conn: sqlite3.Connection, key: str) -> bytes | str | None:
        row = conn.execute(f"SELECT kind, data FROM {ASSETS} WHERE key = ?", (key,)).fetchone()
        if row is None:
            return None
        if row["kind"] == "text":
            return row["data"]
        return bytes(row["data"])

    def get_asset(self, key: str) -> bytes | str | None:
        """Fetch an asset, or None if it isn't stored."""
        with _connect(self.db_path) as conn:
            return self._get_asset(conn, key)

    def delete_asset(self, key: str) -> None:
        """Remove an asset. Missing keys are ignored."""
        with _connect(self.db_path) as conn:
            conn.execute(f"DELETE FROM {ASSETS} WHERE key = ?", (key,))

    # --- whole store ---

    def load_all(self) -> dict[str, Any]:
        """Read every collection and the background image in one pass."""
        with _connect(self.db_path) as conn:
            data: dict[str, Any] = {name: self._read(conn, name) for name in COLLECTIONS}
            data[BACKGROUND_IMAGE] = self._get_asset(conn, BACKGROUND_IMAGE)
        return data

    def wipe(self) -> None:
        """Clear every table in one transaction, then delete the file."""
        with _connect(self.db_path) as conn:
            for name in (*COLLECTIONS, ASSETS):
                conn.execute(f"DELETE FROM {name}")
        for suffix in ("", "-journal", "-wal", "-shm"):
            Path(f"{self.db_path}{suffix}").unlink(missing_ok=True)
        logger.info("wiped store %s", self.db_path)

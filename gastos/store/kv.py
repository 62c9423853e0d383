"""Key-value storage with an in-memory fallback.

Values live in the sqlite ``kv`` table. When the database cannot be opened
or written, reads and writes go to a process-wide dictionary instead; none
of these functions ever raise.
"""

import logging
import sqlite3
from pathlib import Path

from gastos.store.schema import get_db_path

logger = logging.getLogger(__name__)

_MEMORY: dict[str, str] = {}


def _connect(db_path: Path | None = None) -> sqlite3.Connection:
    """Open an existing database for reading and writing.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Database connection.

    Raises:
        sqlite3.Error: If the database file is missing or cannot be opened.
    """
    if db_path is None:
        db_path = get_db_path()
    # mode=rw refuses to create a fresh, table-less file
    return sqlite3.connect(f"{db_path.expanduser().resolve().as_uri()}?mode=rw", uri=True)


def safe_get_item(key: str, db_path: Path | None = None) -> str | None:
    """Read a value.

    Args:
        key: Storage key.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Stored string, or None if the key is not set.
    """
    try:
        conn = _connect(db_path)
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        finally:
            conn.close()
        return row[0] if row else None
    except (sqlite3.Error, OSError) as e:
        logger.debug("Storage read of %s failed, using memory: %s", key, e)
    return _MEMORY.get(key)


def safe_set_item(key: str, value: str, db_path: Path | None = None) -> None:
    """Write a value.

    Args:
        key: Storage key.
        value: String to store.
        db_path: Path to the database file. If None, uses default location.
    """
    try:
        conn = _connect(db_path)
        try:
            with conn:
                conn.execute(
                    "INSERT INTO kv (key, value) VALUES (?, ?) ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    (key, value),
                )
        finally:
            conn.close()
        return
    except (sqlite3.Error, OSError) as e:
        logger.debug("Storage write of %s failed, using memory: %s", key, e)
    _MEMORY[key] = value


def safe_remove_item(key: str, db_path: Path | None = None) -> None:
    """Remove a value. Removing an unset key is a no-op.

    Args:
        key: Storage key.
        db_path: Path to the database file. If None, uses default location.
    """
    try:
        conn = _connect(db_path)
        try:
            with conn:
                conn.execute("DELETE FROM kv WHERE key = ?", (key,))
        finally:
            conn.close()
        return
    except (sqlite3.Error, OSError) as e:
        logger.debug("Storage delete of %s failed, using memory: %s", key, e)
    _MEMORY.pop(key, None)


def clear_memory() -> None:
    """Drop everything held by the in-memory fallback."""
    _MEMORY.clear()

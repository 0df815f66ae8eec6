"""SQLite-backed append-only store for submitted applications."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Union

from intake_bot.errors import InvalidApplicationError, PersistenceError
from intake_bot.models.application import Application

logger = logging.getLogger("intake_bot.database")

SCHEMA = """
    CREATE TABLE IF NOT EXISTS applications (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL,
        username TEXT,
        application_text TEXT NOT NULL CHECK (length(trim(application_text)) > 0),
        created_at TEXT DEFAULT CURRENT_TIMESTAMP
    );
"""


@contextmanager
def get_db(db_path: Union[str, Path]) -> Iterator[sqlite3.Connection]:
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


class SubmissionStore:
    """Durable log of applications.

    Every call opens its own connection and commits before returning, so
    the store can be used from a worker thread. Records are immutable once
    written; there is no update or delete.
    """

    def __init__(self, db_path: Union[str, Path]):
        self.db_path = Path(db_path)

    def initialize_schema(self) -> None:
        """Create the ``applications`` table if it does not exist yet."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            with get_db(self.db_path) as conn:
                conn.executescript(SCHEMA)
        except (OSError, sqlite3.Error) as exc:
            raise PersistenceError(f"Cannot initialise database at {self.db_path}: {exc}") from exc
        logger.info("SQLite table applications ready (%s)", self.db_path)

    def insert(self, user_id: int, username: Optional[str], text: str) -> int:
        """Append one application and return its id."""
        if user_id is None:
            raise InvalidApplicationError("user_id is required")
        if not text or not text.strip():
            raise InvalidApplicationError("application text must not be empty")

        try:
            with get_db(self.db_path) as conn:
                cursor = conn.execute(
                    "INSERT INTO applications (user_id, username, application_text) VALUES (?, ?, ?)",
                    (user_id, username or None, text),
                )
                record_id = cursor.lastrowid
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to store application for user {user_id}: {exc}") from exc

        logger.info("Stored application #%s from user %s", record_id, user_id)
        return record_id

    def list_all(self, limit: Optional[int] = None) -> List[Application]:
        """Return stored applications in insertion order."""
        query = "SELECT id, user_id, username, application_text, created_at FROM applications ORDER BY id"
        params: tuple = ()
        if limit is not None:
            # newest ``limit`` rows, still returned oldest first
            query = (
                "SELECT * FROM ("
                "SELECT id, user_id, username, application_text, created_at FROM applications "
                "ORDER BY id DESC LIMIT ?) ORDER BY id"
            )
            params = (limit,)
        try:
            with get_db(self.db_path) as conn:
                rows = conn.execute(query, params).fetchall()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to read applications: {exc}") from exc
        return [Application.from_row(row) for row in rows]

    def count(self) -> int:
        try:
            with get_db(self.db_path) as conn:
                (total,) = conn.execute("SELECT COUNT(*) FROM applications").fetchone()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to count applications: {exc}") from exc
        return total


__all__ = ["SubmissionStore", "get_db", "SCHEMA"]

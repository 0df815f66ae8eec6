"""
Application record model.
One row of the ``applications`` table, as read back from the store.
"""
from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class Application:
    """An immutable, already persisted service inquiry."""

    id: int
    user_id: int
    username: Optional[str]
    application_text: str
    created_at: Optional[datetime]

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Application":
        return cls(
            id=row["id"],
            user_id=row["user_id"],
            username=row["username"],
            application_text=row["application_text"],
            created_at=parse_timestamp(row["created_at"]),
        )

    @property
    def author(self) -> str:
        """Human readable author handle used in forwards and listings."""
        return f"@{self.username}" if self.username else f"user {self.user_id}"


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse SQLite's ``CURRENT_TIMESTAMP`` text (always UTC)."""
    if not value:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


__all__ = ["Application", "parse_timestamp"]

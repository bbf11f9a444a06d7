"""SQLite store mapping browser users to their FIO API keys.

Usage:
    db = UserDatabase(db_path=Path("data/users.db"))
    user = db.create_user("coolfeather", "fio-api-key")
    api_key = resolve_api_key(db, user.id, settings.fio_api_key)
"""

from __future__ import annotations

import logging
import sqlite3
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

logger = logging.getLogger(__name__)

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    username TEXT NOT NULL,
    fio_api_key TEXT NOT NULL DEFAULT '',
    created_at TEXT NOT NULL
)
"""


@dataclass(frozen=True)
class User:
    id: str
    username: str
    fio_api_key: str
    created_at: str


class UserDatabase:
    """Thin user/API-key lookup. One row per browser that saved a key."""

    def __init__(self, db_path: Path) -> None:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(
            str(db_path), timeout=5.0, check_same_thread=False,
        )
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.execute(_CREATE_TABLE)
        self._conn.commit()

    def close(self) -> None:
        """Close the SQLite connection."""
        self._conn.close()

    def create_user(self, username: str, fio_api_key: str = "") -> User:
        user = User(
            id=uuid.uuid4().hex,
            username=username,
            fio_api_key=fio_api_key,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        self._conn.execute(
            "INSERT INTO users (id, username, fio_api_key, created_at) "
            "VALUES (?, ?, ?, ?)",
            (user.id, user.username, user.fio_api_key, user.created_at),
        )
        self._conn.commit()
        logger.info("Created user %s (%s)", user.username, user.id)
        return user

    def get_user(self, user_id: str) -> User | None:
        row = self._conn.execute(
            "SELECT id, username, fio_api_key, created_at FROM users WHERE id = ?",
            (user_id,),
        ).fetchone()
        if row is None:
            return None
        return User(**dict(row))

    def set_api_key(self, user_id: str, username: str, fio_api_key: str) -> bool:
        """Update a user's FIO username and key. Returns False if no such user."""
        cursor = self._conn.execute(
            "UPDATE users SET username = ?, fio_api_key = ? WHERE id = ?",
            (username, fio_api_key, user_id),
        )
        self._conn.commit()
        return cursor.rowcount > 0

    def delete_user(self, user_id: str) -> None:
        self._conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
        self._conn.commit()


def resolve_api_key(
    db: UserDatabase, user_id: str | None, fallback: str = "",
) -> str | None:
    """The user's own key, else the server-wide fallback, else None."""
    if user_id:
        user = db.get_user(user_id)
        if user is not None and user.fio_api_key:
            return user.fio_api_key
    return fallback or None

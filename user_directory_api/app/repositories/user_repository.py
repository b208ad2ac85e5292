"""
Data access for the ``users`` table.

``UserRepository`` maps entity operations onto parameterised SQL.
Each method opens its own connection and closes it before returning,
so the repository holds no state besides the database location and
can be shared freely between concurrent requests.  Storage errors
(``sqlite3.Error``) are not caught here.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import List, Optional

from user_directory_api.app.core.db import get_connection
from user_directory_api.app.schemas.user import UserRead, UserWrite


@dataclass(frozen=True)
class SaveResult:
    """Outcome of :meth:`UserRepository.save`.

    ``created`` is ``True`` when a new row was inserted and ``False``
    when an existing row was overwritten.
    """

    user: UserRead
    created: bool


class UserRepository:
    """Storage gateway for :class:`UserRead` records."""

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.database_url = database_url

    def _connect(self) -> sqlite3.Connection:
        return get_connection(self.database_url)

    def find_all(self) -> List[UserRead]:
        """Return every user ordered by id."""
        conn = self._connect()
        try:
            rows = conn.execute(
                "SELECT id, name, email, priority FROM users ORDER BY id"
            ).fetchall()
            return [self._row_to_user(row) for row in rows]
        finally:
            conn.close()

    def find_by_id(self, user_id: int) -> Optional[UserRead]:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT id, name, email, priority FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
            if not row:
                return None
            return self._row_to_user(row)
        finally:
            conn.close()

    def find_by_priority(self, priority: int) -> List[UserRead]:
        conn = self._connect()
        try:
            rows = conn.execute(
                "SELECT id, name, email, priority FROM users WHERE priority = ?",
                (priority,),
            ).fetchall()
            return [self._row_to_user(row) for row in rows]
        finally:
            conn.close()

    def save(self, user: UserWrite) -> SaveResult:
        """Insert or overwrite a user.

        Without an id, or with an id that matches no row, a new row is
        inserted and the database assigns the id.  With the id of an
        existing row every column is overwritten, including ``None``
        values.  Insert and overwrite run in one transaction.
        """
        conn = self._connect()
        try:
            cursor = conn.cursor()
            created = True
            if user.id is not None:
                cursor.execute(
                    "UPDATE users SET name = ?, email = ?, priority = ? WHERE id = ?",
                    (user.name, user.email, user.priority, user.id),
                )
                created = cursor.rowcount == 0
            if created:
                cursor.execute(
                    "INSERT INTO users (name, email, priority) VALUES (?, ?, ?)",
                    (user.name, user.email, user.priority),
                )
                user_id = cursor.lastrowid
            else:
                user_id = user.id
            conn.commit()
            saved = UserRead(id=user_id, name=user.name, email=user.email, priority=user.priority)
            return SaveResult(user=saved, created=created)
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()

    def delete_by_id(self, user_id: int) -> int:
        """Delete the user with ``user_id`` and return the number of rows removed."""
        conn = self._connect()
        try:
            cursor = conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
            affected = cursor.rowcount
            conn.commit()
            return affected
        finally:
            conn.close()

    def count(self) -> int:
        conn = self._connect()
        try:
            row = conn.execute("SELECT COUNT(*) AS count FROM users").fetchone()
            return row["count"]
        finally:
            conn.close()

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> UserRead:
        """Convert a database row to a UserRead schema instance."""
        return UserRead(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            priority=row["priority"],
        )

"""
SQLite database integration and simple migration system.

This module provides functions for resolving the database location
(``get_database_path``), obtaining a connection (``get_connection``,
``get_cursor``) and preparing the schema on application start
(``init_db``).  It uses SQLite as a lightweight embedded database; to
switch to another DBMS you would replace connection logic and adapt
SQL syntax accordingly.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .config import settings


logger = logging.getLogger(__name__)


class SchemaError(RuntimeError):
    """Raised when the database schema does not match what the service expects."""


MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: users table
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL UNIQUE,
            name TEXT,
            email TEXT,
            priority INTEGER
        );
        """,
    ),
    # Migration 2: equality lookups by priority
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_users_priority ON users(priority);
        """,
    ),
]

# Columns the service reads and writes.  Checked in ``validate`` mode.
REQUIRED_COLUMNS = {"users": ("id", "name", "email", "priority")}


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the configured path is absolute, use it directly.  Otherwise
    resolve it relative to the project root.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


def get_connection(database_url: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    """
    conn = sqlite3.connect(get_database_path(database_url))
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(database_url: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor, commits and closes the connection on exit.

    The transaction is rolled back if the body raises.
    """
    conn = get_connection(database_url)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def current_schema_version(cursor: sqlite3.Cursor) -> int:
    row = cursor.execute(
        "SELECT name FROM sqlite_master WHERE type = 'table' AND name = 'migrations'"
    ).fetchone()
    if row is None:
        return 0
    row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
    return row["version"] if row and row["version"] is not None else 0


def _validate_schema(cursor: sqlite3.Cursor) -> None:
    for table, columns in REQUIRED_COLUMNS.items():
        present = {row["name"] for row in cursor.execute(f"PRAGMA table_info({table})")}
        if not present:
            raise SchemaError(f"Table {table!r} does not exist")
        missing = [column for column in columns if column not in present]
        if missing:
            raise SchemaError(f"Table {table!r} is missing columns: {', '.join(missing)}")


def init_db(database_url: Optional[str] = None, schema_mode: Optional[str] = None) -> int:
    """Initialise the database and apply pending migrations.

    In ``update`` mode the ``migrations`` table is created if it does not
    exist and every migration newer than the stored version is applied.
    In ``validate`` mode nothing is written; the ``users`` table must
    already exist with the expected columns, otherwise ``SchemaError`` is
    raised.  Returns the schema version after initialisation.
    """
    mode = schema_mode or settings.schema_mode
    if mode == "validate":
        # sqlite3.connect would create the file; a validate-only start writes nothing.
        db_path = get_database_path(database_url)
        if not os.path.exists(db_path):
            raise SchemaError(f"Database file {db_path} does not exist")
    with get_cursor(database_url) as cursor:
        if mode == "validate":
            _validate_schema(cursor)
            version = current_schema_version(cursor)
            logger.info("Schema validated at version %s", version)
            return version

        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        current_version = current_schema_version(cursor)

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied migration %s", version)
                current_version = version

        return current_version

"""
Tests for schema migrations, schema validation and configuration.
"""

import os

import pytest
from fastapi.testclient import TestClient

from user_directory_api.app.core.config import Settings
from user_directory_api.app.core.db import (
    MIGRATIONS,
    SchemaError,
    get_cursor,
    get_database_path,
    init_db,
)
from user_directory_api.app.main import create_app


def test_init_db_applies_all_migrations(database_url):
    version = init_db(database_url, "update")

    assert version == MIGRATIONS[-1][0]
    with get_cursor(database_url) as cursor:
        columns = [row["name"] for row in cursor.execute("PRAGMA table_info(users)")]
        indexes = [row["name"] for row in cursor.execute("PRAGMA index_list(users)")]
    assert columns == ["id", "name", "email", "priority"]
    assert "idx_users_priority" in indexes


def test_init_db_is_idempotent(database_url):
    init_db(database_url, "update")
    init_db(database_url, "update")

    with get_cursor(database_url) as cursor:
        versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations")]
    assert versions == [version for version, _ in MIGRATIONS]


def test_validate_mode_requires_existing_schema(database_url):
    with pytest.raises(SchemaError, match="does not exist"):
        init_db(database_url, "validate")

    assert not os.path.exists(database_url)


def test_validate_mode_requires_users_table(database_url):
    with get_cursor(database_url) as cursor:
        cursor.execute("CREATE TABLE other (id INTEGER PRIMARY KEY)")

    with pytest.raises(SchemaError, match="'users' does not exist"):
        init_db(database_url, "validate")


def test_validate_mode_accepts_migrated_schema(database_url):
    init_db(database_url, "update")

    assert init_db(database_url, "validate") == MIGRATIONS[-1][0]


def test_validate_mode_reports_missing_columns(database_url):
    with get_cursor(database_url) as cursor:
        cursor.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT)")

    with pytest.raises(SchemaError, match="email, priority"):
        init_db(database_url, "validate")


def test_get_cursor_rolls_back_on_error(database_url):
    init_db(database_url, "update")

    with pytest.raises(RuntimeError):
        with get_cursor(database_url) as cursor:
            cursor.execute("INSERT INTO users (name) VALUES ('A')")
            raise RuntimeError("boom")

    with get_cursor(database_url) as cursor:
        assert cursor.execute("SELECT COUNT(*) AS count FROM users").fetchone()["count"] == 0


def test_relative_database_path_is_resolved():
    path = get_database_path("relative.db")

    assert os.path.isabs(path)
    assert path.endswith("relative.db")


def test_absolute_database_path_is_kept(tmp_path):
    target = str(tmp_path / "abs.db")

    assert get_database_path(target) == target


def test_invalid_schema_mode_rejected():
    with pytest.raises(ValueError):
        Settings(schema_mode="create-drop")


def test_api_prefix(database_url):
    app = create_app(Settings(database_url=database_url, api_prefix="/api/v1"))

    with TestClient(app) as client:
        assert client.get("/api/v1/user").json() == []
        assert client.get("/user").status_code == 404

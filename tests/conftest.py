"""
Shared fixtures: a scratch SQLite file per test, the repository and
service built on it, and an application client whose startup has run
the migrations.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from user_directory_api.app.core.config import Settings
from user_directory_api.app.core.db import init_db
from user_directory_api.app.main import create_app
from user_directory_api.app.repositories.user_repository import UserRepository
from user_directory_api.app.services.user_service import UserService


@pytest.fixture
def database_url(tmp_path) -> str:
    return str(tmp_path / "users.db")


@pytest.fixture
def settings(database_url) -> Settings:
    return Settings(database_url=database_url, schema_mode="update", api_prefix="")


@pytest.fixture
def repository(database_url) -> UserRepository:
    init_db(database_url, "update")
    return UserRepository(database_url)


@pytest.fixture
def service(repository) -> UserService:
    return UserService(repository)


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client

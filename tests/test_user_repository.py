"""
Tests for UserRepository against a real SQLite file.
"""

import sqlite3

import pytest

from user_directory_api.app.repositories.user_repository import UserRepository
from user_directory_api.app.schemas.user import UserWrite


def test_find_all_empty(repository):
    assert repository.find_all() == []


def test_save_without_id_creates(repository):
    result = repository.save(UserWrite(name="A", email="a@x.com", priority=1))

    assert result.created is True
    assert result.user.id > 0

    fetched = repository.find_by_id(result.user.id)
    assert fetched is not None
    assert fetched.name == "A"
    assert fetched.email == "a@x.com"
    assert fetched.priority == 1


def test_ids_are_sequential_and_never_reused(repository):
    first = repository.save(UserWrite(name="first")).user
    repository.delete_by_id(first.id)
    second = repository.save(UserWrite(name="second")).user

    assert second.id > first.id


def test_save_with_existing_id_overwrites_every_field(repository):
    original = repository.save(UserWrite(name="A", email="a@x.com", priority=1)).user

    result = repository.save(UserWrite(id=original.id, name="B"))

    assert result.created is False
    assert result.user.id == original.id
    stored = repository.find_by_id(original.id)
    assert stored.name == "B"
    assert stored.email is None
    assert stored.priority is None
    assert repository.count() == 1


def test_save_with_unknown_id_inserts_with_generated_id(repository):
    existing = repository.save(UserWrite(name="A")).user

    result = repository.save(UserWrite(id=999, name="ghost"))

    assert result.created is True
    assert result.user.id == existing.id + 1
    assert repository.find_by_id(999) is None


def test_save_with_zero_id_creates(repository):
    result = repository.save(UserWrite(id=0, name="zero"))

    assert result.created is True
    assert result.user.id != 0


def test_find_by_id_missing(repository):
    assert repository.find_by_id(42) is None


def test_find_by_priority(repository):
    a = repository.save(UserWrite(name="A", priority=1)).user
    repository.save(UserWrite(name="B", priority=2))
    c = repository.save(UserWrite(name="C", priority=1)).user
    repository.save(UserWrite(name="D"))

    found = repository.find_by_priority(1)

    assert sorted(user.id for user in found) == [a.id, c.id]
    assert repository.find_by_priority(7) == []


def test_find_all_orders_by_id(repository):
    ids = [repository.save(UserWrite(name=name)).user.id for name in ("x", "y", "z")]

    assert [user.id for user in repository.find_all()] == ids


def test_delete_by_id(repository):
    user = repository.save(UserWrite(name="A")).user

    assert repository.delete_by_id(user.id) == 1
    assert repository.find_by_id(user.id) is None
    assert repository.find_all() == []


def test_delete_missing_is_noop(repository):
    assert repository.delete_by_id(123) == 0


def test_storage_errors_propagate(tmp_path):
    # No migrations applied, so the users table does not exist.
    repository = UserRepository(str(tmp_path / "empty.db"))

    with pytest.raises(sqlite3.OperationalError):
        repository.find_all()
    with pytest.raises(sqlite3.OperationalError):
        repository.save(UserWrite(name="A"))

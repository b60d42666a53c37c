"""Tests for the app_state key-value store."""

from storage.db import Database
from storage.repos import AppStateRepo


def test_init_schema_creates_app_state():
    db = Database(":memory:")
    db.init_schema()
    repo = AppStateRepo(db)
    repo.set("k", "v")
    assert repo.get("k") == "v"
    db.close()


def test_init_schema_is_repeatable(db, state_repo):
    state_repo.set("k", "v")
    db.init_schema()
    assert state_repo.get("k") == "v"


def test_get_missing(state_repo):
    assert state_repo.get("nope") is None
    assert state_repo.get("nope", "fallback") == "fallback"


def test_set_and_overwrite(state_repo):
    state_repo.set("k", "a")
    state_repo.set("k", "b")
    assert state_repo.get("k") == "b"


def test_delete(state_repo):
    state_repo.set("k", "a")
    state_repo.delete("k")
    assert state_repo.get("k") is None


def test_close_twice():
    db = Database(":memory:")
    db.close()
    db.close()

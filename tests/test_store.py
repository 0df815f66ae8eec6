import sqlite3
from datetime import timezone

import pytest

from intake_bot.database.db import SubmissionStore, get_db
from intake_bot.errors import InvalidApplicationError, PersistenceError


def test_initialize_schema_is_idempotent(tmp_path):
    store = SubmissionStore(tmp_path / "nested" / "data.db")
    store.initialize_schema()
    store.insert(1, "alice", "Need a website")
    store.initialize_schema()

    assert store.count() == 1


def test_insert_returns_increasing_ids(store):
    first = store.insert(1, "alice", "first")
    second = store.insert(1, "alice", "second")
    third = store.insert(2, None, "third")

    assert first < second < third
    assert [a.id for a in store.list_all()] == [first, second, third]


def test_list_all_reads_back_records(store):
    store.insert(5, None, "Need a bot")

    (application,) = store.list_all()
    assert application.user_id == 5
    assert application.username is None
    assert application.application_text == "Need a bot"
    assert application.created_at is not None
    assert application.created_at.tzinfo == timezone.utc
    assert application.author == "user 5"


def test_empty_username_is_stored_as_null(store):
    store.insert(5, "", "text")
    assert store.list_all()[0].username is None


def test_list_all_limit_keeps_newest_in_order(store):
    for body in ["a", "b", "c", "d"]:
        store.insert(1, "alice", body)

    assert [a.application_text for a in store.list_all(limit=2)] == ["c", "d"]


@pytest.mark.parametrize("text", ["", "   ", None])
def test_blank_text_is_rejected(store, text):
    with pytest.raises(InvalidApplicationError):
        store.insert(1, "alice", text)
    assert store.count() == 0


def test_missing_user_id_is_rejected(store):
    with pytest.raises(ValueError):
        store.insert(None, "alice", "text")


def test_table_check_rejects_blank_text(store):
    with pytest.raises(sqlite3.IntegrityError):
        with get_db(store.db_path) as conn:
            conn.execute("INSERT INTO applications (user_id, application_text) VALUES (1, '  ')")
    assert store.count() == 0


def test_insert_without_schema_raises_persistence_error(tmp_path):
    store = SubmissionStore(tmp_path / "missing.db")
    with pytest.raises(PersistenceError):
        store.insert(1, "alice", "text")


def test_unwritable_location_raises_persistence_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    store = SubmissionStore(blocker / "data.db")

    with pytest.raises(PersistenceError):
        store.initialize_schema()

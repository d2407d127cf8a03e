import sqlite3

import pytest

from app.store import TicketStore, TicketStoreError


def test_create_assigns_ids(store):
    a = store.create("Alice", "first")
    b = store.create("Bob", "second")
    assert a.id != b.id
    assert a.created_at <= b.created_at


def test_list_recent_newest_first(store):
    for i in range(3):
        store.create(f"user{i}", f"msg{i}")
    names = [t.name for t in store.list_recent()]
    assert names == ["user2", "user1", "user0"]


def test_list_orders_by_timestamp_not_id(store):
    with sqlite3.connect(store.path) as conn:
        conn.executemany(
            "INSERT INTO tickets (ts, name, message) VALUES (?,?,?)",
            [(200.0, "newer", "x"), (100.0, "older", "y"), (300.0, "newest", "z")],
        )
    assert [t.name for t in store.list_recent()] == ["newest", "newer", "older"]


def test_schema_created_lazily(tmp_path):
    s = TicketStore(str(tmp_path / "lazy.db"))
    t = s.create("Guest", "No message")
    assert s.list_recent()[0].id == t.id


def test_as_dict_renders_iso_timestamp(store):
    d = store.create("Alice", "hi").as_dict()
    assert set(d) == {"id", "name", "message", "createdAt"}
    assert d["createdAt"].endswith("+00:00")


def test_unusable_path_raises_store_error(tmp_path):
    s = TicketStore(str(tmp_path / "no-such-dir" / "tickets.db"))
    with pytest.raises(TicketStoreError):
        s.create("Alice", "hi")
    with pytest.raises(TicketStoreError):
        s.list_recent()

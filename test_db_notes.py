import sqlite3

import pytest

from db_notes import (
    count_notes,
    delete_note,
    get_note_id,
    open_database,
    query_all_notes,
    save_note,
    update_note,
)
from note_model import NOT_FOUND, Note


def test_buy_milk_scenario(conn):
    save_note(conn, Note("Buy milk", "2%", 1))
    notes = query_all_notes(conn)
    assert len(notes) == 1
    stored = notes[0]
    assert (stored.title, stored.content, stored.importance) == ("Buy milk", "2%", 1)
    assert stored.id != NOT_FOUND
    assert stored.id >= 1


def test_insert_assigns_id_to_instance(conn):
    note = Note("a", "b", 3)
    returned = save_note(conn, note)
    assert note.id == returned
    assert note.id == get_note_id(conn, "a")


def test_list_orders_by_importance_desc(conn):
    for i, importance in enumerate([2, 0, 4, 1]):
        save_note(conn, Note(f"note {i}", "", importance))
    assert [n.importance for n in query_all_notes(conn)] == [4, 2, 1, 0]


def test_save_twice_updates_single_row(conn):
    note = Note("Groceries", "eggs", 1)
    save_note(conn, note)
    first_id = note.id
    note.content = "eggs, flour"
    note.importance = 3
    save_note(conn, note)

    notes = query_all_notes(conn)
    assert len(notes) == 1
    assert notes[0].id == first_id
    assert notes[0].content == "eggs, flour"
    assert notes[0].importance == 3


def test_duplicate_title_is_rejected(conn):
    save_note(conn, Note("Same", "first"))
    with pytest.raises(sqlite3.IntegrityError):
        save_note(conn, Note("Same", "second"))
    assert [n.content for n in query_all_notes(conn) if n.title == "Same"] == ["first"]


def test_get_note_id_not_found(conn):
    assert get_note_id(conn, "missing") == NOT_FOUND


def test_delete_then_find(conn):
    note = Note("Call mom", "", 2)
    save_note(conn, note)
    assert delete_note(conn, note.id) == 1
    assert get_note_id(conn, "Call mom") == NOT_FOUND
    assert count_notes(conn) == 0


def test_delete_missing_id_is_noop(conn):
    save_note(conn, Note("keep"))
    assert delete_note(conn, 12345) == 0
    assert count_notes(conn) == 1


def test_update_note_reports_rows(conn):
    note = Note("x")
    save_note(conn, note)
    note.title = "y"
    assert update_note(conn, note) == 1
    assert get_note_id(conn, "y") == note.id
    assert update_note(conn, Note("z", id=999)) == 0


def test_ids_are_not_reused(conn):
    first = Note("first")
    save_note(conn, first)
    delete_note(conn, first.id)
    second = Note("second")
    save_note(conn, second)
    assert second.id > first.id


def test_file_database_persists(tmp_path):
    db_path = str(tmp_path / "nested" / "Note.db")
    c = open_database(db_path)
    save_note(c, Note("persisted", "yes", 4))
    c.close()

    c = open_database(db_path)
    try:
        notes = query_all_notes(c)
    finally:
        c.close()
    assert [(n.title, n.content, n.importance) for n in notes] == [("persisted", "yes", 4)]


def test_equal_importance_listed_by_id(conn):
    first = Note("first", "", 2)
    second = Note("second", "", 2)
    save_note(conn, first)
    save_note(conn, second)
    save_note(conn, Note("top", "", 3))

    notes = query_all_notes(conn)

    assert [n.title for n in notes] == ["top", "first", "second"]
    assert notes[1].id < notes[2].id

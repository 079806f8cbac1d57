import sqlite3

import pytest

from db_notes import get_note_id, query_all_notes, save_note
from note_model import NOT_FOUND, Note
from services.notes import DEFAULT_NOTES, NoteController, seed_default_notes
from services.state import Screen


@pytest.fixture
def controller(conn):
    c = NoteController(conn)
    c.start()
    return c


@pytest.fixture
def single_note_controller(conn):
    # A non-empty store is not seeded
    save_note(conn, Note("only", "one", 0))
    c = NoteController(conn)
    c.start()
    return c


def test_fresh_store_is_seeded(controller):
    notes = controller.state.notes
    assert len(notes) == len(DEFAULT_NOTES) == 3
    assert sorted(n.title for n in notes) == sorted(t for t, _, _ in DEFAULT_NOTES)
    assert [n.importance for n in notes] == [2, 1, 0]
    assert controller.state.screen is Screen.LIST


def test_existing_store_is_not_seeded(single_note_controller):
    assert [n.title for n in single_note_controller.state.notes] == ["only"]


def test_seed_skips_existing_titles(conn):
    save_note(conn, Note("Example", "mine", 3))
    assert seed_default_notes(conn) == 2
    assert len(query_all_notes(conn)) == 3


def test_new_note_save_inserts_and_returns_to_list(single_note_controller):
    c = single_note_controller
    c.new_note()
    c.edit_title("Buy milk")
    c.edit_content("2%")
    c.edit_importance(1)
    c.save()

    assert c.state.screen is Screen.LIST
    assert c.state.draft is None
    milk = [n for n in c.state.notes if n.title == "Buy milk"]
    assert len(milk) == 1
    assert (milk[0].content, milk[0].importance) == ("2%", 1)
    assert milk[0].id != NOT_FOUND


def test_edit_existing_updates_row(single_note_controller):
    c = single_note_controller
    original_id = c.state.notes[0].id
    c.open_note(0)
    c.edit_content("changed")
    c.edit_importance(4)
    c.save()

    rows = query_all_notes(c.connection)
    assert len(rows) == 1
    assert rows[0].id == original_id
    assert (rows[0].content, rows[0].importance) == ("changed", 4)


def test_back_discards_edits(single_note_controller):
    c = single_note_controller
    notes_before = c.state.notes
    c.open_note(0)
    c.edit_title("not saved")
    c.back()

    assert c.state.screen is Screen.LIST
    assert c.state.notes is notes_before
    assert c.state.notes[0].title == "only"
    assert get_note_id(c.connection, "not saved") == NOT_FOUND


def test_delete_uses_stored_id_after_title_edit(single_note_controller):
    c = single_note_controller
    c.open_note(0)
    c.edit_title("renamed but not saved")
    c.delete()

    assert c.state.screen is Screen.LIST
    assert c.state.notes == ()
    assert get_note_id(c.connection, "only") == NOT_FOUND


def test_delete_in_insert_mode_discards(single_note_controller):
    c = single_note_controller
    c.new_note()
    c.edit_title("draft")
    c.delete()

    assert c.state.screen is Screen.LIST
    assert [n.title for n in query_all_notes(c.connection)] == ["only"]


def test_duplicate_title_keeps_editor_open(single_note_controller):
    c = single_note_controller
    c.new_note()
    c.edit_title("only")
    with pytest.raises(sqlite3.IntegrityError):
        c.save()

    assert c.state.screen is Screen.EDIT
    assert c.state.draft.title == "only"
    assert c.state.draft.id == NOT_FOUND
    assert len(query_all_notes(c.connection)) == 1


def test_subscribers_see_every_state(single_note_controller):
    seen = []
    single_note_controller.subscribe(seen.append)
    single_note_controller.new_note()
    single_note_controller.back()
    assert [s.screen for s in seen] == [Screen.EDIT, Screen.LIST]


def test_reload_only_after_writes(single_note_controller, monkeypatch):
    c = single_note_controller
    calls = []
    monkeypatch.setattr(c, "reload", lambda: calls.append("reload"))
    c.open_note(0)
    c.edit_title("x")
    c.back()
    assert calls == []
    c.open_note(0)
    c.save()
    assert calls == ["reload"]


def test_actions_outside_editor_raise(controller):
    with pytest.raises(RuntimeError):
        controller.save()
    with pytest.raises(RuntimeError):
        controller.back()


def test_from_path_and_close(tmp_path):
    c = NoteController.from_path(str(tmp_path / "Note.db"))
    c.start()
    assert len(c.state.notes) == 3
    c.close()
    assert c.connection is None
    c.close()

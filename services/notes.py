"""
services.notes

NoteController owns the database connection and the AppState. UI code calls its
methods for every user action; each method performs the store side effect (if
any), reloads the note list once after a write, reduces the new state and
notifies subscribers so the main window can re-render.
"""

import logging
import sqlite3
from typing import Callable, List, Optional

from db_notes import (
    close_database,
    count_notes,
    delete_note,
    get_note_id,
    open_database,
    query_all_notes,
    save_note,
)
from note_model import NOT_FOUND, Note
from services.state import (
    AppState,
    CloseEditor,
    EditDraft,
    NewNote,
    NotesLoaded,
    OpenNote,
    Screen,
    reduce,
)

logger = logging.getLogger(__name__)

# Inserted one by one when the store is empty (first run).
DEFAULT_NOTES = (
    ("Tap an existing note to edit it", "Try it now", 1),
    ("Tap the + button to add a new note", "Start your to-do list", 2),
    ("Example", "What's for dinner tonight?", 0),
)


def default_notes() -> List[Note]:
    return [Note(title, content, importance) for title, content, importance in DEFAULT_NOTES]


def seed_default_notes(conn: sqlite3.Connection) -> int:
    """Insert the example notes, skipping titles that already exist. Returns the count inserted."""
    inserted = 0
    for note in default_notes():
        if get_note_id(conn, note.title) != NOT_FOUND:
            continue
        save_note(conn, note)
        inserted += 1
    logger.info("Seeded %d example notes", inserted)
    return inserted


class NoteController:
    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn
        self._state = AppState()
        self._subscribers: List[Callable[[AppState], None]] = []

    @classmethod
    def from_path(cls, db_path: str) -> "NoteController":
        return cls(open_database(db_path))

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def connection(self) -> Optional[sqlite3.Connection]:
        return self._conn

    def subscribe(self, callback: Callable[[AppState], None]):
        self._subscribers.append(callback)

    def _dispatch(self, action):
        self._state = reduce(self._state, action)
        for callback in list(self._subscribers):
            callback(self._state)

    # --- Lifecycle ---

    def start(self):
        """Load the notes, seeding the example notes on an empty store."""
        if count_notes(self._conn) == 0:
            seed_default_notes(self._conn)
        self.reload()

    def reload(self):
        self._dispatch(NotesLoaded(tuple(query_all_notes(self._conn))))

    def close(self):
        if self._conn is not None:
            close_database(self._conn)
            self._conn = None

    # --- List screen ---

    def open_note(self, index: int):
        self._dispatch(OpenNote(index))

    def new_note(self):
        self._dispatch(NewNote())

    # --- Edit screen ---

    def edit_title(self, title: str):
        self._dispatch(EditDraft(title=title))

    def edit_content(self, content: str):
        self._dispatch(EditDraft(content=content))

    def edit_importance(self, importance: int):
        self._dispatch(EditDraft(importance=importance))

    def save(self):
        """Insert or update the draft, then reload and return to the list.

        sqlite3.IntegrityError (duplicate title) propagates and leaves the
        editor open with the draft unchanged.
        """
        draft = self._require_draft()
        save_note(self._conn, draft.copy())
        self.reload()
        self._dispatch(CloseEditor())

    def delete(self):
        """Delete the stored note being edited; on a new note this only discards the draft."""
        draft = self._require_draft()
        if not self._state.is_inserting and draft.is_persisted:
            delete_note(self._conn, draft.id)
            self.reload()
        self._dispatch(CloseEditor())

    def back(self):
        self._require_draft()
        self._dispatch(CloseEditor())

    def _require_draft(self) -> Note:
        if self._state.screen is not Screen.EDIT or self._state.draft is None:
            raise RuntimeError("no note is being edited")
        return self._state.draft

"""
db_notes.py
Opens the notes database and provides the query/insert/update/delete helpers for
the note table. All helpers take the single long-lived connection owned by the
NoteController.
"""
import logging
import os
import sqlite3
from typing import List

from db_version import TABLE_NAME, migrate_database_if_needed
from note_model import NOT_FOUND, Note

logger = logging.getLogger(__name__)


def open_database(db_path: str) -> sqlite3.Connection:
    """Open (creating if needed) the database at db_path and migrate its schema."""
    if db_path != ":memory:":
        parent = os.path.dirname(os.path.abspath(db_path))
        os.makedirs(parent, exist_ok=True)
    conn = sqlite3.connect(db_path)
    migrate_database_if_needed(conn)
    logger.info("Opened notes database %s", db_path)
    return conn


def close_database(conn: sqlite3.Connection):
    conn.close()
    logger.info("Closed notes database")


def query_all_notes(conn: sqlite3.Connection) -> List[Note]:
    """Return every stored note, most important first."""
    cursor = conn.cursor()
    cursor.execute(
        f"SELECT _id, title, content, importance FROM {TABLE_NAME} ORDER BY importance DESC, _id"
    )
    rows = cursor.fetchall()
    cursor.close()
    return [Note(row[1], row[2], row[3], row[0]) for row in rows]


def count_notes(conn: sqlite3.Connection) -> int:
    cursor = conn.cursor()
    cursor.execute(f"SELECT COUNT(*) FROM {TABLE_NAME}")
    count = cursor.fetchone()[0]
    cursor.close()
    return int(count)


def get_note_id(conn: sqlite3.Connection, title: str) -> int:
    """Return the id of the note with exactly this title, or NOT_FOUND."""
    cursor = conn.cursor()
    cursor.execute(f"SELECT _id, title FROM {TABLE_NAME} WHERE title = ?", (title,))
    note_id = NOT_FOUND
    for row in cursor:
        note_id = row[0]
    cursor.close()
    return note_id


def save_note(conn: sqlite3.Connection, note: Note) -> int:
    """Insert a new note or update a stored one, returning its id.

    A note whose id is NOT_FOUND is inserted and receives the generated id.
    Inserting a duplicate title raises sqlite3.IntegrityError.
    """
    if note.id == NOT_FOUND:
        cur = conn.cursor()
        cur.execute(
            f"INSERT INTO {TABLE_NAME} (title, content, importance) VALUES (?, ?, ?)",
            (note.title, note.content, note.importance),
        )
        conn.commit()
        note.id = cur.lastrowid
        cur.close()
        logger.debug("insert id = %s title = %s", note.id, note.title)
    else:
        update_note(conn, note)
    return note.id


def update_note(conn: sqlite3.Connection, note: Note) -> int:
    logger.debug("update id = %s title = %s", note.id, note.title)
    cur = conn.cursor()
    cur.execute(
        f"UPDATE {TABLE_NAME} SET title = ?, content = ?, importance = ? WHERE _id = ?",
        (note.title, note.content, note.importance, note.id),
    )
    conn.commit()
    count = cur.rowcount
    cur.close()
    return count


def delete_note(conn: sqlite3.Connection, note_id: int) -> int:
    """Delete the note with this id; a missing id deletes nothing."""
    logger.debug("delete id = %s", note_id)
    cur = conn.cursor()
    cur.execute(f"DELETE FROM {TABLE_NAME} WHERE _id = ?", (note_id,))
    conn.commit()
    deleted_rows = cur.rowcount
    cur.close()
    return deleted_rows

"""
db_version.py
Get and set the SQLite schema version using PRAGMA user_version, and bring the
note table in line with DATABASE_VERSION when a database is opened.
"""
import logging
import sqlite3

logger = logging.getLogger(__name__)

DATABASE_VERSION = 1

TABLE_NAME = "note"

SQL_CREATE_ENTRIES = f"""
    CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
        _id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT UNIQUE,
        content TEXT,
        importance INTEGER
    )
"""

SQL_DELETE_ENTRIES = f"DROP TABLE IF EXISTS {TABLE_NAME}"


def get_db_version(conn: sqlite3.Connection) -> int:
    cursor = conn.cursor()
    cursor.execute('PRAGMA user_version')
    version = cursor.fetchone()[0]
    cursor.close()
    return version


def set_db_version(conn: sqlite3.Connection, version):
    conn.execute(f'PRAGMA user_version = {int(version)}')
    conn.commit()


def _create_schema(conn: sqlite3.Connection):
    conn.execute(SQL_CREATE_ENTRIES)
    conn.commit()


def _recreate_schema(conn: sqlite3.Connection):
    # Drops every stored note.
    conn.execute(SQL_DELETE_ENTRIES)
    conn.commit()
    _create_schema(conn)


def migrate_database_if_needed(conn: sqlite3.Connection, target_version: int = DATABASE_VERSION):
    """Create the note table on a fresh database, or rebuild it on a version change.

    There is only one schema version, so any stored version other than 0 or
    target_version (upgrade or downgrade) drops the table and recreates it empty.
    """
    current_version = get_db_version(conn)
    if current_version == target_version:
        # Table may have been removed by hand; recreate without touching data otherwise
        _create_schema(conn)
        return
    if current_version == 0:
        logger.info("Creating note table (schema version %d)", target_version)
        _create_schema(conn)
    else:
        direction = "downgrade" if current_version > target_version else "upgrade"
        logger.warning(
            "Schema %s from version %d to %d: dropping and recreating table %r, stored notes are lost",
            direction,
            current_version,
            target_version,
            TABLE_NAME,
        )
        _recreate_schema(conn)
    set_db_version(conn, target_version)

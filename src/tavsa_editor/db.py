"""Database connection, DDL, and low-level row helpers for tavsa-editor."""

from __future__ import annotations

import json
import sqlite3
from pathlib import Path

from tavsa_editor.exceptions import DatabaseError

SCHEMA_VERSION = "1.0"

WORDS_TABLE = "tavsa"

# ---------------------------------------------------------------------------
# META type adapter/converter
# ---------------------------------------------------------------------------

def _adapt_metadata(obj: dict) -> str:
    return json.dumps(obj)


def _convert_metadata(data: bytes) -> dict | None:
    if data is None or data == b"":
        return None
    return json.loads(data)


sqlite3.register_adapter(dict, _adapt_metadata)
sqlite3.register_converter("META", _convert_metadata)


# ---------------------------------------------------------------------------
# DDL statements
# ---------------------------------------------------------------------------

_DDL = """
-- Meta table
CREATE TABLE IF NOT EXISTS meta (
    key TEXT NOT NULL,
    value TEXT,
    UNIQUE (key)
);

-- Lexicon entries
CREATE TABLE IF NOT EXISTS tavsa (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    type TEXT NOT NULL CHECK( type IN ('noun', 'verb', 'amuini') ),
    word TEXT NOT NULL CHECK( word != '' ),
    definition TEXT NOT NULL CHECK( definition != '' ),
    etymology META
);
CREATE INDEX IF NOT EXISTS tavsa_word_index ON tavsa (word);
CREATE INDEX IF NOT EXISTS tavsa_type_index ON tavsa (type);
"""


def connect(db_path: str | Path = ":memory:") -> sqlite3.Connection:
    """Open a database connection with editor PRAGMA settings."""
    db_path_str = str(db_path)
    conn = sqlite3.connect(
        db_path_str,
        detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
    )
    if db_path_str != ":memory:":
        conn.execute("PRAGMA journal_mode = WAL")
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    """Initialize all tables if they don't exist. Set schema version."""
    conn.executescript(_DDL)
    conn.execute(
        "INSERT OR IGNORE INTO meta (key, value) VALUES ('schema_version', ?)",
        (SCHEMA_VERSION,),
    )
    conn.commit()


def check_schema_version(conn: sqlite3.Connection) -> None:
    """Verify the database schema version is compatible."""
    try:
        row = conn.execute(
            "SELECT value FROM meta WHERE key = 'schema_version'"
        ).fetchone()
    except sqlite3.OperationalError:
        # meta table doesn't exist - uninitialized DB
        return
    if row is None:
        return
    version = row[0]
    if version != SCHEMA_VERSION:
        raise DatabaseError(
            f"Incompatible schema version: {version} "
            f"(expected {SCHEMA_VERSION})"
        )


# ---------------------------------------------------------------------------
# Word row helpers
# ---------------------------------------------------------------------------

def get_word_row(conn: sqlite3.Connection, word_id: int) -> sqlite3.Row | None:
    """Get a full word row by ID."""
    return conn.execute(
        "SELECT * FROM tavsa WHERE id = ?",
        (word_id,),
    ).fetchone()


def get_max_id(conn: sqlite3.Connection) -> int | None:
    """Get the highest word ID ever assigned, or None for a fresh table.

    Deleted IDs still count, so the result never goes backwards.
    """
    row = conn.execute(
        "SELECT MAX("
        "COALESCE((SELECT MAX(id) FROM tavsa), 0), "
        "COALESCE((SELECT seq FROM sqlite_sequence WHERE name = ?), 0))",
        (WORDS_TABLE,),
    ).fetchone()
    return row[0] or None

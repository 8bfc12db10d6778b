"""SQLite-backed persistence of Tavsa words."""

from __future__ import annotations

import functools
import logging
import sqlite3
from collections.abc import Callable, Generator, Iterable
from contextlib import contextmanager
from pathlib import Path
from typing import Any, TypeVar

from tavsa_editor import db as _db
from tavsa_editor.exceptions import PersistenceError
from tavsa_editor.models import EtymologyModel, WordModel, WordType

logger = logging.getLogger(__name__)

_F = TypeVar("_F", bound=Callable[..., Any])


@contextmanager
def _backend_errors(operation: str) -> Generator[None, None, None]:
    """Re-raise sqlite errors as PersistenceError with the backend's message."""
    try:
        yield
    except sqlite3.Error as e:
        logger.error(f"{operation} failed: {e}")
        raise PersistenceError(str(e)) from e


def _modifies_db(method: _F) -> _F:
    """Decorator: wraps mutation methods in a transaction."""

    @functools.wraps(method)
    def wrapper(self: WordStore, *args: Any, **kwargs: Any) -> Any:
        with _backend_errors(method.__name__):
            with self._conn:
                return method(self, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


class WordStore:
    """Persistence of :class:`WordModel` entries over one connection.

    The store holds no state besides the connection; it is handed to the
    importer and editor explicitly rather than looked up globally.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    @classmethod
    def open(cls, db_path: str | Path = ":memory:") -> WordStore:
        """Connect to ``db_path``, creating the schema if needed."""
        with _backend_errors("open"):
            conn = _db.connect(db_path)
        try:
            with _backend_errors("open"):
                _db.check_schema_version(conn)
                _db.init_db(conn)
        except BaseException:
            conn.close()
            raise
        return cls(conn)

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __enter__(self) -> WordStore:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_all(self) -> list[WordModel]:
        """All words in ascending ID order."""
        with _backend_errors("list_all"):
            rows = self._conn.execute(
                "SELECT * FROM tavsa ORDER BY id ASC"
            ).fetchall()
        return [_row_to_word(r) for r in rows]

    def get(self, word_id: int) -> WordModel | None:
        with _backend_errors("get"):
            row = _db.get_word_row(self._conn, word_id)
        return _row_to_word(row) if row is not None else None

    def max_id(self) -> int | None:
        with _backend_errors("max_id"):
            return _db.get_max_id(self._conn)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @_modifies_db
    def insert(self, word: WordModel) -> int:
        """Insert one word; the store assigns the ID unless ``word.id`` is set."""
        cur = self._conn.execute(
            "INSERT INTO tavsa (id, type, word, definition, etymology) "
            "VALUES (?, ?, ?, ?, ?)",
            _word_params(word),
        )
        logger.debug(f"Inserted word {cur.lastrowid}: {word.word!r}")
        return cur.lastrowid

    @_modifies_db
    def insert_batch(self, words: Iterable[WordModel]) -> int:
        """Insert pre-numbered words in one transaction; returns the count."""
        params = [_word_params(w) for w in words]
        if not params:
            return 0
        self._conn.executemany(
            "INSERT INTO tavsa (id, type, word, definition, etymology) "
            "VALUES (?, ?, ?, ?, ?)",
            params,
        )
        logger.debug(f"Inserted batch of {len(params)} words")
        return len(params)

    @_modifies_db
    def delete(self, word_id: int) -> bool:
        """Delete a word. Returns False when no such word existed."""
        cur = self._conn.execute("DELETE FROM tavsa WHERE id = ?", (word_id,))
        return cur.rowcount > 0


# ---------------------------------------------------------------------------
# Row conversion
# ---------------------------------------------------------------------------

def _word_params(word: WordModel) -> tuple[Any, ...]:
    # dicts go through the META adapter registered in db.py
    etymology = None
    if word.etymology is not None:
        etymology = {
            "lexeme": word.etymology.lexeme,
            "subject": word.etymology.subject,
            "ci": word.etymology.ci,
            "modifiers": list(word.etymology.modifiers),
        }
    return (word.id, word.type.value, word.word, word.definition, etymology)


def _row_to_word(row: sqlite3.Row) -> WordModel:
    ety = row["etymology"]
    etymology = None
    if ety:
        etymology = EtymologyModel(
            lexeme=ety["lexeme"],
            subject=ety.get("subject"),
            ci=ety.get("ci"),
            modifiers=tuple(ety.get("modifiers") or ()),
        )
    return WordModel(
        id=row["id"],
        word=row["word"],
        definition=row["definition"],
        type=WordType(row["type"]),
        etymology=etymology,
    )

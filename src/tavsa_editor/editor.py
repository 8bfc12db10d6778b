"""TavsaEditor: main entry point for the tavsa-editor library."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tavsa_editor.etymology import decompose, derive_etymology
from tavsa_editor.importer import import_batch
from tavsa_editor.models import EtymologyModel, WordModel, WordType
from tavsa_editor.store import WordStore
from tavsa_editor.validator import validate_word

if TYPE_CHECKING:
    from tavsa_editor.config import EditorConfig

logger = logging.getLogger(__name__)


class TavsaEditor:
    """A programmatic API for editing the Tavsa lexicon."""

    def __init__(
        self,
        db_path: str | Path = ":memory:",
        *,
        strict_etymology: bool = False,
    ) -> None:
        self._db_path = str(db_path)
        self._store = WordStore.open(db_path)
        self._strict_etymology = strict_etymology

    @classmethod
    def from_config(cls, config: EditorConfig) -> TavsaEditor:
        return cls(config.database, strict_etymology=config.strict_etymology)

    @property
    def store(self) -> WordStore:
        return self._store

    def close(self) -> None:
        """Close the database connection."""
        self._store.close()

    def __enter__(self) -> TavsaEditor:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def add_word(self, word_type: str, word: str, definition: str) -> WordModel:
        """Validate and store a single entry, returning it with its new ID.

        Verbs are stored with their etymology; other classes without one.
        """
        resolved = validate_word(word_type, word, definition)
        etymology = derive_etymology(
            word, resolved, strict=self._strict_etymology
        )
        word_id = self._store.insert(WordModel(
            id=None,
            word=word,
            definition=definition,
            type=resolved,
            etymology=etymology,
        ))
        logger.info(f"Added {resolved.value} {word!r} as {word_id}")
        return self._store.get(word_id)

    def delete_word(self, word_id: int | str) -> bool:
        """Delete an entry. Deleting a missing ID is a no-op returning False.

        An ID that does not parse as an integer counts as missing.
        """
        coerced = _coerce_id(word_id)
        if coerced is None:
            logger.debug(f"No word with id {word_id!r} to delete")
            return False
        deleted = self._store.delete(coerced)
        if deleted:
            logger.info(f"Deleted word {coerced}")
        else:
            logger.debug(f"No word with id {coerced} to delete")
        return deleted

    def list_words(self) -> list[WordModel]:
        return self._store.list_all()

    def import_words(
        self,
        raw_text: str,
        word_type: WordType | str,
        *,
        strict: bool | None = None,
    ) -> list[WordModel]:
        if strict is None:
            strict = self._strict_etymology
        return import_batch(self._store, raw_text, word_type, strict=strict)

    def analyze(
        self, word: str, word_type: WordType | str = WordType.VERB
    ) -> EtymologyModel | None:
        return decompose(word, word_type)


def _coerce_id(word_id: Any) -> int | None:
    if isinstance(word_id, bool):
        return None
    if isinstance(word_id, int):
        return word_id
    try:
        return int(str(word_id).strip())
    except ValueError:
        return None
